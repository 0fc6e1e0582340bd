"""Вывод зерна генератора и цвета из исходной строки.

Принципы:
- SRP: только хеширование и производные от него значения.
- Никакого глобального состояния: генератор случайных чисел создаётся на каждый вызов.
"""
from __future__ import annotations

import hashlib
import logging

import numpy as np

from identicon.models.identicon_model import DerivedIdentity

logger = logging.getLogger(__name__)

_WINDOW = 8  # байт на канал: R, G, B, A


class SeedService:
    def derive(self, value: str) -> DerivedIdentity:
        """Считает SHA-256 строки и выводит из него зерно и цвет RGBA.

        Зерно: первые 4 байта дайджеста (big-endian, uint32).
        Канал цвета: сумма 8 подряд идущих байт по модулю 256.
        """
        digest = hashlib.sha256(value.encode("utf-8")).digest()
        seed = int.from_bytes(digest[:4], "big")
        r, g, b, a = (sum(digest[i:i + _WINDOW]) % 256 for i in range(0, 4 * _WINDOW, _WINDOW))
        logger.debug("seed=%d color=(%d, %d, %d, %d) for %r", seed, r, g, b, a, value)
        return DerivedIdentity(digest=digest, seed=seed, color=(r, g, b, a))

    def rng(self, identity: DerivedIdentity) -> np.random.Generator:
        """Новый генератор, привязанный к зерну конкретного вызова."""
        return np.random.default_rng(identity.seed)

    def file_name_for(self, value: str) -> str:
        """Имя файла, однозначно выведенное из строки (без коллизий между пользователями)."""
        return f"{hashlib.sha256(value.encode('utf-8')).hexdigest()[:16]}.png"
