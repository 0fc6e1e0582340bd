"""Алгоритмы заполнения базового узора и их реестр.

Каждый алгоритм заполняет квадратный буфер `(size, size, 4)` на месте:
одна половина случайна (ровно одно обращение к генератору на клетку),
вторая половина зеркально копирует первую.

Цвет хранится как обычный (не предумноженный) RGBA: при alpha < 255 пиксели
PNG отличаются от исходной Go-версии, где `color.RGBA` считается предумноженным.
"""
from __future__ import annotations

from typing import Callable, Dict, Protocol

import numpy as np

from identicon.models.errors import InvalidConfiguration
from identicon.models.identicon_model import RGBA, Algorithm

BLACK: RGBA = (0, 0, 0, 255)
WHITE: RGBA = (255, 255, 255, 255)


class RandomSource(Protocol):
    def random(self) -> float: ...


FillFunction = Callable[[np.ndarray, int, RGBA, bool, RandomSource], None]


def background_color(dark_mode: bool) -> RGBA:
    return BLACK if dark_mode else WHITE


def _pick(rng: RandomSource, fill_color: RGBA, background: RGBA) -> RGBA:
    return fill_color if rng.random() < 0.5 else background


def fill_descend_mirror(pixels: np.ndarray, size: int, fill_color: RGBA, dark_mode: bool, rng: RandomSource) -> None:
    """Строки сверху вниз; строки ниже середины копируют отражённую строку.

    Результат симметричен относительно горизонтальной оси:
    `pixels[y, x] == pixels[size - 1 - y, x]`.
    """
    background = background_color(dark_mode)
    half = size // 2
    for y in range(size):
        for x in range(size):
            if y <= half:
                pixels[y, x] = _pick(rng, fill_color, background)
            else:
                pixels[y, x] = pixels[size - y - 1, x]


def fill_ascend_mirror(pixels: np.ndarray, size: int, fill_color: RGBA, dark_mode: bool, rng: RandomSource) -> None:
    """Строки снизу вверх; столбцы правее середины копируют отражённый столбец.

    Результат симметричен относительно вертикальной оси:
    `pixels[y, x] == pixels[y, size - 1 - x]`.
    """
    background = background_color(dark_mode)
    half = size // 2
    # только допустимые строки: size-1 .. 0
    for y in range(size - 1, -1, -1):
        for x in range(size):
            if x <= half:
                pixels[y, x] = _pick(rng, fill_color, background)
            else:
                pixels[y, x] = pixels[y, size - x - 1]


PATTERN_ALGORITHMS: Dict[Algorithm, FillFunction] = {
    Algorithm.DESCEND_MIRROR: fill_descend_mirror,
    Algorithm.ASCEND_MIRROR: fill_ascend_mirror,
}


class PatternService:
    def select(self, algorithm: Algorithm | int) -> FillFunction:
        try:
            return PATTERN_ALGORITHMS[Algorithm(algorithm)]
        except (KeyError, ValueError) as exc:
            raise InvalidConfiguration(f"Неизвестный алгоритм: {algorithm!r}") from exc

    def render(self, size: int, algorithm: Algorithm, fill_color: RGBA, dark_mode: bool, rng: RandomSource) -> np.ndarray:
        """Создаёт новый базовый узор `size x size` (RGBA, uint8)."""
        fill = self.select(algorithm)
        pixels = np.zeros((size, size, 4), dtype=np.uint8)
        fill(pixels, size, fill_color, dark_mode, rng)
        pixels.setflags(write=False)
        return pixels
