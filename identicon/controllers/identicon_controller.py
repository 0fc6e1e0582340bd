"""Контроллер генерации: оркестрация сервисов в один вызов.

SOLID:
- SRP: класс только связывает этапы конвейера (хеш -> узор -> масштаб -> PNG -> вывод).
- DIP: зависит от сервисов как от ролей; их можно подменить в тестах.
Clean Code:
- Каждый этап - чистое преобразование, побочный эффект только у записи файла.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from identicon import config
from identicon.models.identicon_model import Algorithm, GenerationRequest, GenerationResult, OutputMode
from identicon.services.image_service import ImageService
from identicon.services.pattern_service import PatternService
from identicon.services.scale_service import ScaleService
from identicon.services.seed_service import SeedService

logger = logging.getLogger(__name__)


@dataclass
class IdenticonController:
    """Выполняет одну синхронную генерацию аватара.

    Состояние между вызовами не хранится: генератор случайных чисел
    создаётся заново из зерна каждой строки, поэтому экземпляр можно
    безопасно использовать из нескольких потоков.
    """
    _seed_service: SeedService = SeedService()
    _pattern_service: PatternService = PatternService()
    _scale_service: ScaleService = ScaleService()
    _image_service: ImageService = ImageService()

    def generate(self, request: GenerationRequest) -> GenerationResult:
        data = self.render_png(request)
        return self._image_service.route(data, request)

    def render_png(self, request: GenerationRequest) -> bytes:
        """Строит аватар и возвращает PNG-байты без обращения к диску."""
        identity = self._seed_service.derive(request.value)
        rng = self._seed_service.rng(identity)
        base = self._pattern_service.render(
            request.pattern_size, request.algorithm, identity.color, request.dark_mode, rng
        )
        scaled = self._scale_service.scale(base, request.dimension)
        logger.debug(
            "Узор %dx%d (%s) масштабирован до %dx%d",
            request.pattern_size, request.pattern_size, request.algorithm.name,
            request.dimension, request.dimension,
        )
        return self._image_service.encode_png(scaled)

    def unique_file_name(self, value: str) -> str:
        return self._seed_service.file_name_for(value)


def generate_identicon(
    value: str,
    *,
    pattern_size: int = config.DEFAULT_PATTERN_SIZE,
    algorithm: Algorithm | int = config.DEFAULT_ALGORITHM,
    dark_mode: bool = False,
    dimension: int = config.DEFAULT_DIMENSION,
    output_mode: OutputMode | str = config.DEFAULT_OUTPUT_MODE,
    output_dir: str | Path = config.DEFAULT_OUTPUT_DIR,
    file_name: Optional[str] = None,
) -> GenerationResult:
    """Создаёт аватар для строки `value`.

    Параметры проверяются до начала работы: при ошибке конфигурации
    (`InvalidConfiguration`) каталог не создаётся и файл не пишется.

    Returns:
        `GenerationResult` с путём к файлу (режим "file") или PNG-байтами (режим "buffer").
    """
    request = GenerationRequest(
        value=value,
        pattern_size=pattern_size,
        algorithm=algorithm,  # type: ignore[arg-type]
        dark_mode=dark_mode,
        dimension=dimension,
        output_mode=output_mode,  # type: ignore[arg-type]
        output_dir=Path(output_dir),
        file_name=file_name,
    )
    return IdenticonController().generate(request)
