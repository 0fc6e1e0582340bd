"""Кодирование в PNG и запись готовых аватаров на диск.

Принципы:
- SRP: класс отвечает только за сериализацию и ввод-вывод.
- Ошибки Pillow и ОС не проглатываются: они оборачиваются в ошибки генератора
  с сохранением исходной причины.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from identicon import config
from identicon.models.errors import EncodingError, OutputWriteError, UnknownOutputMode
from identicon.models.identicon_model import GenerationRequest, GenerationResult, OutputMode

logger = logging.getLogger(__name__)


class ImageService:
    def encode_png(self, pixels: np.ndarray) -> bytes:
        """Сериализует RGBA-буфер `(h, w, 4)` в байты PNG.

        Raises:
            EncodingError: если Pillow не смог собрать или сохранить изображение.
        """
        buf = io.BytesIO()
        try:
            image = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
            image.save(buf, format="PNG")
        except (OSError, ValueError, TypeError) as exc:
            raise EncodingError(f"Не удалось закодировать PNG: {exc}") from exc
        return buf.getvalue()

    def route(self, data: bytes, request: GenerationRequest) -> GenerationResult:
        """Отдаёт PNG-байты вызывающему или пишет их в файл, в зависимости от режима."""
        if request.output_mode is OutputMode.BUFFER:
            return GenerationResult(buffer=data)
        if request.output_mode is OutputMode.FILE:
            path = self.save(data, request.output_dir, request.file_name or config.DEFAULT_FILE_NAME)
            return GenerationResult(path=path)
        raise UnknownOutputMode(f"Неизвестный режим вывода: {request.output_mode!r}")

    def save(self, data: bytes, output_dir: str | Path, file_name: str) -> Path:
        """Создаёт каталог (вместе с родителями) и записывает в него файл.

        Raises:
            OutputWriteError: если каталог или файл не удалось создать.
        """
        directory = Path(output_dir)
        path = directory / file_name
        try:
            directory.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise OutputWriteError(f"Не удалось записать {path}: {exc}") from exc
        logger.info("Аватар сохранён: %s (%d байт)", path, len(data))
        return path
