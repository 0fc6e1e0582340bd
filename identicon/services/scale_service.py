"""Масштабирование базового узора методом ближайшего соседа."""
from __future__ import annotations

import numpy as np

from identicon.models.errors import InvalidDimension


class ScaleService:
    def scale(self, pixels: np.ndarray, dimension: int) -> np.ndarray:
        """
        Масштабирует квадратный буфер до `dimension x dimension` без интерполяции.

        Каждый выходной пиксель берёт значение исходного пикселя, в который
        попадает его центр: src = floor((dst + 0.5) * src_size / dimension).
        Уменьшение допустимо (с потерями), нулевой размер - нет.
        """
        if dimension <= 0:
            raise InvalidDimension(f"Размер изображения должен быть положительным: {dimension!r}")
        src_h, src_w = pixels.shape[:2]
        dst = np.arange(dimension, dtype=np.int64)
        rows = ((2 * dst + 1) * src_h) // (2 * dimension)
        cols = ((2 * dst + 1) * src_w) // (2 * dimension)
        return pixels[rows[:, None], cols[None, :]]
