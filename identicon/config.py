"""Значения по умолчанию для генерации аватаров.

Алгоритм и режим вывода заданы «сырыми» значениями: `GenerationRequest`
сам приводит их к `Algorithm` и `OutputMode`.
"""
from __future__ import annotations

PIXEL_PATTERNS = (5, 7, 9)

DEFAULT_PATTERN_SIZE = 5
DEFAULT_DIMENSION = 100
DEFAULT_ALGORITHM = 1
DEFAULT_OUTPUT_MODE = "file"
DEFAULT_OUTPUT_DIR = "."
DEFAULT_FILE_NAME = "avatar.png"
