"""Иерархия ошибок генератора.

Все ошибки наследуются от `IdenticonError`, чтобы вызывающий код мог
перехватить их одним `except`.
"""
from __future__ import annotations


class IdenticonError(Exception):
    """Базовая ошибка генерации аватара."""


class InvalidConfiguration(IdenticonError, ValueError):
    """Недопустимые параметры запроса (алгоритм, размеры, режим вывода)."""


class InvalidDimension(InvalidConfiguration):
    """Размер итогового изображения должен быть положительным."""


class UnknownOutputMode(InvalidConfiguration):
    """Неизвестный режим вывода."""


class OutputWriteError(IdenticonError, OSError):
    """Не удалось создать каталог или записать файл."""


class EncodingError(IdenticonError):
    """Ошибка сериализации в PNG."""
