"""Модели данных генератора.

Принципы:
- SRP: только структура данных и валидация параметров, без логики отрисовки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from identicon import config
from identicon.models.errors import InvalidConfiguration, InvalidDimension, UnknownOutputMode

RGBA = Tuple[int, int, int, int]


class Algorithm(enum.IntEnum):
    """Алгоритм заполнения базового узора."""
    DESCEND_MIRROR = 1  # верхняя половина случайна, нижняя зеркальна
    ASCEND_MIRROR = 2  # левая половина случайна, правая зеркальна


class OutputMode(str, enum.Enum):
    FILE = "file"
    BUFFER = "buffer"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _coerce_algorithm(value: Union[Algorithm, int, str]) -> Algorithm:
    # только целые и строки из цифр: 1.7 или True алгоритмом не считаются
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if not _is_int(value):
        raise InvalidConfiguration(f"Неизвестный алгоритм: {value!r}")
    try:
        return Algorithm(value)
    except ValueError as exc:
        raise InvalidConfiguration(f"Неизвестный алгоритм: {value!r}") from exc


def _coerce_output_mode(value: Union[OutputMode, str]) -> OutputMode:
    try:
        return OutputMode(value)
    except ValueError as exc:
        raise UnknownOutputMode(f"Неизвестный режим вывода: {value!r}") from exc


@dataclass(frozen=True)
class GenerationRequest:
    """Полный набор параметров одной генерации.

    Проверяется сразу при создании: ошибки конфигурации не должны
    всплывать посреди отрисовки или после создания каталога.

    Fields:
        value: Исходная строка (например, имя пользователя).
        pattern_size: Сторона базового узора в клетках, нечётное число.
        algorithm: Алгоритм заполнения.
        dark_mode: Чёрный фон вместо белого.
        dimension: Сторона итогового PNG, px.
        output_mode: Файл на диске или байты в памяти.
        output_dir: Каталог для режима `FILE`.
        file_name: Имя файла; `None` означает имя по умолчанию.
    """
    value: str
    pattern_size: int = config.DEFAULT_PATTERN_SIZE
    algorithm: Algorithm = config.DEFAULT_ALGORITHM  # type: ignore[assignment]
    dark_mode: bool = False
    dimension: int = config.DEFAULT_DIMENSION
    output_mode: OutputMode = config.DEFAULT_OUTPUT_MODE  # type: ignore[assignment]
    output_dir: Path = Path(config.DEFAULT_OUTPUT_DIR)
    file_name: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise InvalidConfiguration("Исходная строка не может быть пустой")
        if not _is_int(self.pattern_size) or self.pattern_size <= 0 or self.pattern_size % 2 == 0:
            raise InvalidConfiguration(
                f"Размер узора должен быть положительным нечётным числом: {self.pattern_size!r}"
            )
        if not _is_int(self.dimension) or self.dimension <= 0:
            raise InvalidDimension(f"Размер изображения должен быть положительным: {self.dimension!r}")
        if self.file_name is not None:
            name = self.file_name
            if not name or Path(name).name != name or not name.lower().endswith(".png"):
                raise InvalidConfiguration(f"Недопустимое имя файла: {name!r}")

        # frozen: приводим типы через object.__setattr__
        object.__setattr__(self, "algorithm", _coerce_algorithm(self.algorithm))
        object.__setattr__(self, "output_mode", _coerce_output_mode(self.output_mode))
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        object.__setattr__(self, "dark_mode", bool(self.dark_mode))


@dataclass(frozen=True)
class DerivedIdentity:
    """Значения, однозначно выведенные из SHA-256 исходной строки."""
    digest: bytes
    seed: int
    color: RGBA


@dataclass(frozen=True)
class GenerationResult:
    """Результат генерации: путь к файлу либо PNG-байты, но не оба сразу."""
    path: Optional[Path] = None
    buffer: Optional[bytes] = None

    def __post_init__(self) -> None:
        if (self.path is None) == (self.buffer is None):
            raise ValueError("Должно быть задано ровно одно из полей: path или buffer")
