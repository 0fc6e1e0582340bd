"""Точка входа командной строки."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from identicon import config
from identicon.controllers.identicon_controller import IdenticonController
from identicon.models.errors import IdenticonError, InvalidConfiguration
from identicon.models.identicon_model import GenerationRequest, OutputMode

logger = logging.getLogger("identicon")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="identicon", description="GitHub-like identicon generator")
    parser.add_argument("value", help="строка, из которой строится аватар (например, имя пользователя)")
    parser.add_argument("-p", "--pattern-size", type=int, default=config.DEFAULT_PATTERN_SIZE,
                        help=f"сторона базового узора, нечётная (обычно {', '.join(map(str, config.PIXEL_PATTERNS))})")
    parser.add_argument("-a", "--algorithm", type=int, choices=(1, 2), default=config.DEFAULT_ALGORITHM,
                        help="1 - зеркально по вертикали, 2 - зеркально по горизонтали")
    parser.add_argument("-d", "--dimension", type=int, default=config.DEFAULT_DIMENSION,
                        help="сторона итогового PNG, px")
    parser.add_argument("--dark", action="store_true", help="чёрный фон")
    parser.add_argument("-o", "--output-dir", default=config.DEFAULT_OUTPUT_DIR)
    names = parser.add_mutually_exclusive_group()
    names.add_argument("--name", dest="file_name", help=f"имя файла (по умолчанию {config.DEFAULT_FILE_NAME})")
    names.add_argument("--unique-name", action="store_true", help="имя файла из хеша строки")
    parser.add_argument("--stdout", action="store_true", help="записать PNG в stdout вместо файла")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Разбирает аргументы, генерирует аватар и возвращает код выхода."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    controller = IdenticonController()
    file_name = args.file_name
    if args.unique_name:
        file_name = controller.unique_file_name(args.value)

    try:
        request = GenerationRequest(
            value=args.value,
            pattern_size=args.pattern_size,
            algorithm=args.algorithm,
            dark_mode=args.dark,
            dimension=args.dimension,
            output_mode=OutputMode.BUFFER if args.stdout else OutputMode.FILE,
            output_dir=args.output_dir,
            file_name=file_name,
        )
    except InvalidConfiguration as exc:
        parser.error(str(exc))

    try:
        result = controller.generate(request)
    except IdenticonError as exc:
        logger.error("Не удалось создать аватар: %s", exc)
        return 1

    if result.buffer is not None:
        sys.stdout.buffer.write(result.buffer)
        sys.stdout.buffer.flush()
        return 0

    logger.info("%s: %dx%d PNG", result.path, request.dimension, request.dimension)
    print(result.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
