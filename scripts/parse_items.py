#!/usr/bin/env python3
"""
Точка входа для отладки разбора списков предметов.

Использование:
    # Разобрать текст из файла
    python scripts/parse_items.py path/to/llm_output.txt

    # Разобрать текст из stdin
    echo "Sword, Shield, 3x Potions" | python scripts/parse_items.py

    # Записи с количеством и статусами + полный трейс этапов
    python scripts/parse_items.py --records --trace path/to/llm_output.txt
"""

import sys
import argparse
import json
from pathlib import Path
from loguru import logger

from item_parser import ConfigLoader, ItemListParser, serialize_items


def read_input(source: str) -> str:
    """Читает текст из файла или stdin ("-")."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def build_output(item_parser: ItemListParser, text: str, records: bool = False, trace: bool = False) -> dict:
    """
    Собирает JSON-ответ.

    --records и --trace совместимы: в ответ попадают оба раздела.
    """
    if not (records or trace):
        items = item_parser.parse(text)
        return {"items": items, "serialized": serialize_items(items)}

    output = {}
    if records:
        output["records"] = item_parser.parse_records(text).model_dump()
    if trace:
        output["trace"] = item_parser.process(text).to_dict()
    return output


def main():
    parser = argparse.ArgumentParser(description="Разбор списка предметов из ответа LLM")
    parser.add_argument("source", nargs="?", default="-", help="Файл с текстом (по умолчанию stdin)")
    parser.add_argument("--config", type=Path, default=None, help="Путь к parser.yaml")
    parser.add_argument("--records", action="store_true", help="Выводить записи (имя, количество, статусы)")
    parser.add_argument("--trace", action="store_true", help="Выводить промежуточные результаты этапов")
    parser.add_argument("--log-level", default="WARNING", help="Уровень логирования loguru")
    args = parser.parse_args()

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=args.log_level.upper(),
    )

    try:
        text = read_input(args.source)
    except OSError as e:
        logger.error(f"Не удалось прочитать {args.source}: {e}")
        return 1

    item_parser = ItemListParser(config=ConfigLoader.load(args.config))

    output = build_output(item_parser, text, records=args.records, trace=args.trace)

    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
