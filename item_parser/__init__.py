"""
Item Parser - разбор списков предметов из ответов LLM.

Функции модуля используют один общий экземпляр пайплайна с неизменяемой
конфигурацией, их можно вызывать из любых потоков.
"""

from typing import Any, Iterable, List, Optional

from .config import ConfigLoader, ParserConfig
from .contracts import ItemListDTO, ItemRecord
from .parsing import ItemListParser, ItemSerializer, PipelineResult
from .parsing.extraction import (
    LabeledListExtractor,
    NameNormalizer,
    QtyResult,
    QuantityParser,
    TagParser,
    TagResult,
)

_CONFIG = ConfigLoader.load()
_PARSER = ItemListParser(config=_CONFIG)
_SERIALIZER = ItemSerializer(separator=_CONFIG.default_separator)
_NAME_NORMALIZER = NameNormalizer(_CONFIG)
_LABELED_LIST_EXTRACTOR = LabeledListExtractor(_CONFIG, name_normalizer=_NAME_NORMALIZER)


def parse_items(raw: Any) -> List[str]:
    """
    Разбирает строку от LLM в список имён предметов.

    >>> parse_items("Leather Jacket (worn, vintage), Boots")
    ['Leather Jacket (worn, vintage)', 'Boots']
    """
    return _PARSER.parse(raw)


def parse_item_records(raw: Any) -> List[ItemRecord]:
    """Разбирает строку в записи с количеством и статусами."""
    return list(_PARSER.parse_records(raw).items)


def normalize_item_name(raw: Any) -> Optional[str]:
    """Строгая нормализация одного имени, вырезанного из прозы."""
    return _NAME_NORMALIZER.normalize(raw)


def serialize_items(names: Iterable[str], separator: Optional[str] = None) -> str:
    """Склеивает имена обратно в строку ("None" для пустого списка)."""
    return _SERIALIZER.serialize(names, separator)


def extract_quantity(item_text: Any) -> QtyResult:
    """Отделяет количество: 3x Potions -> name="Potions", quantity=3."""
    return _PARSER.quantity_parser.parse(item_text)


def extract_tags(item_text: Any) -> TagResult:
    """Статусы из последней скобочной группы: Armor (damaged, rusty) -> tags=["damaged", "rusty"]."""
    return _PARSER.tag_parser.parse(item_text)


def extract_labeled_items(text: Any) -> List[str]:
    """Списки с метками в прозе: 'Inventory: [Knife, Rope]'."""
    return _LABELED_LIST_EXTRACTOR.extract(text)


__all__ = [
    "parse_items",
    "parse_item_records",
    "normalize_item_name",
    "serialize_items",
    "extract_quantity",
    "extract_tags",
    "extract_labeled_items",
    "ItemListParser",
    "PipelineResult",
    "ItemSerializer",
    "QuantityParser",
    "QtyResult",
    "TagParser",
    "TagResult",
    "NameNormalizer",
    "LabeledListExtractor",
    "ConfigLoader",
    "ParserConfig",
    "ItemRecord",
    "ItemListDTO",
]
