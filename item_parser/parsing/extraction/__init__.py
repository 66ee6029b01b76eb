"""
Extraction модуль: атомарные элементы разбора одного предмета.

Экспортирует парсеры количества и статусов, нормализатор имён
и извлекатель списков с метками.
"""

from .quantity_parser import QuantityParser, QtyResult
from .tag_parser import TagParser, TagResult
from .name_normalizer import NameNormalizer
from .labeled_list_extractor import LabeledListExtractor

__all__ = [
    "QuantityParser",
    "QtyResult",
    "TagParser",
    "TagResult",
    "NameNormalizer",
    "LabeledListExtractor",
]
