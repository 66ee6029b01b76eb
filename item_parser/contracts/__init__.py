"""
Контракты DTO парсера списков предметов.

Все контракты используют Pydantic v2 для валидации.
"""

from .item_dto import ItemRecord, ItemListDTO

__all__ = [
    "ItemRecord",
    "ItemListDTO",
]
