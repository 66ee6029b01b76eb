"""
Item Serializer - Обратное преобразование списка имён в строку.

ЦКП: Каноническая строка для промпта или сохранённого состояния.
Пустой список -> сентинел "None".
"""

from typing import Any, Optional

from ..config.settings import DEFAULT_SEPARATOR, NONE_SENTINEL


class ItemSerializer:
    """
    Сериализатор списка предметов.

    ЦКП: "Sword, Shield" или "None".
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR):
        """
        Args:
            separator: Разделитель по умолчанию
        """
        self.separator = separator

    def serialize(self, names: Any, separator: Optional[str] = None) -> str:
        """
        Склеивает имена через разделитель.

        Args:
            names: Список имён (не-строки и пустые строки отбрасываются)
            separator: Разделитель (по умолчанию заданный в конструкторе)

        Returns:
            Строка списка или "None"
        """
        if separator is None:
            separator = self.separator

        if names is None or isinstance(names, (str, bytes, dict)):
            return NONE_SENTINEL

        try:
            candidates = list(names)
        except TypeError:
            return NONE_SENTINEL

        cleaned = [name.strip() for name in candidates if isinstance(name, str) and name.strip()]
        if not cleaned:
            return NONE_SENTINEL

        return separator.join(cleaned)
