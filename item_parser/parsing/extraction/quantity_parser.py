import re
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class QtyResult:
    name: str
    quantity: int = 1
    notation: Optional[str] = None

    def to_dict(self) -> dict:
        return {"name": self.name, "quantity": self.quantity}


class QuantityParser:
    """Элемент-функция: Отделяет количество от имени предмета."""

    def __init__(self):
        # Паттерн: 3x Potions, 3 x Potions
        self.prefix_pattern = re.compile(r'^(\d+)\s*x\s+(.+)$', re.IGNORECASE)
        # Паттерн: Potions (3), Potions (x3)
        self.suffix_pattern = re.compile(r'^(.+?)\s*\(x?(\d+)\)$', re.IGNORECASE)
        # Паттерн: 3 Potions (имя начинается с буквы)
        self.bare_pattern = re.compile(r'^(\d+)\s+([^\W\d_].*)$')

    def parse(self, text: Any) -> QtyResult:
        """
        ЦКП: Объект QtyResult, всегда (по умолчанию quantity=1).
        """
        if not isinstance(text, str) or not text.strip():
            return QtyResult(name="")

        name = text.strip()

        # Первый совпавший паттерн побеждает; ноль за количество не считаем
        match = self.prefix_pattern.match(name)
        if match and int(match.group(1)) > 0:
            return QtyResult(name=match.group(2).strip(), quantity=int(match.group(1)), notation="prefix")

        match = self.suffix_pattern.match(name)
        if match and int(match.group(2)) > 0:
            return QtyResult(name=match.group(1).strip(), quantity=int(match.group(2)), notation="suffix")

        match = self.bare_pattern.match(name)
        if match and int(match.group(1)) > 0:
            return QtyResult(name=match.group(2).strip(), quantity=int(match.group(1)), notation="bare")

        return QtyResult(name=name)
