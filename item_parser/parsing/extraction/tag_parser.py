from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple


@dataclass
class TagResult:
    name: str
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"name": self.name, "tags": list(self.tags)}


class TagParser:
    """
    Элемент-функция: Извлекает статусы из последней скобочной группы.

    "Armor (damaged, rusty)" -> name="Armor", tags=["damaged", "rusty"]
    Вложенные скобки внутри группы не разбираются.
    """

    def parse(self, text: Any) -> TagResult:
        """
        ЦКП: Объект TagResult (tags пустой, если группы в конце нет).
        """
        if not isinstance(text, str) or not text.strip():
            return TagResult(name="")

        stripped = text.strip()
        group = self._find_trailing_group(stripped)
        if group is None:
            return TagResult(name=stripped)

        name, body = group
        tags = [piece.strip().lower() for piece in body.split(",")]
        return TagResult(name=name, tags=[tag for tag in tags if tag])

    def _find_trailing_group(self, text: str) -> Optional[Tuple[str, str]]:
        """
        Ищет парную "(" для последней ")" сканированием справа налево.

        Returns:
            (имя, тело группы) или None
        """
        if not text.endswith(")"):
            return None

        depth = 0
        for i in range(len(text) - 1, -1, -1):
            char = text[i]
            if char == ")":
                depth += 1
            elif char == "(":
                depth -= 1
                if depth == 0:
                    name = text[:i].strip()
                    body = text[i + 1:-1]
                    if not name or not body:
                        return None
                    return name, body

        # Непарная ")"
        return None
