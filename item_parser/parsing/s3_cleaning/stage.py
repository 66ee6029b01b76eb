"""
Stage 3: Item Cleaning

ЦКП: Чистые имена предметов из сырых кандидатов.

Input: SplitResult.candidates
Output: CleaningResult(items[]) - непустые имена, первая буква заглавная

Для каждого кандидата:
1. trim, отбрасываем пустые и "none"
2. снимаем маркеры списка по порядку: "- " / "• " / "* ", затем "1. ", затем "a) "
3. снимаем одну пару кавычек
4. повторная проверка на пустоту / "none"
5. заглавная только первая буква, остальное без изменений ("leather BOOTS" -> "Leather BOOTS")
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional
from loguru import logger

from ..s1_normalization.stage import is_none_sentinel, QUOTE_CHARS


# Применяются по порядку, каждый не более одного раза ("- 1. a) Rope" -> "Rope")
LIST_MARKER_PATTERNS = (
    re.compile(r"^[-•*]\s+"),
    re.compile(r"^\d+\.\s+"),
    re.compile(r"^[a-z]\)\s+", re.IGNORECASE),
)


@dataclass
class CleaningResult:
    """
    Результат Stage 3: Item Cleaning.

    ЦКП: Итоговый список имён предметов.
    """
    items: List[str] = field(default_factory=list)
    dropped_count: int = 0

    def to_dict(self) -> dict:
        return {
            "items": list(self.items),
            "items_count": len(self.items),
            "dropped_count": self.dropped_count,
        }


class CleaningStage:
    """
    Stage 3: Item Cleaning.

    ЦКП: Имя предмета или None для мусорного кандидата.
    """

    def process(self, candidates: List[str]) -> CleaningResult:
        """
        Чистит всех кандидатов, сохраняя порядок.

        Args:
            candidates: Сырые подстроки из Stage 2

        Returns:
            CleaningResult: Имена + число отброшенных кандидатов
        """
        result = CleaningResult()

        for candidate in candidates:
            cleaned = self.clean(candidate)
            if cleaned is None:
                result.dropped_count += 1
                continue
            result.items.append(cleaned)

        if result.dropped_count:
            logger.debug(f"[CleaningStage] Отброшено пустых/None кандидатов: {result.dropped_count}")

        return result

    def clean(self, candidate: str) -> Optional[str]:
        """
        Чистит одного кандидата.

        Args:
            candidate: Сырая подстрока

        Returns:
            Имя предмета или None
        """
        if not isinstance(candidate, str):
            return None

        cleaned = candidate.strip()
        if is_none_sentinel(cleaned):
            return None

        cleaned = self.strip_list_marker(cleaned)

        if any(cleaned.startswith(q) and cleaned.endswith(q) for q in QUOTE_CHARS):
            cleaned = cleaned[1:-1].strip()

        if is_none_sentinel(cleaned):
            return None

        return cleaned[0].upper() + cleaned[1:]

    @staticmethod
    def strip_list_marker(text: str) -> str:
        for pattern in LIST_MARKER_PATTERNS:
            text = pattern.sub("", text, count=1)
        return text
