"""
Stage 2: Depth-Aware Splitting

ЦКП: Кандидаты в предметы, разрезанные только по "настоящим" разделителям.

Input: NormalizationResult.text
Output: SplitResult(candidates[]) - сырые подстроки, ещё не очищенные

Один проход слева направо, счётчик глубины скобок + буфер текущего предмета:
- "(" / ")" меняют глубину (не ниже 0) и остаются в тексте
- "," "+" "|" на глубине 0 завершают предмет, кроме десятичной запятой (1,000)
- "&" на глубине 0 завершает предмет только с пробелами с обеих сторон
"""

from dataclasses import dataclass, field
from typing import List
from loguru import logger


SEPARATOR_CHARS = frozenset(",+|")
AMPERSAND = "&"
ASCII_DIGITS = frozenset("0123456789")


@dataclass
class SplitResult:
    """
    Результат Stage 2: Splitting.

    ЦКП: Список сырых кандидатов в порядке появления.
    """
    candidates: List[str] = field(default_factory=list)
    decimal_commas: int = 0
    max_depth: int = 0
    unbalanced: bool = False

    def to_dict(self) -> dict:
        return {
            "candidates": list(self.candidates),
            "candidates_count": len(self.candidates),
            "decimal_commas": self.decimal_commas,
            "max_depth": self.max_depth,
            "unbalanced": self.unbalanced,
        }


class SplittingStage:
    """
    Stage 2: Depth-Aware Splitting.

    ЦКП: Разбиение строки без ложных разрезов внутри скобок и чисел.
    """

    def process(self, text: str) -> SplitResult:
        """
        Разбивает нормализованный текст на кандидатов.

        Args:
            text: Результат Stage 1

        Returns:
            SplitResult: Кандидаты (включая пустые сегменты, их отбросит Stage 3)
        """
        result = SplitResult()
        if not text:
            return result

        current: List[str] = []
        depth = 0
        last = len(text) - 1

        for i, char in enumerate(text):
            if char == "(":
                depth += 1
                result.max_depth = max(result.max_depth, depth)
                current.append(char)
            elif char == ")":
                depth = max(0, depth - 1)
                current.append(char)
            elif char in SEPARATOR_CHARS and depth == 0:
                prev_char = text[i - 1] if i > 0 else ""
                next_char = text[i + 1] if i < last else ""
                if char == "," and self.is_decimal_comma(prev_char, next_char):
                    result.decimal_commas += 1
                    current.append(char)
                else:
                    result.candidates.append("".join(current))
                    current = []
            elif char == AMPERSAND and depth == 0:
                prev_char = text[i - 1] if i > 0 else ""
                next_char = text[i + 1] if i < last else ""
                # "Sword & Shield" -> два предмета, "Mom&Dad" -> один
                if prev_char == " " and next_char == " ":
                    result.candidates.append("".join(current))
                    current = []
                else:
                    current.append(char)
            else:
                current.append(char)

        result.candidates.append("".join(current))

        if depth > 0:
            result.unbalanced = True
            logger.warning(f"[SplittingStage] Незакрытые скобки (глубина {depth}) в конце строки")

        logger.debug(
            f"[SplittingStage] {len(result.candidates)} кандидатов, "
            f"десятичных запятых: {result.decimal_commas}"
        )
        return result

    @staticmethod
    def is_decimal_comma(prev_char: str, next_char: str) -> bool:
        """Запятая между двумя ASCII-цифрами (1,000) не разделитель."""
        return prev_char in ASCII_DIGITS and next_char in ASCII_DIGITS
