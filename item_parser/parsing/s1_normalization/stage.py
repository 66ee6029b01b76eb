"""
Stage 1: Normalization

ЦКП: Одна строка от LLM, приведённая к виду, пригодному для разбиения.

Input: сырой текст (может быть None, не строкой, пустым)
Output: NormalizationResult(text) или пустой результат

Алгоритм:
1. Сентинел "None" / пустая строка -> пустой результат
2. Снятие обёрток [...] / {...} (в цикле, списки бывают обёрнуты несколько раз)
3. Снятие одной пары кавычек вокруг всего списка
4. Перевод строк -> запятые (вне скобок) или пробелы (внутри скобок)
5. Удаление markdown-разметки (**bold**, *italic*, `code`, ~~strike~~)
6. Схлопывание пробелов
"""

import re
from dataclasses import dataclass
from typing import Any, Optional
from loguru import logger

from ...config.settings import NONE_SENTINEL


BRACKET_PAIRS = (("[", "]"), ("{", "}"))
QUOTE_CHARS = ('"', "'")
NEWLINE_CHARS = ("\n", "\r")

# Порядок важен: **bold** раньше *italic*
MARKDOWN_PATTERNS = (
    re.compile(r"\*\*(.+?)\*\*"),
    re.compile(r"\*(.+?)\*"),
    re.compile(r"`(.+?)`"),
    re.compile(r"~~(.+?)~~"),
)
WHITESPACE_PATTERN = re.compile(r"\s+")


def is_none_sentinel(text: str) -> bool:
    """Пустая строка или "none" в любом регистре."""
    return text == "" or text.lower() == NONE_SENTINEL.lower()


@dataclass
class NormalizationResult:
    """
    Результат Stage 1: Normalization.

    ЦКП: Нормализованный текст или признак "предметов нет".
    """
    text: str = ""
    is_empty: bool = True
    unwrap_layers: int = 0
    newlines_converted: int = 0

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "is_empty": self.is_empty,
            "unwrap_layers": self.unwrap_layers,
            "newlines_converted": self.newlines_converted,
        }


class NormalizationStage:
    """
    Stage 1: Normalization.

    ЦКП: Текст без обёрток, разметки и переводов строк.
    """

    def process(self, raw: Any) -> NormalizationResult:
        """
        Нормализует сырой текст списка.

        Args:
            raw: Текст от LLM (любой тип; не-строка = пустой список)

        Returns:
            NormalizationResult: is_empty=True если предметов нет
        """
        if not isinstance(raw, str):
            return NormalizationResult()

        processed = raw.strip()
        if is_none_sentinel(processed):
            return NormalizationResult()

        unwrap_layers = 0

        # 1. Обёртки [Sword, Shield] / {Sword, Shield}, возможно многослойные
        while self._is_wrapped(processed, BRACKET_PAIRS):
            processed = processed[1:-1].strip()
            unwrap_layers += 1
            if is_none_sentinel(processed):
                logger.debug(f"[NormalizationStage] Пусто после снятия {unwrap_layers} скобок")
                return NormalizationResult(unwrap_layers=unwrap_layers)

        # 2. Одна пара кавычек вокруг всего списка
        if self._is_wrapped(processed, [(q, q) for q in QUOTE_CHARS]):
            processed = processed[1:-1].strip()
            unwrap_layers += 1
            if is_none_sentinel(processed):
                return NormalizationResult(unwrap_layers=unwrap_layers)

        # 3. Переводы строк с учётом глубины скобок
        processed, newlines_converted = self._convert_newlines(processed)

        # 4. Markdown
        processed = self.strip_markdown(processed)

        # 5. Пробелы
        processed = WHITESPACE_PATTERN.sub(" ", processed)

        return NormalizationResult(
            text=processed,
            is_empty=False,
            unwrap_layers=unwrap_layers,
            newlines_converted=newlines_converted,
        )

    @staticmethod
    def strip_markdown(text: str) -> str:
        """Разворачивает markdown-выделения в обычный текст."""
        for pattern in MARKDOWN_PATTERNS:
            text = pattern.sub(r"\1", text)
        return text

    def _is_wrapped(self, text: str, pairs) -> bool:
        return any(text.startswith(open_ch) and text.endswith(close_ch) for open_ch, close_ch in pairs)

    def _convert_newlines(self, text: str):
        """
        Перевод строки на глубине 0 -> запятая, внутри скобок -> пробел.

        Returns:
            (текст, число преобразованных переводов строк)
        """
        output = []
        depth = 0
        converted = 0

        for char in text:
            if char == "(":
                depth += 1
                output.append(char)
            elif char == ")":
                depth = max(0, depth - 1)
                output.append(char)
            elif char in NEWLINE_CHARS:
                converted += 1
                prev_char: Optional[str] = output[-1] if output else None
                if depth == 0:
                    # Не удваиваем разделитель
                    if prev_char and prev_char not in (",", "\n"):
                        output.append(",")
                elif prev_char != " ":
                    output.append(" ")
            else:
                output.append(char)

        return "".join(output), converted
