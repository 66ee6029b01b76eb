import re
from typing import Any, Optional, TYPE_CHECKING
from loguru import logger

from ..s1_normalization.stage import WHITESPACE_PATTERN

if TYPE_CHECKING:
    from ...config.config_loader import ParserConfig


class NameNormalizer:
    """
    Элемент-функция: Строгая нормализация одного имени вне контекста списка.

    Используется для имён, вырезанных из прозы ("pulls out a rusty knife").
    В отличие от CleaningStage, капитализирует каждое слово.
    """

    def __init__(self, config: Optional['ParserConfig'] = None):
        """
        Args:
            config: Конфигурация парсера (стоп-лист, минимальная длина)
        """
        if config is None:
            from ...config.config_loader import ParserConfig
            config = ParserConfig()
        self.stopwords = config.stopword_set
        self.min_length = config.min_name_length

        self.leading_punct = re.compile(r'^["\'\[\(\{<]+')
        self.trailing_punct = re.compile(r'["\'\]\)\}>.,;:!?]+$')
        # Без ~~strike~~: в прозе не встречается
        self.markdown_patterns = (
            re.compile(r"\*\*(.+?)\*\*"),
            re.compile(r"\*(.+?)\*"),
            re.compile(r"`(.+?)`"),
        )

    def normalize(self, raw: Any) -> Optional[str]:
        """
        ЦКП: Имя в формате "Each Word Capitalized" или None.
        """
        if not isinstance(raw, str) or not raw:
            return None

        cleaned = raw.strip()
        cleaned = self.leading_punct.sub("", cleaned)
        cleaned = self.trailing_punct.sub("", cleaned)

        for pattern in self.markdown_patterns:
            cleaned = pattern.sub(r"\1", cleaned)

        cleaned = WHITESPACE_PATTERN.sub(" ", cleaned).strip()

        if len(cleaned) < self.min_length:
            return None

        if cleaned.lower() in self.stopwords:
            logger.trace(f"[NameNormalizer] Стоп-слово: '{cleaned}'")
            return None

        return " ".join(word[:1].upper() + word[1:].lower() for word in cleaned.split(" "))
