import re
from typing import Any, List, Optional, TYPE_CHECKING
from loguru import logger

from .name_normalizer import NameNormalizer

if TYPE_CHECKING:
    from ...config.config_loader import ParserConfig


class LabeledListExtractor:
    """
    Элемент-функция: Достаёт списки с метками из свободного текста.

    Пример: 'Inventory: ["Lighter, Cigarettes"]' -> ["Lighter", "Cigarettes"]

    Поддерживает ParserConfig для набора меток.
    """

    def __init__(self, config: Optional['ParserConfig'] = None, name_normalizer: Optional[NameNormalizer] = None):
        """
        Args:
            config: Конфигурация парсера (метки списков)
            name_normalizer: Нормализатор имён (по умолчанию с тем же config)
        """
        if config is None:
            from ...config.config_loader import ParserConfig
            config = ParserConfig()
        self.name_normalizer = name_normalizer or NameNormalizer(config)

        labels = "|".join(
            r"\s+".join(re.escape(word) for word in label.split())
            for label in config.list_labels
        )
        # Метка, затем ":" или "[" (обязательно), опционально '"', затем тело до ']', '"' или конца строки
        self.label_pattern = re.compile(
            rf'\b(?:{labels})\b\s*(?::\s*\[?|\[)\s*"?([^\]"\n]+)"?\]?',
            re.IGNORECASE,
        )
        self.split_pattern = re.compile(r"[+&,;|/]")

    def extract(self, text: Any) -> List[str]:
        """
        ЦКП: Список нормализованных имён без повторов (порядок сохраняется).
        """
        if not isinstance(text, str) or not text:
            return []

        items: List[str] = []
        seen = set()

        for match in self.label_pattern.finditer(text):
            for piece in self.split_pattern.split(match.group(1)):
                piece = piece.strip()
                if len(piece) < 2:
                    continue
                normalized = self.name_normalizer.normalize(piece)
                if normalized and normalized.lower() not in seen:
                    seen.add(normalized.lower())
                    items.append(normalized)

        if items:
            logger.debug(f"[LabeledListExtractor] Извлечено: {items}")
        return items
