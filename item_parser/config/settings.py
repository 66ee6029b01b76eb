"""
Настройки парсера списков предметов.

Значения по умолчанию можно переопределить через переменные окружения
(ITEM_PARSER_CONFIG, ITEM_PARSER_MAX_INPUT_LENGTH).
"""

import os
from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
CONFIG_DIR = Path(__file__).parent

# YAML со словарями (стоп-слова, метки списков)
DEFAULT_CONFIG_PATH = Path(
    os.getenv("ITEM_PARSER_CONFIG", str(CONFIG_DIR / "parser.yaml"))
)

# =============================================================================
# СЕНТИНЕЛЫ И РАЗДЕЛИТЕЛИ
# =============================================================================
# Каноническая строка "пустого списка" (и на входе, и на выходе сериализатора)
NONE_SENTINEL = "None"

# Разделитель сериализатора по умолчанию
DEFAULT_SEPARATOR = ", "

# =============================================================================
# НАСТРОЙКИ НОРМАЛИЗАЦИИ ИМЁН
# =============================================================================
# Минимальная длина имени для normalize_item_name
MIN_NAME_LENGTH = 2

# Стоп-лист на случай, если parser.yaml недоступен
FALLBACK_STOPWORDS = (
    "the", "a", "an", "some", "his", "her", "their", "your", "my",
    "it", "this", "that", "these", "those",
    "and", "or", "but", "with", "from", "to", "for",
)

# Метки списков в прозе ("Inventory: [...]")
FALLBACK_LIST_LABELS = (
    "Inventory", "Items", "Carrying", "Possessions", "Belongings", "On Person",
)

# =============================================================================
# ОГРАНИЧЕНИЕ ВХОДА
# =============================================================================
def _read_max_input_length():
    raw = os.getenv("ITEM_PARSER_MAX_INPUT_LENGTH", "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


# None = без ограничения
MAX_INPUT_LENGTH = _read_max_input_length()
