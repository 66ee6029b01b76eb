"""
Config Loader для парсера списков предметов.

ЦКП: Неизменяемая модель ParserConfig, собранная из parser.yaml и settings.

Архитектурный принцип:
- YAML хранит словари (стоп-слова, метки списков)
- settings хранит пути и значения по умолчанию
- ParserConfig заморожен: один экземпляр можно делить между потоками
"""

from pathlib import Path
from typing import Optional, Tuple

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from . import settings
from ..domain.exceptions import ParsingConfigurationError


class ParserConfig(BaseModel):
    """Конфигурация парсера."""

    stopwords: Tuple[str, ...] = Field(
        default=settings.FALLBACK_STOPWORDS,
        description="Слова, которые не могут быть самостоятельным предметом",
    )
    list_labels: Tuple[str, ...] = Field(
        default=settings.FALLBACK_LIST_LABELS,
        description='Метки списков в прозе ("Inventory", "Carrying", ...)',
    )
    default_separator: str = Field(
        default=settings.DEFAULT_SEPARATOR,
        description="Разделитель сериализатора по умолчанию",
    )
    min_name_length: int = Field(
        default=settings.MIN_NAME_LENGTH, ge=1,
        description="Минимальная длина имени для normalize_item_name",
    )
    max_input_length: Optional[int] = Field(
        default=settings.MAX_INPUT_LENGTH, gt=0,
        description="Максимальная длина входа (None = без ограничения)",
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("stopwords")
    @classmethod
    def validate_stopwords(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        # Сравнение case-insensitive, храним в нижнем регистре
        return tuple(word.strip().lower() for word in v if word and word.strip())

    @field_validator("list_labels")
    @classmethod
    def validate_list_labels(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        labels = tuple(label.strip() for label in v if label and label.strip())
        if not labels:
            raise ValueError("list_labels не может быть пустым")
        return labels

    @property
    def stopword_set(self) -> frozenset:
        return frozenset(self.stopwords)


class ConfigLoader:
    """
    Загрузчик конфигурации парсера.

    Отсутствующий файл не ошибка (берутся значения по умолчанию),
    битый файл - ParsingConfigurationError.
    """

    @classmethod
    def load(cls, path: Optional[Path] = None) -> ParserConfig:
        """
        Загружает ParserConfig из YAML.

        Args:
            path: Путь к YAML (по умолчанию settings.DEFAULT_CONFIG_PATH)

        Returns:
            ParserConfig: Замороженная конфигурация
        """
        config_file = Path(path) if path is not None else settings.DEFAULT_CONFIG_PATH

        if not config_file.exists():
            logger.warning(f"[ConfigLoader] Конфиг не найден: {config_file}, используем значения по умолчанию")
            return ParserConfig()

        config_data = cls._read_yaml(config_file)

        try:
            config = ParserConfig(**config_data)
        except ValidationError as e:
            raise ParsingConfigurationError(
                f"Некорректный конфиг {config_file}",
                component="ConfigLoader",
                original_error=e,
            ) from e

        logger.debug(
            f"[ConfigLoader] Загружен {config_file.name}: "
            f"{len(config.stopwords)} stopwords, {len(config.list_labels)} list_labels"
        )
        return config

    @classmethod
    def _read_yaml(cls, config_file: Path) -> dict:
        """Читает YAML и проверяет, что на верхнем уровне словарь."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ParsingConfigurationError(
                f"Не удалось прочитать {config_file}",
                component="ConfigLoader",
                original_error=e,
            ) from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ParsingConfigurationError(
                f"Ожидался словарь на верхнем уровне {config_file}, получено: {type(data).__name__}",
                component="ConfigLoader",
            )

        # Списки из YAML приводим к кортежам для замороженной модели
        for key in ("stopwords", "list_labels"):
            if isinstance(data.get(key), list):
                data[key] = tuple(data[key])

        return data
