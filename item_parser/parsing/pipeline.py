"""
Item List Pipeline - Оркестратор 3 этапов разбора списка.

Координирует выполнение этапов в строгом порядке:
1. Normalization → 2. Splitting → 3. Cleaning

Пайплайн без состояния: один экземпляр можно вызывать из разных потоков.
Не бросает исключений на любом входе, "предметов нет" - обычный результат.
"""

import time
from dataclasses import dataclass, field
from typing import Any, List, Optional
from loguru import logger
from pydantic import ValidationError

from ..config.config_loader import ConfigLoader, ParserConfig
from ..contracts.item_dto import ItemListDTO, ItemRecord

from .s1_normalization import NormalizationStage, NormalizationResult
from .s2_splitting import SplittingStage, SplitResult
from .s3_cleaning import CleaningStage, CleaningResult
from .extraction import QuantityParser, TagParser


@dataclass
class PipelineResult:
    """
    Полный результат пайплайна со всеми промежуточными данными.

    Используется для отладки и анализа.
    """
    items: List[str] = field(default_factory=list)

    normalization: Optional[NormalizationResult] = None
    split: Optional[SplitResult] = None
    cleaning: Optional[CleaningResult] = None

    processing_time_ms: float = 0.0
    stages_completed: int = 0
    rejected_too_long: bool = False

    def to_dict(self) -> dict:
        return {
            "items": list(self.items),
            "normalization": self.normalization.to_dict() if self.normalization else None,
            "split": self.split.to_dict() if self.split else None,
            "cleaning": self.cleaning.to_dict() if self.cleaning else None,
            "processing_time_ms": self.processing_time_ms,
            "stages_completed": self.stages_completed,
            "rejected_too_long": self.rejected_too_long,
        }


class ItemListParser:
    """
    Пайплайн разбора списка предметов.

    Координирует 3 этапа:
    1. Normalization - обёртки, markdown, переводы строк
    2. Splitting - разбиение с учётом глубины скобок
    3. Cleaning - маркеры списков, кавычки, сентинелы

    ЦКП: Список чистых имён (parse) или записей с количеством и статусами (parse_records).
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        normalization_stage: Optional[NormalizationStage] = None,
        splitting_stage: Optional[SplittingStage] = None,
        cleaning_stage: Optional[CleaningStage] = None,
        quantity_parser: Optional[QuantityParser] = None,
        tag_parser: Optional[TagParser] = None,
    ):
        """
        Инициализация пайплайна.

        Args:
            config: Конфигурация (по умолчанию ConfigLoader.load())
            Этапы и парсеры опциональны - по умолчанию создаются стандартные.
        """
        self.config = config if config is not None else ConfigLoader.load()

        self.normalization_stage = normalization_stage or NormalizationStage()
        self.splitting_stage = splitting_stage or SplittingStage()
        self.cleaning_stage = cleaning_stage or CleaningStage()
        self.quantity_parser = quantity_parser or QuantityParser()
        self.tag_parser = tag_parser or TagParser()

        logger.info("[ItemListParser] Инициализирован (3 этапа)")

    def process(self, raw: Any) -> PipelineResult:
        """
        Прогоняет текст через все 3 этапа.

        Args:
            raw: Текст от LLM (None / не-строка -> пустой результат)

        Returns:
            PipelineResult: Имена предметов и промежуточные данные
        """
        start_time = time.perf_counter()

        max_length = self.config.max_input_length
        if isinstance(raw, str) and max_length is not None and len(raw) > max_length:
            logger.warning(
                f"[ItemListParser] Вход длиной {len(raw)} больше лимита {max_length}, пропускаем"
            )
            return PipelineResult(rejected_too_long=True)

        stages_completed = 0

        # Stage 1: Normalization
        normalization = self.normalization_stage.process(raw)
        stages_completed += 1
        if normalization.is_empty:
            logger.debug("[ItemListParser] Пустой список (None/пусто)")
            return PipelineResult(
                normalization=normalization,
                processing_time_ms=(time.perf_counter() - start_time) * 1000,
                stages_completed=stages_completed,
            )

        # Stage 2: Splitting
        split = self.splitting_stage.process(normalization.text)
        stages_completed += 1

        # Stage 3: Cleaning
        cleaning = self.cleaning_stage.process(split.candidates)
        stages_completed += 1

        processing_time_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            f"[ItemListParser] Завершено за {processing_time_ms:.2f}ms: {len(cleaning.items)} предметов"
        )

        return PipelineResult(
            items=cleaning.items,
            normalization=normalization,
            split=split,
            cleaning=cleaning,
            processing_time_ms=processing_time_ms,
            stages_completed=stages_completed,
        )

    def parse(self, raw: Any) -> List[str]:
        """ЦКП: Список имён предметов (может быть пустым)."""
        return self.process(raw).items

    def build_record(self, name: str) -> ItemRecord:
        """
        Собирает ItemRecord из одного имени: сначала количество, затем статусы.

        Если после извлечения имя пустое или "none", берётся исходное имя
        с quantity=1 и без статусов.
        """
        qty = self.quantity_parser.parse(name)
        tagged = self.tag_parser.parse(qty.name)
        try:
            return ItemRecord(name=tagged.name, quantity=qty.quantity, tags=tagged.tags)
        except ValidationError:
            logger.debug(f"[ItemListParser] Fallback для записи: '{name}'")
            return ItemRecord(name=name)

    def parse_records(self, raw: Any) -> ItemListDTO:
        """
        Разбирает список и раскладывает каждый предмет на запись.

        Returns:
            ItemListDTO: Записи + исходный текст + метрики
        """
        result = self.process(raw)
        records = [self.build_record(name) for name in result.items]

        return ItemListDTO(
            items=records,
            source_text=raw if isinstance(raw, str) else None,
            metrics={
                "processing_time_ms": result.processing_time_ms,
                "items_count": float(len(records)),
            },
        )
