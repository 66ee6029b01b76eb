"""
Домен Parsing: разбор списков предметов из ответов LLM.

Архитектура: 3-этапный пайплайн
- Stage 1: Normalization (обёртки, markdown, переводы строк)
- Stage 2: Splitting (разбиение с учётом скобок и десятичных запятых)
- Stage 3: Cleaning (маркеры списков, кавычки, сентинел "None")

Плюс элементы разбора одного предмета (extraction) и сериализатор.

Вход: сырой текст от LLM
Выход: List[str] или contracts.ItemListDTO
"""

from .pipeline import ItemListParser, PipelineResult
from .serializer import ItemSerializer

# Stage exports
from .s1_normalization import NormalizationStage, NormalizationResult
from .s2_splitting import SplittingStage, SplitResult
from .s3_cleaning import CleaningStage, CleaningResult

__all__ = [
    # Pipeline
    "ItemListParser",
    "PipelineResult",
    "ItemSerializer",
    # Stages
    "NormalizationStage",
    "NormalizationResult",
    "SplittingStage",
    "SplitResult",
    "CleaningStage",
    "CleaningResult",
]
