"""
Stage 3: Item Cleaning

ЦКП: Чистые имена предметов (маркеры списков и кавычки сняты).
"""

from .stage import CleaningStage, CleaningResult

__all__ = [
    "CleaningStage",
    "CleaningResult",
]
