"""
Stage 1: Normalization

ЦКП: Текст списка без обёрток, разметки и переводов строк.
"""

from .stage import NormalizationStage, NormalizationResult, is_none_sentinel

__all__ = [
    "NormalizationStage",
    "NormalizationResult",
    "is_none_sentinel",
]
