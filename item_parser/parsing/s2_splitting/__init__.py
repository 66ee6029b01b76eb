"""
Stage 2: Depth-Aware Splitting

ЦКП: Кандидаты в предметы без ложных разрезов внутри скобок и чисел.
"""

from .stage import SplittingStage, SplitResult

__all__ = [
    "SplittingStage",
    "SplitResult",
]
