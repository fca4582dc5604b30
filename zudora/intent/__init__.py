from .classifier import IntentType, classify
from .extraction import (
    ChainedExtractor,
    FirstMatchExtractor,
    LabeledFieldExtractor,
    ScoreCategory,
    ScoreCategoryExtractor,
    build_extractor,
)

__all__ = [
    "ChainedExtractor",
    "FirstMatchExtractor",
    "IntentType",
    "LabeledFieldExtractor",
    "ScoreCategory",
    "ScoreCategoryExtractor",
    "build_extractor",
    "classify",
]
