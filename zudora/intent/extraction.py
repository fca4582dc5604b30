"""Strategies for pulling a (score, category) pair out of free text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, Sequence

from zudora.catalog.models import CATEGORY_CODES
from zudora.core.assistant_config import get_assistant_value

_CATEGORY_ALTERNATION = "|".join(code.lower() for code in CATEGORY_CODES)
_CATEGORY_RE = re.compile(rf"\b({_CATEGORY_ALTERNATION})\b", re.IGNORECASE)
_SCORE_RE = re.compile(
    str(get_assistant_value("extraction.score_pattern", r"\b(\d{1,3}(?:\.\d+)?)\b"))
)
_NUMBER = r"(\d{1,3}(?:\.\d+)?)"


@dataclass(frozen=True)
class ScoreCategory:
    score: float
    category: str


class ScoreCategoryExtractor(Protocol):
    def extract(self, text: str) -> ScoreCategory | None:
        """Return the score and upper-cased category, or None when either is missing."""


class FirstMatchExtractor:
    """Take the first number and the first category code found anywhere.

    A message with several numbers ("I am 18 and scored 190") resolves to the
    first one.
    """

    def extract(self, text: str) -> ScoreCategory | None:
        lowered = (text or "").lower()
        score_match = _SCORE_RE.search(lowered)
        category_match = _CATEGORY_RE.search(lowered)
        if not score_match or not category_match:
            return None
        return ScoreCategory(
            score=float(score_match.group(1)),
            category=category_match.group(1).upper(),
        )


class LabeledFieldExtractor:
    """Read explicitly labelled fields, e.g. ``marks: 185, category: BC``."""

    def __init__(
        self,
        score_labels: Sequence[str] | None = None,
        category_labels: Sequence[str] | None = None,
    ) -> None:
        score_labels = score_labels or get_assistant_value(
            "extraction.score_labels", ["marks", "mark", "score", "cutoff"]
        )
        category_labels = category_labels or get_assistant_value(
            "extraction.category_labels", ["category", "community", "caste"]
        )
        score_alternation = "|".join(re.escape(label.lower()) for label in score_labels)
        category_alternation = "|".join(re.escape(label.lower()) for label in category_labels)
        self._score_re = re.compile(rf"\b(?:{score_alternation})\s*[:=]\s*{_NUMBER}\b")
        self._category_re = re.compile(
            rf"\b(?:{category_alternation})\s*[:=]\s*({_CATEGORY_ALTERNATION})\b"
        )

    def extract(self, text: str) -> ScoreCategory | None:
        lowered = (text or "").lower()
        score_match = self._score_re.search(lowered)
        category_match = self._category_re.search(lowered)
        if not score_match or not category_match:
            return None
        return ScoreCategory(
            score=float(score_match.group(1)),
            category=category_match.group(1).upper(),
        )


class ChainedExtractor:
    def __init__(self, *extractors: ScoreCategoryExtractor) -> None:
        self._extractors = extractors

    def extract(self, text: str) -> ScoreCategory | None:
        for extractor in self._extractors:
            found = extractor.extract(text)
            if found is not None:
                return found
        return None


def build_extractor(name: str = "first_match") -> ScoreCategoryExtractor:
    key = (name or "first_match").strip().lower()
    if key == "first_match":
        return FirstMatchExtractor()
    if key == "labeled":
        return LabeledFieldExtractor()
    if key == "labeled_then_first":
        return ChainedExtractor(LabeledFieldExtractor(), FirstMatchExtractor())
    raise ValueError(f"Unsupported extraction strategy '{name}'")
