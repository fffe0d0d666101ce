from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class FAQEntry:
    """Static question/answer pair served by the support responder."""

    question: str
    answer: str


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of matching one message against the catalog."""

    entry: Optional[FAQEntry]
    score: float
    matched: bool
    threshold: float = 0.0

    @classmethod
    def no_match(cls, *, score: float = 0.0, threshold: float = 0.0) -> "MatchResult":
        return cls(entry=None, score=score, matched=False, threshold=threshold)
