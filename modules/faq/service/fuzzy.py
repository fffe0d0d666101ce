from __future__ import annotations

import logging
from difflib import SequenceMatcher

from modules.faq.catalog import FAQCatalog
from modules.faq.constants import FUZZY_DISTANCE_THRESHOLD
from modules.faq.models import FAQEntry, MatchResult

__all__ = ["FuzzyMatchEngine", "question_distance"]

_logger = logging.getLogger(__name__)


def question_distance(question: str, message: str) -> float:
    """Normalized distance between two strings, 0.0 exact and 1.0 unrelated.

    A message that contains the whole question counts as an exact hit.
    """
    lowered_question = question.lower().strip()
    lowered_message = message.lower().strip()
    if not lowered_question or not lowered_message:
        return 1.0
    if lowered_question in lowered_message:
        return 0.0
    return 1.0 - SequenceMatcher(None, lowered_question, lowered_message).ratio()


class FuzzyMatchEngine:
    """Approximate string search over the catalog questions."""

    def __init__(
        self,
        catalog: FAQCatalog,
        *,
        max_distance: float = FUZZY_DISTANCE_THRESHOLD,
    ) -> None:
        self._catalog = catalog
        self._max_distance = max_distance
        self._questions: tuple[tuple[FAQEntry, str], ...] = tuple(
            (entry, entry.question) for entry in catalog.all() if entry.question.strip()
        )

    @property
    def catalog(self) -> FAQCatalog:
        return self._catalog

    def match(self, message: str) -> MatchResult:
        threshold = 1.0 - self._max_distance
        if not (message or "").strip():
            return MatchResult.no_match(threshold=threshold)

        best_entry: FAQEntry | None = None
        best_distance = 1.0
        for entry, question in self._questions:
            distance = question_distance(question, message)
            if best_entry is None or distance < best_distance:
                best_entry = entry
                best_distance = distance

        similarity = 1.0 - best_distance
        if best_entry is None or best_distance > self._max_distance:
            _logger.debug("Fuzzy match rejected: best distance=%.3f", best_distance)
            return MatchResult.no_match(score=similarity, threshold=threshold)

        _logger.debug(
            "Fuzzy match accepted: distance=%.3f question=%r",
            best_distance,
            best_entry.question,
        )
        return MatchResult(
            entry=best_entry,
            score=similarity,
            matched=True,
            threshold=threshold,
        )
