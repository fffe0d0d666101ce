from __future__ import annotations

import logging
from typing import AbstractSet, Optional

from modules.faq.catalog import FAQCatalog
from modules.faq.constants import (
    CONTEXT_WEIGHT,
    DEFAULT_THRESHOLD,
    IMPORTANT_CONCEPT_BONUS,
    IMPORTANT_CONCEPTS,
    KEYWORD_WEIGHT,
    SHORT_QUERY_CONCEPT_BONUS,
    SHORT_QUERY_MAX_KEYWORDS,
    SHORT_QUERY_THRESHOLD,
)
from modules.faq.keywords import DEFAULT_TABLE, expand_keywords
from modules.faq.models import FAQEntry, MatchResult
from modules.faq.synonyms import SynonymTable

__all__ = [
    "KeywordMatchEngine",
    "acceptance_threshold",
    "context_score",
    "keyword_overlap_score",
    "score_keywords",
]

_logger = logging.getLogger(__name__)


def keyword_overlap_score(
    message_keywords: AbstractSet[str],
    faq_keywords: AbstractSet[str],
) -> float:
    largest = max(len(message_keywords), len(faq_keywords))
    if largest == 0:
        return 0.0
    shared = sum(1 for keyword in message_keywords if keyword in faq_keywords)
    return shared / largest


def context_score(
    message_keywords: AbstractSet[str],
    faq_keywords: AbstractSet[str],
) -> int:
    score = 0
    for concept in IMPORTANT_CONCEPTS:
        if concept in message_keywords and concept in faq_keywords:
            score += IMPORTANT_CONCEPT_BONUS

    if len(message_keywords) <= SHORT_QUERY_MAX_KEYWORDS and any(
        concept in message_keywords for concept in IMPORTANT_CONCEPTS
    ):
        score += SHORT_QUERY_CONCEPT_BONUS
    return score


def score_keywords(
    message_keywords: AbstractSet[str],
    faq_keywords: AbstractSet[str],
) -> float:
    """Weighted blend of keyword overlap and important-concept context."""
    overlap = keyword_overlap_score(message_keywords, faq_keywords)
    context = context_score(message_keywords, faq_keywords)
    return overlap * KEYWORD_WEIGHT + context * CONTEXT_WEIGHT


def acceptance_threshold(message_keywords: AbstractSet[str]) -> float:
    if len(message_keywords) <= SHORT_QUERY_MAX_KEYWORDS:
        return SHORT_QUERY_THRESHOLD
    return DEFAULT_THRESHOLD


class KeywordMatchEngine:
    """Score every catalog question against the synonym-expanded message."""

    def __init__(
        self,
        catalog: FAQCatalog,
        synonyms: Optional[SynonymTable] = None,
    ) -> None:
        self._catalog = catalog
        self._synonyms = synonyms if synonyms is not None else DEFAULT_TABLE
        self._indexed: tuple[tuple[FAQEntry, frozenset[str]], ...] = tuple(
            (entry, frozenset(expand_keywords(entry.question, self._synonyms)))
            for entry in catalog.all()
        )

    @property
    def catalog(self) -> FAQCatalog:
        return self._catalog

    def match(self, message: str) -> MatchResult:
        message_keywords = expand_keywords(message, self._synonyms)
        threshold = acceptance_threshold(message_keywords)

        best_entry: FAQEntry | None = None
        best_score = 0.0
        for entry, faq_keywords in self._indexed:
            score = score_keywords(message_keywords, faq_keywords)
            if best_entry is None or score > best_score:
                best_entry = entry
                best_score = score

        if best_entry is None:
            return MatchResult.no_match(threshold=threshold)

        matched = best_score > threshold
        _logger.debug(
            "Keyword match %s: score=%.3f threshold=%.2f question=%r",
            "accepted" if matched else "rejected",
            best_score,
            threshold,
            best_entry.question,
        )
        if not matched:
            return MatchResult.no_match(score=best_score, threshold=threshold)
        return MatchResult(
            entry=best_entry,
            score=best_score,
            matched=True,
            threshold=threshold,
        )
