from __future__ import annotations

from .fuzzy import FuzzyMatchEngine, question_distance
from .operations import (
    FAQServiceError,
    MatchEngine,
    build_match_engine,
    find_faq_reply,
    format_reply,
)
from .search import (
    KeywordMatchEngine,
    acceptance_threshold,
    context_score,
    keyword_overlap_score,
    score_keywords,
)

__all__ = [
    "FAQServiceError",
    "MatchEngine",
    "KeywordMatchEngine",
    "FuzzyMatchEngine",
    "build_match_engine",
    "find_faq_reply",
    "format_reply",
    "acceptance_threshold",
    "context_score",
    "keyword_overlap_score",
    "score_keywords",
    "question_distance",
]
