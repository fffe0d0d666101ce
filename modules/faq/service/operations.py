from __future__ import annotations

from typing import Optional, Protocol

from modules.faq.catalog import FAQCatalog
from modules.faq.constants import (
    MATCH_STRATEGIES,
    NO_MATCH_REPLY,
    STRATEGY_FUZZY,
    STRATEGY_KEYWORD,
)
from modules.faq.models import MatchResult
from modules.faq.synonyms import SynonymTable

from .fuzzy import FuzzyMatchEngine
from .search import KeywordMatchEngine

__all__ = [
    "FAQServiceError",
    "MatchEngine",
    "build_match_engine",
    "find_faq_reply",
    "format_reply",
]


class FAQServiceError(RuntimeError):
    """Base exception for FAQ service operations."""


class MatchEngine(Protocol):
    def match(self, message: str) -> MatchResult: ...


def build_match_engine(
    strategy: str,
    catalog: FAQCatalog,
    synonyms: Optional[SynonymTable] = None,
) -> MatchEngine:
    normalized = (strategy or STRATEGY_KEYWORD).strip().lower()
    if normalized == STRATEGY_KEYWORD:
        return KeywordMatchEngine(catalog, synonyms)
    if normalized == STRATEGY_FUZZY:
        return FuzzyMatchEngine(catalog)
    raise FAQServiceError(
        f"Unknown match strategy '{strategy}' (expected one of {', '.join(MATCH_STRATEGIES)})"
    )


def format_reply(result: MatchResult) -> str:
    if result.matched and result.entry is not None:
        return result.entry.answer
    return NO_MATCH_REPLY


def find_faq_reply(message: str, engine: MatchEngine) -> str:
    return format_reply(engine.match(message))
