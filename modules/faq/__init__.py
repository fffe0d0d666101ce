"""FAQ feature package: text normalization, keyword expansion and matching."""

from .catalog import (
    DEFAULT_FAQ_ENTRIES,
    FAQCatalog,
    FAQCatalogError,
    load_catalog,
    resolve_catalog,
)
from .config import FAQConfig
from .constants import ERROR_REPLY, NO_MATCH_REPLY, RATE_LIMIT_REPLY
from .keywords import expand_keywords
from .models import FAQEntry, MatchResult
from .service import (
    FAQServiceError,
    FuzzyMatchEngine,
    KeywordMatchEngine,
    MatchEngine,
    build_match_engine,
    find_faq_reply,
    format_reply,
)
from .synonyms import DEFAULT_SYNONYMS, SynonymTable

__all__ = [
    "FAQEntry",
    "MatchResult",
    "FAQCatalog",
    "FAQCatalogError",
    "DEFAULT_FAQ_ENTRIES",
    "load_catalog",
    "resolve_catalog",
    "FAQConfig",
    "SynonymTable",
    "DEFAULT_SYNONYMS",
    "expand_keywords",
    "FAQServiceError",
    "MatchEngine",
    "KeywordMatchEngine",
    "FuzzyMatchEngine",
    "build_match_engine",
    "find_faq_reply",
    "format_reply",
    "NO_MATCH_REPLY",
    "ERROR_REPLY",
    "RATE_LIMIT_REPLY",
]
