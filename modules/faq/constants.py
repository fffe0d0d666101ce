"""Scoring constants and canned replies for the FAQ responder."""

SHORT_QUERY_MAX_WORDS = 2
SHORT_QUERY_MAX_KEYWORDS = 2

SHORT_QUERY_THRESHOLD = 0.15
DEFAULT_THRESHOLD = 0.25

KEYWORD_WEIGHT = 0.7
CONTEXT_WEIGHT = 0.3

IMPORTANT_CONCEPT_BONUS = 2
SHORT_QUERY_CONCEPT_BONUS = 3

IMPORTANT_CONCEPTS = (
    "windows",
    "localhost",
    "password",
    "ssh",
    "tunnel",
    "error",
    "connection",
)

# Scale is 0 (exact) to 1 (no match); hits at or below this distance are accepted.
FUZZY_DISTANCE_THRESHOLD = 0.3

STRATEGY_KEYWORD = "keyword"
STRATEGY_FUZZY = "fuzzy"
MATCH_STRATEGIES = (STRATEGY_KEYWORD, STRATEGY_FUZZY)

NO_MATCH_REPLY = (
    "I couldn't find a matching answer. Please try rephrasing your question or contact support!"
)
ERROR_REPLY = (
    "I encountered an error while processing your question. Please try again later."
)
RATE_LIMIT_REPLY = (
    "You're sending messages too quickly. Please wait a moment before asking again."
)

__all__ = [
    "SHORT_QUERY_MAX_WORDS",
    "SHORT_QUERY_MAX_KEYWORDS",
    "SHORT_QUERY_THRESHOLD",
    "DEFAULT_THRESHOLD",
    "KEYWORD_WEIGHT",
    "CONTEXT_WEIGHT",
    "IMPORTANT_CONCEPT_BONUS",
    "SHORT_QUERY_CONCEPT_BONUS",
    "IMPORTANT_CONCEPTS",
    "FUZZY_DISTANCE_THRESHOLD",
    "STRATEGY_KEYWORD",
    "STRATEGY_FUZZY",
    "MATCH_STRATEGIES",
    "NO_MATCH_REPLY",
    "ERROR_REPLY",
    "RATE_LIMIT_REPLY",
]
