from __future__ import annotations

from typing import Optional

from modules.faq.constants import SHORT_QUERY_MAX_WORDS
from modules.faq.synonyms import SynonymTable
from modules.utils.text import split_words

_SHORT_QUERY_TEMPLATES = (
    "what is {word}",
    "how to {word}",
    "need help with {word}",
    "help with {word}",
    "about {word}",
    "{word}?",
    "{word}??",
    "{word}???",
)

DEFAULT_TABLE = SynonymTable.default()


def is_short_query(words: list[str]) -> bool:
    return len(words) <= SHORT_QUERY_MAX_WORDS


def expand_keywords(text: str, synonyms: Optional[SynonymTable] = None) -> set[str]:
    """Build the keyword set used to compare *text* against FAQ questions.

    The set holds the normalized words, every variant of each synonym group
    listing one of those words, the adjacent two-word phrases, and for
    queries of at most two words a handful of question-shaped phrases.
    """
    table = synonyms if synonyms is not None else DEFAULT_TABLE
    words = split_words(text)
    keywords: set[str] = set(words)

    for word in words:
        for variants in table.groups_containing(word):
            keywords.update(variants)

    for first, second in zip(words, words[1:]):
        keywords.add(f"{first} {second}")

    if is_short_query(words):
        for word in words:
            keywords.update(template.format(word=word) for template in _SHORT_QUERY_TEMPLATES)

    return keywords


__all__ = ["DEFAULT_TABLE", "expand_keywords", "is_short_query"]
