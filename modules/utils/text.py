import re

# . , / # ! $ % ^ & * ; : { } = - _ ` ~ ( )
_PUNCT_RE = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")
_QUESTION_RUN_RE = re.compile(r"\?+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Canonical form used for keyword matching.

    Lowercases, drops the punctuation set and every run of ``?`` outright,
    then collapses whitespace runs to a single space and trims the ends.
    """
    lowered = (text or "").lower()
    without_punct = _PUNCT_RE.sub("", lowered)
    without_questions = _QUESTION_RUN_RE.sub("", without_punct)
    collapsed = _WHITESPACE_RE.sub(" ", without_questions)
    return collapsed.strip()


def split_words(text: str) -> list[str]:
    normalized = normalize_text(text)
    if not normalized:
        return []
    return normalized.split(" ")
