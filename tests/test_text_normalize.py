import pytest

from modules.utils.text import normalize_text, split_words

PUNCTUATION = set(".,/#!$%^&*;:{}=-_`~()?")

SAMPLES = [
    "",
    "   ",
    "What is the Password??",
    "Connection closed / Connection reset error.",
    "ssh -p 443 -R0:127.0.0.1:8000 qr@a.pinggy.io",
    "tabs\tand\nnewlines\r\n  everywhere",
    "{weird} = (stuff) ~ `code` _under_ 100% ^caret^ & *star* ; :colon: #hash $cash!",
    "???",
    "a ? b ?? c",
    "Doesn't it open up my computer to threats?",
]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("What is the Password??", "what is the password"),
        ("Hello,   World!", "hello world"),
        ("ssh-key", "sshkey"),
        ("127.0.0.1", "127001"),
        ("  leading and trailing  ", "leading and trailing"),
        ("a?b", "ab"),
        ("why ? not", "why not"),
        ("Doesn't", "doesn't"),
        ("", ""),
    ],
)
def test_normalize_text_examples(raw, expected):
    assert normalize_text(raw) == expected


@pytest.mark.parametrize("raw", SAMPLES)
def test_normalize_text_is_idempotent(raw):
    once = normalize_text(raw)
    assert normalize_text(once) == once


@pytest.mark.parametrize("raw", SAMPLES)
def test_normalize_text_strips_punctuation_and_question_marks(raw):
    normalized = normalize_text(raw)
    assert not PUNCTUATION.intersection(normalized)
    assert "  " not in normalized
    assert normalized == normalized.strip()


def test_normalize_text_handles_none():
    assert normalize_text(None) == ""  # type: ignore[arg-type]


def test_split_words_filters_empty_input():
    assert split_words("") == []
    assert split_words(" ?? ") == []
    assert split_words("Tunnel  not WORKING") == ["tunnel", "not", "working"]
