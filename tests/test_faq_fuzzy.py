import pytest

from modules.faq import DEFAULT_FAQ_ENTRIES, FAQCatalog, FAQEntry, FuzzyMatchEngine
from modules.faq.service.fuzzy import question_distance


@pytest.fixture
def engine():
    return FuzzyMatchEngine(FAQCatalog.default())


def test_exact_question_matches(engine):
    result = engine.match("Can Pinggy read my data?")
    assert result.matched is True
    assert result.entry == DEFAULT_FAQ_ENTRIES[9]
    assert result.score == pytest.approx(1.0)


def test_near_question_matches_without_normalizing(engine):
    result = engine.match("where are pinggy servers located")
    assert result.matched is True
    assert result.entry == DEFAULT_FAQ_ENTRIES[3]
    assert result.threshold == pytest.approx(0.7)


def test_question_embedded_in_message_is_exact(engine):
    result = engine.match("Hi! It is asking for a password. What now")
    assert result.entry == DEFAULT_FAQ_ENTRIES[0]
    assert result.score == pytest.approx(1.0)


def test_unrelated_message_is_rejected(engine):
    result = engine.match("xyzzy")
    assert result.matched is False
    assert result.entry is None


def test_blank_message_is_rejected(engine):
    assert engine.match("   ").matched is False


def test_question_distance_bounds():
    assert question_distance("", "anything") == 1.0
    assert question_distance("Same text", "same TEXT") == 0.0
    assert 0.0 < question_distance("abcdef", "abcxyz") < 1.0


def test_custom_distance_threshold():
    catalog = FAQCatalog([FAQEntry(question="abcdef", answer="ok")])
    strict = FuzzyMatchEngine(catalog, max_distance=0.1)
    loose = FuzzyMatchEngine(catalog, max_distance=0.6)
    assert strict.match("abcxyz").matched is False
    assert loose.match("abcxyz").matched is True
