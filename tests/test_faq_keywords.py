import pytest

from modules.faq.catalog import FAQCatalog
from modules.faq.keywords import DEFAULT_TABLE, expand_keywords, is_short_query
from modules.faq.service.search import KeywordMatchEngine
from modules.faq.synonyms import DEFAULT_SYNONYMS, SynonymTable
from modules.utils.text import normalize_text

BOOST_TEMPLATES = (
    "what is {}",
    "how to {}",
    "need help with {}",
    "help with {}",
    "about {}",
    "{}?",
    "{}??",
    "{}???",
)


def test_expand_keywords_adds_synonyms_and_phrases():
    assert expand_keywords("what is the password") == {
        "what",
        "is",
        "the",
        "password",
        "pass",
        "pwd",
        "ssh key",
        "sshkey",
        "what is",
        "is the",
        "the password",
    }


@pytest.mark.parametrize(
    "text",
    [
        "windows localhost issue",
        "Connection closed / Connection reset error.",
        "tunnel",
        "How to use TCP and TLS tunnels?",
        "xyzzy quux nonsense",
    ],
)
def test_expand_keywords_contains_every_normalized_token(text):
    keywords = expand_keywords(text)
    for token in normalize_text(text).split(" "):
        assert token in keywords


def test_short_query_boost_phrases_present():
    keywords = expand_keywords("Tunnel?")
    for template in BOOST_TEMPLATES:
        assert template.format("tunnel") in keywords
    assert {"tunnel", "tunneling", "tunnels", "tunneled"} <= keywords
    assert len(keywords) == 12


def test_short_query_boost_grows_the_keyword_set():
    boosted = expand_keywords("xyzzy quux")
    assert len(boosted) > len({"xyzzy", "quux", "xyzzy quux"})
    assert "help with quux" in boosted
    assert "xyzzy???" in boosted


def test_long_query_has_no_boost_phrases():
    keywords = expand_keywords("xyzzy quux nonsense")
    assert keywords == {"xyzzy", "quux", "nonsense", "xyzzy quux", "quux nonsense"}


def test_expand_keywords_empty_text():
    assert expand_keywords("") == set()
    assert expand_keywords("?!?") == set()


def test_synonym_expansion_requires_verbatim_variant():
    # "tunnel" is a concept name for one group but only a substring of "tcp tunnel".
    keywords = expand_keywords("tcp")
    assert {"tcp tunnel", "tcp forwarding"} <= keywords
    assert "tunneling" not in keywords


def test_word_in_several_groups_pulls_all_of_them():
    keywords = expand_keywords("disconnect now please")
    assert {"connection", "connected"} <= keywords
    assert {"closed", "dropped"} <= keywords


def test_variants_are_normalized_before_matching():
    keywords = expand_keywords("use 127.0.0.1 instead")
    assert "localhost" in keywords
    assert "local server" in keywords


def test_custom_synonym_table():
    table = SynonymTable({"greeting": ["Hello", "HI", "hey!"], "empty": ["", "??"]})
    assert list(table) == ["greeting"]
    assert table.contains("greeting", "hey")
    keywords = expand_keywords("hi there friend", table)
    assert {"hello", "hi", "hey"} <= keywords
    custom = expand_keywords("password reset now", table)
    assert {"password", "reset", "password reset"} <= custom
    assert "pwd" not in custom
    assert "resetting" not in custom


def test_default_table_covers_domain_concepts():
    table = SynonymTable.default()
    assert set(table) == set(DEFAULT_SYNONYMS)
    assert table.groups["tunnel"] == ("tunnel", "tunneling", "tunnels", "tunneled")
    assert table.groups["ssh"] == ("ssh", "sshkey", "ssh key", "ssh command", "ssh client")
    with pytest.raises(TypeError):
        table.groups["tunnel"] = ("x",)  # type: ignore[index]


@pytest.mark.parametrize(
    ("words", "expected"),
    [([], True), (["a"], True), (["a", "b"], True), (["a", "b", "c"], False)],
)
def test_is_short_query(words, expected):
    assert is_short_query(words) is expected


def test_default_table_is_built_once_and_shared():
    engine = KeywordMatchEngine(FAQCatalog([]))
    assert engine._synonyms is DEFAULT_TABLE
    assert expand_keywords("pwd") == expand_keywords("pwd", DEFAULT_TABLE)
