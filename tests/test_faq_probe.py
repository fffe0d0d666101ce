import sys

from modules.faq import DEFAULT_FAQ_ENTRIES
from scripts import faq_probe


def test_probe_reports_each_query():
    results = faq_probe.probe(["what is the password", "xyzzy"], strategy="keyword")
    assert [query for query, _ in results] == ["what is the password", "xyzzy"]
    assert results[0][1].entry == DEFAULT_FAQ_ENTRIES[0]
    assert results[1][1].matched is False


def test_main_prints_sample_queries(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["faq_probe", "--strategy", "fuzzy", "Can Pinggy read my data?"])
    faq_probe.main()
    output = capsys.readouterr().out
    assert "MATCH score=1.000 threshold=0.70" in output
    assert "question: Can Pinggy read my data?" in output
