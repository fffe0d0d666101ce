#!/usr/bin/env python3
"""Print how the FAQ matcher answers a set of queries.

Run from the repository root: ``python -m scripts.faq_probe "query" ...``.
"""

from __future__ import annotations

import argparse
import logging
from typing import Iterable

from modules.faq import build_match_engine, resolve_catalog
from modules.faq.constants import MATCH_STRATEGIES, STRATEGY_KEYWORD
from modules.faq.models import MatchResult

SAMPLE_QUERIES = (
    "what is the password",
    "how to change my password",
    "ssh asking for password",
    "need help with password",
    "connection keeps dropping",
    "tunnel keeps disconnecting",
    "getting connection errors",
    "connection reset error",
    "windows localhost issue",
    "tunnel not working on windows",
    "localhost problem windows",
    "is my data secure",
    "can pinggy see my data",
    "is it encrypted",
    "url keeps changing",
    "link not permanent",
    "how to get permanent url",
    "tunnel not working",
    "what platforms are supported",
    "where are the servers located",
    "getting errors",
    "tunnel stopped working",
    "connection closed error",
)


def probe(queries: Iterable[str], *, strategy: str, catalog_path: str | None = None) -> list[tuple[str, MatchResult]]:
    engine = build_match_engine(strategy, resolve_catalog(catalog_path))
    return [(query, engine.match(query)) for query in queries]


def _describe(query: str, result: MatchResult) -> str:
    verdict = "MATCH" if result.matched else "no match"
    question = result.entry.question if result.entry is not None else "-"
    return (
        f"{query!r}\n"
        f"  {verdict} score={result.score:.3f} threshold={result.threshold:.2f}\n"
        f"  question: {question}"
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Show the FAQ entry, score and threshold chosen for each query.",
    )
    parser.add_argument(
        "queries",
        nargs="*",
        help="Queries to match. Runs the built-in sample set when omitted.",
    )
    parser.add_argument(
        "--strategy",
        choices=MATCH_STRATEGIES,
        default=STRATEGY_KEYWORD,
        help="Matching strategy to exercise.",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="Optional JSON catalog file to load instead of the embedded entries.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Emits DEBUG logs from the matcher.",
    )
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    queries = args.queries or SAMPLE_QUERIES
    for query, result in probe(queries, strategy=args.strategy, catalog_path=args.catalog):
        print(_describe(query, result))


if __name__ == "__main__":
    main()
