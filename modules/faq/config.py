from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from modules.faq.constants import MATCH_STRATEGIES, STRATEGY_KEYWORD

_logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FAQConfig:
    """Matching setup for the deployment: one strategy, one catalog source."""

    strategy: str = STRATEGY_KEYWORD
    catalog_path: str | None = None

    @classmethod
    def from_env(cls) -> "FAQConfig":
        raw_strategy = (os.getenv("FAQ_MATCH_STRATEGY") or "").strip().lower()
        strategy = raw_strategy or STRATEGY_KEYWORD
        if strategy not in MATCH_STRATEGIES:
            _logger.warning(
                "Invalid FAQ_MATCH_STRATEGY=%s; using %s",
                raw_strategy,
                STRATEGY_KEYWORD,
            )
            strategy = STRATEGY_KEYWORD

        catalog_path = (os.getenv("FAQ_CATALOG_PATH") or "").strip() or None
        return cls(strategy=strategy, catalog_path=catalog_path)


__all__ = ["FAQConfig"]
