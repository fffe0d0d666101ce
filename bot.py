from __future__ import annotations

import asyncio
import logging
import sys

import discord

from modules.core import (
    ConfigurationError,
    configure_logging,
    load_runtime_config,
    validate_runtime_config,
)
from modules.core.support_bot import SupportBot
from modules.faq import build_match_engine, resolve_catalog


async def _main() -> int:
    config = load_runtime_config()
    configure_logging(config.log_level)
    logger = logging.getLogger("support.startup")
    logger.info("Log level resolved to %s", config.log_level)

    try:
        validate_runtime_config(config)
    except ConfigurationError as exc:
        logger.critical("%s", exc)
        return 1

    logger.info(
        "Rate limiting: %s messages per %sms per user; reply cooldown %sms per channel",
        config.rate_limit.max_messages,
        config.rate_limit.window_ms,
        config.rate_limit.reply_cooldown_ms,
    )

    catalog = resolve_catalog(config.faq.catalog_path)
    engine = build_match_engine(config.faq.strategy, catalog)
    logger.info("FAQ matcher ready: strategy=%s entries=%d", config.faq.strategy, len(catalog))

    bot = SupportBot(config=config, engine=engine)
    try:
        await bot.start(config.token)
    except discord.LoginFailure:
        logger.critical("Login failed; check BOT_AUTH_TOKEN")
        return 1
    except KeyboardInterrupt:
        pass
    except Exception as exc:
        logger.exception("[FATAL] Bot crashed: %s", exc)
        return 1
    finally:
        if not bot.is_closed():
            logger.info("Closing bot connection")
            try:
                await bot.close()
            except Exception:
                logger.exception("Failed to close bot cleanly")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(_main()))
    except KeyboardInterrupt:
        pass
