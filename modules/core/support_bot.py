from __future__ import annotations

import asyncio
import logging
from typing import Any

import discord
from discord.ext import commands

from modules.core.config import RuntimeConfig
from modules.faq.service import MatchEngine

_logger = logging.getLogger(__name__)

EXTENSIONS = ("cogs.faq.cog",)


class SupportBot(commands.Bot):
    """Gateway client for the support channel responder.

    Holds the runtime config and the match engine so cogs receive them
    explicitly instead of reaching for module globals.
    """

    def __init__(self, *, config: RuntimeConfig, engine: MatchEngine) -> None:
        intents = discord.Intents.default()
        intents.message_content = True

        super().__init__(
            command_prefix=lambda _, __: [],
            intents=intents,
            help_command=None,
        )

        self.runtime_config = config
        self.faq_engine = engine

    async def setup_hook(self) -> None:  # type: ignore[override]
        asyncio.get_running_loop().set_exception_handler(self._handle_loop_exception)
        await self._load_extensions()

    async def _load_extensions(self) -> None:
        for extension in EXTENSIONS:
            try:
                await self.load_extension(extension)
            except Exception:
                _logger.exception("Failed to load extension %s", extension)
                raise
            _logger.info("Loaded extension %s", extension)

    async def on_ready(self) -> None:  # type: ignore[override]
        _logger.info(
            "Logged in as %s; answering in channel %s",
            self.user,
            self.runtime_config.support_channel_id,
        )

    async def on_error(self, event_method: str, /, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        _logger.exception("Unhandled exception in %s", event_method)

    @staticmethod
    def _handle_loop_exception(
        loop: asyncio.AbstractEventLoop,
        context: dict[str, Any],
    ) -> None:
        exc = context.get("exception")
        _logger.error(
            "Unhandled asynchronous failure: %s",
            context.get("message", "no message"),
            exc_info=exc if isinstance(exc, BaseException) else None,
        )


__all__ = ["EXTENSIONS", "SupportBot"]
