"""Reply delivery for chat messages with a single best-effort fallback."""
from __future__ import annotations

import logging
from typing import Any

import aiohttp
import discord

from modules.faq.constants import ERROR_REPLY

log = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 2000

_DELIVERY_ERRORS = (discord.HTTPException, aiohttp.ClientError, OSError)


def _clip(content: str, limit: int = MAX_MESSAGE_LENGTH) -> str:
    if len(content) <= limit:
        return content
    return f"{content[: limit - 3].rstrip()}..."


class ReplyDispatcher:
    """Send a reply addressed to the triggering message.

    Send failures are logged and followed by one fallback reply; a failed
    fallback is logged and dropped so a single message never takes the
    listener down.
    """

    def __init__(self, *, fallback_content: str = ERROR_REPLY, mention_author: bool = False) -> None:
        self._fallback_content = fallback_content
        self._mention_author = mention_author

    async def dispatch(self, message: Any, content: str) -> bool:
        try:
            await message.reply(_clip(content), mention_author=self._mention_author)
            return True
        except _DELIVERY_ERRORS:
            log.exception(
                "Failed to deliver reply for message_id=%s channel_id=%s",
                getattr(message, "id", "unknown"),
                getattr(getattr(message, "channel", None), "id", "unknown"),
            )

        await self.dispatch_fallback(message)
        return False

    async def dispatch_fallback(self, message: Any) -> bool:
        try:
            await message.reply(self._fallback_content, mention_author=self._mention_author)
            return True
        except _DELIVERY_ERRORS:
            log.exception(
                "Fallback reply also failed for message_id=%s; dropping",
                getattr(message, "id", "unknown"),
            )
            return False


__all__ = ["ReplyDispatcher", "MAX_MESSAGE_LENGTH"]
