from __future__ import annotations

import logging
from typing import Any, Optional

import discord
from discord.ext import commands, tasks

from modules.core.config import DEFAULT_SWEEP_SECONDS, RuntimeConfig
from modules.faq.constants import RATE_LIMIT_REPLY
from modules.faq.service import MatchEngine, find_faq_reply
from modules.utils.message_replies import ReplyDispatcher
from modules.utils.rate_limit import ChannelCooldown, UserRateLimiter

log = logging.getLogger(__name__)

CONTENT_MESSAGE_TYPES = frozenset({discord.MessageType.default, discord.MessageType.reply})


def is_eligible(message: Any, support_channel_id: Optional[int]) -> bool:
    """Static gate: human author, support channel, regular content."""
    if getattr(message.author, "bot", False):
        return False
    if support_channel_id is None:
        return False
    if getattr(message.channel, "id", None) != support_channel_id:
        return False
    if getattr(message, "type", None) not in CONTENT_MESSAGE_TYPES:
        return False
    return bool((message.content or "").strip())


def _preview(value: str, limit: int = 120) -> str:
    if len(value) <= limit:
        return value
    return f"{value[: limit - 3].rstrip()}..."


class FAQCog(commands.Cog):
    """Answers support-channel questions from the FAQ catalog."""

    def __init__(
        self,
        bot: commands.Bot,
        *,
        config: Optional[RuntimeConfig] = None,
        engine: Optional[MatchEngine] = None,
        dispatcher: Optional[ReplyDispatcher] = None,
        rate_limiter: Optional[UserRateLimiter] = None,
        cooldown: Optional[ChannelCooldown] = None,
    ) -> None:
        self.bot = bot
        config = config if config is not None else bot.runtime_config
        self._support_channel_id = config.support_channel_id
        self._engine: MatchEngine = engine if engine is not None else bot.faq_engine
        self._dispatcher = dispatcher if dispatcher is not None else ReplyDispatcher()
        self._rate_limiter = rate_limiter if rate_limiter is not None else UserRateLimiter(
            config.rate_limit.max_messages,
            config.rate_limit.window_seconds,
        )
        self._cooldown = cooldown if cooldown is not None else ChannelCooldown(
            config.rate_limit.reply_cooldown_seconds,
        )

        if config.rate_limit.sweep_seconds != DEFAULT_SWEEP_SECONDS:
            self.sweep_rate_state.change_interval(seconds=config.rate_limit.sweep_seconds)

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        await self.handle_message(message)

    async def handle_message(self, message: Any) -> None:
        if not is_eligible(message, self._support_channel_id):
            return

        author_id = message.author.id
        if not self._rate_limiter.check_and_record(author_id):
            log.info("Rate limit hit for user_id=%s", author_id)
            await self._dispatcher.dispatch(message, RATE_LIMIT_REPLY)
            return

        channel_id = message.channel.id
        if not self._cooldown.check_and_record(channel_id):
            log.debug("Channel %s in reply cooldown; skipping message_id=%s", channel_id, message.id)
            return

        try:
            reply = find_faq_reply(message.content, self._engine)
        except Exception:
            log.exception(
                "FAQ matching failed for channel_id=%s message_id=%s content=%r",
                channel_id,
                message.id,
                _preview(message.content or ""),
            )
            await self._dispatcher.dispatch_fallback(message)
            return

        await self._dispatcher.dispatch(message, reply)

    @tasks.loop(seconds=DEFAULT_SWEEP_SECONDS)
    async def sweep_rate_state(self) -> None:
        removed_users = self._rate_limiter.sweep()
        removed_channels = self._cooldown.sweep()
        if removed_users or removed_channels:
            log.debug(
                "Evicted %s user window(s) and %s channel cooldown(s)",
                removed_users,
                removed_channels,
            )

    async def cog_load(self) -> None:
        if not self.sweep_rate_state.is_running():
            self.sweep_rate_state.start()

    async def cog_unload(self) -> None:
        self.sweep_rate_state.cancel()


async def setup(bot: commands.Bot) -> None:
    await bot.add_cog(FAQCog(bot))
