from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from modules.faq.config import FAQConfig

_logger = logging.getLogger(__name__)

DEFAULT_RATE_LIMIT_MAX_MESSAGES = 10
DEFAULT_RATE_LIMIT_WINDOW_MS = 60_000
DEFAULT_REPLY_COOLDOWN_MS = 3_000
DEFAULT_SWEEP_SECONDS = 300


class ConfigurationError(RuntimeError):
    """Raised when required runtime configuration is missing or invalid."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            "Missing required environment variables: " + ", ".join(missing)
        )
        self.missing = missing


def _parse_int(
    raw: str | None,
    *,
    default: int,
    minimum: int | None = None,
    name: str = "value",
) -> int:
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        _logger.warning("Invalid %s=%s; using %s", name, raw, default)
        return default
    if minimum is not None and value < minimum:
        _logger.warning("%s=%s below minimum %s; clamping", name, value, minimum)
        return minimum
    return value


def _parse_optional_id(raw: str | None, *, name: str) -> int | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw.strip())
    except ValueError:
        _logger.error("Invalid %s=%s; expected a numeric id", name, raw)
        return None


@dataclass(slots=True)
class RateLimitConfig:
    max_messages: int = DEFAULT_RATE_LIMIT_MAX_MESSAGES
    window_ms: int = DEFAULT_RATE_LIMIT_WINDOW_MS
    reply_cooldown_ms: int = DEFAULT_REPLY_COOLDOWN_MS
    sweep_seconds: int = DEFAULT_SWEEP_SECONDS

    @property
    def window_seconds(self) -> float:
        return self.window_ms / 1000.0

    @property
    def reply_cooldown_seconds(self) -> float:
        return self.reply_cooldown_ms / 1000.0


@dataclass(slots=True)
class RuntimeConfig:
    token: str
    support_channel_id: int | None
    log_level: str
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)
    faq: FAQConfig = field(default_factory=FAQConfig)


def load_runtime_config() -> RuntimeConfig:
    load_dotenv()

    token = (os.getenv("BOT_AUTH_TOKEN") or os.getenv("DISCORD_TOKEN") or "").strip()
    log_level = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    support_channel_id = _parse_optional_id(
        os.getenv("SUPPORT_CHANNEL_ID"),
        name="SUPPORT_CHANNEL_ID",
    )

    rate_limit = RateLimitConfig(
        max_messages=_parse_int(
            os.getenv("RATE_LIMIT_MAX_MESSAGES"),
            default=DEFAULT_RATE_LIMIT_MAX_MESSAGES,
            minimum=1,
            name="RATE_LIMIT_MAX_MESSAGES",
        ),
        window_ms=_parse_int(
            os.getenv("RATE_LIMIT_WINDOW_MS"),
            default=DEFAULT_RATE_LIMIT_WINDOW_MS,
            minimum=1,
            name="RATE_LIMIT_WINDOW_MS",
        ),
        reply_cooldown_ms=_parse_int(
            os.getenv("REPLY_COOLDOWN_MS"),
            default=DEFAULT_REPLY_COOLDOWN_MS,
            minimum=0,
            name="REPLY_COOLDOWN_MS",
        ),
        sweep_seconds=_parse_int(
            os.getenv("RATE_LIMIT_SWEEP_SECONDS"),
            default=DEFAULT_SWEEP_SECONDS,
            minimum=1,
            name="RATE_LIMIT_SWEEP_SECONDS",
        ),
    )

    return RuntimeConfig(
        token=token,
        support_channel_id=support_channel_id,
        log_level=log_level,
        rate_limit=rate_limit,
        faq=FAQConfig.from_env(),
    )


def validate_runtime_config(config: RuntimeConfig) -> None:
    """Raise ConfigurationError naming every missing required variable."""
    missing: list[str] = []
    if not config.token:
        missing.append("BOT_AUTH_TOKEN")
    if config.support_channel_id is None:
        missing.append("SUPPORT_CHANNEL_ID")
    if missing:
        raise ConfigurationError(missing)


__all__ = [
    "ConfigurationError",
    "RateLimitConfig",
    "RuntimeConfig",
    "load_runtime_config",
    "validate_runtime_config",
]
