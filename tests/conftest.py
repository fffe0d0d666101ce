import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clean_env(monkeypatch):
    """Strip every variable the runtime config reads so defaults apply."""
    for name in (
        "BOT_AUTH_TOKEN",
        "DISCORD_TOKEN",
        "SUPPORT_CHANNEL_ID",
        "RATE_LIMIT_MAX_MESSAGES",
        "RATE_LIMIT_WINDOW_MS",
        "REPLY_COOLDOWN_MS",
        "RATE_LIMIT_SWEEP_SECONDS",
        "FAQ_MATCH_STRATEGY",
        "FAQ_CATALOG_PATH",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
