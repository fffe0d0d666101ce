from types import SimpleNamespace

import aiohttp
import pytest

from modules.faq.constants import ERROR_REPLY
from modules.utils.message_replies import MAX_MESSAGE_LENGTH, ReplyDispatcher


class RecordingMessage:
    def __init__(self, errors=None) -> None:
        self.id = 99
        self.channel = SimpleNamespace(id=7)
        self.sent: list[tuple[str, dict]] = []
        self._errors = list(errors or [])

    async def reply(self, content, **kwargs):
        if self._errors:
            raise self._errors.pop(0)
        self.sent.append((content, kwargs))


@pytest.mark.anyio("asyncio")
async def test_dispatch_replies_without_mention():
    message = RecordingMessage()
    assert await ReplyDispatcher().dispatch(message, "hello") is True
    assert message.sent == [("hello", {"mention_author": False})]


@pytest.mark.anyio("asyncio")
async def test_dispatch_clips_long_content():
    message = RecordingMessage()
    await ReplyDispatcher().dispatch(message, "x" * (MAX_MESSAGE_LENGTH + 50))
    content, _ = message.sent[0]
    assert len(content) == MAX_MESSAGE_LENGTH
    assert content.endswith("...")


@pytest.mark.anyio("asyncio")
async def test_network_error_triggers_fallback():
    message = RecordingMessage(errors=[aiohttp.ClientConnectionError("reset")])
    assert await ReplyDispatcher().dispatch(message, "answer") is False
    assert [content for content, _ in message.sent] == [ERROR_REPLY]


@pytest.mark.anyio("asyncio")
async def test_custom_fallback_content():
    message = RecordingMessage(errors=[OSError("broken pipe")])
    dispatcher = ReplyDispatcher(fallback_content="try later")
    await dispatcher.dispatch(message, "answer")
    assert [content for content, _ in message.sent] == ["try later"]


@pytest.mark.anyio("asyncio")
async def test_unexpected_errors_propagate():
    message = RecordingMessage(errors=[ValueError("bug")])
    with pytest.raises(ValueError):
        await ReplyDispatcher().dispatch(message, "answer")
