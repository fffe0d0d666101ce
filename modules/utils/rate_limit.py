from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, Hashable

__all__ = ["ChannelCooldown", "UserRateLimiter"]

Clock = Callable[[], float]


@dataclass(slots=True)
class _WindowState:
    count: int
    window_start: float


class UserRateLimiter:
    """Fixed-window message counter per key.

    A key may record ``max_messages`` messages inside ``window_seconds``
    measured from the first message of the window; the next message after
    the window elapses opens a fresh window.
    """

    def __init__(
        self,
        max_messages: int,
        window_seconds: float,
        *,
        clock: Clock = time.monotonic,
    ) -> None:
        self._max_messages = max(1, int(max_messages))
        self._window_seconds = max(0.001, float(window_seconds))
        self._clock = clock
        self._windows: Dict[Hashable, _WindowState] = {}

    @property
    def max_messages(self) -> int:
        return self._max_messages

    @property
    def window_seconds(self) -> float:
        return self._window_seconds

    def check_and_record(self, key: Hashable, now: float | None = None) -> bool:
        """Record one message for *key*; return False when it is over the limit."""
        if now is None:
            now = self._clock()

        state = self._windows.get(key)
        if state is None or now - state.window_start >= self._window_seconds:
            self._windows[key] = _WindowState(count=1, window_start=now)
            return True

        if state.count >= self._max_messages:
            return False

        state.count += 1
        return True

    def sweep(self, now: float | None = None) -> int:
        """Drop keys whose window has elapsed; return how many were removed."""
        if now is None:
            now = self._clock()
        expired = [
            key
            for key, state in self._windows.items()
            if now - state.window_start >= self._window_seconds
        ]
        for key in expired:
            del self._windows[key]
        return len(expired)

    def __len__(self) -> int:
        return len(self._windows)


class ChannelCooldown:
    """Minimum gap between two replies on the same key."""

    def __init__(
        self,
        cooldown_seconds: float,
        *,
        clock: Clock = time.monotonic,
    ) -> None:
        self._cooldown_seconds = max(0.0, float(cooldown_seconds))
        self._clock = clock
        self._last_reply: Dict[Hashable, float] = {}

    @property
    def cooldown_seconds(self) -> float:
        return self._cooldown_seconds

    def check_and_record(self, key: Hashable, now: float | None = None) -> bool:
        if now is None:
            now = self._clock()

        last = self._last_reply.get(key)
        if last is not None and now - last < self._cooldown_seconds:
            return False

        self._last_reply[key] = now
        return True

    def sweep(self, now: float | None = None) -> int:
        if now is None:
            now = self._clock()
        expired = [
            key
            for key, last in self._last_reply.items()
            if now - last >= self._cooldown_seconds
        ]
        for key in expired:
            del self._last_reply[key]
        return len(expired)

    def __len__(self) -> int:
        return len(self._last_reply)
