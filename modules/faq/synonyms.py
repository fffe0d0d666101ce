from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from modules.utils.text import normalize_text

_logger = logging.getLogger(__name__)

# Surface forms for the domain terms users mix up when asking about tunnels.
DEFAULT_SYNONYMS: dict[str, tuple[str, ...]] = {
    "tunnel": ("tunnel", "tunneling", "tunnels", "tunneled", "tunnels"),
    "url": ("url", "link", "address", "endpoint", "domain"),
    "connection": (
        "connection",
        "connect",
        "connecting",
        "connected",
        "connects",
        "disconnect",
        "disconnected",
    ),
    "reset": ("reset", "resetting", "resets", "reset password", "change password"),
    "password": ("password", "pass", "pwd", "ssh key", "ssh-key", "sshkey"),
    "platform": (
        "platform",
        "platforms",
        "os",
        "operating system",
        "windows",
        "linux",
        "mac",
        "android",
    ),
    "tcp": ("tcp", "tcp tunnel", "tcp forwarding"),
    "tls": ("tls", "tls tunnel", "ssl", "secure", "encryption", "encrypted"),
    "data": ("data", "traffic", "information", "content", "read", "access"),
    "timeout": (
        "timeout",
        "time out",
        "time-out",
        "expires",
        "expire",
        "expired",
        "60 minutes",
    ),
    "error": (
        "error",
        "errors",
        "problem",
        "issue",
        "trouble",
        "not working",
        "broken",
        "fail",
        "failed",
    ),
    "closed": (
        "closed",
        "close",
        "closing",
        "disconnected",
        "disconnect",
        "drop",
        "dropped",
    ),
    "working": (
        "working",
        "works",
        "function",
        "functions",
        "run",
        "runs",
        "start",
        "starts",
    ),
    "debugger": ("debugger", "debug", "debugging", "inspect", "inspection", "monitor"),
    "encryption": (
        "encryption",
        "encrypted",
        "encrypt",
        "secure",
        "security",
        "private",
        "privacy",
    ),
    "localhost": ("localhost", "127.0.0.1", "local", "local server"),
    "permanent": ("permanent", "persistent", "fixed", "static", "unchanging", "same"),
    "server": ("server", "servers", "location", "locations", "region", "regions"),
    "ssh": ("ssh", "ssh-key", "sshkey", "ssh key", "ssh command", "ssh client"),
}


class SynonymTable:
    """Read-only concept -> variants mapping.

    Variants are stored in normalized form so they compare against
    normalized message words; duplicates collapse and empty groups are
    dropped.
    """

    __slots__ = ("_groups",)

    def __init__(self, groups: Mapping[str, Iterable[str]]) -> None:
        frozen: dict[str, tuple[str, ...]] = {}
        for concept, variants in groups.items():
            normalized = tuple(
                dict.fromkeys(v for v in (normalize_text(raw) for raw in variants) if v)
            )
            if not normalized:
                _logger.warning("Dropping empty synonym group %r", concept)
                continue
            frozen[concept] = normalized
        self._groups = MappingProxyType(frozen)

    @classmethod
    def default(cls) -> "SynonymTable":
        return cls(DEFAULT_SYNONYMS)

    @property
    def groups(self) -> Mapping[str, tuple[str, ...]]:
        return self._groups

    def contains(self, concept: str, word: str) -> bool:
        return word in self._groups.get(concept, ())

    def groups_containing(self, word: str) -> Iterator[tuple[str, ...]]:
        """Yield every variant list that lists *word* verbatim."""
        for variants in self._groups.values():
            if word in variants:
                yield variants

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)


__all__ = ["DEFAULT_SYNONYMS", "SynonymTable"]
