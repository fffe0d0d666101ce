from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator

from modules.faq.models import FAQEntry

_logger = logging.getLogger(__name__)


class FAQCatalogError(RuntimeError):
    """Raised when a catalog file cannot be read or parsed."""


DEFAULT_FAQ_ENTRIES: tuple[FAQEntry, ...] = (
    FAQEntry(
        question="It is asking for a password.",
        answer=(
            "If the SSH command prompts you for a password, you can just press enter "
            "(a blank password) or type in something random and press enter.\n\n"
            "For long-running tunnels with auto-reconnect, generate an SSH key:\n\n"
            "**In your terminal/command prompt, run:** `ssh-keygen`\n\n"
            "Press the Enter key (Return key) until the command finishes. After this, "
            "the SSH command will no longer ask for a password."
        ),
    ),
    FAQEntry(
        question="On Windows, the tunnel cannot reach localhost.",
        answer=(
            "In Windows, sometimes the SSH tunnel cannot reach localhost because of a bug "
            "in the SSH client. **Replace `localhost` with `127.0.0.1` in your Pinggy "
            "command.**\n\n"
            "**Example:**\n"
            "```sh\n"
            "ssh -p 443 -R0:127.0.0.1:8000 -L4300:127.0.0.1:4300 qr@a.pinggy.io\n"
            "```"
        ),
    ),
    FAQEntry(
        question="The command uses SSH. Doesn't it open up my computer to threats?",
        answer=(
            "Pinggy relies on SSH remote port forwarding. The option `-R 0:localhost:8000` "
            "in the command only implies that connections to the public URL given by "
            "Pinggy are forwarded to your `localhost:8000`.\n\n"
            "No other port than the one specified by you can be accessed by Pinggy or by "
            "anyone through the public URLs provided by Pinggy.\n\n"
            "You can read more about the `-R` option of OpenSSH client "
            "[here](https://man7.org/linux/man-pages/man1/ssh.1.html). If you are using a "
            "different SSH client, refer to its documentation."
        ),
    ),
    FAQEntry(
        question="Where are Pinggy servers located?",
        answer=(
            "`a.pinggy.io` is routed to the Pinggy server nearest to your location. "
            "Currently, we have our servers in the USA, Europe, UK, Singapore, Brazil, "
            "and Australia."
        ),
    ),
    FAQEntry(
        question="The URL changes after I restart the tunnel.",
        answer=(
            "Pinggy's free plan has a tunnel timeout of 60 minutes. If the tunnel is "
            "closed by you or reaches the time limit, starting a new tunnel will generate "
            "a new URL.\n\n"
            "To obtain a permanent or persistent URL, or to use your own domain, you must "
            "subscribe to Pinggy Pro."
        ),
    ),
    FAQEntry(
        question="Does it work on all platforms: Linux, Windows, Mac, and Android?",
        answer=(
            "Yes. Current versions of Windows, Mac, as well as almost all Linux "
            "distributions come with the OpenSSH client pre-installed. Therefore, Pinggy "
            "will work out of the box.\n\n"
            "To learn more about using Pinggy on Android, read our "
            "[blog post](https://pinggy.io/blog/pinggy-on-android/)."
        ),
    ),
    FAQEntry(
        question="How to use TCP and TLS tunnels?",
        answer=(
            "You can use TCP and TLS tunnels for free with Pinggy. Click on "
            '**"Advanced Settings"** at the top of the homepage and select **TCP**.'
        ),
    ),
    FAQEntry(
        question="My tunnel breaks or stops working after a few minutes.",
        answer=(
            "Read our guide on long-running tunnels "
            "[here](https://pinggy.io/docs/long_running_tunnels/)."
        ),
    ),
    FAQEntry(
        question="I am getting Connection closed / Connection reset error.",
        answer=(
            "Make sure you do not add any arbitrary argument after the SSH command.\n\n"
            "One common reason for this is that an existing tunnel with the same token "
            "is active.\n\n"
            "**Terminate your existing tunnel with the same token.** You can do so from "
            "the **Active Tunnels** option in the dashboard.\n\n"
            "You can also use the **Force** option in the dashboard."
        ),
    ),
    FAQEntry(
        question="Can Pinggy read my data?",
        answer=(
            "Pinggy does read tunnel traffic for providing the Web Debugger feature.\n\n"
            "**Use TLS tunnels for Zero Trust mode**, where Pinggy cannot read your data. "
            "In this case, your traffic is end-to-end encrypted."
        ),
    ),
)


class FAQCatalog:
    """Immutable, ordered collection of FAQ entries."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[FAQEntry]) -> None:
        self._entries: tuple[FAQEntry, ...] = tuple(entries)

    @classmethod
    def default(cls) -> "FAQCatalog":
        return cls(DEFAULT_FAQ_ENTRIES)

    @classmethod
    def from_entries(cls, raw_entries: Iterable[Any]) -> "FAQCatalog":
        entries: list[FAQEntry] = []
        for index, raw in enumerate(raw_entries):
            entry = _coerce_entry(raw)
            if entry is None:
                _logger.warning("Skipping malformed FAQ entry at index %s", index)
                continue
            entries.append(entry)
        return cls(entries)

    def all(self) -> tuple[FAQEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FAQEntry]:
        return iter(self._entries)


def _coerce_entry(raw: Any) -> FAQEntry | None:
    if isinstance(raw, FAQEntry):
        return raw if raw.question.strip() else None
    if not isinstance(raw, dict):
        return None
    question = str(raw.get("question") or "").strip()
    answer = raw.get("answer")
    if not question or answer is None:
        return None
    return FAQEntry(question=question, answer=str(answer))


def load_catalog(path: str | Path) -> FAQCatalog:
    """Read a JSON list of ``{"question", "answer"}`` objects."""
    catalog_path = Path(path)
    try:
        raw = json.loads(catalog_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise FAQCatalogError(f"FAQ catalog not found: {catalog_path}") from exc
    except (OSError, ValueError) as exc:
        raise FAQCatalogError(f"Unable to read FAQ catalog {catalog_path}: {exc}") from exc

    if not isinstance(raw, list):
        raise FAQCatalogError("FAQ catalog JSON must be a list")

    catalog = FAQCatalog.from_entries(raw)
    _logger.info("Loaded %d FAQ entries from %s", len(catalog), catalog_path)
    return catalog


def resolve_catalog(path: str | Path | None) -> FAQCatalog:
    """Catalog from *path* when configured, else the embedded entries.

    An unreadable file is logged and replaced by the embedded catalog.
    """
    if path is None:
        catalog = FAQCatalog.default()
        _logger.info("Using embedded FAQ catalog with %d entries", len(catalog))
        return catalog

    try:
        return load_catalog(path)
    except FAQCatalogError:
        _logger.exception("Falling back to embedded FAQ catalog")
        return FAQCatalog.default()


__all__ = [
    "DEFAULT_FAQ_ENTRIES",
    "FAQCatalog",
    "FAQCatalogError",
    "load_catalog",
    "resolve_catalog",
]
