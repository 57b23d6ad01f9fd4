"""ConsoleFormatter — icon and color keyed by severity."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, TextIO

from ..domain.message_type import MessageType

if TYPE_CHECKING:
    from ..domain.message import Message

ICONS: dict[MessageType, str] = {
    MessageType.SUCCESS: "✓",
    MessageType.INFO: "ℹ",
    MessageType.WARNING: "⚠",
    MessageType.ERROR: "✗",
    MessageType.CRITICAL: "☠",
}

# (color name, ANSI SGR sequence)
COLORS: dict[MessageType, tuple[str, str]] = {
    MessageType.SUCCESS: ("green", "\033[32m"),
    MessageType.INFO: ("cyan", "\033[36m"),
    MessageType.WARNING: ("yellow", "\033[33m"),
    MessageType.ERROR: ("red", "\033[91m"),
    MessageType.CRITICAL: ("dark_red", "\033[31m"),
}

_RESET = "\033[0m"


class ConsoleFormatter:
    """Terminal rendering::

        ✗ Authentication Failed
          Invalid username or password.
          [12:00:00] [AUTH_001]

    ``format`` never contains escape codes; :meth:`write` adds color when
    ``use_colors`` is set.
    """

    def __init__(self, use_colors: bool = True, show_timestamp: bool = True) -> None:
        self.use_colors = use_colors
        self.show_timestamp = show_timestamp

    def format(self, message: Message) -> str:
        timestamp = f"[{message.timestamp:%H:%M:%S}] " if self.show_timestamp else ""
        return (
            f"{ICONS[message.type]} {message.title}\n"
            f"  {message.description}\n"
            f"  {timestamp}[{message.code}]"
        )

    def format_as_object(self, message: Message) -> dict[str, Any]:
        return {
            "icon": ICONS[message.type],
            "color": COLORS[message.type][0],
            "message": self.format(message),
        }

    def write(self, message: Message, stream: TextIO | None = None) -> None:
        """Print *message* to *stream* (stdout by default)."""
        out = stream if stream is not None else sys.stdout
        text = self.format(message)
        if self.use_colors:
            text = f"{COLORS[message.type][1]}{text}{_RESET}"
        out.write(text + "\n")
