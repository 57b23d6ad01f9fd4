"""LogFormatter — single-line rendering for log files."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..domain.message import Message


class LogFormatter:
    """``[2025-11-16 10:47:19.000] [INFO] Title`` lines."""

    def format(self, message: Message) -> str:
        ts = message.timestamp
        stamp = f"{ts:%Y-%m-%d %H:%M:%S}.{ts.microsecond // 1000:03d}"
        return f"[{stamp}] [{message.type.value.upper()}] {message.title}"

    def format_as_object(self, message: Message) -> dict[str, Any]:
        return {
            "timestamp": message.timestamp,
            "type": message.type.value,
            "code": message.code,
            "message": message.title,
            "description": message.description,
        }
