"""PlainTextFormatter — human-readable multi-line rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .options import FormatterOptions

if TYPE_CHECKING:
    from ..domain.message import Message


class PlainTextFormatter:
    """Renders a message as plain text::

        [ERROR] Authentication Failed
        Invalid username or password.
        Hint: Check your credentials and try again.

        Time: 2025-01-01 12:00:00
        Code: AUTH_001
        Correlation: req-42
    """

    def __init__(self, options: FormatterOptions | None = None) -> None:
        self.options = options or FormatterOptions()

    def format(self, message: Message) -> str:
        return "\n".join(self.lines(message))

    def format_as_object(self, message: Message) -> str:
        return self.format(message)

    def lines(self, message: Message) -> list[str]:
        opts = self.options
        lines = [f"[{message.type.value.upper()}] {message.title}", message.description]

        if opts.include_hint and message.hint:
            lines.append(f"Hint: {message.hint}")
        if opts.include_parameters and message.parameters:
            rendered = ", ".join(f"{k}={v}" for k, v in message.parameters.items())
            lines.append(f"Parameters: {rendered}")
        if opts.include_data and message.data is not None:
            lines.append(f"Data: {message.data}")

        lines.append("")

        if opts.include_timestamp:
            lines.append(f"Time: {message.timestamp:%Y-%m-%d %H:%M:%S}")
        lines.append(f"Code: {message.code}")
        if opts.include_correlation_id and message.correlation_id:
            lines.append(f"Correlation: {message.correlation_id}")
        return lines
