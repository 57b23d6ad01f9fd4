"""LoggingInterceptor — one log record per formatted message."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.message import Message

_log = logging.getLogger("easy_messages.messages")


class LoggingInterceptor:
    """Emits each message at the level mapped from its severity.

    Success/Info map to INFO, Warning to WARNING, Error to ERROR and
    Critical to CRITICAL. Messages below *minimum_level* are skipped. The
    record carries ``code``, ``title``, ``description``, ``status_code``
    and ``correlation_id`` as ``extra`` attributes for structured sinks.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        minimum_level: int = logging.WARNING,
    ) -> None:
        self._log = logger or _log
        self.minimum_level = minimum_level

    def on_before_format(self, message: Message) -> Message:
        level = message.type.log_level
        if level < self.minimum_level:
            return message
        self._log.log(
            level,
            "[%s] %s: %s",
            message.code,
            message.title,
            message.description,
            extra={
                "code": message.code,
                "title": message.title,
                "description": message.description,
                "status_code": message.status_code,
                "correlation_id": message.correlation_id,
            },
        )
        return message

    def on_after_format(self, message: Message) -> Message:
        return message
