"""MessageType — the closed set of severities a template can carry."""

from __future__ import annotations

import enum
import logging


class MessageType(str, enum.Enum):
    """Severity kind of a message.

    Drives the default HTTP status, the log level a sink should use and
    the decoration applied by the console formatter. Parsing is
    case-insensitive so catalog files may say ``"Error"`` or ``"error"``.
    """

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @classmethod
    def _missing_(cls, value: object) -> MessageType | None:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @property
    def default_status_code(self) -> int:
        return _DEFAULT_STATUS_CODES[self]

    @property
    def log_level(self) -> int:
        """Standard-library logging level a sink should emit this severity at."""
        return _LOG_LEVELS[self]

    @property
    def is_success(self) -> bool:
        return self in (MessageType.SUCCESS, MessageType.INFO)


_DEFAULT_STATUS_CODES: dict[MessageType, int] = {
    MessageType.SUCCESS: 200,
    MessageType.INFO: 200,
    MessageType.WARNING: 200,
    MessageType.ERROR: 400,
    MessageType.CRITICAL: 500,
}

_LOG_LEVELS: dict[MessageType, int] = {
    MessageType.SUCCESS: logging.INFO,
    MessageType.INFO: logging.INFO,
    MessageType.WARNING: logging.WARNING,
    MessageType.ERROR: logging.ERROR,
    MessageType.CRITICAL: logging.CRITICAL,
}
