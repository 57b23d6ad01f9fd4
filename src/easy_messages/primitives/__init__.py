"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    KNOWN_CODES_SAMPLE_SIZE,
    EasyMessagesError,
    FormatterNotFoundError,
    InvalidMessageParametersError,
    MessageNotFoundError,
    NotFoundError,
    SourceLoadError,
)

__all__ = [
    "KNOWN_CODES_SAMPLE_SIZE",
    "EasyMessagesError",
    "FormatterNotFoundError",
    "InvalidMessageParametersError",
    "MessageNotFoundError",
    "NotFoundError",
    "SourceLoadError",
]
