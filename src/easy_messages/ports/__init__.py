"""Ports: protocols for sources, formatters and interceptors."""

from __future__ import annotations

from .formatter import IMessageFormatter
from .interceptor import IMessageInterceptor
from .source import IMessageSource

__all__ = [
    "IMessageFormatter",
    "IMessageInterceptor",
    "IMessageSource",
]
