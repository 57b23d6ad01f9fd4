"""Formatters: options, built-in renderers and the name registry."""

from __future__ import annotations

from .base import InterceptedFormatter
from .console import ConsoleFormatter
from .json import JsonFormatter
from .log import LogFormatter
from .options import FormatterOptions
from easy_messages.formatters.registry import BUILTIN_FORMATTERS, FormatterRegistry
from .text import PlainTextFormatter
from .xml import XmlFormatter

__all__ = [
    "BUILTIN_FORMATTERS",
    "ConsoleFormatter",
    "FormatterOptions",
    "FormatterRegistry",
    "InterceptedFormatter",
    "JsonFormatter",
    "LogFormatter",
    "PlainTextFormatter",
    "XmlFormatter",
]
