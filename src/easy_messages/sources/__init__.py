"""Message sources: embedded, file, in-memory, composite and database."""

from __future__ import annotations

from .catalog import parse_catalog, parse_catalog_text, parse_entries
from .composite import CompositeMessageSource
from .database import DatabaseMessageSource
from .embedded import EmbeddedMessageSource
from .file import FileMessageSource
from .memory import InMemoryMessageSource

__all__ = [
    "CompositeMessageSource",
    "DatabaseMessageSource",
    "EmbeddedMessageSource",
    "FileMessageSource",
    "InMemoryMessageSource",
    "parse_catalog",
    "parse_catalog_text",
    "parse_entries",
]
