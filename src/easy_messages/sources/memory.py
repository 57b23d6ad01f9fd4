"""InMemoryMessageSource — templates supplied as a mapping."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..domain.template import MessageTemplate
from .catalog import parse_entries


class InMemoryMessageSource:
    """Serves templates from a dict.

    Values may be :class:`MessageTemplate` instances or raw catalog objects
    (``{"title": ..., "httpStatusCode": ...}``). The mapping is copied on
    construction, so later changes to the caller's dict are not seen.

    Usage::

        source = InMemoryMessageSource({
            "ORDER_001": {"type": "success", "title": "Order placed",
                          "description": "Order {id} was placed."},
        })
    """

    def __init__(
        self, messages: Mapping[str, MessageTemplate | Mapping[str, Any]]
    ) -> None:
        self._messages: dict[str, Any] = {
            code: dict(entry) if isinstance(entry, Mapping) else entry
            for code, entry in messages.items()
        }

    def describe(self) -> str:
        return f"in-memory source ({len(self._messages)} entries)"

    def load(self) -> dict[str, MessageTemplate]:
        return parse_entries(self._messages, source=self.describe())
