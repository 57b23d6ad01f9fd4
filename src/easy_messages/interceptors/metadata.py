"""MetadataEnrichmentInterceptor — merges extra metadata before formatting."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..domain.message import Message


class MetadataEnrichmentInterceptor:
    """Adds metadata entries to every formatted message.

    *fields* is either a static mapping or a zero-argument callable
    returning one (evaluated per message, e.g. to read request context).
    Keys already present on the message are kept as they are.
    """

    def __init__(
        self,
        fields: Mapping[str, Any] | Callable[[], Mapping[str, Any]],
    ) -> None:
        self._fields = fields

    def on_before_format(self, message: Message) -> Message:
        fields = self._fields() if callable(self._fields) else self._fields
        additions = {k: v for k, v in fields.items() if k not in message.metadata}
        if not additions:
            return message
        return message.with_metadata_items(additions)

    def on_after_format(self, message: Message) -> Message:
        return message
