"""IMessageSource — read-only provider of code -> template mappings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.template import MessageTemplate


@runtime_checkable
class IMessageSource(Protocol):
    """Protocol for message sources.

    A source is a read-only snapshot of its backing data. Loading may
    block (files, databases) and is only performed when the registry is
    configured. Templates returned here may be partial; the registry
    completes them against the default layer.
    """

    def load(self) -> dict[str, MessageTemplate]:
        """Load every template keyed by code.

        Must raise :class:`~easy_messages.primitives.exceptions.SourceLoadError`
        when the backing data is unreadable or malformed.
        """
        ...

    def describe(self) -> str:
        """Human-readable identity used in error messages and logs."""
        ...
