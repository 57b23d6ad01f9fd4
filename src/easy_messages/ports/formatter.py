"""IMessageFormatter — renderer contract."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.message import Message


@runtime_checkable
class IMessageFormatter(Protocol):
    """Protocol for message formatters.

    Implementing this protocol directly bypasses interceptors entirely.
    Wrap a formatter in
    :class:`~easy_messages.formatters.base.InterceptedFormatter` (or
    register it with ``intercepted=True``) to have the pipeline run
    around it.
    """

    def format(self, message: Message) -> str:
        """Render *message* to text."""
        ...

    def format_as_object(self, message: Message) -> Any:
        """Render *message* to a structured value (dict, element, ...)."""
        ...
