"""IMessageInterceptor — before/after formatting hooks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.message import Message


@runtime_checkable
class IMessageInterceptor(Protocol):
    """Protocol for interceptors around formatting.

    Both hooks receive a message and return a message (usually a derived
    copy). Interceptors should be pure with respect to the message for
    the pipeline's ordering guarantee to mean anything.
    """

    def on_before_format(self, message: Message) -> Message:
        """Called before fields are extracted for rendering."""
        ...

    def on_after_format(self, message: Message) -> Message:
        """Called with the post-``before`` message once output exists."""
        ...
