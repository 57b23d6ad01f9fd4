"""CorrelationIdInterceptor — stamps the ambient correlation ID."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..correlation import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..domain.message import Message


class CorrelationIdInterceptor:
    """Fills in ``correlation_id`` before formatting when it is empty.

    The ID comes from *provider*, by default the context variable in
    :mod:`easy_messages.correlation`. An ID already on the message wins.
    """

    def __init__(self, provider: Callable[[], str | None] = get_correlation_id) -> None:
        self._provider = provider

    def on_before_format(self, message: Message) -> Message:
        if message.correlation_id:
            return message
        correlation_id = self._provider()
        if not correlation_id:
            return message
        return message.with_correlation_id(correlation_id)

    def on_after_format(self, message: Message) -> Message:
        return message
