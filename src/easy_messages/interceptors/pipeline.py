"""InterceptorPipeline — ordered before/after hooks around formatting."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ..domain.message import Message
    from ..ports.interceptor import IMessageInterceptor

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InterceptorPipeline:
    """Holds interceptors in registration order and runs them.

    ``before`` hooks run in registration order, each receiving the
    previous hook's output. Formatting happens on the final ``before``
    message. ``after`` hooks then run in registration order over that
    same message (never over the rendered artifact).

    Registration swaps in a new tuple under a lock; a run reads the tuple
    once, so a concurrent :meth:`register` never changes the set of
    interceptors seen midway through a single run.
    """

    def __init__(self, interceptors: Iterable[IMessageInterceptor] = ()) -> None:
        self._lock = threading.Lock()
        self._interceptors: tuple[IMessageInterceptor, ...] = tuple(interceptors)

    # ── Registration ─────────────────────────────────────────────

    def register(self, interceptor: IMessageInterceptor) -> None:
        """Append *interceptor* to the end of the pipeline."""
        with self._lock:
            self._interceptors = (*self._interceptors, interceptor)
        logger.debug(
            "Registered interceptor %s (position=%d)",
            type(interceptor).__name__,
            len(self._interceptors),
        )

    def clear(self) -> None:
        """Remove every interceptor."""
        with self._lock:
            self._interceptors = ()

    @property
    def interceptors(self) -> tuple[IMessageInterceptor, ...]:
        return self._interceptors

    def __len__(self) -> int:
        return len(self._interceptors)

    # ── Execution ────────────────────────────────────────────────

    def invoke_before(self, message: Message) -> Message:
        return _run_before(self._interceptors, message)

    def invoke_after(self, message: Message) -> Message:
        return _run_after(self._interceptors, message)

    def run(self, message: Message, render: Callable[[Message], T]) -> T:
        """Run ``before`` hooks, *render*, then ``after`` hooks.

        Returns whatever *render* produced.
        """
        interceptors = self._interceptors
        if not interceptors:
            return render(message)
        prepared = _run_before(interceptors, message)
        output = render(prepared)
        _run_after(interceptors, prepared)
        return output


def _run_before(
    interceptors: tuple[IMessageInterceptor, ...], message: Message
) -> Message:
    result = message
    for interceptor in interceptors:
        result = interceptor.on_before_format(result)
    return result


def _run_after(
    interceptors: tuple[IMessageInterceptor, ...], message: Message
) -> Message:
    result = message
    for interceptor in interceptors:
        result = interceptor.on_after_format(result)
    return result
