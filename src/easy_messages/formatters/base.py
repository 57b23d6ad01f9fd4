"""InterceptedFormatter — runs the interceptor pipeline around a formatter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..domain.message import Message
    from ..interceptors.pipeline import InterceptorPipeline
    from ..ports.formatter import IMessageFormatter


class InterceptedFormatter:
    """Composes a formatter with an :class:`InterceptorPipeline`.

    ``before`` hooks run ahead of field extraction, ``after`` hooks once
    the output exists. A formatter used on its own, without this wrapper,
    never triggers interceptors.
    """

    def __init__(self, inner: IMessageFormatter, pipeline: InterceptorPipeline) -> None:
        self.inner = inner
        self.pipeline = pipeline

    def format(self, message: Message) -> str:
        return self.pipeline.run(message, self.inner.format)

    def format_as_object(self, message: Message) -> Any:
        return self.pipeline.run(message, self.inner.format_as_object)

    def __repr__(self) -> str:
        return f"InterceptedFormatter({self.inner!r})"
