"""MessagingContext — composition root tying registry, pipeline and formatters."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from .formatters.registry import FormatterRegistry
from .interceptors.correlation import CorrelationIdInterceptor
from .interceptors.logging import LoggingInterceptor
from .interceptors.metadata import MetadataEnrichmentInterceptor
from .interceptors.pipeline import InterceptorPipeline
from .registry import MessageRegistry
from .sources.file import FileMessageSource
from .sources.memory import InMemoryMessageSource

if TYPE_CHECKING:
    from .config import MessagingConfig
    from .domain.message import Message
    from .formatters.options import FormatterOptions
    from .ports.source import IMessageSource

logger = logging.getLogger(__name__)


class MessagingContext:
    """Owns the three process-wide stores: templates, interceptors, formatters.

    The stores are independent; no operation spans two of them atomically.
    Build one context at startup and pass it to the code that needs it.

    Usage::

        ctx = MessagingContext.from_config(MessagingConfig(
            custom_message_paths=[Path("messages.json")],
        ))
        msg = ctx.get("CRUD_001").with_params(resource="User")
        body = ctx.format(msg, "json")
    """

    def __init__(
        self,
        registry: MessageRegistry | None = None,
        pipeline: InterceptorPipeline | None = None,
        formatters: FormatterRegistry | None = None,
        *,
        formatter_options: FormatterOptions | None = None,
    ) -> None:
        self.registry = registry if registry is not None else MessageRegistry()
        if formatters is not None:
            self.pipeline = formatters.pipeline
            self.formatters = formatters
        else:
            self.pipeline = pipeline if pipeline is not None else InterceptorPipeline()
            self.formatters = FormatterRegistry(self.pipeline, formatter_options)

    @classmethod
    def from_config(cls, config: MessagingConfig) -> MessagingContext:
        """Build a context, load custom sources and register interceptors."""
        ctx = cls(formatter_options=config.formatter_options)

        sources: list[IMessageSource] = [
            FileMessageSource(path) for path in config.custom_message_paths
        ]
        if config.custom_messages:
            sources.append(InMemoryMessageSource(config.custom_messages))
        if sources:
            ctx.registry.configure(*sources)

        if config.auto_correlation_id:
            ctx.pipeline.register(CorrelationIdInterceptor())
        if config.enrich_metadata:
            ctx.pipeline.register(MetadataEnrichmentInterceptor(config.enrich_metadata))
        if config.auto_log:
            ctx.pipeline.register(
                LoggingInterceptor(minimum_level=config.minimum_log_level)
            )

        logger.debug(
            "Messaging context ready: %d source(s), %d interceptor(s)",
            len(sources),
            len(ctx.pipeline),
        )
        return ctx

    # ── Shortcuts ────────────────────────────────────────────────

    def get(self, code: str) -> Message:
        return self.registry.get(code)

    def format(self, message: Message, formatter: str = "json") -> str:
        return self.formatters.get(formatter).format(message)

    def format_as_object(self, message: Message, formatter: str = "json") -> Any:
        return self.formatters.get(formatter).format_as_object(message)


_default_context: MessagingContext | None = None
_default_lock = threading.Lock()


def get_default_context() -> MessagingContext:
    """Return the process default context, creating it on first access.

    Nothing in this package reads the default implicitly; it exists for
    applications that prefer a single shared context over passing one.
    """
    global _default_context
    ctx = _default_context
    if ctx is None:
        with _default_lock:
            if _default_context is None:
                _default_context = MessagingContext()
            ctx = _default_context
    return ctx


def set_default_context(context: MessagingContext | None) -> None:
    """Replace the process default context (``None`` resets it)."""
    global _default_context
    with _default_lock:
        _default_context = context
