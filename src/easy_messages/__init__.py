"""easy-messages — code-keyed message catalog with pluggable formatting.

Resolve symbolic codes such as ``"AUTH_001"`` into immutable messages,
enrich them, and render them as JSON, XML, text or console output with
interceptors running around formatting. Depends only on pydantic.
"""

from __future__ import annotations

# ── Catalog ──────────────────────────────────────────────────────
from .codes import MessageCodes
from .config import MessagingConfig
from .context import MessagingContext, get_default_context, set_default_context
from .correlation import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

# ── Domain ───────────────────────────────────────────────────────
from .domain import Message, MessageTemplate, MessageType

# ── Formatters ───────────────────────────────────────────────────
from .formatters import (
    BUILTIN_FORMATTERS,
    ConsoleFormatter,
    FormatterOptions,
    FormatterRegistry,
    InterceptedFormatter,
    JsonFormatter,
    LogFormatter,
    PlainTextFormatter,
    XmlFormatter,
)

# ── Interceptors ─────────────────────────────────────────────────
from .interceptors import (
    CorrelationIdInterceptor,
    InterceptorPipeline,
    LoggingInterceptor,
    MetadataEnrichmentInterceptor,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IMessageFormatter, IMessageInterceptor, IMessageSource

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    EasyMessagesError,
    FormatterNotFoundError,
    InvalidMessageParametersError,
    MessageNotFoundError,
    NotFoundError,
    SourceLoadError,
)
from .registry import MessageRegistry, RegistrySnapshot

# ── Sources ──────────────────────────────────────────────────────
from .sources import (
    CompositeMessageSource,
    DatabaseMessageSource,
    EmbeddedMessageSource,
    FileMessageSource,
    InMemoryMessageSource,
)
from .substitution import substitute

__all__: list[str] = [
    # Catalog
    "MessageCodes",
    "MessageRegistry",
    "RegistrySnapshot",
    "MessagingConfig",
    "MessagingContext",
    "get_default_context",
    "set_default_context",
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    "substitute",
    # Domain
    "Message",
    "MessageTemplate",
    "MessageType",
    # Sources
    "CompositeMessageSource",
    "DatabaseMessageSource",
    "EmbeddedMessageSource",
    "FileMessageSource",
    "InMemoryMessageSource",
    # Formatters
    "BUILTIN_FORMATTERS",
    "ConsoleFormatter",
    "FormatterOptions",
    "FormatterRegistry",
    "InterceptedFormatter",
    "JsonFormatter",
    "LogFormatter",
    "PlainTextFormatter",
    "XmlFormatter",
    # Interceptors
    "CorrelationIdInterceptor",
    "InterceptorPipeline",
    "LoggingInterceptor",
    "MetadataEnrichmentInterceptor",
    # Ports
    "IMessageFormatter",
    "IMessageInterceptor",
    "IMessageSource",
    # Primitives
    "EasyMessagesError",
    "FormatterNotFoundError",
    "InvalidMessageParametersError",
    "MessageNotFoundError",
    "NotFoundError",
    "SourceLoadError",
]
