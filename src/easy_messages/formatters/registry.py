"""FormatterRegistry — name-keyed formatter factories."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from ..interceptors.pipeline import InterceptorPipeline
from ..primitives.exceptions import FormatterNotFoundError
from .base import InterceptedFormatter
from .console import ConsoleFormatter
from .json import JsonFormatter
from .log import LogFormatter
from .options import FormatterOptions
from .text import PlainTextFormatter
from .xml import XmlFormatter

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.formatter import IMessageFormatter

    FormatterFactory = Callable[[], IMessageFormatter]

logger = logging.getLogger(__name__)

BUILTIN_FORMATTERS: tuple[str, ...] = ("json", "xml", "text", "console", "log")


class FormatterRegistry:
    """Maps case-sensitive names to formatter factories.

    ``json``, ``xml``, ``text``, ``console`` and ``log`` are registered on
    construction, wrapped in :class:`InterceptedFormatter` so they run the
    registry's interceptor pipeline. Custom formatters choose explicitly
    with ``intercepted=``; the default is to bypass interceptors.

    Mutation (registration, typically at startup) takes a lock and swaps
    in a new dict; lookups read the current dict without locking.

    Usage::

        formatters = FormatterRegistry(pipeline)
        formatters.register("csv", CsvFormatter, intercepted=True)
        formatters.register_singleton("fast", FastFormatter())

        text = formatters.get("json").format(message)
    """

    def __init__(
        self,
        pipeline: InterceptorPipeline | None = None,
        options: FormatterOptions | None = None,
    ) -> None:
        self.pipeline = pipeline if pipeline is not None else InterceptorPipeline()
        self.options = options or FormatterOptions()
        self._lock = threading.Lock()
        self._factories: dict[str, FormatterFactory] = self._builtin_factories()

    # ── Registration ─────────────────────────────────────────────

    def register(
        self,
        name: str,
        factory: Callable[[], IMessageFormatter],
        *,
        intercepted: bool = False,
    ) -> None:
        """Register *factory*; :meth:`get` builds a new instance per call."""
        if intercepted:
            factory = self._intercepting(factory)
        self._store(name, factory)
        logger.debug("Registered formatter %r (intercepted=%s)", name, intercepted)

    def register_singleton(
        self,
        name: str,
        instance: IMessageFormatter,
        *,
        intercepted: bool = False,
    ) -> None:
        """Register a shared *instance* returned by every :meth:`get`."""
        shared: IMessageFormatter = (
            InterceptedFormatter(instance, self.pipeline) if intercepted else instance
        )
        self._store(name, lambda: shared)
        logger.debug(
            "Registered singleton formatter %r (intercepted=%s)", name, intercepted
        )

    def add(
        self, name: str, *, intercepted: bool = False
    ) -> Callable[[type[Any]], type[Any]]:
        """Decorator-style registration of a formatter class.

        Usage::

            @formatters.add("yaml", intercepted=True)
            class YamlFormatter: ...
        """

        def wrapper(cls: type[Any]) -> type[Any]:
            self.register(name, cls, intercepted=intercepted)
            return cls

        return wrapper

    # ── Retrieval ────────────────────────────────────────────────

    def get(self, name: str) -> IMessageFormatter:
        """Return the formatter registered under *name*.

        Raises :class:`FormatterNotFoundError` listing the known names.
        """
        factories = self._factories
        factory = factories.get(name)
        if factory is None:
            raise FormatterNotFoundError(name, factories.keys())
        return factory()

    def is_registered(self, name: str) -> bool:
        return name in self._factories

    def registered_names(self) -> list[str]:
        return sorted(self._factories)

    # ── Cleanup ──────────────────────────────────────────────────

    def clear_custom(self) -> None:
        """Drop every custom registration and restore the built-ins."""
        with self._lock:
            self._factories = self._builtin_factories()

    # ── Internals ────────────────────────────────────────────────

    def _store(self, name: str, factory: FormatterFactory) -> None:
        if not name:
            msg = "Formatter name must be a non-empty string"
            raise ValueError(msg)
        with self._lock:
            self._factories = {**self._factories, name: factory}

    def _intercepting(self, factory: FormatterFactory) -> FormatterFactory:
        pipeline = self.pipeline

        def build() -> IMessageFormatter:
            return InterceptedFormatter(factory(), pipeline)

        return build

    def _builtin_factories(self) -> dict[str, FormatterFactory]:
        options = self.options
        plain: dict[str, FormatterFactory] = {
            "json": lambda: JsonFormatter(options),
            "xml": lambda: XmlFormatter(options),
            "text": lambda: PlainTextFormatter(options),
            "console": ConsoleFormatter,
            "log": LogFormatter,
        }
        return {name: self._intercepting(factory) for name, factory in plain.items()}
