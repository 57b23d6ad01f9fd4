"""MessageRegistry — layered code -> template store behind an atomic snapshot."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .primitives.exceptions import (
    KNOWN_CODES_SAMPLE_SIZE,
    MessageNotFoundError,
    SourceLoadError,
)
from .sources.composite import CompositeMessageSource
from .sources.embedded import EmbeddedMessageSource
from .sources.file import FileMessageSource
from .sources.memory import InMemoryMessageSource

if TYPE_CHECKING:
    import os

    from .domain.message import Message
    from .domain.template import MessageTemplate
    from .ports.source import IMessageSource

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, MessageTemplate] = MappingProxyType({})


@dataclass(frozen=True)
class RegistrySnapshot:
    """One published, immutable view of both layers.

    Lookups check ``custom`` first and fall back to ``defaults``. Every
    template in either layer is complete.
    """

    defaults: Mapping[str, MessageTemplate]
    custom: Mapping[str, MessageTemplate] = field(default_factory=lambda: _EMPTY)
    version: int = 1
    codes: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "codes", tuple(sorted(self.defaults.keys() | self.custom.keys()))
        )

    def lookup(self, code: str) -> MessageTemplate | None:
        template = self.custom.get(code)
        if template is None:
            template = self.defaults.get(code)
        return template


class MessageRegistry:
    """Resolves message codes to :class:`Message` instances.

    The registry holds two layers: the *defaults* (lazily loaded from the
    embedded catalog on first access) and an optional *custom* layer set
    by :meth:`configure`. Both live in one immutable
    :class:`RegistrySnapshot`; reconfiguration builds a new snapshot off
    to the side and publishes it with a single reference assignment.
    Readers never lock and always see either the whole previous snapshot
    or the whole new one.

    Create one registry per application (the composition root owns it)
    and share it between threads.

    Usage::

        registry = MessageRegistry()
        registry.configure(FileMessageSource("messages.json"))

        msg = registry.get("AUTH_001").with_correlation_id("req-42")
    """

    def __init__(self, defaults: IMessageSource | None = None) -> None:
        self._defaults_source = (
            defaults if defaults is not None else EmbeddedMessageSource()
        )
        self._snapshot: RegistrySnapshot | None = None
        self._write_lock = threading.Lock()

    # ── Lookup ───────────────────────────────────────────────────

    def get(self, code: str) -> Message:
        """Return a fresh message for *code*.

        Raises :class:`MessageNotFoundError` when neither layer has it.
        """
        snapshot = self.snapshot
        template = snapshot.lookup(code)
        if template is None:
            raise MessageNotFoundError(
                code, snapshot.codes[:KNOWN_CODES_SAMPLE_SIZE]
            )
        return template.to_message(code)

    def find(self, code: str) -> Message | None:
        """Like :meth:`get` but returns ``None`` for an unknown code."""
        template = self.snapshot.lookup(code)
        if template is None:
            return None
        return template.to_message(code)

    def has(self, code: str) -> bool:
        return self.snapshot.lookup(code) is not None

    def get_template(self, code: str) -> MessageTemplate | None:
        """Return the effective (merged) template for *code*, if any."""
        return self.snapshot.lookup(code)

    def get_all_codes(self) -> list[str]:
        """Sorted, deduplicated union of default and custom codes.

        Intended for introspection and diagnostics only.
        """
        return list(self.snapshot.codes)

    @property
    def version(self) -> int:
        """Incremented every time a new snapshot is published."""
        return self.snapshot.version

    @property
    def snapshot(self) -> RegistrySnapshot:
        """The currently published snapshot (loads defaults on first use)."""
        snapshot = self._snapshot
        if snapshot is None:
            with self._write_lock:
                snapshot = self._ensure_loaded()
        return snapshot

    # ── Reconfiguration ──────────────────────────────────────────

    def configure(self, *sources: IMessageSource) -> None:
        """Replace the custom layer with the templates of *sources*.

        Multiple sources behave as a :class:`CompositeMessageSource`: for
        a code present in several of them the last one's whole template
        wins. Each resulting template is then completed field by field
        against the default template of the same code, if there is one.

        Any load failure raises :class:`SourceLoadError` and leaves the
        published snapshot untouched.
        """
        if not sources:
            msg = "configure() requires at least one message source"
            raise ValueError(msg)
        source = sources[0] if len(sources) == 1 else CompositeMessageSource(*sources)

        with self._write_lock:
            current = self._ensure_loaded()
            loaded = source.load()
            custom = self._complete(loaded, current.defaults, source)
            snapshot = RegistrySnapshot(
                defaults=current.defaults,
                custom=MappingProxyType(custom),
                version=current.version + 1,
            )
            self._snapshot = snapshot

        logger.info(
            "Published message snapshot v%d: %d custom code(s) from %s",
            snapshot.version,
            len(custom),
            source.describe(),
        )

    def load_custom_messages(
        self,
        messages: str | os.PathLike[str] | Mapping[str, Any],
    ) -> None:
        """Shortcut for :meth:`configure` with a file path or a dict."""
        if isinstance(messages, Mapping):
            if not messages:
                msg = "Custom messages mapping cannot be empty"
                raise ValueError(msg)
            self.configure(InMemoryMessageSource(messages))
        else:
            self.configure(FileMessageSource(messages))

    def reset(self) -> None:
        """Discard the custom layer, keeping the loaded defaults.

        Intended for tests. Calling it while other threads reconfigure
        the registry races with them.
        """
        with self._write_lock:
            current = self._snapshot
            if current is None:
                return
            self._snapshot = RegistrySnapshot(
                defaults=current.defaults, version=current.version + 1
            )

    # ── Internals ────────────────────────────────────────────────

    def _ensure_loaded(self) -> RegistrySnapshot:
        # Caller holds the write lock.
        snapshot = self._snapshot
        if snapshot is None:
            snapshot = RegistrySnapshot(defaults=self._load_defaults())
            self._snapshot = snapshot
        return snapshot

    def _load_defaults(self) -> Mapping[str, MessageTemplate]:
        source = self._defaults_source
        templates = source.load()
        incomplete = [
            f"{code!r}: missing {', '.join(template.missing_fields())}"
            for code, template in templates.items()
            if not template.is_complete
        ]
        if incomplete:
            raise SourceLoadError(
                source.describe(), "default templates must be complete", incomplete
            )
        logger.debug(
            "Loaded %d default message(s) from %s", len(templates), source.describe()
        )
        return MappingProxyType(dict(templates))

    @staticmethod
    def _complete(
        loaded: Mapping[str, MessageTemplate],
        defaults: Mapping[str, MessageTemplate],
        source: IMessageSource,
    ) -> dict[str, MessageTemplate]:
        completed: dict[str, MessageTemplate] = {}
        new_codes: list[str] = []
        errors: list[str] = []

        for code, template in loaded.items():
            base = defaults.get(code)
            candidate = template if base is None else template.merged_onto(base)
            missing = candidate.missing_fields()
            if missing:
                if base is None:
                    reason = "required for a code not in defaults"
                else:
                    reason = "empty after override"
                errors.append(f"{code!r}: {', '.join(missing)} {reason}")
                continue
            completed[code] = candidate
            if base is None:
                new_codes.append(code)

        if errors:
            raise SourceLoadError(
                source.describe(), "incomplete custom template(s)", errors
            )
        if new_codes:
            logger.info(
                "%d custom code(s) from %s have no default template, "
                "using them as-is: %s",
                len(new_codes),
                source.describe(),
                ", ".join(sorted(new_codes)),
            )
        return completed
