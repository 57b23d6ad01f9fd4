"""Exceptions raised by the message catalog, sources and formatters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

KNOWN_CODES_SAMPLE_SIZE = 10


class EasyMessagesError(Exception):
    """Root exception for the entire easy-messages package."""


class NotFoundError(EasyMessagesError):
    """Base class for failed lookups by key."""


class MessageNotFoundError(NotFoundError):
    """Raised when a code is absent from both the custom and default layers.

    Carries the requested code plus a bounded sample of the codes that
    *are* known, so the caller can spot typos without dumping the catalog.
    """

    def __init__(self, code: str, known_codes: Iterable[str] = ()) -> None:
        self.code = code
        self.known_codes: list[str] = list(known_codes)[:KNOWN_CODES_SAMPLE_SIZE]
        msg = f"Message code {code!r} not found in registry"
        if self.known_codes:
            msg += f". Available codes: {', '.join(self.known_codes)}..."
        super().__init__(msg)


class FormatterNotFoundError(NotFoundError):
    """Raised when no formatter is registered under the requested name."""

    def __init__(self, name: str, registered_names: Iterable[str] = ()) -> None:
        self.name = name
        self.registered_names: list[str] = sorted(registered_names)
        super().__init__(
            f"Formatter {name!r} not found. "
            f"Available: {', '.join(self.registered_names) or '<none>'}"
        )


class SourceLoadError(EasyMessagesError):
    """Raised when a message source is unreadable or holds malformed data.

    ``source`` describes the offending source (a path, a resource name or
    the source class); ``errors`` lists per-entry problems when the
    document itself parsed but some templates did not.
    """

    def __init__(
        self,
        source: str,
        reason: str,
        errors: list[str] | None = None,
    ) -> None:
        self.source = source
        self.reason = reason
        self.errors: list[str] = errors or []
        msg = f"Failed to load messages from {source}: {reason}"
        if self.errors:
            msg += "\n" + "\n".join(f"  - {e}" for e in self.errors)
        super().__init__(msg)


class InvalidMessageParametersError(EasyMessagesError):
    """Raised when substitution parameters are not a name -> value mapping."""
