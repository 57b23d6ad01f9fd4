"""Message — immutable, enrichable instantiation of a template."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..primitives.exceptions import InvalidMessageParametersError
from ..substitution import substitute
from .message_type import MessageType


class Message(BaseModel):
    """A resolved message bound to a code.

    Messages are frozen. Every ``with_*`` method returns a **new** message
    and leaves the receiver untouched; the ``metadata`` and ``parameters``
    maps are copied on every derivation so two messages never share them.

    ``status_code`` is resolved once when the message is built from its
    template. Only :meth:`with_status_code` changes it afterwards, so an
    explicit status wins regardless of where it sits in the chain.

    Usage::

        msg = (
            registry.get("CRUD_001")
            .with_params(resource="User")
            .with_data({"id": 42})
            .with_correlation_id("req-1")
        )
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    code: str = Field(min_length=1)
    type: MessageType
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    status_code: int
    hint: str | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    correlation_id: str | None = None
    data: Any = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    parameters: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.type.is_success

    # ── Enrichment ───────────────────────────────────────────────

    def with_params(
        self, values: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> Message:
        """Substitute ``{name}`` placeholders in title and description.

        Accepts a mapping, keyword arguments, or both (keywords win).
        """
        _check_mapping(values)
        params: dict[str, Any] = dict(values or {})
        params.update(kwargs)
        non_str = [repr(k) for k in params if not isinstance(k, str)]
        if non_str:
            msg = f"Parameter names must be strings: {', '.join(non_str)}"
            raise InvalidMessageParametersError(msg)

        return self._derive(
            title=substitute(self.title, params),
            description=substitute(self.description, params),
            parameters={**self.parameters, **params},
        )

    def with_params_if_provided(
        self, values: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> Message:
        """Like :meth:`with_params` but ignores ``None`` values.

        Returns the receiver itself when nothing is left to apply.
        """
        _check_mapping(values)
        params = {**(values or {}), **kwargs}
        provided = {k: v for k, v in params.items() if v is not None}
        if not provided:
            return self
        return self.with_params(provided)

    def with_data(self, data: Any) -> Message:
        return self._derive(data=data)

    def with_correlation_id(self, correlation_id: str | None) -> Message:
        return self._derive(correlation_id=correlation_id)

    def with_metadata(self, key: str, value: Any) -> Message:
        """Return a copy with *key* set in the metadata map."""
        metadata = dict(self.metadata)
        metadata[key] = value
        return self._derive(metadata=metadata)

    def with_metadata_items(self, items: Mapping[str, Any]) -> Message:
        """Return a copy with every entry of *items* merged into metadata."""
        return self._derive(metadata={**self.metadata, **items})

    def with_status_code(self, status_code: int) -> Message:
        return self._derive(status_code=status_code)

    def with_hint(self, hint: str | None) -> Message:
        return self._derive(hint=hint)

    # ── Internals ────────────────────────────────────────────────

    def _derive(self, **changes: Any) -> Message:
        update: dict[str, Any] = {
            "metadata": dict(self.metadata),
            "parameters": dict(self.parameters),
        }
        update.update(changes)
        return self.model_copy(update=update)


def _check_mapping(values: object) -> None:
    if values is not None and not isinstance(values, Mapping):
        msg = (
            "Message parameters must be a mapping of names to values, "
            f"got {type(values).__name__}"
        )
        raise InvalidMessageParametersError(msg)
