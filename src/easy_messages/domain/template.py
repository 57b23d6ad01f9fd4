"""MessageTemplate — static definition behind a message code."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .message import Message
from .message_type import MessageType

_REQUIRED_FIELDS = ("type", "title", "description")


class MessageTemplate(BaseModel):
    """Template for a single message code.

    Every field is optional so that a custom source may carry a *partial*
    template that only overrides some fields of a lower-priority layer.
    A template is **complete** once type, title and description are all
    present; only complete templates are published by the registry.

    Field names follow the camelCase catalog format on input
    (``httpStatusCode``) and snake_case in Python.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: MessageType | None = None
    title: str | None = None
    description: str | None = None
    hint: str | None = None
    http_status_code: int | None = Field(default=None, alias="httpStatusCode")

    # ── Layering ─────────────────────────────────────────────────

    def merged_onto(self, base: MessageTemplate) -> MessageTemplate:
        """Return *base* with every field this template sets overridden."""
        return base.model_copy(update=self.model_dump(exclude_none=True))

    def missing_fields(self) -> list[str]:
        """Names of required fields that are absent or empty."""
        return [name for name in _REQUIRED_FIELDS if not getattr(self, name)]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    # ── Materialization ──────────────────────────────────────────

    @property
    def resolved_status_code(self) -> int | None:
        """Explicit status if set, otherwise the severity default."""
        if self.http_status_code is not None:
            return self.http_status_code
        if self.type is None:
            return None
        return self.type.default_status_code

    def to_message(self, code: str) -> Message:
        """Instantiate a :class:`Message` bound to *code*."""
        status_code = self.resolved_status_code
        if (
            self.type is None
            or status_code is None
            or not self.title
            or not self.description
        ):
            msg = (
                f"Template for {code!r} is incomplete, "
                f"missing: {', '.join(self.missing_fields())}"
            )
            raise ValueError(msg)

        return Message(
            code=code,
            type=self.type,
            title=self.title,
            description=self.description,
            hint=self.hint,
            status_code=status_code,
        )
