"""FormatterOptions — field toggles shared by the structured formatters."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FormatterOptions(BaseModel):
    """Which optional fields a formatter renders.

    ``include_null_fields`` makes the JSON formatter emit enabled-but-empty
    fields as ``null`` instead of omitting them.
    """

    model_config = ConfigDict(frozen=True)

    include_timestamp: bool = True
    include_correlation_id: bool = True
    include_status_code: bool = True
    include_metadata: bool = True
    include_data: bool = True
    include_parameters: bool = True
    include_hint: bool = True
    include_null_fields: bool = False

    # ── Presets ──────────────────────────────────────────────────

    @classmethod
    def default(cls) -> FormatterOptions:
        return cls()

    @classmethod
    def minimal(cls) -> FormatterOptions:
        """Only the essentials (code, type, title, description, data)."""
        return cls(
            include_timestamp=False,
            include_correlation_id=False,
            include_status_code=False,
            include_metadata=False,
            include_parameters=False,
            include_hint=False,
        )

    @classmethod
    def verbose(cls) -> FormatterOptions:
        """Everything, including empty fields."""
        return cls(include_null_fields=True)

    @classmethod
    def debug(cls) -> FormatterOptions:
        return cls.verbose()

    @classmethod
    def production_safe(cls) -> FormatterOptions:
        """Drops fields that may carry sensitive payloads."""
        return cls(include_metadata=False, include_data=False, include_parameters=False)

    @classmethod
    def api_client(cls) -> FormatterOptions:
        return cls(
            include_timestamp=False,
            include_correlation_id=False,
            include_metadata=False,
            include_parameters=False,
        )

    @classmethod
    def logging(cls) -> FormatterOptions:
        return cls(include_data=False, include_hint=False)
