"""JsonFormatter — API-style JSON envelope."""

from __future__ import annotations

import dataclasses
import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any
from uuid import UUID

from pydantic import BaseModel

from .options import FormatterOptions

if TYPE_CHECKING:
    from ..domain.message import Message


class JsonFormatter:
    """Renders a message as a JSON envelope.

    Shape (optional keys governed by :class:`FormatterOptions`)::

        {"success": true, "code": "CRUD_001", "type": "success",
         "timestamp": "...", "correlationId": "...",
         "message": {"title": "...", "description": "...", "hint": "..."},
         "data": ..., "parameters": {...},
         "metadata": {"httpStatusCode": 200, ...}}
    """

    def __init__(
        self, options: FormatterOptions | None = None, *, indent: int | None = None
    ) -> None:
        self.options = options or FormatterOptions()
        self.indent = indent

    def format(self, message: Message) -> str:
        return json.dumps(
            self.format_as_object(message),
            default=_to_json,
            ensure_ascii=False,
            indent=self.indent,
        )

    def format_as_object(self, message: Message) -> dict[str, Any]:
        opts = self.options
        nulls = opts.include_null_fields
        result: dict[str, Any] = {
            "success": message.is_success,
            "code": message.code,
            "type": message.type.value,
        }

        if opts.include_timestamp:
            result["timestamp"] = message.timestamp

        if opts.include_correlation_id and (message.correlation_id or nulls):
            result["correlationId"] = message.correlation_id or None

        content: dict[str, Any] = {
            "title": message.title,
            "description": message.description,
        }
        if opts.include_hint and (message.hint or nulls):
            content["hint"] = message.hint or None
        result["message"] = content

        if opts.include_data and (message.data is not None or nulls):
            result["data"] = message.data

        if opts.include_parameters and (message.parameters or nulls):
            result["parameters"] = dict(message.parameters) or None

        if opts.include_metadata:
            metadata: dict[str, Any] = {}
            if opts.include_status_code:
                metadata["httpStatusCode"] = message.status_code
            metadata.update(message.metadata)
            if metadata or nulls:
                result["metadata"] = metadata or None

        return result


def _to_json(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    return str(value)
