"""XmlFormatter — ``<message>`` document rendering."""

from __future__ import annotations

import dataclasses
import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from .options import FormatterOptions

if TYPE_CHECKING:
    from ..domain.message import Message

_INVALID_NAME_CHARS = re.compile(r"[^A-Za-z0-9_.\-]")


class XmlFormatter:
    """Renders a message as an XML element.

    ``format_as_object`` returns the :class:`xml.etree.ElementTree.Element`;
    ``format`` serializes it. Mappings, pydantic models and dataclasses
    in ``data``/``metadata`` become nested elements; keys that are not
    valid XML names are sanitized.
    """

    def __init__(self, options: FormatterOptions | None = None) -> None:
        self.options = options or FormatterOptions()

    def format(self, message: Message) -> str:
        return ET.tostring(self.format_as_object(message), encoding="unicode")

    def format_as_object(self, message: Message) -> ET.Element:
        opts = self.options
        root = ET.Element(
            "message",
            {
                "code": message.code,
                "type": message.type.value,
                "success": _text(message.is_success),
            },
        )
        if opts.include_timestamp:
            root.set("timestamp", message.timestamp.isoformat())
        if opts.include_correlation_id and message.correlation_id:
            root.set("correlationId", message.correlation_id)

        ET.SubElement(root, "title").text = message.title
        ET.SubElement(root, "description").text = message.description

        if opts.include_hint and message.hint:
            ET.SubElement(root, "hint").text = message.hint

        if opts.include_parameters and message.parameters:
            _append(root, "parameters", message.parameters)

        if opts.include_data and message.data is not None:
            _append(root, "data", message.data)

        if opts.include_metadata:
            metadata = ET.Element("metadata")
            if opts.include_status_code:
                status = ET.SubElement(metadata, "httpStatusCode")
                status.text = str(message.status_code)
            for key, value in message.metadata.items():
                _append(metadata, key, value)
            if len(metadata):
                root.append(metadata)

        return root


def _append(parent: ET.Element, name: str, value: Any) -> None:
    element = ET.SubElement(parent, _element_name(name))
    value = _structure(value)
    if isinstance(value, Mapping):
        for key, child in value.items():
            _append(element, str(key), child)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for child in value:
            _append(element, "item", child)
    elif value is not None:
        element.text = _text(value)


def _structure(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _element_name(name: str) -> str:
    cleaned = _INVALID_NAME_CHARS.sub("_", name) or "_"
    starts_ok = cleaned[0].isalpha() or cleaned[0] == "_"
    if not starts_ok or cleaned.lower().startswith("xml"):
        cleaned = f"_{cleaned}"
    return cleaned
