"""Catalog parsing shared by every message source."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..domain.template import MessageTemplate
from ..primitives.exceptions import SourceLoadError

_MESSAGES_KEY = "messages"
_MESSAGES_TYPOS = ("message", "mssages", "mesages")


def parse_catalog_text(text: str, *, source: str) -> dict[str, MessageTemplate]:
    """Parse a JSON catalog document.

    Two layouts are accepted: the *simple* layout with codes at the root,
    and the *full* layout ``{"$schema": ..., "version": ..., "messages": {...}}``.
    """
    if not text or not text.strip():
        raise SourceLoadError(source, "message file is empty")

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        reason = (
            f"malformed JSON ({exc.msg}) at line {exc.lineno}, column {exc.colno}"
        )
        raise SourceLoadError(source, reason) from exc

    return parse_catalog(document, source=source)


def parse_catalog(document: Any, *, source: str) -> dict[str, MessageTemplate]:
    """Parse an already-decoded catalog document (see :func:`parse_catalog_text`)."""
    if not isinstance(document, Mapping):
        raise SourceLoadError(source, "message file must be a JSON object at the root")

    if _MESSAGES_KEY in document:
        entries = document[_MESSAGES_KEY]
        if not isinstance(entries, Mapping):
            raise SourceLoadError(
                source,
                "the 'messages' property must be an object of message definitions",
            )
    else:
        typo = next((key for key in _MESSAGES_TYPOS if key in document), None)
        if typo is not None:
            raise SourceLoadError(
                source,
                f"found {typo!r}, did you mean 'messages'? Use "
                '{"messages": {...}} or put message codes at the root',
            )
        entries = document

    templates = parse_entries(entries, source=source)
    if not templates:
        raise SourceLoadError(source, "no message definitions found")
    return templates


def parse_entries(
    entries: Mapping[Any, Any], *, source: str
) -> dict[str, MessageTemplate]:
    """Turn ``code -> object`` entries into templates.

    Keys beginning with ``_`` (comments) or ``$`` (schema markers) are
    skipped. Any invalid entry fails the whole source; every offending
    code is reported at once.
    """
    templates: dict[str, MessageTemplate] = {}
    errors: list[str] = []

    for code, entry in entries.items():
        if not isinstance(code, str) or not code:
            errors.append(f"{code!r}: message codes must be non-empty strings")
            continue
        if code.startswith(("_", "$")):
            continue
        if isinstance(entry, MessageTemplate):
            templates[code] = entry
            continue
        if not isinstance(entry, Mapping):
            errors.append(
                f"{code!r}: expected an object but got {type(entry).__name__}"
            )
            continue
        try:
            templates[code] = MessageTemplate.model_validate(entry)
        except ValidationError as exc:
            errors.append(f"{code!r}: {_summarize(exc)}")

    if errors:
        raise SourceLoadError(
            source, f"{len(errors)} message(s) could not be parsed", errors
        )
    return templates


def _summarize(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors()
    )
