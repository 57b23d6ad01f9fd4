"""Case-insensitive ``{name}`` placeholder substitution."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def substitute(text: str, values: Mapping[str, Any]) -> str:
    """Replace ``{name}`` placeholders in *text* with entries of *values*.

    Names match case-insensitively. Placeholders without a value are left
    verbatim and unused values are ignored. Values are rendered with
    ``str()`` (``None`` becomes the empty string). The text is scanned in
    a single pass, so a replacement containing braces is never expanded
    again.
    """
    if not values or "{" not in text:
        return text

    lookup = {name.casefold(): value for name, value in values.items()}

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1).casefold()
        if key not in lookup:
            return match.group(0)
        value = lookup[key]
        return "" if value is None else str(value)

    return _PLACEHOLDER.sub(_replace, text)
