"""EmbeddedMessageSource — catalog shipped as package data."""

from __future__ import annotations

from importlib import resources
from typing import TYPE_CHECKING

from ..primitives.exceptions import SourceLoadError
from .catalog import parse_catalog_text

if TYPE_CHECKING:
    from ..domain.template import MessageTemplate

DEFAULT_PACKAGE = "easy_messages"
DEFAULT_RESOURCE = "data/defaults.json"


class EmbeddedMessageSource:
    """Loads the catalog bundled inside a package.

    With no arguments this is the built-in defaults catalog.
    """

    def __init__(
        self, package: str = DEFAULT_PACKAGE, resource: str = DEFAULT_RESOURCE
    ) -> None:
        self._package = package
        self._resource = resource

    def describe(self) -> str:
        return f"embedded resource '{self._package}/{self._resource}'"

    def load(self) -> dict[str, MessageTemplate]:
        try:
            text = (
                resources.files(self._package)
                .joinpath(self._resource)
                .read_text(encoding="utf-8")
            )
        except (ModuleNotFoundError, OSError) as exc:
            reason = f"resource not readable ({exc})"
            raise SourceLoadError(self.describe(), reason) from exc
        return parse_catalog_text(text, source=self.describe())
