"""FileMessageSource — catalog read from a JSON file on disk."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ..primitives.exceptions import SourceLoadError
from .catalog import parse_catalog_text

if TYPE_CHECKING:
    import os

    from ..domain.template import MessageTemplate


class FileMessageSource:
    """Loads templates from a JSON catalog file.

    The file is read once per :meth:`load`; the source keeps no handle
    open between loads.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def describe(self) -> str:
        return f"file '{self.path}'"

    def load(self) -> dict[str, MessageTemplate]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise SourceLoadError(self.describe(), "file not found") from exc
        except (OSError, UnicodeDecodeError) as exc:
            reason = f"file could not be read ({exc})"
            raise SourceLoadError(self.describe(), reason) from exc
        return parse_catalog_text(text, source=self.describe())
