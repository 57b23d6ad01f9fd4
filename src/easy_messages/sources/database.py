"""DatabaseMessageSource — base for catalogs stored in a database."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import SourceLoadError
from .catalog import parse_entries

if TYPE_CHECKING:
    from ..domain.template import MessageTemplate


class DatabaseMessageSource(ABC):
    """Abstract source backed by a table of message rows.

    Subclasses implement :meth:`fetch_rows` with whatever driver they
    use. Each row is a mapping holding a code column (``code`` by
    default) plus catalog columns, either camelCase (``httpStatusCode``)
    or snake_case (``http_status_code``). Rows are read once per load.
    """

    code_column: str = "code"

    @abstractmethod
    def fetch_rows(self) -> Iterable[Mapping[str, Any]]:
        """Return every message row."""
        ...

    def describe(self) -> str:
        return f"database source {type(self).__name__}"

    def load(self) -> dict[str, MessageTemplate]:
        try:
            rows = list(self.fetch_rows())
        except SourceLoadError:
            raise
        except Exception as exc:  # noqa: BLE001
            reason = f"fetching rows failed ({exc})"
            raise SourceLoadError(self.describe(), reason) from exc

        entries: dict[Any, Any] = {}
        for row in rows:
            fields = dict(row)
            code = fields.pop(self.code_column, None)
            entries[code] = {k: v for k, v in fields.items() if v is not None}
        return parse_entries(entries, source=self.describe())
