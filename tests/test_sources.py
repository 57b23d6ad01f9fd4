from __future__ import annotations

import json
from typing import Any

import pytest

from easy_messages.codes import MessageCodes
from easy_messages.domain import MessageTemplate, MessageType
from easy_messages.primitives.exceptions import SourceLoadError
from easy_messages.sources import (
    CompositeMessageSource,
    DatabaseMessageSource,
    EmbeddedMessageSource,
    FileMessageSource,
    InMemoryMessageSource,
    parse_catalog_text,
)


def _write(tmp_path, name: str, payload: Any) -> str:
    path = tmp_path / name
    text = payload if isinstance(payload, str) else json.dumps(payload)
    path.write_text(text, encoding="utf-8")
    return str(path)


# ── Catalog parsing ──────────────────────────────────────────────


def test_simple_layout() -> None:
    templates = parse_catalog_text(
        '{"A_1": {"type": "Info", "title": "T", "description": "D"}}', source="t"
    )
    assert templates["A_1"].type is MessageType.INFO


def test_full_layout_with_schema_and_version() -> None:
    text = json.dumps(
        {
            "$schema": "https://example.invalid/schema.json",
            "version": "1.0",
            "messages": {"A_1": {"title": "T"}},
        }
    )
    assert list(parse_catalog_text(text, source="t")) == ["A_1"]


def test_comment_keys_are_skipped() -> None:
    text = json.dumps({"_note": "ignored", "A_1": {"title": "T"}})
    assert list(parse_catalog_text(text, source="t")) == ["A_1"]


@pytest.mark.parametrize("typo", ["message", "mssages", "mesages"])
def test_messages_typo_is_reported(typo: str) -> None:
    with pytest.raises(SourceLoadError, match="did you mean 'messages'"):
        parse_catalog_text(json.dumps({typo: {}}), source="t")


def test_malformed_json_names_source_and_position() -> None:
    with pytest.raises(SourceLoadError) as exc_info:
        parse_catalog_text('{"A_1": {', source="file 'bad.json'")
    assert "bad.json" in str(exc_info.value)
    assert "line 1" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


def test_root_must_be_object() -> None:
    with pytest.raises(SourceLoadError, match="JSON object"):
        parse_catalog_text("[1, 2]", source="t")


def test_messages_property_must_be_object() -> None:
    with pytest.raises(SourceLoadError, match="'messages' property"):
        parse_catalog_text('{"messages": []}', source="t")


def test_empty_document_is_rejected() -> None:
    with pytest.raises(SourceLoadError, match="empty"):
        parse_catalog_text("   ", source="t")
    with pytest.raises(SourceLoadError, match="no message definitions"):
        parse_catalog_text("{}", source="t")


def test_every_invalid_entry_is_reported() -> None:
    text = json.dumps(
        {
            "OK_1": {"title": "fine"},
            "BAD_1": "not an object",
            "BAD_2": {"type": "fatal"},
        }
    )
    with pytest.raises(SourceLoadError) as exc_info:
        parse_catalog_text(text, source="t")
    errors = exc_info.value.errors
    assert len(errors) == 2
    assert any("BAD_1" in e for e in errors)
    assert any("BAD_2" in e for e in errors)


# ── File ─────────────────────────────────────────────────────────


def test_file_source_loads(tmp_path) -> None:
    path = _write(tmp_path, "m.json", {"A_1": {"title": "T", "hint": "H"}})
    templates = FileMessageSource(path).load()
    assert templates["A_1"].hint == "H"


def test_missing_file_fails_with_path(tmp_path) -> None:
    source = FileMessageSource(tmp_path / "nope.json")
    with pytest.raises(SourceLoadError, match="nope.json") as exc_info:
        source.load()
    assert exc_info.value.reason == "file not found"
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


# ── In-memory ────────────────────────────────────────────────────


def test_in_memory_accepts_templates_and_raw_objects() -> None:
    source = InMemoryMessageSource(
        {
            "A_1": MessageTemplate(title="model"),
            "A_2": {"title": "raw", "httpStatusCode": 418},
        }
    )
    templates = source.load()
    assert templates["A_1"].title == "model"
    assert templates["A_2"].http_status_code == 418


def test_in_memory_copies_input() -> None:
    data: dict[str, Any] = {"A_1": {"title": "before"}}
    source = InMemoryMessageSource(data)
    data["A_1"]["title"] = "after"
    data["A_2"] = {"title": "late"}

    templates = source.load()
    assert templates["A_1"].title == "before"
    assert "A_2" not in templates


def test_in_memory_empty_is_allowed() -> None:
    assert InMemoryMessageSource({}).load() == {}


# ── Composite ────────────────────────────────────────────────────


def test_composite_last_source_wins_whole_template() -> None:
    s1 = InMemoryMessageSource({"X": {"title": "1", "hint": "from s1"}})
    s2 = InMemoryMessageSource({"X": {"title": "2"}})

    templates = CompositeMessageSource(s1, s2).load()
    assert templates["X"].title == "2"
    assert templates["X"].hint is None


def test_composite_unions_codes() -> None:
    s1 = InMemoryMessageSource({"A": {"title": "a"}})
    s2 = InMemoryMessageSource({"B": {"title": "b"}})
    assert set(CompositeMessageSource(s1, s2).load()) == {"A", "B"}


def test_composite_fails_when_any_child_fails(tmp_path) -> None:
    good = InMemoryMessageSource({"A": {"title": "a"}})
    bad = FileMessageSource(tmp_path / "missing.json")
    with pytest.raises(SourceLoadError, match="missing.json"):
        CompositeMessageSource(good, bad).load()


def test_composite_describe_lists_children() -> None:
    composite = CompositeMessageSource(FileMessageSource("a.json"))
    assert "a.json" in composite.describe()


# ── Database ─────────────────────────────────────────────────────


class _RowsSource(DatabaseMessageSource):
    def __init__(self, rows: list[dict[str, Any]]) -> None:
        self.rows = rows

    def fetch_rows(self) -> list[dict[str, Any]]:
        return self.rows


class _BrokenSource(DatabaseMessageSource):
    def fetch_rows(self) -> list[dict[str, Any]]:
        msg = "connection refused"
        raise ConnectionError(msg)


def test_database_source_maps_rows() -> None:
    source = _RowsSource(
        [
            {"code": "DB_X", "type": "error", "title": "T", "description": "D",
             "hint": None, "http_status_code": 503},
        ]
    )
    template = source.load()["DB_X"]
    assert template.http_status_code == 503
    assert template.hint is None


def test_database_fetch_failure_becomes_source_load_error() -> None:
    with pytest.raises(SourceLoadError, match="connection refused") as exc_info:
        _BrokenSource().load()
    assert isinstance(exc_info.value.__cause__, ConnectionError)
    assert "_BrokenSource" in exc_info.value.source


def test_database_row_without_code_is_rejected() -> None:
    with pytest.raises(SourceLoadError, match="non-empty strings"):
        _RowsSource([{"title": "orphan"}]).load()


# ── Embedded ─────────────────────────────────────────────────────


def test_embedded_defaults_are_complete() -> None:
    templates = EmbeddedMessageSource().load()
    assert {"AUTH_001", "CRUD_001", "VAL_001", "SYS_001"} <= templates.keys()
    assert all(t.is_complete for t in templates.values())


def test_embedded_missing_resource() -> None:
    with pytest.raises(SourceLoadError, match="nope.json"):
        EmbeddedMessageSource(resource="data/nope.json").load()


def test_every_message_code_constant_has_a_default() -> None:
    templates = EmbeddedMessageSource().load()
    constants = {
        value for name, value in vars(MessageCodes).items() if name.isupper()
    }
    assert constants
    assert constants <= templates.keys()


def test_embedded_defaults_cover_every_family() -> None:
    families = {code.split("_")[0] for code in EmbeddedMessageSource().load()}
    assert families == {
        "AUTH", "CRUD", "VAL", "SYS", "DB", "FILE",
        "NET", "PAY", "EMAIL", "SEARCH", "IMPORT", "EXPORT",
    }
