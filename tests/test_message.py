from __future__ import annotations

import pytest
from pydantic import ValidationError

from easy_messages.domain import Message, MessageTemplate, MessageType
from easy_messages.primitives.exceptions import InvalidMessageParametersError


def _template(**overrides: object) -> MessageTemplate:
    fields: dict[str, object] = {
        "type": MessageType.ERROR,
        "title": "{field} problem",
        "description": "{field} is required.",
    }
    fields.update(overrides)
    return MessageTemplate(**fields)


def _message() -> Message:
    return _template().to_message("VAL_002")


# ── Status precedence ────────────────────────────────────────────


def test_status_defaults_from_severity() -> None:
    assert _template().to_message("X").status_code == 400
    assert _template(type=MessageType.CRITICAL).to_message("X").status_code == 500
    for kind in (MessageType.SUCCESS, MessageType.INFO, MessageType.WARNING):
        assert _template(type=kind).to_message("X").status_code == 200


def test_explicit_template_status_beats_severity_default() -> None:
    assert _template(http_status_code=418).to_message("X").status_code == 418


def test_with_status_code_wins_regardless_of_order() -> None:
    for template in (_template(), _template(http_status_code=418)):
        msg = template.to_message("X")
        early = msg.with_status_code(402).with_params(field="a").with_data({"k": 1})
        late = msg.with_params(field="a").with_data({"k": 1}).with_status_code(402)
        assert early.status_code == 402
        assert late.status_code == 402


# ── Immutability ─────────────────────────────────────────────────


def test_with_methods_leave_receiver_unchanged() -> None:
    msg = _message().with_metadata("a", 1)
    before = msg.model_dump()

    msg.with_params(field="Email")
    msg.with_data({"id": 1})
    msg.with_correlation_id("cid")
    msg.with_metadata("b", 2)
    msg.with_metadata_items({"c": 3})
    msg.with_status_code(499)
    msg.with_hint("hint")

    assert msg.model_dump() == before


def test_derived_messages_do_not_share_metadata() -> None:
    first = _message().with_metadata("a", 1)
    second = first.with_data("payload")

    assert second.metadata == first.metadata
    assert second.metadata is not first.metadata
    second.metadata["leak"] = True
    assert "leak" not in first.metadata


def test_message_is_frozen() -> None:
    msg = _message()
    with pytest.raises(ValidationError):
        msg.title = "changed"  # type: ignore[misc]


def test_timestamp_is_preserved_by_enrichment() -> None:
    msg = _message()
    assert msg.with_data(1).timestamp == msg.timestamp
    assert msg.timestamp.tzinfo is not None


def test_metadata_is_never_null() -> None:
    assert _message().metadata == {}


# ── Parameters ───────────────────────────────────────────────────


def test_with_params_substitutes_title_and_description() -> None:
    msg = _message().with_params({"Field": "Email"})
    assert msg.title == "Email problem"
    assert msg.description == "Email is required."
    assert msg.parameters == {"Field": "Email"}


def test_with_params_accepts_keywords() -> None:
    msg = _message().with_params(field="Name")
    assert msg.description == "Name is required."


def test_with_params_rejects_non_mapping() -> None:
    with pytest.raises(InvalidMessageParametersError):
        _message().with_params(["field", "Email"])  # type: ignore[arg-type]


def test_with_params_rejects_non_string_names() -> None:
    with pytest.raises(InvalidMessageParametersError, match="strings"):
        _message().with_params({1: "x"})  # type: ignore[dict-item]


def test_with_params_if_provided_skips_none() -> None:
    msg = _message()
    assert msg.with_params_if_provided(field=None) is msg
    assert msg.with_params_if_provided(None) is msg
    applied = msg.with_params_if_provided({"field": "Email", "other": None})
    assert applied.description == "Email is required."
    assert applied.parameters == {"field": "Email"}


def test_with_params_if_provided_rejects_non_mapping() -> None:
    with pytest.raises(InvalidMessageParametersError, match="mapping"):
        pairs = [("field", "Email")]
        _message().with_params_if_provided(pairs)  # type: ignore[arg-type]


# ── Other enrichment ─────────────────────────────────────────────


def test_enrichment_fields() -> None:
    msg = (
        _message()
        .with_data({"id": 7})
        .with_correlation_id("req-1")
        .with_metadata("source", "api")
        .with_metadata_items({"region": "eu", "source": "batch"})
        .with_hint("Try again")
    )
    assert msg.data == {"id": 7}
    assert msg.correlation_id == "req-1"
    assert msg.metadata == {"source": "batch", "region": "eu"}
    assert msg.hint == "Try again"


def test_is_success() -> None:
    assert _template(type=MessageType.INFO).to_message("X").is_success
    assert not _message().is_success
