from __future__ import annotations

from typing import Any

import pytest

from easy_messages.domain import Message, MessageType
from easy_messages.formatters import (
    BUILTIN_FORMATTERS,
    FormatterOptions,
    FormatterRegistry,
    InterceptedFormatter,
    JsonFormatter,
)
from easy_messages.interceptors import InterceptorPipeline
from easy_messages.ports import IMessageFormatter
from easy_messages.primitives.exceptions import FormatterNotFoundError


def _message() -> Message:
    return Message(
        code="T_001",
        type=MessageType.INFO,
        title="Title",
        description="Description",
        status_code=200,
    )


class UpperFormatter:
    def format(self, message: Message) -> str:
        return message.title.upper()

    def format_as_object(self, message: Message) -> Any:
        return {"title": message.title.upper()}


class TaggingInterceptor:
    def on_before_format(self, message: Message) -> Message:
        return message.model_copy(update={"title": message.title + "!"})

    def on_after_format(self, message: Message) -> Message:
        return message


@pytest.fixture
def formatters() -> FormatterRegistry:
    pipeline = InterceptorPipeline([TaggingInterceptor()])
    return FormatterRegistry(pipeline)


def test_custom_formatter_satisfies_protocol() -> None:
    assert isinstance(UpperFormatter(), IMessageFormatter)


def test_builtins_are_registered(formatters: FormatterRegistry) -> None:
    assert formatters.registered_names() == sorted(BUILTIN_FORMATTERS)
    for name in BUILTIN_FORMATTERS:
        assert isinstance(formatters.get(name), InterceptedFormatter)


def test_builtins_run_interceptors(formatters: FormatterRegistry) -> None:
    obj = formatters.get("json").format_as_object(_message())
    assert obj["message"]["title"] == "Title!"


def test_unknown_name_lists_registered(formatters: FormatterRegistry) -> None:
    with pytest.raises(FormatterNotFoundError) as exc_info:
        formatters.get("yaml")
    assert exc_info.value.name == "yaml"
    assert exc_info.value.registered_names == sorted(BUILTIN_FORMATTERS)
    assert "console, json, log, text, xml" in str(exc_info.value)


def test_names_are_case_sensitive(formatters: FormatterRegistry) -> None:
    assert not formatters.is_registered("JSON")
    with pytest.raises(FormatterNotFoundError):
        formatters.get("JSON")


def test_factory_builds_per_get(formatters: FormatterRegistry) -> None:
    formatters.register("upper", UpperFormatter)
    assert formatters.get("upper") is not formatters.get("upper")


def test_singleton_is_shared(formatters: FormatterRegistry) -> None:
    instance = UpperFormatter()
    formatters.register_singleton("upper", instance)
    assert formatters.get("upper") is instance
    assert formatters.get("upper") is instance


def test_custom_formatters_bypass_by_default(formatters: FormatterRegistry) -> None:
    formatters.register("upper", UpperFormatter)
    assert formatters.get("upper").format(_message()) == "TITLE"


def test_custom_formatters_can_opt_in(formatters: FormatterRegistry) -> None:
    formatters.register("upper", UpperFormatter, intercepted=True)
    formatters.register_singleton("shared", UpperFormatter(), intercepted=True)

    assert formatters.get("upper").format(_message()) == "TITLE!"
    assert formatters.get("shared").format(_message()) == "TITLE!"


def test_add_decorator(formatters: FormatterRegistry) -> None:
    @formatters.add("upper")
    class Decorated(UpperFormatter):
        pass

    assert isinstance(formatters.get("upper"), Decorated)


def test_register_replaces_existing(formatters: FormatterRegistry) -> None:
    formatters.register("json", UpperFormatter)
    assert formatters.get("json").format(_message()) == "TITLE"


def test_empty_name_is_rejected(formatters: FormatterRegistry) -> None:
    with pytest.raises(ValueError):
        formatters.register("", UpperFormatter)


def test_clear_custom_restores_builtins(formatters: FormatterRegistry) -> None:
    formatters.register("upper", UpperFormatter)
    formatters.register("json", UpperFormatter)

    formatters.clear_custom()

    assert not formatters.is_registered("upper")
    assert isinstance(formatters.get("json"), InterceptedFormatter)


def test_options_flow_to_builtins() -> None:
    formatters = FormatterRegistry(options=FormatterOptions.minimal())
    obj = formatters.get("json").format_as_object(_message())
    assert "timestamp" not in obj


def test_bare_formatter_repr() -> None:
    wrapped = InterceptedFormatter(JsonFormatter(), InterceptorPipeline())
    assert repr(wrapped).startswith("InterceptedFormatter(")
