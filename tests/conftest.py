"""Shared fixtures for easy-messages tests."""

from __future__ import annotations

import pytest

from easy_messages.correlation import set_correlation_id
from easy_messages.registry import MessageRegistry
from easy_messages.sources.memory import InMemoryMessageSource

DEFAULTS = {
    "X": {
        "type": "Error",
        "title": "A",
        "description": "Default description",
        "httpStatusCode": 401,
    },
    "CRUD_001": {
        "type": "Success",
        "title": "Created",
        "description": "{resource} has been created.",
    },
    "VAL_002": {
        "type": "Error",
        "title": "Required",
        "description": "{field} is required.",
        "hint": "Fill in {field}.",
    },
    "SYS_001": {
        "type": "Critical",
        "title": "System Error",
        "description": "Something broke.",
    },
}


@pytest.fixture
def defaults_source() -> InMemoryMessageSource:
    return InMemoryMessageSource(DEFAULTS)


@pytest.fixture
def registry(defaults_source: InMemoryMessageSource) -> MessageRegistry:
    """Registry whose default layer is the small catalog above."""
    return MessageRegistry(defaults=defaults_source)


@pytest.fixture(autouse=True)
def _clear_correlation_id():
    set_correlation_id(None)
    yield
    set_correlation_id(None)
