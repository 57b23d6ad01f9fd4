"""MessagingConfig — startup options for building a messaging context."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .formatters.options import FormatterOptions


class MessagingConfig(BaseModel):
    """Options a configuration binder builds once at startup.

    Custom sources are applied in order: every path in
    ``custom_message_paths`` (as file sources), then ``custom_messages``
    (as an in-memory source). Later sources win per code.
    """

    model_config = ConfigDict(frozen=True)

    formatter_options: FormatterOptions = Field(default_factory=FormatterOptions)
    custom_message_paths: list[Path] = Field(default_factory=list)
    custom_messages: dict[str, dict[str, Any]] = Field(default_factory=dict)

    # Interceptors
    auto_correlation_id: bool = True
    enrich_metadata: dict[str, Any] = Field(default_factory=dict)
    auto_log: bool = False
    minimum_log_level: int = logging.WARNING
