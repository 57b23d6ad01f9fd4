"""CompositeMessageSource — ordered stack of sources."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.template import MessageTemplate
    from ..ports.source import IMessageSource

logger = logging.getLogger(__name__)


class CompositeMessageSource:
    """Combines several sources; later sources have higher priority.

    For a code defined by more than one child, the **last** child's whole
    template wins. No field-level merging happens at this layer. A failure
    in any child fails the whole load.

    Usage::

        source = CompositeMessageSource(
            EmbeddedMessageSource(),          # lowest priority
            FileMessageSource("team.json"),
            FileMessageSource("local.json"),  # highest priority
        )
    """

    def __init__(self, *sources: IMessageSource) -> None:
        self.sources: tuple[IMessageSource, ...] = tuple(sources)

    def describe(self) -> str:
        inner = ", ".join(source.describe() for source in self.sources)
        return f"composite [{inner}]"

    def load(self) -> dict[str, MessageTemplate]:
        merged: dict[str, MessageTemplate] = {}
        for source in self.sources:
            templates = source.load()
            overridden = merged.keys() & templates.keys()
            if overridden:
                logger.debug(
                    "%s overrides %d code(s) from earlier sources",
                    source.describe(),
                    len(overridden),
                )
            merged.update(templates)
        return merged
