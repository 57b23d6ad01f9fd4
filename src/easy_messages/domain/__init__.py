"""Domain: message types, templates and messages."""

from __future__ import annotations

from .message import Message
from .message_type import MessageType
from .template import MessageTemplate

__all__ = [
    "Message",
    "MessageTemplate",
    "MessageType",
]
