"""
Platform-agnostic notification document.

A document is an ordered list of blocks. Platform adapters translate each
block into their own message primitives.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .base import BaseModel


class TextFormat(Enum):
    """How a text object should be interpreted."""
    PLAIN = "plain_text"
    MARKDOWN = "mrkdwn"


class ButtonStyle(Enum):
    """Visual emphasis of a button."""
    DEFAULT = "default"
    PRIMARY = "primary"
    DANGER = "danger"


@dataclass(frozen=True)
class TextObject(BaseModel):
    text: str
    format: TextFormat = TextFormat.MARKDOWN


@dataclass(frozen=True)
class Button(BaseModel):
    """An interactive button.

    ``value`` is opaque to the platform and comes back in interactive callbacks.
    """
    text: str
    action_id: str
    value: str
    url: Optional[str] = None
    style: ButtonStyle = ButtonStyle.DEFAULT


@dataclass(frozen=True)
class Block(BaseModel):
    """Base class for document blocks."""


@dataclass(frozen=True)
class HeaderBlock(Block):
    text: str = ""


@dataclass(frozen=True)
class SectionBlock(Block):
    """A section with either free text or a list of fields."""
    text: Optional[TextObject] = None
    fields: Tuple[TextObject, ...] = ()


@dataclass(frozen=True)
class ActionsBlock(Block):
    buttons: Tuple[Button, ...] = ()


@dataclass
class NotificationDocument(BaseModel):
    """Ordered blocks plus the plain fallback text shown in notifications."""
    blocks: List[Block] = field(default_factory=list)
    fallback_text: str = ""

    def add(self, block: Block) -> "NotificationDocument":
        self.blocks.append(block)
        return self

    def __len__(self) -> int:
        return len(self.blocks)
