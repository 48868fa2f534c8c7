"""
Message Types

Block Kit data structures for outbound Slack messages.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class BlockType(Enum):
    """Block Kit block kinds."""
    HEADER = "header"
    SECTION = "section"
    DIVIDER = "divider"
    CONTEXT = "context"


class TextType(Enum):
    """Text object formats."""
    PLAIN_TEXT = "plain_text"
    MRKDWN = "mrkdwn"  # Interpreted by Slack as markup


@dataclass(frozen=True)
class Text:
    """A typed text payload. The text is never escaped or trimmed."""

    type: TextType
    text: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a Block Kit text object."""
        data: Dict[str, Any] = {"type": self.type.value, "text": self.text}
        if self.type == TextType.PLAIN_TEXT:
            data["emoji"] = True
        return data


@dataclass(frozen=True)
class Block:
    """One visual unit of a message."""

    type: BlockType
    text: Optional[Text] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a Block Kit block."""
        data: Dict[str, Any] = {"type": self.type.value}
        if self.text is not None:
            data["text"] = self.text.to_dict()
        return data


@dataclass
class Message:
    """A single outbound notification."""

    channel: str
    blocks: List[Block] = field(default_factory=list)

    @property
    def fallback_text(self) -> str:
        """Text shown in notifications when blocks cannot be rendered."""
        for block in self.blocks:
            if block.text is not None:
                return block.text.text
        return ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a chat.postMessage payload fragment."""
        return {
            "channel": self.channel,
            "blocks": [block.to_dict() for block in self.blocks],
        }
