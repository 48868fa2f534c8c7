"""
Slack Block Kit Message Builders

Creates the header + section message posted by the notifier.
"""

from .types import Block, BlockType, Message, Text, TextType


def _header(text: str) -> Block:
    """Create a header block."""
    return Block(type=BlockType.HEADER, text=Text(type=TextType.PLAIN_TEXT, text=text))


def _section(text: str) -> Block:
    """Create a section block with markdown."""
    return Block(type=BlockType.SECTION, text=Text(type=TextType.MRKDWN, text=text))


def build_message(title: str, text: str, channel: str) -> Message:
    """
    Build the notification message.

    Title and text are passed through unchanged; Slack is responsible for
    rendering (and sanitising) the markdown body.

    Args:
        title: Header text, rendered as plain text
        text: Body text, rendered as mrkdwn
        channel: Destination channel

    Returns:
        Message with a header block followed by a section block
    """
    return Message(channel=channel, blocks=[_header(title), _section(text)])
