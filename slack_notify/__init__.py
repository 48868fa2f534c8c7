"""
Slack Notify

Posts a header + markdown notification to a Slack channel.

Provides:
- Block Kit message building
- Token and channel shape validation
- A chat.postMessage client and a mock for tests
"""

from .types import Block, BlockType, Message, Text, TextType
from .blocks import build_message
from .validation import validate_channel, validate_token
from .config import ConfigError, NotifyConfig
from .client import (
    MockSlackClient,
    MockSlackResponse,
    SlackClient,
    SlackError,
    SlackResponse,
    SlackTransport,
)

__all__ = [
    # Types
    'Block',
    'BlockType',
    'Message',
    'Text',
    'TextType',
    # Builder
    'build_message',
    # Validation
    'validate_channel',
    'validate_token',
    # Config
    'ConfigError',
    'NotifyConfig',
    # Client
    'MockSlackClient',
    'MockSlackResponse',
    'SlackClient',
    'SlackError',
    'SlackResponse',
    'SlackTransport',
]
