"""
Input Validation

Shape checks for Slack tokens and channel names. Nothing here talks to Slack,
so a revoked but well-formed token still passes.
"""

import string

TOKEN_PREFIXES = ("xoxb-", "xoxp-")  # bot, user
MIN_TOKEN_LENGTH = 10  # exclusive
MAX_CHANNEL_LENGTH = 80

_CHANNEL_CHARS = frozenset(string.ascii_letters + string.digits + "-_")


def validate_token(token: str) -> bool:
    """Check that token looks like a bot or user token."""
    if not token:
        return False

    if token.startswith(TOKEN_PREFIXES):
        return len(token) > MIN_TOKEN_LENGTH

    return False


def validate_channel(channel: str) -> bool:
    """
    Check that channel is a bare channel name.

    Names are given without the leading '#' and may only contain ASCII
    letters, digits, hyphens and underscores, up to 80 characters.
    """
    if not channel:
        return False

    if channel.startswith("#"):
        return False

    if any(char not in _CHANNEL_CHARS for char in channel):
        return False

    return 1 <= len(channel) <= MAX_CHANNEL_LENGTH
