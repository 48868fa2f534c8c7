"""Slack Client - Interface and implementations for posting messages."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from .config import DEFAULT_API_URL
from .types import Message

logger = logging.getLogger(__name__)


class SlackError(Exception):
    """Raised when a message could not be delivered."""

    def __init__(self, error: str):
        self.error = error
        super().__init__(error)


@dataclass
class SlackResponse:
    """Acknowledgement returned by the transport."""

    ok: bool
    channel: Optional[str] = None
    ts: Optional[str] = None
    message: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)


class SlackTransport(ABC):
    """Abstract interface for delivering a formatted message."""

    @abstractmethod
    def send(self, channel: str, message: Message) -> SlackResponse:
        """Post message to channel. Raises SlackError on failure."""
        pass


class SlackClient(SlackTransport):
    """Real client using the chat.postMessage Web API."""

    def __init__(self, token: str, api_url: str = DEFAULT_API_URL, timeout: int = 10):
        self._token = token
        self.api_url = api_url
        self.timeout = timeout

    def send(self, channel: str, message: Message) -> SlackResponse:
        payload = message.to_dict()
        payload["channel"] = channel
        payload["text"] = message.fallback_text  # Fallback for notifications

        try:
            response = requests.post(
                self.api_url,
                json=payload,
                headers={"Authorization": f"Bearer {self._token}"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            logger.error("Failed to send Slack message: %s", e)
            raise SlackError(str(e)) from e
        except ValueError as e:
            logger.error("Slack returned a non-JSON response: %s", e)
            raise SlackError("invalid_response") from e

        if not isinstance(body, dict):
            logger.error("Slack returned a non-object response: %r", body)
            raise SlackError("invalid_response")

        if not body.get("ok"):
            error = body.get("error", "unknown_error")
            logger.error("Slack rejected message to %s: %s", channel, error)
            raise SlackError(error)

        posted = body.get("message")
        logger.debug("Slack message sent to %s (ts=%s)", channel, body.get("ts"))
        return SlackResponse(
            ok=True,
            channel=body.get("channel"),
            ts=body.get("ts"),
            message=posted.get("text") if isinstance(posted, dict) else None,
            raw=body,
        )


@dataclass
class MockSlackResponse:
    """Canned result for MockSlackClient."""

    success: bool = True
    message: str = "Message sent successfully"
    error: Optional[str] = None


class MockSlackClient(SlackTransport):
    """Mock client for testing."""

    def __init__(self, responses: Optional[List[MockSlackResponse]] = None):
        self.responses: List[MockSlackResponse] = (
            list(responses) if responses is not None else [MockSlackResponse()]
        )
        self.call_count = 0
        self.last_channel: Optional[str] = None
        self.last_message: Optional[Message] = None

    def _next_response(self) -> MockSlackResponse:
        # The last queued response repeats once the others are used up
        if not self.responses:
            return MockSlackResponse()
        response = self.responses[0]
        if len(self.responses) > 1:
            self.responses = self.responses[1:]
        return response

    def send(self, channel: str, message: Message) -> SlackResponse:
        self.call_count += 1
        self.last_channel = channel
        self.last_message = message

        response = self._next_response()
        if response.error is not None:
            raise SlackError(response.error)

        return SlackResponse(ok=response.success, channel=channel, message=response.message)

    def set_responses(self, responses: List[MockSlackResponse]) -> None:
        """Test helper to queue canned responses."""
        self.responses = list(responses)

    def reset(self) -> None:
        """Reset call count and recorded message."""
        self.call_count = 0
        self.last_channel = None
        self.last_message = None
