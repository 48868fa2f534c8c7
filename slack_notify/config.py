"""
Notifier Configuration

Loads the notification inputs and service settings from environment variables.
Variable names follow the GitHub Actions INPUT_* convention.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

DEFAULT_API_URL = "https://slack.com/api/chat.postMessage"

# Required field -> environment variable
REQUIRED_ENV_VARS = {
    "title": "INPUT_TITLE",
    "text": "INPUT_TEXT",
    "slack_token": "INPUT_SLACK_TOKEN",
    "slack_channel": "INPUT_SLACK_CHANNEL",
}


class ConfigError(ValueError):
    """Raised when required configuration is missing or malformed."""

    def __init__(self, missing: List[str], invalid: Optional[Dict[str, str]] = None):
        self.missing = missing
        self.invalid = invalid or {}

        problems = []
        if missing:
            problems.append("missing required environment variables: " + ", ".join(missing))
        for name, value in self.invalid.items():
            problems.append(f"invalid value for {name}: {value!r}")
        super().__init__("; ".join(problems))


@dataclass
class NotifyConfig:
    """Configuration for a single notification run."""

    # Message inputs
    title: Optional[str] = field(default=None)
    text: Optional[str] = field(default=None)

    # Slack settings
    slack_token: Optional[str] = field(default=None)
    slack_channel: Optional[str] = field(default=None)
    api_url: str = DEFAULT_API_URL
    timeout: int = 10

    # Sentry settings
    sentry_dsn: Optional[str] = field(default=None)
    sentry_environment: str = "production"

    # Environment variable -> raw value that could not be parsed
    invalid: Dict[str, str] = field(default_factory=dict, repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "NotifyConfig":
        """Create config from environment variables. Empty values count as unset."""
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            return env.get(name) or None

        invalid = {}
        timeout = 10
        raw_timeout = get("SLACK_TIMEOUT")
        if raw_timeout is not None:
            try:
                timeout = int(raw_timeout)
            except ValueError:
                invalid["SLACK_TIMEOUT"] = raw_timeout
            else:
                if timeout <= 0:
                    invalid["SLACK_TIMEOUT"] = raw_timeout
                    timeout = 10

        return cls(
            title=get("INPUT_TITLE"),
            text=get("INPUT_TEXT"),
            slack_token=get("INPUT_SLACK_TOKEN"),
            slack_channel=get("INPUT_SLACK_CHANNEL"),
            api_url=env.get("SLACK_API_URL") or DEFAULT_API_URL,
            timeout=timeout,
            sentry_dsn=get("SENTRY_DSN"),
            sentry_environment=env.get("SENTRY_ENVIRONMENT") or "production",
            invalid=invalid,
        )

    def missing_fields(self) -> List[str]:
        """Environment variable names of required values that are not set."""
        return [
            env_name
            for attr, env_name in REQUIRED_ENV_VARS.items()
            if not getattr(self, attr)
        ]

    def validate(self) -> None:
        """Raise ConfigError listing every missing or malformed variable."""
        missing = self.missing_fields()
        if missing or self.invalid:
            raise ConfigError(missing, self.invalid)

    @property
    def sentry_enabled(self) -> bool:
        """Check if Sentry tracking is configured."""
        return bool(self.sentry_dsn)
