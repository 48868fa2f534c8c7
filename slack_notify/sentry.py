"""
Sentry Setup

Initializes the Sentry SDK and forwards delivery failures to it.
"""

import logging
from typing import Dict, Optional

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from .config import NotifyConfig

logger = logging.getLogger(__name__)

# Track initialization state
_sentry_initialized = False


def init_sentry(config: NotifyConfig) -> bool:
    """
    Initialize Sentry SDK.

    Args:
        config: NotifyConfig with DSN

    Returns:
        True if initialized successfully
    """
    global _sentry_initialized

    if _sentry_initialized:
        return True

    if not config.sentry_enabled:
        logger.debug("Sentry not configured, skipping initialization")
        return False

    logging_integration = LoggingIntegration(
        level=logging.INFO,  # Capture INFO and above as breadcrumbs
        event_level=None,  # Failures are sent explicitly via capture_exception
    )

    sentry_sdk.init(
        dsn=config.sentry_dsn,
        environment=config.sentry_environment,
        integrations=[logging_integration],
        send_default_pii=False,
        attach_stacktrace=True,
    )
    if config.slack_channel:
        sentry_sdk.set_tag("slack_channel", config.slack_channel)

    _sentry_initialized = True
    logger.debug("Sentry initialized successfully")
    return True


def capture_exception(
    exception: Exception,
    tags: Optional[Dict[str, str]] = None,
) -> Optional[str]:
    """
    Capture an exception and send to Sentry.

    Returns:
        Sentry event ID if captured, None otherwise
    """
    if not _sentry_initialized:
        return None

    with sentry_sdk.new_scope() as scope:
        for key, value in (tags or {}).items():
            scope.set_tag(key, value)
        return sentry_sdk.capture_exception(exception)
