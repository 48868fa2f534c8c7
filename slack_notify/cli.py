"""
Slack Notify CLI

Posts a header + markdown message to a Slack channel.

Usage:
    INPUT_TITLE="Deploy" INPUT_TEXT="*done*" \\
    INPUT_SLACK_TOKEN=xoxb-... INPUT_SLACK_CHANNEL=deployments \\
    slack-notify [-v | -q]
"""

import logging
import sys

import click
from dotenv import load_dotenv

from .blocks import build_message
from .client import SlackClient, SlackError
from .config import ConfigError, NotifyConfig
from .sentry import capture_exception, init_sentry

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool, quiet: bool = False):
    """Configure logging to output to stdout."""
    if quiet:
        level = logging.WARNING
    else:
        level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(message)s',  # Simple format for CLI
        handlers=[logging.StreamHandler(sys.stdout)]
    )


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, verbose, quiet):
    """Send a formatted notification to Slack."""
    setup_logging(verbose, quiet)
    load_dotenv()

    config = NotifyConfig.from_env()
    try:
        config.validate()
    except ConfigError as e:
        logger.error("Error: %s", e)
        ctx.exit(1)

    init_sentry(config)

    ctx.ensure_object(dict)
    transport = ctx.obj.get('transport') or SlackClient(
        config.slack_token,
        api_url=config.api_url,
        timeout=config.timeout,
    )

    message = build_message(config.title, config.text, config.slack_channel)
    try:
        response = transport.send(config.slack_channel, message)
    except SlackError as e:
        capture_exception(e, tags={"slack_channel": config.slack_channel})
        logger.error("error while sending message to slack: %s", e)
        ctx.exit(1)

    logger.info("Message sent to %s (ts=%s)", config.slack_channel, response.ts)


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
