"""Notification hook.

Invoked by the host tool's Notification hook as `marketkit hook notify`. The
hook event arrives as JSON on stdin. Delivery is best-effort: this command
exits 0 whether or not a notification was shown, so it never aborts the caller.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

import click

from marketkit.config import NotifyConfig
from marketkit.context import MarketkitContext
from marketkit.integrations.notifier.abc import Notifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationRequest:
    title: str
    message: str


def parse_hook_event(raw: str) -> dict[str, Any]:
    """Parse the hook event payload, returning {} for anything unusable."""
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.debug("Ignoring malformed hook event: %s", e)
        return {}
    if not isinstance(data, dict):
        logger.debug("Ignoring non-object hook event: %s", type(data).__name__)
        return {}
    return data


def _text_field(event: dict[str, Any], key: str) -> str | None:
    value = event.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return None


def build_request(
    event: dict[str, Any],
    config: NotifyConfig,
    title: str | None,
    message: str | None,
) -> NotificationRequest:
    """Combine CLI options, the hook event and config into one request.

    Precedence, highest first: explicit option, event field, configured default.
    """
    resolved_title = title or _text_field(event, "title") or config.title
    resolved_message = message or _text_field(event, "message") or config.message
    return NotificationRequest(title=resolved_title, message=resolved_message)


def send_notification(notifier: Notifier, request: NotificationRequest) -> bool:
    delivered = notifier.notify(request.title, request.message)
    if not delivered:
        logger.debug("Notification not delivered: %s", request.title)
    return delivered


def _read_stdin() -> str:
    stream = click.get_text_stream("stdin")
    if stream.isatty():
        return ""
    return stream.read()


@click.command(name="notify")
@click.option("--title", default=None, help="Notification title.")
@click.option("--message", default=None, help="Notification body.")
@click.pass_obj
def notify_hook(ctx: MarketkitContext, title: str | None, message: str | None) -> None:
    """Show a desktop notification for a hook event read from stdin."""
    event = parse_hook_event(_read_stdin())
    if event.get("hook_event_name"):
        logger.debug("Handling %s event", event["hook_event_name"])

    request = build_request(event, ctx.config.notify, title, message)
    send_notification(ctx.notifier, request)
