"""Click CLI for exercising the booking webhook by hand."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

import click
import httpx

from booking_notifier.config import DEFAULT_TIMEZONE, NotifierConfig
from booking_notifier.webhook.dispatcher import NotificationDispatcher

DEFAULT_WEBHOOK_URL = "http://localhost:8000/api/webhook"


def build_sample_payload(
    name: str, email: str, start: str, end: str, message: str,
) -> dict[str, Any]:
    """Mock ``booking.created`` event in the scheduling service's nested shape."""
    return {
        "event": "booking.created",
        "data": {
            "guest": {"name": name, "email": email},
            "start_at": start,
            "end_at": end,
            "message": message,
        },
    }


@click.group()
def cli() -> None:
    """Booking notifier tools."""


@cli.command("send-sample")
@click.option("--url", default=DEFAULT_WEBHOOK_URL, show_default=True, help="Webhook endpoint.")
@click.option("--name", default="山田 太郎", help="Guest name.")
@click.option("--email", default="yamada@example.com", help="Guest email.")
@click.option("--start", default="2026-03-01T10:00:00+09:00", help="Booking start (ISO 8601).")
@click.option("--end", default="2026-03-01T11:00:00+09:00", help="Booking end (ISO 8601).")
@click.option("--message", default="よろしくお願いいたします。", help="Guest message.")
def send_sample(url: str, name: str, email: str, start: str, end: str, message: str) -> None:
    """Post a mock booking webhook to a running server."""
    payload = build_sample_payload(name, email, start, end, message)
    click.echo(f"Sending mock booking webhook to {url}", err=True)
    try:
        resp = httpx.post(url, json=payload, timeout=30.0)
    except httpx.HTTPError as exc:
        click.echo(f"Request failed: {exc}", err=True)
        sys.exit(1)

    click.echo(f"HTTP {resp.status_code}")
    click.echo(resp.text)
    if resp.status_code >= 400:
        sys.exit(1)


@cli.command()
@click.argument("payload_file", type=click.File("r", encoding="utf-8"))
@click.option("--timezone", default=DEFAULT_TIMEZONE, show_default=True, help="Display timezone.")
def preview(payload_file: TextIO, timezone: str) -> None:
    """Print the notification a payload file would produce, without sending it."""
    try:
        payload = json.load(payload_file)
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"Invalid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise click.ClickException("Payload must be a JSON object")

    try:
        config = NotifierConfig(timezone=timezone)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--timezone") from exc

    dispatcher = NotificationDispatcher(config)
    click.echo(dispatcher.render(payload))


if __name__ == "__main__":
    cli()
