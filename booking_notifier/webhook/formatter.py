"""Notification text for a booking."""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from booking_notifier.config import DEFAULT_TIMEZONE
from booking_notifier.models import BookingDetails
from booking_notifier.webhook.payload import UNKNOWN

logger = logging.getLogger(__name__)

TIME_SEPARATOR = "〜"

_DATE_TIME_FORMAT = "%Y/%m/%d %H:%M"
_TIME_FORMAT = "%H:%M"

_TEMPLATE = (
    "【🔔 Jicoo 新規予約通知】\n"
    "👤 お名前: {name} 様\n"
    "📅 日時: {time}\n"
    "✉️ メール: {email}\n"
    "📝 メッセージ/備考:\n"
    "{message}"
)


def _to_local(value: str, tz: tzinfo) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        # Naive timestamps are taken as already local to the display zone
        return parsed.replace(tzinfo=tz)
    return parsed.astimezone(tz)


def format_time_range(start: str, end: str, timezone: str = DEFAULT_TIMEZONE) -> str:
    """Render ``start`` (and ``end``) as ``YYYY/MM/DD HH:MM〜HH:MM``.

    Falls back to the raw strings when either timestamp cannot be parsed.
    """
    if start == UNKNOWN:
        return start

    tz = ZoneInfo(timezone)
    try:
        start_text = _to_local(start, tz).strftime(_DATE_TIME_FORMAT)
        if not end:
            return start_text
        end_text = _to_local(end, tz).strftime(_TIME_FORMAT)
    except (ValueError, OverflowError):
        logger.debug("Unparseable booking time %r / %r, using raw text", start, end)
        return f"{start}{TIME_SEPARATOR}{end}" if end else start
    return f"{start_text}{TIME_SEPARATOR}{end_text}"


def format_notification(booking: BookingDetails, timezone: str = DEFAULT_TIMEZONE) -> str:
    """Fill the fixed notification template."""
    return _TEMPLATE.format(
        name=booking.name,
        time=format_time_range(booking.start, booking.end, timezone),
        email=booking.email,
        message=booking.message,
    )
