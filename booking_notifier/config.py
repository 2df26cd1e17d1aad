"""Process configuration for the notifier, read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_API_BASE = "https://api.line.me"
DEFAULT_TIMEZONE = "Asia/Tokyo"


@dataclass(frozen=True)
class NotifierConfig:
    """Credentials and delivery settings handed to the dispatcher.

    Both ``access_token`` and ``admin_user_id`` may be missing; the
    dispatcher decides how each absence degrades. ``timezone`` must name a
    known IANA zone, checked at construction.
    """

    access_token: str | None = None
    admin_user_id: str | None = None
    api_base: str = DEFAULT_API_BASE
    timeout: float = 10.0
    timezone: str = DEFAULT_TIMEZONE

    def __post_init__(self) -> None:
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {self.timezone!r}") from exc

    @classmethod
    def from_env(cls) -> NotifierConfig:
        """Create NotifierConfig from environment variables."""
        return cls(
            access_token=os.environ.get("LINE_CHANNEL_ACCESS_TOKEN") or None,
            admin_user_id=os.environ.get("LINE_ADMIN_USER_ID") or None,
            api_base=os.environ.get("LINE_API_BASE", DEFAULT_API_BASE),
            timeout=float(os.environ.get("LINE_PUSH_TIMEOUT", "10")),
            timezone=os.environ.get("NOTIFY_TIMEZONE", DEFAULT_TIMEZONE),
        )
