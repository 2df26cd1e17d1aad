"""Booking notification dispatcher.

receive -> extract -> format -> send. Delivery failures are logged and
reported in the returned DispatchResult but never raised: the request
handler must answer the scheduling service with success so that it does not
redeliver a booking we already accepted. Only a missing access token
escapes, because no client can be built at all.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from booking_notifier.config import NotifierConfig
from booking_notifier.models import DispatchResult, DispatchStatus
from booking_notifier.webhook.formatter import format_notification
from booking_notifier.webhook.line import LinePushClient
from booking_notifier.webhook.payload import extract_booking

logger = logging.getLogger(__name__)

ClientFactory = Callable[[NotifierConfig], LinePushClient]


class NotificationDispatcher:
    """Turns one booking webhook payload into one LINE push message."""

    def __init__(
        self,
        config: NotifierConfig,
        client_factory: ClientFactory = LinePushClient.from_config,
    ) -> None:
        self._config = config
        self._client_factory = client_factory

    def render(self, payload: Mapping[str, Any]) -> str:
        """Return the notification text for ``payload`` without sending it."""
        booking = extract_booking(payload)
        return format_notification(booking, self._config.timezone)

    async def dispatch(self, payload: Mapping[str, Any]) -> DispatchResult:
        """Send the notification for ``payload`` to the admin recipient.

        Raises ConfigurationError when the access token is missing.
        """
        recipient = self._config.admin_user_id
        if not recipient:
            logger.error("LINE_ADMIN_USER_ID is not set; skipping notification")
            return DispatchResult(status=DispatchStatus.SKIPPED)

        text = self.render(payload)
        client = self._client_factory(self._config)

        try:
            await client.push_text(recipient, text)
        except Exception as exc:
            logger.exception("LINE push failed")
            return DispatchResult(
                status=DispatchStatus.FAILED, text=text, error=str(exc),
            )

        logger.info("LINE notification sent")
        return DispatchResult(status=DispatchStatus.SENT, text=text)
