"""LINE Messaging API push client.

Sends one text message to one recipient over the push endpoint. Delivery is
attempted once: the webhook sender never waits on retries.
"""

from __future__ import annotations

import logging

import httpx

from booking_notifier.config import DEFAULT_API_BASE, NotifierConfig

logger = logging.getLogger(__name__)

_PUSH_PATH = "/v2/bot/message/push"


class ConfigurationError(Exception):
    """Raised when a required credential is missing."""


class LinePushError(Exception):
    """Raised when the push endpoint answers with an error status."""

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"LINE push failed with HTTP {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class LinePushClient:
    """Minimal client for the LINE push-message endpoint."""

    def __init__(
        self,
        access_token: str,
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 10.0,
    ) -> None:
        self._access_token = access_token
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout

    @classmethod
    def from_config(cls, config: NotifierConfig) -> LinePushClient:
        if not config.access_token or not config.access_token.strip():
            raise ConfigurationError(
                "LINE_CHANNEL_ACCESS_TOKEN is not defined in environment variables.",
            )
        return cls(
            access_token=config.access_token,
            api_base=config.api_base,
            timeout=config.timeout,
        )

    async def push_text(self, to: str, text: str) -> None:
        """Push a single text message to ``to``.

        TLS certificate verification enabled. Raises LinePushError on a
        status >= 400; transport failures surface as httpx.HTTPError.
        """
        url = f"{self._api_base}{_PUSH_PATH}"
        payload = {
            "to": to,
            "messages": [{"type": "text", "text": text}],
        }
        headers = {"Authorization": f"Bearer {self._access_token}"}

        async with httpx.AsyncClient(verify=True) as client:
            resp = await client.post(
                url, json=payload, headers=headers, timeout=self._timeout,
            )

        if resp.status_code >= 400:
            raise LinePushError(resp.status_code, resp.text)
        logger.debug("LINE push accepted with HTTP %s", resp.status_code)
