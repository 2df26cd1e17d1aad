"""Shared test fixtures for booking-notifier."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from booking_notifier.config import NotifierConfig

ADMIN_USER_ID = "U0123456789abcdef"
ACCESS_TOKEN = "test-channel-token"


@pytest.fixture
def config() -> NotifierConfig:
    return NotifierConfig(access_token=ACCESS_TOKEN, admin_user_id=ADMIN_USER_ID)


@pytest.fixture
def mock_push_client() -> MagicMock:
    """LinePushClient stand-in whose push_text is awaitable."""
    client = MagicMock()
    client.push_text = AsyncMock(return_value=None)
    return client


def mock_async_client(response: Any = None, side_effect: Any = None) -> AsyncMock:
    """httpx.AsyncClient replacement usable as an async context manager."""
    client = AsyncMock()
    if side_effect is not None:
        client.post.side_effect = side_effect
    else:
        client.post.return_value = response
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client


# --- Factory functions for test data ---


def make_booking_payload(**data: Any) -> dict[str, Any]:
    """Factory for a nested booking.created payload with sensible defaults."""
    defaults: dict[str, Any] = {
        "guest": {"name": "山田 太郎", "email": "yamada@example.com"},
        "start_at": "2026-03-01T10:00:00+09:00",
        "end_at": "2026-03-01T11:00:00+09:00",
        "message": "よろしくお願いいたします。",
    }
    defaults.update(data)
    return {"event": "booking.created", "data": defaults}
