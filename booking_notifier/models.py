"""Shared Pydantic data models for booking-notifier."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

# --- Enums ---


class DispatchStatus(str, Enum):
    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"


# --- Booking Models ---


class BookingDetails(BaseModel):
    """Display fields extracted from a booking webhook, placeholders applied."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    start: str
    end: str  # "" when the payload has no end time
    message: str


# --- Dispatch Models ---


class DispatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: DispatchStatus
    text: str = ""
    error: str | None = None
