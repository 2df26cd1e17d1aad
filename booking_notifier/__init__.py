"""Booking webhook to LINE push notification bridge."""

__version__ = "0.1.0"
