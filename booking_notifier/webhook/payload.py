"""Booking field extraction from loosely-structured webhook payloads.

The scheduling service has shipped several payload shapes over time: guest
details nested under ``data.guest`` or flattened to the top level, camelCase
or snake_case time keys, and notes either as a question/answer list or as a
plain field. Each display field is therefore described by an ordered
``FieldRule`` of dotted paths; the first non-empty value wins.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from booking_notifier.models import BookingDetails

NO_NAME = "no name"
UNKNOWN = "unknown"
NO_MESSAGE = "none"

_ANSWER_LIST_PATHS = (
    "data.answers",
    "data.questions_and_answers",
    "answers",
    "questions_and_answers",
)
_LABEL_KEYS = ("question", "label", "title")
_VALUE_KEYS = ("answer", "value")
_ANSWER_SEPARATOR = "\n\n"

# Last resort only: matches a "message"-like key anywhere in the serialized
# payload, whatever the nesting. Values must be JSON strings.
_NOTE_KEY_PATTERN = re.compile(
    r'"(?:message|memo|note|comment)"\s*:\s*"((?:[^"\\]|\\.)*)"',
    re.IGNORECASE,
)


@dataclass(frozen=True)
class FieldRule:
    """Ordered lookup paths for one display field and its placeholder."""

    paths: tuple[str, ...]
    default: str


NAME_RULE = FieldRule(("data.guest.name", "guest.name", "guest_name"), NO_NAME)
EMAIL_RULE = FieldRule(("data.guest.email", "guest.email", "email"), UNKNOWN)
START_RULE = FieldRule(("data.start_at", "data.startAt", "start_at", "startAt"), UNKNOWN)
END_RULE = FieldRule(("data.end_at", "data.endAt", "end_at", "endAt"), "")
MESSAGE_RULE = FieldRule(("data.message", "message", "data.answers.message"), NO_MESSAGE)


class PayloadDocument:
    """Read-only optional-field accessor over a decoded JSON object."""

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    def get(self, path: str) -> Any:
        """Return the value at a dotted path, or None if any hop is missing."""
        node: Any = self._data
        for key in path.split("."):
            if not isinstance(node, Mapping):
                return None
            node = node.get(key)
            if node is None:
                return None
        return node

    def get_text(self, path: str) -> str | None:
        """Return a non-empty string (numbers are stringified) or None."""
        return _as_text(self.get(path))

    def get_list(self, path: str) -> list[Any] | None:
        value = self.get(path)
        if isinstance(value, list) and value:
            return value
        return None

    def resolve(self, rule: FieldRule) -> str:
        for path in rule.paths:
            text = self.get_text(path)
            if text is not None:
                return text
        return rule.default

    def scan_for_note(self) -> str | None:
        """Search the serialized payload for a message/memo/note/comment key."""
        serialized = json.dumps(self._data, ensure_ascii=False, default=str)
        for match in _NOTE_KEY_PATTERN.finditer(serialized):
            value = json.loads(f'"{match.group(1)}"')
            if value:
                return value
        return None


def _as_text(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, int | float):
        return str(value)
    return None


def format_answers(entries: Sequence[Any]) -> str | None:
    """Render question/answer entries as ``label: value`` blocks.

    Returns None when no entry yields any text.
    """
    rendered: list[str] = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            text = _as_text(entry)
            if text is not None:
                rendered.append(text)
            continue

        label = next(
            (t for t in (_as_text(entry.get(k)) for k in _LABEL_KEYS) if t), None,
        )
        value = _answer_value(entry)
        if label and value:
            rendered.append(f"{label}: {value}")
        elif value:
            rendered.append(value)
    return _ANSWER_SEPARATOR.join(rendered) or None


def _answer_value(entry: Mapping[str, Any]) -> str | None:
    for key in _VALUE_KEYS:
        raw = entry.get(key)
        if isinstance(raw, list):
            # Multiple-choice answers
            parts = [t for t in (_as_text(item) for item in raw) if t]
            if parts:
                return ", ".join(parts)
            continue
        text = _as_text(raw)
        if text:
            return text
    return None


def extract_message(document: PayloadDocument) -> str:
    """Resolve the free-text notes section.

    Priority: answer list, direct message field, serialized-payload scan,
    then the ``"none"`` placeholder.
    """
    for path in _ANSWER_LIST_PATHS:
        entries = document.get_list(path)
        if entries is None:
            continue
        answers = format_answers(entries)
        if answers is not None:
            return answers

    for path in MESSAGE_RULE.paths:
        text = document.get_text(path)
        if text is not None:
            return text

    return document.scan_for_note() or MESSAGE_RULE.default


def extract_booking(payload: Mapping[str, Any]) -> BookingDetails:
    """Derive display fields from a booking webhook payload."""
    document = PayloadDocument(payload)
    return BookingDetails(
        name=document.resolve(NAME_RULE),
        email=document.resolve(EMAIL_RULE),
        start=document.resolve(START_RULE),
        end=document.resolve(END_RULE),
        message=extract_message(document),
    )
