from __future__ import annotations

import re

from .errors import InvalidInputError

WHITESPACE_RE = re.compile(r"\s+")
LINE_BREAK_RE = re.compile(r"\r\n?")


def coerce_text(value: object) -> str:
    """Return value as text; None becomes empty, bytes are decoded, other types fail."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidInputError("Text bytes must be valid UTF-8.") from exc
    raise InvalidInputError(f"Text must be a string, got {type(value).__name__}.")


def normalize_whitespace(value: str) -> str:
    """Collapse whitespace runs into single spaces and trim the ends."""
    return WHITESPACE_RE.sub(" ", value).strip()


def normalize_newlines(value: str) -> str:
    """Convert Windows and old Mac line endings to plain newlines."""
    return LINE_BREAK_RE.sub("\n", value)
