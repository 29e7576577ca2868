"""Errors raised by smolid.

Bad input (an out-of-range type tag, undecodable text) raises a
``SmolidError``, which is also a ``ValueError``. A system clock set before
the smolid epoch raises ``ClockBeforeEpochError`` instead: it is an
environment fault, not something a caller is expected to recover from.
"""

from __future__ import annotations

from typing import Any, Optional


class SmolidError(ValueError):
    """Base exception for invalid smolid input."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class TypeRangeError(SmolidError):
    """Raised when a type tag is outside 0..maximum."""

    def __init__(self, value: Any, maximum: int):
        super().__init__(
            f"Type must be between 0 and {maximum}, got {value!r}",
            {"value": value, "maximum": maximum},
        )
        self.value = value
        self.maximum = maximum


class InvalidEncodingError(SmolidError):
    """Raised when text is not unpadded RFC 4648 base32."""

    def __init__(self, text: Any, reason: str = ""):
        message = f"Invalid base32 string: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, {"text": text})
        self.text = text


class InvalidLengthError(SmolidError):
    """Raised when text decodes to something other than 8 bytes."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Invalid smolid length: expected {expected} bytes, got {actual}",
            {"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class ClockBeforeEpochError(RuntimeError):
    """Raised when the system clock reports a time before the smolid epoch."""

    def __init__(self, now_ms: int, epoch_ms: int):
        super().__init__(
            f"System clock ({now_ms} ms) is before the smolid epoch ({epoch_ms} ms)"
        )
        self.now_ms = now_ms
        self.epoch_ms = epoch_ms
