"""Smolid: compact, sortable 64-bit identifiers with a 13-character text form."""

from smolid.errors import (
    ClockBeforeEpochError,
    InvalidEncodingError,
    InvalidLengthError,
    SmolidError,
    TypeRangeError,
)
from smolid.generator import (
    SmolidGenerator,
    ThreadLocalRandom,
    generate,
    generate_with_type,
    nil,
    parse,
)
from smolid.models import EPOCH, EPOCH_MS, NIL, Smolid

__version__ = "0.1.0"

__all__ = [
    "ClockBeforeEpochError",
    "EPOCH",
    "EPOCH_MS",
    "InvalidEncodingError",
    "InvalidLengthError",
    "NIL",
    "Smolid",
    "SmolidError",
    "SmolidGenerator",
    "ThreadLocalRandom",
    "TypeRangeError",
    "generate",
    "generate_with_type",
    "nil",
    "parse",
]
