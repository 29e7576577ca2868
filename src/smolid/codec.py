"""Text form of a smolid.

A smolid is written as its 8 big-endian bytes in unpadded RFC 4648 base32,
lowercased: always 13 characters. Parsing accepts any letter case.
"""

from __future__ import annotations

import base64
import binascii
import logging

from smolid.errors import InvalidEncodingError, InvalidLengthError
from smolid.models.layout import BYTE_LENGTH, MAX_VALUE

logger = logging.getLogger(__name__)

ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")

# Unpadded lengths (mod 8) that leave a whole dangling symbol after the last byte.
_DANGLING_REMAINDERS = (1, 3, 6)


def encode(value: int) -> str:
    """Encode a 64-bit value as 13 lowercase base32 characters."""
    if not 0 <= value <= MAX_VALUE:
        raise ValueError(f"Value does not fit in 64 bits: {value}")
    raw = value.to_bytes(BYTE_LENGTH, "big")
    return base64.b32encode(raw).decode("ascii").rstrip("=").lower()


def decode(text: str) -> int:
    """Decode base32 text (any case, no padding) back to a 64-bit value.

    Raises InvalidEncodingError for characters outside the alphabet and
    InvalidLengthError when the text does not hold exactly 8 bytes.
    """
    if not isinstance(text, str):
        raise InvalidEncodingError(text, "expected a string")
    if not text.isascii():
        logger.debug("Rejected non-ASCII smolid text %r", text)
        raise InvalidEncodingError(text, "non-ASCII characters")

    upper = text.upper()
    bad = sorted(set(upper) - ALPHABET)
    if bad:
        logger.debug("Rejected smolid text %r: bad characters %s", text, bad)
        raise InvalidEncodingError(text, f"unexpected characters {''.join(bad)!r}")

    if len(upper) % 8 in _DANGLING_REMAINDERS:
        # Count the dangling symbol as one more (partial) byte.
        raise InvalidLengthError(BYTE_LENGTH, len(upper) * 5 // 8 + 1)

    try:
        raw = base64.b32decode(upper + "=" * (-len(upper) % 8))
    except binascii.Error as e:
        raise InvalidEncodingError(text, str(e)) from e

    if len(raw) != BYTE_LENGTH:
        logger.debug("Rejected smolid text %r: decoded to %d bytes", text, len(raw))
        raise InvalidLengthError(BYTE_LENGTH, len(raw))

    return int.from_bytes(raw, "big")
