"""Bit layout of a smolid.

    |        41 bits        | 2 bits  |            21 bits              |
    | ms since EPOCH_MS     | version | flag | rand | type (7) | rand   |
    | 63 .............. 23  | 22 - 21 |  20  | 19-16| 15 ... 9 | 8 .. 0 |

Every other module reads and writes identifiers through these constants.
"""

from __future__ import annotations

from datetime import datetime, timezone

EPOCH_MS = 1735707600000
EPOCH = datetime.fromtimestamp(EPOCH_MS / 1000, tz=timezone.utc)

TIMESTAMP_SHIFT = 23
TIMESTAMP_BITS = 41

VERSION_SHIFT = 21
VERSION_MASK = 0b11 << VERSION_SHIFT
V1 = 1
V1_VERSION = V1 << VERSION_SHIFT

TYPE_FLAG = 1 << 20
TYPE_SHIFT = 9
TYPE_MAX = 0b1111111
TYPE_MASK = TYPE_MAX << TYPE_SHIFT

# Inclusive ceiling of the random draw. Bit 20 (TYPE_FLAG) is never set by it.
RANDOM_SPACE = 0xFFFFF

MAX_VALUE = (1 << 64) - 1
BYTE_LENGTH = 8
TEXT_LENGTH = 13
