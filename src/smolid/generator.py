"""Smolid generation.

A ``SmolidGenerator`` composes the current clock reading, the version-1
marker and a random draw from the 21-bit entropy region. Randomness and the
clock are injected so tests can pin both. The default random source keeps a
separate ``random.Random`` per thread, each seeded from the OS, so
concurrent callers never share generator state.
"""

from __future__ import annotations

import logging
import os
import random
import threading
import time
import weakref
from typing import Callable, Optional, Protocol

from smolid.errors import ClockBeforeEpochError, TypeRangeError
from smolid.models.layout import (
    EPOCH_MS,
    RANDOM_SPACE,
    TIMESTAMP_SHIFT,
    TYPE_FLAG,
    TYPE_MASK,
    TYPE_MAX,
    TYPE_SHIFT,
    V1_VERSION,
)
from smolid.models.smolid import Smolid

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class ThreadLocalRandom:
    """``randint`` backed by one OS-seeded ``random.Random`` per thread.

    State is dropped in a forked child so it reseeds instead of replaying
    the parent's draws.
    """

    def __init__(self) -> None:
        self._local = threading.local()
        if hasattr(os, "register_at_fork"):
            ref = weakref.ref(self)

            def _reset_in_child() -> None:
                source = ref()
                if source is not None:
                    source._local = threading.local()

            os.register_at_fork(after_in_child=_reset_in_child)

    def _rng(self) -> random.Random:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            rng = random.Random(os.urandom(16))
            self._local.rng = rng
        return rng

    def randint(self, a: int, b: int) -> int:
        return self._rng().randint(a, b)


def system_clock_ms() -> int:
    """Current Unix time in whole milliseconds."""
    return time.time_ns() // 1_000_000


class SmolidGenerator:
    """Produces new smolids from a clock and a random source."""

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        self.rng = rng if rng is not None else ThreadLocalRandom()
        self.clock = clock if clock is not None else system_clock_ms

    def _elapsed_ms(self) -> int:
        now = self.clock()
        if now < EPOCH_MS:
            logger.critical("System clock %d ms is before smolid epoch %d ms", now, EPOCH_MS)
            raise ClockBeforeEpochError(now, EPOCH_MS)
        return now - EPOCH_MS

    def generate(self) -> Smolid:
        """New untyped smolid: timestamp | version 1 | random entropy."""
        n = self._elapsed_ms() << TIMESTAMP_SHIFT
        n |= V1_VERSION
        n |= self.rng.randint(0, RANDOM_SPACE)
        return Smolid(value=n)

    def generate_with_type(self, type_: int) -> Smolid:
        """New smolid carrying ``type_`` in bits 9-15.

        The type overwrites the random bits in that field; the flag bit is
        set and the remaining random bits are kept.
        """
        if isinstance(type_, bool) or not isinstance(type_, int) or not 0 <= type_ <= TYPE_MAX:
            logger.debug("Rejected smolid type %r", type_)
            raise TypeRangeError(type_, TYPE_MAX)

        n = self.generate().value
        n &= ~TYPE_MASK
        n |= TYPE_FLAG
        n |= type_ << TYPE_SHIFT
        return Smolid(value=n)

    def generate_many(self, count: int, type_: Optional[int] = None) -> list[Smolid]:
        """Generate ``count`` smolids, all tagged with ``type_`` if given."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        if type_ is None:
            return [self.generate() for _ in range(count)]
        return [self.generate_with_type(type_) for _ in range(count)]


_default = SmolidGenerator()


def default_generator() -> SmolidGenerator:
    return _default


def generate() -> Smolid:
    """Generate a new untyped smolid."""
    return _default.generate()


def generate_with_type(type_: int) -> Smolid:
    """Generate a new smolid tagged with ``type_`` (0-127)."""
    return _default.generate_with_type(type_)


def nil() -> Smolid:
    return Smolid.nil()


def parse(text: str) -> Smolid:
    """Parse the 13-character text form of a smolid."""
    return Smolid.parse(text)
