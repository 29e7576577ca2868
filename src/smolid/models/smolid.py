"""The smolid value type.

A smolid is one unsigned 64-bit integer. Everything else (creation time,
format version, optional type tag) is read out of its bits on demand, so
instances are immutable and compare, hash and sort by that integer.
"""

from __future__ import annotations

import functools
from datetime import datetime, timedelta
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from smolid.codec import decode, encode
from smolid.models.layout import (
    EPOCH,
    MAX_VALUE,
    TIMESTAMP_SHIFT,
    TYPE_FLAG,
    TYPE_MASK,
    TYPE_SHIFT,
    V1,
    VERSION_MASK,
    VERSION_SHIFT,
)


@functools.total_ordering
class Smolid(BaseModel):
    """A compact, time-sortable 64-bit identifier.

    Validates from an int, from its 13-character text form, or from
    ``{"value": n}``. Serializes to the text form, so it can be used as a
    field type in other models and survives a JSON round trip.
    """

    model_config = ConfigDict(frozen=True)

    value: int = Field(ge=0, le=MAX_VALUE, strict=True, description="Raw 64-bit value")

    @model_validator(mode="before")
    @classmethod
    def coerce_input(cls, data: Any) -> Any:
        if isinstance(data, Smolid):
            return {"value": data.value}
        if isinstance(data, str):
            return {"value": decode(data)}
        if isinstance(data, int) and not isinstance(data, bool):
            return {"value": data}
        return data

    @model_serializer
    def serialize(self) -> str:
        return encode(self.value)

    # ── Construction ─────────────────────────────────────────────────

    @classmethod
    def nil(cls) -> Smolid:
        """The all-zero sentinel."""
        return cls(value=0)

    @classmethod
    def parse(cls, text: str) -> Smolid:
        """Parse the 13-character text form (case-insensitive)."""
        return cls(value=decode(text))

    @classmethod
    def generate(cls) -> Smolid:
        """Generate a new untyped smolid with the default generator."""
        from smolid.generator import default_generator

        return default_generator().generate()

    @classmethod
    def generate_with_type(cls, type_: int) -> Smolid:
        """Generate a new smolid tagged with ``type_`` (0-127)."""
        from smolid.generator import default_generator

        return default_generator().generate_with_type(type_)

    # ── Accessors ────────────────────────────────────────────────────

    def as_value(self) -> int:
        return self.value

    def to_u64(self) -> int:
        return self.value

    def timestamp(self) -> datetime:
        """Creation time (UTC, millisecond resolution)."""
        return EPOCH + timedelta(milliseconds=self.value >> TIMESTAMP_SHIFT)

    def is_nil(self) -> bool:
        return self.value == 0

    def version(self) -> int:
        """Format version stored in bits 21-22 (0-3)."""
        return (self.value & VERSION_MASK) >> VERSION_SHIFT

    def is_valid(self) -> bool:
        """True for version 1, the only defined format."""
        return self.version() == V1

    def get_type(self) -> Optional[int]:
        """Type tag, or None when the type flag is clear."""
        if not self.value & TYPE_FLAG:
            return None
        return (self.value & TYPE_MASK) >> TYPE_SHIFT

    def is_of_type(self, type_: int) -> bool:
        typ = self.get_type()
        return typ is not None and typ == type_

    # ── Python protocols ─────────────────────────────────────────────

    def __str__(self) -> str:
        return encode(self.value)

    def __repr__(self) -> str:
        return f"Smolid('{self}')"

    def __int__(self) -> int:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Smolid):
            return NotImplemented
        return self.value < other.value


NIL = Smolid(value=0)
