"""Tests for the Smolid value type."""

from datetime import timedelta

import pytest
from pydantic import BaseModel, ValidationError

from smolid import NIL, Smolid
from smolid.errors import InvalidEncodingError, InvalidLengthError
from smolid.models.layout import EPOCH

# 1000 ms after the epoch, version 1, no type, entropy 0
V1_AT_1S = (1000 << 23) | (1 << 21)


class TestConstruction:
    def test_from_value(self):
        sid = Smolid(value=V1_AT_1S)
        assert sid.as_value() == V1_AT_1S
        assert sid.to_u64() == V1_AT_1S
        assert int(sid) == V1_AT_1S

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            Smolid(value=-1)

    def test_over_64_bits_rejected(self):
        with pytest.raises(ValidationError):
            Smolid(value=1 << 64)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            Smolid(value=True)

    def test_frozen(self):
        sid = Smolid(value=1)
        with pytest.raises(ValidationError):
            sid.value = 2

    def test_parse(self):
        assert Smolid.parse("aaaaaaaaaaaac") == Smolid(value=1)
        assert Smolid.parse("AAAAAAAAAAAAC") == Smolid(value=1)

    def test_parse_errors(self):
        with pytest.raises(InvalidEncodingError):
            Smolid.parse("aaaaaaaaaaaa!")
        with pytest.raises(InvalidLengthError):
            Smolid.parse("aaaaaaaaaaaa")

    def test_model_validate_int_and_str(self):
        assert Smolid.model_validate(1) == Smolid(value=1)
        assert Smolid.model_validate("aaaaaaaaaaaac") == Smolid(value=1)
        assert Smolid.model_validate(Smolid(value=1)) == Smolid(value=1)


class TestNil:
    def test_nil(self):
        sid = Smolid.nil()
        assert sid == NIL
        assert sid.is_nil()
        assert sid.as_value() == 0
        assert sid.get_type() is None
        assert sid.version() == 0
        assert not sid.is_valid()
        assert sid.timestamp() == EPOCH

    def test_nil_keeps_subclass(self):
        class OrderId(Smolid):
            pass

        sid = OrderId.nil()
        assert type(sid) is OrderId
        assert sid.is_nil()

    def test_nil_text_round_trip(self):
        assert str(NIL) == "aaaaaaaaaaaaa"
        assert Smolid.parse("aaaaaaaaaaaaa").is_nil()

    def test_non_zero_is_not_nil(self):
        assert not Smolid(value=1).is_nil()


class TestAccessors:
    def test_timestamp(self):
        sid = Smolid(value=V1_AT_1S)
        assert sid.timestamp() == EPOCH + timedelta(seconds=1)
        assert sid.timestamp().tzinfo is not None

    def test_timestamp_ignores_version(self):
        sid = Smolid(value=(1000 << 23) | (0b11 << 21))
        assert sid.timestamp() == EPOCH + timedelta(seconds=1)

    def test_version(self):
        assert Smolid(value=V1_AT_1S).version() == 1
        assert Smolid(value=0b10 << 21).version() == 2
        assert Smolid(value=0b11 << 21).version() == 3

    def test_version_ignores_entropy_bits(self):
        # low bits of the entropy region must not leak into the version
        sid = Smolid(value=0b11)
        assert sid.version() == 0
        assert not sid.is_valid()

    def test_is_valid(self):
        assert Smolid(value=V1_AT_1S).is_valid()
        assert not Smolid(value=0b10 << 21).is_valid()

    def test_untyped(self):
        # type field bits set but flag clear: no type
        sid = Smolid(value=V1_AT_1S | (0b1111111 << 9))
        assert sid.get_type() is None
        assert not sid.is_of_type(127)
        assert not sid.is_of_type(0)

    def test_typed(self):
        sid = Smolid(value=V1_AT_1S | (1 << 20) | (42 << 9) | 0x1FF)
        assert sid.get_type() == 42
        assert sid.is_of_type(42)
        assert not sid.is_of_type(41)

    def test_type_zero(self):
        sid = Smolid(value=V1_AT_1S | (1 << 20))
        assert sid.get_type() == 0
        assert sid.is_of_type(0)

    def test_accessors_idempotent(self):
        sid = Smolid(value=V1_AT_1S | (1 << 20) | (9 << 9))
        assert sid.timestamp() == sid.timestamp()
        assert sid.version() == sid.version()
        assert sid.get_type() == sid.get_type()
        assert str(sid) == str(sid)


class TestProtocols:
    def test_str_and_repr(self):
        sid = Smolid(value=1)
        assert str(sid) == "aaaaaaaaaaaac"
        assert repr(sid) == "Smolid('aaaaaaaaaaaac')"

    def test_equality_and_hash(self):
        a = Smolid(value=1)
        b = Smolid(value=1)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1
        assert a != Smolid(value=2)

    def test_ordering(self):
        early = Smolid(value=1000 << 23)
        late = Smolid(value=2000 << 23)
        assert early < late
        assert late >= early
        assert sorted([late, early]) == [early, late]


class Record(BaseModel):
    id: Smolid
    name: str = ""


class TestPydanticField:
    def test_dump_as_text(self):
        rec = Record(id=Smolid(value=1), name="x")
        assert rec.model_dump() == {"id": "aaaaaaaaaaaac", "name": "x"}

    def test_json_round_trip(self):
        rec = Record(id=Smolid(value=V1_AT_1S | 77), name="x")
        assert Record.model_validate_json(rec.model_dump_json()) == rec

    def test_validate_from_text(self):
        rec = Record.model_validate({"id": "AAAAAAAAAAAAC"})
        assert rec.id.as_value() == 1

    def test_invalid_text_rejected(self):
        with pytest.raises(ValidationError):
            Record.model_validate({"id": "not-a-smolid"})
