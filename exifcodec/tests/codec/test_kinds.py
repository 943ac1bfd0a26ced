from __future__ import annotations

from datetime import datetime

import pytest

from exifcodec.codec.dates import MIN_DATETIME
from exifcodec.codec.kinds import ValueKind, decode_value, encode_value
from exifcodec.core.errors import UnsupportedValueKindError
from exifcodec.model.byteorder import ByteOrder
from exifcodec.model.fraction import Fraction32, UFraction32

LE = ByteOrder.LITTLE_ENDIAN
BE = ByteOrder.BIG_ENDIAN

VALUES = {
    ValueKind.ASCII: "EXIF",
    ValueKind.DATETIME: datetime(2020, 1, 5, 9, 3, 7),
    ValueKind.DATE: datetime(2020, 1, 5),
    ValueKind.UNDEFINED: b"0230",
    ValueKind.URATIONAL: UFraction32(1, 250),
    ValueKind.SRATIONAL: Fraction32(-1, 3),
    ValueKind.BYTE_ARRAY: [1, 2, 255],
    ValueKind.SBYTE_ARRAY: [-1, 2],
    ValueKind.USHORT_ARRAY: [1, 2, 3],
    ValueKind.SSHORT_ARRAY: [-2, 5],
    ValueKind.UINT_ARRAY: [70000],
    ValueKind.SINT_ARRAY: [-70000, 1],
    ValueKind.SINGLE_ARRAY: [0.5, 8.0],
    ValueKind.DOUBLE_ARRAY: [0.1, -3.75],
    ValueKind.URATIONAL_ARRAY: [UFraction32(35, 1), UFraction32(41, 1), UFraction32(2047, 100)],
    ValueKind.SRATIONAL_ARRAY: [Fraction32(-7, 2)],
}


def test_every_kind_has_a_sample():
    assert set(VALUES) == set(ValueKind)


@pytest.mark.parametrize("order", [LE, BE])
@pytest.mark.parametrize("kind", list(ValueKind))
def test_round_trip_every_kind(kind, order):
    raw = encode_value(kind, VALUES[kind], order)
    assert decode_value(kind, raw, order) == VALUES[kind]
    assert encode_value(kind, decode_value(kind, raw, order), order) == raw


def test_strides():
    assert ValueKind.ASCII.stride is None
    assert ValueKind.DATETIME.stride is None
    assert ValueKind.USHORT_ARRAY.stride == 2
    assert ValueKind.SINGLE_ARRAY.stride == 4
    assert ValueKind.DOUBLE_ARRAY.stride == 8
    assert ValueKind.URATIONAL_ARRAY.stride == 8


def test_kind_accepts_names():
    assert decode_value("ushort_array", b"\x01\x00", LE) == [1]
    assert ValueKind.parse(" URATIONAL ") is ValueKind.URATIONAL


def test_unknown_kind_raises():
    with pytest.raises(UnsupportedValueKindError) as ei:
        decode_value("quad_array", b"", LE)
    assert ei.value.code == "unsupported_value_kind"


def test_explicit_count():
    raw = encode_value(ValueKind.USHORT_ARRAY, [1, 2, 3], BE)
    assert decode_value(ValueKind.USHORT_ARRAY, raw, BE, count=2) == [1, 2]


def test_default_count_ignores_partial_element():
    assert decode_value(ValueKind.USHORT_ARRAY, b"\x01\x00\x02", LE) == [1]


def test_undefined_count_is_byte_count():
    assert decode_value(ValueKind.UNDEFINED, b"abcdef", LE, count=3) == b"abc"


def test_ascii_is_null_terminated():
    assert encode_value(ValueKind.ASCII, "AB", LE) == b"AB\x00"
    assert decode_value(ValueKind.ASCII, b"AB\x00C", LE) == "AB"


def test_ascii_encoding_passed_through():
    raw = encode_value(ValueKind.ASCII, "Zoë", LE, encoding="utf-8")
    assert decode_value(ValueKind.ASCII, raw, LE, encoding="utf-8") == "Zoë"


def test_datetime_kind_never_raises():
    assert decode_value(ValueKind.DATETIME, b"2020:13:01 00:00:00", LE) == MIN_DATETIME
