from __future__ import annotations

import pytest

from exifcodec.codec.fields import decode_field, encode_field
from exifcodec.model.byteorder import ByteOrder
from exifcodec.model.fraction import Fraction32, UFraction32
from exifcodec.model.loader import load_default_field_types

LE = ByteOrder.LITTLE_ENDIAN
BE = ByteOrder.BIG_ENDIAN


@pytest.fixture(scope="module")
def catalog():
    return load_default_field_types()


def test_short_field_uses_count(catalog):
    ft = catalog.resolve("SHORT")
    data = b"\x00\x01\x00\x02\x00\x03\xff\xff"
    assert decode_field(ft, data, 3, BE) == [1, 2, 3]


def test_ascii_field(catalog):
    ft = catalog.resolve(2)
    raw = encode_field(ft, "Canon", LE)
    assert raw == b"Canon\x00"
    assert decode_field(ft, raw + b"padding", len(raw), LE) == "Canon"


def test_rational_field_gps_latitude(catalog):
    ft = catalog.resolve("RATIONAL")
    value = [UFraction32(52, 1), UFraction32(22, 1), UFraction32(1234, 100)]
    raw = encode_field(ft, value, BE)
    assert len(raw) == ft.byte_count(3) == 24
    assert decode_field(ft, raw, 3, BE) == value


def test_srational_field(catalog):
    ft = catalog.resolve("SRATIONAL")
    raw = encode_field(ft, [Fraction32(-1, 3)], LE)
    assert decode_field(ft, raw, 1, LE) == [Fraction32(-1, 3)]


def test_undefined_field_returns_bytes(catalog):
    ft = catalog.resolve("UNDEFINED")
    assert decode_field(ft, b"0230xx", 4, LE) == b"0230"


def test_sbyte_and_double_fields(catalog):
    assert decode_field(catalog.resolve("SBYTE"), b"\xff\x01", 2, LE) == [-1, 1]
    raw = encode_field(catalog.resolve("DOUBLE"), [0.5], BE)
    assert raw == b"\x3F\xE0\x00\x00\x00\x00\x00\x00"
