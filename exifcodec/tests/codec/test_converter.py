from __future__ import annotations

import threading

import pytest

from exifcodec.codec.converter import ExifBitConverter
from exifcodec.codec.kinds import ValueKind
from exifcodec.model.byteorder import SYSTEM_BYTE_ORDER, ByteOrder
from exifcodec.model.fraction import UFraction32

LE = ByteOrder.LITTLE_ENDIAN
BE = ByteOrder.BIG_ENDIAN


def test_for_stream_targets_host_order():
    conv = ExifBitConverter.for_stream("MM")
    assert conv.from_order is BE
    assert conv.to_order is SYSTEM_BYTE_ORDER


def test_primitive_reads():
    conv = ExifBitConverter(BE)
    data = b"\x00\x2A\xFF\xFE\x00\x00\x01\x00"
    assert conv.to_uint16(data) == 42
    assert conv.to_int16(data, 2) == -2
    assert conv.to_uint32(data, 4) == 256
    assert conv.to_int32(b"\xff\xff\xff\xff") == -1
    assert conv.to_single(b"\x3F\x80\x00\x00") == 1.0
    assert conv.to_double(b"\x3F\xF0\x00\x00\x00\x00\x00\x00") == 1.0


def test_get_bytes_writes_destination_order():
    assert ExifBitConverter(BE, LE).get_bytes("uint16", 0x0102) == b"\x02\x01"
    assert ExifBitConverter(LE, BE).get_bytes("uint16", 0x0102) == b"\x01\x02"
    assert ExifBitConverter(BE, BE).get_bytes("uint32", 7) == b"\x00\x00\x00\x07"


def test_encode_uses_destination_and_decode_uses_source():
    conv = ExifBitConverter(BE, LE)
    assert conv.encode(ValueKind.USHORT_ARRAY, [1]) == b"\x01\x00"
    assert conv.decode(ValueKind.USHORT_ARRAY, b"\x00\x01") == [1]


def test_big_to_little_re_encodes_stream():
    raw_be = b"\x00\x00\x00\x01\x00\x00\x00\x02"
    conv = ExifBitConverter(BE, LE)
    value = conv.decode(ValueKind.URATIONAL_ARRAY, raw_be, 1)
    assert value == [UFraction32(1, 2)]
    assert conv.encode(ValueKind.URATIONAL_ARRAY, value) == b"\x01\x00\x00\x00\x02\x00\x00\x00"


def test_typed_round_trip():
    conv = ExifBitConverter(LE, LE)
    raw = conv.encode(ValueKind.URATIONAL_ARRAY, [UFraction32(1, 2)])
    assert raw == b"\x01\x00\x00\x00\x02\x00\x00\x00"
    assert conv.decode(ValueKind.URATIONAL_ARRAY, raw, 1) == [UFraction32(1, 2)]


def test_configured_encoding_is_used():
    conv = ExifBitConverter(LE, encoding="latin-1")
    assert conv.encode("ascii", "é") == b"\xe9\x00"
    assert conv.decode("ascii", b"\xe9\x00") == "é"


def test_converter_is_immutable():
    conv = ExifBitConverter(LE)
    with pytest.raises(AttributeError):
        conv.from_order = BE


def test_shared_between_threads():
    conv = ExifBitConverter(BE, BE)
    raw = conv.encode(ValueKind.UINT_ARRAY, list(range(100)))
    results = []

    def worker() -> None:
        results.append(conv.decode(ValueKind.UINT_ARRAY, raw, 100))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == [list(range(100))] * 8
