# exifcodec/codec/arrays.py
"""
Homogeneous arrays of fixed-width elements.

Element i sits at i * stride with no padding and is converted on its own.
The caller guarantees len(data) >= count * stride; a short buffer surfaces
as ValueError from the primitive read.
"""
from __future__ import annotations

from typing import List, Sequence, Union

from exifcodec.model.byteorder import (
    SYSTEM_BYTE_ORDER,
    ByteOrder,
    decode_primitive,
    encode_primitive,
    primitive_size,
)
from exifcodec.model.fraction import Fraction32, UFraction32

from .rational import RATIONAL_SIZE, fraction_bytes, read_fraction

Number = Union[int, float]


def decode_array(encode: str, data: bytes, count: int, from_order: ByteOrder) -> List[Number]:
    stride = primitive_size(encode)
    return [
        decode_primitive(encode, data, i * stride, from_order=from_order, to_order=SYSTEM_BYTE_ORDER)
        for i in range(count)
    ]


def encode_array(encode: str, values: Sequence[Number], to_order: ByteOrder) -> bytes:
    stride = primitive_size(encode)
    out = bytearray(stride * len(values))
    for i, v in enumerate(values):
        out[i * stride: (i + 1) * stride] = encode_primitive(
            encode, v, from_order=SYSTEM_BYTE_ORDER, to_order=to_order
        )
    return bytes(out)


# ---------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------
def to_byte_array(data: bytes, count: int, from_order: ByteOrder) -> List[int]:
    return decode_array("uint8", data, count, from_order)


def to_sbyte_array(data: bytes, count: int, from_order: ByteOrder) -> List[int]:
    return decode_array("int8", data, count, from_order)


def to_ushort_array(data: bytes, count: int, from_order: ByteOrder) -> List[int]:
    return decode_array("uint16", data, count, from_order)


def to_sshort_array(data: bytes, count: int, from_order: ByteOrder) -> List[int]:
    return decode_array("int16", data, count, from_order)


def to_uint_array(data: bytes, count: int, from_order: ByteOrder) -> List[int]:
    return decode_array("uint32", data, count, from_order)


def to_sint_array(data: bytes, count: int, from_order: ByteOrder) -> List[int]:
    return decode_array("int32", data, count, from_order)


def to_single_array(data: bytes, count: int, from_order: ByteOrder) -> List[float]:
    return decode_array("float", data, count, from_order)


def to_double_array(data: bytes, count: int, from_order: ByteOrder) -> List[float]:
    return decode_array("double", data, count, from_order)


def to_urational_array(data: bytes, count: int, from_order: ByteOrder) -> List[UFraction32]:
    return [read_fraction(UFraction32, "uint32", data, i * RATIONAL_SIZE, from_order) for i in range(count)]


def to_srational_array(data: bytes, count: int, from_order: ByteOrder) -> List[Fraction32]:
    return [read_fraction(Fraction32, "int32", data, i * RATIONAL_SIZE, from_order) for i in range(count)]


# ---------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------
def byte_array_bytes(values: Sequence[int], to_order: ByteOrder) -> bytes:
    return encode_array("uint8", values, to_order)


def sbyte_array_bytes(values: Sequence[int], to_order: ByteOrder) -> bytes:
    return encode_array("int8", values, to_order)


def ushort_array_bytes(values: Sequence[int], to_order: ByteOrder) -> bytes:
    return encode_array("uint16", values, to_order)


def sshort_array_bytes(values: Sequence[int], to_order: ByteOrder) -> bytes:
    return encode_array("int16", values, to_order)


def uint_array_bytes(values: Sequence[int], to_order: ByteOrder) -> bytes:
    return encode_array("uint32", values, to_order)


def sint_array_bytes(values: Sequence[int], to_order: ByteOrder) -> bytes:
    return encode_array("int32", values, to_order)


def single_array_bytes(values: Sequence[float], to_order: ByteOrder) -> bytes:
    return encode_array("float", values, to_order)


def double_array_bytes(values: Sequence[float], to_order: ByteOrder) -> bytes:
    return encode_array("double", values, to_order)


def urational_array_bytes(values: Sequence[UFraction32], to_order: ByteOrder) -> bytes:
    return b"".join(fraction_bytes("uint32", v, to_order) for v in values)


def srational_array_bytes(values: Sequence[Fraction32], to_order: ByteOrder) -> bytes:
    return b"".join(fraction_bytes("int32", v, to_order) for v in values)
