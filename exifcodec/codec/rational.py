# exifcodec/codec/rational.py
"""
RATIONAL / SRATIONAL: 8 bytes, 4-byte numerator followed by 4-byte
denominator, each converted on its own. No reduction, no zero check.
"""
from __future__ import annotations

from typing import Type, TypeVar, Union

from exifcodec.model.byteorder import SYSTEM_BYTE_ORDER, ByteOrder, decode_primitive, encode_primitive
from exifcodec.model.fraction import Fraction32, UFraction32

RATIONAL_SIZE = 8

F = TypeVar("F", UFraction32, Fraction32)


def read_fraction(cls: Type[F], encode: str, data: bytes, offset: int, from_order: ByteOrder) -> F:
    num = decode_primitive(encode, data, offset, from_order=from_order, to_order=SYSTEM_BYTE_ORDER)
    den = decode_primitive(encode, data, offset + 4, from_order=from_order, to_order=SYSTEM_BYTE_ORDER)
    return cls(num, den)


def fraction_bytes(encode: str, value: Union[UFraction32, Fraction32], to_order: ByteOrder) -> bytes:
    num = encode_primitive(encode, value.numerator, from_order=SYSTEM_BYTE_ORDER, to_order=to_order)
    den = encode_primitive(encode, value.denominator, from_order=SYSTEM_BYTE_ORDER, to_order=to_order)
    return num + den


def to_urational(data: bytes, from_order: ByteOrder) -> UFraction32:
    return read_fraction(UFraction32, "uint32", data, 0, from_order)


def to_srational(data: bytes, from_order: ByteOrder) -> Fraction32:
    return read_fraction(Fraction32, "int32", data, 0, from_order)


def urational_bytes(value: UFraction32, to_order: ByteOrder) -> bytes:
    return fraction_bytes("uint32", value, to_order)


def srational_bytes(value: Fraction32, to_order: ByteOrder) -> bytes:
    return fraction_bytes("int32", value, to_order)
