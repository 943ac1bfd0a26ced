# exifcodec/codec/fields.py
from __future__ import annotations

from typing import Any

from exifcodec.model.byteorder import ByteOrder
from exifcodec.model.field_type import FieldType

from .kinds import ValueKind, decode_value, encode_value


def decode_field(field_type: FieldType, data: bytes, count: int, from_order: ByteOrder, *, encoding: str = "ascii") -> Any:
    """
    Decode the payload of an IFD entry of `field_type` holding `count` elements.

    Only the first field_type.byte_count(count) bytes are looked at.
    """
    payload = bytes(data[: field_type.byte_count(count)])
    kind = ValueKind.parse(field_type.kind)
    return decode_value(kind, payload, from_order, count=count, encoding=encoding)


def encode_field(field_type: FieldType, value: Any, to_order: ByteOrder, *, encoding: str = "ascii") -> bytes:
    return encode_value(ValueKind.parse(field_type.kind), value, to_order, encoding=encoding)
