# exifcodec/model/byteorder.py
"""
Primitive byte-order converter.

Reads and writes a single fixed-width scalar at a buffer offset, converting
between two named byte orders. Everything in exifcodec.codec is built on top
of decode_primitive / encode_primitive.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union
import struct
import sys


class ByteOrder(Enum):
    LITTLE_ENDIAN = "little"
    BIG_ENDIAN = "big"

    @classmethod
    def parse(cls, name: Union[str, "ByteOrder"]) -> "ByteOrder":
        """Accept 'little'/'big', 'le'/'be', 'II'/'MM' or an existing member."""
        if isinstance(name, ByteOrder):
            return name
        key = str(name).strip().lower()
        if key in ("little", "le", "ii", "<", "little_endian"):
            return cls.LITTLE_ENDIAN
        if key in ("big", "be", "mm", ">", "big_endian"):
            return cls.BIG_ENDIAN
        raise ValueError(f"Unknown byte order '{name}'")


# Determined once; never mutated.
SYSTEM_BYTE_ORDER: ByteOrder = ByteOrder(sys.byteorder)


@dataclass(frozen=True)
class PrimitiveCodec:
    fmt_le: str  # little-endian struct format
    fmt_be: str  # big-endian struct format
    size: int

    def fmt(self, order: ByteOrder) -> str:
        return self.fmt_le if order is ByteOrder.LITTLE_ENDIAN else self.fmt_be


PRIMITIVES: Dict[str, PrimitiveCodec] = {
    "uint8":  PrimitiveCodec(fmt_le="B",  fmt_be="B",  size=1),
    "int8":   PrimitiveCodec(fmt_le="b",  fmt_be="b",  size=1),
    "uint16": PrimitiveCodec(fmt_le="<H", fmt_be=">H", size=2),
    "int16":  PrimitiveCodec(fmt_le="<h", fmt_be=">h", size=2),
    "uint32": PrimitiveCodec(fmt_le="<I", fmt_be=">I", size=4),
    "int32":  PrimitiveCodec(fmt_le="<i", fmt_be=">i", size=4),
    "float":  PrimitiveCodec(fmt_le="<f", fmt_be=">f", size=4),
    "double": PrimitiveCodec(fmt_le="<d", fmt_be=">d", size=8),
}


def _codec(encode: str) -> PrimitiveCodec:
    enc = encode.lower()
    if enc not in PRIMITIVES:
        raise NotImplementedError(f"Unknown encode type '{encode}'")
    return PRIMITIVES[enc]


def primitive_size(encode: str) -> int:
    return _codec(encode).size


def swap_bytes(raw: bytes, from_order: ByteOrder, to_order: ByteOrder) -> bytes:
    """Reorder the bytes of one scalar from one byte order to another."""
    if from_order is to_order:
        return bytes(raw)
    return bytes(reversed(raw))


def decode_primitive(
    encode: str,
    data: bytes,
    offset: int = 0,
    *,
    from_order: ByteOrder,
    to_order: ByteOrder = SYSTEM_BYTE_ORDER,
) -> Union[int, float]:
    """
    Read one scalar of type `encode` at `offset`.

    The stored bytes are reordered from `from_order` to `to_order` and then
    read as a native value of a host whose byte order is `to_order`.
    """
    codec = _codec(encode)
    raw = bytes(data[offset: offset + codec.size])
    if len(raw) != codec.size:
        raise ValueError(
            f"Raw bytes length {len(raw)} != expected {codec.size} for '{encode}' at offset {offset}"
        )

    native = swap_bytes(raw, from_order, to_order)
    return struct.unpack(codec.fmt(to_order), native)[0]


def encode_primitive(
    encode: str,
    value: Union[int, float],
    *,
    to_order: ByteOrder,
    from_order: ByteOrder = SYSTEM_BYTE_ORDER,
) -> bytes:
    """Write one scalar held in `from_order` (native) as bytes in `to_order`."""
    codec = _codec(encode)
    try:
        native = struct.pack(codec.fmt(from_order), value)
    except (struct.error, OverflowError) as e:
        raise ValueError(f"Value {value!r} does not fit '{encode}': {e}") from e
    return swap_bytes(native, from_order, to_order)
