# exifcodec/codec/converter.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from exifcodec.model.byteorder import (
    SYSTEM_BYTE_ORDER,
    ByteOrder,
    decode_primitive,
    encode_primitive,
)

from .kinds import decode_value, encode_value


@dataclass(frozen=True)
class ExifBitConverter:
    """
    Converter bound to a (from_order, to_order) pair.

    Immutable, so one instance can be shared between threads. Both
    directions convert from_order -> to_order: decode and the primitive
    reads take buffers stored in from_order, encode and get_bytes produce
    buffers in to_order.
    """
    from_order: ByteOrder
    to_order: ByteOrder = SYSTEM_BYTE_ORDER
    encoding: str = "ascii"

    @classmethod
    def for_stream(cls, stream_order: Union[str, ByteOrder], *, encoding: str = "ascii") -> "ExifBitConverter":
        """Converter reading buffers stored in `stream_order` into host order."""
        return cls(ByteOrder.parse(stream_order), SYSTEM_BYTE_ORDER, encoding)

    # --- primitives ---
    def read(self, encode: str, data: bytes, offset: int = 0) -> Union[int, float]:
        return decode_primitive(encode, data, offset, from_order=self.from_order, to_order=self.to_order)

    def get_bytes(self, encode: str, value: Union[int, float]) -> bytes:
        return encode_primitive(encode, value, from_order=self.from_order, to_order=self.to_order)

    def to_uint16(self, data: bytes, offset: int = 0) -> int:
        return int(self.read("uint16", data, offset))

    def to_int16(self, data: bytes, offset: int = 0) -> int:
        return int(self.read("int16", data, offset))

    def to_uint32(self, data: bytes, offset: int = 0) -> int:
        return int(self.read("uint32", data, offset))

    def to_int32(self, data: bytes, offset: int = 0) -> int:
        return int(self.read("int32", data, offset))

    def to_single(self, data: bytes, offset: int = 0) -> float:
        return float(self.read("float", data, offset))

    def to_double(self, data: bytes, offset: int = 0) -> float:
        return float(self.read("double", data, offset))

    # --- typed values ---
    def decode(self, kind: Any, data: bytes, count: Optional[int] = None) -> Any:
        return decode_value(kind, data, self.from_order, count=count, encoding=self.encoding)

    def encode(self, kind: Any, value: Any) -> bytes:
        return encode_value(kind, value, self.to_order, encoding=self.encoding)
