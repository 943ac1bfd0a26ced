# exifcodec/codec/kinds.py
"""
Explicit dispatch over the closed set of value kinds.

Callers name the kind; nothing is inferred from the Python type of the value.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from exifcodec.core.errors import UnsupportedValueKindError
from exifcodec.model.byteorder import ByteOrder

from . import arrays, dates, rational, text


class ValueKind(Enum):
    ASCII = "ascii"
    DATETIME = "datetime"
    DATE = "date"
    UNDEFINED = "undefined"
    URATIONAL = "urational"
    SRATIONAL = "srational"
    BYTE_ARRAY = "byte_array"
    SBYTE_ARRAY = "sbyte_array"
    USHORT_ARRAY = "ushort_array"
    SSHORT_ARRAY = "sshort_array"
    UINT_ARRAY = "uint_array"
    SINT_ARRAY = "sint_array"
    SINGLE_ARRAY = "single_array"
    DOUBLE_ARRAY = "double_array"
    URATIONAL_ARRAY = "urational_array"
    SRATIONAL_ARRAY = "srational_array"

    @classmethod
    def parse(cls, name: Any) -> "ValueKind":
        if isinstance(name, ValueKind):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnsupportedValueKindError(
                f"Unsupported value kind '{name}'",
                hint="Known kinds: " + ", ".join(k.value for k in cls),
            ) from None

    @property
    def stride(self) -> Optional[int]:
        """Bytes per element; None for text kinds."""
        return _CODECS[self].stride


@dataclass(frozen=True)
class KindCodec:
    # decode(data, count, order, encoding) / encode(value, order, encoding)
    decode: Callable[[bytes, Optional[int], ByteOrder, str], Any]
    encode: Callable[[Any, ByteOrder, str], bytes]
    stride: Optional[int] = None


def _count(data: bytes, count: Optional[int], stride: int) -> int:
    return len(data) // stride if count is None else int(count)


def _array(decode_fn, encode_fn, stride: int) -> KindCodec:
    return KindCodec(
        decode=lambda d, n, o, e: decode_fn(d, _count(d, n, stride), o),
        encode=lambda v, o, e: encode_fn(v, o),
        stride=stride,
    )


_CODECS: Dict[ValueKind, KindCodec] = {
    ValueKind.ASCII: KindCodec(
        decode=lambda d, n, o, e: text.to_ascii(d, True, e),
        encode=lambda v, o, e: text.ascii_bytes(v, True, e),
    ),
    ValueKind.DATETIME: KindCodec(
        decode=lambda d, n, o, e: dates.to_datetime(d, True),
        encode=lambda v, o, e: dates.datetime_bytes(v, True),
    ),
    ValueKind.DATE: KindCodec(
        decode=lambda d, n, o, e: dates.to_datetime(d, False),
        encode=lambda v, o, e: dates.datetime_bytes(v, False),
    ),
    ValueKind.UNDEFINED: KindCodec(
        decode=lambda d, n, o, e: bytes(d) if n is None else bytes(d[:n]),
        encode=lambda v, o, e: bytes(v),
        stride=1,
    ),
    ValueKind.URATIONAL: KindCodec(
        decode=lambda d, n, o, e: rational.to_urational(d, o),
        encode=lambda v, o, e: rational.urational_bytes(v, o),
        stride=rational.RATIONAL_SIZE,
    ),
    ValueKind.SRATIONAL: KindCodec(
        decode=lambda d, n, o, e: rational.to_srational(d, o),
        encode=lambda v, o, e: rational.srational_bytes(v, o),
        stride=rational.RATIONAL_SIZE,
    ),
    ValueKind.BYTE_ARRAY: _array(arrays.to_byte_array, arrays.byte_array_bytes, 1),
    ValueKind.SBYTE_ARRAY: _array(arrays.to_sbyte_array, arrays.sbyte_array_bytes, 1),
    ValueKind.USHORT_ARRAY: _array(arrays.to_ushort_array, arrays.ushort_array_bytes, 2),
    ValueKind.SSHORT_ARRAY: _array(arrays.to_sshort_array, arrays.sshort_array_bytes, 2),
    ValueKind.UINT_ARRAY: _array(arrays.to_uint_array, arrays.uint_array_bytes, 4),
    ValueKind.SINT_ARRAY: _array(arrays.to_sint_array, arrays.sint_array_bytes, 4),
    ValueKind.SINGLE_ARRAY: _array(arrays.to_single_array, arrays.single_array_bytes, 4),
    ValueKind.DOUBLE_ARRAY: _array(arrays.to_double_array, arrays.double_array_bytes, 8),
    ValueKind.URATIONAL_ARRAY: _array(
        arrays.to_urational_array, arrays.urational_array_bytes, rational.RATIONAL_SIZE
    ),
    ValueKind.SRATIONAL_ARRAY: _array(
        arrays.to_srational_array, arrays.srational_array_bytes, rational.RATIONAL_SIZE
    ),
}


def decode_value(
    kind: Any,
    data: bytes,
    from_order: ByteOrder,
    *,
    count: Optional[int] = None,
    encoding: str = "ascii",
) -> Any:
    """
    Decode `data` as `kind`.

    count is the element count for array kinds (defaults to as many whole
    elements as the buffer holds) and the byte count for UNDEFINED; text,
    date and single-rational kinds ignore it.
    """
    return _CODECS[ValueKind.parse(kind)].decode(data, count, from_order, encoding)


def encode_value(kind: Any, value: Any, to_order: ByteOrder, *, encoding: str = "ascii") -> bytes:
    """Encode `value` as `kind`. ASCII values get a terminating zero byte."""
    return _CODECS[ValueKind.parse(kind)].encode(value, to_order, encoding)
