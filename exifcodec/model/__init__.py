from .byteorder import ByteOrder, SYSTEM_BYTE_ORDER, PrimitiveCodec, PRIMITIVES
from .fraction import UFraction32, Fraction32
from .field_type import FieldType

__all__ = ["ByteOrder",
           "SYSTEM_BYTE_ORDER",
           "PrimitiveCodec",
           "PRIMITIVES",
           "UFraction32",
           "Fraction32",
           "FieldType"]
