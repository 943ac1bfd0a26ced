"""Typed-value codec for EXIF/TIFF tag payloads."""
from exifcodec.model import ByteOrder, SYSTEM_BYTE_ORDER, UFraction32, Fraction32, FieldType
from exifcodec.codec import ExifBitConverter, ValueKind, MIN_DATETIME, decode_value, encode_value

__version__ = "0.1.0"

__all__ = ["ByteOrder",
           "SYSTEM_BYTE_ORDER",
           "UFraction32",
           "Fraction32",
           "FieldType",
           "ExifBitConverter",
           "ValueKind",
           "MIN_DATETIME",
           "decode_value",
           "encode_value"]
