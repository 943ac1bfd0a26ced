from .text import to_ascii, to_numeric_string, ascii_bytes
from .dates import MIN_DATETIME, to_datetime, to_date, datetime_bytes, date_bytes
from .rational import to_urational, to_srational, urational_bytes, srational_bytes
from .arrays import (
    to_byte_array, to_sbyte_array,
    to_ushort_array, to_sshort_array,
    to_uint_array, to_sint_array,
    to_single_array, to_double_array,
    to_urational_array, to_srational_array,
    byte_array_bytes, sbyte_array_bytes,
    ushort_array_bytes, sshort_array_bytes,
    uint_array_bytes, sint_array_bytes,
    single_array_bytes, double_array_bytes,
    urational_array_bytes, srational_array_bytes,
)
from .kinds import ValueKind, decode_value, encode_value
from .converter import ExifBitConverter
from .fields import decode_field, encode_field

__all__ = [
    "to_ascii", "to_numeric_string", "ascii_bytes",
    "MIN_DATETIME", "to_datetime", "to_date", "datetime_bytes", "date_bytes",
    "to_urational", "to_srational", "urational_bytes", "srational_bytes",
    "to_byte_array", "to_sbyte_array",
    "to_ushort_array", "to_sshort_array",
    "to_uint_array", "to_sint_array",
    "to_single_array", "to_double_array",
    "to_urational_array", "to_srational_array",
    "byte_array_bytes", "sbyte_array_bytes",
    "ushort_array_bytes", "sshort_array_bytes",
    "uint_array_bytes", "sint_array_bytes",
    "single_array_bytes", "double_array_bytes",
    "urational_array_bytes", "srational_array_bytes",
    "ValueKind", "decode_value", "encode_value",
    "ExifBitConverter",
    "decode_field", "encode_field",
]
