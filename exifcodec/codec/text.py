# exifcodec/codec/text.py
from __future__ import annotations


def to_ascii(data: bytes, end_at_first_null: bool = True, encoding: str = "ascii") -> str:
    """
    Decode a text payload.

    With end_at_first_null the payload is cut at the first zero byte (the
    whole buffer is used when there is none). The scan is byte-wise, so a
    multi-byte encoding whose code units contain 0x00 is cut there too.
    Decoding errors propagate.
    """
    raw = bytes(data)
    length = len(raw)
    if end_at_first_null:
        idx = raw.find(0)
        if idx != -1:
            length = idx
    return raw[:length].decode(encoding)


def to_numeric_string(data: bytes) -> str:
    # b"\x01\x0a" -> "110"
    return "".join(str(b) for b in bytes(data))


def ascii_bytes(value: str, add_null: bool = False, encoding: str = "ascii") -> bytes:
    if add_null:
        value += "\0"
    return value.encode(encoding)
