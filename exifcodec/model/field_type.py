# exifcodec/model/field_type.py
from __future__ import annotations


class FieldType:
    """
    Static model of a TIFF/EXIF field type (catalog entry).

    Attributes:
        type_id: Numeric type as stored in an IFD entry (1..12).
        name: Canonical name, e.g. "SHORT", "RATIONAL".
        kind: Value kind name used for decoding (see exifcodec.codec.kinds).
        size: Bytes per element (1 for ASCII/UNDEFINED).
    """

    def __init__(self, type_id: int, name: str, kind: str, size: int):
        self.type_id: int = int(type_id)
        self.name: str = str(name).upper()
        self.kind: str = str(kind)
        self.size: int = int(size)
        if self.size <= 0:
            raise ValueError(f"Field type {self.name} size must be positive, got {self.size}")

    def byte_count(self, count: int) -> int:
        """Payload length for `count` elements."""
        return self.size * int(count)

    def as_dict(self) -> dict:
        return {
            "type_id": self.type_id,
            "name": self.name,
            "kind": self.kind,
            "size": self.size,
        }

    def __repr__(self) -> str:
        return f"FieldType(type_id={self.type_id}, name='{self.name}', kind='{self.kind}')"
