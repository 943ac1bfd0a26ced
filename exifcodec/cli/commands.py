# exifcodec/cli/commands.py
from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from exifcodec.app.config import CodecConfig
from exifcodec.codec.dates import format_datetime, parse_datetime
from exifcodec.codec.fields import decode_field, encode_field
from exifcodec.codec.kinds import ValueKind, decode_value, encode_value
from exifcodec.core.errors import UnknownFieldTypeError
from exifcodec.model.field_type import FieldType
from exifcodec.model.fraction import Fraction32, UFraction32
from exifcodec.model.loader import FieldTypeLoader

log = logging.getLogger(__name__)

_INT_ARRAYS = {
    ValueKind.BYTE_ARRAY, ValueKind.SBYTE_ARRAY,
    ValueKind.USHORT_ARRAY, ValueKind.SSHORT_ARRAY,
    ValueKind.UINT_ARRAY, ValueKind.SINT_ARRAY,
}
_FLOAT_ARRAYS = {ValueKind.SINGLE_ARRAY, ValueKind.DOUBLE_ARRAY}


# ---------------- type resolution ----------------

def load_catalog(cfg: CodecConfig) -> FieldTypeLoader:
    loader = FieldTypeLoader(cfg.metadata_dir)
    loader.load_all()
    return loader


def resolve_type(loader: FieldTypeLoader, name: str) -> Tuple[ValueKind, Optional[FieldType]]:
    """A field type from the catalog wins; otherwise `name` must be a value kind."""
    try:
        ft = loader.resolve(name)
    except UnknownFieldTypeError:
        return ValueKind.parse(name), None
    return ValueKind.parse(ft.kind), ft


# ---------------- value text <-> python ----------------

def parse_value(kind: ValueKind, text: str) -> Any:
    if kind is ValueKind.ASCII:
        return text
    if kind is ValueKind.DATETIME:
        return parse_datetime(text, has_time=True)
    if kind is ValueKind.DATE:
        return parse_datetime(text, has_time=False)
    if kind is ValueKind.UNDEFINED:
        return bytes.fromhex(text)
    if kind is ValueKind.URATIONAL:
        return UFraction32.parse(text)
    if kind is ValueKind.SRATIONAL:
        return Fraction32.parse(text)

    items = [s for s in (p.strip() for p in text.split(",")) if s]
    if kind in _INT_ARRAYS:
        return [int(s, 0) for s in items]
    if kind in _FLOAT_ARRAYS:
        return [float(s) for s in items]
    if kind is ValueKind.URATIONAL_ARRAY:
        return [UFraction32.parse(s) for s in items]
    return [Fraction32.parse(s) for s in items]


def render_value(kind: ValueKind, value: Any) -> str:
    if kind is ValueKind.DATETIME:
        return format_datetime(value, has_time=True)
    if kind is ValueKind.DATE:
        return format_datetime(value, has_time=False)
    if isinstance(value, bytes):
        return value.hex(" ")
    if isinstance(value, list):
        return "[" + ", ".join(str(v) for v in value) + "]"
    return str(value)


# ---------------- commands ----------------

def cmd_types(cfg: CodecConfig) -> int:
    loader = load_catalog(cfg)
    for tid in sorted(loader.field_types):
        ft = loader.field_types[tid]
        print(f"{ft.type_id:>3}  {ft.name:<10} size={ft.size}  kind={ft.kind}")
    return 0


def cmd_decode(cfg: CodecConfig, *, type_name: str, hex_parts: list[str], count: Optional[int]) -> int:
    kind, ft = resolve_type(load_catalog(cfg), type_name)
    data = bytes.fromhex("".join(hex_parts))
    log.debug("decode %s (%d bytes, %s)", kind.value, len(data), cfg.byte_order.value)

    if ft is not None:
        n = count if count is not None else len(data) // ft.size
        value = decode_field(ft, data, n, cfg.byte_order, encoding=cfg.text_encoding)
    else:
        value = decode_value(kind, data, cfg.byte_order, count=count, encoding=cfg.text_encoding)

    print(render_value(kind, value))
    return 0


def cmd_encode(cfg: CodecConfig, *, type_name: str, text: str) -> int:
    kind, ft = resolve_type(load_catalog(cfg), type_name)
    value = parse_value(kind, text)

    if ft is not None:
        raw = encode_field(ft, value, cfg.byte_order, encoding=cfg.text_encoding)
    else:
        raw = encode_value(kind, value, cfg.byte_order, encoding=cfg.text_encoding)

    print(raw.hex(" "))
    return 0
