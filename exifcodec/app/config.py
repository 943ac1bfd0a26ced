# exifcodec/app/config.py
from __future__ import annotations

from dataclasses import dataclass, field

from exifcodec.model.byteorder import ByteOrder, SYSTEM_BYTE_ORDER
from exifcodec.model.loader import DEFAULT_METADATA_DIR


@dataclass(frozen=True)
class CodecConfig:
    metadata_dir: str = str(DEFAULT_METADATA_DIR)
    byte_order: ByteOrder = field(default=SYSTEM_BYTE_ORDER)
    text_encoding: str = "ascii"
