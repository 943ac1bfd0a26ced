# exifcodec/model/loader.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml

from exifcodec.codec.kinds import ValueKind
from exifcodec.core.errors import UnknownFieldTypeError
from .field_type import FieldType

DEFAULT_METADATA_DIR = Path(__file__).resolve().parents[1] / "metadata"


class FieldTypeLoader:
    """
    Loads the TIFF/EXIF field-type catalog from YAML.

    Loads:
        - field_types.yml

    After calling load_all(), exposes:
        self.field_types : dict[int, FieldType]
    """

    FILENAME = "field_types.yml"

    def __init__(self, config_dir: str | Path = DEFAULT_METADATA_DIR, *, logger: Optional[logging.Logger] = None):
        self.config_dir = Path(config_dir)
        self.field_types: Dict[int, FieldType] = {}
        self._log = logger or logging.getLogger(__name__)

    # ---------------------------------------------------------------------
    # YAML utility
    # ---------------------------------------------------------------------
    def _load_yaml(self, filename: str) -> dict:
        full_path = self.config_dir / filename
        if not full_path.exists():
            raise FileNotFoundError(f"Missing metadata file: {full_path}")

        with open(full_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    # ---------------------------------------------------------------------
    # Public entry point
    # ---------------------------------------------------------------------
    def load_all(self) -> None:
        self.field_types.clear()

        data = self._load_yaml(self.FILENAME)
        entries = data.get("field_types")
        if not isinstance(entries, dict):
            raise ValueError(f"{self.FILENAME} is missing 'field_types' root node")

        for tid_raw, info in entries.items():
            tid = int(tid_raw)
            if not isinstance(info, dict):
                raise ValueError(f"Field type {tid} entry must be a mapping")

            name = info.get("name")
            if not name:
                raise ValueError(f"Field type {tid} is missing 'name'")

            kind = info.get("kind")
            if not kind:
                raise ValueError(f"Field type {tid} is missing 'kind'")
            ValueKind.parse(kind)

            size = info.get("size")
            if size is None:
                raise ValueError(f"Field type {tid} is missing 'size'")

            self.field_types[tid] = FieldType(type_id=tid, name=str(name), kind=str(kind), size=int(size))

        self._log.info("Loaded %d field types from %s", len(self.field_types), self.config_dir / self.FILENAME)

    # ---------------------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------------------
    def get(self, tid: int) -> Optional[FieldType]:
        return self.field_types.get(int(tid))

    def resolve(self, key: int | str) -> FieldType:
        """Look up by numeric id or by name (case-insensitive)."""
        if isinstance(key, int) or str(key).strip().isdigit():
            ft = self.get(int(key))
        else:
            wanted = str(key).strip().upper()
            ft = next((f for f in self.field_types.values() if f.name == wanted), None)
        if ft is None:
            raise UnknownFieldTypeError(
                f"Unknown field type '{key}'",
                hint="Run 'exifcodec types' to list the catalog.",
            )
        return ft


def load_default_field_types() -> FieldTypeLoader:
    loader = FieldTypeLoader(DEFAULT_METADATA_DIR)
    loader.load_all()
    return loader
