from __future__ import annotations

from pathlib import Path
import textwrap

import pytest

from exifcodec.core.errors import UnknownFieldTypeError, UnsupportedValueKindError
from exifcodec.model.field_type import FieldType
from exifcodec.model.loader import FieldTypeLoader, load_default_field_types


def _write(p: Path, text: str) -> None:
    (p / "field_types.yml").write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")


def test_default_catalog_has_all_tiff_types() -> None:
    loader = load_default_field_types()

    assert sorted(loader.field_types) == list(range(1, 13))
    assert loader.get(3).name == "SHORT"
    assert loader.get(5).size == 8
    assert loader.get(10).kind == "srational_array"
    assert loader.get(2).kind == "ascii"


def test_resolve_by_id_and_name() -> None:
    loader = load_default_field_types()

    assert loader.resolve(4).name == "LONG"
    assert loader.resolve("4").name == "LONG"
    assert loader.resolve("rational").type_id == 5


def test_resolve_unknown_raises() -> None:
    loader = load_default_field_types()

    with pytest.raises(UnknownFieldTypeError) as ei:
        loader.resolve("QUAD")
    assert ei.value.code == "unknown_field_type"
    assert ei.value.hint


def test_load_custom_catalog(tmp_path: Path) -> None:
    _write(
        tmp_path,
        """
        field_types:
          3:
            name: short
            kind: ushort_array
            size: 2
        """,
    )

    loader = FieldTypeLoader(tmp_path)
    loader.load_all()

    ft = loader.get(3)
    assert isinstance(ft, FieldType)
    assert ft.name == "SHORT"
    assert ft.byte_count(3) == 6
    assert ft.as_dict() == {"type_id": 3, "name": "SHORT", "kind": "ushort_array", "size": 2}


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        FieldTypeLoader(tmp_path).load_all()


def test_missing_root_node_raises(tmp_path: Path) -> None:
    _write(tmp_path, "types: {}\n")
    with pytest.raises(ValueError):
        FieldTypeLoader(tmp_path).load_all()


@pytest.mark.parametrize("entry", [
    "{kind: ushort_array, size: 2}",
    "{name: SHORT, size: 2}",
    "{name: SHORT, kind: ushort_array}",
    "not-a-mapping",
])
def test_incomplete_entry_raises(tmp_path: Path, entry: str) -> None:
    _write(tmp_path, f"field_types:\n  3: {entry}\n")
    with pytest.raises(ValueError):
        FieldTypeLoader(tmp_path).load_all()


def test_unknown_kind_raises(tmp_path: Path) -> None:
    _write(tmp_path, "field_types:\n  3: {name: SHORT, kind: nibble_array, size: 2}\n")
    with pytest.raises(UnsupportedValueKindError):
        FieldTypeLoader(tmp_path).load_all()


def test_non_positive_size_raises() -> None:
    with pytest.raises(ValueError):
        FieldType(1, "BYTE", "byte_array", 0)
