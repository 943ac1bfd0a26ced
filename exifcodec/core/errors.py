# exifcodec/core/errors.py
from __future__ import annotations


class ExifCodecError(Exception):
    """
    Base class for all expected operational errors in exifcodec.
    """

    #: Machine-readable failure class, e.g. 'unknown_field_type'
    code: str = "unknown"

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Dispatch errors
# ---------------------------------------------------------------------------

class UnsupportedValueKindError(ExifCodecError):
    """
    A value kind name does not match any supported kind.

    Examples:
      - typo in a catalog 'kind' entry
      - CLI --type value that names no kind or field type
    """
    code = "unsupported_value_kind"


class UnknownFieldTypeError(ExifCodecError):
    """
    A TIFF/EXIF field type id or name is not present in the catalog.
    """
    code = "unknown_field_type"
