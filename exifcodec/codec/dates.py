# exifcodec/codec/dates.py
"""
EXIF timestamps: 'yyyy:MM:dd HH:mm:ss' and 'yyyy:MM:dd'.

Decoding is lenient. Many cameras write single-digit components, so any
number of digits is accepted per field. A field that is not an integer takes
its default (year/month/day -> 1, hour/minute/second -> 0). Too few fields or
an impossible calendar value yields MIN_DATETIME instead of an error.
"""
from __future__ import annotations

import calendar
import logging
import re
from datetime import date, datetime
from typing import List, Union

from exifcodec.model.fraction import INT32_MAX, INT32_MIN

from .text import ascii_bytes

MIN_DATETIME = datetime.min

_SPLIT = re.compile(r"[: ]")
_INT = re.compile(r"\s*([+-]?[0-9]+)\s*")

# year, month, day, hour, minute, second
_FIELD_DEFAULTS = (1, 1, 1, 0, 0, 0)

log = logging.getLogger(__name__)


def _parse_int(text: str, default: int) -> int:
    # fields must fit a signed 32-bit integer, otherwise the default applies
    m = _INT.fullmatch(text)
    if not m:
        return default
    value = int(m.group(1))
    return value if INT32_MIN <= value <= INT32_MAX else default


def _is_valid(year: int, month: int, day: int, hour: int, minute: int, second: int) -> bool:
    if not (1 <= year <= 9999 and 1 <= month <= 12):
        return False
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        return False
    return 0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59


def parse_datetime(text: str, has_time: bool = True) -> datetime:
    """Parse already-decoded timestamp text; never raises."""
    parts: List[str] = _SPLIT.split(text)
    needed = 6 if has_time else 3
    if len(parts) < needed:
        log.debug("Timestamp %r has %d fields, need %d; using minimum", text, len(parts), needed)
        return MIN_DATETIME

    fields = [_parse_int(parts[i], _FIELD_DEFAULTS[i]) for i in range(needed)]
    fields += [0] * (6 - needed)

    if not _is_valid(*fields):
        log.debug("Timestamp %r is not a valid calendar value; using minimum", text)
        return MIN_DATETIME
    return datetime(*fields)


def to_datetime(data: bytes, has_time: bool = True) -> datetime:
    """
    Decode a null-terminated ASCII timestamp.

    Non-ASCII bytes are replaced rather than raised on, so the result is
    always a datetime.
    """
    raw = bytes(data)
    idx = raw.find(0)
    if idx != -1:
        raw = raw[:idx]
    return parse_datetime(raw.decode("ascii", errors="replace"), has_time)


def format_datetime(value: Union[datetime, date], has_time: bool = True) -> str:
    # strftime('%Y') does not zero-pad years below 1000 on every platform
    text = f"{value.year:04d}:{value.month:02d}:{value.day:02d}"
    if has_time:
        hour, minute, second = _time_of(value)
        text += f" {hour:02d}:{minute:02d}:{second:02d}"
    return text


def _time_of(value: Union[datetime, date]) -> tuple:
    if isinstance(value, datetime):
        return value.hour, value.minute, value.second
    return 0, 0, 0


def datetime_bytes(value: Union[datetime, date], has_time: bool = True) -> bytes:
    return ascii_bytes(format_datetime(value, has_time), True, "ascii")


def to_date(data: bytes) -> datetime:
    return to_datetime(data, has_time=False)


def date_bytes(value: Union[datetime, date]) -> bytes:
    return datetime_bytes(value, has_time=False)
