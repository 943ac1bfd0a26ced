# exifcodec/model/fraction.py
from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

UINT32_MAX = 0xFFFFFFFF
INT32_MIN = -0x80000000
INT32_MAX = 0x7FFFFFFF


def _ratio_to_float(numerator: int, denominator: int) -> float:
    if denominator == 0:
        if numerator == 0:
            return float("nan")
        return float("inf") if numerator > 0 else float("-inf")
    return numerator / denominator


@dataclass(frozen=True)
class UFraction32:
    """
    Unsigned rational (EXIF RATIONAL).

    Numerator and denominator are kept exactly as given: no reduction and
    no zero-denominator check.
    """
    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        for name in ("numerator", "denominator"):
            v = getattr(self, name)
            if not 0 <= int(v) <= UINT32_MAX:
                raise ValueError(f"UFraction32 {name} {v} out of range 0..{UINT32_MAX}")

    def __float__(self) -> float:
        return _ratio_to_float(self.numerator, self.denominator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def as_fraction(self) -> Fraction:
        """Exact value; raises ZeroDivisionError for a zero denominator."""
        return Fraction(self.numerator, self.denominator)

    @classmethod
    def parse(cls, text: str) -> "UFraction32":
        num, _, den = text.strip().partition("/")
        return cls(int(num), int(den) if den else 1)


@dataclass(frozen=True)
class Fraction32:
    """Signed rational (EXIF SRATIONAL). Same storage rules as UFraction32."""
    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        for name in ("numerator", "denominator"):
            v = getattr(self, name)
            if not INT32_MIN <= int(v) <= INT32_MAX:
                raise ValueError(f"Fraction32 {name} {v} out of range {INT32_MIN}..{INT32_MAX}")

    def __float__(self) -> float:
        if self.denominator < 0:
            return _ratio_to_float(-self.numerator, -self.denominator)
        return _ratio_to_float(self.numerator, self.denominator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    @classmethod
    def parse(cls, text: str) -> "Fraction32":
        num, _, den = text.strip().partition("/")
        return cls(int(num), int(den) if den else 1)
