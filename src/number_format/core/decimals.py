"""
Decimal-string arithmetic: FixedDecimal (sign + integer digits + fractional digits).

- Values travel between modules as plain decimal strings ("-1234.50").
- Arithmetic scales operands to a common count of fractional digits and works
  on Python ints, so results are exact for any length; no float is involved.
- Truncation toward zero is the only rounding mode (no rounding-up anywhere).
- Negative zero is not representable; it is canonicalised to zero.

The function surface (comp/add/sub/absolute/floor/div/make_number) follows the
bcmath-style helpers the formatting pipeline is written against.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple, Union

from .exc import MalformedNumber

# Debug printing control
DEBUG_DECIMALS = False

def _dbg(msg: str) -> None:
    if DEBUG_DECIMALS:
        print(msg)


# Optional sign, digits with at most one '.', surrounding whitespace tolerated.
_NUMBER_RE = re.compile(r"\s*([+-]?)([0-9]*)(?:\.([0-9]*))?\s*")


def _is_digits(s: str) -> bool:
    return all("0" <= ch <= "9" for ch in s)


def _ten_pow(n: int) -> int:
    """Return 10**n for n >= 0 (internal helper)."""
    if n < 0:
        raise ValueError("_ten_pow expects non-negative exponent")
    return 10 ** n


# ----------------------------
# FixedDecimal (immutable value)
# ----------------------------

@dataclass(frozen=True)
class FixedDecimal:
    """Exact decimal value: sign, integer digits and fractional digits.

    The integer part carries no leading zeros (a lone "0" for values below one).
    The fractional part is kept as given; an empty string means an exact integer.
    """
    negative: bool
    integer_digits: str
    fractional_digits: str = ""

    def __post_init__(self):
        if not self.integer_digits or not _is_digits(self.integer_digits):
            raise MalformedNumber(self.integer_digits)
        if not _is_digits(self.fractional_digits):
            raise MalformedNumber(self.fractional_digits)
        stripped = self.integer_digits.lstrip("0") or "0"
        if stripped != self.integer_digits:
            object.__setattr__(self, "integer_digits", stripped)
        if self.negative and self.is_zero():
            object.__setattr__(self, "negative", False)

    # ------------- constructors -------------

    @classmethod
    def parse(cls, value: Union[str, int, "FixedDecimal"]) -> "FixedDecimal":
        """Build from a decimal string (or int). Raises MalformedNumber otherwise."""
        if isinstance(value, FixedDecimal):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            raise MalformedNumber(value)
        m = _NUMBER_RE.fullmatch(value)
        if m is None:
            raise MalformedNumber(value)
        sign, int_part, frac_part = m.group(1), m.group(2), m.group(3) or ""
        if not int_part and not frac_part:
            raise MalformedNumber(value)
        return cls(sign == "-", int_part or "0", frac_part)

    @classmethod
    def from_scaled(cls, value: int, scale: int) -> "FixedDecimal":
        """Build from an integer holding `scale` implied fractional digits."""
        if scale < 0:
            raise ValueError("scale must be >= 0")
        digits = str(abs(value)).rjust(scale + 1, "0")
        if scale:
            return cls(value < 0, digits[:-scale], digits[-scale:])
        return cls(value < 0, digits, "")

    # ------------- views -------------

    @property
    def scale(self) -> int:
        return len(self.fractional_digits)

    def is_zero(self) -> bool:
        return not self.integer_digits.strip("0") and not self.fractional_digits.strip("0")

    def scaled(self, scale: int) -> int:
        """Integer value with `scale` implied fractional digits (truncated toward zero)."""
        frac = self.fractional_digits[:scale].ljust(scale, "0")
        magnitude = int(self.integer_digits + frac)
        return -magnitude if self.negative else magnitude

    def with_scale(self, scale: int) -> "FixedDecimal":
        """Truncate or zero pad the fractional part to exactly `scale` digits."""
        if scale < 0:
            raise ValueError("scale must be >= 0")
        frac = self.fractional_digits[:scale].ljust(scale, "0")
        return FixedDecimal(self.negative, self.integer_digits, frac)

    def canonical(self) -> "FixedDecimal":
        """Drop trailing fractional zeros."""
        return FixedDecimal(self.negative, self.integer_digits, self.fractional_digits.rstrip("0"))

    def copy_abs(self) -> "FixedDecimal":
        return FixedDecimal(False, self.integer_digits, self.fractional_digits)

    def __str__(self) -> str:
        text = ("-" if self.negative else "") + self.integer_digits
        if self.fractional_digits:
            text += "." + self.fractional_digits
        return text


NumberLike = Union[str, int, FixedDecimal]


# ----------------------------
# Internal helpers
# ----------------------------

def _align(a: NumberLike, b: NumberLike) -> Tuple[int, int, int]:
    """Return both operands as ints on their common (largest) scale."""
    da, db = FixedDecimal.parse(a), FixedDecimal.parse(b)
    scale = max(da.scale, db.scale)
    return da.scaled(scale), db.scaled(scale), scale


def _finish(d: FixedDecimal, scale) -> str:
    return str(d if scale is None else d.with_scale(scale))


# ----------------------------
# Public decimal-string operations
# ----------------------------

def comp(a: NumberLike, b: NumberLike) -> int:
    """Compare two decimal strings: -1, 0 or 1."""
    x, y, _ = _align(a, b)
    return (x > y) - (x < y)


def add(a: NumberLike, b: NumberLike, scale=None) -> str:
    """Exact sum; truncated/padded to `scale` fractional digits when given."""
    x, y, s = _align(a, b)
    return _finish(FixedDecimal.from_scaled(x + y, s), scale)


def sub(a: NumberLike, b: NumberLike, scale=None) -> str:
    """Exact difference a - b; truncated/padded to `scale` fractional digits when given."""
    x, y, s = _align(a, b)
    return _finish(FixedDecimal.from_scaled(x - y, s), scale)


def absolute(a: NumberLike, scale=None) -> str:
    """Strip the sign; truncate/pad to `scale` fractional digits when given."""
    return _finish(FixedDecimal.parse(a).copy_abs(), scale)


def floor(a: NumberLike) -> str:
    """Integer part only, truncated toward zero ("-12.9" -> "-12", "-0.5" -> "0")."""
    d = FixedDecimal.parse(a)
    return str(FixedDecimal(d.negative, d.integer_digits))


def div(a: NumberLike, b: NumberLike, scale: int = 0) -> str:
    """Quotient a / b truncated toward zero at `scale` fractional digits."""
    if scale < 0:
        raise ValueError("scale must be >= 0")
    x, y, _ = _align(a, b)
    if y == 0:
        raise ZeroDivisionError("division by zero")
    q = (abs(x) * _ten_pow(scale)) // abs(y)
    _dbg(f"div: x={x}, y={y}, scale={scale}, q={q}")
    if (x < 0) != (y < 0):
        q = -q
    return str(FixedDecimal.from_scaled(q, scale))


def make_number(a: NumberLike, scale: int) -> str:
    """Normalise to `sign? int ['.' frac]` with exactly `scale` fractional digits."""
    return str(FixedDecimal.parse(a).with_scale(scale))


def canonical(a: NumberLike) -> str:
    """Canonical form: no leading integer zeros, no trailing fractional zeros, no '-0'."""
    return str(FixedDecimal.parse(a).canonical())


def ten_pow(n: int) -> str:
    """Decimal string of 10**n ("1" followed by n zeros)."""
    if n < 0:
        raise ValueError("ten_pow expects non-negative exponent")
    return "1" + "0" * n


def is_number(a) -> bool:
    """True when `a` parses as a decimal string."""
    try:
        FixedDecimal.parse(a)
    except MalformedNumber:
        return False
    return True


__all__ = [
    "FixedDecimal",
    "NumberLike",
    "comp",
    "add",
    "sub",
    "absolute",
    "floor",
    "div",
    "make_number",
    "canonical",
    "ten_pow",
    "is_number",
]
