"""
Formatting helpers shared by all schemes (pure functions over strings).

- `format_basic` groups integer digits and appends the fractional part.
- `full_number_from_text` recognises text that is already a full number
  (digits, sign, separators, whitespace) and canonicalises it.
- `reduce_base` / `get_scale` support the tiered comparison.
- `shift_decimal_point` turns "<int>.<frac> x 10^exp" back into a full number.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from .datatypes import Separators
from .decimals import FixedDecimal, absolute, canonical, floor, make_number

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# Digit grouping
# ---------------------------------------------------------------------------

def group_thousands(int_digits: str, thousand_separator: str) -> str:
    """Insert `thousand_separator` every three digits, counting from the right."""
    groups = []
    while len(int_digits) > 3:
        groups.append(int_digits[-3:])
        int_digits = int_digits[:-3]
    groups.append(int_digits)
    return thousand_separator.join(reversed(groups))


def format_basic(
    number: str,
    precision: int,
    separators: Separators,
    force_precision: bool = False,
    decimal_separator: Optional[str] = None,
    thousand_separator: Optional[str] = None,
) -> str:
    """Group digits and append at most `precision` fractional digits.

    Trailing fractional zeros are dropped unless `force_precision` is set, in
    which case the fraction is padded to exactly `precision` digits.
    """
    d = FixedDecimal.parse(make_number(number, precision))
    result = ("-" if d.negative else "") + group_thousands(
        d.integer_digits,
        separators.thousand if thousand_separator is None else thousand_separator,
    )
    frac = d.fractional_digits if force_precision else d.fractional_digits.rstrip("0")
    if frac:
        result += (separators.decimal if decimal_separator is None else decimal_separator) + frac
    _dbg(f"format_basic: {number!r} p={precision} force={force_precision} -> {result!r}")
    return result


# ---------------------------------------------------------------------------
# Full-number detection
# ---------------------------------------------------------------------------

def full_number_pattern(separators: Separators) -> "re.Pattern[str]":
    return re.compile(r"[-+]?[0-9" + separators.regexp_class + r"\s]*")


def full_number_from_text(text: str, separators: Separators) -> Optional[str]:
    """Return canonical number if `text` is a full number, else None.

    Accepted: optional leading sign, digits, both separators and whitespace in
    any arrangement. Everything before the first decimal separator is the
    integer part; non-digits are dropped from both parts.
    """
    stripped = text.strip()
    if not full_number_pattern(separators).fullmatch(stripped):
        return None
    if not any("0" <= ch <= "9" for ch in stripped):
        return None

    prefix = "-" if stripped.startswith("-") else ""
    int_text, _, frac_text = stripped.partition(separators.decimal)
    int_digits = re.sub(r"[^0-9]", "", int_text) or "0"
    frac_digits = re.sub(r"[^0-9]", "", frac_text)
    number = prefix + int_digits + ("." + frac_digits if frac_digits else "")
    return canonical(number)


# ---------------------------------------------------------------------------
# Exponent parsing helper
# ---------------------------------------------------------------------------

def shift_decimal_point(int_part: str, frac_digits: str, exponent: int) -> str:
    """Move the decimal point of `int_part.frac_digits` right by `exponent` places.

    When the exponent exceeds the available fractional digits the number is
    right-padded with zeros; otherwise the point lands inside the fraction.
    """
    zeros_added = exponent - len(frac_digits)
    if zeros_added >= 0:
        return canonical(int_part + frac_digits + "0" * zeros_added)
    return canonical(int_part + frac_digits[:exponent] + "." + frac_digits[exponent:])


# ---------------------------------------------------------------------------
# Comparison helpers
# ---------------------------------------------------------------------------

def reduce_base(number: str) -> Tuple[str, int]:
    """Strip trailing zeros of an integer (no information loss).

    Returns (reduced_number, removed_zero_count). Numbers with a fractional
    part and zero itself are returned unchanged with count 0.
    """
    if "." in number or FixedDecimal.parse(number).is_zero():
        return number, 0
    reduced = number.rstrip("0")
    return reduced, len(number) - len(reduced)


def get_scale(number: str) -> int:
    """Count of integer digits of |number| (at least 1)."""
    return len(floor(absolute(number)))


__all__ = [
    "group_thousands",
    "format_basic",
    "full_number_pattern",
    "full_number_from_text",
    "shift_decimal_point",
    "reduce_base",
    "get_scale",
]
