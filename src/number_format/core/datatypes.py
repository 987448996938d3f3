"""
Core datatypes shared by the formatting pipeline and the schemes.

These datatypes are intentionally minimal and immutable so that format and
unformat stay deterministic and testable.

Notes:
- `Separators` is supplied once per registry; parse patterns embed the escaped
  characters, so changing them means building a new registry.
- `FormattedNumber` is the hand-off from the shared pipeline to a scheme
  finisher; it lives for one `format` call.
- `FormatMeta` is what `format(..., meta_only=True)` returns.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Union

from .constants import DEFAULT_DECIMAL_SEPARATOR, DEFAULT_THOUSAND_SEPARATOR
from .exc import FormatConfigError


# ---------------------------------------------------------------------------
# Separators
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Separators:
    """Decimal and thousand separator characters (locale supplied).

    Fields:
    - decimal: character between integer and fractional digits.
    - thousand: character between groups of three integer digits.
    """

    decimal: str = DEFAULT_DECIMAL_SEPARATOR
    thousand: str = DEFAULT_THOUSAND_SEPARATOR

    def __post_init__(self):
        for label, ch in (("decimal", self.decimal), ("thousand", self.thousand)):
            if not isinstance(ch, str) or len(ch) != 1:
                raise FormatConfigError(f"{label} separator must be a single character, got {ch!r}")
            if "0" <= ch <= "9" or ch in "+-\"<>&":
                raise FormatConfigError(f"{label} separator {ch!r} is not allowed")
        if self.decimal == self.thousand:
            raise FormatConfigError("decimal and thousand separators must differ")

    @property
    def regexp_class(self) -> str:
        """Both separators escaped for use inside a regex character class."""
        return re.escape(self.decimal) + re.escape(self.thousand)


# ---------------------------------------------------------------------------
# Pipeline output
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FormattedNumber:
    """Shared-pipeline result before a scheme adds its suffix.

    Fields:
    - magnitude_string: grouped display digits after magnitude reduction, with
      the '-' prefix when negative.
    - original_magnitude_string: grouped unreduced digits (0 decimals, no sign);
      used for tooltips and the plain fallback.
    - exponent: how many places the decimal point moved (0 or a multiple of 3).
    - is_negative: sign of the input.
    """

    magnitude_string: str
    original_magnitude_string: str
    exponent: int
    is_negative: bool

    @property
    def sign(self) -> str:
        return "-" if self.is_negative else ""

    @property
    def digits(self) -> str:
        """Display digits without the sign prefix."""
        if self.is_negative:
            return self.magnitude_string[1:]
        return self.magnitude_string

    @property
    def plain_original(self) -> str:
        """Signed unreduced number, as carried by rich markup."""
        return self.sign + self.original_magnitude_string


@dataclass(frozen=True)
class FormatMeta:
    """Metadata view of a formatted number.

    - sign: "-" or "".
    - number: display digits without sign.
    - modifier: text placed between number and exponent ("*&nbsp;10" for
      exponential, "" otherwise).
    - exponent: numeric exponent, magnitude word, 0 (no reduction) or ""
      (reduced but no word available).
    """

    sign: str
    number: str
    modifier: str = ""
    exponent: Union[int, str] = 0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "Separators",
    "FormattedNumber",
    "FormatMeta",
]
