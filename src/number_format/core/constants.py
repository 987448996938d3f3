"""
Number Format Core Constants
============================

Fixed thresholds shared by every scheme. Separator characters and magnitude
names are supplied by the caller at registry construction; the values here are
only the defaults used when nothing else is configured.
"""

# NOTE: NUMBER_MIN_LENGTH counts integer digits of the absolute value, sign excluded.

from typing import Dict

# ---------------------------------------------------------------------------
# Magnitude reduction
# ---------------------------------------------------------------------------

#: Integer parts longer than this are compacted to 1-3 leading digits plus an
#: exponent (a multiple of 3).
NUMBER_MIN_LENGTH: int = 6

#: Reduced numbers are zero padded to the requested decimals only while the
#: requested decimals stay below this limit.
FORCE_DECIMALS_LIMIT: int = 10

#: Fractional digits shown when the caller does not ask for a specific count.
DEFAULT_DECIMALS: int = 2


# ---------------------------------------------------------------------------
# Separators and names (defaults)
# ---------------------------------------------------------------------------

DEFAULT_DECIMAL_SEPARATOR: str = "."
DEFAULT_THOUSAND_SEPARATOR: str = ","

#: Magnitude word -> exponent.
DEFAULT_NAME_MATRIX: Dict[str, int] = {
    "Tsd": 3,
    "Mio": 6,
    "Mrd": 9,
    "Bio": 12,
    "Brd": 15,
}

#: Prefix of translation keys that carry a magnitude word ("exp6" -> "Mio").
NAME_TRANSLATION_PREFIX: str = "exp"


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "NUMBER_MIN_LENGTH",
    "FORCE_DECIMALS_LIMIT",
    "DEFAULT_DECIMALS",
    "DEFAULT_DECIMAL_SEPARATOR",
    "DEFAULT_THOUSAND_SEPARATOR",
    "DEFAULT_NAME_MATRIX",
    "NAME_TRANSLATION_PREFIX",
]
