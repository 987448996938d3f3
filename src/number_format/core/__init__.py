"""
Number Format Core
==================

Unified exports for decimal-string primitives and shared formatting helpers.
All arithmetic is exact and string/integer based; no binary float is involved.
"""

# NOTE:
#   The `core` package holds everything the schemes share: exact decimal-string
#   arithmetic, digit grouping, full-number detection, comparison helpers,
#   datatypes and exceptions. Scheme-specific behaviour lives in
#   `number_format.formats`; the registry in `number_format.registry`.

# Constants
from .constants import (
    NUMBER_MIN_LENGTH,
    FORCE_DECIMALS_LIMIT,
    DEFAULT_DECIMALS,
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_THOUSAND_SEPARATOR,
    DEFAULT_NAME_MATRIX,
    NAME_TRANSLATION_PREFIX,
)

# Decimal-string arithmetic
from .decimals import (
    FixedDecimal,
    NumberLike,
    comp,
    add,
    sub,
    absolute,
    floor,
    div,
    make_number,
    canonical,
    ten_pow,
    is_number,
)

# Shared formatting helpers
from .fmt import (
    group_thousands,
    format_basic,
    full_number_from_text,
    shift_decimal_point,
    reduce_base,
    get_scale,
)

# Datatypes
from .datatypes import (
    Separators,
    FormattedNumber,
    FormatMeta,
)

# Core exceptions
from .exc import (
    MalformedNumber,
    UnformattableInput,
    NotUsable,
    UnknownScheme,
    FormatConfigError,
)

__all__ = [
    # constants
    "NUMBER_MIN_LENGTH",
    "FORCE_DECIMALS_LIMIT",
    "DEFAULT_DECIMALS",
    "DEFAULT_DECIMAL_SEPARATOR",
    "DEFAULT_THOUSAND_SEPARATOR",
    "DEFAULT_NAME_MATRIX",
    "NAME_TRANSLATION_PREFIX",
    # decimals
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
    # fmt
    "group_thousands",
    "format_basic",
    "full_number_from_text",
    "shift_decimal_point",
    "reduce_base",
    "get_scale",
    # datatypes
    "Separators",
    "FormattedNumber",
    "FormatMeta",
    # exceptions
    "MalformedNumber",
    "UnformattableInput",
    "NotUsable",
    "UnknownScheme",
    "FormatConfigError",
]
