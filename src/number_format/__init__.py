"""
Top-level API for number_format.

Renders decimal strings (never floats) in one of several schemes and parses
them back:
  - plain:        1,234,567.5
  - exponential:  1.23 * 10^6
  - name:         1.23 Mio
  - scientific:   1.23E+06 (parse only)

`FormatRegistry` is the entry point: it owns one instance per scheme, the
locale separators and the magnitude names, and implements unformat-by-trial
and the tiered comparison.
"""

from __future__ import annotations

from .registry import FormatRegistry, RegistrySettings
from .engine import NumberFormat
from .formats import (
    FORMAT_CLASS_LIST,
    PlainFormat,
    ExponentialFormat,
    NameFormat,
    ScientificFormat,
    name_matrix_from_translations,
)
from .render import render_tooltip

from .core import (
    FixedDecimal,
    Separators,
    FormattedNumber,
    FormatMeta,
    MalformedNumber,
    UnformattableInput,
    NotUsable,
    UnknownScheme,
    FormatConfigError,
)

__all__ = [
    # registry
    "FormatRegistry",
    "RegistrySettings",
    # schemes
    "NumberFormat",
    "FORMAT_CLASS_LIST",
    "PlainFormat",
    "ExponentialFormat",
    "NameFormat",
    "ScientificFormat",
    "name_matrix_from_translations",
    # rendering
    "render_tooltip",
    # core data types
    "FixedDecimal",
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
