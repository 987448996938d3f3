"""
Shared formatting pipeline (base class of every number format scheme).

Every scheme needs the same sign handling, magnitude reduction and digit
grouping; only what follows the number differs (nothing, "* 10^n", a
magnitude word). `NumberFormat.format` runs the shared part and hands a
`FormattedNumber` to the scheme finisher.

Key behaviours:
- Integer parts longer than NUMBER_MIN_LENGTH digits are divided by 10^exp
  (exp a multiple of 3) so 1-3 integer digits remain; fractional digits are
  sliced from the cut-off integer digits, never rounded.
- Reduced numbers are zero padded to `decimals` (while decimals < 10); the
  unreduced original is grouped with 0 decimals for tooltips.
- Not recognised while parsing is `None`; only the registry raises
  UnformattableInput.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Optional, Union

from .core.constants import DEFAULT_DECIMALS, FORCE_DECIMALS_LIMIT, NUMBER_MIN_LENGTH
from .core.datatypes import FormatMeta, FormattedNumber, Separators
from .core.decimals import absolute, canonical, comp, div, floor, ten_pow
from .core.exc import MalformedNumber, NotUsable
from .core.fmt import (
    format_basic,
    full_number_from_text,
    get_scale,
    reduce_base,
    shift_decimal_point,
)

if TYPE_CHECKING:
    from .registry import FormatRegistry

# Debug printing control
DEBUG_ENGINE = False

def _dbg(msg: str) -> None:
    if DEBUG_ENGINE:
        print(msg)


class NumberFormat:
    """Base number format: shared preparation plus finisher hooks.

    Subclasses override `format_rich_specific`, `format_plain_specific`,
    `format_meta` and `unformat_specific`. Instances are created by the
    registry, one per scheme name, and keep a back-reference to it for
    separators, the default scheme and the renderer.
    """

    #: Whether long integer parts are compacted to an exponent.
    reduces_magnitude: bool = True

    def __init__(self, type_name: str, registry: "FormatRegistry") -> None:
        self.type = type_name
        self.registry = registry
        self.set_data()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type!r})"

    def set_data(self) -> None:
        """Hook for scheme-specific caches (called once from __init__)."""

    @property
    def separators(self) -> Separators:
        return self.registry.separators

    # ------------- shared pipeline -------------

    def prepare(
        self,
        number: str,
        decimals: int = DEFAULT_DECIMALS,
        decimal_separator: Optional[str] = None,
        thousand_separator: Optional[str] = None,
    ) -> FormattedNumber:
        """Sign extraction, magnitude reduction and digit grouping."""
        if decimals < 0:
            raise ValueError(f"decimals must be >= 0, got {decimals}")

        is_negative = comp(number, "0") < 0
        if is_negative:
            number = absolute(number, decimals)
            # truncation may leave nothing to be negative about
            is_negative = comp(number, "0") != 0
        else:
            number = absolute(number)

        original_number = number
        exp = 0
        integer_part = floor(number)
        length = len(integer_part)

        if self.reduces_magnitude and NUMBER_MIN_LENGTH < length:
            exp = length // 3
            if length % 3 == 0:
                exp -= 1
            if exp > 0:
                exp *= 3
                decimal_part = integer_part[-exp:][:decimals]
                number = floor(div(number, ten_pow(exp)))
                if decimal_part:
                    number += "." + decimal_part
        _dbg(f"prepare: len={length}, exp={exp}, reduced={number!r}")

        magnitude = format_basic(
            number,
            decimals,
            self.separators,
            exp > 0 and decimals < FORCE_DECIMALS_LIMIT,
            decimal_separator,
            thousand_separator,
        )
        original_magnitude = format_basic(
            original_number,
            0,
            self.separators,
            False,
            decimal_separator,
            thousand_separator,
        )
        if is_negative:
            magnitude = "-" + magnitude

        return FormattedNumber(magnitude, original_magnitude, exp, is_negative)

    def format(
        self,
        number: str,
        rich: bool = True,
        decimals: int = DEFAULT_DECIMALS,
        meta_only: bool = False,
        has_context_menu: bool = True,
        fallback_to_default: bool = True,
        decimal_separator: Optional[str] = None,
        thousand_separator: Optional[str] = None,
    ) -> Union[str, FormatMeta]:
        """Prepare `number` and dispatch to the meta, rich or plain finisher."""
        prepared = self.prepare(number, decimals, decimal_separator, thousand_separator)
        if meta_only:
            return self.format_meta(prepared, fallback_to_default)
        if rich:
            return self.format_rich_specific(prepared, has_context_menu)
        return self.format_plain_specific(prepared)

    def format_rich(
        self,
        number: str,
        decimals: int = DEFAULT_DECIMALS,
        has_context_menu: bool = True,
        decimal_separator: Optional[str] = None,
        thousand_separator: Optional[str] = None,
    ) -> str:
        return self.format(
            number,
            True,
            decimals,
            False,
            has_context_menu,
            True,
            decimal_separator,
            thousand_separator,
        )

    def format_plain(
        self,
        number: str,
        decimals: int = DEFAULT_DECIMALS,
        decimal_separator: Optional[str] = None,
        thousand_separator: Optional[str] = None,
    ) -> str:
        return self.format(
            number,
            False,
            decimals,
            False,
            False,
            True,
            decimal_separator,
            thousand_separator,
        )

    # ------------- scheme hooks -------------

    def format_rich_specific(self, prepared: FormattedNumber, has_context_menu: bool) -> str:
        raise NotImplementedError

    def format_plain_specific(self, prepared: FormattedNumber) -> str:
        raise NotImplementedError

    def format_meta(self, prepared: FormattedNumber, fallback_to_default: bool = True) -> FormatMeta:
        return FormatMeta(sign=prepared.sign, number=prepared.digits)

    def unformat_specific(self, text: str) -> Optional[str]:
        """Parse text written in this scheme; None when not recognised."""
        return self.is_rich_number(text)

    # ------------- accessors -------------

    def get_type(self) -> str:
        return self.type

    def get_type_by_value(self, number: str, decimals: int = DEFAULT_DECIMALS) -> str:
        """Name of the scheme whose suffix would apply to `number`."""
        return self.type

    def to_exponent(self, name: Union[int, str]) -> int:
        return int(name)

    # ------------- parsing helpers -------------

    def unformat(self, text: str) -> str:
        """Unformat through the registry, trying this scheme first."""
        return self.registry.unformat(text, scheme=self)

    def number_head_pattern(self) -> str:
        """Regex for '<int>[<decimal sep><frac>]' with optional thousand grouping.

        Groups: `int` (sign included) and `frac`.
        """
        dec = re.escape(self.separators.decimal)
        tsd = re.escape(self.separators.thousand)
        return (
            r"(?P<int>[-+]?[0-9]+(?:" + tsd + r"[0-9]{3})*)"
            r"(?:" + dec + r"(?P<frac>[0-9]*))?"
        )

    def shift_match(self, match: "re.Match[str]", exponent: int) -> str:
        """Full number from a head-pattern match and a resolved exponent."""
        int_part = match.group("int").replace(self.separators.thousand, "")
        return shift_decimal_point(int_part, match.group("frac") or "", exponent)

    def is_full_number(self, text: str) -> Optional[str]:
        return full_number_from_text(text, self.separators)

    def is_rich_number(self, text: str) -> Optional[str]:
        """Recover the number carried by rich markup produced by this scheme.

        The `data` attribute holds the unreduced number; it is accepted only
        when formatting it again reproduces `text` exactly.
        """
        pattern = re.compile(
            r'<.*\sdata="(-?[0-9' + self.separators.regexp_class + r']*)".*>',
            re.DOTALL,
        )
        m = pattern.search(text)
        if m is None:
            return None
        plain = m.group(1).replace(self.separators.thousand, "")
        plain = plain.replace(self.separators.decimal, ".")
        try:
            rendered = self.format(plain, True)
        except (MalformedNumber, NotUsable) as exc:
            _dbg(f"is_rich_number: {exc}")
            return None
        if rendered != text:
            return None
        return canonical(plain)

    def reduce_base(self, number: str):
        return reduce_base(number)

    def get_scale(self, number: str) -> int:
        return get_scale(number)

    def render(self, prepared: FormattedNumber, rich_content: str, has_context_menu: bool) -> str:
        """Hand the plain number and rich fragment to the registry renderer."""
        return self.registry.renderer(prepared.plain_original, rich_content, has_context_menu)


__all__ = ["NumberFormat"]
