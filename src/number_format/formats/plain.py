"""
Plain number format: grouped digits, no suffix.

Magnitude reduction is disabled, so the display digits are always the full
number. When another scheme falls back to this finisher with a non-zero
exponent, the unreduced original is shown instead of dropping the magnitude.
"""

from __future__ import annotations

from ..core.datatypes import FormattedNumber
from ..engine import NumberFormat


class PlainFormat(NumberFormat):
    """Grouped digits only; the always-available fallback."""

    reduces_magnitude = False

    def _text(self, prepared: FormattedNumber) -> str:
        if prepared.exponent == 0:
            return prepared.magnitude_string
        return prepared.plain_original

    def format_rich_specific(self, prepared: FormattedNumber, has_context_menu: bool) -> str:
        return self.render(prepared, self._text(prepared), has_context_menu)

    def format_plain_specific(self, prepared: FormattedNumber) -> str:
        return self._text(prepared)


__all__ = ["PlainFormat"]
