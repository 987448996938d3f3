"""
Exponential number format: "1.23 * 10^6".

- Plain output appends " * 10^<exp>" when the number was reduced.
- Rich output carries the exponent as superscript markup; the caret stays in
  the text (zero font size) so copied values still read "10^6".
- Parsing accepts "<int>[<sep><frac>] * 10^<exp>" with free whitespace.
"""

from __future__ import annotations

import re
from typing import Optional

from ..core.datatypes import FormatMeta, FormattedNumber
from ..engine import NumberFormat

MODIFIER = "*&nbsp;10"


class ExponentialFormat(NumberFormat):
    """Reduced digits followed by a power of ten."""

    def set_data(self) -> None:
        self._pattern = re.compile(
            r"\s*" + self.number_head_pattern() + r"\s*\*\s*10\s*\^\s*(?P<exp>[0-9]+)\s*"
        )

    def format_rich_specific(self, prepared: FormattedNumber, has_context_menu: bool) -> str:
        content = prepared.magnitude_string
        if prepared.exponent != 0:
            content += (
                "&nbsp;*&nbsp;10<sup><span style=\"font-size: 0\">^</span>"
                f"{prepared.exponent}</sup>"
            )
        return self.render(prepared, content, has_context_menu)

    def format_plain_specific(self, prepared: FormattedNumber) -> str:
        if prepared.exponent > 0:
            return f"{prepared.magnitude_string} * 10^{prepared.exponent}"
        return prepared.magnitude_string

    def format_meta(self, prepared: FormattedNumber, fallback_to_default: bool = True) -> FormatMeta:
        return FormatMeta(
            sign=prepared.sign,
            number=prepared.digits,
            modifier=MODIFIER,
            exponent=prepared.exponent,
        )

    def unformat_specific(self, text: str) -> Optional[str]:
        m = self._pattern.fullmatch(text)
        if m is None:
            return self.is_rich_number(text)
        return self.shift_match(m, int(m.group("exp")))


__all__ = ["ExponentialFormat", "MODIFIER"]
