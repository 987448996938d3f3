"""
Scientific (spreadsheet) number format: "1.23E+06".

Parse-only: values pasted from spreadsheets can be unformatted, but every
formatting call raises NotUsable. Rich markup is never produced, so it is
not looked for either.
"""

from __future__ import annotations

import re
from typing import Optional

from ..core.constants import DEFAULT_DECIMALS
from ..core.datatypes import FormatMeta, FormattedNumber
from ..core.exc import NotUsable
from ..engine import NumberFormat


class ScientificFormat(NumberFormat):
    """Excel-style "<digits>E+<exp>"; unformat only."""

    def set_data(self) -> None:
        self._pattern = re.compile(
            r"\s*" + self.number_head_pattern() + r"\s*E\s*\+\s*(?P<exp>[0-9]+)\s*"
        )

    def format_rich_specific(self, prepared: FormattedNumber, has_context_menu: bool) -> str:
        raise NotUsable(self.type)

    def format_plain_specific(self, prepared: FormattedNumber) -> str:
        raise NotUsable(self.type)

    def format_meta(self, prepared: FormattedNumber, fallback_to_default: bool = True) -> FormatMeta:
        raise NotUsable(self.type)

    def get_type_by_value(self, number: str, decimals: int = DEFAULT_DECIMALS) -> str:
        raise NotUsable(self.type)

    def unformat_specific(self, text: str) -> Optional[str]:
        m = self._pattern.fullmatch(text)
        if m is None:
            return None
        return self.shift_match(m, int(m.group("exp")))


__all__ = ["ScientificFormat"]
