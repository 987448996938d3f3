"""
Name number format: "5.2 Mio".

The magnitude word comes from a name matrix ({word: exponent}). When the
computed exponent has no word, rendering is delegated to the fallback scheme
(the registry default, or plain digits when the default is this scheme).
Parsing an unknown trailing word is "not recognised", never an error.
"""

from __future__ import annotations

import re
from typing import Dict, Mapping, Optional, Union

from ..core.constants import DEFAULT_DECIMALS, NAME_TRANSLATION_PREFIX
from ..core.datatypes import FormatMeta, FormattedNumber
from ..core.exc import FormatConfigError
from ..engine import NumberFormat
from .plain import PlainFormat


def validate_name_matrix(matrix: Mapping[str, int]) -> Dict[str, int]:
    """Return a clean copy of `matrix`; raise FormatConfigError on bad entries."""
    clean: Dict[str, int] = {}
    for name, exp in matrix.items():
        if not isinstance(name, str) or not name.strip():
            raise FormatConfigError(f"magnitude name must be a non-empty string, got {name!r}")
        if isinstance(exp, bool) or not isinstance(exp, int) or exp <= 0:
            raise FormatConfigError(f"exponent for {name!r} must be a positive int, got {exp!r}")
        clean[name.strip()] = exp
    return clean


def name_matrix_from_translations(translations: Mapping[str, str]) -> Dict[str, int]:
    """Build {word: exponent} from translation keys such as "exp6" -> "Mio".

    Keys without the prefix (e.g. "decimalSep") are ignored.
    """
    matrix: Dict[str, int] = {}
    for key, name in translations.items():
        if not key.startswith(NAME_TRANSLATION_PREFIX):
            continue
        suffix = key[len(NAME_TRANSLATION_PREFIX):]
        if not suffix.isdigit():
            raise FormatConfigError(f"invalid magnitude translation key {key!r}")
        matrix[name] = int(suffix)
    return validate_name_matrix(matrix)


class NameFormat(NumberFormat):
    """Reduced digits followed by a magnitude word."""

    def set_data(self) -> None:
        self.name_to_exp: Dict[str, int] = dict(self.registry.name_matrix)
        self.exp_to_name: Dict[int, str] = {exp: name for name, exp in self.name_to_exp.items()}
        self._plain: Optional[PlainFormat] = None
        self._pattern = re.compile(
            r"\s*" + self.number_head_pattern() + r"\s*(?P<name>\S.*?)\s*",
            re.DOTALL,
        )

    def fallback(self) -> NumberFormat:
        """Scheme used for exponents that have no word."""
        default = self.registry.default_instance
        if default is not None and default is not self:
            return default
        if self._plain is None:
            self._plain = PlainFormat("plain", self.registry)
        return self._plain

    def format_rich_specific(self, prepared: FormattedNumber, has_context_menu: bool) -> str:
        exp = prepared.exponent
        if exp == 0:
            return self.render(prepared, prepared.magnitude_string, has_context_menu)
        name = self.exp_to_name.get(exp)
        if name is None:
            return self.fallback().format_rich_specific(prepared, has_context_menu)
        return self.render(prepared, f"{prepared.magnitude_string}&nbsp;{name}", has_context_menu)

    def format_plain_specific(self, prepared: FormattedNumber) -> str:
        exp = prepared.exponent
        if exp == 0:
            return prepared.magnitude_string
        name = self.exp_to_name.get(exp)
        if name is None:
            return self.fallback().format_plain_specific(prepared)
        return f"{prepared.magnitude_string} {name}"

    def format_meta(self, prepared: FormattedNumber, fallback_to_default: bool = True) -> FormatMeta:
        exp = prepared.exponent
        name = self.exp_to_name.get(exp)
        if name is None and exp != 0 and fallback_to_default:
            return self.fallback().format_meta(prepared)
        exponent: Union[int, str]
        if name is not None:
            exponent = name
        else:
            exponent = 0 if exp == 0 else ""
        return FormatMeta(sign=prepared.sign, number=prepared.digits, modifier="", exponent=exponent)

    def unformat_specific(self, text: str) -> Optional[str]:
        m = self._pattern.fullmatch(text)
        if m is None:
            return self.is_rich_number(text)
        exp = self.name_to_exp.get(m.group("name"))
        if exp is None:
            return None
        return self.shift_match(m, exp)

    def get_type_by_value(self, number: str, decimals: int = DEFAULT_DECIMALS) -> str:
        meta = self.format(number, True, decimals, True, True, False)
        if meta.exponent == "":
            return self.fallback().get_type_by_value(number, decimals)
        return self.type

    def to_exponent(self, name: Union[int, str]) -> int:
        return self.name_to_exp.get(name, 0)


__all__ = [
    "NameFormat",
    "name_matrix_from_translations",
    "validate_name_matrix",
]
