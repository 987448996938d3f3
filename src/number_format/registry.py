"""
Number format registry: owns the configured schemes and the cross-scheme
operations (unformat by trial, tiered comparison).

Key behaviours:
- Schemes are created from the explicit `FORMAT_CLASS_LIST` table, one
  instance per name, and live as long as the registry.
- `default_instance` must be set at construction; `current_instance` falls
  back to it. Every operation also takes `scheme=` so concurrent callers can
  pass their scheme explicitly instead of mutating `current_instance`.
- `unformat` tries the full-number shortcut, then the chosen scheme, then all
  other schemes in registration order; failing all it raises
  UnformattableInput.
- `compare` returns 0 for equal values, otherwise +/-1..3: the sign tells which
  operand is greater, the level how large the difference is relative to the
  smaller operand's scale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Sequence, Tuple, Union

from .core.constants import (
    DEFAULT_DECIMALS,
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_NAME_MATRIX,
    DEFAULT_THOUSAND_SEPARATOR,
)
from .core.datatypes import FormatMeta, Separators
from .core.decimals import absolute, comp, sub
from .core.exc import UnformattableInput, UnknownScheme
from .engine import NumberFormat
from .formats import FORMAT_CLASS_LIST, name_matrix_from_translations, validate_name_matrix
from .render import Renderer, render_tooltip

# Debug printing control
DEBUG_REGISTRY = False

def _dbg(msg: str) -> None:
    if DEBUG_REGISTRY:
        print(msg)


SchemeRef = Union[str, NumberFormat, None]


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RegistrySettings:
    """Registry configuration.

    format_list: scheme names to register, in trial order for unformat.
    default_format: scheme used when no current scheme is chosen.
    current_format: optional initial current scheme.
    decimal_separator / thousand_separator: locale characters.
    name_matrix: magnitude word -> exponent for the name scheme.
    """
    format_list: Tuple[str, ...] = ("exponential", "name", "scientific")
    default_format: str = "exponential"
    current_format: Optional[str] = None
    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR
    thousand_separator: str = DEFAULT_THOUSAND_SEPARATOR
    name_matrix: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_NAME_MATRIX))

    @classmethod
    def from_translations(
        cls,
        translations: Mapping[str, str],
        format_list: Sequence[str] = ("exponential", "name", "scientific"),
        default_format: str = "exponential",
        current_format: Optional[str] = None,
    ) -> "RegistrySettings":
        """Settings from a "numbers" translation dictionary.

        Reads `decimalSep`, `thousandSep` and every `exp<N>` key.
        """
        matrix = name_matrix_from_translations(translations)
        return cls(
            format_list=tuple(format_list),
            default_format=default_format,
            current_format=current_format,
            decimal_separator=translations.get("decimalSep", DEFAULT_DECIMAL_SEPARATOR),
            thousand_separator=translations.get("thousandSep", DEFAULT_THOUSAND_SEPARATOR),
            name_matrix=matrix or dict(DEFAULT_NAME_MATRIX),
        )


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class FormatRegistry:
    """Set of configured number formats plus default/current selection."""

    def __init__(
        self,
        format_list: Sequence[str],
        default_format: str,
        current_format: Optional[str] = None,
        separators: Optional[Separators] = None,
        name_matrix: Optional[Mapping[str, int]] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        self.separators = separators or Separators()
        self.name_matrix: Dict[str, int] = validate_name_matrix(
            DEFAULT_NAME_MATRIX if name_matrix is None else name_matrix
        )
        self.renderer: Renderer = renderer or render_tooltip
        self.instance_list: Dict[str, NumberFormat] = {}
        self.default_instance: Optional[NumberFormat] = None
        self.current_instance: Optional[NumberFormat] = None

        for name in format_list:
            self.get_format_object(name)
        self.set_default(default_format)
        if current_format:
            self.set_current(current_format)

    @classmethod
    def from_settings(
        cls,
        settings: RegistrySettings,
        renderer: Optional[Renderer] = None,
    ) -> "FormatRegistry":
        return cls(
            settings.format_list,
            settings.default_format,
            settings.current_format,
            Separators(settings.decimal_separator, settings.thousand_separator),
            settings.name_matrix,
            renderer,
        )

    # ------------- instances -------------

    def get_format_object(self, name: str) -> NumberFormat:
        """Return (creating on first use) the scheme registered under `name`."""
        if not isinstance(name, str):
            raise UnknownScheme(name)
        key = name.strip().lower()
        if key in self.instance_list:
            return self.instance_list[key]
        format_class = FORMAT_CLASS_LIST.get(key)
        if format_class is None:
            raise UnknownScheme(name)
        instance = format_class(key, self)
        self.instance_list[key] = instance
        _dbg(f"registered {instance!r}")
        return instance

    def set_default(self, name: str) -> NumberFormat:
        self.default_instance = self.get_format_object(name)
        return self.default_instance

    def set_current(self, name: str) -> NumberFormat:
        self.current_instance = self.get_format_object(name)
        return self.current_instance

    def get_default_instance(self) -> NumberFormat:
        if self.default_instance is None:
            raise UnknownScheme(None)
        return self.default_instance

    def get_current_instance(self) -> NumberFormat:
        # not chosen yet: the default acts as current
        if self.current_instance is None:
            self.current_instance = self.get_default_instance()
        return self.current_instance

    def resolve(self, scheme: SchemeRef = None) -> NumberFormat:
        """Scheme instance for an explicit name/instance, else the current one."""
        if scheme is None:
            return self.get_current_instance()
        if isinstance(scheme, NumberFormat):
            return scheme
        if not isinstance(scheme, str):
            raise UnknownScheme(scheme)
        key = scheme.strip().lower()
        if key not in self.instance_list:
            raise UnknownScheme(scheme)
        return self.instance_list[key]

    # ------------- separators -------------

    @property
    def decimal_separator(self) -> str:
        return self.separators.decimal

    @property
    def thousand_separator(self) -> str:
        return self.separators.thousand

    @property
    def regexp_separator(self) -> str:
        return self.separators.regexp_class

    # ------------- formatting -------------

    def format(
        self,
        number: str,
        rich: bool = True,
        decimals: int = DEFAULT_DECIMALS,
        meta_only: bool = False,
        has_context_menu: bool = True,
        fallback_to_default: bool = True,
        scheme: SchemeRef = None,
    ) -> Union[str, FormatMeta]:
        return self.resolve(scheme).format(
            number,
            rich,
            decimals,
            meta_only,
            has_context_menu,
            fallback_to_default,
        )

    def format_plain(self, number: str, decimals: int = DEFAULT_DECIMALS, scheme: SchemeRef = None) -> str:
        return self.resolve(scheme).format_plain(number, decimals)

    def format_rich(
        self,
        number: str,
        decimals: int = DEFAULT_DECIMALS,
        has_context_menu: bool = True,
        scheme: SchemeRef = None,
    ) -> str:
        return self.resolve(scheme).format_rich(number, decimals, has_context_menu)

    def get_type(self, scheme: SchemeRef = None) -> str:
        return self.resolve(scheme).get_type()

    def get_type_by_value(self, number: str, decimals: int = DEFAULT_DECIMALS, scheme: SchemeRef = None) -> str:
        return self.resolve(scheme).get_type_by_value(number, decimals)

    # ------------- unformatting -------------

    def unformat(self, text: str, scheme: SchemeRef = None) -> str:
        """Canonical decimal string for `text` written in any registered scheme."""
        if not isinstance(text, str):
            raise UnformattableInput(text)
        current = self.resolve(scheme)

        full_number = current.is_full_number(text)
        if full_number is not None:
            return full_number

        # chosen scheme first
        result = current.unformat_specific(text)
        if result is not None:
            return result

        for name, format_object in self.instance_list.items():
            if format_object is current:
                continue
            result = format_object.unformat_specific(text)
            if result is not None:
                _dbg(f"unformat: {text!r} recognised by {name!r}")
                return result

        raise UnformattableInput(text)

    # ------------- comparison -------------

    def compare(self, text1: str, text2: str, scheme: SchemeRef = None) -> int:
        """Tiered comparison of two numbers in any registered format.

        Returns 0 when equal, otherwise `polarity * level` where polarity is +1
        when the first number is greater and -1 when the second is, and level is
        1 (difference has at most two integer digits), 2 (difference is shorter
        than the smaller operand) or 3 (difference at least as long as the
        smaller operand).

        When both numbers are negative the one with the smaller magnitude (the
        algebraically greater one) provides the reference scale.
        """
        current = self.resolve(scheme)
        full_number1 = self.unformat(text1, current)
        full_number2 = self.unformat(text2, current)

        if full_number1 == full_number2:
            return 0

        negative1 = full_number1.startswith("-")
        negative2 = full_number2.startswith("-")

        exp = 0
        # reducing only has meaning if both numbers have same polarity
        if negative1 == negative2:
            reduced_number1, exp1 = current.reduce_base(full_number1)
            reduced_number2, exp2 = current.reduce_base(full_number2)
            if exp1 > exp2:
                exp = exp2
                full_number1 = reduced_number1 + "0" * (exp1 - exp2)
                full_number2 = reduced_number2
            else:
                exp = exp1
                full_number1 = reduced_number1
                full_number2 = reduced_number2 + "0" * (exp2 - exp1)

        difference = absolute(sub(full_number1, full_number2))
        difference_scale = current.get_scale(difference) + exp

        if negative1 and not negative2:
            smaller_number = full_number1
            level_polarity = -1
        elif not negative1 and negative2:
            smaller_number = full_number2
            level_polarity = 1
        elif not negative1 and not negative2:
            level_polarity = comp(full_number1, full_number2)
            smaller_number = full_number2 if level_polarity == 1 else full_number1
        else:
            # both negative: the greater value (smaller magnitude) sets the scale
            level_polarity = comp(full_number1, full_number2)
            smaller_number = full_number1 if level_polarity == 1 else full_number2

        smaller_scale = current.get_scale(smaller_number) + exp
        _dbg(
            f"compare: diff={difference} diff_scale={difference_scale} "
            f"smaller={smaller_number} smaller_scale={smaller_scale} exp={exp}"
        )

        if difference_scale < 3:
            level = 1
        elif difference_scale < smaller_scale:
            level = 2
        else:
            level = 3

        return level_polarity * level


__all__ = ["FormatRegistry", "RegistrySettings", "SchemeRef"]
