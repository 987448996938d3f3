"""
Number format schemes.

One `NumberFormat` subclass per scheme; the registry maps scheme names to
these classes through `FORMAT_CLASS_LIST`.
"""

from .plain import PlainFormat
from .exponential import ExponentialFormat
from .name import NameFormat, name_matrix_from_translations, validate_name_matrix
from .scientific import ScientificFormat

# Scheme name -> implementation (explicit registration table)
FORMAT_CLASS_LIST = {
    "plain": PlainFormat,
    "exponential": ExponentialFormat,
    "name": NameFormat,
    "scientific": ScientificFormat,
}

__all__ = [
    "FORMAT_CLASS_LIST",
    "PlainFormat",
    "ExponentialFormat",
    "NameFormat",
    "ScientificFormat",
    "name_matrix_from_translations",
    "validate_name_matrix",
]
