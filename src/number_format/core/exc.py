"""
Core exception types for number_format.core.

These are dependency-free and may be imported by all modules.
"""

__all__ = [
    "MalformedNumber",
    "UnformattableInput",
    "NotUsable",
    "UnknownScheme",
    "FormatConfigError",
]


class MalformedNumber(Exception):
    """Raised when a value is not a signed decimal digit string.

    Attributes
    ----------
    value : Any
        The rejected input, unchanged.
    """

    def __init__(self, value):
        super().__init__(f"Malformed decimal number: {value!r}")
        self.value = value


class UnformattableInput(Exception):
    """Raised when no registered scheme is able to parse the text."""

    def __init__(self, text):
        super().__init__(f"Unable to unformat input {text!r}")
        self.text = text


class NotUsable(Exception):
    """Raised when a parse-only scheme is asked to format a number."""

    def __init__(self, scheme: str):
        super().__init__(f"Format {scheme!r} cannot be used for formatting")
        self.scheme = scheme


class UnknownScheme(Exception):
    """Raised when a scheme name has no registered strategy (or no default is set)."""

    def __init__(self, name):
        super().__init__(f"Unknown number format {name!r}")
        self.name = name


class FormatConfigError(Exception):
    """Raised when separators or the magnitude name table are invalid."""
    pass
