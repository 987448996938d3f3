import pytest

from number_format import (
    FormatConfigError,
    FormatMeta,
    FormatRegistry,
    name_matrix_from_translations,
)
from number_format.formats import validate_name_matrix

BIG = "1234567890123456789"


# -----------------------------
# Formatting
# -----------------------------

@pytest.mark.parametrize(
    "number,decimals,expected",
    [
        ("5200000", 1, "5.2 Mio"),
        ("-5200000", 1, "-5.2 Mio"),
        ("1234", 2, "1,234"),
        ("12000", 2, "12,000"),
        ("12000000000", 0, "12 Mrd"),
        ("1234567", 2, "1.23 Mio"),
    ],
)
def test_format_plain(name_registry, number, decimals, expected):
    print(f"[name-plain] {number} decimals={decimals} -> {expected!r}")
    assert name_registry.format_plain(number, decimals) == expected


def test_missing_word_falls_back_to_default(name_registry):
    print("[name-fallback] 10^18 has no word -> exponential output")
    assert name_registry.format_plain(BIG, 1) == "1.2 * 10^18"
    assert "10<sup>" in name_registry.format_rich(BIG, 1)


def test_fallback_to_plain_when_name_is_default():
    print("[name-fallback] name as default scheme -> unreduced grouped digits")
    reg = FormatRegistry(["name"], "name")
    assert reg.format_plain(BIG) == "1,234,567,890,123,456,789"
    assert reg.format_plain("-" + BIG) == "-1,234,567,890,123,456,789"
    assert reg.format_plain("5200000", 1) == "5.2 Mio"


def test_rich(name_registry):
    print("[name-rich] word joined with a non-breaking space")
    html = name_registry.format_rich("5200000", 1, has_context_menu=False)
    assert html == (
        '<span class="tooltipExtention showTooltipDefault" title="5,200,000" '
        'data="5,200,000">5.2&nbsp;Mio</span>'
    )


def test_meta(name_registry):
    print("[name-meta] word, 0 for unreduced, '' or default meta when no word")
    assert name_registry.format("5200000", decimals=1, meta_only=True) == FormatMeta("", "5.2", "", "Mio")
    assert name_registry.format("12", meta_only=True) == FormatMeta("", "12", "", 0)
    assert name_registry.format(BIG, decimals=1, meta_only=True, fallback_to_default=False) == FormatMeta(
        "", "1.2", "", ""
    )
    assert name_registry.format(BIG, decimals=1, meta_only=True) == FormatMeta("", "1.2", "*&nbsp;10", 18)


def test_type_by_value(name_registry):
    print("[name-type] name unless the exponent has no word")
    assert name_registry.get_type_by_value("5200000", 1) == "name"
    assert name_registry.get_type_by_value("12") == "name"
    assert name_registry.get_type_by_value(BIG) == "exponential"


def test_to_exponent(name_registry):
    print("[name-to_exponent] known word -> exponent, unknown -> 0")
    scheme = name_registry.get_format_object("name")
    assert scheme.to_exponent("Mio") == 6
    assert scheme.to_exponent("nope") == 0


# -----------------------------
# Parsing
# -----------------------------

@pytest.mark.parametrize(
    "text,expected",
    [
        ("5.2 Mio", "5200000"),
        ("1.2345 Tsd", "1234.5"),
        ("1.234 Tsd", "1234"),
        ("12 Mrd", "12000000000"),
        ("-3 Bio", "-3000000000000"),
        ("5 Xyz", None),
        ("Mio", None),
    ],
)
def test_unformat_specific(name_registry, text, expected):
    print(f"[name-parse] {text!r} -> {expected!r}")
    scheme = name_registry.get_format_object("name")
    assert scheme.unformat_specific(text) == expected


def test_german_separators(de_registry):
    print("[name-de] 5200000 <-> '5,2 Mio' with ',' as decimal separator")
    assert de_registry.format_plain("5200000", 1) == "5,2 Mio"
    assert de_registry.unformat("5,2 Mio") == "5200000"
    assert de_registry.format_plain("1234.5", 1) == "1.234,5"


# -----------------------------
# Name matrix configuration
# -----------------------------

def test_matrix_from_translations():
    print("[name-matrix] expN keys become words; other keys ignored")
    translations = {"decimalSep": ",", "exp3": "Tsd", "exp6": "Mio"}
    assert name_matrix_from_translations(translations) == {"Tsd": 3, "Mio": 6}
    with pytest.raises(FormatConfigError):
        name_matrix_from_translations({"expX": "a"})


@pytest.mark.parametrize("matrix", [{"": 3}, {"Mio": 0}, {"Mio": True}, {"Mio": "6"}])
def test_matrix_validation(matrix):
    print(f"[name-matrix] {matrix!r} -> expect FormatConfigError")
    with pytest.raises(FormatConfigError):
        validate_name_matrix(matrix)


def test_custom_matrix():
    print("[name-matrix] custom words replace the defaults")
    reg = FormatRegistry(["name"], "name", name_matrix={"k": 3, "M": 6})
    assert reg.format_plain("5200000", 1) == "5.2 M"
    assert reg.unformat("3.5 k") == "3500"
