import pytest

from number_format import FormatRegistry, FormattedNumber, MalformedNumber, render_tooltip

EXP_RICH_6 = '1.23&nbsp;*&nbsp;10<sup><span style="font-size: 0">^</span>6</sup>'


# -----------------------------
# Shared preparation (sign, reduction, grouping)
# -----------------------------

@pytest.mark.parametrize(
    "number,decimals,expected",
    [
        ("1230000", 2, FormattedNumber("1.23", "1,230,000", 6, False)),
        ("-1234567.891", 2, FormattedNumber("-1.23", "1,234,567", 6, True)),
        ("123456", 2, FormattedNumber("123,456", "123,456", 0, False)),
        ("123456789", 1, FormattedNumber("123.4", "123,456,789", 6, False)),
        ("1234567890", 0, FormattedNumber("1", "1,234,567,890", 9, False)),
        ("1000000", 2, FormattedNumber("1.00", "1,000,000", 6, False)),
        ("1000000", 12, FormattedNumber("1", "1,000,000", 6, False)),
        ("12.345", 2, FormattedNumber("12.34", "12", 0, False)),
        ("-0.001", 2, FormattedNumber("0", "0", 0, False)),
    ],
)
def test_prepare(registry, number, decimals, expected):
    print(f"[prepare] {number} decimals={decimals} -> {expected}")
    scheme = registry.get_format_object("exponential")
    assert scheme.prepare(number, decimals) == expected


def test_prepare_rejects_bad_input(registry):
    print("[prepare] negative decimals -> ValueError; 'abc' -> MalformedNumber")
    scheme = registry.get_format_object("exponential")
    with pytest.raises(ValueError):
        scheme.prepare("5", -1)
    with pytest.raises(MalformedNumber):
        scheme.prepare("abc")


def test_prepare_separator_override(registry):
    print("[prepare] per-call separators: 1234567 -> 1,23 / 1.234.567")
    scheme = registry.get_format_object("exponential")
    prepared = scheme.prepare("1234567", 2, ",", ".")
    assert prepared.magnitude_string == "1,23"
    assert prepared.original_magnitude_string == "1.234.567"


# -----------------------------
# Rendering & rich-number recovery
# -----------------------------

def test_default_renderer_markup(registry):
    print("[render] exponential rich markup carries the unreduced number")
    html = registry.format("1230000")
    assert html == (
        '<span class="tooltipExtention showTooltipDefault number-menu" '
        'title="1,230,000" data="1,230,000">' + EXP_RICH_6 + "</span>"
    )
    assert render_tooltip("5", "5") == (
        '<span class="tooltipExtention showTooltipDefault" title="5" data="5">5</span>'
    )


def test_custom_renderer_receives_plain_and_content():
    print("[render] injected renderer gets (plain, content, has_context_menu)")
    calls = []

    def renderer(plain, content, has_context_menu):
        calls.append((plain, content, has_context_menu))
        return f"[{plain}|{content}]"

    reg = FormatRegistry(["exponential"], "exponential", renderer=renderer)
    assert reg.format_rich("-1230000", 2, False) == f"[-1,230,000|-{EXP_RICH_6}]"
    assert calls == [("-1,230,000", "-" + EXP_RICH_6, False)]


def test_is_rich_number_roundtrip(registry):
    print("[is_rich_number] markup from format() parses back; tampered markup does not")
    scheme = registry.get_format_object("exponential")
    for number in ("1230000", "-1230000", "42"):
        assert scheme.is_rich_number(scheme.format(number)) == number
    tampered = scheme.format("1230000").replace('data="1,230,000"', 'data="1,230,001"')
    assert scheme.is_rich_number(tampered) is None
    # fractional digits are not carried by the data attribute
    assert scheme.is_rich_number(scheme.format("12.5")) is None
    assert scheme.is_rich_number("1230000") is None


def test_unformat_delegates_to_registry(registry):
    print("[NumberFormat.unformat] name text parsed through the registry")
    scheme = registry.get_format_object("exponential")
    assert scheme.unformat("5.2 Mio") == "5200000"
    assert scheme.unformat(scheme.format("1230000")) == "1230000"
