import pytest

from number_format import NotUsable


# -----------------------------
# Parse-only scheme
# -----------------------------

@pytest.mark.parametrize(
    "text,expected",
    [
        ("1.23E+06", "1230000"),
        ("1.2345E+2", "123.45"),
        ("-2E+3", "-2000"),
        (" 7 E + 1 ", "70"),
        ("1.23E-06", None),
        ("1.23e+06", None),
        ("E+06", None),
    ],
)
def test_unformat_specific(registry, text, expected):
    print(f"[scientific-parse] {text!r} -> {expected!r}")
    scheme = registry.get_format_object("scientific")
    assert scheme.unformat_specific(text) == expected


@pytest.mark.parametrize(
    "call,name",
    [
        (lambda r: r.format_plain("1230000", scheme="scientific"), "format_plain"),
        (lambda r: r.format_rich("1230000", scheme="scientific"), "format_rich"),
        (lambda r: r.format("1230000", meta_only=True, scheme="scientific"), "meta"),
        (lambda r: r.get_type_by_value("1230000", scheme="scientific"), "get_type_by_value"),
    ],
)
def test_formatting_not_usable(registry, call, name):
    print(f"[scientific-{name}] expect NotUsable")
    with pytest.raises(NotUsable) as ei:
        call(registry)
    assert ei.value.scheme == "scientific"


def test_registry_unformat_reaches_scientific(registry):
    print("[scientific-registry] current=exponential, '1.23E+06' still parses")
    assert registry.unformat("1.23E+06") == "1230000"


def test_rich_markup_not_recognised(registry):
    print("[scientific-rich] markup is left to the other schemes")
    scheme = registry.get_format_object("scientific")
    html = registry.format("1230000")
    assert scheme.unformat_specific(html) is None
