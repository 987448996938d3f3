import pytest

from number_format import UnformattableInput


# -----------------------------
# Tiered comparison
# -----------------------------

@pytest.mark.parametrize(
    "a,b,expected",
    [
        # equal
        ("100", "100", 0),
        ("100", "100.00", 0),
        ("1.23 * 10^6", "1230000", 0),
        ("5.2 Mio", "5,200,000", 0),
        # level 1: difference below 100
        ("100", "99", 1),
        ("123", "124", -1),
        ("0.5", "0.25", 1),
        ("1.23E+06", "1,230,001", -1),
        # level 2: difference shorter than the smaller operand
        ("150000", "100000", 2),
        ("1234", "1000", 2),
        ("5.2 Mio", "5.3 Mio", -2),
        # level 3: difference at least as long as the smaller operand
        ("1000000", "5", 3),
        ("5", "1000000", -3),
        ("2000", "1000", 3),
    ],
)
def test_compare_positive(registry, a, b, expected):
    print(f"[compare] {a!r} vs {b!r} -> {expected}")
    assert registry.compare(a, b) == expected


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("-50", "-10", -1),
        ("-10", "-50", 1),
        ("-5", "5", -1),
        ("5", "-5", 1),
        ("-5000", "5", -3),
        ("-1000000", "-5", -3),
        ("-1500", "-1000", -2),
    ],
)
def test_compare_negative(registry, a, b, expected):
    print(f"[compare-negative] {a!r} vs {b!r} -> {expected}")
    assert registry.compare(a, b) == expected


def test_compare_two_negatives_mirror_positives(registry):
    print("[compare-negative] reference scale: value closest to zero")
    assert registry.compare("1000", "100000") == -3
    assert registry.compare("-100000", "-1000") == -3


def test_compare_is_antisymmetric(registry):
    print("[compare] compare(a, b) == -compare(b, a)")
    pairs = [("100", "99"), ("150000", "100000"), ("5", "1000000"), ("-50", "-10"), ("-5", "5")]
    for a, b in pairs:
        assert registry.compare(a, b) == -registry.compare(b, a)


def test_compare_rich_markup(name_registry):
    print("[compare] rich markup operands use the carried number and its sign")
    html = name_registry.format_rich("-5200000")
    assert name_registry.compare(html, "-5200000") == 0
    assert name_registry.compare(html, "0") == -3


def test_compare_unformattable(registry):
    print("[compare] unparseable operand -> UnformattableInput")
    with pytest.raises(UnformattableInput):
        registry.compare("abc", "1")
    with pytest.raises(UnformattableInput):
        registry.compare("1", "abc")
