from number_format import FormattedNumber, PlainFormat


# -----------------------------
# Plain scheme
# -----------------------------

def test_never_reduces(plain_registry):
    print("[plain] long numbers stay grouped digits")
    assert plain_registry.format_plain("1234567.5") == "1,234,567.5"
    assert plain_registry.format_plain("-1234567890123", 0) == "-1,234,567,890,123"
    assert plain_registry.format("1234567", meta_only=True).exponent == 0


def test_rich_roundtrip(plain_registry):
    print("[plain-rich] integer markup parses back through the data attribute")
    html = plain_registry.format_rich("1234567")
    assert ">1,234,567</span>" in html
    assert plain_registry.unformat(html) == "1234567"


def test_finisher_with_exponent_shows_original(plain_registry):
    print("[plain-fallback] reduced input -> signed unreduced original")
    scheme = plain_registry.get_format_object("plain")
    assert isinstance(scheme, PlainFormat)
    assert scheme.format_plain_specific(FormattedNumber("1.23", "1,230,000", 6, False)) == "1,230,000"
    assert scheme.format_plain_specific(FormattedNumber("-1.23", "1,230,000", 6, True)) == "-1,230,000"


def test_roundtrip(plain_registry):
    print("[plain-roundtrip] unformat(format_plain(x)) == x")
    for number in ("0", "7", "12.5", "-999999.99", "1234567890", "0.01"):
        assert plain_registry.unformat(plain_registry.format_plain(number)) == number


def test_other_schemes_still_parse(plain_registry):
    print("[plain-registry] exponential and name text parse with plain as current")
    assert plain_registry.unformat("1.23 * 10^6") == "1230000"
    assert plain_registry.unformat("5.2 Mio") == "5200000"
