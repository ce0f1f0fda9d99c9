import pytest

from ogcard.services.currency import locale_from_accept_language, resolve_currency_symbol


class TestCurrency:
    """Unit tests for currency symbol resolution"""

    def test_symbol_in_caller_locale(self):
        assert resolve_currency_symbol("GBP", "en-GB") == "£"
        assert resolve_currency_symbol("EUR", "de-DE") == "€"

    def test_default_locale_when_missing(self):
        """Test the default locale is used when the caller sent none."""
        assert resolve_currency_symbol("GBP", None) == "£"

    def test_unknown_locale_falls_back(self):
        """Test an unknown locale does not raise."""
        assert resolve_currency_symbol("GBP", "xx-YY") == "£"

    def test_lowercase_code(self):
        assert resolve_currency_symbol("gbp", "en-GB") == "£"


@pytest.mark.parametrize("header,expected", [
    ("en-GB,en;q=0.8", "en-GB"),
    ("fr-CH, fr;q=0.9, en;q=0.8", "fr-CH"),
    ("de", "de"),
    ("*", None),
    ("", None),
    (None, None),
])
def test_locale_from_accept_language(header, expected):
    assert locale_from_accept_language(header) == expected
