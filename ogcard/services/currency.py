"""Locale-aware currency symbols for price formatting"""

import logging
import re
from typing import Optional

from babel import Locale, UnknownLocaleError
from babel.numbers import get_currency_symbol


logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-GB"

_LANGUAGE_TAG = re.compile(r"^\s*([A-Za-z]{1,8}(?:[-_][A-Za-z0-9]{1,8})*)")


def locale_from_accept_language(header: Optional[str]) -> Optional[str]:
    """
    Pick the preferred locale out of an Accept-Language header.

    ``"en-GB,en;q=0.8"`` -> ``"en-GB"``. Wildcards and blank headers give None.
    """
    if not header:
        return None
    first = header.split(",")[0].split(";")[0]
    match = _LANGUAGE_TAG.match(first)
    return match.group(1) if match else None


def _parse_locale(locale: str) -> Locale:
    return Locale.parse(locale.replace("-", "_"))


def resolve_currency_symbol(currency: str, locale: Optional[str] = None,
                            default_locale: str = DEFAULT_LOCALE) -> str:
    """
    Resolve the symbol used for a currency in the caller's locale.

    Args:
        currency: ISO 4217 code, e.g. "GBP"
        locale: Caller locale such as "en-GB"; the default is used when missing
            or unknown
        default_locale: Locale to fall back on

    Returns:
        The currency symbol, or the code itself if Babel has no symbol for it
    """
    try:
        babel_locale = _parse_locale(locale or default_locale)
    except (UnknownLocaleError, ValueError):
        logger.debug(f"Unknown locale '{locale}', falling back to {default_locale}")
        babel_locale = _parse_locale(default_locale)
    return get_currency_symbol(currency.strip().upper(), locale=babel_locale)
