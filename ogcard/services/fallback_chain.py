"""Post-scan rules that fill the canonical fields a page left out"""

import logging
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional
from urllib.parse import urlparse

from ogcard.core.models import MetaValues
from .currency import resolve_currency_symbol, DEFAULT_LOCALE
from .html_parser import HTMLParser
from .tag_scanner import ScanResult


logger = logging.getLogger(__name__)

_WWW_LABEL = re.compile(r"^www\d?\.", re.IGNORECASE)

VIDEO_TYPES = ("video", "video.movie")


def site_name_from_url(url: str) -> Optional[str]:
    """``https://www1.example.com/x`` -> ``example.com``"""
    host = urlparse(url).hostname
    if not host:
        return None
    return _WWW_LABEL.sub("", host).lstrip(".") or None


def duration_in_minutes(duration: str) -> Optional[str]:
    """Seconds to whole minutes, rounding halves up: ``"90"`` -> ``"2min"``"""
    try:
        seconds = Decimal(duration.strip())
        if not seconds.is_finite():
            return None
        minutes = (seconds / 60).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except (InvalidOperation, AttributeError):
        return None
    return f"{int(minutes)}min"


class FallbackChain:
    """
    Fills gaps in a scanned record.

    The resource URL and the caller's locale are passed in explicitly; the
    chain keeps no state between calls.
    """

    def __init__(self, default_locale: str = DEFAULT_LOCALE):
        self.default_locale = default_locale

    def apply(self, scan: ScanResult, parser: HTMLParser,
              url: Optional[str] = None, locale: Optional[str] = None) -> MetaValues:
        """
        Run every rule once, in order, against the scanned values.

        Args:
            scan: Output of the tag scanner
            parser: The parsed document (for the title tag)
            url: The URL the document was requested from, if known
            locale: Caller locale used for currency symbols

        Returns:
            The same MetaValues, updated in place
        """
        values = scan.values

        self._apply_site_name(values, url)
        self._apply_type(values)

        if "title" not in values:
            title = parser.get_title()
            if title:
                values.set("title", title)

        for key, candidate in (("description", scan.description),
                               ("keywords", scan.keywords),
                               ("rating", scan.rating)):
            if key not in values and candidate:
                values.set(key, candidate)

        self._apply_url(values, scan.canonical_url, url)
        self._apply_price(values, locale)
        return values

    def _apply_site_name(self, values: MetaValues, url: Optional[str]) -> None:
        if "site_name" in values or not url:
            return
        site_name = site_name_from_url(url)
        if site_name:
            values.set("site_name", site_name)

    def _apply_type(self, values: MetaValues) -> None:
        raw_type = values.get("type")
        if raw_type is None:
            return

        if raw_type in VIDEO_TYPES:
            site_type = "video"
            duration_minute = None
            duration = values.get("duration")
            if duration is not None:
                duration_minute = duration_in_minutes(duration)
                if duration_minute:
                    values.set("duration_minute", duration_minute)
            values.set("video_type", f"{site_type} {duration_minute or ''}")
        else:
            site_type = "website"

        if raw_type != site_type:
            logger.debug(f"Coarsening type '{raw_type}' to '{site_type}'")
        values.set("type", site_type)

    def _apply_url(self, values: MetaValues, canonical_url: Optional[str], url: Optional[str]) -> None:
        if canonical_url:
            values.set("url", canonical_url)
        elif url:
            values.set("url", url)

    def _apply_price(self, values: MetaValues, locale: Optional[str]) -> None:
        amount = values.get("product_price:amount")
        if amount is not None:
            symbol = ""
            currency = values.get("price:currency")
            if currency:
                symbol = resolve_currency_symbol(currency, locale, self.default_locale)
            values.set("price", f"{symbol}{amount}")
        elif values.get("twitter_data1") is not None:
            values.set("price", values.get("twitter_data1"))
