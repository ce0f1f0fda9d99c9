"""Meta/link tag scanning and key derivation"""

import logging
from dataclasses import dataclass
from typing import Optional

from ogcard.core.models import MetaValues
from .exceptions import NoMetadataFoundError
from .html_parser import HTMLParser
from .structured_data import StructuredDataExtractor


logger = logging.getLogger(__name__)

OG_PREFIX = "og:"
TWITTER_PREFIX = "twitter:"


@dataclass
class ScanResult:
    """Values collected during a scan plus the candidates held back for fallbacks"""
    values: MetaValues
    description: Optional[str] = None
    keywords: Optional[str] = None
    rating: Optional[str] = None
    canonical_url: Optional[str] = None
    structured_image: Optional[str] = None

    def has_signal(self) -> bool:
        """True when the scan found any key or any auxiliary meta candidate"""
        return bool(len(self.values)) or any(
            value is not None for value in (self.description, self.keywords, self.rating)
        )


def og_key(attribute: str) -> str:
    """``og:image-width`` -> ``image_width``"""
    return attribute[len(OG_PREFIX):].replace("-", "_")


def twitter_key(attribute: str) -> str:
    """``twitter:image-src`` -> ``twitter_image_src``"""
    return attribute.replace("-", "_").replace(":", "_")


class TagScanner:
    """
    Walks the meta and link tags of a parsed document.

    Every insert goes through MetaValues.add, so a repeated key keeps its first
    value and collects the rest as additional values.
    """

    def __init__(self, structured_data: StructuredDataExtractor = None):
        self.structured_data = structured_data or StructuredDataExtractor()

    def scan(self, parser: HTMLParser) -> ScanResult:
        """
        Scan a parsed document.

        Args:
            parser: The parsed document

        Returns:
            ScanResult with the populated values and fallback candidates

        Raises:
            NoMetadataFoundError: If the document has no meta tags at all
        """
        structured_image = self.structured_data.find_image(parser.get_json_ld_blocks())

        tags = parser.meta_tags()
        if not tags:
            logger.info("Document contains no meta tags")
            raise NoMetadataFoundError("Document contains no meta tags")

        result = ScanResult(values=MetaValues(), structured_image=structured_image)
        values = result.values

        for tag in tags:
            prop = parser.attr(tag, "property")
            name = parser.attr(tag, "name")
            content = parser.attr(tag, "content") or ""

            if prop and prop.startswith(OG_PREFIX):
                values.add(og_key(prop), content)

                # Some sites put the payload in value= instead of content=
                value = parser.attr(tag, "value")
                if value is not None:
                    values.set(og_key(prop), value)

            if name == "description":
                result.description = content
            elif name == "keywords":
                result.keywords = content
            elif name == "rating":
                result.rating = content

            if prop and prop.startswith(TWITTER_PREFIX):
                values.add(twitter_key(prop), content)

            if name and name.startswith(TWITTER_PREFIX):
                values.add(twitter_key(name), content)

            if name and name.startswith(OG_PREFIX):
                values.add(og_key(name), content)

            # Only applies to tags that come after og:type in the document.
            type_value = values.get("type")
            if type_value and prop:
                type_prefix = f"{type_value}:"
                if prop.startswith(type_prefix):
                    field = prop[len(type_prefix):].replace("-", "_")
                    values.add(f"{type_value}_{field}", content)

        for link in parser.link_tags():
            if parser.has_rel(link, "canonical"):
                result.canonical_url = parser.attr(link, "href")

        logger.debug(f"Scanned {len(tags)} meta tags into {len(values)} keys")
        return result
