import logging
from abc import ABC, abstractmethod
from typing import Optional

from ogcard.core.config import settings
from ogcard.core.models import OpenGraph
from .exceptions import EmptyInputError, NoMetadataFoundError
from .fallback_chain import FallbackChain
from .html_parser import HTMLParser
from .image_probe import ImageProberInterface
from .image_resolver import ImageResolver
from .tag_scanner import TagScanner


logger = logging.getLogger(__name__)


class MetadataExtractorInterface(ABC):
    """Interface for metadata extraction following the Dependency Inversion Principle"""

    @abstractmethod
    def parse(self, html: str, url: Optional[str] = None, locale: Optional[str] = None) -> OpenGraph:
        pass


class OpenGraphExtractor(MetadataExtractorInterface):
    """
    Extracts Open Graph, Twitter Card and fallback metadata from HTML.

    One call scans the document, runs the fallback chain and settles the
    image. Nothing is shared between calls except configuration.
    """

    def __init__(
        self,
        image_prober: ImageProberInterface,
        tag_scanner: TagScanner = None,
        fallback_chain: FallbackChain = None,
        min_image_width: int = None,
        placeholder_image_url: str = None,
    ):
        self.tag_scanner = tag_scanner or TagScanner()
        self.fallback_chain = fallback_chain or FallbackChain(settings.default_locale)
        self.image_resolver = ImageResolver(
            image_prober,
            min_width=min_image_width if min_image_width is not None else settings.min_image_width,
            placeholder_url=placeholder_image_url or settings.placeholder_image_url,
        )

    def parse(self, html: str, url: Optional[str] = None, locale: Optional[str] = None) -> OpenGraph:
        """
        Parse an HTML document into an OpenGraph record.

        Args:
            html: The document
            url: The URL the document was requested from; anchors relative
                images and feeds the site_name and url fallbacks
            locale: Caller locale (e.g. "en-GB") used to format prices

        Returns:
            The finished record

        Raises:
            EmptyInputError: If the HTML is empty
            NoMetadataFoundError: If the document carries no usable metadata
        """
        if not html or not html.strip():
            logger.warning("Empty HTML input provided")
            raise EmptyInputError()

        logger.info(f"Extracting Open Graph metadata for URL: {url}")
        parser = HTMLParser(html)

        scan = self.tag_scanner.scan(parser)
        if not scan.has_signal():
            logger.info(f"No Open Graph, Twitter or descriptive meta tags found for URL: {url}")
            raise NoMetadataFoundError()

        values = self.fallback_chain.apply(scan, parser, url=url, locale=locale)
        values = self.image_resolver.resolve(values, scan, parser, url=url)

        if not len(values):
            raise NoMetadataFoundError()

        graph = OpenGraph(values)
        logger.info(f"Extracted {len(graph)} metadata keys for URL: {url}")
        return graph
