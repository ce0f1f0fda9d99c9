import asyncio
import logging
from typing import Optional, Union

from ogcard.core.models import FetchFailure, OpenGraph
from .currency import locale_from_accept_language
from .exceptions import URLValidationError
from .metadata_extractor import MetadataExtractorInterface
from .url_validator import URLValidatorInterface
from .web_fetcher import WebFetcherInterface

logger = logging.getLogger(__name__)


class MetadataService:
    """
    Fetch-then-parse entry point for Open Graph previews
    """

    def __init__(
        self,
        url_validator: URLValidatorInterface,
        web_fetcher: WebFetcherInterface,
        metadata_extractor: MetadataExtractorInterface,
    ):
        self.url_validator = url_validator
        self.web_fetcher = web_fetcher
        self.metadata_extractor = metadata_extractor

    async def get_metadata(
        self,
        url: str,
        accept_language: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Union[OpenGraph, FetchFailure]:
        """
        Fetch a page and extract its metadata.

        Args:
            url: The page to preview
            accept_language: The caller's Accept-Language header, used for
                currency symbols
            user_agent: The caller's User-Agent, forwarded to sites that
                only serve full pages to browsers

        Returns:
            The OpenGraph record, or the FetchFailure if the page could not
            be retrieved

        Raises:
            URLValidationError: If the URL is missing, malformed or unsafe
            ParseError: If the fetched document is empty or has no metadata
        """
        if not url or not url.strip():
            logger.warning("Empty or whitespace-only URL parameter provided")
            raise URLValidationError("URL parameter is required")

        url = url.strip()
        if not self.url_validator.validate(url):
            logger.warning(f"Invalid or unsafe URL provided: {url}")
            raise URLValidationError()

        result = await self.web_fetcher.fetch_html(url, client_user_agent=user_agent)
        if isinstance(result, FetchFailure):
            logger.warning(f"Fetch failed for URL {url}: {result.message}")
            return result

        locale = locale_from_accept_language(accept_language)
        # Image probes block, keep them off the event loop
        graph = await asyncio.to_thread(self.metadata_extractor.parse, result, url, locale)
        logger.info(f"Metadata extracted for URL: {url}")
        return graph

    def parse_html(
        self,
        html: str,
        url: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> OpenGraph:
        """Extract metadata from HTML the caller already has"""
        locale = locale_from_accept_language(accept_language)
        return self.metadata_extractor.parse(html, url, locale)
