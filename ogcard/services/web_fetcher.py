import logging
import re
from abc import ABC, abstractmethod
from typing import Optional, Union

import httpx

from ogcard.core.config import settings
from ogcard.core.models import FetchFailure


logger = logging.getLogger(__name__)

FetchResult = Union[str, FetchFailure]

# Sites that only serve full markup to a regular browser
_BROWSER_SITES = re.compile(r"(facebook|wish)")
# Sites that serve richer tags to the Facebook crawler
_FACEBOOK_CRAWLER_SITES = re.compile(r"(amazon|youtu|missguided)")

DEFAULT_HEADERS = {
    "Accept": "text/html,text/xml,application/xml,application/xhtml+xml,"
              "text/html;q=0.9,text/plain;q=0.8,image/png,*/*;q=0.5",
    "Cache-Control": "max-age=0",
    "Accept-Charset": "ISO-8859-1,utf-8;q=0.7,*;q=0.7",
    "Accept-Language": "en-us,en;q=0.5",
    "Pragma": "no-cache",
}


def select_user_agent(url: str, client_user_agent: Optional[str] = None) -> str:
    """
    Choose the user agent a target site responds best to.

    Args:
        url: The URL about to be fetched
        client_user_agent: User agent of the client that asked for the preview

    Returns:
        The User-Agent header value to send
    """
    if _BROWSER_SITES.search(url.lower()):
        return client_user_agent or settings.fetch_user_agent
    if _FACEBOOK_CRAWLER_SITES.search(url):
        return settings.facebook_user_agent
    return settings.fetch_user_agent


class WebFetcherInterface(ABC):
    """Interface for fetching web content following the Dependency Inversion Principle"""

    @abstractmethod
    async def fetch_html(self, url: str, client_user_agent: Optional[str] = None) -> FetchResult:
        pass


class WebFetcher(WebFetcherInterface):
    """
    Fetches HTML content from URLs.

    Network and HTTP problems are returned as a FetchFailure rather than
    raised, so an unreachable page never looks like an unparseable one.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport = None):
        self.transport = transport

    async def fetch_html(self, url: str, client_user_agent: Optional[str] = None) -> FetchResult:
        """Fetch HTML content from a URL"""
        logger.info(f"Fetching HTML content from URL: {url}")

        headers = dict(DEFAULT_HEADERS)
        headers["User-Agent"] = select_user_agent(url, client_user_agent)

        try:
            async with httpx.AsyncClient(
                timeout=settings.fetch_timeout,
                follow_redirects=settings.fetch_follow_redirects,
                verify=settings.fetch_verify_ssl,
                transport=self.transport,
            ) as client:
                res = await client.get(url, headers=headers)
                res.raise_for_status()

                content_type = res.headers.get("content-type", "")
                if content_type and "html" not in content_type.lower():
                    logger.warning(f"URL does not return HTML content. Content-Type: {content_type}")
                    return FetchFailure(
                        http_code=res.status_code,
                        message=f"URL Fetch Error: content type '{content_type}' is not supported",
                        resolved_url=str(res.url),
                    )

                if not res.text:
                    logger.warning(f"Empty response body from URL: {url}")
                    return FetchFailure(
                        http_code=res.status_code,
                        message="URL Fetch Error: empty response body",
                        resolved_url=str(res.url),
                    )

                logger.info(f"Successfully fetched HTML content from URL: {url}")
                return res.text

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error occurred while fetching URL {url}: {e}")
            return FetchFailure(
                http_code=e.response.status_code,
                message=f"URL Fetch Error: {e}",
                resolved_url=str(e.response.url),
            )
        except httpx.RequestError as e:
            logger.error(f"Request error occurred while fetching URL {url}: {str(e)}")
            return FetchFailure(
                http_code=0,
                message=f"URL Fetch Error: {str(e) or type(e).__name__}",
                resolved_url=url,
            )
