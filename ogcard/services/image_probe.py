import logging
from abc import ABC, abstractmethod
from io import BytesIO
from typing import Optional

import httpx
from PIL import Image, UnidentifiedImageError

from ogcard.core.config import settings
from ogcard.core.models import ImageSize
from .url_validator import URLValidator, URLValidatorInterface


logger = logging.getLogger(__name__)


class ImageProberInterface(ABC):
    """Interface for measuring remote images following the Dependency Inversion Principle"""

    @abstractmethod
    def probe(self, url: str) -> Optional[ImageSize]:
        """
        Measure an image.

        Args:
            url: Absolute image URL

        Returns:
            The image's pixel size, or None if it could not be measured
        """
        pass


class HttpImageProber(ImageProberInterface):
    """
    Downloads the head of an image and reads its dimensions with Pillow.

    Probing is best effort: every failure is logged and reported as None.
    """

    def __init__(self, timeout: int = None, max_bytes: int = None,
                 user_agent: str = None, transport: httpx.BaseTransport = None,
                 url_validator: URLValidatorInterface = None):
        self.timeout = timeout if timeout is not None else settings.image_probe_timeout
        self.max_bytes = max_bytes if max_bytes is not None else settings.image_probe_max_bytes
        self.user_agent = user_agent or settings.fetch_user_agent
        self.transport = transport
        self.url_validator = url_validator or URLValidator()

    def probe(self, url: str) -> Optional[ImageSize]:
        if not url or not url.startswith(("http://", "https://")):
            logger.debug(f"Not probing non-http image URL: {url}")
            return None

        if not self.url_validator.validate(url):
            logger.warning(f"Refusing to fetch image from disallowed host: {url}")
            return None

        try:
            data = self._download(url)
        except httpx.HTTPError as e:
            logger.debug(f"Image probe request failed for {url}: {str(e)}")
            return None

        if not data:
            logger.debug(f"Image probe got an empty body for {url}")
            return None

        try:
            with Image.open(BytesIO(data)) as img:
                width, height = img.size
        except (UnidentifiedImageError, OSError, ValueError) as e:
            logger.debug(f"Unreadable image at {url}: {str(e)}")
            return None

        return ImageSize(width=int(width), height=int(height))

    def _check_redirect_target(self, request: httpx.Request) -> None:
        # runs for every hop, so a public URL cannot redirect into the private network
        if not self.url_validator.validate(str(request.url)):
            raise httpx.RequestError(f"Disallowed image host: {request.url}", request=request)

    def _download(self, url: str) -> bytes:
        chunks = []
        received = 0
        with httpx.Client(timeout=self.timeout, follow_redirects=True,
                          headers={"User-Agent": self.user_agent},
                          event_hooks={"request": [self._check_redirect_target]},
                          transport=self.transport) as client:
            with client.stream("GET", url) as response:
                response.raise_for_status()
                for chunk in response.iter_bytes():
                    chunks.append(chunk)
                    received += len(chunk)
                    # Pillow only needs the header to report a size
                    if received >= self.max_bytes:
                        break
        return b"".join(chunks)
