"""Image size gate, image fallback chain and image URL normalization"""

import logging
from typing import Optional
from urllib.parse import urljoin, urlparse

from ogcard.core.models import MetaValues, ImageSize
from .html_parser import HTMLParser
from .image_probe import ImageProberInterface
from .tag_scanner import ScanResult


logger = logging.getLogger(__name__)

MIN_IMAGE_WIDTH = 300
FULL_WIDTH = "100%"


def _declared_width(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value.strip().rstrip("px"))
    except ValueError:
        return None


def is_absolute(url: str) -> bool:
    """True for URLs with a scheme or protocol-relative URLs"""
    return url.startswith("//") or bool(urlparse(url).scheme)


def normalize_image_url(image: str, url: Optional[str]) -> str:
    """
    Rebuild a relative image path as ``scheme://host/path`` of the resource.

    Args:
        image: Image value from the record
        url: The resource URL

    Returns:
        The absolute image URL, or the image untouched if it is already
        absolute or there is no resource URL to anchor it to
    """
    if not url or is_absolute(image):
        return image
    parsed = urlparse(url)
    if not parsed.netloc:
        return image
    scheme = f"{parsed.scheme}://" if parsed.scheme else "//"
    return f"{scheme}{parsed.netloc}/{image.lstrip('/')}"


class ImageResolver:
    """Decides the final ``image`` of a record"""

    def __init__(self, prober: ImageProberInterface,
                 min_width: int = MIN_IMAGE_WIDTH, placeholder_url: str = None):
        self.prober = prober
        self.min_width = min_width
        self.placeholder_url = placeholder_url

    def resolve(self, values: MetaValues, scan: ScanResult, parser: HTMLParser,
                url: Optional[str] = None) -> MetaValues:
        """
        Gate the scanned image on width, fill it from fallbacks, then absolutize.

        Args:
            values: Record values after the fallback chain
            scan: Scanner output (for the JSON-LD image candidate)
            parser: The parsed document
            url: The resource URL, if known

        Returns:
            The same MetaValues, updated in place
        """
        self._gate_image(values, url)

        if "image" not in values:
            self._fill_image(values, scan, parser, url)

        image = values.get("image")
        if image:
            normalized = normalize_image_url(image, url)
            if normalized != image:
                values.set("image", normalized)
        return values

    def _probe(self, image: str, url: Optional[str]) -> Optional[ImageSize]:
        target = urljoin(url, image) if url else image
        return self.prober.probe(target)

    def _gate_image(self, values: MetaValues, url: Optional[str]) -> None:
        image = values.get("image")
        if image is None:
            return
        if not image.strip():
            logger.debug("Dropping empty image value")
            values.discard("image")
            return
        size = self._probe(image, url)
        if size is None or size.width < self.min_width:
            logger.info(f"Dropping image {image}: width {size.width if size else 'unknown'} "
                        f"below {self.min_width}px")
            values.discard("image")

    def _fill_image(self, values: MetaValues, scan: ScanResult, parser: HTMLParser,
                    url: Optional[str]) -> None:
        image_src = parser.get_link_href("image_src")
        if image_src:
            values.set("image", image_src)
            values.set("image_src", image_src)
            return

        twitter_image = values.get("twitter_image")
        if twitter_image:
            values.set("image", twitter_image)
            return

        if scan.structured_image:
            values.set("image", scan.structured_image)
            return

        if self._fill_from_itemprop(values, parser, url):
            return

        if self._fill_from_img_tags(values, parser, url):
            return

        if self.placeholder_url:
            logger.info("No usable image found, using placeholder")
            values.set("image", self.placeholder_url)

    def _fill_from_itemprop(self, values: MetaValues, parser: HTMLParser, url: Optional[str]) -> bool:
        content = parser.get_itemprop_content("image")
        if not content:
            return False

        if content.startswith("http") or not url:
            image = content
        else:
            image = f"{url.rstrip('/')}/{content.lstrip('/')}"
        values.set("image", image)

        size = self.prober.probe(image)
        if size is not None:
            values.set("image:width", str(size.width))
            values.set("image:height", str(size.height))
        return True

    def _fill_from_img_tags(self, values: MetaValues, parser: HTMLParser, url: Optional[str]) -> bool:
        for tag in parser.img_tags():
            src = parser.attr(tag, "src")
            if not src:
                continue

            declared = parser.attr(tag, "width")
            declared_width = _declared_width(declared)
            declared_wide = (
                (declared_width is not None and declared_width >= self.min_width)
                or (declared is not None and declared.strip() == FULL_WIDTH)
            )
            if declared_wide:
                width, height = declared, parser.attr(tag, "height")
            else:
                if src.startswith("//"):
                    probe_url = f"http:{src}"
                else:
                    probe_url = urljoin(url, src) if url else src
                size = self.prober.probe(probe_url)
                if size is None or size.width < self.min_width:
                    continue
                width, height = str(size.width), str(size.height)

            values.set("image", src)
            values.set("image:width", width)
            if height is not None:
                values.set("image:height", height)
            return True
        return False
