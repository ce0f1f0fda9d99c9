"""HTML parsing utilities for metadata extraction"""

import logging
from typing import Optional, List

from bs4 import BeautifulSoup, Tag


logger = logging.getLogger(__name__)

JSON_LD_TYPE = "application/ld+json"


class HTMLParser:
    """Encapsulates the tolerant HTML parse tree the extractor reads from"""

    def __init__(self, html: str):
        """
        Initialize the HTML parser

        Args:
            html: HTML content to parse
        """
        self.soup = BeautifulSoup(html, "lxml")

    @staticmethod
    def attr(tag: Tag, name: str) -> Optional[str]:
        """Read an attribute as a string, joining multi-valued attributes"""
        value = tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(str(item) for item in value)
        return str(value)

    @staticmethod
    def has_rel(tag: Tag, rel: str) -> bool:
        values = tag.get("rel") or []
        if isinstance(values, str):
            values = values.split()
        return rel in values

    def meta_tags(self) -> List[Tag]:
        """All meta tags in document order"""
        return self.soup.find_all("meta")

    def link_tags(self) -> List[Tag]:
        """All link tags in document order"""
        return self.soup.find_all("link")

    def img_tags(self) -> List[Tag]:
        """All img tags in document order"""
        return self.soup.find_all("img")

    def get_title(self) -> Optional[str]:
        """Extract the text of the document's title tag"""
        title_tag = self.soup.find("title")
        if title_tag is None:
            return None
        title = title_tag.get_text().strip()
        return title if title else None

    def get_link_href(self, rel: str) -> Optional[str]:
        """
        Return the href of the first link tag with the given rel.

        Args:
            rel: The rel token to look for (e.g. "image_src")

        Returns:
            The href value, or None when no such link (or no href) exists
        """
        for link in self.link_tags():
            if self.has_rel(link, rel):
                return self.attr(link, "href")
        return None

    def get_itemprop_content(self, itemprop: str) -> Optional[str]:
        """Content of the first meta tag carrying the given itemprop"""
        for tag in self.meta_tags():
            if self.attr(tag, "itemprop") == itemprop:
                return self.attr(tag, "content")
        return None

    def get_json_ld_blocks(self) -> List[str]:
        """Raw text of every JSON-LD script block, in document order"""
        blocks = []
        for script in self.soup.find_all("script", type=JSON_LD_TYPE):
            blocks.append(script.string or script.get_text() or "")
        return blocks
