from typing import Dict, List, Optional

import pytest

from ogcard.core.models import ImageSize
from ogcard.services.image_probe import ImageProberInterface
from ogcard.services.metadata_extractor import OpenGraphExtractor


PLACEHOLDER = "https://static.example.org/placeholder.jpg"


class StubImageProber(ImageProberInterface):
    """Answers probes from a fixed table and records every probed URL"""

    def __init__(self, sizes: Dict[str, ImageSize] = None):
        self.sizes = sizes or {}
        self.calls: List[str] = []

    def probe(self, url: str) -> Optional[ImageSize]:
        self.calls.append(url)
        return self.sizes.get(url)


@pytest.fixture
def prober():
    return StubImageProber()


@pytest.fixture
def extractor(prober):
    return OpenGraphExtractor(prober, min_image_width=300, placeholder_image_url=PLACEHOLDER)
