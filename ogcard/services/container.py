from typing import Dict, Type
from .url_validator import URLValidator, URLValidatorInterface
from .web_fetcher import WebFetcher, WebFetcherInterface
from .image_probe import HttpImageProber, ImageProberInterface
from .metadata_extractor import OpenGraphExtractor, MetadataExtractorInterface
from .metadata_service import MetadataService


class ServiceContainer:
    """Container for managing service dependencies with dependency injection"""

    def __init__(self):
        self._services: Dict[Type, object] = {}
        self._register_services()

    def _register_services(self) -> None:
        """Register all services with proper dependency injection"""
        self._services[URLValidatorInterface] = URLValidator()
        self._services[WebFetcherInterface] = WebFetcher()
        self._services[ImageProberInterface] = HttpImageProber(
            url_validator=self._services[URLValidatorInterface]
        )

        self._services[MetadataExtractorInterface] = OpenGraphExtractor(
            self._services[ImageProberInterface]
        )

        self._services[MetadataService] = MetadataService(
            self._services[URLValidatorInterface],
            self._services[WebFetcherInterface],
            self._services[MetadataExtractorInterface],
        )

    def get_metadata_service(self) -> MetadataService:
        """Get the metadata service instance"""
        return self._services[MetadataService]  # type: ignore
