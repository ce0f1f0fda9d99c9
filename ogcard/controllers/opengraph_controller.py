from typing import Any, Dict, Optional

from ogcard.config.logging_config import get_logger
from ogcard.core.models import FetchFailure
from ogcard.exceptions.opengraph import (
    EmptyInputException,
    FetchFailedException,
    InvalidURLException,
    NoMetadataFoundException,
)
from ogcard.services.exceptions import (
    EmptyInputError,
    NoMetadataFoundError,
    URLValidationError,
)
from ogcard.services.metadata_service import MetadataService

logger = get_logger(__name__)


class OpenGraphController:

    def __init__(self, service: MetadataService):
        self.service = service

# --- FETCH ---

    async def get_metadata(self, url: str, accept_language: Optional[str] = None,
                           user_agent: Optional[str] = None) -> Dict[str, Any]:
        logger.info(f"Received request to fetch Open Graph metadata: {url}")
        try:
            result = await self.service.get_metadata(url, accept_language, user_agent)
        except URLValidationError as e:
            raise InvalidURLException(url, e.message)
        except EmptyInputError as e:
            raise EmptyInputException(e.message)
        except NoMetadataFoundError as e:
            raise NoMetadataFoundException(url, e.message)

        if isinstance(result, FetchFailure):
            raise FetchFailedException(result.to_dict())

        logger.info(f"Open Graph metadata fetched successfully for: {url}")
        return result.to_dict()

# --- PARSE ---

    def parse_html(self, html: str, url: Optional[str] = None,
                   accept_language: Optional[str] = None) -> Dict[str, Any]:
        logger.info(f"Received request to parse HTML for: {url}")
        try:
            graph = self.service.parse_html(html, url, accept_language)
        except EmptyInputError as e:
            raise EmptyInputException(e.message)
        except NoMetadataFoundError as e:
            raise NoMetadataFoundException(url, e.message)
        return graph.to_dict()
