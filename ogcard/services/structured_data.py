"""JSON-LD scanning used as an image fallback source"""

import json
import logging
from enum import Enum
from typing import Any, Iterable, Optional


logger = logging.getLogger(__name__)


class JSONBlockError(str, Enum):
    """Why a JSON-LD block could not be decoded"""
    DEPTH_EXCEEDED = "Maximum stack depth exceeded"
    STATE_MISMATCH = "Underflow or the modes mismatch"
    CONTROL_CHAR = "Unexpected control character found"
    SYNTAX_ERROR = "Syntax error, malformed JSON"
    MALFORMED_UTF8 = "Malformed UTF-8 characters, possibly incorrectly encoded"


def classify_json_error(exc: Exception) -> JSONBlockError:
    """Map a decoding exception onto a JSONBlockError"""
    if isinstance(exc, RecursionError):
        return JSONBlockError.DEPTH_EXCEEDED
    if isinstance(exc, UnicodeError):
        return JSONBlockError.MALFORMED_UTF8
    if isinstance(exc, json.JSONDecodeError):
        if exc.msg.startswith("Invalid control character"):
            return JSONBlockError.CONTROL_CHAR
        if exc.msg.startswith("Extra data"):
            return JSONBlockError.STATE_MISMATCH
    return JSONBlockError.SYNTAX_ERROR


def normalize_image_value(image: Any) -> Optional[str]:
    """
    Reduce a JSON-LD ``image`` value to a single URL string.

    Handles plain strings, lists of images and ImageObject dicts.
    """
    if isinstance(image, list):
        return normalize_image_value(image[0]) if image else None
    if isinstance(image, dict):
        url = image.get("url")
        return normalize_image_value(url if url is not None else image.get("contentUrl"))
    if isinstance(image, str):
        image = image.strip()
        return image or None
    return None


class StructuredDataExtractor:
    """Finds the first usable image declared in JSON-LD blocks"""

    def find_image(self, blocks: Iterable[str]) -> Optional[str]:
        """
        Scan JSON-LD blocks in order and return the first declared image.

        Malformed blocks are logged and skipped. Scanning stops at the first
        decoded object carrying an ``image`` field.

        Args:
            blocks: Raw script texts in document order

        Returns:
            The image URL, or None if no block declares one
        """
        for index, raw in enumerate(blocks):
            text = raw.strip()
            try:
                text.encode("utf-8")
                data = json.loads(text)
            except (ValueError, RecursionError, UnicodeError) as e:
                error = classify_json_error(e)
                logger.debug(f"Skipping JSON-LD block {index}: {error.name} ({error.value})")
                continue

            if isinstance(data, dict) and "image" in data:
                image = normalize_image_value(data["image"])
                logger.debug(f"JSON-LD block {index} supplied image candidate: {image}")
                return image
        return None
