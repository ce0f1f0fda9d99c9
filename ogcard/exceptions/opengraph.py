from typing import Any, Dict

from .base import AppException, ErrorCode


class InvalidURLException(AppException):
    def __init__(self, url: str, message: str = "Invalid or unsafe URL provided"):
        super().__init__(
            code=ErrorCode.INVALID_URL,
            message=message,
            status_code=400,
            details={"url": url}
        )


class FetchFailedException(AppException):
    def __init__(self, failure: Dict[str, Any]):
        super().__init__(
            code=ErrorCode.FETCH_FAILED,
            message=failure.get("message") or "URL fetch failed",
            status_code=502,
            details=failure
        )


class EmptyInputException(AppException):
    def __init__(self, message: str = "HTML input is empty"):
        super().__init__(
            code=ErrorCode.EMPTY_INPUT,
            message=message,
            status_code=422
        )


class NoMetadataFoundException(AppException):
    def __init__(self, url: str = None, message: str = "No metadata found in document"):
        super().__init__(
            code=ErrorCode.NO_METADATA_FOUND,
            message=message,
            status_code=404,
            details={"url": url} if url else None
        )
