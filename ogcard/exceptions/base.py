from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(str, Enum):
    # General errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Open Graph errors
    INVALID_URL = "INVALID_URL"
    FETCH_FAILED = "FETCH_FAILED"
    EMPTY_INPUT = "EMPTY_INPUT"
    NO_METADATA_FOUND = "NO_METADATA_FOUND"


class AppException(Exception):
    """Base exception class for the application"""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response"""
        result = {
            "code": self.code.value if isinstance(self.code, ErrorCode) else self.code,
            "message": self.message
        }
        if self.details:
            result["details"] = self.details
        return result
