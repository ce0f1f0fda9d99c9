"""Custom exception hierarchy for the service layer"""

class ServiceError(Exception):
    """Base exception for all service-related errors"""
    def __init__(self, message: str, error_code: str = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Raised when input validation fails"""
    def __init__(self, message: str = "Invalid input provided"):
        super().__init__(message, "VALIDATION_ERROR")


class URLValidationError(ValidationError):
    """Raised when URL validation fails"""
    def __init__(self, message: str = "Invalid or unsafe URL provided"):
        super().__init__(message)


class ParseError(ServiceError):
    """Raised when content parsing fails"""
    def __init__(self, message: str = "Error parsing content", error_code: str = "PARSE_ERROR"):
        super().__init__(message, error_code)


class EmptyInputError(ParseError):
    """Raised when the HTML handed to the extractor is empty"""
    def __init__(self, message: str = "HTML input is empty"):
        super().__init__(message, "EMPTY_INPUT")


class NoMetadataFoundError(ParseError):
    """Raised when a document yields no usable metadata"""
    def __init__(self, message: str = "No metadata found in document"):
        super().__init__(message, "NO_METADATA_FOUND")
