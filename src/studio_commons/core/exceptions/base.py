"""Base exceptions for studio-commons.

All exceptions inherit from StudioCommonsError and carry an error code,
details and an HTTP status code mapping for API responses.
"""

from typing import Any, Dict, Optional


class StudioCommonsError(Exception):
    """Base exception for all studio-commons errors.
    
    Carries structured error information so that services can turn it into
    a consistent API error envelope.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.
    
    Args:
        exception: The exception instance
        
    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: StudioCommonsError) -> Dict[str, Any]:
    """Create standardized error response from exception.
    
    Args:
        exception: The studio-commons exception
        
    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
