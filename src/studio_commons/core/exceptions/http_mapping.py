"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import StudioCommonsError
from .domain import *


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    BusinessLogicError: 400,
    FeatureDependencyError: 400,
    
    # 403 Forbidden
    AuthorizationError: 403,
    FeatureDisabledError: 403,
    PortalAccessDeniedError: 403,
    
    # 404 Not Found
    ResourceNotFoundError: 404,
    FeatureNotFoundError: 404,
    
    # 500 Internal Server Error
    ConfigurationError: 500,
    RestrictionConfigurationError: 500,
    
    # Default for StudioCommonsError
    StudioCommonsError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception, walking its class hierarchy.
    
    Subclasses without their own entry inherit the status of the nearest
    mapped base class. Unknown exceptions map to 500.
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
