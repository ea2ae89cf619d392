"""Exceptions module for studio-commons.

Complete exception hierarchy for studio-commons with HTTP status mapping.
"""

from .base import (
    StudioCommonsError,
    get_http_status_code,
    create_error_response,
)

from .domain import (
    # Configuration Errors
    ConfigurationError,
    RestrictionConfigurationError,
    
    # Authorization Errors
    AuthorizationError,
    FeatureDisabledError,
    PortalAccessDeniedError,
    
    # Business Logic Errors
    BusinessLogicError,
    ResourceNotFoundError,
    FeatureNotFoundError,
    FeatureDependencyError,
)

from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    "StudioCommonsError",
    "get_http_status_code",
    "create_error_response",
    "HTTP_STATUS_MAP",
    
    "ConfigurationError",
    "RestrictionConfigurationError",
    
    "AuthorizationError",
    "FeatureDisabledError",
    "PortalAccessDeniedError",
    
    "BusinessLogicError",
    "ResourceNotFoundError",
    "FeatureNotFoundError",
    "FeatureDependencyError",
]
