"""Domain-specific exceptions for studio-commons."""

from .base import StudioCommonsError


# Configuration Errors
class ConfigurationError(StudioCommonsError):
    """Raised when there's a configuration issue."""
    pass


class RestrictionConfigurationError(ConfigurationError):
    """Raised when a feature restriction map is missing or malformed."""
    pass


# Authorization Errors
class AuthorizationError(StudioCommonsError):
    """Base class for authorization-related errors."""
    pass


class FeatureDisabledError(AuthorizationError):
    """Raised when a permission is gated by a feature the tenant has not enabled."""
    
    def __init__(self, permission_key: str, missing_features):
        missing = list(missing_features)
        super().__init__(
            f"Permission '{permission_key}' requires disabled feature(s): {', '.join(missing)}",
            details={"permission": permission_key, "missing_features": missing},
        )
        self.permission_key = permission_key
        self.missing_features = tuple(missing)


class PortalAccessDeniedError(AuthorizationError):
    """Raised when a client or coach portal is disabled for the tenant."""
    pass


# Business Logic Errors
class BusinessLogicError(StudioCommonsError):
    """Raised when business logic validation fails."""
    pass


class ResourceNotFoundError(BusinessLogicError):
    """Raised when required resource is not found."""
    pass


class FeatureNotFoundError(ResourceNotFoundError):
    """Raised when a feature key is not in the feature catalog."""
    pass


class FeatureDependencyError(BusinessLogicError):
    """Raised when enabling a feature whose dependency is disabled."""
    pass
