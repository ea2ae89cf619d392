"""Studio-Commons - shared access-control library for the studio platform.

Feature-based permission gating, tenant feature resolution and portal
access checks for the multi-tenant studio management services.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    FeatureKeys,
    UserRole,
    FeatureSource,
    GateSettings,
    get_gate_settings,
)

from .core.exceptions import (
    StudioCommonsError,
    ConfigurationError,
    RestrictionConfigurationError,
    AuthorizationError,
    FeatureDisabledError,
    PortalAccessDeniedError,
    BusinessLogicError,
    ResourceNotFoundError,
    FeatureNotFoundError,
    FeatureDependencyError,
    get_http_status_code,
    create_error_response,
)

from .features.permissions import (
    PermissionPattern,
    FeatureRestriction,
    FeatureRestrictionMap,
    FEATURE_PERMISSION_MAP,
    DEFAULT_RESTRICTIONS,
    FeatureGate,
    is_permission_allowed,
    restricting_features,
    missing_features,
    filter_permissions,
    ensure_permission_allowed,
    load_restriction_map,
    build_restriction_map,
    get_restriction_map,
)

from .features.flags import (
    FeatureFlag,
    Plan,
    FeatureAssignment,
    ResolvedFeature,
    resolve_features,
    enabled_feature_keys,
    is_feature_enabled,
    AccessGrant,
    ensure_portal_access,
    build_access_grant,
    FeatureFlagService,
)

__all__ = [
    "__version__",
    
    # Configuration
    "FeatureKeys",
    "UserRole",
    "FeatureSource",
    "GateSettings",
    "get_gate_settings",
    
    # Exceptions
    "StudioCommonsError",
    "ConfigurationError",
    "RestrictionConfigurationError",
    "AuthorizationError",
    "FeatureDisabledError",
    "PortalAccessDeniedError",
    "BusinessLogicError",
    "ResourceNotFoundError",
    "FeatureNotFoundError",
    "FeatureDependencyError",
    "get_http_status_code",
    "create_error_response",
    
    # Permission gating
    "PermissionPattern",
    "FeatureRestriction",
    "FeatureRestrictionMap",
    "FEATURE_PERMISSION_MAP",
    "DEFAULT_RESTRICTIONS",
    "FeatureGate",
    "is_permission_allowed",
    "restricting_features",
    "missing_features",
    "filter_permissions",
    "ensure_permission_allowed",
    "load_restriction_map",
    "build_restriction_map",
    "get_restriction_map",
    
    # Feature flags
    "FeatureFlag",
    "Plan",
    "FeatureAssignment",
    "ResolvedFeature",
    "resolve_features",
    "enabled_feature_keys",
    "is_feature_enabled",
    "AccessGrant",
    "ensure_portal_access",
    "build_access_grant",
    "FeatureFlagService",
]
