"""Feature flag services."""

from .feature_resolver import resolve_features, enabled_feature_keys, is_feature_enabled
from .portal_access import AccessGrant, ensure_portal_access, build_access_grant
from .feature_flag_service import FeatureFlagService

__all__ = [
    "resolve_features",
    "enabled_feature_keys",
    "is_feature_enabled",
    "AccessGrant",
    "ensure_portal_access",
    "build_access_grant",
    "FeatureFlagService",
]
