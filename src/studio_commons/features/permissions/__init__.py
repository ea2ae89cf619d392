"""Permissions feature for studio-commons.

Feature-First layout for feature-based permission gating:
- entities/: Permission patterns and the restriction map
- services/: The feature-permission gate
- repositories/: Loading restriction maps from deployed configuration
- dependencies.py: FastAPI route dependencies
"""

from .entities import (
    PermissionPattern,
    FeatureRestriction,
    FeatureRestrictionMap,
    FEATURE_PERMISSION_MAP,
    DEFAULT_RESTRICTIONS,
)

from .services import (
    FeatureGate,
    is_permission_allowed,
    restricting_features,
    missing_features,
    filter_permissions,
    ensure_permission_allowed,
)

from .repositories import load_restriction_map, build_restriction_map, get_restriction_map

__all__ = [
    # Entities
    "PermissionPattern",
    "FeatureRestriction",
    "FeatureRestrictionMap",
    "FEATURE_PERMISSION_MAP",
    "DEFAULT_RESTRICTIONS",
    
    # Gate
    "FeatureGate",
    "is_permission_allowed",
    "restricting_features",
    "missing_features",
    "filter_permissions",
    "ensure_permission_allowed",
    
    # Configuration loading
    "load_restriction_map",
    "build_restriction_map",
    "get_restriction_map",
]
