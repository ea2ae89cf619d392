"""Feature flags feature for studio-commons.

- entities/: Feature flags, plans, tenant overrides and repository protocols
- services/: Tenant feature resolution, portal checks and orchestration
"""

from .entities import (
    FeatureFlag, Plan, FeatureAssignment, ResolvedFeature,
    FeatureFlagRepository, PlanRepository, FeatureAssignmentRepository, TenantPlanResolver,
)

from .services import (
    resolve_features,
    enabled_feature_keys,
    is_feature_enabled,
    AccessGrant,
    ensure_portal_access,
    build_access_grant,
    FeatureFlagService,
)

__all__ = [
    # Entities
    "FeatureFlag",
    "Plan",
    "FeatureAssignment",
    "ResolvedFeature",
    
    # Protocols
    "FeatureFlagRepository",
    "PlanRepository",
    "FeatureAssignmentRepository",
    "TenantPlanResolver",
    
    # Services
    "resolve_features",
    "enabled_feature_keys",
    "is_feature_enabled",
    "AccessGrant",
    "ensure_portal_access",
    "build_access_grant",
    "FeatureFlagService",
]
