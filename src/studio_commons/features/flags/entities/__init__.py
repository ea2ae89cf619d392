"""Feature flag entities and protocols."""

from .feature_flag import FeatureFlag, Plan, FeatureAssignment, ResolvedFeature
from .protocols import (
    FeatureFlagRepository,
    PlanRepository,
    FeatureAssignmentRepository,
    TenantPlanResolver,
)

__all__ = [
    # Domain entities
    "FeatureFlag",
    "Plan",
    "FeatureAssignment",
    "ResolvedFeature",
    
    # Protocols
    "FeatureFlagRepository",
    "PlanRepository",
    "FeatureAssignmentRepository",
    "TenantPlanResolver",
]
