"""Permission gating services."""

from .feature_gate import (
    FeatureGate,
    is_permission_allowed,
    restricting_features,
    missing_features,
    filter_permissions,
    ensure_permission_allowed,
)

__all__ = [
    "FeatureGate",
    "is_permission_allowed",
    "restricting_features",
    "missing_features",
    "filter_permissions",
    "ensure_permission_allowed",
]
