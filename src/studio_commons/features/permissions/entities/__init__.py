"""Permission restriction entities."""

from .restriction import PermissionPattern, FeatureRestriction, FeatureRestrictionMap
from .defaults import FEATURE_PERMISSION_MAP, DEFAULT_RESTRICTIONS

__all__ = [
    "PermissionPattern",
    "FeatureRestriction",
    "FeatureRestrictionMap",
    "FEATURE_PERMISSION_MAP",
    "DEFAULT_RESTRICTIONS",
]
