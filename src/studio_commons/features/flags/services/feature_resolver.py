"""Resolution of a tenant's effective feature states.

Order per feature: tenant override -> plan membership -> catalog default.
"""

from typing import FrozenSet, Iterable, List, Optional

from ....config.constants import FeatureSource
from ..entities import FeatureAssignment, FeatureFlag, Plan, ResolvedFeature


def resolve_features(
    catalog: Iterable[FeatureFlag],
    plan: Optional[Plan],
    overrides: Iterable[FeatureAssignment] = (),
) -> List[ResolvedFeature]:
    """Resolve every catalog feature for one tenant.
    
    Args:
        catalog: All known feature flags
        plan: The tenant's plan, or None when the tenant has no plan
        overrides: The tenant's feature overrides
        
    Returns:
        Resolved features ordered by category then key
    """
    override_map = {o.feature_key: o for o in overrides}
    resolved = []
    
    for feature in sorted(catalog, key=lambda f: (f.category, f.key)):
        override = override_map.get(feature.key)
        if override is not None:
            resolved.append(ResolvedFeature(feature, override.enabled, FeatureSource.OVERRIDE))
        elif plan is not None and plan.includes(feature.key):
            resolved.append(ResolvedFeature(feature, True, FeatureSource.PLAN))
        else:
            resolved.append(ResolvedFeature(feature, feature.default_enabled, FeatureSource.DEFAULT))
    
    return resolved


def enabled_feature_keys(resolved: Iterable[ResolvedFeature]) -> FrozenSet[str]:
    """Keys of the resolved features that are enabled."""
    return frozenset(r.feature.key for r in resolved if r.enabled)


def is_feature_enabled(
    feature_key: str,
    catalog: Iterable[FeatureFlag],
    plan: Optional[Plan],
    overrides: Iterable[FeatureAssignment] = (),
) -> bool:
    """Check a single feature for one tenant.
    
    Unlike resolve_features, overrides and plan membership count even for
    keys missing from the catalog. Unknown keys otherwise resolve disabled.
    """
    for override in overrides:
        if override.feature_key == feature_key:
            return override.enabled
    
    if plan is not None and plan.includes(feature_key):
        return True
    
    for feature in catalog:
        if feature.key == feature_key:
            return feature.default_enabled
    return False
