"""Feature-permission gate.

Decides whether a permission key is usable given the features enabled for a
tenant. A permission gated by several features needs all of them; a
permission no feature gates is always allowed.
"""

import logging
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from ....core.exceptions import FeatureDisabledError
from ..entities import FeatureRestrictionMap
from ..repositories.restriction_loader import get_restriction_map


logger = logging.getLogger(__name__)

RestrictionsLike = Union[FeatureRestrictionMap, Mapping[str, Iterable[str]]]


def _as_restriction_map(restrictions: Optional[RestrictionsLike]) -> FeatureRestrictionMap:
    if restrictions is None:
        return get_restriction_map()
    return FeatureRestrictionMap.from_mapping(restrictions)


def _as_feature_set(enabled_features: Optional[Iterable[str]]) -> frozenset:
    if enabled_features is None:
        return frozenset()
    if isinstance(enabled_features, str):
        return frozenset((enabled_features,))
    if isinstance(enabled_features, frozenset):
        return enabled_features
    return frozenset(enabled_features)


def is_permission_allowed(
    permission_key: str,
    enabled_features: Optional[Iterable[str]],
    restrictions: Optional[RestrictionsLike] = None,
) -> bool:
    """Check if a permission is allowed by the tenant's enabled features.
    
    Walks the restriction map in order and denies as soon as a feature that
    gates the permission is not enabled.
    
    Args:
        permission_key: Permission being checked, e.g. ``studio.create``
        enabled_features: Feature keys enabled for the tenant
        restrictions: Restriction map; the configured map when omitted
        
    Returns:
        False if any gating feature is disabled, True otherwise
    """
    restriction_map = _as_restriction_map(restrictions)
    enabled = _as_feature_set(enabled_features)
    
    for restriction in restriction_map.restrictions():
        if restriction.restricts(permission_key) and restriction.feature_key not in enabled:
            return False
    return True


def restricting_features(
    permission_key: str,
    restrictions: Optional[RestrictionsLike] = None,
) -> Tuple[str, ...]:
    """Feature keys that gate a permission, in map order."""
    restriction_map = _as_restriction_map(restrictions)
    return tuple(
        restriction.feature_key
        for restriction in restriction_map.restrictions()
        if restriction.restricts(permission_key)
    )


def missing_features(
    permission_key: str,
    enabled_features: Optional[Iterable[str]],
    restrictions: Optional[RestrictionsLike] = None,
) -> Tuple[str, ...]:
    """Gating features of a permission that are not enabled."""
    enabled = _as_feature_set(enabled_features)
    return tuple(
        feature_key
        for feature_key in restricting_features(permission_key, restrictions)
        if feature_key not in enabled
    )


def filter_permissions(
    permission_keys: Iterable[str],
    enabled_features: Optional[Iterable[str]],
    restrictions: Optional[RestrictionsLike] = None,
) -> List[str]:
    """Keep only the permissions allowed by the enabled features, in input order."""
    restriction_map = _as_restriction_map(restrictions)
    enabled = _as_feature_set(enabled_features)
    return [
        key for key in permission_keys
        if is_permission_allowed(key, enabled, restriction_map)
    ]


def ensure_permission_allowed(
    permission_key: str,
    enabled_features: Optional[Iterable[str]],
    restrictions: Optional[RestrictionsLike] = None,
) -> None:
    """Raise FeatureDisabledError when a permission is gated by a disabled feature."""
    missing = missing_features(permission_key, enabled_features, restrictions)
    if missing:
        raise FeatureDisabledError(permission_key, missing)


class FeatureGate:
    """Feature-permission gate bound to one restriction map.
    
    Holds no per-call state; one instance can be shared across requests.
    """
    
    def __init__(self, restrictions: Optional[RestrictionsLike] = None):
        self._restrictions = _as_restriction_map(restrictions)
    
    @property
    def restrictions(self) -> FeatureRestrictionMap:
        return self._restrictions
    
    def is_permission_allowed(self, permission_key: str, enabled_features: Optional[Iterable[str]]) -> bool:
        return is_permission_allowed(permission_key, enabled_features, self._restrictions)
    
    def restricting_features(self, permission_key: str) -> Tuple[str, ...]:
        return restricting_features(permission_key, self._restrictions)
    
    def missing_features(self, permission_key: str, enabled_features: Optional[Iterable[str]]) -> Tuple[str, ...]:
        return missing_features(permission_key, enabled_features, self._restrictions)
    
    def filter_permissions(
        self,
        permission_keys: Iterable[str],
        enabled_features: Optional[Iterable[str]],
    ) -> List[str]:
        permission_keys = list(permission_keys)
        allowed = filter_permissions(permission_keys, enabled_features, self._restrictions)
        if len(allowed) != len(permission_keys):
            logger.debug(
                f"Feature gate removed {len(permission_keys) - len(allowed)} of "
                f"{len(permission_keys)} permissions"
            )
        return allowed
    
    def ensure_permission_allowed(self, permission_key: str, enabled_features: Optional[Iterable[str]]) -> None:
        ensure_permission_allowed(permission_key, enabled_features, self._restrictions)
    
    def __repr__(self) -> str:
        return f"FeatureGate({self._restrictions!r})"
