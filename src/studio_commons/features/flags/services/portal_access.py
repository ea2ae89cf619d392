"""Portal login checks and access grants.

Client and coach logins are only possible while the tenant has the matching
portal feature. Admin roles are never portal-gated.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ....config.constants import PORTAL_FEATURES
from ....core.exceptions import PortalAccessDeniedError
from ...permissions.services import FeatureGate


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessGrant:
    """Permissions and features handed to a user at login."""
    
    permissions: Tuple[str, ...]
    features: Tuple[str, ...]
    
    def to_dict(self) -> dict:
        return {"permissions": list(self.permissions), "features": list(self.features)}


def ensure_portal_access(role: Optional[str], enabled_features: Iterable[str]) -> None:
    """Raise PortalAccessDeniedError if the role's portal feature is disabled."""
    portal_feature = PORTAL_FEATURES.get(role) if role else None
    if portal_feature is None:
        return
    
    if portal_feature not in set(enabled_features):
        logger.warning(f"Login blocked: {portal_feature} is disabled for tenant")
        raise PortalAccessDeniedError(
            f"{role.capitalize()} portal access is disabled for this tenant.",
            details={"role": role, "feature": portal_feature},
        )


def build_access_grant(
    role: Optional[str],
    permission_keys: Iterable[str],
    enabled_features: Iterable[str],
    gate: Optional[FeatureGate] = None,
) -> AccessGrant:
    """Filter a user's role permissions by the tenant's features.
    
    A role may grant a permission that the tenant's plan does not cover; such
    permissions are dropped from the grant.
    
    Raises:
        PortalAccessDeniedError: If the role's portal is disabled
    """
    enabled = frozenset(enabled_features)
    gate = gate or FeatureGate()
    
    allowed = gate.filter_permissions(permission_keys, enabled)
    ensure_portal_access(role, enabled)
    
    return AccessGrant(permissions=tuple(allowed), features=tuple(sorted(enabled)))
