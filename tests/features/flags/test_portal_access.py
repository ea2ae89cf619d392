"""Tests for portal access checks and access grants."""

import pytest

from studio_commons.core.exceptions import PortalAccessDeniedError, get_http_status_code
from studio_commons.features.flags import AccessGrant, build_access_grant, ensure_portal_access
from studio_commons.features.permissions import FeatureGate


class TestEnsurePortalAccess:
    """Test portal gating by role."""
    
    def test_client_needs_client_portal(self):
        with pytest.raises(PortalAccessDeniedError, match="Client portal access is disabled"):
            ensure_portal_access("client", {"coach.portal"})
        ensure_portal_access("client", {"client.portal"})
    
    def test_coach_needs_coach_portal(self):
        with pytest.raises(PortalAccessDeniedError) as exc_info:
            ensure_portal_access("coach", set())
        
        assert exc_info.value.details == {"role": "coach", "feature": "coach.portal"}
        assert get_http_status_code(exc_info.value) == 403
    
    def test_other_roles_are_not_gated(self):
        ensure_portal_access("admin", set())
        ensure_portal_access("tenant_owner", set())
        ensure_portal_access(None, set())


class TestBuildAccessGrant:
    """Test login grants."""
    
    def test_filters_permissions_by_features(self):
        grant = build_access_grant(
            "admin",
            ["client.read", "studio.create", "room.read", "finance.pos.sell"],
            ["finance.pos", "core.rooms"],
        )
        
        assert grant == AccessGrant(
            permissions=("client.read", "room.read", "finance.pos.sell"),
            features=("core.rooms", "finance.pos"),
        )
        assert grant.to_dict()["permissions"] == ["client.read", "room.read", "finance.pos.sell"]
    
    def test_portal_checked(self):
        with pytest.raises(PortalAccessDeniedError):
            build_access_grant("client", ["client.read"], [])
    
    def test_custom_gate(self):
        gate = FeatureGate({"core.coaches": ["coach.create"]})
        grant = build_access_grant("coach", ["coach.create", "coach.read"], ["coach.portal"], gate=gate)
        assert grant.permissions == ("coach.read",)
    
    def test_default_gate_uses_restriction_file(self, coach_restrictions_env):
        grant = build_access_grant("admin", ["coach.create", "client.read"], set())
        assert grant.permissions == ("client.read",)
        
        grant = build_access_grant("admin", ["coach.create"], {"core.coaches"})
        assert grant.permissions == ("coach.create",)
