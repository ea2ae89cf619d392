"""Tests for the feature-permission gate."""

import pytest

from studio_commons.core.exceptions import (
    FeatureDisabledError,
    RestrictionConfigurationError,
    get_http_status_code,
)
from studio_commons.features.permissions import (
    DEFAULT_RESTRICTIONS,
    FeatureGate,
    ensure_permission_allowed,
    filter_permissions,
    is_permission_allowed,
    missing_features,
    restricting_features,
)


class TestIsPermissionAllowed:
    """Test the gate against the built-in restriction map."""
    
    def test_unlisted_permission_is_allowed(self):
        """Core permissions are allowed without any feature."""
        assert is_permission_allowed("coach.create", set()) is True
        assert is_permission_allowed("client.read", set()) is True
        assert is_permission_allowed("client.read", {"finance.pos"}) is True
    
    def test_wildcard_feature_required(self):
        """studio.* permissions need core.multi_studio."""
        assert is_permission_allowed("studio.create", set()) is False
        assert is_permission_allowed("studio.create", {"core.multi_studio"}) is True
    
    def test_wrong_feature_does_not_unlock(self):
        """finance.invoice.* needs invoicing, not reports."""
        assert is_permission_allowed("finance.invoice.create", {"finance.reports"}) is False
        assert is_permission_allowed("finance.invoice.create", {"finance.invoicing"}) is True
    
    def test_exact_pattern(self):
        assert is_permission_allowed("coach.performance.view", set()) is False
        assert is_permission_allowed("coach.performance.view", {"coach.analytics"}) is True
        # Exact patterns do not act as prefixes
        assert is_permission_allowed("coach.performance.view.all", set()) is True
    
    def test_wildcard_prefix_keeps_the_dot(self):
        """room.* compares against 'room.' so 'roomX' is not gated."""
        assert is_permission_allowed("room.create", set()) is False
        assert is_permission_allowed("room.xyz", set()) is False
        assert is_permission_allowed("room.", set()) is False
        assert is_permission_allowed("roomX", set()) is True
        assert is_permission_allowed("room", set()) is True
    
    def test_empty_permission_key_is_allowed(self):
        assert is_permission_allowed("", set()) is True
    
    def test_empty_features_deny_every_gated_permission(self):
        for feature_key, patterns in DEFAULT_RESTRICTIONS.items():
            for pattern in patterns:
                key = pattern.prefix + "read" if pattern.is_wildcard else pattern.value
                assert is_permission_allowed(key, set()) is False, key
                assert is_permission_allowed(key, {feature_key}) is True, key
    
    def test_accepts_any_iterable_of_features(self):
        assert is_permission_allowed("room.read", ["core.rooms"]) is True
        assert is_permission_allowed("room.read", frozenset({"core.rooms"})) is True
        assert is_permission_allowed("room.read", None) is False
        assert is_permission_allowed("room.read", "core.rooms") is True
    
    def test_repeated_calls_are_stable(self):
        enabled = {"finance.pos"}
        results = {is_permission_allowed("finance.pos.sell", enabled) for _ in range(5)}
        assert results == {True}
        assert enabled == {"finance.pos"}


class TestCustomRestrictions:
    """Test the gate with explicit restriction maps."""
    
    def test_conjunction_across_features(self, overlapping_restrictions):
        """A permission gated by two features needs both."""
        key = "shared.report"
        assert is_permission_allowed(key, set(), overlapping_restrictions) is False
        assert is_permission_allowed(key, {"feature.a"}, overlapping_restrictions) is False
        assert is_permission_allowed(key, {"feature.b"}, overlapping_restrictions) is False
        assert is_permission_allowed(key, {"feature.a", "feature.b"}, overlapping_restrictions) is True
    
    def test_plain_dict_map(self):
        restrictions = {"core.rooms": ["room.*"]}
        assert is_permission_allowed("room.read", set(), restrictions) is False
        assert is_permission_allowed("studio.read", set(), restrictions) is True
    
    def test_star_without_dot_is_rejected(self):
        """Only a trailing '.*' may carry a wildcard."""
        with pytest.raises(RestrictionConfigurationError):
            is_permission_allowed("roomx", set(), {"x": ["room*"]})
    
    def test_empty_map_allows_everything(self):
        assert is_permission_allowed("studio.create", set(), {}) is True


class TestGateHelpers:
    """Test the helper operations built on the gate."""
    
    def test_restricting_features_in_map_order(self, overlapping_restrictions):
        assert restricting_features("shared.report", overlapping_restrictions) == ("feature.a", "feature.b")
        assert restricting_features("shared.other", overlapping_restrictions) == ("feature.a",)
        assert restricting_features("unrelated", overlapping_restrictions) == ()
    
    def test_missing_features(self, overlapping_restrictions):
        assert missing_features("shared.report", {"feature.a"}, overlapping_restrictions) == ("feature.b",)
        assert missing_features("shared.report", {"feature.a", "feature.b"}, overlapping_restrictions) == ()
    
    def test_filter_permissions_preserves_order(self):
        permissions = ["room.read", "client.read", "studio.create", "finance.pos.sell", "coach.list"]
        allowed = filter_permissions(permissions, {"finance.pos"})
        assert allowed == ["client.read", "finance.pos.sell", "coach.list"]
    
    def test_ensure_permission_allowed_raises(self):
        with pytest.raises(FeatureDisabledError) as exc_info:
            ensure_permission_allowed("finance.invoice.create", {"finance.reports"})
        
        error = exc_info.value
        assert error.permission_key == "finance.invoice.create"
        assert error.missing_features == ("finance.invoicing",)
        assert error.details["missing_features"] == ["finance.invoicing"]
        assert get_http_status_code(error) == 403
    
    def test_ensure_permission_allowed_passes(self):
        ensure_permission_allowed("finance.invoice.create", {"finance.invoicing"})
        ensure_permission_allowed("client.read", set())


class TestFeatureGate:
    """Test the map-bound gate object."""
    
    def test_defaults_to_built_in_map(self):
        gate = FeatureGate()
        assert gate.restrictions is DEFAULT_RESTRICTIONS
        assert gate.is_permission_allowed("studio.create", set()) is False
    
    def test_bound_map(self, overlapping_restrictions):
        gate = FeatureGate(overlapping_restrictions)
        assert gate.is_permission_allowed("studio.create", set()) is True
        assert gate.is_permission_allowed("only.a", set()) is False
        assert gate.restricting_features("only.b.read") == ("feature.b",)
        assert gate.missing_features("only.a", set()) == ("feature.a",)
        assert gate.filter_permissions(iter(["only.a", "free"]), set()) == ["free"]
        with pytest.raises(FeatureDisabledError):
            gate.ensure_permission_allowed("only.a", set())
    
    def test_default_gate_uses_restriction_file(self, coach_restrictions_env):
        gate = FeatureGate()
        assert list(gate.restrictions) == ["core.coaches"]
        assert gate.is_permission_allowed("coach.create", set()) is False
        assert is_permission_allowed("coach.create", set()) is False
        assert is_permission_allowed("coach.create", {"core.coaches"}) is True
