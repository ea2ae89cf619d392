"""Pytest configuration and fixtures for studio-commons tests."""

import json

import pytest
from unittest.mock import AsyncMock

from studio_commons.config.settings import get_gate_settings
from studio_commons.features.flags.entities import FeatureAssignment, FeatureFlag, Plan
from studio_commons.features.permissions.entities import FeatureRestrictionMap
from studio_commons.features.permissions.repositories import get_restriction_map


@pytest.fixture(autouse=True)
def isolated_gate_settings(monkeypatch):
    """Every test starts from the built-in restriction map."""
    monkeypatch.delenv("STUDIO_FEATURE_RESTRICTIONS_FILE", raising=False)
    get_gate_settings.cache_clear()
    get_restriction_map.cache_clear()
    yield
    get_gate_settings.cache_clear()
    get_restriction_map.cache_clear()


@pytest.fixture
def coach_restrictions_env(monkeypatch, tmp_path):
    """Deployed restriction file that gates coach creation behind core.coaches."""
    path = tmp_path / "restrictions.json"
    path.write_text(json.dumps({"core.coaches": ["coach.create"]}))
    monkeypatch.setenv("STUDIO_FEATURE_RESTRICTIONS_FILE", str(path))
    get_gate_settings.cache_clear()
    get_restriction_map.cache_clear()
    return path


@pytest.fixture
def sample_catalog():
    """Feature catalog covering plan, override and default resolution."""
    return [
        FeatureFlag(key="core.rooms", name="Rooms", category="core", default_enabled=False),
        FeatureFlag(key="core.multi_studio", name="Multiple Studios", category="core", default_enabled=False),
        FeatureFlag(key="client.portal", name="Client Portal", category="client", default_enabled=True),
        FeatureFlag(key="coach.portal", name="Coach Portal", category="coach", default_enabled=False),
        FeatureFlag(key="finance.invoicing", name="Invoicing", category="finance", default_enabled=False),
        FeatureFlag(
            key="finance.reports",
            name="Financial Reports",
            category="finance",
            default_enabled=False,
            dependencies=("finance.invoicing",),
        ),
    ]


@pytest.fixture
def starter_plan():
    """Plan including rooms and invoicing."""
    return Plan(key="starter", name="Starter", features={"core.rooms", "finance.invoicing"})


@pytest.fixture
def overlapping_restrictions():
    """Restriction map where one permission is gated by two features."""
    return FeatureRestrictionMap.from_mapping({
        "feature.a": ["shared.*", "only.a"],
        "feature.b": ["shared.report", "only.b.*"],
    })


@pytest.fixture
def mock_feature_repository(sample_catalog):
    """Mock feature catalog repository backed by the sample catalog."""
    by_key = {f.key: f for f in sample_catalog}
    repo = AsyncMock()
    repo.get_by_key.side_effect = lambda key: by_key.get(key)
    repo.list_all.side_effect = lambda category=None: [
        f for f in sample_catalog if category is None or f.category == category
    ]
    repo.save.side_effect = lambda feature: feature
    return repo


@pytest.fixture
def mock_plan_repository(starter_plan):
    """Mock plan repository knowing only the starter plan."""
    repo = AsyncMock()
    repo.get_by_key.side_effect = lambda key: starter_plan if key == starter_plan.key else None
    return repo


@pytest.fixture
def assignment_store():
    """In-memory override storage shared by the assignment repository mock."""
    return {}


@pytest.fixture
def mock_assignment_repository(assignment_store):
    """Mock override repository storing assignments in a dict."""
    repo = AsyncMock()
    
    def save(assignment: FeatureAssignment):
        assignment_store[(assignment.tenant_id, assignment.feature_key)] = assignment
        return assignment
    
    def delete(tenant_id, feature_key):
        assignment_store.pop((tenant_id, feature_key), None)
    
    repo.get.side_effect = lambda tenant_id, key: assignment_store.get((tenant_id, key))
    repo.list_for_tenant.side_effect = lambda tenant_id: [
        a for (t, _), a in assignment_store.items() if t == tenant_id
    ]
    repo.save.side_effect = save
    repo.delete.side_effect = delete
    return repo


@pytest.fixture
def mock_tenant_plans():
    """Mock tenant plan lookup: tenant-1 is on starter, others have no plan."""
    resolver = AsyncMock()
    resolver.get_plan_key.side_effect = lambda tenant_id: "starter" if tenant_id == "tenant-1" else None
    return resolver
