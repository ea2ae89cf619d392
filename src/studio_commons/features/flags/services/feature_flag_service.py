"""Feature flag service for tenant feature orchestration.

Resolves tenant features from the catalog, plans and overrides, manages
overrides, and answers permission checks through the feature gate.
"""

from typing import FrozenSet, Iterable, List, Optional
import logging

from ....core.exceptions import FeatureDependencyError, FeatureNotFoundError
from ...permissions.services import FeatureGate
from ..entities import (
    FeatureAssignment, FeatureFlag, Plan, ResolvedFeature,
    FeatureFlagRepository, PlanRepository, FeatureAssignmentRepository, TenantPlanResolver,
)
from .feature_resolver import enabled_feature_keys, is_feature_enabled, resolve_features


logger = logging.getLogger(__name__)


class FeatureFlagService:
    """Service orchestrating feature flag resolution and overrides."""
    
    def __init__(
        self,
        feature_repo: FeatureFlagRepository,
        plan_repo: PlanRepository,
        assignment_repo: FeatureAssignmentRepository,
        tenant_plans: TenantPlanResolver,
        gate: Optional[FeatureGate] = None
    ):
        self.feature_repo = feature_repo
        self.plan_repo = plan_repo
        self.assignment_repo = assignment_repo
        self.tenant_plans = tenant_plans
        self.gate = gate or FeatureGate()
    
    async def _get_tenant_plan(self, tenant_id: str) -> Optional[Plan]:
        plan_key = await self.tenant_plans.get_plan_key(tenant_id)
        if not plan_key:
            return None
        plan = await self.plan_repo.get_by_key(plan_key)
        if plan is None:
            logger.warning(f"Tenant {tenant_id} references unknown plan: {plan_key}")
        return plan
    
    async def _require_feature(self, feature_key: str) -> FeatureFlag:
        feature = await self.feature_repo.get_by_key(feature_key)
        if not feature:
            raise FeatureNotFoundError(
                f'Feature "{feature_key}" not found',
                details={"feature_key": feature_key},
            )
        return feature
    
    # Resolution
    
    async def get_features_for_tenant(self, tenant_id: str) -> List[ResolvedFeature]:
        """Get all features with their resolved states for a tenant."""
        catalog = await self.feature_repo.list_all()
        overrides = await self.assignment_repo.list_for_tenant(tenant_id)
        plan = await self._get_tenant_plan(tenant_id)
        return resolve_features(catalog, plan, overrides)
    
    async def get_enabled_features(self, tenant_id: str) -> FrozenSet[str]:
        """Get the keys of all features enabled for a tenant."""
        return enabled_feature_keys(await self.get_features_for_tenant(tenant_id))
    
    async def is_feature_enabled(self, tenant_id: str, feature_key: str) -> bool:
        """Check if a feature is enabled for a tenant.
        
        Resolution order: Tenant Override -> Plan -> Global Default
        """
        override = await self.assignment_repo.get(tenant_id, feature_key)
        overrides = [override] if override else []
        plan = await self._get_tenant_plan(tenant_id)
        feature = await self.feature_repo.get_by_key(feature_key)
        catalog = [feature] if feature else []
        return is_feature_enabled(feature_key, catalog, plan, overrides)
    
    # Permission gating
    
    async def check_permission(self, tenant_id: str, permission_key: str) -> bool:
        """Check a permission against the tenant's enabled features."""
        enabled = await self.get_enabled_features(tenant_id)
        return self.gate.is_permission_allowed(permission_key, enabled)
    
    async def filter_permissions(self, tenant_id: str, permission_keys: Iterable[str]) -> List[str]:
        """Drop permissions gated by features the tenant has not enabled."""
        enabled = await self.get_enabled_features(tenant_id)
        return self.gate.filter_permissions(permission_keys, enabled)
    
    # Overrides
    
    async def set_feature_for_tenant(
        self,
        tenant_id: str,
        feature_key: str,
        enabled: bool,
        enabled_by: str,
        notes: Optional[str] = None
    ) -> FeatureAssignment:
        """Set a feature override for a tenant."""
        feature = await self._require_feature(feature_key)
        
        if enabled:
            for dependency_key in feature.dependencies:
                if not await self.is_feature_enabled(tenant_id, dependency_key):
                    raise FeatureDependencyError(
                        f'Cannot enable "{feature_key}": dependency "{dependency_key}" is not enabled',
                        details={"feature_key": feature_key, "dependency": dependency_key},
                    )
        
        assignment = await self.assignment_repo.get(tenant_id, feature_key)
        if assignment:
            assignment.enabled = enabled
            assignment.enabled_by = enabled_by
            assignment.notes = notes or assignment.notes
        else:
            assignment = FeatureAssignment(
                tenant_id=tenant_id,
                feature_key=feature_key,
                enabled=enabled,
                enabled_by=enabled_by,
                notes=notes or None,
            )
        
        saved = await self.assignment_repo.save(assignment)
        logger.info(
            f"Feature {feature_key} {'enabled' if enabled else 'disabled'} "
            f"for tenant {tenant_id} by {enabled_by}"
        )
        return saved
    
    async def remove_feature_override(self, tenant_id: str, feature_key: str) -> None:
        """Remove a tenant override, reverting to the plan or global default."""
        await self.assignment_repo.delete(tenant_id, feature_key)
        logger.info(f"Removed override of {feature_key} for tenant {tenant_id}")
    
    # Catalog
    
    async def toggle_feature_globally(self, feature_key: str, enabled: bool) -> FeatureFlag:
        """Toggle a feature's default (affects all tenants without overrides)."""
        feature = await self._require_feature(feature_key)
        feature.default_enabled = enabled
        return await self.feature_repo.save(feature)
    
    async def create_feature_flag(
        self,
        key: str,
        name: str,
        category: str,
        description: Optional[str] = None,
        default_enabled: bool = True,
        dependencies: Optional[Iterable[str]] = None,
        is_experimental: bool = False
    ) -> FeatureFlag:
        """Add a feature flag to the catalog."""
        feature = FeatureFlag(
            key=key,
            name=name,
            category=category,
            description=description or None,
            default_enabled=default_enabled,
            dependencies=tuple(dependencies or ()),
            is_experimental=is_experimental,
        )
        saved = await self.feature_repo.save(feature)
        logger.info(f"Created feature flag {key} in category {category}")
        return saved
    
    async def get_all_feature_flags(self) -> List[FeatureFlag]:
        """All feature flags ordered by category then key."""
        features = await self.feature_repo.list_all()
        return sorted(features, key=lambda f: (f.category, f.key))
    
    async def get_features_by_category(self, category: str) -> List[FeatureFlag]:
        """Feature flags of one category ordered by key."""
        features = await self.feature_repo.list_all(category=category)
        return sorted(features, key=lambda f: f.key)
