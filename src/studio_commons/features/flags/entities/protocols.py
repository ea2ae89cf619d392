"""Protocol interfaces for feature flag data access.

Storage lives in the services that use this library; these contracts keep
the feature flag service independent of it.
"""

from abc import abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from .feature_flag import FeatureAssignment, FeatureFlag, Plan


@runtime_checkable
class FeatureFlagRepository(Protocol):
    """Protocol for the feature catalog."""
    
    @abstractmethod
    async def get_by_key(self, feature_key: str) -> Optional[FeatureFlag]:
        """Get a feature flag by key."""
        ...
    
    @abstractmethod
    async def list_all(self, category: Optional[str] = None) -> List[FeatureFlag]:
        """List feature flags, optionally limited to one category."""
        ...
    
    @abstractmethod
    async def save(self, feature: FeatureFlag) -> FeatureFlag:
        """Create or update a feature flag."""
        ...


@runtime_checkable
class PlanRepository(Protocol):
    """Protocol for subscription plan lookup."""
    
    @abstractmethod
    async def get_by_key(self, plan_key: str) -> Optional[Plan]:
        """Get a plan by key."""
        ...


@runtime_checkable
class FeatureAssignmentRepository(Protocol):
    """Protocol for tenant feature overrides."""
    
    @abstractmethod
    async def get(self, tenant_id: str, feature_key: str) -> Optional[FeatureAssignment]:
        """Get a tenant's override for one feature."""
        ...
    
    @abstractmethod
    async def list_for_tenant(self, tenant_id: str) -> List[FeatureAssignment]:
        """List all overrides for a tenant."""
        ...
    
    @abstractmethod
    async def save(self, assignment: FeatureAssignment) -> FeatureAssignment:
        """Create or update an override."""
        ...
    
    @abstractmethod
    async def delete(self, tenant_id: str, feature_key: str) -> None:
        """Remove an override."""
        ...


@runtime_checkable
class TenantPlanResolver(Protocol):
    """Protocol for finding the plan key a tenant subscribes to."""
    
    @abstractmethod
    async def get_plan_key(self, tenant_id: str) -> Optional[str]:
        """Get the tenant's plan key, or None for unknown tenants."""
        ...
