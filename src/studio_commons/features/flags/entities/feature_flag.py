"""Feature flag domain entities.

A feature flag is a purchasable capability. Plans include flags, tenants may
override them, and the catalog default applies to everything else.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import FrozenSet, Optional, Tuple

from ....config.constants import FeatureSource


@dataclass
class FeatureFlag:
    """Catalog entry for a toggleable product feature."""
    
    key: str
    name: str
    category: str
    description: Optional[str] = None
    default_enabled: bool = True
    dependencies: Tuple[str, ...] = ()
    is_experimental: bool = False
    
    def __post_init__(self):
        if not self.key:
            raise ValueError("Feature key cannot be empty")
        self.dependencies = tuple(self.dependencies or ())
        if self.key in self.dependencies:
            raise ValueError(f"Feature '{self.key}' cannot depend on itself")


@dataclass(frozen=True)
class Plan:
    """Subscription plan and the features it includes."""
    
    key: str
    name: str
    features: FrozenSet[str] = frozenset()
    
    def __post_init__(self):
        if not isinstance(self.features, frozenset):
            object.__setattr__(self, "features", frozenset(self.features or ()))
    
    def includes(self, feature_key: str) -> bool:
        return feature_key in self.features


@dataclass
class FeatureAssignment:
    """Tenant-specific override of a feature's state."""
    
    tenant_id: str
    feature_key: str
    enabled: bool
    enabled_by: Optional[str] = None
    notes: Optional[str] = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class ResolvedFeature:
    """A feature's effective state for one tenant and where it came from."""
    
    feature: FeatureFlag
    enabled: bool
    source: FeatureSource
    
    @property
    def key(self) -> str:
        return self.feature.key
    
    def to_dict(self) -> dict:
        return {
            "key": self.feature.key,
            "name": self.feature.name,
            "category": self.feature.category,
            "enabled": self.enabled,
            "source": self.source.value,
        }
