"""FastAPI dependencies for feature gating."""

import logging
from typing import Awaitable, Callable, FrozenSet, Iterable, Optional

from fastapi import HTTPException, Request, status

from .services import FeatureGate

logger = logging.getLogger(__name__)

EnabledFeaturesProvider = Callable[[Request], Awaitable[Iterable[str]]]


class FeatureGateDependencyError(HTTPException):
    """HTTP error raised when a feature gate blocks a request."""
    
    def __init__(self, detail: str, status_code: int = status.HTTP_403_FORBIDDEN):
        super().__init__(status_code=status_code, detail=detail)


class FeatureGateDependencies:
    """FastAPI feature gate dependencies factory."""
    
    def __init__(self, gate: FeatureGate, enabled_features_provider: EnabledFeaturesProvider):
        self.gate = gate
        self.enabled_features_provider = enabled_features_provider
    
    async def get_enabled_features(self, request: Request) -> FrozenSet[str]:
        """Resolve the calling tenant's enabled features."""
        return frozenset(await self.enabled_features_provider(request))
    
    def require_permission_feature(self, permission_key: str):
        """Require the features gating a permission to be enabled."""
        
        async def dependency(request: Request) -> FrozenSet[str]:
            enabled = await self.get_enabled_features(request)
            missing = self.gate.missing_features(permission_key, enabled)
            if missing:
                logger.warning(
                    f"Permission {permission_key} blocked by disabled features: {list(missing)}"
                )
                raise FeatureGateDependencyError(
                    f"Feature required for '{permission_key}': {', '.join(missing)}"
                )
            return enabled
        
        return dependency
    
    def require_feature(self, feature_key: str):
        """Require a specific feature to be enabled."""
        
        async def dependency(request: Request) -> FrozenSet[str]:
            enabled = await self.get_enabled_features(request)
            if feature_key not in enabled:
                logger.warning(f"Feature {feature_key} is disabled for this tenant")
                raise FeatureGateDependencyError(f"Feature required: {feature_key}")
            return enabled
        
        return dependency


# Global instance for convenience dependencies
_feature_gate_dependencies: Optional[FeatureGateDependencies] = None


def init_feature_gate_dependencies(
    gate: FeatureGate,
    enabled_features_provider: EnabledFeaturesProvider,
) -> FeatureGateDependencies:
    """Initialize global feature gate dependencies."""
    global _feature_gate_dependencies
    _feature_gate_dependencies = FeatureGateDependencies(
        gate=gate,
        enabled_features_provider=enabled_features_provider,
    )
    return _feature_gate_dependencies


def get_feature_gate_dependencies() -> FeatureGateDependencies:
    """Get global feature gate dependencies."""
    if not _feature_gate_dependencies:
        raise RuntimeError(
            "Feature gate dependencies not initialized. Call init_feature_gate_dependencies() first."
        )
    return _feature_gate_dependencies


def require_permission_feature(permission_key: str):
    """Require the features gating a permission (global dependency)."""
    return get_feature_gate_dependencies().require_permission_feature(permission_key)


def require_feature(feature_key: str):
    """Require a specific feature (global dependency)."""
    return get_feature_gate_dependencies().require_feature(feature_key)
