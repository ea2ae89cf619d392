"""Feature restriction entities for the studio-commons permissions feature.

A restriction map ties each feature key to the permission patterns it gates.
The map is built once at startup and shared read-only by every check.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Tuple

from ....config.constants import WILDCARD_SUFFIX
from ....core.exceptions import RestrictionConfigurationError


@dataclass(frozen=True)
class PermissionPattern:
    """Immutable permission pattern: an exact key or a ``prefix.*`` wildcard."""
    
    value: str
    
    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise RestrictionConfigurationError(
                f"Permission pattern must be a non-empty string, got: {self.value!r}"
            )
    
        # '*' is only valid as a single trailing '.*' after a non-empty prefix
        wildcard_count = self.value.count("*")
        if wildcard_count and (
            wildcard_count > 1
            or not self.value.endswith(WILDCARD_SUFFIX)
            or len(self.value) == len(WILDCARD_SUFFIX)
        ):
            raise RestrictionConfigurationError(
                f"Wildcard '*' is only allowed as a trailing '.*', got: {self.value!r}",
                details={"pattern": self.value},
            )
    
    @property
    def is_wildcard(self) -> bool:
        return self.value.endswith(WILDCARD_SUFFIX)
    
    @property
    def prefix(self) -> str:
        """Literal prefix compared by wildcard patterns (``room.*`` -> ``room.``)."""
        return self.value[:-1] if self.is_wildcard else self.value
    
    def matches(self, permission_key: str) -> bool:
        """Check if a permission key falls under this pattern.
        
        Wildcards use plain prefix comparison, so ``room.*`` matches
        ``room.read`` and the bare ``room.`` but not ``roomX``.
        """
        if self.is_wildcard:
            return permission_key.startswith(self.prefix)
        return permission_key == self.value
    
    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FeatureRestriction:
    """A feature key and the ordered patterns it gates."""
    
    feature_key: str
    patterns: Tuple[PermissionPattern, ...]
    
    def __post_init__(self):
        if not isinstance(self.feature_key, str) or not self.feature_key:
            raise RestrictionConfigurationError(
                f"Feature key must be a non-empty string, got: {self.feature_key!r}"
            )
        if not isinstance(self.patterns, tuple):
            object.__setattr__(self, "patterns", tuple(self.patterns))
    
    def restricts(self, permission_key: str) -> bool:
        """Check if any of this feature's patterns match the permission key."""
        return any(pattern.matches(permission_key) for pattern in self.patterns)


class FeatureRestrictionMap(Mapping[str, Tuple[PermissionPattern, ...]]):
    """Read-only, ordered mapping of feature key -> permission patterns."""
    
    __slots__ = ("_restrictions",)
    
    def __init__(self, restrictions: Iterable[FeatureRestriction] = ()):
        entries = {}
        for restriction in restrictions:
            if restriction.feature_key in entries:
                raise RestrictionConfigurationError(
                    f"Duplicate feature key in restriction map: {restriction.feature_key}",
                    details={"feature_key": restriction.feature_key},
                )
            entries[restriction.feature_key] = restriction
        object.__setattr__(self, "_restrictions", MappingProxyType(entries))
    
    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")
    
    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "FeatureRestrictionMap":
        """Build a restriction map from a plain ``{feature: [patterns]}`` mapping."""
        if isinstance(mapping, FeatureRestrictionMap):
            return mapping
        if not isinstance(mapping, Mapping):
            raise RestrictionConfigurationError(
                f"Restriction map must be a mapping, got: {type(mapping).__name__}"
            )
        
        restrictions = []
        for feature_key, patterns in mapping.items():
            if isinstance(patterns, str) or not isinstance(patterns, Iterable):
                raise RestrictionConfigurationError(
                    f"Patterns for feature '{feature_key}' must be a list of strings",
                    details={"feature_key": feature_key},
                )
            restrictions.append(
                FeatureRestriction(
                    feature_key=feature_key,
                    patterns=tuple(PermissionPattern(p) for p in patterns),
                )
            )
        return cls(restrictions)
    
    def __getitem__(self, feature_key: str) -> Tuple[PermissionPattern, ...]:
        return self._restrictions[feature_key].patterns
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._restrictions)
    
    def __len__(self) -> int:
        return len(self._restrictions)
    
    def restrictions(self) -> Tuple[FeatureRestriction, ...]:
        """All entries in their defined order."""
        return tuple(self._restrictions.values())
    
    def to_dict(self) -> dict:
        """Plain ``{feature: [patterns]}`` representation."""
        return {
            feature_key: [pattern.value for pattern in restriction.patterns]
            for feature_key, restriction in self._restrictions.items()
        }
    
    def __repr__(self) -> str:
        return f"FeatureRestrictionMap(features={len(self)})"
