"""Loading of feature restriction maps from deployed configuration.

The restriction map is read once at startup; there is no runtime API for
changing it.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from ....config.settings import GateSettings, get_gate_settings
from ....core.exceptions import RestrictionConfigurationError
from ..entities import DEFAULT_RESTRICTIONS, FeatureRestrictionMap


logger = logging.getLogger(__name__)


def load_restriction_map(path: Union[str, Path]) -> FeatureRestrictionMap:
    """Load a restriction map from a JSON file of ``{feature: [patterns]}``.
    
    Args:
        path: Path to the JSON file
        
    Returns:
        Immutable restriction map, entries in file order
        
    Raises:
        RestrictionConfigurationError: If the file is missing or malformed
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise RestrictionConfigurationError(
            f"Restriction map file not found: {path}",
            details={"path": str(path)},
        ) from e
    except json.JSONDecodeError as e:
        raise RestrictionConfigurationError(
            f"Restriction map file is not valid JSON: {path} ({e.msg})",
            details={"path": str(path), "line": e.lineno},
        ) from e
    
    if not isinstance(raw, dict):
        raise RestrictionConfigurationError(
            f"Restriction map file must contain a JSON object: {path}",
            details={"path": str(path)},
        )
    
    restriction_map = FeatureRestrictionMap.from_mapping(raw)
    logger.info(f"Loaded {len(restriction_map)} feature restrictions from {path}")
    return restriction_map


def build_restriction_map(settings: Optional[GateSettings] = None) -> FeatureRestrictionMap:
    """Build the restriction map described by the settings.
    
    Uses the built-in map when no file is configured. With
    ``strict_restrictions`` off, an unusable file falls back to the built-in
    map instead of failing.
    """
    settings = settings or get_gate_settings()
    if settings.feature_restrictions_file is None:
        return DEFAULT_RESTRICTIONS
    
    try:
        return load_restriction_map(settings.feature_restrictions_file)
    except RestrictionConfigurationError as e:
        if settings.strict_restrictions:
            raise
        logger.error(f"Using built-in feature restrictions: {e.message}")
        return DEFAULT_RESTRICTIONS


@lru_cache()
def get_restriction_map() -> FeatureRestrictionMap:
    """Process-wide restriction map, built on first use."""
    return build_restriction_map()
