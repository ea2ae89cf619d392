"""Configuration module for studio-commons."""

from .constants import (
    FeatureKeys,
    UserRole,
    FeatureSource,
    PORTAL_FEATURES,
    WILDCARD_SUFFIX,
)

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

from .settings import GateSettings, get_gate_settings

__all__ = [
    # Constants
    "FeatureKeys",
    "UserRole",
    "FeatureSource",
    "PORTAL_FEATURES",
    "WILDCARD_SUFFIX",
    
    # Logging
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
    
    # Settings
    "GateSettings",
    "get_gate_settings",
]
