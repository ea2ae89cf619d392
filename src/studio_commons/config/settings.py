"""Settings for the studio-commons access-control layer.

Values are read from the environment (prefix ``STUDIO_``) or a ``.env`` file.
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GateSettings(BaseSettings):
    """Configuration for feature gating."""
    
    model_config = SettingsConfigDict(
        env_prefix="STUDIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # JSON file of {feature_key: [patterns]}; the built-in map is used when unset
    feature_restrictions_file: Optional[Path] = Field(default=None)
    
    # Fail startup instead of falling back when the restriction file is unusable
    strict_restrictions: bool = Field(default=True)


@lru_cache()
def get_gate_settings() -> GateSettings:
    """Get cached gate settings."""
    return GateSettings()
