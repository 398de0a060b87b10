"""
Configuration management for rfcuuid.

Generator tuning is read from ``RFCUUID_*`` environment variables using
pydantic-settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeneratorSettings(BaseSettings):
    """Version 1 generator configuration."""

    tick_ratio: float = Field(
        default=1 / 8,
        ge=0.0,
        le=1.0,
        description=(
            "Probability of advancing the sub-millisecond tick instead of the "
            "clock sequence when called twice within one millisecond"
        ),
    )
    max_tick: int = Field(
        default=9999,
        ge=0,
        le=9999,
        description="Highest tick value; 10000 ticks of 100ns make one millisecond",
    )

    model_config = SettingsConfigDict(env_prefix="RFCUUID_", case_sensitive=False)


# Default settings instance
DEFAULT_SETTINGS = GeneratorSettings()
