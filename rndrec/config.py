"""
Configuration

Manages environment-based defaults for the command line and name generator.
"""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    Every field can be overridden with an RNDREC_-prefixed environment
    variable or an entry in a .env file (e.g. RNDREC_SEED=42).
    """

    # Table format
    field_separator: str = "|"
    weight_column: int = 1
    uniform: bool = False

    # Sampling
    seed: Optional[int] = 0
    report_draws: int = 100_000

    # Name generation
    names_dir: str = "data/us"
    female_share: float = 0.8

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="RNDREC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("field_separator")
    @classmethod
    def single_character(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"field separator must be a single character, got {v!r}")
        return v

    @field_validator("female_share")
    @classmethod
    def share_in_range(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"female_share must be within [0, 1], got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper()

    @property
    def weight_col(self) -> Optional[int]:
        """Weight column as passed to the sampler (None for uniform)"""
        return None if self.uniform else self.weight_column


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded once and reused.
    """
    return Settings()
