"""Configuration management for JobSpark."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from jobspark.scoring.career import DEFAULT_IN_DEMAND_SKILLS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="JOBSPARK_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Output
    output_dir: Path = Field(
        default=Path("."),
        description="Directory where exported PDFs are written",
    )
    font_dir: Path | None = Field(
        default=None,
        description="Directory with Poppins TTF files; built-in Helvetica is used when unset",
    )

    # Scoring
    in_demand_skills: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IN_DEMAND_SKILLS),
        description="Skills counted towards the market alignment score",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
