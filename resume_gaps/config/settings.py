"""
Configuration settings management with environment variable support.
"""

import json
from functools import lru_cache
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load environment variables
load_dotenv()


# Gap policy defaults
MIN_GAP_MONTHS = 3
EDUCATION_COVERAGE_RATIO = 0.5
OLD_GAP_YEARS = 10
SUMMARY_PREVIEW_COUNT = 2


class Settings(BaseSettings):
    """Gap detection policy and application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Gap detection policy
    min_gap_months: int = Field(
        default=MIN_GAP_MONTHS,
        ge=1,
        validation_alias=AliasChoices("min_gap_months", "GAP_MIN_MONTHS"),
    )
    education_coverage_ratio: float = Field(
        default=EDUCATION_COVERAGE_RATIO,
        gt=0,
        le=1,
        validation_alias=AliasChoices("education_coverage_ratio", "GAP_EDUCATION_COVERAGE_RATIO"),
    )
    old_gap_years: int = Field(
        default=OLD_GAP_YEARS,
        ge=0,
        validation_alias=AliasChoices("old_gap_years", "GAP_OLD_YEARS"),
    )
    summary_preview_count: int = Field(
        default=SUMMARY_PREVIEW_COUNT,
        ge=0,
        validation_alias=AliasChoices("summary_preview_count", "GAP_SUMMARY_PREVIEW"),
    )

    # Application settings from environment
    debug: bool = Field(default=False, validation_alias=AliasChoices("debug", "DEBUG"))
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("log_level", "LOG_LEVEL"))
    log_file: Optional[str] = Field(default=None, validation_alias=AliasChoices("log_file", "LOG_FILE"))

    @classmethod
    def from_json(cls, config_path: str = "config.json") -> "Settings":
        """
        Load settings from JSON configuration file.

        Environment variables still apply to keys the file leaves out.

        Args:
            config_path: Path to JSON configuration file

        Returns:
            Settings instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)

            return cls(**config_data)

        except FileNotFoundError:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file: {e}")
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}")

    def to_dict(self) -> Dict:
        """Convert settings to dictionary."""
        return self.model_dump(exclude_none=True)


@lru_cache()
def get_settings(config_path: Optional[str] = None) -> Settings:
    """
    Get cached settings instance.

    Args:
        config_path: Optional path to JSON configuration file; when omitted
            settings come from the environment only

    Returns:
        Settings instance (cached)
    """
    if config_path:
        return Settings.from_json(config_path)
    return Settings()
