"""Configuration management."""

from .settings import (
    EDUCATION_COVERAGE_RATIO,
    MIN_GAP_MONTHS,
    OLD_GAP_YEARS,
    SUMMARY_PREVIEW_COUNT,
    Settings,
    get_settings,
)

__all__ = [
    "EDUCATION_COVERAGE_RATIO",
    "MIN_GAP_MONTHS",
    "OLD_GAP_YEARS",
    "SUMMARY_PREVIEW_COUNT",
    "Settings",
    "get_settings",
]
