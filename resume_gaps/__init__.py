"""
Employment gap detection and resume date normalization.
"""

import logging

from .config import Settings, get_settings
from .models import (
    EmploymentGap,
    EmploymentGapResolutionState,
    GapSummary,
    ParsedDate,
    ResolutionStatus,
    ResolutionType,
    ResumeData,
    ResumeEducation,
    ResumeExperience,
)
from .services import (
    GapDetectionService,
    detect_gaps,
    hydrate_resume,
    load_resume,
    resolve_entry_dates,
    summarize_gaps,
)
from .utils import parse_date_token, split_range
from .utils.logger import PACKAGE_LOGGER

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "EmploymentGap",
    "EmploymentGapResolutionState",
    "GapDetectionService",
    "GapSummary",
    "ParsedDate",
    "ResolutionStatus",
    "ResolutionType",
    "ResumeData",
    "ResumeEducation",
    "ResumeExperience",
    "Settings",
    "detect_gaps",
    "get_settings",
    "hydrate_resume",
    "load_resume",
    "parse_date_token",
    "resolve_entry_dates",
    "split_range",
    "summarize_gaps",
]
