"""Data models for the application."""

from .gap import (
    DateRangeFragment,
    EducationCoverage,
    EmploymentGap,
    EmploymentGapResolutionState,
    GapCoveringDateRange,
    GapSuggestion,
    GapSummary,
    NextJob,
    ParsedDate,
    PreviousJob,
    ResolutionStatus,
    ResolutionType,
    ResolvedDates,
)
from .resume import ResumeData, ResumeEducation, ResumeEntry, ResumeExperience

__all__ = [
    "DateRangeFragment",
    "EducationCoverage",
    "EmploymentGap",
    "EmploymentGapResolutionState",
    "GapCoveringDateRange",
    "GapSuggestion",
    "GapSummary",
    "NextJob",
    "ParsedDate",
    "PreviousJob",
    "ResolutionStatus",
    "ResolutionType",
    "ResolvedDates",
    "ResumeData",
    "ResumeEducation",
    "ResumeEntry",
    "ResumeExperience",
]
