"""Service layer modules."""

from .entry_date_service import display_date_range, hydrate_entry, resolve_entry_dates
from .gap_detection_service import (
    GapDetectionService,
    check_education_coverage,
    detect_gaps,
    generate_gap_covering_date_range,
)
from .gap_review_service import (
    attach_suggestions,
    dismiss_gap,
    format_duration,
    format_gap_range,
    initial_resolutions,
    mark_suggesting,
    resolve_gap,
    summarize_gaps,
    sync_resolutions,
    undo_resolution,
)
from .resume_service import hydrate_resume, load_resume, parse_resume

__all__ = [
    "GapDetectionService",
    "attach_suggestions",
    "check_education_coverage",
    "detect_gaps",
    "dismiss_gap",
    "display_date_range",
    "format_duration",
    "format_gap_range",
    "generate_gap_covering_date_range",
    "hydrate_entry",
    "hydrate_resume",
    "initial_resolutions",
    "load_resume",
    "mark_suggesting",
    "parse_resume",
    "resolve_entry_dates",
    "resolve_gap",
    "summarize_gaps",
    "sync_resolutions",
    "undo_resolution",
]
