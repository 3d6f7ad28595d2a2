"""
Gap review state and summary.

Resolution states are treated as immutable snapshots: every operation
returns a new list and leaves its input alone.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from resume_gaps.config.settings import SUMMARY_PREVIEW_COUNT
from resume_gaps.models.gap import (
    EmploymentGap,
    EmploymentGapResolutionState,
    GapSuggestion,
    GapSummary,
    ResolutionStatus,
    ResolutionType,
)
from resume_gaps.utils.date_parser import format_parsed_date
from resume_gaps.utils.date_range import RANGE_SEPARATOR
from resume_gaps.utils.logger import get_logger

logger = get_logger(__name__)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def format_gap_range(gap: EmploymentGap) -> str:
    return f"{format_parsed_date(gap.start_date)}{RANGE_SEPARATOR}{format_parsed_date(gap.end_date)}"


def summarize_gaps(
    gaps: Sequence[EmploymentGap],
    resolutions: Sequence[EmploymentGapResolutionState],
    preview_count: int = SUMMARY_PREVIEW_COUNT
) -> GapSummary:
    """
    Summarize how many detected gaps the user has addressed.

    A gap counts as addressed once its state is resolved or dismissed.

    Args:
        gaps: Detected gaps
        resolutions: Current resolution states
        preview_count: How many remaining gaps to list in the summary text

    Returns:
        GapSummary
    """
    addressed_ids = {r.gap_id for r in resolutions if r.is_addressed}
    remaining = [gap for gap in gaps if gap.id not in addressed_ids]
    addressed = len(gaps) - len(remaining)

    if not gaps:
        summary_text = "No employment gaps detected"
    elif not remaining:
        summary_text = f"{_plural(addressed, 'gap')} addressed"
    else:
        summary_text = f"{_plural(len(remaining), 'gap')} remaining"
        previews = ", ".join(format_gap_range(gap) for gap in remaining[:preview_count])
        if previews:
            summary_text += f" ({previews})"

    return GapSummary(
        total_gaps=len(gaps),
        addressed_gaps=addressed,
        remaining_gaps=list(remaining),
        all_addressed=not remaining,
        summary_text=summary_text,
    )


def initial_resolutions(gaps: Sequence[EmploymentGap]) -> List[EmploymentGapResolutionState]:
    """One pending state per detected gap."""
    return [EmploymentGapResolutionState(gap_id=gap.id) for gap in gaps]


def sync_resolutions(
    gaps: Sequence[EmploymentGap],
    resolutions: Sequence[EmploymentGapResolutionState]
) -> List[EmploymentGapResolutionState]:
    """
    Line resolution states up with a fresh detection run.

    States survive for gap ids that are still detected, new gaps start out
    pending and states for gaps that disappeared are dropped.
    """
    existing = {r.gap_id: r for r in resolutions}
    synced = []
    for gap in gaps:
        state = existing.get(gap.id)
        synced.append(state.model_copy() if state else EmploymentGapResolutionState(gap_id=gap.id))

    dropped = set(existing) - {gap.id for gap in gaps}
    if dropped:
        logger.debug(f"Dropped resolution state for gaps no longer detected: {sorted(dropped)}")
    return synced


def _update(
    resolutions: Sequence[EmploymentGapResolutionState],
    gap_id: str,
    **changes: Any
) -> List[EmploymentGapResolutionState]:
    if not any(r.gap_id == gap_id for r in resolutions):
        logger.warning(f"No resolution state for gap {gap_id}")
    return [
        r.model_copy(update=changes) if r.gap_id == gap_id else r
        for r in resolutions
    ]


def mark_suggesting(
    resolutions: Sequence[EmploymentGapResolutionState],
    gap_id: str
) -> List[EmploymentGapResolutionState]:
    """Flag a gap while suggestions are being generated for it."""
    return _update(resolutions, gap_id, status=ResolutionStatus.SUGGESTING)


def attach_suggestions(
    resolutions: Sequence[EmploymentGapResolutionState],
    gap_id: str,
    suggestions: Optional[Sequence[Union[GapSuggestion, Dict[str, Any]]]]
) -> List[EmploymentGapResolutionState]:
    """
    Store suggestions for a gap and return it to pending.

    Passing None (generation failed) just returns the gap to pending.
    """
    if suggestions is None:
        return _update(resolutions, gap_id, status=ResolutionStatus.PENDING)
    parsed = [GapSuggestion.model_validate(s) for s in suggestions]
    return _update(resolutions, gap_id, status=ResolutionStatus.PENDING, ai_suggestions=parsed)


def dismiss_gap(
    resolutions: Sequence[EmploymentGapResolutionState],
    gap_id: str
) -> List[EmploymentGapResolutionState]:
    return _update(
        resolutions,
        gap_id,
        status=ResolutionStatus.DISMISSED,
        resolution_type=ResolutionType.DISMISSED,
    )


def resolve_gap(
    resolutions: Sequence[EmploymentGapResolutionState],
    gap_id: str,
    resolution_type: Union[ResolutionType, str],
    added_data: Optional[Dict[str, Any]] = None
) -> List[EmploymentGapResolutionState]:
    """Mark a gap resolved, remembering what was added so it can be undone."""
    return _update(
        resolutions,
        gap_id,
        status=ResolutionStatus.RESOLVED,
        resolution_type=ResolutionType(resolution_type),
        added_data=dict(added_data) if added_data is not None else None,
    )


def undo_resolution(
    resolutions: Sequence[EmploymentGapResolutionState],
    gap_id: str
) -> List[EmploymentGapResolutionState]:
    """Return a resolved or dismissed gap to pending."""
    return _update(
        resolutions,
        gap_id,
        status=ResolutionStatus.PENDING,
        resolution_type=None,
        added_data=None,
    )


def format_duration(months: int) -> str:
    """Human readable gap length: "5 months", "1 year", "2 years, 3 months"."""
    if months < 12:
        return _plural(months, "month")
    years, remaining = divmod(months, 12)
    if remaining == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')}, {_plural(remaining, 'month')}"
