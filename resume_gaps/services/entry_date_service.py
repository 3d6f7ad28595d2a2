"""
Entry date resolution.

Reconciles the structured month/year selectors of an experience or education
entry with whatever can be read out of its free-text date range, and rebuilds
the canonical "Month Year – Month Year" string from the result.
"""

from typing import Optional, Tuple, TypeVar

from resume_gaps.models.gap import ParsedDate, ResolvedDates
from resume_gaps.models.resume import ResumeEntry
from resume_gaps.utils.clock import resolve_today
from resume_gaps.utils.date_parser import (
    is_present_token,
    month_name,
    parse_date_token,
    parse_month,
    parse_year,
)
from resume_gaps.utils.date_range import format_date_range, split_range
from resume_gaps.utils.logger import get_logger

logger = get_logger(__name__)

EntryT = TypeVar("EntryT", bound=ResumeEntry)


def _month_label(value: Optional[str]) -> str:
    month = parse_month(value)
    return month_name(month) if month else ""


def _year_label(value: Optional[str], today: ParsedDate) -> str:
    year = parse_year(value, today)
    return str(year) if year else ""


def _date_labels(date: Optional[ParsedDate]) -> Tuple[str, str]:
    if date is None:
        return "", ""
    month = month_name(date.month) if date.month_known else ""
    return month, str(date.year)


def _comparison_date(month: str, year: str) -> Optional[ParsedDate]:
    if not year:
        return None
    month_num = parse_month(month)
    return ParsedDate(month=month_num or 1, year=int(year), month_known=month_num is not None)


def _derive_from_range(date_range: str, today: ParsedDate) -> ResolvedDates:
    """Read start/end labels out of the free-text range alone."""
    fragment = split_range(date_range)
    start_month, start_year = _date_labels(parse_date_token(fragment.start_part, today))

    if is_present_token(fragment.end_part):
        return ResolvedDates(start_month=start_month, start_year=start_year, is_current=True)

    end_month, end_year = _date_labels(parse_date_token(fragment.end_part, today))
    return ResolvedDates(
        start_month=start_month,
        start_year=start_year,
        end_month=end_month,
        end_year=end_year,
    )


def resolve_entry_dates(entry: ResumeEntry, today: Optional[ParsedDate] = None) -> ResolvedDates:
    """
    Resolve the canonical dates of one experience or education entry.

    Each of start month, start year, end month, end year and the current flag
    is taken from the structured field when it is set and parseable, and from
    the free-text date range otherwise. A current entry ends at ``today`` for
    comparison purposes regardless of any structured end fields.

    Args:
        entry: ResumeExperience or ResumeEducation
        today: Current month; read from the clock if omitted

    Returns:
        ResolvedDates with display labels, canonical range and comparison dates
    """
    today = resolve_today(today)
    derived = _derive_from_range(entry.date_range, today)

    start_month = _month_label(entry.start_month) or derived.start_month
    start_year = _year_label(entry.start_year, today) or derived.start_year
    end_month = _month_label(entry.end_month) or derived.end_month
    end_year = _year_label(entry.end_year, today) or derived.end_year
    is_current = entry.is_current if entry.is_current is not None else derived.is_current

    if start_year:
        date_range = format_date_range(start_month, start_year, end_month, end_year, is_current)
    else:
        # Nothing anchors the start; keep what the author wrote
        date_range = entry.date_range

    end = today if is_current else _comparison_date(end_month, end_year)

    return ResolvedDates(
        start_month=start_month,
        start_year=start_year,
        end_month=end_month,
        end_year=end_year,
        is_current=bool(is_current),
        date_range=date_range,
        start=_comparison_date(start_month, start_year),
        end=end,
    )


def display_date_range(entry: ResumeEntry, today: Optional[ParsedDate] = None) -> str:
    """Canonical range string for display, without touching the entry."""
    return resolve_entry_dates(entry, today).date_range


def hydrate_entry(entry: EntryT, today: Optional[ParsedDate] = None) -> EntryT:
    """
    Return a copy of ``entry`` with structured fields filled in.

    Structured fields missing on the entry are populated from its date range
    and ``date_range`` is rebuilt in canonical form. Entries whose start
    cannot be resolved come back unchanged.
    """
    resolved = resolve_entry_dates(entry, today)
    if not resolved.start_year:
        logger.debug(f"Leaving entry with unresolvable dates as-is: {entry.date_range!r}")
        return entry.model_copy()

    update = {
        "start_month": resolved.start_month or entry.start_month,
        "start_year": resolved.start_year,
        "end_month": resolved.end_month or entry.end_month,
        "end_year": resolved.end_year or entry.end_year,
        "date_range": resolved.date_range,
    }
    if entry.current_field:
        update[entry.current_field] = resolved.is_current
    return entry.model_copy(update=update)
