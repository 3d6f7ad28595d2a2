"""
Employment gap detection.

Resolves every experience to a start/end month, orders them
chronologically and flags intervals between consecutive jobs that reach the
minimum gap length. Each flagged gap is checked against education entries
and aged against the current month.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Type, TypeVar, Union

from pydantic import ValidationError

from resume_gaps.config.settings import Settings, get_settings
from resume_gaps.models.gap import (
    EducationCoverage,
    EmploymentGap,
    EmploymentGapResolutionState,
    GapCoveringDateRange,
    GapSummary,
    NextJob,
    ParsedDate,
    PreviousJob,
    ResolvedDates,
)
from resume_gaps.models.resume import ResumeData, ResumeEducation, ResumeEntry, ResumeExperience
from resume_gaps.services.entry_date_service import resolve_entry_dates
from resume_gaps.services.gap_review_service import format_gap_range, summarize_gaps, sync_resolutions
from resume_gaps.services.resume_service import hydrate_resume
from resume_gaps.utils.clock import Clock, current_month, resolve_today, system_clock
from resume_gaps.utils.date_parser import format_parsed_date, month_name
from resume_gaps.utils.logger import get_logger

logger = get_logger(__name__)

EntryT = TypeVar("EntryT", bound=ResumeEntry)
EntryInput = Union[ResumeEntry, Dict[str, Any]]


def _coerce_entries(entries: Optional[Iterable[EntryInput]], model: Type[EntryT]) -> List[EntryT]:
    """Validate raw entries, skipping records that cannot be read as ``model``."""
    if not entries:
        return []
    coerced = []
    for entry in entries:
        if isinstance(entry, model):
            coerced.append(entry)
            continue
        try:
            coerced.append(model.model_validate(entry))
        except ValidationError as e:
            logger.debug(f"Skipping malformed {model.__name__} entry: {e}")
    return coerced


def _dated_entries(
    entries: Sequence[EntryT],
    today: ParsedDate
) -> List[Tuple[EntryT, ResolvedDates]]:
    """Resolve entries, keeping only those with both a start and an end."""
    dated = []
    for entry in entries:
        resolved = resolve_entry_dates(entry, today)
        if resolved.start is None or resolved.end is None:
            logger.debug(f"Skipping entry without resolvable dates: {entry.date_range!r}")
            continue
        dated.append((entry, resolved))
    return dated


def check_education_coverage(
    gap_start: ParsedDate,
    gap_end: ParsedDate,
    education: Sequence[Tuple[ResumeEducation, ResolvedDates]],
    coverage_ratio: float
) -> Optional[EducationCoverage]:
    """
    Find the first education entry overlapping enough of a gap.

    Args:
        gap_start: Month the previous job ended
        gap_end: Month the next job started
        education: Resolved education entries
        coverage_ratio: Fraction of the gap the overlap must reach

    Returns:
        EducationCoverage of the first qualifying entry, or None
    """
    gap_months = gap_end.comparable - gap_start.comparable
    for edu, dates in education:
        overlap_start = max(dates.start.comparable, gap_start.comparable)
        overlap_end = min(dates.end.comparable, gap_end.comparable)
        overlap_months = max(0, overlap_end - overlap_start)
        if overlap_months >= gap_months * coverage_ratio:
            return EducationCoverage(school=edu.school, degree=edu.degree)
    return None


def detect_gaps(
    experiences: Optional[Iterable[EntryInput]],
    educations: Optional[Iterable[EntryInput]] = None,
    today: Optional[ParsedDate] = None,
    settings: Optional[Settings] = None
) -> List[EmploymentGap]:
    """
    Detect employment gaps between consecutive jobs.

    Args:
        experiences: Experience entries (models or camelCase/snake_case dicts)
        educations: Education entries used to check coverage
        today: Current month; read from the clock once if omitted
        settings: Gap policy; defaults to the cached application settings

    Returns:
        Gaps in chronological order. Empty when fewer than two jobs have
        resolvable dates.
    """
    settings = settings or get_settings()
    today = resolve_today(today)

    jobs = _coerce_entries(experiences, ResumeExperience)
    if len(jobs) < 2:
        return []

    dated_jobs = _dated_entries(jobs, today)
    if len(dated_jobs) < 2:
        logger.debug(f"Only {len(dated_jobs)} of {len(jobs)} jobs have resolvable dates")
        return []

    # sorted() is stable, equal start months keep their input order
    dated_jobs = sorted(dated_jobs, key=lambda item: item[1].start.comparable)
    dated_education = _dated_entries(_coerce_entries(educations, ResumeEducation), today)

    gaps = []
    for i in range(len(dated_jobs) - 1):
        current, current_dates = dated_jobs[i]
        following, following_dates = dated_jobs[i + 1]
        current_end = current_dates.end
        next_start = following_dates.start

        gap_months = next_start.comparable - current_end.comparable
        if gap_months < settings.min_gap_months:
            continue

        coverage = check_education_coverage(
            current_end, next_start, dated_education, settings.education_coverage_ratio
        )
        gaps.append(EmploymentGap(
            id=f"gap-{i}-{current_end.year}{current_end.month}",
            start_date=current_end,
            end_date=next_start,
            duration_months=gap_months,
            previous_job=PreviousJob(
                company=current.company,
                role=current.role,
                end_date=format_parsed_date(current_end),
            ),
            next_job=NextJob(
                company=following.company,
                role=following.role,
                start_date=format_parsed_date(next_start),
            ),
            is_old_gap=today.year - next_start.year >= settings.old_gap_years,
            is_covered_by_education=coverage is not None,
            education_coverage=coverage,
        ))

    logger.info(f"Detected {len(gaps)} employment gap(s) across {len(dated_jobs)} dated jobs")
    return gaps


def generate_gap_covering_date_range(gap: EmploymentGap) -> GapCoveringDateRange:
    """Prefill values for a project, role or course that fills ``gap``."""
    def labels(date: ParsedDate) -> Tuple[str, str]:
        return (month_name(date.month) if date.month_known else ""), str(date.year)

    start_month, start_year = labels(gap.start_date)
    end_month, end_year = labels(gap.end_date)
    return GapCoveringDateRange(
        start_month=start_month,
        start_year=start_year,
        end_month=end_month,
        end_year=end_year,
        date_range=format_gap_range(gap),
    )


class GapDetectionService:
    """Run the gap pipeline with one clock reading per call."""

    def __init__(self, settings: Optional[Settings] = None, clock: Optional[Clock] = None):
        """
        Initialize gap detection service.

        Args:
            settings: Gap policy; defaults to the cached application settings
            clock: Callable returning the current datetime
        """
        self.settings = settings or get_settings()
        self.clock = clock or system_clock

    def today(self) -> ParsedDate:
        return current_month(self.clock)

    def detect(
        self,
        experiences: Optional[Iterable[EntryInput]],
        education: Optional[Iterable[EntryInput]] = None
    ) -> List[EmploymentGap]:
        return detect_gaps(experiences, education, today=self.today(), settings=self.settings)

    def detect_for_resume(self, resume: ResumeData) -> List[EmploymentGap]:
        return self.detect(resume.experience, resume.education)

    def hydrate(self, resume: ResumeData) -> ResumeData:
        return hydrate_resume(resume, today=self.today())

    def summarize(
        self,
        gaps: Sequence[EmploymentGap],
        resolutions: Sequence[EmploymentGapResolutionState]
    ) -> GapSummary:
        return summarize_gaps(gaps, resolutions, preview_count=self.settings.summary_preview_count)

    def review(
        self,
        resume: ResumeData,
        resolutions: Optional[Sequence[EmploymentGapResolutionState]] = None
    ) -> Tuple[List[EmploymentGap], List[EmploymentGapResolutionState], GapSummary]:
        """
        Detect gaps and carry review state over from a previous run.

        Args:
            resume: Current resume data
            resolutions: States from the previous run, if any

        Returns:
            Tuple of (gaps, synced resolution states, summary)
        """
        gaps = self.detect_for_resume(resume)
        states = sync_resolutions(gaps, resolutions or [])
        return gaps, states, self.summarize(gaps, states)
