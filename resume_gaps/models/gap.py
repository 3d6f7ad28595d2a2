"""Date and employment gap data models."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ParsedDate(BaseModel):
    """A calendar month. Year-only values keep month=1 with month_known=False."""
    model_config = ConfigDict(frozen=True)

    month: int = Field(ge=1, le=12)
    year: int
    month_known: bool = True

    @property
    def comparable(self) -> int:
        return self.year * 12 + self.month


class DateRangeFragment(BaseModel):
    """Raw start/end halves of a date range string."""
    start_part: str = ""
    end_part: str = ""


class ResolvedDates(BaseModel):
    """Canonical dates of one experience or education entry."""
    start_month: str = ""
    start_year: str = ""
    end_month: str = ""
    end_year: str = ""
    is_current: bool = False
    date_range: str = ""
    start: Optional[ParsedDate] = None
    end: Optional[ParsedDate] = None


class PreviousJob(BaseModel):
    company: str
    role: str
    end_date: str


class NextJob(BaseModel):
    company: str
    role: str
    start_date: str


class EducationCoverage(BaseModel):
    school: str
    degree: str


class EmploymentGap(BaseModel):
    """An interval between two jobs long enough to be flagged."""
    id: str
    start_date: ParsedDate
    end_date: ParsedDate
    duration_months: int
    previous_job: PreviousJob
    next_job: NextJob
    is_old_gap: bool = False
    is_covered_by_education: bool = False
    education_coverage: Optional[EducationCoverage] = None


class ResolutionStatus(str, Enum):
    """How far the user got with a detected gap."""
    PENDING = "pending"
    SUGGESTING = "suggesting"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


class ResolutionType(str, Enum):
    """What the user added (or chose) to address a gap."""
    PROJECT = "project"
    FREELANCE = "freelance"
    EDUCATION = "education"
    VOLUNTEER = "volunteer"
    DISMISSED = "dismissed"


class GapSuggestion(BaseModel):
    """One suggested way to fill a gap."""
    type: ResolutionType
    title: str
    description: str


class EmploymentGapResolutionState(BaseModel):
    """User disposition of one detected gap."""
    gap_id: str
    status: ResolutionStatus = ResolutionStatus.PENDING
    resolution_type: Optional[ResolutionType] = None
    added_data: Optional[Dict[str, Any]] = None
    ai_suggestions: Optional[List[GapSuggestion]] = None

    @property
    def is_addressed(self) -> bool:
        return self.status in (ResolutionStatus.RESOLVED, ResolutionStatus.DISMISSED)


class GapSummary(BaseModel):
    """Aggregated review state for display."""
    total_gaps: int
    addressed_gaps: int
    remaining_gaps: List[EmploymentGap] = Field(default_factory=list)
    all_addressed: bool
    summary_text: str


class GapCoveringDateRange(BaseModel):
    """Prefill values for an entry that spans a gap."""
    start_month: str
    start_year: str
    end_month: str
    end_year: str
    date_range: str
