"""Resume related data models."""

from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResumeEntry(BaseModel):
    """Fields shared by dated resume entries."""
    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    # Name of the boolean field that marks an ongoing entry
    current_field: ClassVar[str] = ""

    date_range: str = Field(default="", alias="dateRange")
    start_month: Optional[str] = Field(default=None, alias="startMonth")
    start_year: Optional[str] = Field(default=None, alias="startYear")
    end_month: Optional[str] = Field(default=None, alias="endMonth")
    end_year: Optional[str] = Field(default=None, alias="endYear")

    @field_validator("date_range", mode="before")
    def null_date_range_to_empty(cls, v):
        return "" if v is None else v

    @property
    def is_current(self) -> Optional[bool]:
        if not self.current_field:
            return None
        return getattr(self, self.current_field)


class ResumeExperience(ResumeEntry):
    """Represents a work experience entry."""
    current_field: ClassVar[str] = "is_current_role"

    company: str = ""
    role: str = ""
    location: str = ""
    is_current_role: Optional[bool] = Field(default=None, alias="isCurrentRole")
    bullets: List[str] = Field(default_factory=list)

    @field_validator("company", "role", "location", mode="before")
    def null_text_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("bullets", mode="before")
    def null_bullets_to_empty(cls, v):
        return [] if v is None else v


class ResumeEducation(ResumeEntry):
    """Represents an education entry."""
    current_field: ClassVar[str] = "is_in_progress"

    school: str = ""
    degree: str = ""
    field_of_study: Optional[str] = Field(default=None, alias="fieldOfStudy")
    location: str = ""
    is_in_progress: Optional[bool] = Field(default=None, alias="isInProgress")

    @field_validator("school", "degree", "location", mode="before")
    def null_text_to_empty(cls, v):
        return "" if v is None else v


class ResumeData(BaseModel):
    """
    Resume document as produced by the builder or the tailoring step.

    Only the dated sections are modelled; every other section (contact,
    skills, projects, ...) is kept as-is in the model extras.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    experience: List[ResumeExperience] = Field(default_factory=list)
    education: List[ResumeEducation] = Field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to the camelCase dictionary shape used upstream."""
        return self.model_dump(by_alias=True, exclude_none=True)
