"""
Resume loading and date hydration.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from resume_gaps.models.gap import ParsedDate
from resume_gaps.models.resume import ResumeData
from resume_gaps.services.entry_date_service import hydrate_entry
from resume_gaps.utils.clock import resolve_today
from resume_gaps.utils.file_utils import load_json
from resume_gaps.utils.logger import get_logger

logger = get_logger(__name__)


def parse_resume(data: Dict[str, Any]) -> ResumeData:
    """
    Validate a resume dictionary (camelCase or snake_case keys).

    Raises:
        ValueError: If the dated sections are malformed
    """
    try:
        return ResumeData.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid resume data: {e}")


def load_resume(filepath: Union[Path, str]) -> ResumeData:
    """
    Load a resume JSON export.

    Args:
        filepath: Path to a JSON file holding the resume object

    Returns:
        ResumeData
    """
    data = load_json(filepath)
    # Tailoring responses wrap the resume next to the cover letter and report
    if isinstance(data, dict) and isinstance(data.get("resume"), dict):
        data = data["resume"]
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {filepath}")

    resume = parse_resume(data)
    logger.info(
        f"Loaded resume from {filepath}: {len(resume.experience)} experience, "
        f"{len(resume.education)} education entries"
    )
    return resume


def hydrate_resume(resume: ResumeData, today: Optional[ParsedDate] = None) -> ResumeData:
    """
    Fill structured date fields on every experience and education entry.

    Returns a new ResumeData; other sections are carried over untouched.
    """
    today = resolve_today(today)
    return resume.model_copy(update={
        "experience": [hydrate_entry(exp, today) for exp in resume.experience],
        "education": [hydrate_entry(edu, today) for edu in resume.education],
    })
