"""
Free-form resume date parsing.

Turns a single date fragment ("May 2024", "Sept. 2021", "05/2024",
"2019-05", "03/24", "2020", "Present") into a ParsedDate. Formats are tried
in priority order from DATE_PATTERNS; anything unrecognized yields None.
"""

import re
from typing import Callable, List, Optional, Tuple

from resume_gaps.models.gap import ParsedDate
from resume_gaps.utils.clock import resolve_today

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

MONTH_ABBREVS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

MONTH_MAP = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sep": 9, "sept": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}

PRESENT_WORDS = ("present", "current")

Extractor = Callable[[re.Match, ParsedDate], Optional[ParsedDate]]


def parse_month(value: Optional[str]) -> Optional[int]:
    """
    Parse a month given as a name, abbreviation or number.

    Args:
        value: "March", "mar", "Sept.", "3", "03"

    Returns:
        Month number 1-12, or None if not a month
    """
    if not value:
        return None
    trimmed = value.strip().lower().rstrip(".")
    if not trimmed:
        return None
    if re.fullmatch(r"\d{1,2}", trimmed):
        num = int(trimmed)
        return num if 1 <= num <= 12 else None
    return MONTH_MAP.get(trimmed)


def pivot_two_digit_year(yy: int, today: ParsedDate) -> int:
    """Map YY to 20YY up to one year past the current year, else 19YY."""
    century = 2000 if yy <= (today.year % 100) + 1 else 1900
    return century + yy


def parse_year(value: Optional[str], today: Optional[ParsedDate] = None) -> Optional[int]:
    """
    Parse a four-digit year, or a two-digit year through the century pivot.

    Args:
        value: "2020", "20", "'20"
        today: Current month used by the pivot; read from the clock if omitted

    Returns:
        Four-digit year or None
    """
    if not value:
        return None
    trimmed = value.strip().lstrip("'")
    if re.fullmatch(r"\d{4}", trimmed):
        return int(trimmed)
    if re.fullmatch(r"\d{2}", trimmed):
        return pivot_two_digit_year(int(trimmed), resolve_today(today))
    return None


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]


def month_abbrev(month: int) -> str:
    return MONTH_ABBREVS[month - 1]


def is_present_token(text: Optional[str]) -> bool:
    """True when the fragment means "up to now" ("Present", "current")."""
    if not text:
        return False
    lowered = text.lower()
    return any(word in lowered for word in PRESENT_WORDS)


def format_parsed_date(date: ParsedDate) -> str:
    """Short display form: "Mar 2019", or "2019" when the month is unknown."""
    if not date.month_known:
        return str(date.year)
    return f"{month_abbrev(date.month)} {date.year}"


def _month_and_year(match: re.Match, today: ParsedDate) -> Optional[ParsedDate]:
    month = parse_month(match.group("month"))
    year = parse_year(match.group("year"), today)
    if month is None or year is None:
        return None
    return ParsedDate(month=month, year=year)


def _year_only(match: re.Match, today: ParsedDate) -> Optional[ParsedDate]:
    year = parse_year(match.group("year"), today)
    if year is None:
        return None
    # January is a comparison placeholder only; month_known=False keeps it off displays
    return ParsedDate(month=1, year=year, month_known=False)


# Tried in order against the whole lowercased fragment
DATE_PATTERNS: List[Tuple[str, re.Pattern, Extractor]] = [
    # May 2024, Sept. 2021, Jan 24, May, 2024, Jan-2020
    ("month_name_year",
     re.compile(r"(?P<month>[a-z]+)\.?,?\s*[-/]?\s*'?(?P<year>\d{4}|\d{2})"),
     _month_and_year),
    # 05/2024, 05-2024, 05.2024, 05 2024
    ("month_year",
     re.compile(r"(?P<month>\d{1,2})(?:[-/.]|\s+)(?P<year>\d{4})"),
     _month_and_year),
    # 05/24
    ("month_short_year",
     re.compile(r"(?P<month>\d{1,2})/(?P<year>\d{2})"),
     _month_and_year),
    # 2024-05, 2024/05, 2024.05, 2024 05
    ("year_month",
     re.compile(r"(?P<year>\d{4})(?:[-/.]|\s+)(?P<month>\d{1,2})"),
     _month_and_year),
    # 2024, 24
    ("year",
     re.compile(r"'?(?P<year>\d{4}|\d{2})"),
     _year_only),
]


def is_single_date_token(text: Optional[str]) -> bool:
    """
    Check whether the whole string is one date rather than a range.

    A lone "2019-05" or "03/2020" must not be split on its inner separator.
    """
    if not text:
        return False
    s = text.strip().lower()
    for _name, pattern, _extract in DATE_PATTERNS:
        match = pattern.fullmatch(s)
        if not match:
            continue
        month = match.groupdict().get("month")
        if month is None or parse_month(month) is not None:
            return True
    return False


def parse_date_token(text: Optional[str], today: Optional[ParsedDate] = None) -> Optional[ParsedDate]:
    """
    Parse a single date fragment.

    Args:
        text: One side of a date range, e.g. "May 2024" or "Present"
        today: Current month; "Present" resolves to it and it drives the
            two-digit year pivot. Read from the clock if omitted.

    Returns:
        ParsedDate, or None when no date could be determined
    """
    if not text:
        return None
    s = text.strip().lower()
    if not s:
        return None

    today = resolve_today(today)
    if is_present_token(s):
        return today

    for _name, pattern, extract in DATE_PATTERNS:
        match = pattern.fullmatch(s)
        if match:
            parsed = extract(match, today)
            if parsed is not None:
                return parsed
    return None
