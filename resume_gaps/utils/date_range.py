"""
Date range splitting and canonical range formatting.
"""

import re
from typing import Optional

from resume_gaps.models.gap import DateRangeFragment
from resume_gaps.utils.date_parser import is_single_date_token

RANGE_SEPARATOR = " – "

# En/em dashes and spaced hyphens are unambiguous range separators
_DASH_SEPARATOR = re.compile(r"\s*[–—]\s*|\s+-\s*|\s*-\s+")
_HYPHEN_SEPARATOR = re.compile(r"\s*-\s*")
_WORD_SEPARATOR = re.compile(r"\s+(?:to|through|thru|until)\s+", re.IGNORECASE)


def _split_once(pattern: re.Pattern, text: str) -> Optional[DateRangeFragment]:
    parts = pattern.split(text, maxsplit=1)
    if len(parts) != 2:
        return None
    start, end = parts[0].strip(), parts[1].strip()
    if not start and not end:
        return None
    # "– Present" has no start; the start stays unresolved
    return DateRangeFragment(start_part=start, end_part=end)


def split_range(text: Optional[str]) -> DateRangeFragment:
    """
    Split a date range string into its start and end fragments.

    Single date tokens ("2020", "03/2020", "2019-05") are returned whole as
    the start. Ranges split on the first en/em dash or spaced hyphen, then on
    "to"/"through"/"thru"/"until", then on a bare hyphen ("05/2019-06/2020").
    With no separator the whole string is the start and the end is empty.

    Args:
        text: Free-text range such as "Jan 2020 – Present"

    Returns:
        DateRangeFragment with start_part and end_part
    """
    if not text:
        return DateRangeFragment()
    trimmed = text.strip()
    if not trimmed:
        return DateRangeFragment()

    if is_single_date_token(trimmed):
        return DateRangeFragment(start_part=trimmed)

    for pattern in (_DASH_SEPARATOR, _WORD_SEPARATOR, _HYPHEN_SEPARATOR):
        fragment = _split_once(pattern, trimmed)
        if fragment is not None:
            return fragment

    return DateRangeFragment(start_part=trimmed)


def format_date_range(
    start_month: Optional[str] = None,
    start_year: Optional[str] = None,
    end_month: Optional[str] = None,
    end_year: Optional[str] = None,
    is_current: bool = False
) -> str:
    """
    Build the canonical "Month Year – Month Year" display string.

    Missing months collapse to the year alone and a current entry ends in
    "Present". Returns "" when nothing is known.
    """
    if start_month and start_year:
        start = f"{start_month} {start_year}"
    else:
        start = start_year or ""

    if is_current:
        end = "Present"
    elif end_month and end_year:
        end = f"{end_month} {end_year}"
    else:
        end = end_year or ""

    if start and end:
        return f"{start}{RANGE_SEPARATOR}{end}"
    return start or end
