"""Utility modules."""

from .logger import get_logger, setup_logging, setup_logging_from_settings
from .file_utils import load_json
from .clock import Clock, current_month, resolve_today, system_clock
from .date_parser import (
    format_parsed_date,
    is_present_token,
    is_single_date_token,
    month_abbrev,
    month_name,
    parse_date_token,
    parse_month,
    parse_year,
)
from .date_range import format_date_range, split_range

__all__ = [
    "get_logger",
    "setup_logging",
    "setup_logging_from_settings",
    "load_json",
    "Clock",
    "current_month",
    "resolve_today",
    "system_clock",
    "format_parsed_date",
    "is_present_token",
    "is_single_date_token",
    "month_abbrev",
    "month_name",
    "parse_date_token",
    "parse_month",
    "parse_year",
    "format_date_range",
    "split_range",
]
