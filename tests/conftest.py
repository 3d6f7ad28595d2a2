from datetime import datetime

import pytest

from resume_gaps.config import Settings
from resume_gaps.models import ParsedDate


@pytest.fixture
def today():
    # All date-sensitive tests run as if it were March 2024
    return ParsedDate(month=3, year=2024)


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 3, 15, 9, 30)


@pytest.fixture
def settings(monkeypatch):
    for var in ("GAP_MIN_MONTHS", "GAP_EDUCATION_COVERAGE_RATIO", "GAP_OLD_YEARS", "GAP_SUMMARY_PREVIEW"):
        monkeypatch.delenv(var, raising=False)
    return Settings(_env_file=None)
