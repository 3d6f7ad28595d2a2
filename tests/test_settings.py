import json
import logging

import pytest

from resume_gaps.config import Settings, get_settings
from resume_gaps.utils.logger import setup_logging_from_settings


def test_defaults(settings):
    assert settings.min_gap_months == 3
    assert settings.education_coverage_ratio == 0.5
    assert settings.old_gap_years == 10
    assert settings.summary_preview_count == 2


def test_environment_overrides(settings, monkeypatch):
    monkeypatch.setenv("GAP_MIN_MONTHS", "6")
    monkeypatch.setenv("GAP_EDUCATION_COVERAGE_RATIO", "0.75")

    configured = Settings(_env_file=None)

    assert configured.min_gap_months == 6
    assert configured.education_coverage_ratio == 0.75


def test_from_json(settings, tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"min_gap_months": 4, "old_gap_years": 5}))

    configured = Settings.from_json(str(config_file))

    assert configured.min_gap_months == 4
    assert configured.old_gap_years == 5
    assert configured.education_coverage_ratio == 0.5


def test_from_json_errors(settings, tmp_path):
    with pytest.raises(FileNotFoundError):
        Settings.from_json(str(tmp_path / "missing.json"))

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(ValueError):
        Settings.from_json(str(broken))

    out_of_range = tmp_path / "ratio.json"
    out_of_range.write_text(json.dumps({"education_coverage_ratio": 1.5}))
    with pytest.raises(ValueError):
        Settings.from_json(str(out_of_range))


def test_get_settings_is_cached(settings, tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"summary_preview_count": 1}))
    get_settings.cache_clear()

    try:
        first = get_settings(str(config_file))
        assert first.summary_preview_count == 1
        assert get_settings(str(config_file)) is first
    finally:
        get_settings.cache_clear()


def test_to_dict(settings):
    data = settings.to_dict()

    assert data["min_gap_months"] == 3
    assert "log_file" not in data


def test_setup_logging_from_settings(tmp_path):
    log_file = tmp_path / "logs" / "gaps.log"
    root = logging.getLogger()
    previous_level = root.level
    configured = Settings(_env_file=None, log_level="warning", log_file=str(log_file))

    try:
        setup_logging_from_settings(configured)
        assert logging.getLogger().level == logging.WARNING
        assert log_file.parent.exists()

        setup_logging_from_settings(Settings(_env_file=None, debug=True))
        assert logging.getLogger().level == logging.DEBUG
    finally:
        for handler in root.handlers[:]:
            handler.close()
            root.removeHandler(handler)
        root.setLevel(previous_level)
