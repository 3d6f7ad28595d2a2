import json

import pytest

from resume_gaps.services.resume_service import hydrate_resume, load_resume, parse_resume

RESUME = {
    "contact": {"fullName": "Jordan Lee", "email": "jordan@example.com"},
    "summary": "Backend engineer",
    "experience": [
        {
            "company": "Acme",
            "role": "Engineer",
            "dateRange": "Jan 2018 - Mar 2019",
            "bullets": ["Built the billing pipeline"],
        },
        {
            "company": "Globex",
            "role": "Senior Engineer",
            "dateRange": "",
            "startMonth": "January",
            "startYear": "2020",
            "isCurrentRole": True,
        },
    ],
    "education": [
        {"school": "State University", "degree": "BSc", "fieldOfStudy": "Physics", "dateRange": "2013 – 2017"},
    ],
}


def _write(tmp_path, payload, name="resume.json"):
    path = tmp_path / name
    path.write_text(json.dumps(payload) if not isinstance(payload, str) else payload)
    return path


def test_load_resume(tmp_path):
    resume = load_resume(_write(tmp_path, RESUME))

    assert [exp.company for exp in resume.experience] == ["Acme", "Globex"]
    assert resume.experience[1].is_current_role is True
    assert resume.education[0].field_of_study == "Physics"
    assert resume.model_extra["contact"]["fullName"] == "Jordan Lee"


def test_load_wrapped_resume(tmp_path):
    path = _write(tmp_path, {"resume": RESUME, "coverLetter": "Dear team"})

    resume = load_resume(str(path))

    assert len(resume.experience) == 2
    assert "coverLetter" not in resume.model_extra


def test_hydrate_resume_keeps_camel_case_shape(tmp_path, today):
    resume = load_resume(_write(tmp_path, RESUME))

    data = hydrate_resume(resume, today).to_dict()

    first, second = data["experience"]
    assert first["startMonth"] == "January"
    assert first["endYear"] == "2019"
    assert first["dateRange"] == "January 2018 – March 2019"
    assert first["isCurrentRole"] is False
    assert second["dateRange"] == "January 2020 – Present"
    assert data["education"][0]["dateRange"] == "2013 – 2017"
    assert data["contact"]["email"] == "jordan@example.com"
    assert data["summary"] == "Backend engineer"
    # The loaded resume is not modified
    assert resume.experience[0].start_month is None


def test_load_resume_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_resume(tmp_path / "missing.json")

    with pytest.raises(ValueError):
        load_resume(_write(tmp_path, "{oops", name="broken.json"))

    with pytest.raises(ValueError):
        load_resume(_write(tmp_path, [RESUME], name="list.json"))

    with pytest.raises(ValueError):
        load_resume(_write(tmp_path, {"experience": "nope"}, name="bad.json"))


def test_parse_resume_accepts_snake_case():
    resume = parse_resume({"experience": [{"company": "Acme", "date_range": "2019 - 2020"}]})
    assert resume.experience[0].date_range == "2019 - 2020"
