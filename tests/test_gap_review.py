import pytest

from resume_gaps.models import ResolutionStatus, ResolutionType, ResumeExperience
from resume_gaps.services.gap_detection_service import detect_gaps
from resume_gaps.services.gap_review_service import (
    attach_suggestions,
    dismiss_gap,
    format_duration,
    initial_resolutions,
    mark_suggesting,
    resolve_gap,
    summarize_gaps,
    sync_resolutions,
    undo_resolution,
)


@pytest.fixture
def gaps(today, settings):
    experiences = [
        ResumeExperience(company="Acme", role="Analyst", date_range="Jan 2015 – Mar 2016"),
        ResumeExperience(company="Globex", role="Engineer", date_range="Jan 2017 – Jun 2018"),
        ResumeExperience(company="Initech", role="Engineer", date_range="Jan 2019 – Dec 2019"),
        ResumeExperience(company="Hooli", role="Lead", date_range="Jun 2020 – Present"),
    ]
    return detect_gaps(experiences, [], today=today, settings=settings)


def test_fixture_gaps(gaps):
    assert [g.id for g in gaps] == ["gap-0-20163", "gap-1-20186", "gap-2-201912"]


def test_summary_without_gaps():
    summary = summarize_gaps([], [])

    assert summary.total_gaps == 0
    assert summary.addressed_gaps == 0
    assert summary.all_addressed is True
    assert summary.summary_text == "No employment gaps detected"


def test_summary_lists_first_two_remaining(gaps):
    summary = summarize_gaps(gaps, initial_resolutions(gaps))

    assert summary.total_gaps == 3
    assert summary.addressed_gaps == 0
    assert summary.all_addressed is False
    assert len(summary.remaining_gaps) == 3
    assert summary.summary_text == "3 gaps remaining (Mar 2016 – Jan 2017, Jun 2018 – Jan 2019)"


def test_summary_preview_count(gaps):
    summary = summarize_gaps(gaps, [], preview_count=1)
    assert summary.summary_text == "3 gaps remaining (Mar 2016 – Jan 2017)"


def test_resolved_and_dismissed_count_as_addressed(gaps):
    states = initial_resolutions(gaps)
    states = dismiss_gap(states, gaps[0].id)
    states = resolve_gap(states, gaps[1].id, "project", {"name": "Side project"})
    states = mark_suggesting(states, gaps[2].id)

    summary = summarize_gaps(gaps, states)

    assert summary.addressed_gaps == 2
    assert [g.id for g in summary.remaining_gaps] == [gaps[2].id]
    assert summary.summary_text == "1 gap remaining (Dec 2019 – Jun 2020)"


def test_all_addressed(gaps):
    states = initial_resolutions(gaps)
    for gap in gaps:
        states = dismiss_gap(states, gap.id)

    summary = summarize_gaps(gaps, states)

    assert summary.all_addressed is True
    assert summary.summary_text == "3 gaps addressed"
    assert summarize_gaps(gaps[:1], states[:1]).summary_text == "1 gap addressed"


def test_resolution_lifecycle(gaps):
    gap_id = gaps[0].id
    states = initial_resolutions(gaps)
    assert all(s.status == ResolutionStatus.PENDING for s in states)

    suggesting = mark_suggesting(states, gap_id)
    assert suggesting[0].status == ResolutionStatus.SUGGESTING

    suggested = attach_suggestions(suggesting, gap_id, [
        {"type": "freelance", "title": "Freelance analytics", "description": "Dashboards for local clients"},
    ])
    assert suggested[0].status == ResolutionStatus.PENDING
    assert suggested[0].ai_suggestions[0].type == ResolutionType.FREELANCE

    resolved = resolve_gap(suggested, gap_id, ResolutionType.FREELANCE, {"company": "Self-employed"})
    assert resolved[0].status == ResolutionStatus.RESOLVED
    assert resolved[0].resolution_type == ResolutionType.FREELANCE
    assert resolved[0].added_data == {"company": "Self-employed"}

    undone = undo_resolution(resolved, gap_id)
    assert undone[0].status == ResolutionStatus.PENDING
    assert undone[0].resolution_type is None
    assert undone[0].added_data is None
    # Suggestions outlive an undo so the user can pick another one
    assert undone[0].ai_suggestions is not None

    # Earlier snapshots are untouched
    assert states[0].status == ResolutionStatus.PENDING
    assert resolved[0].status == ResolutionStatus.RESOLVED


def test_failed_suggestion_returns_to_pending(gaps):
    states = mark_suggesting(initial_resolutions(gaps), gaps[0].id)

    states = attach_suggestions(states, gaps[0].id, None)

    assert states[0].status == ResolutionStatus.PENDING
    assert states[0].ai_suggestions is None


def test_dismiss_sets_dismissed_type(gaps):
    states = dismiss_gap(initial_resolutions(gaps), gaps[1].id)

    assert states[1].status == ResolutionStatus.DISMISSED
    assert states[1].resolution_type == ResolutionType.DISMISSED
    assert states[0].status == ResolutionStatus.PENDING


def test_unknown_gap_id_changes_nothing(gaps):
    states = initial_resolutions(gaps)
    assert dismiss_gap(states, "gap-9-20001") == states


def test_sync_resolutions(gaps):
    states = dismiss_gap(initial_resolutions(gaps), gaps[1].id)
    states = states[1:] + [states[0].model_copy(update={"gap_id": "gap-7-20101"})]

    synced = sync_resolutions(gaps, states)

    assert [s.gap_id for s in synced] == [g.id for g in gaps]
    assert synced[0].status == ResolutionStatus.PENDING
    assert synced[1].status == ResolutionStatus.DISMISSED
    assert synced[2].status == ResolutionStatus.PENDING


def test_invalid_resolution_type_is_rejected(gaps):
    with pytest.raises(ValueError):
        resolve_gap(initial_resolutions(gaps), gaps[0].id, "vacation")


@pytest.mark.parametrize("months, expected", [
    (1, "1 month"),
    (5, "5 months"),
    (12, "1 year"),
    (13, "1 year, 1 month"),
    (27, "2 years, 3 months"),
    (36, "3 years"),
])
def test_format_duration(months, expected):
    assert format_duration(months) == expected


def test_zero_preview_count_omits_gap_list(gaps):
    summary = summarize_gaps(gaps, [], preview_count=0)
    assert summary.summary_text == "3 gaps remaining"
