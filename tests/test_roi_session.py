import logging

import pytest

from roicalc.domain.roi.contracts import RoiInputs
from roicalc.domain.roi_session import RoiSession, UnknownFieldError


def test_session_starts_with_default_results():
    session = RoiSession()

    assert session.inputs == RoiInputs()
    assert session.results.roi_percentage == 526
    assert session.results.payback_months == 6


def test_session_accepts_initial_params():
    session = RoiSession({"modernization_cost": "1,000,000"})
    assert session.inputs.modernization_cost == 1_000_000.0


def test_set_input_recomputes_and_notifies_once():
    session = RoiSession()
    seen = []
    session.subscribe(seen.append)

    analysis = session.set_input("modernization_cost", "0")

    assert len(seen) == 1
    assert seen[0] is analysis
    assert session.analysis is analysis
    assert session.results.roi_percentage is None
    assert analysis.ui["headline"]["roi"] == "N/A"


def test_update_sets_several_fields_with_one_recompute():
    session = RoiSession()
    seen = []
    session.subscribe(seen.append)

    session.update(current_maintenance_cost="400000", projected_maintenance_cost="-5")

    assert len(seen) == 1
    assert session.inputs.current_maintenance_cost == 400_000.0
    assert session.inputs.projected_maintenance_cost == 0.0


def test_unknown_field_raises_without_recompute():
    session = RoiSession()
    seen = []
    session.subscribe(seen.append)

    with pytest.raises(UnknownFieldError):
        session.set_input("budget", 10)
    assert seen == []


def test_unsubscribe_stops_notifications():
    session = RoiSession()
    seen = []
    unsubscribe = session.subscribe(seen.append)

    unsubscribe()
    unsubscribe()
    session.set_input("team_salary_cost", 1)

    assert seen == []


def test_reset_restores_defaults():
    session = RoiSession({"team_salary_cost": 0})
    session.reset()
    assert session.inputs == RoiInputs()


def test_failing_observer_is_logged_and_others_still_run(caplog):
    session = RoiSession()
    seen = []

    def _broken(_analysis):
        raise RuntimeError("boom")

    session.subscribe(_broken)
    session.subscribe(seen.append)

    with caplog.at_level(logging.ERROR, logger="roicalc.domain.roi_session"):
        session.set_input("current_downtime_hours", "10")

    assert len(seen) == 1
    assert "observer" in caplog.text


def test_session_without_raw_breakdown():
    session = RoiSession(include_raw=False)
    session.set_input("current_downtime_hours", 5)
    assert session.analysis.ui["raw_breakdown"] == []
