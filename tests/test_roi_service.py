import pytest

from roicalc.domain.roi.contracts import RoiInputs, compute_roi
from roicalc.domain.roi_service import (
    INPUT_FIELDS,
    RoiAnalysis,
    as_amount,
    as_float,
    compute_analysis,
    default_params,
    inputs_from_params,
    normalise_params,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("250000", 250_000.0),
        ("250,000", 250_000.0),
        ("$1,250.50", 1_250.5),
        ("  42  ", 42.0),
        ("12abc", 12.0),
        ("1e3", 1_000.0),
        ("3.", 3.0),
        (".5", 0.5),
        ("-7", -7.0),
        ("abc", 0.0),
        ("", 0.0),
        (".", 0.0),
        ("inf", 0.0),
        (None, 0.0),
        (True, 0.0),
        (17, 17.0),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
    ],
)
def test_as_float_mirrors_form_parsing(value, expected):
    assert as_float(value) == expected


def test_as_amount_clamps_negatives_to_zero():
    assert as_amount("-250") == 0.0
    assert as_amount(-1) == 0.0
    assert as_amount("99.5") == 99.5


def test_normalise_params_uses_defaults_for_missing_keys():
    params = normalise_params({"modernization_cost": "750,000", "team_salary_cost": "oops"})

    assert set(params) == set(INPUT_FIELDS)
    assert params["modernization_cost"] == 750_000.0
    assert params["team_salary_cost"] == 0.0
    assert params["current_maintenance_cost"] == default_params()["current_maintenance_cost"]


def test_normalise_params_ignores_unknown_keys():
    params = normalise_params({"not_a_field": 5})
    assert params == default_params()


def test_compute_analysis_matches_contract_flow():
    params = {
        "current_maintenance_cost": "250,000",
        "projected_maintenance_cost": "150000",
        "current_downtime_hours": 20,
        "downtime_cost_per_hour": "5000",
        "downtime_reduction_percent": "60",
        "current_deployments_per_year": "12",
        "deployment_increase_percent": "200",
        "modernization_cost": "$500,000",
        "productivity_gain_percent": "25",
        "team_salary_cost": "800000",
    }

    analysis = compute_analysis(params)

    assert isinstance(analysis, RoiAnalysis)
    assert analysis.inputs == RoiInputs()
    assert analysis.results == compute_roi(RoiInputs())
    assert analysis.ui["headline"] == {
        "roi": "+526% 🚀",
        "payback_months": "6",
        "net_benefit_3_years": "$2,632,000",
        "annual_savings": "$1,044,000",
    }
    assert analysis.ui["raw_breakdown"]


def test_compute_analysis_without_params_uses_defaults():
    analysis = compute_analysis()
    assert analysis.results.roi_percentage == 526
    assert analysis.results.payback_months == 6


def test_compute_analysis_can_hide_raw_breakdown():
    analysis = compute_analysis({}, include_raw=False)
    assert analysis.ui["raw_breakdown"] == []
    assert analysis.raw_metrics.total_annual_savings == pytest.approx(1_044_000)


def test_garbage_cost_text_yields_placeholder_not_nan():
    analysis = compute_analysis({"modernization_cost": "not a number"})

    assert analysis.inputs.modernization_cost == 0.0
    assert analysis.results.roi_percentage is None
    assert analysis.ui["headline"]["roi"] == "N/A"


def test_inputs_from_params_returns_contract():
    inputs = inputs_from_params({"current_downtime_hours": "-3"})
    assert inputs.current_downtime_hours == 0.0
