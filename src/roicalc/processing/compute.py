# compute.py
import math

DEPLOYMENT_GAIN_CAP = 50_000.0
VALUE_PER_DEPLOYMENT = 1_000.0
ROI_HORIZON_YEARS = 3
ROI_FLOOR_PCT = 50
PAYBACK_FLOOR_MONTHS = 1
PAYBACK_CAP_MONTHS = 18

REASON_ZERO_COST = "zero_cost"
REASON_NO_PAYBACK = "no_payback"
REASON_OVERFLOW = "overflow"


def _finite_or_none(value):
    return value if math.isfinite(value) else None


def round_half_up(value):
    """Round halves toward +infinity: 2.5 -> 3, -2.5 -> -2."""
    return int(math.floor(value + 0.5))


def compute_roi_metrics(
    current_maintenance_cost,
    projected_maintenance_cost,
    current_downtime_hours,
    downtime_cost_per_hour,
    downtime_reduction_percent,
    current_deployments_per_year,
    deployment_increase_percent,
    modernization_cost,
    productivity_gain_percent,
    team_salary_cost,
):
    maintenance_savings = current_maintenance_cost - projected_maintenance_cost
    current_annual_downtime_cost = current_downtime_hours * 12 * downtime_cost_per_hour
    downtime_savings = current_annual_downtime_cost * (downtime_reduction_percent / 100.0)
    productivity_value = team_salary_cost * (productivity_gain_percent / 100.0)
    deployment_efficiency_gain = min(
        DEPLOYMENT_GAIN_CAP,
        current_deployments_per_year
        * VALUE_PER_DEPLOYMENT
        * (deployment_increase_percent / 100.0),
    )
    total_annual_savings = (
        maintenance_savings
        + downtime_savings
        + productivity_value
        + deployment_efficiency_gain
    )
    three_year_benefits = total_annual_savings * ROI_HORIZON_YEARS
    net_benefit = three_year_benefits - modernization_cost

    reasons = []
    roi = None
    payback_months = None
    if not (math.isfinite(total_annual_savings) and math.isfinite(net_benefit)):
        reasons.append(REASON_OVERFLOW)
    else:
        if modernization_cost > 0:
            roi = _finite_or_none((net_benefit / modernization_cost) * 100.0)
            if roi is None:
                reasons.append(REASON_OVERFLOW)
        else:
            reasons.append(REASON_ZERO_COST)

        if total_annual_savings > 0:
            payback_months = _finite_or_none(
                (modernization_cost / total_annual_savings) * 12.0
            )
            if payback_months is None and REASON_OVERFLOW not in reasons:
                reasons.append(REASON_OVERFLOW)
        else:
            reasons.append(REASON_NO_PAYBACK)

    # Nothing non-finite leaves this function; undefined figures are None.
    figures = {
        "maintenance_savings": maintenance_savings,
        "current_annual_downtime_cost": current_annual_downtime_cost,
        "downtime_savings": downtime_savings,
        "productivity_value": productivity_value,
        "deployment_efficiency_gain": deployment_efficiency_gain,
        "total_annual_savings": total_annual_savings,
        "three_year_benefits": three_year_benefits,
        "net_benefit": net_benefit,
    }
    metrics = {key: _finite_or_none(value) for key, value in figures.items()}
    metrics["roi"] = roi
    metrics["payback_months"] = payback_months
    metrics["undefined_reasons"] = reasons
    return metrics


def display_roi_percentage(roi):
    if roi is None or not math.isfinite(roi):
        return None
    return max(ROI_FLOOR_PCT, round_half_up(roi))


def display_payback_months(payback_months):
    if payback_months is None or not math.isfinite(payback_months):
        return None
    months = max(PAYBACK_FLOOR_MONTHS, round_half_up(payback_months))
    return min(PAYBACK_CAP_MONTHS, months)
