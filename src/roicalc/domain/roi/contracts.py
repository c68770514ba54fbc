"""Pydantic contracts and helpers for modernization ROI estimates."""
from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from roicalc.processing.compute import (
    REASON_NO_PAYBACK,
    REASON_OVERFLOW,
    REASON_ZERO_COST,
    compute_roi_metrics,
    display_payback_months,
    display_roi_percentage,
)

LOGGER = logging.getLogger(__name__)

NOTE_ROI_UNDEFINED = "ROI cannot be calculated: modernization cost is 0."
NOTE_NO_PAYBACK = (
    "Payback period cannot be calculated: annual savings are zero or negative."
)
NOTE_OVERFLOW = (
    "Some figures are too large to calculate. Check the entered amounts."
)

_NOTES_BY_REASON = {
    REASON_ZERO_COST: NOTE_ROI_UNDEFINED,
    REASON_NO_PAYBACK: NOTE_NO_PAYBACK,
    REASON_OVERFLOW: NOTE_OVERFLOW,
}


class RoiInputs(BaseModel):
    """Estimates entered in the calculator form. Money in USD, rates in percent."""

    model_config = ConfigDict(frozen=True)

    current_maintenance_cost: float = Field(250_000.0, ge=0)
    projected_maintenance_cost: float = Field(150_000.0, ge=0)
    current_downtime_hours: float = Field(20.0, ge=0)
    downtime_cost_per_hour: float = Field(5_000.0, ge=0)
    downtime_reduction_percent: float = Field(60.0, ge=0)
    current_deployments_per_year: float = Field(12.0, ge=0)
    deployment_increase_percent: float = Field(200.0, ge=0)
    modernization_cost: float = Field(500_000.0, ge=0)
    productivity_gain_percent: float = Field(25.0, ge=0)
    team_salary_cost: float = Field(800_000.0, ge=0)


class RawRoiMetrics(BaseModel):
    """Every intermediate figure of the ROI math, before the display policy.

    A figure that overflowed is `None`; `undefined_reasons` says why any of
    them, or `roi` / `payback_months`, is missing.
    """

    maintenance_savings: Optional[float]
    current_annual_downtime_cost: Optional[float]
    downtime_savings: Optional[float]
    productivity_value: Optional[float]
    deployment_efficiency_gain: Optional[float]
    total_annual_savings: Optional[float]
    three_year_benefits: Optional[float]
    net_benefit: Optional[float]
    roi: Optional[float] = None
    payback_months: Optional[float] = None
    undefined_reasons: List[str] = Field(default_factory=list)


class RoiResults(BaseModel):
    """Figures shown in the result panel.

    ``roi_percentage`` is floored at 50 and ``payback_months`` is clamped to
    ``[1, 18]``. Either is ``None`` when the underlying ratio is undefined, with
    the reason in ``notes``. The two amounts are ``None`` only when they
    overflowed.
    """

    roi_percentage: Optional[int]
    payback_months: Optional[int]
    net_benefit_3_years: Optional[float]
    annual_savings: Optional[float]
    notes: List[str] = Field(default_factory=list)


class KeyFigure(BaseModel):
    name: str
    value: str
    tone: str


def build_raw_metrics(inputs: RoiInputs) -> RawRoiMetrics:
    """Map the output of `compute_roi_metrics` into the Pydantic model."""

    return RawRoiMetrics(**compute_roi_metrics(**inputs.model_dump()))


def apply_display_policy(raw: RawRoiMetrics) -> RoiResults:
    notes = [_NOTES_BY_REASON[reason] for reason in raw.undefined_reasons]
    roi_percentage = display_roi_percentage(raw.roi)
    payback_months = display_payback_months(raw.payback_months)
    if notes:
        LOGGER.debug("Degenerate ROI result: %s", "; ".join(notes))

    return RoiResults(
        roi_percentage=roi_percentage,
        payback_months=payback_months,
        net_benefit_3_years=raw.net_benefit,
        annual_savings=raw.total_annual_savings,
        notes=notes,
    )


def compute_roi(inputs: RoiInputs) -> RoiResults:
    """Pure mapping from the ten form inputs to the four displayed results."""

    return apply_display_policy(build_raw_metrics(inputs))


__all__ = [
    "NOTE_NO_PAYBACK",
    "NOTE_OVERFLOW",
    "NOTE_ROI_UNDEFINED",
    "KeyFigure",
    "RawRoiMetrics",
    "RoiInputs",
    "RoiResults",
    "apply_display_policy",
    "build_raw_metrics",
    "compute_roi",
]
