"""Builds the result panel data shown next to the form."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from roicalc.domain.roi.contracts import KeyFigure, RawRoiMetrics, RoiResults
from roicalc.domain.roi.formatting import (
    PLACEHOLDER,
    format_currency,
    format_months,
    format_percentage,
)

_RAW_LABELS = (
    ("maintenance_savings", "Maintenance savings"),
    ("downtime_savings", "Downtime savings"),
    ("productivity_value", "Productivity value"),
    ("deployment_efficiency_gain", "Deployment efficiency gain"),
    ("total_annual_savings", "Total annual savings"),
    ("three_year_benefits", "3-year benefits"),
    ("net_benefit", "3-year net benefit"),
)


def tone_for_amount(value: Optional[float]) -> str:
    if value is None:
        return "neutral"
    if value < 0:
        return "red"
    if value == 0:
        return "neutral"
    return "green"


def headline_roi(results: RoiResults) -> str:
    if results.roi_percentage is None:
        return PLACEHOLDER
    return f"{format_percentage(results.roi_percentage)} 🚀"


def build_key_figures(results: RoiResults) -> List[KeyFigure]:
    return [
        KeyFigure(
            name="Projected ROI",
            value=headline_roi(results),
            tone="neutral" if results.roi_percentage is None else "green",
        ),
        KeyFigure(
            name="Months to Break Even",
            value=format_months(results.payback_months),
            tone="neutral" if results.payback_months is None else "green",
        ),
        KeyFigure(
            name="Net Benefit in 3 Years",
            value=format_currency(results.net_benefit_3_years),
            tone=tone_for_amount(results.net_benefit_3_years),
        ),
        KeyFigure(
            name="Annual Savings",
            value=format_currency(results.annual_savings),
            tone=tone_for_amount(results.annual_savings),
        ),
    ]


def build_raw_breakdown(raw: RawRoiMetrics) -> List[Dict[str, str]]:
    rows = [
        {"name": label, "value": format_currency(getattr(raw, key))}
        for key, label in _RAW_LABELS
    ]
    rows.append(
        {
            "name": "Uncapped ROI",
            "value": PLACEHOLDER if raw.roi is None else f"{raw.roi:.1f}%",
        }
    )
    rows.append(
        {
            "name": "Uncapped payback",
            "value": PLACEHOLDER
            if raw.payback_months is None
            else f"{raw.payback_months:.1f} months",
        }
    )
    return rows


def map_results_to_ui(
    results: RoiResults, raw: Optional[RawRoiMetrics] = None
) -> Dict[str, Any]:
    """Result panel data for a computed estimate."""

    return {
        "headline": {
            "roi": headline_roi(results),
            "payback_months": format_months(results.payback_months),
            "net_benefit_3_years": format_currency(results.net_benefit_3_years),
            "annual_savings": format_currency(results.annual_savings),
        },
        "key_figures": [figure.model_dump() for figure in build_key_figures(results)],
        "notes": list(results.notes),
        "raw_breakdown": build_raw_breakdown(raw) if raw is not None else [],
    }


__all__ = [
    "build_key_figures",
    "build_raw_breakdown",
    "headline_roi",
    "map_results_to_ui",
    "tone_for_amount",
]
