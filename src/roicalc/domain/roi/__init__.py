"""High-level API for modernization ROI estimates."""
from __future__ import annotations

from .contracts import (
    KeyFigure,
    RawRoiMetrics,
    RoiInputs,
    RoiResults,
    apply_display_policy,
    build_raw_metrics,
    compute_roi,
)
from .formatting import format_currency, format_months, format_percentage
from .ui import build_key_figures, map_results_to_ui

__all__ = [
    "KeyFigure",
    "RawRoiMetrics",
    "RoiInputs",
    "RoiResults",
    "apply_display_policy",
    "build_raw_metrics",
    "compute_roi",
    "format_currency",
    "format_months",
    "format_percentage",
    "build_key_figures",
    "map_results_to_ui",
]
