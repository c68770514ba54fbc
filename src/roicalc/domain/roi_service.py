"""Domain-facing helpers for running the full ROI estimate.

The Streamlit form and the session object both go through here, so input
coercion and the display policy are identical regardless of entrypoint.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from roicalc.domain.roi.contracts import (
    RawRoiMetrics,
    RoiInputs,
    RoiResults,
    apply_display_policy,
    build_raw_metrics,
)
from roicalc.domain.roi.ui import map_results_to_ui

INPUT_FIELDS = tuple(RoiInputs.model_fields)

# Leading decimal literal; trailing text after it is ignored.
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_IGNORED_CHARS = re.compile(r"[\s,_$]")


def as_float(value: Any, default: float = 0.0) -> float:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        candidate = float(value)
        return candidate if math.isfinite(candidate) else default
    if isinstance(value, str):
        text = _IGNORED_CHARS.sub("", value)
        match = _NUMBER_PREFIX.match(text)
        if not match:
            return default
        candidate = float(match.group(0))
        return candidate if math.isfinite(candidate) else default
    return default


def as_amount(value: Any, default: float = 0.0) -> float:
    """Coerce form input to a non-negative number; negatives become 0."""
    candidate = as_float(value, default)
    return candidate if candidate >= 0 else 0.0


def default_params() -> Dict[str, float]:
    return RoiInputs().model_dump()


def normalise_params(params: Mapping[str, Any]) -> Dict[str, float]:
    """Coerce raw form values; missing keys fall back to the form defaults."""
    defaults = default_params()
    return {
        key: as_amount(params[key]) if key in params else defaults[key]
        for key in INPUT_FIELDS
    }


def inputs_from_params(params: Mapping[str, Any]) -> RoiInputs:
    return RoiInputs(**normalise_params(params))


@dataclass
class RoiAnalysis:
    inputs: RoiInputs
    raw_metrics: RawRoiMetrics
    results: RoiResults
    ui: Dict[str, Any]


def analyse_inputs(inputs: RoiInputs, *, include_raw: bool = True) -> RoiAnalysis:
    raw = build_raw_metrics(inputs)
    results = apply_display_policy(raw)
    return RoiAnalysis(
        inputs=inputs,
        raw_metrics=raw,
        results=results,
        ui=map_results_to_ui(results, raw if include_raw else None),
    )


def compute_analysis(
    params: Optional[Mapping[str, Any]] = None, *, include_raw: bool = True
) -> RoiAnalysis:
    return analyse_inputs(inputs_from_params(params or {}), include_raw=include_raw)


__all__ = [
    "INPUT_FIELDS",
    "RoiAnalysis",
    "analyse_inputs",
    "as_amount",
    "as_float",
    "compute_analysis",
    "default_params",
    "inputs_from_params",
    "normalise_params",
]
