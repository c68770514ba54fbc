"""Holds the form state for one UI session and recomputes on every change."""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional

from roicalc.domain.roi.contracts import RoiInputs, RoiResults
from roicalc.domain.roi_service import (
    INPUT_FIELDS,
    RoiAnalysis,
    analyse_inputs,
    as_amount,
    inputs_from_params,
)

LOGGER = logging.getLogger(__name__)

Observer = Callable[[RoiAnalysis], None]


class UnknownFieldError(KeyError):
    """Raised when a caller addresses an input the calculator does not have."""


class RoiSession:
    def __init__(
        self,
        params: Optional[Mapping[str, Any]] = None,
        *,
        include_raw: bool = True,
    ) -> None:
        self._include_raw = include_raw
        self._observers: List[Observer] = []
        self._analysis = analyse_inputs(
            inputs_from_params(params or {}), include_raw=include_raw
        )

    @property
    def analysis(self) -> RoiAnalysis:
        return self._analysis

    @property
    def inputs(self) -> RoiInputs:
        return self._analysis.inputs

    @property
    def results(self) -> RoiResults:
        return self._analysis.results

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer``; the returned callable removes it again."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def set_input(self, field: str, value: Any) -> RoiAnalysis:
        return self.update(**{field: value})

    def update(self, **values: Any) -> RoiAnalysis:
        unknown = sorted(set(values) - set(INPUT_FIELDS))
        if unknown:
            raise UnknownFieldError(", ".join(unknown))
        coerced = {key: as_amount(value) for key, value in values.items()}
        return self._recompute(self.inputs.model_copy(update=coerced))

    def reset(self) -> RoiAnalysis:
        return self._recompute(RoiInputs())

    def _recompute(self, inputs: RoiInputs) -> RoiAnalysis:
        self._analysis = analyse_inputs(inputs, include_raw=self._include_raw)
        for observer in list(self._observers):
            try:
                observer(self._analysis)
            except Exception:
                LOGGER.exception("ROI observer %r failed", observer)
        return self._analysis


__all__ = ["Observer", "RoiSession", "UnknownFieldError"]
