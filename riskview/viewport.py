# riskview/viewport.py
"""
Viewport state for one chart: the selected preset range plus the zoom slice
into the range-filtered data. Transitions are pure and return new states;
`ViewportController` is the long-lived owner used by the UI layer.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional

import pandas as pd

from riskview.logging_setup import get_logger
from riskview.metrics import DerivedMetrics, compute_metrics
from riskview.models import ChartPoint, Dataset
from riskview.ranges import DEFAULT_RANGE, RANGES, parse_timestamps, select_range
from riskview.zoom import FULL, ViewportSlice, on_zoom, reanchor, visible

logger = get_logger(__name__)

DATE_LABEL_FORMAT = "%b %d"


@dataclass(frozen=True)
class ViewportState:
    range_key: str = DEFAULT_RANGE
    slice: ViewportSlice = FULL


# ── Transitions ───────────────────────────────────────────────────────────────

def pick_range(state: ViewportState, key: str) -> ViewportState:
    if key not in RANGES:
        key = DEFAULT_RANGE
    return ViewportState(range_key=key, slice=FULL)


def apply_zoom(state: ViewportState, delta: float, length: int) -> ViewportState:
    new_slice = on_zoom(delta, state.slice, length)
    if new_slice is state.slice:
        return state
    return replace(state, slice=new_slice)


def replace_dataset(state: ViewportState, length: int) -> ViewportState:
    new_slice = reanchor(state.slice, length)
    if new_slice is state.slice:
        return state
    return replace(state, slice=new_slice)


# ── Derived view ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ChartView:
    points: List[ChartPoint]
    metrics: DerivedMetrics
    filtered_length: int


def to_chart_points(dataset: Dataset) -> List[ChartPoint]:
    if not dataset:
        return []
    labels = parse_timestamps(dataset).strftime(DATE_LABEL_FORMAT)
    return [
        ChartPoint(display_label=lbl, raw_value=float(p.value), raw_timestamp=p.ts)
        for p, lbl in zip(dataset, labels)
    ]


def build_view(dataset: Dataset, state: ViewportState, now=None) -> ChartView:
    filtered = select_range(dataset, state.range_key, now=now)
    # a slice left over from older data is anchored to the newest point
    current = reanchor(state.slice, len(filtered))
    shown = visible(filtered, current)
    return ChartView(
        points=to_chart_points(shown),
        metrics=compute_metrics(shown),
        filtered_length=len(filtered),
    )


class ViewportController:
    """Owns the dataset and viewport state of a single chart."""

    def __init__(self, dataset: Optional[Dataset] = None, range_key: str = DEFAULT_RANGE, now=None):
        self.dataset: Dataset = list(dataset or [])
        self.state = ViewportState(range_key=range_key if range_key in RANGES else DEFAULT_RANGE)
        self._now = now

    def _now_ts(self):
        return self._now if self._now is not None else pd.Timestamp.now(tz="UTC")

    def _filtered_length(self) -> int:
        return len(select_range(self.dataset, self.state.range_key, now=self._now_ts()))

    def set_dataset(self, dataset: Dataset) -> ViewportState:
        self.dataset = list(dataset or [])
        new_state = replace_dataset(self.state, self._filtered_length())
        if new_state is not self.state:
            logger.debug(f"Dataset replaced ({len(self.dataset)} points): {self.state.slice!r} -> {new_state.slice!r}")
        self.state = new_state
        return self.state

    def select_range(self, key: str) -> ViewportState:
        self.state = pick_range(self.state, key)
        logger.debug(f"Range selected: {self.state.range_key}")
        return self.state

    def zoom(self, delta: float) -> ViewportState:
        new_state = apply_zoom(self.state, delta, self._filtered_length())
        if new_state is not self.state:
            logger.debug(f"Zoom {'out' if delta > 0 else 'in'}: {self.state.slice!r} -> {new_state.slice!r}")
        self.state = new_state
        return self.state

    def view(self) -> ChartView:
        return build_view(self.dataset, self.state, now=self._now_ts())
