# riskview/metrics.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from riskview.models import DataPoint


@dataclass(frozen=True)
class DerivedMetrics:
    latest_value: float
    previous_value: float
    delta: float
    delta_percent: float

    @property
    def is_positive(self) -> bool:
        return self.delta >= 0


def compute_metrics(points: Sequence[DataPoint]) -> DerivedMetrics:
    """Latest value, previous value and change across the last two visible points."""
    latest = float(points[-1].value) if len(points) >= 1 else 0.0
    prev   = float(points[-2].value) if len(points) >= 2 else latest
    delta  = latest - prev
    pct    = (delta / prev) * 100 if prev != 0 else 0.0
    # overflow on extreme inputs is shown as no change rather than inf
    if not np.isfinite(pct):
        pct = 0.0
    return DerivedMetrics(latest_value=latest, previous_value=prev, delta=delta, delta_percent=pct)


# ── Header formatting ─────────────────────────────────────────────────────────

def format_value(v: float) -> str:
    return f"{v:,.2f}"


def format_change(m: DerivedMetrics) -> str:
    sign = "+" if m.is_positive else ""
    return f"{sign}{m.delta_percent:.2f}%"
