# riskview/labels.py
# Display helpers for model output: risk light, gate status, score colours,
# plus the derived series the pages chart.
from __future__ import annotations

from typing import Optional

import pandas as pd

from riskview.models import DataPoint, Dataset

_GREY   = "#64748b"
_GREEN  = "#22c55e"
_AMBER  = "#eab308"
_RED    = "#ef4444"


# ── Risk light / gates ────────────────────────────────────────────────────────

def risk_light_color(risk: Optional[str]) -> str:
    return {"green": _GREEN, "yellow": _AMBER, "red": _RED}.get((risk or "").lower(), _GREY)


def risk_light_label(risk: Optional[str]) -> str:
    labels = {"green": "Low risk", "yellow": "Moderate risk", "red": "High risk"}
    return labels.get((risk or "").lower(), "Unknown")


def risk_light_emoji(risk: Optional[str]) -> str:
    return {"green": "🟢", "yellow": "🟡", "red": "🔴"}.get((risk or "").lower(), "⚪")


def gate_status_color(status: Optional[str]) -> str:
    s = (status or "").lower()
    if s == "open":
        return _GREEN
    if s == "closed":
        return _RED
    if s in ("warning", "caution", "pending"):
        return _AMBER
    return _GREY


def score_color(score: Optional[float]) -> str:
    """Liquidity score: >=70 ample, >=40 neutral, else tight."""
    s = score or 0
    if s >= 70:
        return "#10b981"
    if s >= 40:
        return "#f59e0b"
    return _RED


# ── Number / date formatting ──────────────────────────────────────────────────

def format_number(num: Optional[float], decimals: int = 2) -> str:
    if num is None:
        return "n/a"
    return f"{num:.{decimals}f}"


def format_date(ts: Optional[str]) -> str:
    if not ts:
        return "unknown"
    return pd.Timestamp(ts).strftime("%B %d, %Y")


# ── Derived series ────────────────────────────────────────────────────────────

def scale_series(data: Dataset, factor: float) -> Dataset:
    return [DataPoint(p.ts, p.value * factor) for p in data]


def spread_bp(a: Dataset, b: Dataset) -> Dataset:
    """(a - b) in basis points, paired by position; stops at the shorter series."""
    return [DataPoint(pa.ts, (pa.value - pb.value) * 100) for pa, pb in zip(a, b)]


def leverage_label(coef: Optional[float]) -> str:
    c = coef or 0
    if c <= 0.5:
        return "Conservative"
    if c <= 0.8:
        return "Moderate"
    return "Aggressive"
