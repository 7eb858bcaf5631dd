#!/usr/bin/env python3
"""
Tests for display helpers and derived series.
"""
import pytest

from riskview.labels import (
    format_date,
    format_number,
    gate_status_color,
    leverage_label,
    risk_light_color,
    risk_light_emoji,
    risk_light_label,
    scale_series,
    score_color,
    spread_bp,
)
from riskview.models import DataPoint


@pytest.mark.parametrize("risk,color,label,emoji", [
    ("green", "#22c55e", "Low risk", "🟢"),
    ("YELLOW", "#eab308", "Moderate risk", "🟡"),
    ("red", "#ef4444", "High risk", "🔴"),
    ("unknown", "#64748b", "Unknown", "⚪"),
    (None, "#64748b", "Unknown", "⚪"),
])
def test_risk_light(risk, color, label, emoji):
    assert risk_light_color(risk) == color
    assert risk_light_label(risk) == label
    assert risk_light_emoji(risk) == emoji


def test_gate_status_color():
    assert gate_status_color("open") == "#22c55e"
    assert gate_status_color("closed") == "#ef4444"
    assert gate_status_color("caution") == "#eab308"
    assert gate_status_color(None) == "#64748b"


def test_score_and_leverage_bands():
    assert score_color(70) == "#10b981"
    assert score_color(40) == "#f59e0b"
    assert score_color(39.9) == "#ef4444"
    assert leverage_label(0.5) == "Conservative"
    assert leverage_label(0.8) == "Moderate"
    assert leverage_label(1.2) == "Aggressive"


def test_formatting():
    assert format_number(0.6, 1) == "0.6"
    assert format_number(None) == "n/a"
    assert format_date("2026-10-19T08:00:00Z") == "October 19, 2026"
    assert format_date("") == "unknown"


def test_spread_bp_pairs_by_position():
    sofr = [DataPoint("d1", 4.33), DataPoint("d2", 4.36), DataPoint("d3", 4.40)]
    iorb = [DataPoint("d1", 4.30), DataPoint("d2", 4.30)]
    out = spread_bp(sofr, iorb)
    assert [p.ts for p in out] == ["d1", "d2"]
    assert [p.value for p in out] == pytest.approx([3.0, 6.0])


def test_scale_series():
    out = scale_series([DataPoint("d1", 6_700_000.0)], 1e-6)
    assert out[0].value == pytest.approx(6.7)
