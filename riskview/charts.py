# riskview/charts.py
from __future__ import annotations

from typing import List, Sequence, Tuple

import plotly.graph_objects as go

from riskview.models import ChartPoint


# ── Colour palette ────────────────────────────────────────────────────────────
_CYAN   = "#06b6d4"
_GRID   = "#27272a"
_AXIS   = "#52525b"
_PANEL  = "#18181b"

# Disables plotly's own wheel/drag zoom; the page scrolls normally over the
# chart and the viewport controller is the only zoom source.
STATIC_CONFIG = {"scrollZoom": False, "displayModeBar": False, "doubleClick": False}

ReferenceLine = Tuple[float, str, str]   # (y, colour, label)


def _hex_to_rgba(color: str, alpha: float) -> str:
    c = color.lstrip("#")
    r, g, b = int(c[0:2], 16), int(c[2:4], 16), int(c[4:6], 16)
    return f"rgba({r},{g},{b},{alpha})"


def tick_label(value: float) -> str:
    return f"{value / 1000:.1f}k" if value >= 1000 else f"{value:g}"


def viewport_chart(
    points: Sequence[ChartPoint],
    title: str,
    color: str = _CYAN,
    show_area: bool = True,
    reference_lines: List[ReferenceLine] = (),
    height: int = 240,
) -> go.Figure:
    """
    Single series over the visible viewport. X is categorical (one slot per
    point) so duplicate timestamps stay as separate points in input order.
    """
    xs = list(range(len(points)))
    ys = [p.raw_value for p in points]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=xs, y=ys, mode="lines", name=title,
        line=dict(color=color, width=2, shape="spline"),
        fill="tozeroy" if show_area else None,
        fillcolor=_hex_to_rgba(color, 0.15) if show_area else None,
        customdata=[p.raw_timestamp[:10] for p in points],
        hovertemplate="%{customdata}<br>%{y:,.2f}<extra></extra>",
    ))

    for y, lcolor, label in reference_lines:
        fig.add_hline(
            y=y, line_dash="dash", line_color=lcolor, line_width=1, opacity=0.7,
            annotation_text=label, annotation_position="right",
            annotation_font=dict(color=lcolor, size=9),
        )

    # thin the x labels to ~6 ticks
    step = max(1, len(points) // 6)
    tickvals = xs[::step]
    fig.update_layout(
        height=height,
        margin=dict(l=10, r=40, t=10, b=10),
        showlegend=False,
        plot_bgcolor=_PANEL,
        paper_bgcolor=_PANEL,
        dragmode=False,
        hoverlabel=dict(bgcolor=_PANEL, bordercolor="#3f3f46", font_color="#f4f4f5"),
    )
    fig.update_xaxes(
        tickvals=tickvals, ticktext=[points[i].display_label for i in tickvals],
        showgrid=False, color=_AXIS, tickfont=dict(size=10), fixedrange=True,
    )
    if ys:
        # pin the y axis to the visible data so the area fill never drags it to 0
        lo, hi = min(ys), max(ys)
        pad = max((hi - lo) * 0.08, abs(hi) * 0.01, 1e-9)
        tvals = [lo + (hi - lo) * k / 4 for k in range(5)] if hi > lo else [lo]
        fig.update_yaxes(range=[lo - pad, hi + pad], autorange=False,
                         tickvals=tvals, ticktext=[tick_label(v) for v in tvals])
    fig.update_yaxes(showgrid=True, gridcolor=_GRID, griddash="dot", color=_AXIS,
                     tickfont=dict(size=10), fixedrange=True)
    return fig
