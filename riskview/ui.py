# riskview/ui.py
# Shared UI helpers, imported by every page.
from __future__ import annotations

from typing import List, MutableMapping, Optional

import streamlit as st

from riskview.charts import STATIC_CONFIG, ReferenceLine, viewport_chart
from riskview.config import CHARTS
from riskview.labels import gate_status_color
from riskview.metrics import format_change, format_value
from riskview.models import Dataset, GateStatus
from riskview.ranges import RANGES, select_range
from riskview.viewport import ChartView, ViewportState, apply_zoom, build_view, pick_range, replace_dataset

# Wheel notches delivered per button press
ZOOM_TICKS_PER_CLICK = 5


# ── Colour helpers ────────────────────────────────────────────────────────────

def delta_color(value: Optional[float], inverse: bool = False) -> str:
    """Green/red text colour.  inverse=True for series where up = bad (e.g. credit spreads)."""
    if value is None:
        return "#71717a"
    good = value >= 0
    if inverse:
        good = not good
    return "#34d399" if good else "#f87171"


# ── Navigation ────────────────────────────────────────────────────────────────

_PAGES = {
    "Overview":  "app.py",
    "Liquidity": "pages/1_Liquidity.py",
    "Macro":     "pages/2_Macro.py",
    "History":   "pages/3_History.py",
}


def safe_switch_page(path: str):
    try:
        st.switch_page(path)
    except Exception:
        st.error(f"Missing page: {path}. Check your pages folder.")


def sidebar_nav(active: str = "Overview"):
    st.sidebar.title("Risk View")
    st.sidebar.markdown(
        "<div style='font-size:11px;color:#71717a;margin-bottom:6px;'>Navigation</div>",
        unsafe_allow_html=True,
    )
    for name, path in _PAGES.items():
        is_active = name == active
        label = f"**{name}**" if is_active else name
        if st.sidebar.button(label, key=f"sidenav_{name}", use_container_width=True, disabled=is_active):
            safe_switch_page(path)


# ── CSS ───────────────────────────────────────────────────────────────────────

def inject_css():
    st.markdown(
        """
        <style>
        @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800&display=swap');

        html, body, [class*="css"] { font-family: 'Inter', sans-serif; }
        .block-container { max-width: 1200px; padding-top: 3.5rem; padding-bottom: 4rem; }

        /* ── Topbar ── */
        .rv-topbar { display:flex; justify-content:space-between; align-items:baseline; margin-bottom:18px; }
        .rv-title  { font-size:26px; font-weight:800; color:#f4f4f5; }
        .rv-subtle { font-size:12px; color:#71717a; }

        /* ── Cards ── */
        .rv-card {
          border-radius:16px; padding:14px 18px; margin-bottom:10px;
          background:linear-gradient(135deg, rgba(24,24,27,0.85), rgba(9,9,11,0.85));
          border:1px solid rgba(63,63,70,0.5);
        }
        .rv-card-title { font-size:13px; font-weight:500; color:#d4d4d8; }
        .rv-card-value { font-size:20px; font-weight:700; text-align:right; }
        .rv-card-delta { font-size:11px; font-weight:600; text-align:right; }
        .rv-rowtitle   { font-size:17px; font-weight:700; color:#e4e4e7; margin:22px 0 10px 0; }

        /* ── Gate pill ── */
        .rv-pill {
          display:inline-block; padding:3px 10px; border-radius:999px;
          font-size:11px; font-weight:700; color:#09090b;
        }

        @media (max-width: 640px) {
          .rv-title { font-size:20px; }
          [data-testid="column"] { width:100% !important; flex:1 1 100% !important; }
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def topbar(title: str, subtitle: str = ""):
    st.markdown(
        f"""<div class="rv-topbar">
          <div class="rv-title">{title}</div>
          <div class="rv-subtle">{subtitle}</div>
        </div>""",
        unsafe_allow_html=True,
    )


def gate_pill_html(gate: GateStatus) -> str:
    color = gate_status_color(gate.status)
    return f"<span class='rv-pill' style='background:{color};'>{gate.status.upper()}</span>"


# ── Viewport session state ────────────────────────────────────────────────────

def _state_key(key: str) -> str:
    return f"viewport_{key}"


def current_viewport(store: MutableMapping, key: str, dataset: Dataset, now=None) -> ViewportState:
    """
    Viewport for chart `key`, created on first use. A slice is moved onto
    the newest point of freshly loaded data, or reset when it no longer fits.
    """
    state = store.get(_state_key(key)) or ViewportState()
    length = len(select_range(dataset, state.range_key, now=now))
    state = replace_dataset(state, length)
    store[_state_key(key)] = state
    return state


def on_range_pick(store: MutableMapping, key: str, range_key: str) -> ViewportState:
    state = pick_range(store.get(_state_key(key)) or ViewportState(), range_key)
    store[_state_key(key)] = state
    return state


def on_zoom_event(store: MutableMapping, key: str, dataset: Dataset, delta: float,
                  ticks: int = 1, now=None) -> ViewportState:
    state = current_viewport(store, key, dataset, now=now)
    length = len(select_range(dataset, state.range_key, now=now))
    for _ in range(ticks):
        state = apply_zoom(state, delta, length)
    store[_state_key(key)] = state
    return state


# ── Chart card ────────────────────────────────────────────────────────────────

def _card_header(title: str, view: ChartView, color: str):
    m = view.metrics
    st.markdown(
        f"""<div class="rv-card" style="display:flex;justify-content:space-between;align-items:center;">
          <div class="rv-card-title">{title}</div>
          <div>
            <div class="rv-card-value" style="color:{color};">{format_value(m.latest_value)}</div>
            <div class="rv-card-delta" style="color:{delta_color(m.delta)};">{format_change(m)}</div>
          </div>
        </div>""",
        unsafe_allow_html=True,
    )


def chart_card(
    key: str,
    dataset: Dataset,
    title: str,
    color: str = "#06b6d4",
    show_area: bool = True,
    reference_lines: List[ReferenceLine] = (),
):
    """Preset range picker, zoom buttons, metric header and the chart itself."""
    store = st.session_state
    state = current_viewport(store, key, dataset)

    keys = list(RANGES.keys())
    c_range, c_in, c_out = st.columns([6, 1, 1])
    with c_range:
        picked = st.radio(
            "Range", keys, index=keys.index(state.range_key), horizontal=True,
            key=f"range_{key}", label_visibility="collapsed",
        )
    if picked != state.range_key:
        state = on_range_pick(store, key, picked)
    with c_in:
        if st.button("＋", key=f"zoom_in_{key}", help="Zoom in"):
            state = on_zoom_event(store, key, dataset, delta=-1, ticks=ZOOM_TICKS_PER_CLICK)
    with c_out:
        if st.button("－", key=f"zoom_out_{key}", help="Zoom out"):
            state = on_zoom_event(store, key, dataset, delta=1, ticks=ZOOM_TICKS_PER_CLICK)

    view = build_view(dataset, state)
    _card_header(title, view, color)
    if not view.points:
        st.caption("No data in this range.")
        return
    st.plotly_chart(
        viewport_chart(view.points, title=title, color=color, show_area=show_area,
                       reference_lines=list(reference_lines)),
        use_container_width=True,
        config=STATIC_CONFIG,
        key=f"chart_{key}",
    )


def chart_grid(series: dict, symbols: List[str], prefix: str, cols: int = 2):
    """Two-up grid of chart cards for the symbols that returned data."""
    shown = [s for s in symbols if series.get(s)]
    if not shown:
        st.info("No market data available.")
        return
    grid = st.columns(cols)
    for i, sym in enumerate(shown):
        spec = CHARTS.get(sym, dict(title=sym, color="#06b6d4", area=True, refs=[]))
        with grid[i % cols]:
            chart_card(
                key=f"{prefix}_{sym}",
                dataset=series[sym],
                title=spec["title"],
                color=spec["color"],
                show_area=spec["area"],
                reference_lines=spec["refs"],
            )


def metric_tile(label: str, value: str, sublabel: str = "", color: str = "#06b6d4"):
    st.markdown(
        f"""<div class="rv-card">
          <div class="rv-subtle">{label}</div>
          <div style="font-size:26px;font-weight:800;color:{color};">{value}</div>
          <div class="rv-subtle">{sublabel}</div>
        </div>""",
        unsafe_allow_html=True,
    )
