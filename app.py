# app.py
import streamlit as st

from riskview.config import OVERVIEW_SYMBOLS
from riskview.labels import (
    format_date, format_number, leverage_label,
    risk_light_color, risk_light_emoji, risk_light_label, score_color,
)
from riskview.state import load_series, model_controls
from riskview.ui import chart_grid, gate_pill_html, inject_css, metric_tile, sidebar_nav, topbar

st.set_page_config(
    page_title="Risk View",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded",
)

inject_css()
sidebar_nav(active="Overview")

output = model_controls("overview")
topbar("Market overview", f"Data date: {format_date(output.data_ts)}" if output else "")

if output is None:
    st.info("Ready. Press **Run model** to start the analysis.")
    st.stop()

# ── Headline tiles ────────────────────────────────────────────────────────────

liq = output.liquidity
c1, c2, c3, c4 = st.columns(4)
with c1:
    metric_tile("Risk light", risk_light_emoji(output.risk_light),
                risk_light_label(output.risk_light), risk_light_color(output.risk_light))
with c2:
    score = liq.liquidity_score if liq else None
    metric_tile("Liquidity score", format_number(score), "out of 100", score_color(score))
with c3:
    lev = liq.leverage_coef if liq else None
    metric_tile("Leverage", f"{format_number(lev, 1)}x", leverage_label(lev))
with c4:
    metric_tile("Execution time", f"{output.execution_time_ms:.0f}ms", output.status, "#a855f7")

# ── Report ────────────────────────────────────────────────────────────────────

if output.report_summary:
    st.markdown("<div class='rv-rowtitle'>Model report</div>", unsafe_allow_html=True)
    st.code(output.report_summary, language=None)

# ── Gates ─────────────────────────────────────────────────────────────────────

gates = output.macro.gates if output.macro else []
if gates:
    st.markdown("<div class='rv-rowtitle'>🚦 Gate matrix</div>", unsafe_allow_html=True)
    cols = st.columns(3)
    for i, g in enumerate(gates):
        with cols[i % 3]:
            st.markdown(
                f"<div class='rv-card'><div class='rv-card-title'>{g.name}</div>"
                f"{gate_pill_html(g)}<div class='rv-subtle'>{g.message or ''}</div></div>",
                unsafe_allow_html=True,
            )

# ── Alerts ────────────────────────────────────────────────────────────────────

for a in output.alerts:
    show = {"CRITICAL": st.error, "WARNING": st.warning}.get(a.level, st.info)
    show(f"**{a.type}** {a.message}")

# ── Market charts ─────────────────────────────────────────────────────────────

st.markdown("<div class='rv-rowtitle'>Markets</div>", unsafe_allow_html=True)
chart_grid(load_series(tuple(OVERVIEW_SYMBOLS)), OVERVIEW_SYMBOLS, prefix="overview")
