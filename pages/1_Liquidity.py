# pages/1_Liquidity.py
import pandas as pd
import streamlit as st

from riskview.config import CHARTS, LIQUIDITY_SYMBOLS
from riskview.labels import format_number, risk_light_color, risk_light_emoji, risk_light_label, score_color
from riskview.state import load_series, model_controls, sofr_iorb_spread
from riskview.ui import chart_card, chart_grid, inject_css, metric_tile, sidebar_nav, topbar

st.set_page_config(page_title="Liquidity", layout="wide", initial_sidebar_state="expanded")
inject_css()
sidebar_nav(active="Liquidity")

output = model_controls("liquidity")
topbar("Dollar liquidity", "Liquidity model v3")

if output is None or output.liquidity is None:
    st.info("Press **Run model** to load the liquidity model.")
    st.stop()

liq = output.liquidity

c1, c2, c3 = st.columns(3)
with c1:
    metric_tile("Risk light", risk_light_emoji(liq.risk_light), risk_light_label(liq.risk_light),
                risk_light_color(liq.risk_light))
with c2:
    metric_tile("Liquidity score", format_number(liq.liquidity_score), "out of 100", score_color(liq.liquidity_score))
with c3:
    adj = liq.supply_texture_adjustment
    metric_tile("Supply texture", f"{adj:+.1f}", "score adjustment (max ±5)")

if liq.hard_stop_triggered:
    st.error(f"Hard stop triggered: {liq.hard_stop_reason or 'no reason given'}")
if liq.rrp_buffer_amplified:
    st.warning("RRP buffer exhausted: tightening effect amplified.")
if liq.forbidden_strategies:
    st.markdown("**Forbidden strategies:** " + ", ".join(liq.forbidden_strategies))

# ── Component scores ──────────────────────────────────────────────────────────

if liq.component_scores:
    st.markdown("<div class='rv-rowtitle'>Component scores</div>", unsafe_allow_html=True)
    df = pd.DataFrame([
        {"Component": c.name, "Weight": f"{c.weight:.0%}", "Score": round(c.score, 1),
         "Label": c.label, "Value": c.value}
        for c in liq.component_scores
    ])
    st.dataframe(df, hide_index=True, use_container_width=True)

# ── Charts ────────────────────────────────────────────────────────────────────

st.markdown("<div class='rv-rowtitle'>Liquidity indicators</div>", unsafe_allow_html=True)
series = load_series(tuple(LIQUIDITY_SYMBOLS))
chart_grid(series, ["WALCL", "WRESBAL"], prefix="liquidity")

spread = sofr_iorb_spread(series)
if spread:
    spec = CHARTS["SOFR_IORB"]
    chart_card("liquidity_SOFR_IORB", spread, spec["title"], color=spec["color"],
               show_area=spec["area"], reference_lines=spec["refs"])
