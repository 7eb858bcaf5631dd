# pages/2_Macro.py
import streamlit as st

from riskview.config import MACRO_SYMBOLS
from riskview.ui import chart_grid, gate_pill_html, inject_css, sidebar_nav, topbar
from riskview.state import load_series, model_controls

st.set_page_config(page_title="Macro", layout="wide", initial_sidebar_state="expanded")
inject_css()
sidebar_nav(active="Macro")

output = model_controls("macro")
topbar("Macro regime", "Macro model v4")

if output is None or output.macro is None:
    st.info("Press **Run model** to load the macro model.")
    st.stop()

macro = output.macro
state = macro.macro_state

st.markdown(
    f"<div class='rv-card'><div class='rv-subtle'>Macro state</div>"
    f"<div style='font-size:28px;font-weight:800;color:#ec4899;'>{state.get('code', '?')}</div>"
    f"<div class='rv-card-title'>{state.get('name', '')}</div></div>",
    unsafe_allow_html=True,
)

# ── Layer 1: rates structure ──────────────────────────────────────────────────

l1 = macro.layer1
policy = l1.get("policy_path", {})
curve  = l1.get("curve_structure", {})
realbe = l1.get("real_be", {})
tp     = l1.get("term_premium", {})

st.markdown("<div class='rv-rowtitle'>Rates structure</div>", unsafe_allow_html=True)
c1, c2, c3, c4 = st.columns(4)
c1.metric("Policy path", policy.get("label", "n/a"), f"2y {policy.get('delta_2y', 0):+.2f}")
c2.metric("2s10s", f"{curve.get('curve_2s10s', 0):.2f}", curve.get("direction_label", ""))
c3.metric("Real / BE", realbe.get("state", "n/a"), realbe.get("equity_impact", ""))
c4.metric("Term premium", tp.get("state", "n/a"), "warning" if tp.get("warning") else None,
          delta_color="inverse")

# ── Layer 2: narrative check ──────────────────────────────────────────────────

corr = macro.layer2.get("correlation", {})
if corr:
    st.markdown("<div class='rv-rowtitle'>Narrative check</div>", unsafe_allow_html=True)
    st.write(
        f"Stock/bond correlation 20d **{corr.get('corr_20d', 0):.2f}** ({corr.get('state_20d', '')}), "
        f"60d **{corr.get('corr_60d', 0):.2f}** ({corr.get('state_60d', '')})."
    )
    if corr.get("is_conflicting"):
        st.warning("Short and long correlation windows disagree.")

# ── Layer 3: gates ────────────────────────────────────────────────────────────

if macro.gates:
    st.markdown("<div class='rv-rowtitle'>Risk gates</div>", unsafe_allow_html=True)
    for g in macro.gates:
        st.markdown(f"{gate_pill_html(g)} **{g.name}** {g.message or ''}", unsafe_allow_html=True)

# ── Execution matrix ──────────────────────────────────────────────────────────

em = macro.execution_matrix
if em:
    st.markdown("<div class='rv-rowtitle'>Execution matrix</div>", unsafe_allow_html=True)
    st.write(f"Rates: **{em.get('rates_action', '')}** ({em.get('rates_confidence', '')}) "
             f"via {', '.join(em.get('rates_instruments') or [])}")
    st.write(f"Equity bias: **{em.get('equity_sector_bias', '')}** "
             f"{', '.join(em.get('equity_sectors') or [])}")
    if em.get("hedge_required"):
        st.write(f"Hedge: {em.get('hedge_type')} {', '.join(em.get('hedge_instruments') or [])}")
    st.write("Short vol allowed" if em.get("short_vol_allowed") else "Short vol not allowed")

corr_sys = macro.correction
if corr_sys and corr_sys.get("level"):
    st.info(f"Correction {corr_sys['level']}: {corr_sys.get('reason', '')}. "
            f"{corr_sys.get('suggested_action', '')}")

# ── Charts ────────────────────────────────────────────────────────────────────

st.markdown("<div class='rv-rowtitle'>Macro indicators</div>", unsafe_allow_html=True)
chart_grid(load_series(tuple(MACRO_SYMBOLS)), MACRO_SYMBOLS, prefix="macro")
