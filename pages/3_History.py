# pages/3_History.py
import pandas as pd
import streamlit as st

from riskview.api_client import ApiError
from riskview.config import HISTORY_DAYS
from riskview.labels import risk_light_emoji
from riskview.state import get_client
from riskview.ui import inject_css, sidebar_nav, topbar

st.set_page_config(page_title="History", layout="wide", initial_sidebar_state="expanded")
inject_css()
sidebar_nav(active="History")
topbar("Run history", "Model runs stored by the backend")

c1, c2 = st.columns([2, 2])
with c1:
    days = st.number_input("Lookback (days)", min_value=1, max_value=365, value=HISTORY_DAYS)
with c2:
    model_type = st.selectbox("Model", ["all", "liquidity", "macro"])

try:
    history = get_client().get_history(days=int(days), model_type=None if model_type == "all" else model_type)
except ApiError as e:
    st.error(f"Could not load history: {e}")
    st.stop()

if not history.records:
    st.info(f"No runs in the last {history.days or days} days.")
    st.stop()

df = pd.DataFrame([
    {
        "Run": r.run_id,
        "Run time": pd.Timestamp(r.run_ts),
        "Data date": r.data_ts[:10],
        "Model": r.model_type,
        "Version": r.model_version,
        "Light": risk_light_emoji(r.risk_light),
        "Score": r.liquidity_score,
        "Leverage": r.leverage_coef,
        "ms": r.execution_time_ms,
        "Status": r.status,
    }
    for r in history.records
]).sort_values("Run time", ascending=False)

st.caption(f"{history.total} runs")
st.dataframe(df, hide_index=True, use_container_width=True)

run_id = st.selectbox("Inspect run", df["Run"].tolist())
if run_id:
    try:
        out = get_client().get_output_by_id(run_id)
    except ApiError as e:
        st.error(f"Could not load run {run_id}: {e}")
        st.stop()
    if out.report_summary:
        st.code(out.report_summary, language=None)
    for a in out.alerts:
        st.write(f"**{a.level}** {a.type}: {a.message}")
