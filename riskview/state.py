# riskview/state.py
# Cached loaders shared by the pages. Model runs are kept in session state so
# every page shows the same run until the user triggers a new one.
from typing import Dict, Optional

import streamlit as st

from riskview.api_client import ApiClient, ApiError
from riskview.config import CACHE_TTL_SECONDS, SERIES_SCALE
from riskview.labels import scale_series, spread_bp
from riskview.models import Dataset, ModelOutput

_MODEL_KEY = "model_output"


@st.cache_resource(show_spinner=False)
def get_client() -> ApiClient:
    return ApiClient()


@st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
def load_series(symbols: tuple) -> Dict[str, Dataset]:
    data = get_client().fetch_series(list(symbols))
    return {s: scale_series(d, SERIES_SCALE[s]) if s in SERIES_SCALE else d for s, d in data.items()}


def sofr_iorb_spread(series: Dict[str, Dataset]) -> Dataset:
    return spread_bp(series.get("SOFR") or [], series.get("IORB") or [])


def current_model() -> Optional[ModelOutput]:
    return st.session_state.get(_MODEL_KEY)


def run_model(data_date: Optional[str] = None) -> ModelOutput:
    output = get_client().run_model(data_date)
    st.session_state[_MODEL_KEY] = output
    return output


def model_controls(key: str) -> Optional[ModelOutput]:
    """Date input + run button. Shows API failures inline and returns the current run."""
    c_date, c_btn = st.columns([3, 1])
    with c_date:
        use_date = st.checkbox("Specific data date", key=f"use_date_{key}")
        picked = st.date_input("Data date", key=f"date_{key}", disabled=not use_date,
                               label_visibility="collapsed")
    with c_btn:
        if st.button("Run model", key=f"run_{key}", type="primary"):
            with st.spinner("Running model..."):
                try:
                    run_model(picked.isoformat() if use_date and picked else None)
                except ApiError as e:
                    st.error(f"Failed to run model: {e}")
    return current_model()