"""
VitalDB Surgical Cases — Interactive Dashboard

Run with:  streamlit run app.py
"""

import logging
import sys
from pathlib import Path

import streamlit as st

sys.path.insert(0, str(Path(__file__).resolve().parent))

from vitaldb_dashboard.config import AGE_MAX, AGE_MIN, AGE_STEP, CASES_FILE, METRIC_REGISTRY
from vitaldb_dashboard.loaders import empty_cases, load_cases
from vitaldb_dashboard.models import CaseFilter
from vitaldb_dashboard.aggregator import summarize
from vitaldb_dashboard.dashboard import (
    age_group_label,
    get_available_metrics,
    get_category_table,
    get_filter_options,
    get_scatter_data,
    get_summary_cards,
)
from vitaldb_dashboard.charts import age_bar_chart, pie_chart, scatter_chart

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="VitalDB Case Dashboard",
    page_icon="🩺",
    layout="wide",
    initial_sidebar_state="expanded",
)


# ---------------------------------------------------------------------------
# Data loading (cached)
# ---------------------------------------------------------------------------
@st.cache_data
def load_all_data(path: str):
    try:
        return load_cases(path), None
    except (FileNotFoundError, ValueError) as e:
        logger.warning("Could not load cases: %s", e)
        return empty_cases(), str(e)


cases, load_error = load_all_data(str(CASES_FILE))

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
st.sidebar.title("VitalDB Cases")
st.sidebar.markdown("Surgical case explorer")
st.sidebar.divider()

page = st.sidebar.radio(
    "Navigate",
    ["Case Explorer", "Age Groups"],
)

st.sidebar.divider()
st.sidebar.caption(f"Data: {CASES_FILE.name} ({len(cases):,} cases)")

if load_error:
    st.warning(f"Dataset unavailable: {load_error}")


# ===========================================================================
# PAGE: Case Explorer
# ===========================================================================
if page == "Case Explorer":
    st.title("Surgery Duration vs ICU Stay")

    options = get_filter_options(cases)

    col1, col2, col3, col4 = st.columns([2, 1, 2, 1])
    with col1:
        department = st.selectbox("Department", options["department"], key="department")
    with col2:
        asa = st.selectbox("ASA Score", options["asa"], key="asa")
    with col3:
        optype = st.selectbox("Surgery Type", options["optype"], key="optype")
    with col4:
        st.write("")
        if st.button("Reset Filters"):
            for key in ("department", "asa", "optype"):
                st.session_state.pop(key, None)
            st.rerun()

    case_filter = CaseFilter(metric="summary", department=department, asa=asa, optype=optype)

    chart_col, stats_col = st.columns([3, 1])

    with chart_col:
        points = get_scatter_data(cases, case_filter)
        st.plotly_chart(scatter_chart(points), use_container_width=True)
        st.caption("Orange: in-hospital death. Faded points fall outside the current filters.")

    with stats_col:
        st.subheader("Summary")
        cards = get_summary_cards(summarize(cases, case_filter))
        for line in cards.values():
            st.markdown(line)


# ===========================================================================
# PAGE: Age Groups
# ===========================================================================
elif page == "Age Groups":
    st.title("Cases by Age Group")

    metrics = get_available_metrics()
    labels = {key: label for key, label in metrics}

    col1, col2 = st.columns([1, 2])
    with col1:
        metric = st.selectbox(
            "Metric",
            [key for key, _ in metrics],
            format_func=lambda k: labels[k],
        )
    with col2:
        selected_age = st.slider("Age", AGE_MIN, AGE_MAX, AGE_MIN, step=AGE_STEP)
        st.caption(age_group_label(selected_age))

    result = summarize(cases, CaseFilter(age_group=selected_age, metric=metric))

    if METRIC_REGISTRY[metric]["chart"] == "bar":
        st.plotly_chart(age_bar_chart(result), use_container_width=True)
    else:
        chart_col, legend_col = st.columns([3, 1])
        with chart_col:
            st.plotly_chart(pie_chart(result), use_container_width=True)
        with legend_col:
            table = get_category_table(result)
            if table.empty:
                st.info("No cases in this age group.")
            else:
                for row in table.itertuples():
                    share = f"{row.percent:.1f}%" if row.percent is not None else "N/A"
                    st.markdown(
                        f"<div style='display:flex; align-items:center; margin:5px 0;'>"
                        f"<div style='width:20px; height:20px; border-radius:5px; "
                        f"background:{row.color}; margin-right:10px;'></div>"
                        f"<span style='color:{row.color}; font-weight:bold;'>{row.label}</span>"
                        f"&nbsp;<span style='color:#666;'>{row.value} ({share})</span></div>",
                        unsafe_allow_html=True,
                    )
