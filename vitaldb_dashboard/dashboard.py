"""
Dashboard-ready output functions.

These are the entry points the Streamlit front end calls. Each function
returns plain dicts, lists or DataFrames suitable for rendering summary
cards, dropdowns, charts and tooltips.
"""

import logging

import pandas as pd

from .config import (
    ALL,
    AGE_VIEW_METRICS,
    METRIC_REGISTRY,
    NOT_AVAILABLE,
    SCATTER_COLOR,
    SCATTER_DEATH_COLOR,
    SCATTER_DIMMED_OPACITY,
    SCATTER_OPACITY,
)
from .models import CaseFilter, CategorySummary, ScalarSummary
from .transforms import add_derived_columns, age_group, filter_mask

logger = logging.getLogger(__name__)


def _fmt(value: float | None, suffix: str = "") -> str:
    if value is None or pd.isna(value):
        return NOT_AVAILABLE
    return f"{value:.2f}{suffix}"


def _fmt_num(value) -> str:
    if value is None or pd.isna(value):
        return NOT_AVAILABLE
    return f"{value:g}"


def _asa_option(value: float) -> int | float:
    # Whole scores display as 2, not 2.0; fractional ones are kept as-is
    value = float(value)
    return int(value) if value.is_integer() else value


def get_summary_cards(summary: ScalarSummary) -> dict[str, str]:
    """Format a ScalarSummary for the summary panel.

    Returns
    -------
    Dict with keys patients, avg_surgery_time, avg_icu_stay,
    mortality_rate. Missing means read "N/A".
    """
    return {
        "patients": f"Patients: {summary.count}",
        "avg_surgery_time": f"Avg Surgery Time: {_fmt(summary.avg_duration, ' hrs')}",
        "avg_icu_stay": f"Avg ICU Stay: {_fmt(summary.avg_icu_stay, ' days')}",
        "mortality_rate": f"Mortality Rate: {_fmt(summary.mortality_rate, '%')}",
    }


def get_category_table(summaries: list[CategorySummary]) -> pd.DataFrame:
    """Tabulate category summaries with each slice's share of the total.

    Returns
    -------
    DataFrame with columns: label, value, color, percent
    percent is None for every row when the total is zero.
    """
    columns = ["label", "value", "color", "percent"]
    if not summaries:
        return pd.DataFrame(columns=columns)

    total = sum(s.value for s in summaries)
    rows = []
    for s in summaries:
        percent = round(s.value / total * 100, 1) if total else None
        rows.append({
            "label": s.label,
            "value": s.value,
            "color": s.color,
            "percent": percent,
        })
    return pd.DataFrame(rows, columns=columns)


def get_filter_options(cases: pd.DataFrame) -> dict[str, list]:
    """Dropdown choices for department, ASA score and operation type.

    Each list starts with "all" followed by the sorted distinct values.
    """
    if cases.empty:
        return {"department": [ALL], "asa": [ALL], "optype": [ALL]}

    departments = sorted(cases["department"].dropna().unique().tolist())
    asa_scores = sorted(_asa_option(a) for a in cases["asa"].dropna().unique())
    optypes = sorted(cases["optype"].dropna().unique().tolist())

    return {
        "department": [ALL] + departments,
        "asa": [ALL] + asa_scores,
        "optype": [ALL] + optypes,
    }


def get_available_metrics() -> list[tuple[str, str]]:
    """(key, label) pairs for the age-group metric dropdown."""
    return [(key, METRIC_REGISTRY[key]["label"]) for key in AGE_VIEW_METRICS]


def age_group_label(bucket) -> str:
    """Slider caption, e.g. "Age Group: 20-29"."""
    start = age_group(bucket)
    if start is None:
        return f"Age Group: {NOT_AVAILABLE}"
    return f"Age Group: {start}-{start + 9}"


def _tooltip(row: pd.Series) -> str:
    duration = _fmt(row["duration_hours"])
    return (
        f"Patient ID: {row['subjectid']}<br>"
        f"Age: {_fmt_num(row['age'])}<br>"
        f"Department: {row['department']}<br>"
        f"Surgery: {row['opname']}<br>"
        f"ASA Score: {_fmt_num(row['asa'])}<br>"
        f"Surgery Duration: {duration} hrs<br>"
        f"ICU Stay: {_fmt_num(row['icu_days'])} days<br>"
        f"Blood Loss: {_fmt_num(row['intraop_ebl'])} mL"
    )


def get_scatter_data(
    cases: pd.DataFrame,
    case_filter: CaseFilter | None = None,
) -> pd.DataFrame:
    """Per-case points for the duration vs ICU stay scatter plot.

    All cases are returned; cases outside the department/ASA/optype filter
    are dimmed rather than dropped.

    Returns
    -------
    DataFrame with columns:
        subjectid, duration_hours, icu_days, death_inhosp, color, opacity,
        tooltip
    """
    columns = [
        "subjectid", "duration_hours", "icu_days", "death_inhosp",
        "color", "opacity", "tooltip",
    ]
    if cases.empty:
        return pd.DataFrame(columns=columns)

    if case_filter is None:
        case_filter = CaseFilter()

    df = add_derived_columns(cases)
    matches = filter_mask(df, case_filter, use_age=False)

    df["color"] = [
        SCATTER_DEATH_COLOR if flag == 1 else SCATTER_COLOR
        for flag in df["death_inhosp"]
    ]
    df["opacity"] = matches.map({True: SCATTER_OPACITY, False: SCATTER_DIMMED_OPACITY})
    df["tooltip"] = df.apply(_tooltip, axis=1)

    logger.info("Built scatter data: %d points, %d highlighted", len(df), int(matches.sum()))
    return df[columns].reset_index(drop=True)
