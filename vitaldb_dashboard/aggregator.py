"""
Category roll-ups and the single summarize() entry point the front end calls.

summarize(cases, case_filter) returns either a list of CategorySummary
(pie slices / histogram bars) or a ScalarSummary, depending on the metric
selected in case_filter.
"""

import logging

import pandas as pd

from .config import (
    BAR_COLOR,
    BAR_HIGHLIGHT_COLOR,
    CATEGORY_PALETTE,
    METRIC_REGISTRY,
    MORTALITY_CATEGORIES,
)
from .kpis import get_scalar_summary
from .models import CaseFilter, CategorySummary, ScalarSummary
from .transforms import age_group, age_group_series, apply_filters

logger = logging.getLogger(__name__)

UNKNOWN_LABEL = "Unknown"


def category_colors(values: pd.Series) -> dict:
    """Assign palette colours to distinct values in first-seen order.

    Passing the full (unfiltered) column keeps a label's colour fixed while
    the filters change.
    """
    labels = values.fillna(UNKNOWN_LABEL).unique().tolist()
    return {
        label: CATEGORY_PALETTE[i % len(CATEGORY_PALETTE)]
        for i, label in enumerate(labels)
    }


def count_by_category(
    cases: pd.DataFrame,
    column: str,
    colors: dict | None = None,
) -> list[CategorySummary]:
    """Count cases per distinct value of column, in first-seen order.

    Missing values are counted under "Unknown" so the slice values always
    add up to len(cases).
    """
    if cases.empty:
        return []

    keys = cases[column].fillna(UNKNOWN_LABEL)
    counts = keys.value_counts(sort=False)
    if colors is None:
        colors = category_colors(cases[column])

    summaries = []
    for label in keys.unique():
        summaries.append(CategorySummary(
            label=label,
            value=int(counts[label]),
            color=colors.get(label, CATEGORY_PALETTE[len(summaries) % len(CATEGORY_PALETTE)]),
        ))
    return summaries


def mortality_counts(cases: pd.DataFrame) -> list[CategorySummary]:
    """Survived/died split, always both entries, always in that order.

    Any death_inhosp value other than 1 counts as survival.
    """
    died = int((pd.to_numeric(cases["death_inhosp"], errors="coerce") == 1).sum())
    counts = {1: died, 0: len(cases) - died}

    return [
        CategorySummary(label=label, value=counts[flag], color=color)
        for flag, label, color in MORTALITY_CATEGORIES
    ]


def age_group_counts(
    cases: pd.DataFrame,
    selected_group: int | str | None = None,
) -> list[CategorySummary]:
    """Histogram of cases per 10-year age bucket, ascending.

    The bar for selected_group is highlighted. Cases with no recorded age
    are counted under a trailing "Unknown" bar so the bars add up to
    len(cases).
    """
    if cases.empty:
        return []

    all_buckets = age_group_series(cases["age"])
    buckets = all_buckets.dropna()
    unknown = int(all_buckets.isna().sum())

    selected = age_group(selected_group) if CaseFilter.is_active(selected_group) else None
    counts = buckets.value_counts().sort_index()

    summaries = [
        CategorySummary(
            label=int(bucket),
            value=int(count),
            color=BAR_HIGHLIGHT_COLOR if int(bucket) == selected else BAR_COLOR,
        )
        for bucket, count in counts.items()
    ]
    if unknown:
        summaries.append(CategorySummary(label=UNKNOWN_LABEL, value=unknown, color=BAR_COLOR))
    return summaries


def summarize(
    cases: pd.DataFrame,
    case_filter: CaseFilter,
) -> list[CategorySummary] | ScalarSummary:
    """Derive the chart input for the current selection.

    Parameters
    ----------
    cases : Full case table from load_cases(). Not modified.
    case_filter : Current selection; case_filter.metric picks the output.

    Returns
    -------
    - "mortality": two CategorySummary entries (No Mortality, Mortality)
    - "optype" / "ane_type": one CategorySummary per category
    - "count": one CategorySummary per age bucket over all ages, with the
      selected bucket highlighted and missing ages under "Unknown"
    - "summary": ScalarSummary of the filtered cases

    Raises
    ------
    ValueError : unknown metric.
    """
    metric = case_filter.metric
    if metric not in METRIC_REGISTRY:
        raise ValueError(f"Unknown metric '{metric}'. Expected one of {sorted(METRIC_REGISTRY)}")

    if metric == "count":
        filtered = apply_filters(cases, case_filter, use_age=False)
        return age_group_counts(filtered, case_filter.age_group)

    filtered = apply_filters(cases, case_filter)

    if metric == "summary":
        return get_scalar_summary(filtered)

    if metric == "mortality":
        return mortality_counts(filtered)

    column = METRIC_REGISTRY[metric]["column"]
    return count_by_category(filtered, column, colors=category_colors(cases[column]))
