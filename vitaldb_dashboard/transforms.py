"""
Data transforms: derived columns and filter application over the case table.

Every function returns a new DataFrame or Series; the loaded case table is
never modified.
"""

import logging
import math
from typing import Any

import pandas as pd

from .config import SECONDS_PER_HOUR
from .loaders.utils import safe_float
from .models import CaseFilter

logger = logging.getLogger(__name__)


def age_group(age: Any) -> int | None:
    """Return the 10-year bucket for an age: 0-9 -> 0, 23 -> 20, 90 -> 90.

    Returns None if the age is missing or not numeric.
    """
    value = safe_float(age)
    if value is None:
        return None
    return int(math.floor(value / 10) * 10)


def age_group_series(ages: pd.Series) -> pd.Series:
    """Vectorised age_group(); missing ages stay missing (nullable Int64)."""
    numeric = pd.to_numeric(ages, errors="coerce")
    return ((numeric // 10) * 10).astype("Int64")


def duration_hours(df: pd.DataFrame) -> pd.Series:
    """Surgery duration in hours from opstart/opend (seconds)."""
    return (df["opend"] - df["opstart"]) / SECONDS_PER_HOUR


def add_derived_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with age_group and duration_hours columns added."""
    result = df.copy()
    result["age_group"] = age_group_series(result["age"])
    result["duration_hours"] = duration_hours(result)
    return result


def _asa_matches(series: pd.Series, selected: Any) -> pd.Series:
    # Dropdowns hand ASA back as text ("2"); records hold it as a number
    target = safe_float(selected)
    if target is None:
        return series.astype(str) == str(selected)
    return pd.to_numeric(series, errors="coerce") == target


def filter_mask(
    df: pd.DataFrame,
    case_filter: CaseFilter,
    use_age: bool = True,
) -> pd.Series:
    """Boolean mask of rows matching every active filter dimension.

    Parameters
    ----------
    df : Case table from load_cases().
    case_filter : Current selection. Inactive ("all"/None) dimensions pass
                  everything.
    use_age : Apply the age-bucket dimension. The age histogram turns this
              off so that every bucket stays visible.
    """
    mask = pd.Series(True, index=df.index)

    if use_age and CaseFilter.is_active(case_filter.age_group):
        bucket = age_group(case_filter.age_group)
        mask &= age_group_series(df["age"]) == bucket

    if CaseFilter.is_active(case_filter.department):
        mask &= df["department"] == case_filter.department

    if CaseFilter.is_active(case_filter.asa):
        mask &= _asa_matches(df["asa"], case_filter.asa)

    if CaseFilter.is_active(case_filter.optype):
        mask &= df["optype"] == case_filter.optype

    # Missing ages compare as <NA>; treat them as non-matching
    return mask.fillna(False).astype(bool)


def apply_filters(
    df: pd.DataFrame,
    case_filter: CaseFilter,
    use_age: bool = True,
) -> pd.DataFrame:
    """Return the subset of cases matching case_filter."""
    filtered = df[filter_mask(df, case_filter, use_age=use_age)].copy()
    if filtered.empty:
        logger.warning("No cases match filter %s", case_filter)
    return filtered
