"""
Scalar statistics — pure functions with no side effects.

Provides NaN-safe means and the headline case summary (count, average
surgery duration, average ICU stay, in-hospital mortality rate).
"""

import logging

import pandas as pd

from .models import ScalarSummary
from .transforms import duration_hours

logger = logging.getLogger(__name__)


def safe_mean(values: pd.Series) -> float | None:
    """Arithmetic mean ignoring missing values.

    Returns None rather than NaN when there is nothing to average, so an
    empty selection reads as "not available" instead of a number.
    """
    numeric = pd.to_numeric(values, errors="coerce").dropna()
    if numeric.empty:
        return None
    return float(numeric.mean())


def calc_mortality_rate(death_flags: pd.Series) -> float | None:
    """Percentage of cases with death_inhosp == 1, or None if no cases.

    Any other value, missing included, counts as survival, matching the
    No Mortality / Mortality split in aggregator.mortality_counts().
    """
    if death_flags.empty:
        return None
    died = pd.to_numeric(death_flags, errors="coerce") == 1
    return float(died.mean()) * 100


def get_scalar_summary(cases: pd.DataFrame) -> ScalarSummary:
    """Headline statistics for an already-filtered case table.

    Rules
    -----
    - count: number of rows, 0 for an empty table
    - avg_duration: mean of (opend - opstart) in hours
    - avg_icu_stay: mean of icu_days
    - mortality_rate: share of cases with death_inhosp == 1, in percent

    mortality_rate is None only when the table is empty. avg_duration and
    avg_icu_stay are also None when every value in their column is missing.
    """
    if cases.empty:
        logger.warning("Empty case selection, summary statistics unavailable")
        return ScalarSummary(
            count=0,
            avg_duration=None,
            avg_icu_stay=None,
            mortality_rate=None,
        )

    return ScalarSummary(
        count=len(cases),
        avg_duration=safe_mean(duration_hours(cases)),
        avg_icu_stay=safe_mean(cases["icu_days"]),
        mortality_rate=calc_mortality_rate(cases["death_inhosp"]),
    )
