"""Tests for category roll-ups and the summarize() entry point."""

import pandas as pd
import pytest

from vitaldb_dashboard.aggregator import (
    UNKNOWN_LABEL,
    age_group_counts,
    category_colors,
    count_by_category,
    mortality_counts,
    summarize,
)
from vitaldb_dashboard.config import CATEGORY_PALETTE
from vitaldb_dashboard.models import CaseFilter, CategorySummary, ScalarSummary
from vitaldb_dashboard.transforms import apply_filters

AGE_BUCKETS = [0, 10, 20, 30, 40, 50, 60, 70, 80, 90]


@pytest.mark.parametrize("metric", ["mortality", "optype", "ane_type"])
@pytest.mark.parametrize("bucket", AGE_BUCKETS)
def test_category_values_sum_to_filtered_count(cases, metric, bucket):
    """Slice values always add up to the number of filtered cases."""
    case_filter = CaseFilter(age_group=bucket, metric=metric)
    result = summarize(cases, case_filter)

    assert sum(s.value for s in result) == len(apply_filters(cases, case_filter))


@pytest.mark.parametrize(
    "case_filter",
    [
        CaseFilter(metric="optype", department="General surgery"),
        CaseFilter(metric="ane_type", asa="2"),
        CaseFilter(metric="mortality", optype="Others", department="Thoracic surgery"),
        CaseFilter(metric="optype", department="Urology"),
    ],
)
def test_category_sum_with_dropdown_filters(cases, case_filter):
    """The sum property holds with department/ASA/optype filters too."""
    result = summarize(cases, case_filter)
    assert sum(s.value for s in result) == len(apply_filters(cases, case_filter))


@pytest.mark.parametrize("bucket", AGE_BUCKETS)
def test_mortality_always_two_entries_in_order(cases, bucket):
    """Mortality split is always [No Mortality, Mortality], even with zeros."""
    result = summarize(cases, CaseFilter(age_group=bucket, metric="mortality"))

    assert [s.label for s in result] == ["No Mortality", "Mortality"]
    assert [s.color for s in result] == ["#4daf4a", "#e41a1c"]


def test_mortality_counts_values(cases):
    """Zero-death bucket still reports a Mortality entry of 0."""
    young = summarize(cases, CaseFilter(age_group=0, metric="mortality"))
    old = summarize(cases, CaseFilter(age_group=90, metric="mortality"))

    assert [s.value for s in young] == [2, 0]
    assert [s.value for s in old] == [0, 2]


def test_mortality_counts_empty_frame(cases):
    """An empty selection still yields both categories at zero."""
    result = mortality_counts(cases.iloc[0:0])
    assert [(s.label, s.value) for s in result] == [("No Mortality", 0), ("Mortality", 0)]


def test_optype_counts_first_seen_order(cases):
    """Open categories keep first-seen order with their counts."""
    result = summarize(cases, CaseFilter(metric="optype"))

    assert [(s.label, s.value) for s in result] == [
        ("Colorectal", 3),
        ("Stomach", 2),
        ("Others", 3),
    ]


def test_category_colour_stable_across_filters(cases):
    """A label keeps its palette colour whichever subset is shown."""
    full = {s.label: s.color for s in summarize(cases, CaseFilter(metric="optype"))}
    subset = summarize(cases, CaseFilter(age_group=20, metric="optype"))

    assert [s.label for s in subset] == ["Others", "Colorectal"]
    for s in subset:
        assert s.color == full[s.label]


def test_category_colors_wrap_palette():
    """More than ten labels reuse the palette from the start."""
    values = pd.Series([f"cat{i}" for i in range(12)])
    colors = category_colors(values)

    assert colors["cat0"] == CATEGORY_PALETTE[0]
    assert colors["cat10"] == CATEGORY_PALETTE[0]
    assert colors["cat11"] == CATEGORY_PALETTE[1]


def test_count_by_category_missing_values(cases):
    """Missing categories are counted under Unknown."""
    df = cases.copy()
    df.loc[[0, 1], "ane_type"] = None
    result = count_by_category(df, "ane_type")

    labels = {s.label: s.value for s in result}
    assert labels[UNKNOWN_LABEL] == 2
    assert sum(labels.values()) == len(df)


def test_count_by_category_empty(cases):
    """No cases, no slices."""
    assert count_by_category(cases.iloc[0:0], "optype") == []


def test_age_histogram_ascending_with_highlight(cases):
    """Count metric spans all ages and highlights the selected bucket."""
    result = summarize(cases, CaseFilter(age_group=40, metric="count"))

    assert [(s.label, s.value) for s in result] == [(0, 2), (20, 2), (40, 2), (90, 2)]
    assert [s.color for s in result] == ["steelblue", "steelblue", "red", "steelblue"]


def test_age_histogram_respects_dropdown_filters(cases):
    """Department filter narrows the histogram; age filter does not."""
    result = summarize(
        cases, CaseFilter(age_group=0, metric="count", department="Thoracic surgery")
    )
    assert [(s.label, s.value) for s in result] == [(20, 1), (40, 1), (90, 1)]
    assert all(s.color == "steelblue" for s in result)


def test_age_group_counts_without_selection(cases):
    """No selected bucket means no highlighted bar."""
    result = age_group_counts(cases)
    assert all(s.color == "steelblue" for s in result)
    assert sum(s.value for s in result) == len(cases)


def test_summary_metric_returns_scalar(cases):
    """metric="summary" yields a ScalarSummary of the filtered cases."""
    result = summarize(cases, CaseFilter(metric="summary", department="Thoracic surgery"))

    assert isinstance(result, ScalarSummary)
    assert result.count == 3
    assert result.avg_icu_stay == pytest.approx(2.0)
    assert result.mortality_rate == pytest.approx(100 / 3)


def test_summary_empty_selection_not_available(cases):
    """Empty selection gives count 0 and None means."""
    result = summarize(cases, CaseFilter(metric="summary", age_group=60))

    assert result == ScalarSummary(
        count=0, avg_duration=None, avg_icu_stay=None, mortality_rate=None
    )


def test_summarize_is_idempotent_and_pure(cases):
    """Same inputs give the same output and leave the table untouched."""
    before = cases.copy()
    case_filter = CaseFilter(age_group=20, metric="optype", asa="2")

    first = summarize(cases, case_filter)
    second = summarize(cases, case_filter)

    assert first == second
    assert all(isinstance(s, CategorySummary) for s in first)
    pd.testing.assert_frame_equal(cases, before)


def test_unknown_metric_raises(cases):
    """An unregistered metric is a programming error."""
    with pytest.raises(ValueError, match="Unknown metric"):
        summarize(cases, CaseFilter(metric="blood_type"))


@pytest.mark.parametrize(
    "case_filter",
    [
        CaseFilter(metric="count"),
        CaseFilter(metric="count", age_group=20, department="General surgery"),
        CaseFilter(metric="count", asa="3"),
    ],
)
def test_age_histogram_sum_with_missing_age(cases, case_filter):
    """Cases without an age land in a trailing Unknown bar, keeping the sum."""
    df = cases.copy()
    df.loc[0, "age"] = None

    result = summarize(df, case_filter)

    expected = len(apply_filters(df, case_filter, use_age=False))
    assert sum(s.value for s in result) == expected


def test_age_histogram_unknown_bar_last(cases):
    """The Unknown bar follows the numeric buckets and is never highlighted."""
    df = cases.copy()
    df.loc[[0, 5], "age"] = None

    result = summarize(df, CaseFilter(age_group=0, metric="count"))

    assert [(s.label, s.value) for s in result] == [
        (0, 1), (20, 2), (40, 1), (90, 2), (UNKNOWN_LABEL, 2),
    ]
    assert result[-1].color == "steelblue"
