"""Shared fixtures: a small hand-built case table."""

import pandas as pd
import pytest


@pytest.fixture
def cases() -> pd.DataFrame:
    """Eight cases spanning four age buckets, two departments and three ASA scores."""
    return pd.DataFrame({
        "subjectid": ["1", "2", "3", "4", "5", "6", "7", "8"],
        "age": [5.0, 9.0, 23.0, 27.0, 45.0, 48.0, 90.0, 94.0],
        "opstart": [0.0] * 8,
        "opend": [3600.0, 7200.0, 3600.0, 10800.0, 7200.0, 3600.0, 7200.0, 14400.0],
        "icu_days": [0.0, 1.0, 0.0, 2.0, 0.0, 3.0, 4.0, 6.0],
        "asa": [1.0, 1.0, 2.0, 2.0, 2.0, 3.0, 3.0, 3.0],
        "intraop_ebl": [50.0, 100.0, 0.0, 300.0, 200.0, 150.0, 400.0, 800.0],
        "death_inhosp": [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0],
        "department": [
            "General surgery", "General surgery", "Thoracic surgery", "General surgery",
            "Thoracic surgery", "General surgery", "General surgery", "Thoracic surgery",
        ],
        "optype": [
            "Colorectal", "Stomach", "Others", "Colorectal",
            "Others", "Stomach", "Colorectal", "Others",
        ],
        "ane_type": [
            "General", "General", "General", "Spinal",
            "General", "General", "Sedationalgesia", "General",
        ],
        "opname": [
            "Low anterior resection", "Distal gastrectomy", "Lobectomy", "Hemicolectomy",
            "Wedge resection", "Total gastrectomy", "Hemicolectomy", "Lobectomy",
        ],
    })
