"""
Configuration: file paths, CSV schema, metric registry, colours.

METRIC_REGISTRY maps each dashboard metric key to its dropdown label and
the record column it groups on.
"""

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# File paths (VITALDB_CASES_FILE overrides the default location)
# ---------------------------------------------------------------------------
DATA_DIR = Path(__file__).resolve().parent.parent

CASES_FILE = Path(os.environ.get("VITALDB_CASES_FILE", DATA_DIR / "vitaldb_cases.csv"))

# ---------------------------------------------------------------------------
# CSV schema
# ---------------------------------------------------------------------------
NUMERIC_COLUMNS = [
    "age",
    "opstart",
    "opend",
    "icu_days",
    "asa",
    "intraop_ebl",
    "death_inhosp",
]

CATEGORICAL_COLUMNS = [
    "department",
    "optype",
    "ane_type",
    "opname",
    "subjectid",
]

REQUIRED_COLUMNS = NUMERIC_COLUMNS + CATEGORICAL_COLUMNS

# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------
# Sentinel dropdown value meaning "no filter on this dimension"
ALL = "all"

NOT_AVAILABLE = "N/A"

# Age slider bounds (10-year buckets)
AGE_MIN = 0
AGE_MAX = 90
AGE_STEP = 10

SECONDS_PER_HOUR = 3600

# ---------------------------------------------------------------------------
# Metric registry
# ---------------------------------------------------------------------------
# label: dropdown text
# column: record column grouped on (None for derived/scalar metrics)
# chart: "pie", "bar" or None
METRIC_REGISTRY: dict[str, dict] = {
    "mortality": {
        "label": "Mortality",
        "column": "death_inhosp",
        "chart": "pie",
    },
    "optype": {
        "label": "Operation Type",
        "column": "optype",
        "chart": "pie",
    },
    "ane_type": {
        "label": "Anesthesia Type",
        "column": "ane_type",
        "chart": "pie",
    },
    "count": {
        "label": "Count",
        "column": "age_group",
        "chart": "bar",
    },
    "summary": {
        "label": "Summary",
        "column": None,
        "chart": None,
    },
}

# Metrics offered in the age-group dropdown, in display order
AGE_VIEW_METRICS = ["mortality", "optype", "ane_type", "count"]

# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------
# Fixed order: (death_inhosp value, label, colour)
MORTALITY_CATEGORIES = [
    (0, "No Mortality", "#4daf4a"),
    (1, "Mortality", "#e41a1c"),
]

# d3 schemeCategory10
CATEGORY_PALETTE = [
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
]

BAR_COLOR = "steelblue"
BAR_HIGHLIGHT_COLOR = "red"

SCATTER_COLOR = "steelblue"
SCATTER_DEATH_COLOR = "orange"
SCATTER_OPACITY = 0.7
SCATTER_DIMMED_OPACITY = 0.1
