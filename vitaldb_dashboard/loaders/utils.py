"""
Shared utilities for data ingestion: value coercion and column renaming.
"""

import logging
import re
from typing import Any

import pandas as pd

logger = logging.getLogger(__name__)


def to_snake_case(name: str) -> str:
    """Convert a column name to snake_case.

    Handles spaces, dashes, dots and CamelCase, so that exports with
    headers like "ICU Days" or "Death_Inhosp" still line up with the expected schema.
    """
    s = str(name).strip()
    s = s.replace("-", "_").replace(".", "_")
    # Collapse whitespace and special chars to underscores
    s = re.sub(r"[^a-zA-Z0-9]+", "_", s)
    # CamelCase to snake_case
    s = re.sub(r"([a-z])([A-Z])", r"\1_\2", s)
    s = s.lower().strip("_")
    s = re.sub(r"_+", "_", s)
    return s


def safe_float(val: Any) -> float | None:
    """Coerce a value to float, returning None for missing or non-numeric values."""
    if val is None:
        return None
    if isinstance(val, str):
        val = val.strip()
        if not val:
            return None
        try:
            return float(val)
        except ValueError:
            return None
    try:
        result = float(val)
    except (ValueError, TypeError):
        return None
    if pd.isna(result):
        return None
    return result


def clean_text(val: Any) -> str | None:
    """Strip a categorical cell; blanks and NaN become None."""
    if val is None or (not isinstance(val, str) and pd.isna(val)):
        return None
    s = str(val).strip()
    return s or None
