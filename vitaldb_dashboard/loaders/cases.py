"""
Loader for the VitalDB surgical case export (vitaldb_cases.csv).

One row per operation. Only the columns listed in config.REQUIRED_COLUMNS
are used by the dashboard; any other columns in the export are kept but
ignored downstream.
"""

import logging
from pathlib import Path

import pandas as pd

from ..config import CATEGORICAL_COLUMNS, NUMERIC_COLUMNS, REQUIRED_COLUMNS
from .utils import clean_text, to_snake_case

logger = logging.getLogger(__name__)


def empty_cases() -> pd.DataFrame:
    """Zero-row DataFrame carrying the full case schema."""
    df = pd.DataFrame({col: pd.Series(dtype="float64") for col in NUMERIC_COLUMNS})
    for col in CATEGORICAL_COLUMNS:
        df[col] = pd.Series(dtype="object")
    return df


def coerce_case_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with numeric and categorical columns normalised.

    Numeric fields that fail to parse become NaN; categorical fields are
    stripped strings with blanks as None.
    """
    df = df.copy()
    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    for col in CATEGORICAL_COLUMNS:
        df[col] = df[col].map(clean_text).astype("object")
    return df


def load_cases(path: str | Path) -> pd.DataFrame:
    """Load the case export from CSV.

    Assumptions
    -----------
    - First row is the header.
    - Header names match config.REQUIRED_COLUMNS after snake_case
      normalisation.
    - subjectid is an identifier, not a number, so it is read as text.

    Raises
    ------
    FileNotFoundError : path does not exist.
    ValueError : one or more required columns are missing.

    Returns
    -------
    DataFrame with at least the columns:
        age, opstart, opend, icu_days, asa, intraop_ebl, death_inhosp,
        department, optype, ane_type, opname, subjectid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Case file not found: {path}")

    raw = pd.read_csv(path, dtype={"subjectid": str})
    raw.columns = [to_snake_case(c) for c in raw.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in raw.columns]
    if missing:
        raise ValueError(f"{path.name} is missing required columns: {', '.join(missing)}")

    df = coerce_case_columns(raw)

    logger.info("Loaded %d cases from %s", len(df), path.name)
    return df
