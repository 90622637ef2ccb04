"""
Simulated data generator for the VitalDB case dashboard.

Generates case rows with the same columns as vitaldb_cases.csv so the app
and smoke test can run without the real export. All values are synthetic.
"""

import numpy as np
import pandas as pd

from .config import REQUIRED_COLUMNS

# ---------------------------------------------------------------------------
# Typical case-mix parameters
# ---------------------------------------------------------------------------
# department -> (weight, [(opname, optype), ...])
_DEPARTMENTS = {
    "General surgery": (0.55, [
        ("Cholecystectomy", "Biliary/Pancreas"),
        ("Low anterior resection", "Colorectal"),
        ("Distal gastrectomy", "Stomach"),
        ("Hepatectomy", "Hepatic"),
        ("Breast-conserving surgery", "Breast"),
        ("Thyroidectomy", "Thyroid"),
        ("Exploratory laparotomy", "Others"),
    ]),
    "Thoracic surgery": (0.25, [
        ("Lobectomy", "Others"),
        ("Wedge resection", "Others"),
        ("Segmentectomy", "Others"),
    ]),
    "Gynecology": (0.12, [
        ("Hysterectomy", "Others"),
        ("Myomectomy", "Others"),
    ]),
    "Urology": (0.08, [
        ("Radical prostatectomy", "Transplantation"),
        ("Kidney transplantation", "Transplantation"),
        ("Nephrectomy", "Others"),
    ]),
}

_ANE_TYPES = ["General", "Spinal", "Sedationalgesia"]
_ANE_WEIGHTS = [0.92, 0.05, 0.03]

_ASA_SCORES = [1, 2, 3, 4, 5]
_ASA_WEIGHTS = [0.25, 0.5, 0.2, 0.04, 0.01]


def generate_cases(n_cases: int = 500, seed: int = 42) -> pd.DataFrame:
    """Generate n_cases synthetic surgical cases.

    Durations are lognormal around two hours; ICU stay and in-hospital
    mortality rise with ASA score.
    """
    rng = np.random.default_rng(seed)

    dept_names = list(_DEPARTMENTS)
    dept_weights = np.array([_DEPARTMENTS[d][0] for d in dept_names])
    dept_weights = dept_weights / dept_weights.sum()

    rows = []
    for i in range(n_cases):
        department = dept_names[rng.choice(len(dept_names), p=dept_weights)]
        procedures = _DEPARTMENTS[department][1]
        opname, optype = procedures[rng.integers(len(procedures))]

        age = float(np.clip(round(rng.normal(58, 15)), 0, 95))
        asa = int(rng.choice(_ASA_SCORES, p=_ASA_WEIGHTS))

        opstart = float(rng.integers(1_000, 4_000))
        duration_s = float(rng.lognormal(mean=np.log(7_200), sigma=0.5))
        opend = round(opstart + duration_s)

        icu_prob = min(0.05 + 0.12 * (asa - 1), 0.9)
        icu_days = int(rng.poisson(1.5 * asa)) if rng.random() < icu_prob else 0

        death_prob = min(0.002 * asa ** 2, 0.5)
        death_inhosp = int(rng.random() < death_prob)

        rows.append({
            "subjectid": str(1000 + i),
            "age": age,
            "opstart": opstart,
            "opend": float(opend),
            "icu_days": float(icu_days),
            "asa": float(asa),
            "intraop_ebl": float(round(rng.gamma(2.0, 150.0))),
            "death_inhosp": float(death_inhosp),
            "department": department,
            "optype": optype,
            "ane_type": _ANE_TYPES[rng.choice(len(_ANE_TYPES), p=_ANE_WEIGHTS)],
            "opname": opname,
        })

    return pd.DataFrame(rows)[REQUIRED_COLUMNS]
