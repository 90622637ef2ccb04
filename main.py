"""
VitalDB Case Dashboard — End-to-end analytics pipeline.

Runs the data pipeline from the case export to dashboard-ready outputs
and prints smoke-test summaries. Falls back to simulated cases when the
CSV is missing.

Usage:
    python main.py [path/to/vitaldb_cases.csv]
"""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from vitaldb_dashboard.config import AGE_MAX, AGE_MIN, AGE_STEP, CASES_FILE
from vitaldb_dashboard.loaders import load_cases
from vitaldb_dashboard.simulator import generate_cases
from vitaldb_dashboard.models import CaseFilter, ScalarSummary
from vitaldb_dashboard.aggregator import summarize
from vitaldb_dashboard.transforms import age_group_series
from vitaldb_dashboard.dashboard import (
    age_group_label,
    get_available_metrics,
    get_category_table,
    get_filter_options,
    get_summary_cards,
)

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run the full analytics pipeline and print smoke-test outputs."""
    argv = sys.argv[1:] if argv is None else argv
    path = Path(argv[0]) if argv else CASES_FILE

    print("=" * 70)
    print("  VITALDB SURGICAL CASES — Interactive Case Dashboard")
    print("  Analytics Pipeline Smoke Test")
    print("=" * 70)
    print()

    # ------------------------------------------------------------------
    # 1. Load source data
    # ------------------------------------------------------------------
    print("[ 1 ] LOADING SOURCE DATA")
    print("-" * 40)

    try:
        cases = load_cases(path)
        source = path.name
    except (FileNotFoundError, ValueError) as e:
        logger.warning("Could not load cases: %s; using simulated data", e)
        cases = generate_cases()
        source = "simulated"

    print(f"\nCases ({source}): {len(cases)} rows loaded")
    if not cases.empty:
        print(cases.head().to_string(index=False))

    options = get_filter_options(cases)
    print(f"\nDepartments: {options['department']}")
    print(f"ASA scores:  {options['asa']}")
    print(f"Op types:    {options['optype']}")

    # ------------------------------------------------------------------
    # 2. Summary statistics
    # ------------------------------------------------------------------
    print("\n")
    print("[ 2 ] SUMMARY STATISTICS")
    print("-" * 40)

    overall = summarize(cases, CaseFilter(metric="summary"))
    print("\nAll cases:")
    for line in get_summary_cards(overall).values():
        print(f"  {line}")

    for department in options["department"][1:]:
        dept_summary = summarize(cases, CaseFilter(metric="summary", department=department))
        print(f"\n{department}:")
        for line in get_summary_cards(dept_summary).values():
            print(f"  {line}")

    # ------------------------------------------------------------------
    # 3. Age-group breakdowns
    # ------------------------------------------------------------------
    print("\n")
    print("[ 3 ] AGE-GROUP BREAKDOWNS")
    print("-" * 40)

    for bucket in range(AGE_MIN, AGE_MAX + 1, AGE_STEP):
        print(f"\n{age_group_label(bucket)}")
        for metric, label in get_available_metrics():
            if metric == "count":
                continue
            result = summarize(cases, CaseFilter(age_group=bucket, metric=metric))
            table = get_category_table(result)
            cells = ", ".join(f"{r.label}={r.value}" for r in table.itertuples())
            print(f"  {label:16s} | {cells or 'no cases'}")

    histogram = summarize(cases, CaseFilter(metric="count"))
    print("\nCases per age group:")
    for bar in histogram:
        print(f"  {str(bar.label):>7s} | {bar.value}")

    # ------------------------------------------------------------------
    # 4. Acceptance checks
    # ------------------------------------------------------------------
    print("\n")
    print("[ 4 ] ACCEPTANCE CHECKS")
    print("-" * 40)

    failures = 0

    mortality = summarize(cases, CaseFilter(age_group=AGE_MAX, metric="mortality"))
    check1 = [m.label for m in mortality] == ["No Mortality", "Mortality"]
    failures += not check1
    print(f"\n  [{'PASS' if check1 else 'FAIL'}] Mortality split has both categories in order")

    bucket_total = 0
    for bucket in range(AGE_MIN, AGE_MAX + 1, AGE_STEP):
        bucket_total += sum(s.value for s in summarize(cases, CaseFilter(age_group=bucket, metric="optype")))
    aged = int(age_group_series(cases["age"]).between(AGE_MIN, AGE_MAX).sum())
    check2 = bucket_total == aged
    failures += not check2
    print(f"  [{'PASS' if check2 else 'FAIL'}] Op-type slices cover {bucket_total} of {aged} aged cases")

    empty = summarize(cases, CaseFilter(metric="summary", department="__none__"))
    check3 = isinstance(empty, ScalarSummary) and empty.count == 0 and empty.avg_duration is None
    failures += not check3
    print(f"  [{'PASS' if check3 else 'FAIL'}] Empty selection reports N/A instead of NaN")

    print("\n" + "=" * 70)
    print("  Pipeline complete.")
    print("=" * 70)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
