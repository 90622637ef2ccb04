"""
Value types passed between the aggregation layer and the renderers.

All three are frozen so that a summary handed to a chart cannot be edited
in place; a filter change always produces fresh objects.
"""

from dataclasses import dataclass
from typing import Any

from .config import ALL


@dataclass(frozen=True)
class CaseFilter:
    """Current dropdown/slider selection.

    ``None`` or ``"all"`` on a dimension means the dimension is inactive.
    """

    age_group: int | str | None = None
    metric: str = "mortality"
    department: str | None = None
    asa: Any = None
    optype: str | None = None

    @staticmethod
    def is_active(value: Any) -> bool:
        return value is not None and value != ALL


@dataclass(frozen=True)
class CategorySummary:
    """One slice of a pie chart or one bar of the age histogram."""

    label: Any
    value: int
    color: str


@dataclass(frozen=True)
class ScalarSummary:
    """Headline statistics for a filtered set of cases.

    Mean fields are None when no cases matched.
    """

    count: int
    avg_duration: float | None
    avg_icu_stay: float | None
    mortality_rate: float | None
