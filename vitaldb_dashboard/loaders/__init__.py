"""Data ingestion loaders for the VitalDB case export."""

from .cases import empty_cases, load_cases

__all__ = [
    "load_cases",
    "empty_cases",
]
