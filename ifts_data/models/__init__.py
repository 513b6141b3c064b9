"""Typed models used across the application."""

from .source import Source, SourceKey
from .dataset import Dataset, ResourceLink, StatEntry, utc_now_iso
from .summary import (
    IMPACT_AREA_KEYS,
    DisplayStat,
    DisplayStats,
    ImpactArea,
    KeyStatistic,
    Summary,
)

__all__ = [
    "Source",
    "SourceKey",
    "Dataset",
    "ResourceLink",
    "StatEntry",
    "utc_now_iso",
    "IMPACT_AREA_KEYS",
    "DisplayStat",
    "DisplayStats",
    "ImpactArea",
    "KeyStatistic",
    "Summary",
]
