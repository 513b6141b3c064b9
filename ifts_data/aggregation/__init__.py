"""Summary and website stats built from the collected datasets."""

from .aggregator import (
    DISPLAY_STATS_FILENAME,
    SUMMARY_FILENAME,
    Aggregator,
    build_display_stats,
    build_summary,
)

__all__ = [
    "DISPLAY_STATS_FILENAME",
    "SUMMARY_FILENAME",
    "Aggregator",
    "build_display_stats",
    "build_summary",
]
