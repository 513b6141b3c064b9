"""Statistics collectors, one per external source."""

from typing import Dict, List, Optional, Type

from ..fetchers import ReferencePageFetcher
from ..output.json_sink import JsonSink
from .base import BaseCollector
from .bjs import BJSCollector
from .cdc import CDCCollector
from .missouri import MissouriDOCCollector

# Run order: health, regional, national.
COLLECTOR_CLASSES: List[Type[BaseCollector]] = [CDCCollector, MissouriDOCCollector, BJSCollector]
COLLECTOR_KEYS = tuple(cls.DEFAULT_SOURCE.key for cls in COLLECTOR_CLASSES)


def build_collectors(
    sink: JsonSink,
    *,
    fetcher: Optional[ReferencePageFetcher] = None,
    url_overrides: Optional[Dict[str, str]] = None,
) -> List[BaseCollector]:
    overrides = url_overrides or {}
    return [
        cls(sink, fetcher=fetcher, url=overrides.get(cls.DEFAULT_SOURCE.key))
        for cls in COLLECTOR_CLASSES
    ]


__all__ = [
    "BaseCollector",
    "BJSCollector",
    "CDCCollector",
    "MissouriDOCCollector",
    "COLLECTOR_CLASSES",
    "COLLECTOR_KEYS",
    "build_collectors",
]
