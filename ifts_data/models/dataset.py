from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(slots=True)
class StatEntry:
    """One reported figure.

    ``value`` is kept as display text because sources mix units
    ("1.3%", "1 in 18", "Declining").
    """

    metric: str
    value: str
    description: Optional[str] = None
    comparison: Optional[str] = None
    multiplier: Optional[str] = None
    percentage: Optional[str] = None
    location: Optional[str] = None
    year: Optional[int] = None
    source: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"metric": self.metric, "value": self.value}
        for key in ("description", "comparison", "multiplier", "percentage", "location", "year", "source"):
            val = getattr(self, key)
            if val is not None:
                payload[key] = val
        return payload


@dataclass(slots=True)
class ResourceLink:
    name: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "url": self.url}


@dataclass(slots=True)
class Dataset:
    """Statistics bundle produced by one collector.

    ``sections`` holds the topic-specific breakdowns; they are emitted
    between ``statistics`` and ``resources`` in insertion order.
    """

    source: str
    category: str
    statistics: List[StatEntry] = field(default_factory=list)
    sections: Dict[str, Any] = field(default_factory=dict)
    resources: List[ResourceLink] = field(default_factory=list)
    last_updated: str = field(default_factory=utc_now_iso)

    def source_for(self, entry: StatEntry) -> str:
        return entry.source or self.source

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "source": self.source,
            "lastUpdated": self.last_updated,
            "category": self.category,
            "statistics": [s.to_dict() for s in self.statistics],
        }
        for key, section in self.sections.items():
            payload[key] = section
        payload["resources"] = [r.to_dict() for r in self.resources]
        return payload
