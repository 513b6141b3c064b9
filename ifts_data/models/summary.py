from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .dataset import utc_now_iso

IMPACT_AREA_KEYS = ("legal", "education", "health", "housing", "employment", "mentorship")


@dataclass(slots=True)
class KeyStatistic:
    label: str
    value: str
    source: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"label": self.label, "value": self.value}
        if self.description is not None:
            payload["description"] = self.description
        payload["source"] = self.source
        return payload


@dataclass(slots=True)
class ImpactArea:
    need: str
    stats: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"need": self.need, "stats": list(self.stats)}


@dataclass(slots=True)
class Summary:
    """Cross-source rollup written to ``summary.json``."""

    title: str
    purpose: str
    key_statistics: List[KeyStatistic]
    impact_areas: Dict[str, ImpactArea]
    missouri_specific: Dict[str, str]
    data_sources: List[str]
    generated_at: str = field(default_factory=utc_now_iso)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "generatedAt": self.generated_at,
            "purpose": self.purpose,
            "keyStatistics": [k.to_dict() for k in self.key_statistics],
            "impactAreas": {key: area.to_dict() for key, area in self.impact_areas.items()},
            "missouriSpecific": dict(self.missouri_specific),
            "dataSources": list(self.data_sources),
        }


@dataclass(slots=True)
class DisplayStat:
    key: str
    value: str
    label: str

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "value": self.value, "label": self.label}


@dataclass(slots=True)
class DisplayStats:
    """Flattened key/value/label list consumed by the website."""

    stats: List[DisplayStat]
    last_updated: str = field(default_factory=utc_now_iso)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lastUpdated": self.last_updated,
            "stats": [s.to_dict() for s in self.stats],
        }
