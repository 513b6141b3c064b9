from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

SourceKey = Literal["cdc", "missouri", "bjs"]


@dataclass(slots=True)
class Source:
    """Reference page and output filename for one statistics source."""

    key: SourceKey
    name: str
    url: str
    filename: str
