from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from .aggregation import Aggregator
from .collectors import BaseCollector
from .models import Dataset, Summary
from .output.json_sink import JsonSink
from .utils.logging import get_logger

logger = get_logger("ifts.orchestrator")


@dataclass(slots=True)
class RunResult:
    datasets: Dict[str, Optional[Dataset]] = field(default_factory=dict)
    summary: Optional[Summary] = None

    @property
    def failed(self) -> List[str]:
        return [key for key, ds in self.datasets.items() if ds is None]


class Orchestrator:
    """Runs the selected collectors one after another, then the aggregator.

    Collectors run in the order given at construction (health, regional,
    national). The aggregator only runs when asked to, and always after the
    last collector has finished writing.
    """

    def __init__(
        self,
        sink: JsonSink,
        collectors: Sequence[BaseCollector],
        *,
        aggregator: Optional[Aggregator] = None,
    ) -> None:
        self.sink = sink
        self.collectors = list(collectors)
        self.aggregator = aggregator or Aggregator(sink)

    def run(self, selected: Iterable[str], *, aggregate: bool = False) -> RunResult:
        wanted = set(selected)
        unknown = wanted - {c.key for c in self.collectors}
        if unknown:
            raise ValueError(f"Unknown collector keys: {sorted(unknown)}")

        self.sink.ensure_output_dir()
        result = RunResult()
        for collector in self.collectors:
            if collector.key not in wanted:
                continue
            result.datasets[collector.key] = collector.collect()

        if result.failed:
            logger.warning("Collectors returned no data: %s", ", ".join(result.failed))

        if aggregate:
            result.summary = self.aggregator.run(
                result.datasets.get("cdc"),
                result.datasets.get("missouri"),
                result.datasets.get("bjs"),
            )
        return result
