"""Two-phase collector: advisory fetch, then build and persist a Dataset."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import ClassVar, Optional

from ..errors import CollectorError, FetchError, SinkError
from ..fetchers import ReferencePageFetcher
from ..models import Dataset, Source
from ..output.json_sink import JsonSink
from ..utils.logging import get_logger


class BaseCollector(ABC):
    """Produces the Dataset for one statistics source.

    The live fetch is advisory. Its outcome is logged and never changes the
    returned Dataset, which is always built from the reference statistics
    in ``build_dataset``.
    """

    DEFAULT_SOURCE: ClassVar[Source]

    def __init__(
        self,
        sink: JsonSink,
        *,
        fetcher: Optional[ReferencePageFetcher] = None,
        url: Optional[str] = None,
    ) -> None:
        self.sink = sink
        self.fetcher = fetcher
        self.source = replace(self.DEFAULT_SOURCE, url=url) if url else self.DEFAULT_SOURCE
        self.logger = get_logger(f"ifts.collectors.{self.source.key}")

    @property
    def key(self) -> str:
        return self.source.key

    @abstractmethod
    def build_dataset(self) -> Dataset:
        """Return a freshly built Dataset from the reference statistics."""

    def attempt_fetch(self) -> bool:
        """Fetch the reference page; return whether it succeeded."""
        if self.fetcher is None:
            self.logger.debug("No fetcher configured; skipping live fetch for %s", self.source.name)
            return False
        try:
            page = self.fetcher.fetch(self.source)
        except FetchError as exc:
            self.logger.warning("Could not fetch live %s page, using reference statistics: %s", self.source.name, exc)
            return False
        self.logger.info("Fetched %s page: %s", self.source.name, page.title or page.url)
        return True

    def collect(self) -> Optional[Dataset]:
        """Run both phases.

        Returns ``None`` when an unexpected error occurs; raises
        ``CollectorError`` when the Dataset cannot be persisted.
        """
        self.logger.info("Collecting %s data...", self.source.name)
        try:
            self.attempt_fetch()
            dataset = self.build_dataset()
            self.sink.write(self.source.filename, dataset)
        except SinkError as exc:
            self.logger.error("Could not save %s data: %s", self.source.name, exc)
            raise CollectorError(self.key, str(exc)) from exc
        except Exception as exc:  # noqa: BLE001 - sibling collectors keep running
            self.logger.exception("Error collecting %s data: %s", self.source.name, exc)
            return None
        return dataset
