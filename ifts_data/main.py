"""Application entrypoint for the IFTS data collection.

This script orchestrates the high-level flow:
1) load configuration
2) run the selected collectors (CDC, Missouri DOC, BJS)
3) write the combined summary on a full run (``--all`` or no arguments),
   even if some collectors returned no data
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, Tuple

from dotenv import load_dotenv

from .collectors import COLLECTOR_KEYS, build_collectors
from .fetchers import ReferencePageFetcher
from .orchestrator import Orchestrator
from .output.json_sink import JsonSink
from .utils.config_loader import load_source_urls
from .utils.logging import configure_logging, get_logger
from .utils.pipeline_config import PipelineConfig

ALL_FLAG = "--all"
SELECTION_FLAGS = {f"--{key}": key for key in COLLECTOR_KEYS}

_FLAG_HELP = {
    "cdc": "CDC HIV/AIDS data only",
    "missouri": "Missouri DOC data only",
    "bjs": "Bureau of Justice Statistics data only",
}


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    """Parse the selection flags.

    Only exact matches of the known flags reach the parser; everything else
    (``--cdc=yes``, ``--help``, typos) is dropped beforehand.
    """
    parser = argparse.ArgumentParser(
        description="Inn From the Storm - collect CDC, Missouri DOC and BJS statistics",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(ALL_FLAG, action="store_true", help="Collect every source and write the summary (default)")
    for flag, key in SELECTION_FLAGS.items():
        parser.add_argument(flag, action="store_true", help=_FLAG_HELP.get(key))
    known = {ALL_FLAG, *SELECTION_FLAGS}
    return parser.parse_args([arg for arg in argv if arg in known])


def resolve_selection(argv: Sequence[str]) -> Tuple[List[str], bool]:
    """Return ``(collector keys, run aggregator)`` for the given arguments."""
    args = parse_args(argv)
    if not argv or args.all:
        return list(COLLECTOR_KEYS), True
    return [key for key in COLLECTOR_KEYS if getattr(args, key)], False


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(override=False)
    logger = get_logger("ifts.main")

    argv = sys.argv[1:] if argv is None else list(argv)
    keys, collect_all = resolve_selection(argv)

    fetcher: Optional[ReferencePageFetcher] = None
    try:
        configure_logging()
        logger.info("Inn From the Storm - Data Collection Automation")
        logger.info("Collecting CDC, Missouri DOC, and BJS Statistics")

        cfg = PipelineConfig.from_env()
        url_overrides = load_source_urls(cfg.sources_config)
        sink = JsonSink(cfg.output_dir)
        if not cfg.offline:
            fetcher = ReferencePageFetcher(timeout=cfg.fetch_timeout, user_agent=cfg.user_agent)
        orch = Orchestrator(sink, build_collectors(sink, fetcher=fetcher, url_overrides=url_overrides))
        orch.run(keys, aggregate=collect_all)
    except Exception as exc:  # noqa: BLE001 - top-level entrypoint guard
        logger.exception("Data collection failed: %s", exc)
        return 1
    finally:
        if fetcher is not None:
            fetcher.close()

    logger.info("Data collection complete! Output directory: %s", sink.base_dir.resolve())
    return 0


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
