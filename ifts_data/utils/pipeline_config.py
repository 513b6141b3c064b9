from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from ..errors import ConfigError
from ..fetchers import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class PipelineConfig:
    """Runtime settings resolved from the environment (and ``.env``)."""

    output_dir: Path = Path("data")
    fetch_timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    sources_config: Path = Path("config/sources.yaml")
    offline: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PipelineConfig":
        env = os.environ if environ is None else environ
        timeout_raw = env.get("IFTS_FETCH_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(timeout_raw)
        except ValueError as exc:
            raise ConfigError(f"IFTS_FETCH_TIMEOUT must be a number, got {timeout_raw!r}") from exc
        if timeout <= 0:
            raise ConfigError(f"IFTS_FETCH_TIMEOUT must be positive, got {timeout_raw!r}")
        return cls(
            output_dir=Path(env.get("IFTS_OUTPUT_DIR") or "data"),
            fetch_timeout=timeout,
            user_agent=env.get("IFTS_USER_AGENT") or DEFAULT_USER_AGENT,
            sources_config=Path(env.get("IFTS_SOURCES_CONFIG") or "config/sources.yaml"),
            offline=env.get("IFTS_OFFLINE", "").strip().lower() in _TRUTHY,
        )
