from __future__ import annotations

from pathlib import Path
from typing import Dict
from urllib.parse import urlparse

import yaml

from ..errors import ConfigError

REQUIRED_FIELDS = {"key", "url"}

# Keys of the built-in collectors; the YAML may only override these.
ALLOWED_KEYS = {"cdc", "missouri", "bjs"}


def _validate_source_dict(entry: dict) -> None:
    """Validate a single source mapping from YAML.

    Required fields: key ('cdc' | 'missouri' | 'bjs'), url (http/https).
    Optional fields:
      - name: str, informational only
    """
    missing = REQUIRED_FIELDS - set(entry)
    if missing:
        raise ConfigError(f"Missing required fields: {sorted(missing)} in {entry}")

    if entry["key"] not in ALLOWED_KEYS:
        raise ConfigError(f"Invalid key '{entry['key']}'. Allowed: {sorted(ALLOWED_KEYS)}")

    url_str = str(entry["url"]).strip()
    parsed = urlparse(url_str)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Invalid URL '{url_str}'. Must be absolute http(s) URL.")


def load_source_urls(path: Path | str) -> Dict[str, str]:
    """Load reference-page URL overrides from ``sources.yaml``.

    YAML structure:
      - Top-level mapping
      - Key ``sources``: list of mappings with ``key``, ``url`` and an
        optional ``name``

    A missing file yields no overrides. Unknown top-level keys are ignored.
    """
    config_path = Path(path)
    if not config_path.exists():
        return {}

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the top level")

    sources_raw = data.get("sources") or []
    if not isinstance(sources_raw, list):
        raise ConfigError("'sources' must be a list in the YAML configuration")

    urls: Dict[str, str] = {}
    for item in sources_raw:
        if not isinstance(item, dict):
            raise ConfigError(f"Each source must be a mapping, got: {type(item)}")
        _validate_source_dict(item)
        urls[str(item["key"])] = str(item["url"]).strip()
    return urls
