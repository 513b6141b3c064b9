from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import SinkError
from ..utils.logging import get_logger

logger = get_logger("ifts.output.sink")


class JsonSink:
    """Writes named artifacts as 2-space indented UTF-8 JSON under ``base_dir``.

    Existing files are overwritten. Each write goes to a ``.tmp`` sibling
    that is renamed over the target, so a failed write leaves the previous
    file (or nothing) in place.
    """

    def __init__(self, base_dir: str | Path = "data") -> None:
        self.base_dir = Path(base_dir)

    def ensure_output_dir(self) -> Path:
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SinkError(str(self.base_dir), f"cannot create output directory: {exc}") from exc
        return self.base_dir

    def path_for(self, filename: str) -> Path:
        return self.base_dir / filename

    def write(self, filename: str, value: Any) -> Path:
        self.ensure_output_dir()
        payload = value.to_dict() if hasattr(value, "to_dict") else value
        content = json.dumps(payload, ensure_ascii=False, indent=2)

        file_path = self.path_for(filename)
        temp_path = file_path.with_name(file_path.name + ".tmp")
        try:
            temp_path.write_text(content, encoding="utf-8")
            temp_path.replace(file_path)
        except OSError as exc:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not remove temporary file %s", temp_path)
            raise SinkError(str(file_path), f"write failed: {exc}") from exc

        resolved = file_path.resolve()
        logger.info("Saved: %s", resolved)
        return resolved
