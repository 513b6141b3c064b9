from __future__ import annotations

from typing import Optional


class CollectionError(Exception):
    """Base class for errors raised while collecting or writing statistics."""


class ConfigError(CollectionError):
    """Raised when the configuration file or environment is invalid."""


class FetchError(CollectionError):
    """A reference page could not be fetched. Always handled by the collector."""

    def __init__(self, source_key: str, message: str, original_error: Optional[Exception] = None) -> None:
        self.source_key = source_key
        self.message = message
        self.original_error = original_error
        super().__init__(f"{source_key}: {message}")


class SinkError(CollectionError):
    """An artifact could not be persisted."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class CollectorError(CollectionError):
    """A collector built its dataset but could not persist it."""

    def __init__(self, source_key: str, message: str) -> None:
        self.source_key = source_key
        self.message = message
        super().__init__(f"{source_key}: {message}")
