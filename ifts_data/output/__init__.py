"""Artifact persistence."""

from .json_sink import JsonSink

__all__ = ["JsonSink"]
