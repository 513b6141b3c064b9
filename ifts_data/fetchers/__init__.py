"""Reference page fetching for the statistics sources."""

from .http import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ReferencePage, ReferencePageFetcher

__all__ = ["DEFAULT_TIMEOUT", "DEFAULT_USER_AGENT", "ReferencePage", "ReferencePageFetcher"]
