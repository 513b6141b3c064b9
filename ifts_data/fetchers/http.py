from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

from ..errors import FetchError
from ..models import Source
from ..utils.logging import get_logger

logger = get_logger("ifts.fetchers.http")

DEFAULT_TIMEOUT = 15
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; DataBot/1.0)"


@dataclass(slots=True)
class ReferencePage:
    url: str
    status_code: int
    title: Optional[str]
    text: str


def _validated_url(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid URL for HTTP fetch: {url}")
    return url


class ReferencePageFetcher:
    """Best-effort GET of a source's reference page.

    Every failure mode (bad URL, timeout, connection error, HTTP status
    >= 400, unparseable body) is raised as ``FetchError`` so callers only
    need a single except clause.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self.session = session or requests.Session()

    def fetch(self, source: Source) -> ReferencePage:
        headers: Dict[str, str] = {"User-Agent": self.user_agent}
        try:
            url = _validated_url(source.url)
        except ValueError as exc:
            raise FetchError(source.key, str(exc), exc) from exc

        logger.debug("Fetching reference page from %s", url)
        try:
            resp = self.session.get(url, headers=headers, timeout=self.timeout)
            if resp.status_code >= 400:
                logger.debug("HTTP fetch failed (%s): %s", resp.status_code, url)
                resp.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(source.key, f"request to {url} failed: {exc}", exc) from exc

        try:
            soup = BeautifulSoup(resp.text, "html.parser")
        except Exception as exc:  # noqa: BLE001 - parser errors vary by backend
            raise FetchError(source.key, f"could not parse {url}: {exc}", exc) from exc

        title = soup.title.string.strip() if soup.title and soup.title.string else None
        main = soup.find("main") or soup.body
        text = main.get_text("\n", strip=True) if main else ""
        return ReferencePage(url=url, status_code=resp.status_code, title=title, text=text)

    def close(self) -> None:
        self.session.close()
