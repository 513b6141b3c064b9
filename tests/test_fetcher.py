"""Tests for the reference page fetcher."""

from unittest.mock import MagicMock

import pytest
import requests

from ifts_data.errors import FetchError
from ifts_data.fetchers import DEFAULT_USER_AGENT, ReferencePageFetcher
from ifts_data.models import Source


@pytest.fixture
def source():
    return Source(key="cdc", name="CDC", url="https://www.cdc.gov/hiv/group/correctional.html", filename="cdc.json")


def _fetcher_with(response=None, side_effect=None, **kwargs):
    session = MagicMock(spec=requests.Session)
    session.get.return_value = response
    session.get.side_effect = side_effect
    return ReferencePageFetcher(session=session, **kwargs), session


def test_success_parses_title(source, ok_response):
    fetcher, session = _fetcher_with(ok_response)
    page = fetcher.fetch(source)

    assert page.title == "HIV and Correctional Settings"
    assert "Reference content" in page.text
    assert page.status_code == 200


def test_sends_user_agent_and_timeout(source, ok_response):
    fetcher, session = _fetcher_with(ok_response, timeout=15)
    fetcher.fetch(source)

    _, kwargs = session.get.call_args
    assert kwargs["headers"] == {"User-Agent": DEFAULT_USER_AGENT}
    assert kwargs["timeout"] == 15


def test_timeout_raises_fetch_error(source):
    fetcher, _ = _fetcher_with(side_effect=requests.Timeout("read timed out"))
    with pytest.raises(FetchError) as excinfo:
        fetcher.fetch(source)
    assert excinfo.value.source_key == "cdc"
    assert isinstance(excinfo.value.original_error, requests.Timeout)


def test_http_error_status_raises_fetch_error(source):
    response = MagicMock()
    response.status_code = 503
    response.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
    fetcher, _ = _fetcher_with(response)

    with pytest.raises(FetchError):
        fetcher.fetch(source)


def test_invalid_url_raises_fetch_error():
    fetcher, session = _fetcher_with()
    bad = Source(key="bjs", name="BJS", url="ftp://example.org/x", filename="bjs.json")

    with pytest.raises(FetchError):
        fetcher.fetch(bad)
    session.get.assert_not_called()
