"""Shared fixtures: an isolated sink and fetchers that never touch the network."""

from unittest.mock import MagicMock

import pytest
import requests

from ifts_data.fetchers import ReferencePageFetcher
from ifts_data.output.json_sink import JsonSink

SAMPLE_HTML = """
<html>
  <head><title>HIV and Correctional Settings</title></head>
  <body><main><p>Reference content</p></main></body>
</html>
"""


@pytest.fixture
def sink(tmp_path):
    return JsonSink(tmp_path / "data")


@pytest.fixture
def ok_response():
    response = MagicMock()
    response.status_code = 200
    response.text = SAMPLE_HTML
    response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def succeeding_fetcher(ok_response):
    session = MagicMock(spec=requests.Session)
    session.get.return_value = ok_response
    return ReferencePageFetcher(session=session)


@pytest.fixture
def failing_fetcher():
    session = MagicMock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError("network unreachable")
    return ReferencePageFetcher(session=session)


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point the CLI at a temp output dir with fetches disabled."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("IFTS_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("IFTS_SOURCES_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.setenv("IFTS_OFFLINE", "1")
    monkeypatch.setattr("ifts_data.main.load_dotenv", lambda **kwargs: False)
    monkeypatch.setattr("ifts_data.main.configure_logging", lambda *a, **k: None)
    return tmp_path / "out"
