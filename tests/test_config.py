"""Tests for environment and YAML configuration."""

from pathlib import Path

import pytest

from ifts_data.errors import ConfigError
from ifts_data.fetchers import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ifts_data.utils.config_loader import load_source_urls
from ifts_data.utils.pipeline_config import PipelineConfig


class TestPipelineConfig:
    def test_defaults(self):
        cfg = PipelineConfig.from_env({})
        assert cfg.output_dir == Path("data")
        assert cfg.fetch_timeout == DEFAULT_TIMEOUT == 15
        assert cfg.user_agent == DEFAULT_USER_AGENT
        assert cfg.offline is False

    def test_overrides(self):
        cfg = PipelineConfig.from_env(
            {
                "IFTS_OUTPUT_DIR": "/srv/site/data",
                "IFTS_FETCH_TIMEOUT": "2.5",
                "IFTS_USER_AGENT": "IFTSBot/2.0",
                "IFTS_SOURCES_CONFIG": "conf.yaml",
                "IFTS_OFFLINE": "yes",
            }
        )
        assert cfg.output_dir == Path("/srv/site/data")
        assert cfg.fetch_timeout == 2.5
        assert cfg.user_agent == "IFTSBot/2.0"
        assert cfg.sources_config == Path("conf.yaml")
        assert cfg.offline is True

    @pytest.mark.parametrize("value", ["abc", "0", "-1"])
    def test_bad_timeout(self, value):
        with pytest.raises(ConfigError):
            PipelineConfig.from_env({"IFTS_FETCH_TIMEOUT": value})


class TestLoadSourceUrls:
    def test_missing_file_means_no_overrides(self, tmp_path):
        assert load_source_urls(tmp_path / "nope.yaml") == {}

    def test_shipped_config_is_valid(self):
        path = Path(__file__).resolve().parent.parent / "config" / "sources.yaml"
        urls = load_source_urls(path)
        assert set(urls) == {"cdc", "missouri", "bjs"}
        assert urls["bjs"] == "https://bjs.ojp.gov/topics/recidivism"

    def test_overrides_loaded(self, tmp_path):
        path = tmp_path / "sources.yaml"
        path.write_text(
            "sources:\n  - key: cdc\n    url: https://example.org/cdc\n",
            encoding="utf-8",
        )
        assert load_source_urls(path) == {"cdc": "https://example.org/cdc"}

    @pytest.mark.parametrize(
        "body",
        [
            "sources:\n  - key: census\n    url: https://example.org\n",
            "sources:\n  - key: cdc\n    url: not-a-url\n",
            "sources:\n  - key: cdc\n",
            "sources: cdc\n",
            "- just a list\n",
            "sources: [unclosed\n",
        ],
    )
    def test_invalid_config(self, tmp_path, body):
        path = tmp_path / "sources.yaml"
        path.write_text(body, encoding="utf-8")
        with pytest.raises(ConfigError):
            load_source_urls(path)
