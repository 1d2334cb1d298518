"""Unit tests for ScaffoldConfig (chartgen.config).

Tests cover:
- Defaults and validation
- chart_context for template rendering
- resolve_starter (absolute paths vs registered names)
- from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from chartgen.config import ScaffoldConfig


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestScaffoldConfigDefaults:
    @pytest.mark.unit
    def test_default_values(self):
        config = ScaffoldConfig()
        assert config.description == "A Helm chart for Kubernetes"
        assert config.api_version == "v2"
        assert config.chart_version == "0.1.0"
        assert config.app_version == "1.16.0"

    @pytest.mark.unit
    def test_starters_dir_follows_xdg_data_home(self, tmp_path: Path):
        with patch.dict(os.environ, {"XDG_DATA_HOME": str(tmp_path)}, clear=True):
            config = ScaffoldConfig()
        assert config.starters_dir == tmp_path / "chartgen" / "starters"

    @pytest.mark.unit
    def test_starters_dir_falls_back_to_local_share(self):
        with patch.dict(os.environ, {"HOME": "/home/tester"}, clear=True):
            config = ScaffoldConfig()
        assert config.starters_dir == Path("/home/tester/.local/share/chartgen/starters")

    @pytest.mark.unit
    def test_empty_chart_version_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(chart_version="")

    @pytest.mark.unit
    def test_empty_app_version_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(app_version="")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestChartContext:
    @pytest.mark.unit
    def test_contains_chart_name_and_metadata(self):
        ctx = ScaffoldConfig(description="Demo chart").chart_context("demo")
        assert ctx == {
            "chart_name": "demo",
            "description": "Demo chart",
            "api_version": "v2",
            "chart_version": "0.1.0",
            "app_version": "1.16.0",
        }


class TestResolveStarter:
    @pytest.mark.unit
    def test_name_resolves_under_starters_dir(self, tmp_path: Path):
        config = ScaffoldConfig(starters_dir=tmp_path)
        assert config.resolve_starter("webapp") == tmp_path / "webapp"

    @pytest.mark.unit
    def test_absolute_path_used_as_is(self, tmp_path: Path):
        config = ScaffoldConfig(starters_dir=tmp_path / "elsewhere")
        starter = tmp_path / "my-starter"
        assert config.resolve_starter(str(starter)) == starter


# ---------------------------------------------------------------------------
# from_env
# ---------------------------------------------------------------------------


class TestScaffoldConfigFromEnv:
    @pytest.mark.unit
    def test_defaults_without_env(self):
        with patch.dict(os.environ, {"HOME": "/home/tester"}, clear=True):
            config = ScaffoldConfig.from_env()
        assert config.description == "A Helm chart for Kubernetes"
        assert config.chart_version == "0.1.0"

    @pytest.mark.unit
    def test_starters_dir_from_env(self):
        with patch.dict(os.environ, {"CHARTGEN_STARTERS_DIR": "/opt/starters"}, clear=True):
            config = ScaffoldConfig.from_env()
        assert config.starters_dir == Path("/opt/starters")

    @pytest.mark.unit
    def test_metadata_from_env(self):
        env = {
            "CHARTGEN_DESCRIPTION": "From env",
            "CHARTGEN_CHART_VERSION": "3.1.4",
            "CHARTGEN_APP_VERSION": "2.7",
        }
        with patch.dict(os.environ, env, clear=True):
            config = ScaffoldConfig.from_env()
        assert config.description == "From env"
        assert config.chart_version == "3.1.4"
        assert config.app_version == "2.7"
