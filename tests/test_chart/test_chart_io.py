"""Tests for loading and saving charts (chartgen.chart).

Covers:
- load_chart: metadata, templates, raw files, parsed values
- load_chart failures (missing dir, missing Chart.yaml, bad values)
- save_chart: layout, raw values bytes preserved, dumped values fallback
- ChartMetadata aliases
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from chartgen.chart import Chart, ChartFile, ChartMetadata, load_chart, save_chart
from chartgen.errors import ChartLoadError, ChartSaveError


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# ChartMetadata
# ---------------------------------------------------------------------------


class TestChartMetadata:
    def test_accepts_file_style_keys(self):
        meta = ChartMetadata.model_validate(
            {"apiVersion": "v2", "name": "demo", "appVersion": "1.0"}
        )
        assert meta.api_version == "v2"
        assert meta.app_version == "1.0"

    def test_to_yaml_dict_uses_aliases_and_drops_none(self):
        data = ChartMetadata(name="demo").to_yaml_dict()
        assert data["apiVersion"] == "v2"
        assert "appVersion" not in data
        assert "api_version" not in data

    def test_unknown_keys_are_kept(self):
        meta = ChartMetadata.model_validate({"name": "demo", "keywords": ["web"]})
        assert meta.to_yaml_dict()["keywords"] == ["web"]


# ---------------------------------------------------------------------------
# load_chart
# ---------------------------------------------------------------------------


class TestLoadChart:
    def test_loads_existing_chart(self, existing_chart: Path):
        chart = load_chart(existing_chart)
        assert chart.name == "shop"
        assert [t.name for t in chart.templates] == ["templates/main_service.yaml"]
        assert chart.values["main"]["service"]["port"] == 80

    def test_raw_includes_chart_and_values_files(self, existing_chart: Path):
        chart = load_chart(existing_chart)
        raw_names = {f.name for f in chart.raw}
        assert {"Chart.yaml", "values.yaml"} <= raw_names
        assert chart.raw_file("values.yaml").data.startswith(b"# Default values for shop.")

    def test_files_excludes_chart_and_values(self, starter_chart: Path):
        chart = load_chart(starter_chart)
        assert [f.name for f in chart.files] == [".helmignore"]

    def test_nested_templates_use_posix_names(self, starter_chart: Path):
        chart = load_chart(starter_chart)
        names = {t.name for t in chart.templates}
        assert "templates/tests/test-connection.yaml" in names

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(ChartLoadError) as exc_info:
            load_chart(tmp_path / "nope")
        assert exc_info.value.path == tmp_path / "nope"

    def test_missing_chart_file(self, tmp_path: Path):
        with pytest.raises(ChartLoadError, match="Chart.yaml file is missing"):
            load_chart(tmp_path)

    def test_values_must_be_mapping(self, existing_chart: Path):
        (existing_chart / "values.yaml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ChartLoadError, match="must be a mapping"):
            load_chart(existing_chart)

    def test_invalid_values_yaml(self, existing_chart: Path):
        (existing_chart / "values.yaml").write_text("a: [unclosed\n", encoding="utf-8")
        with pytest.raises(ChartLoadError, match="cannot parse"):
            load_chart(existing_chart)

    def test_chart_without_values(self, existing_chart: Path):
        (existing_chart / "values.yaml").unlink()
        chart = load_chart(existing_chart)
        assert chart.values == {}
        assert chart.raw_file("values.yaml") is None


# ---------------------------------------------------------------------------
# save_chart
# ---------------------------------------------------------------------------


class TestSaveChart:
    def test_writes_chart_layout(self, tmp_path: Path):
        chart = Chart(
            metadata=ChartMetadata(name="demo", version="1.2.3"),
            templates=[ChartFile(name="templates/svc.yaml", data=b"kind: Service\n")],
            files=[ChartFile(name=".helmignore", data=b".git/\n")],
            values={"main": {"port": 80}},
        )
        out = save_chart(chart, tmp_path)

        assert out == tmp_path / "demo"
        meta = yaml.safe_load((out / "Chart.yaml").read_text(encoding="utf-8"))
        assert meta["name"] == "demo"
        assert meta["version"] == "1.2.3"
        assert (out / "templates" / "svc.yaml").read_bytes() == b"kind: Service\n"
        assert (out / ".helmignore").exists()
        assert (out / "charts").is_dir()
        assert yaml.safe_load((out / "values.yaml").read_text()) == {"main": {"port": 80}}

    def test_raw_values_bytes_win(self, tmp_path: Path):
        raw = b"# keep this comment\nmain: {}\n"
        chart = Chart(
            metadata=ChartMetadata(name="demo"),
            raw=[ChartFile(name="values.yaml", data=raw)],
            values={"something": "else"},
        )
        out = save_chart(chart, tmp_path)
        assert (out / "values.yaml").read_bytes() == raw

    def test_load_save_roundtrip(self, existing_chart: Path, tmp_path: Path):
        dest = tmp_path / "out"
        dest.mkdir()
        out = save_chart(load_chart(existing_chart), dest)
        assert (out / "values.yaml").read_bytes() == (existing_chart / "values.yaml").read_bytes()
        assert (out / "templates" / "main_service.yaml").exists()

    def test_destination_must_exist(self, tmp_path: Path):
        chart = Chart(metadata=ChartMetadata(name="demo"))
        with pytest.raises(ChartSaveError, match="no such directory"):
            save_chart(chart, tmp_path / "missing")
