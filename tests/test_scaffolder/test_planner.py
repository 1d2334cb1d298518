"""Tests for scaffold planning (no filesystem writes)."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from chartgen.config import ScaffoldConfig
from chartgen.errors import UnresolvedPlaceholderError
from chartgen.scaffolder.placeholders import find_markers
from chartgen.scaffolder.planner import (
    DEFAULT_MODULE,
    ScaffoldMode,
    module_values,
    plan,
    plan_add_module,
    plan_new_chart,
)
from chartgen.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit

NEW_CHART_FILES = {
    "Chart.yaml",
    "values.yaml",
    ".helmignore",
    "templates/main_deployment.yaml",
    "templates/_main_helpers.tpl",
    "templates/main_serviceaccount.yaml",
    "templates/main_service.yaml",
    "templates/main_ingress.yaml",
    "templates/main_hpa.yaml",
    "templates/tests/main_test-connection.yaml",
    "templates/NOTES.txt",
}


def _relative(paths: list[Path], root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in paths}


class TestPlanNewChart:
    def test_exact_file_set(self, tmp_path: Path):
        chart_dir = tmp_path / "demo"
        scaffold_plan = plan_new_chart(chart_dir, "demo")
        assert scaffold_plan.mode is ScaffoldMode.NEW_CHART
        assert scaffold_plan.root == chart_dir
        assert _relative(scaffold_plan.paths, chart_dir) == NEW_CHART_FILES

    def test_chart_level_files_come_first(self, tmp_path: Path):
        scaffold_plan = plan_new_chart(tmp_path / "demo", "demo")
        assert [f.path.name for f in scaffold_plan.files[:3]] == ["Chart.yaml", "values.yaml", ".helmignore"]

    def test_charts_directory_directive(self, tmp_path: Path):
        scaffold_plan = plan_new_chart(tmp_path / "demo", "demo")
        assert [d.path for d in scaffold_plan.directories] == [tmp_path / "demo" / "charts"]

    def test_no_values_fragment(self, tmp_path: Path):
        assert plan_new_chart(tmp_path / "demo", "demo").values_fragment is None

    def test_chart_yaml_uses_config(self, tmp_path: Path):
        config = ScaffoldConfig(description="Demo", chart_version="1.0.0", app_version="2.0")
        scaffold_plan = plan_new_chart(tmp_path / "demo", "demo", config=config)
        meta = yaml.safe_load(scaffold_plan.files[0].content)
        assert meta["name"] == "demo"
        assert meta["description"] == "Demo"
        assert meta["version"] == "1.0.0"
        assert meta["appVersion"] == "2.0"
        assert meta["apiVersion"] == "v2"

    def test_values_yaml_has_main_module(self, tmp_path: Path):
        scaffold_plan = plan_new_chart(tmp_path / "demo", "demo")
        values_file = scaffold_plan.files[1]
        assert values_file.content.startswith(b"# Default values for demo.")
        values = yaml.safe_load(values_file.content)
        assert list(values) == [DEFAULT_MODULE]

    def test_every_file_is_resolved(self, tmp_path: Path):
        for planned in plan_new_chart(tmp_path / "demo", "demo").files:
            assert find_markers(planned.content) == [], planned.path

    def test_service_selector_uses_main(self, tmp_path: Path):
        chart_dir = tmp_path / "demo"
        scaffold_plan = plan_new_chart(chart_dir, "demo")
        service = next(f for f in scaffold_plan.files if f.path.name == "main_service.yaml")
        assert b'app.kubernetes.io/name: {{ include "main.name" . }}-main' in service.content

    def test_planning_touches_nothing(self, tmp_path: Path):
        plan_new_chart(tmp_path / "demo", "demo")
        assert not (tmp_path / "demo").exists()


class TestPlanAddModule:
    def test_only_module_manifests(self, existing_chart: Path):
        scaffold_plan = plan_add_module(existing_chart, "cache")
        assert scaffold_plan.mode is ScaffoldMode.ADD_MODULE
        assert scaffold_plan.root == existing_chart / "templates"
        names = _relative(scaffold_plan.paths, existing_chart)
        assert names == {
            "templates/cache_deployment.yaml",
            "templates/_cache_helpers.tpl",
            "templates/cache_serviceaccount.yaml",
            "templates/cache_service.yaml",
            "templates/cache_ingress.yaml",
            "templates/cache_hpa.yaml",
            "templates/tests/cache_test-connection.yaml",
        }
        assert scaffold_plan.directories == []

    def test_values_fragment_keyed_by_module(self, existing_chart: Path):
        fragment = plan_add_module(existing_chart, "cache").values_fragment
        assert fragment.startswith(b"\ncache:\n")
        assert list(yaml.safe_load(fragment)) == ["cache"]

    def test_module_values_helper(self):
        assert module_values("cache").startswith(b"cache:\n  replicaCount: 1\n")


class TestPlanDispatch:
    def test_new_chart_mode(self, tmp_path: Path):
        scaffold_plan = plan(ScaffoldMode.NEW_CHART, tmp_path / "demo", "demo", DEFAULT_MODULE)
        assert len(scaffold_plan.files) == len(NEW_CHART_FILES)

    def test_add_module_mode(self, existing_chart: Path):
        scaffold_plan = plan(ScaffoldMode.ADD_MODULE, existing_chart, "shop", "cache")
        assert len(scaffold_plan.files) == 7
        assert scaffold_plan.values_fragment

    def test_leftover_marker_in_chart_template_is_caught(self, tmp_path: Path):
        template_dir = tmp_path / "j2"
        template_dir.mkdir()
        (template_dir / "Chart.yaml.j2").write_text("name: <CHARTNAME>\n", encoding="utf-8")
        (template_dir / "values.yaml.j2").write_text("{{ module_values }}\n", encoding="utf-8")
        (template_dir / "helmignore.j2").write_text(".git/\n", encoding="utf-8")

        with pytest.raises(UnresolvedPlaceholderError):
            plan_new_chart(tmp_path / "demo", "demo", renderer=TemplateRenderer(template_dir))
