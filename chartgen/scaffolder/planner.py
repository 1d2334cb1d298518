"""Work out which files a scaffold run writes.

Planning is pure: it renders every template into memory and returns a
``ScaffoldPlan`` without touching the filesystem.  The writer then applies the
plan.  Two layouts exist:

* ``NEW_CHART`` -- chart metadata, values file, ignore file, the module
  manifests for the default module, ``NOTES.txt``, and an empty ``charts/``
  directory.
* ``ADD_MODULE`` -- only the module manifests, rooted at an existing chart.
  The module's values block is carried separately as ``values_fragment``
  because it is appended to ``values.yaml`` rather than written as a new file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from chartgen.chart.models import CHART_FILE, CHARTS_DIR, IGNORE_FILE, TEMPLATES_DIR, VALUES_FILE
from chartgen.config import ScaffoldConfig

from .placeholders import ensure_resolved, resolve_path, transform
from .registry import MODULE_KINDS, MODULE_TEMPLATES, ManifestKind, TemplateEntry, module_values_template
from .templates import CHART_FILE_TEMPLATE, IGNORE_FILE_TEMPLATE, VALUES_FILE_TEMPLATE, TemplateRenderer

DEFAULT_MODULE = "main"


class ScaffoldMode(str, Enum):
    """Which layout a scaffold run produces."""

    NEW_CHART = "new-chart"
    ADD_MODULE = "add-module"


@dataclass(frozen=True)
class PlannedFile:
    """A file to write: absolute path plus fully-resolved content."""

    path: Path
    content: bytes


@dataclass(frozen=True)
class PlannedDirectory:
    """A directory to create even though no file is written into it."""

    path: Path


@dataclass
class ScaffoldPlan:
    """Everything one scaffold run will put on disk."""

    mode: ScaffoldMode
    root: Path
    files: list[PlannedFile] = field(default_factory=list)
    directories: list[PlannedDirectory] = field(default_factory=list)
    values_fragment: bytes | None = None

    @property
    def paths(self) -> list[Path]:
        return [f.path for f in self.files]


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------


def _plan_entry(chart_dir: Path, entry: TemplateEntry, module_name: str) -> PlannedFile:
    rel = resolve_path(entry.path, module_name)
    content = transform(entry.content, module_name)
    ensure_resolved(rel, f"path template for {entry.kind.value}")
    ensure_resolved(content, rel)
    return PlannedFile(path=chart_dir / rel, content=content)


def module_files(chart_dir: Path, module_name: str) -> list[PlannedFile]:
    """The seven module-scoped manifests for *module_name*."""
    return [_plan_entry(chart_dir, MODULE_TEMPLATES[kind], module_name) for kind in MODULE_KINDS]


def module_values(module_name: str) -> bytes:
    """The values block for *module_name*, keyed by the module name."""
    content = transform(module_values_template(), module_name)
    ensure_resolved(content, f"values for module {module_name!r}")
    return content


# ---------------------------------------------------------------------------
# Plans
# ---------------------------------------------------------------------------


def plan_new_chart(
    chart_dir: Path,
    chart_name: str,
    module_name: str = DEFAULT_MODULE,
    renderer: TemplateRenderer | None = None,
    config: ScaffoldConfig | None = None,
) -> ScaffoldPlan:
    """Plan a brand-new chart at *chart_dir*."""
    renderer = renderer or TemplateRenderer()
    config = config or ScaffoldConfig()
    ctx = config.chart_context(chart_name)

    values_body = module_values(module_name).decode("utf-8").rstrip("\n")
    chart_level = [
        PlannedFile(chart_dir / CHART_FILE, renderer.render(CHART_FILE_TEMPLATE, ctx).encode("utf-8")),
        PlannedFile(
            chart_dir / VALUES_FILE,
            renderer.render(VALUES_FILE_TEMPLATE, {**ctx, "module_values": values_body}).encode("utf-8"),
        ),
        PlannedFile(chart_dir / IGNORE_FILE, renderer.render(IGNORE_FILE_TEMPLATE, ctx).encode("utf-8")),
    ]
    for planned in chart_level:
        ensure_resolved(planned.content, planned.path.name)

    files = [
        *chart_level,
        *module_files(chart_dir, module_name),
        _plan_entry(chart_dir, MODULE_TEMPLATES[ManifestKind.NOTES], module_name),
    ]
    return ScaffoldPlan(
        mode=ScaffoldMode.NEW_CHART,
        root=chart_dir,
        files=files,
        directories=[PlannedDirectory(chart_dir / CHARTS_DIR)],
    )


def plan_add_module(chart_dir: Path, module_name: str) -> ScaffoldPlan:
    """Plan the manifests and values fragment for a new module in *chart_dir*."""
    return ScaffoldPlan(
        mode=ScaffoldMode.ADD_MODULE,
        root=chart_dir / TEMPLATES_DIR,
        files=module_files(chart_dir, module_name),
        values_fragment=b"\n" + module_values(module_name),
    )


def plan(
    mode: ScaffoldMode,
    chart_dir: Path,
    chart_name: str,
    module_name: str,
    renderer: TemplateRenderer | None = None,
    config: ScaffoldConfig | None = None,
) -> ScaffoldPlan:
    """Dispatch to the planner for *mode*."""
    if mode is ScaffoldMode.NEW_CHART:
        return plan_new_chart(chart_dir, chart_name, module_name, renderer=renderer, config=config)
    return plan_add_module(chart_dir, module_name)
