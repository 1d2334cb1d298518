"""Main scaffolding orchestrator.

``ChartGenerator`` validates the requested name, picks the layout (a new
chart, or a new module inside the chart the caller is standing in), plans the
files, and hands the plan to ``ChartWriter``.  Whether the caller is inside a
chart is decided once, by the caller, with :func:`is_inside_chart`, and passed
in explicitly.

``create_from`` is a separate entry point that clones an existing chart,
rewriting its placeholder markers, through the injected loader and saver.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from rich.console import Console

from chartgen.chart import (
    VALUES_FILE,
    ChartFile,
    ChartLoader,
    ChartMetadata,
    ChartSaver,
    load_chart,
    save_chart,
)
from chartgen.config import ScaffoldConfig
from chartgen.errors import ChartLoadError, ChartPathError
from chartgen.utils import err_console, print_warning

from .names import validate_chart_name, validate_name
from .placeholders import CHART_MARKERS, ensure_resolved, transform_chart
from .planner import DEFAULT_MODULE, ScaffoldMode, ScaffoldPlan, plan
from .templates import TemplateRenderer
from .writer import ChartWriter, values_has_key


def is_inside_chart(directory: str | Path) -> bool:
    """Return True when *directory* holds a ``values.yaml`` file."""
    return (Path(directory) / VALUES_FILE).is_file()


def _rewrite(data: bytes, chart_name: str) -> bytes:
    # Starter charts may ship binary files; undecodable bytes survive as-is.
    return transform_chart(data.decode("utf-8", errors="surrogateescape"), DEFAULT_MODULE, chart_name)


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class ScaffoldResult(BaseModel):
    """Outcome of a scaffold run.

    ``append_error`` is set when the module's values fragment could not be
    appended; the manifests listed in ``files_written`` are still on disk.
    """

    mode: ScaffoldMode
    chart_path: Path
    files_written: list[Path] = Field(default_factory=list)
    overwritten: list[Path] = Field(default_factory=list)
    values_appended: bool = False
    append_error: str | None = None

    @property
    def ok(self) -> bool:
        return self.append_error is None


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ChartGenerator:
    """Scaffolds charts and modules.

    Args:
        config: Chart metadata defaults; ``ScaffoldConfig()`` when omitted.
        console: Where overwrite and append warnings go (stderr by default).
        renderer: Jinja2 renderer for the chart-level files.
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        console: Console | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.console = console or err_console
        self.renderer = renderer or TemplateRenderer()
        self.writer = ChartWriter(self.console)

    # -- Public API --------------------------------------------------------

    def scaffold(
        self,
        name: str,
        parent_dir: str | Path,
        *,
        inside_chart: bool,
        cwd: str | Path | None = None,
    ) -> ScaffoldResult:
        """Create a chart, or add a module to the current chart.

        Args:
            name: Chart name (new chart) or module name (inside a chart).
            parent_dir: Directory the new chart is created in.
            inside_chart: Whether *cwd* is an existing chart.
            cwd: The existing chart's directory; defaults to the process cwd.

        Returns:
            A ``ScaffoldResult`` describing what was written.
        """
        if inside_chart:
            return self.add_module(name, Path(cwd) if cwd is not None else Path.cwd())
        return self.create(name, parent_dir)

    def create(self, name: str, parent_dir: str | Path) -> ScaffoldResult:
        """Create a new chart called *name* inside *parent_dir*.

        The chart gets the default ``main`` module, ``NOTES.txt`` and an
        empty ``charts/`` directory.  Files that already exist are
        overwritten with a warning.  *parent_dir* is made absolute, so every
        path in the result is too.

        Raises:
            InvalidNameError: *name* is not a valid chart name, or is "." or "..".
            ChartPathError: *parent_dir* is unusable, or a file named *name*
                is in the way.
            ChartWriteError: A file could not be written.
        """
        validate_chart_name(name)
        parent = Path(parent_dir).resolve()
        chart_dir = parent / name
        if not parent.exists():
            raise ChartPathError(f"no such directory {parent}", path=chart_dir)
        if not parent.is_dir():
            raise ChartPathError(f"{parent} is not a directory", path=chart_dir)
        if chart_dir.exists() and not chart_dir.is_dir():
            raise ChartPathError(f"file {chart_dir} already exists and is not a directory", path=chart_dir)

        scaffold_plan = plan(
            ScaffoldMode.NEW_CHART,
            chart_dir,
            name,
            DEFAULT_MODULE,
            renderer=self.renderer,
            config=self.config,
        )
        overwritten = self.writer.write(scaffold_plan.files)
        self.writer.make_directories(scaffold_plan.directories)
        return self._result(scaffold_plan, overwritten)

    def add_module(self, name: str, chart_dir: str | Path) -> ScaffoldResult:
        """Add module *name* to the chart at *chart_dir*.

        Writes the seven module manifests under ``templates/`` and appends the
        module's values block to ``values.yaml``.  A failed append is reported
        on the console and in ``ScaffoldResult.append_error`` but does not
        raise.  When ``values.yaml`` already has a top-level *name* key the
        block is not appended again and a warning is printed instead.
        """
        validate_name(name)
        chart_dir = Path(chart_dir).resolve()
        scaffold_plan = plan(ScaffoldMode.ADD_MODULE, chart_dir, chart_dir.name, name)
        overwritten = self.writer.write(scaffold_plan.files)
        result = self._result(scaffold_plan, overwritten)

        values_path = chart_dir / VALUES_FILE
        if values_has_key(values_path, name):
            print_warning(
                f'WARNING: {values_path} already has a "{name}" block. Not appending it again.',
                self.console,
            )
            return result
        try:
            self.writer.append_values(values_path, scaffold_plan.values_fragment or b"")
        except OSError as exc:
            result.append_error = f"could not append values for module {name!r} to {values_path}: {exc}"
            print_warning(f"WARNING: {result.append_error}", self.console)
        else:
            result.values_appended = True
        return result

    def create_from(
        self,
        metadata: ChartMetadata,
        dest: str | Path,
        src: str | Path,
        loader: ChartLoader = load_chart,
        saver: ChartSaver = save_chart,
    ) -> Path:
        """Clone the chart at *src* into *dest* under new metadata.

        Templates, ``values.yaml`` (raw bytes and parsed values) are rewritten
        with the module set to ``main`` and the chart name set to
        ``metadata.name``.

        Returns:
            The directory the saver wrote.

        Raises:
            ChartLoadError: *src* could not be loaded or its values could not
                be rewritten.
            ChartSaveError: The saver failed.
            UnresolvedPlaceholderError: A marker survived the rewrite.
        """
        validate_chart_name(metadata.name)
        chart = loader(Path(src))
        chart.metadata = metadata
        chart_name = metadata.name

        templates: list[ChartFile] = []
        for template in chart.templates:
            data = _rewrite(template.data, chart_name)
            ensure_resolved(data, template.name, CHART_MARKERS)
            templates.append(ChartFile(name=template.name, data=data))
        chart.templates = templates

        dumped = yaml.safe_dump(chart.values, sort_keys=False)
        try:
            values = yaml.safe_load(transform_chart(dumped, DEFAULT_MODULE, chart_name)) or {}
        except yaml.YAMLError as exc:
            raise ChartLoadError(f"transforming values file: {exc}", path=Path(src)) from exc
        ensure_resolved(yaml.safe_dump(values), VALUES_FILE, CHART_MARKERS)
        chart.values = values

        # The saver writes the raw values file to keep its comments.
        raw_values = chart.raw_file(VALUES_FILE)
        if raw_values is not None:
            raw_values.data = _rewrite(raw_values.data, chart_name)
            ensure_resolved(raw_values.data, VALUES_FILE, CHART_MARKERS)

        return saver(chart, Path(dest))

    # -- Internal helpers --------------------------------------------------

    @staticmethod
    def _result(scaffold_plan: ScaffoldPlan, overwritten: list[Path]) -> ScaffoldResult:
        return ScaffoldResult(
            mode=scaffold_plan.mode,
            chart_path=scaffold_plan.root,
            files_written=scaffold_plan.paths,
            overwritten=overwritten,
        )
