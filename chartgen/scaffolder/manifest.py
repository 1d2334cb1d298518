"""Add a single manifest of one kind to an existing chart.

Unlike module scaffolding, which always writes the full set of module
manifests, this writes one ``templates/<name>_<kind>.yaml`` file and appends a
``<name>_<kind>`` block to ``values.yaml``.  The chart's own name is read
through the loader so the manifest can reference the chart's helpers.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel
from rich.console import Console

from chartgen.chart import VALUES_FILE, ChartLoader, load_chart
from chartgen.errors import ChartPathError, UnknownManifestKindError
from chartgen.utils import err_console, print_warning

from .names import validate_name
from .placeholders import MANIFEST_MARKER, ensure_resolved, transform_manifest
from .planner import PlannedFile
from .registry import MANIFEST_TEMPLATES, ManifestKind
from .writer import ChartWriter, values_has_key


class ManifestResult(BaseModel):
    """Outcome of :func:`create_manifest`."""

    kind: ManifestKind
    chart_name: str
    path: Path
    overwritten: bool = False
    values_appended: bool = False
    append_error: str | None = None


def manifest_kinds() -> list[str]:
    """Kinds accepted by :func:`create_manifest`."""
    return [kind.value for kind in MANIFEST_TEMPLATES]


def _lookup(kind: str) -> ManifestKind:
    try:
        manifest_kind = ManifestKind(kind)
    except ValueError:
        raise UnknownManifestKindError(kind, manifest_kinds()) from None
    if manifest_kind not in MANIFEST_TEMPLATES:
        raise UnknownManifestKindError(kind, manifest_kinds())
    return manifest_kind


def create_manifest(
    kind: str,
    name: str,
    chart_dir: str | Path | None = None,
    loader: ChartLoader = load_chart,
    console: Console | None = None,
) -> ManifestResult:
    """Write a manifest of *kind* called *name* into the chart at *chart_dir*.

    Args:
        kind: One of :func:`manifest_kinds`.
        name: Manifest name; prefixes the file name and the values key.
        chart_dir: The chart directory (the process cwd when omitted).
        loader: Used to read the chart's name.
        console: Receives overwrite and append warnings.

    Returns:
        A ``ManifestResult``.  A failed values append is reported there and
        on the console rather than raised.  An existing values block for
        the manifest is left alone, with a warning.

    Raises:
        UnknownManifestKindError: *kind* has no template.
        InvalidNameError: *name* or the chart's name is not valid.
        ChartLoadError: The chart could not be loaded.
        ChartPathError: *chart_dir* is not a directory.
        ChartWriteError: The manifest could not be written.
    """
    console = console or err_console
    manifest_kind = _lookup(kind)
    validate_name(name)

    root = Path(chart_dir).resolve() if chart_dir is not None else Path.cwd()
    chart = loader(root)
    chart_name = chart.name
    validate_name(chart_name)
    if not root.is_dir():
        raise ChartPathError(f"no such directory {root}", path=root)

    entry = MANIFEST_TEMPLATES[manifest_kind]
    rel = entry.path.replace(MANIFEST_MARKER, name)
    content = transform_manifest(entry.content, chart_name, name)
    ensure_resolved(content, rel)

    writer = ChartWriter(console)
    overwritten = writer.write([PlannedFile(path=root / rel, content=content)])
    result = ManifestResult(
        kind=manifest_kind,
        chart_name=chart_name,
        path=root / rel,
        overwritten=bool(overwritten),
    )

    fragment = transform_manifest(entry.values, chart_name, name)
    ensure_resolved(fragment, VALUES_FILE)
    values_path = root / VALUES_FILE
    values_key = f"{name}_{manifest_kind.value}"
    if values_has_key(values_path, values_key):
        print_warning(
            f'WARNING: {values_path} already has a "{values_key}" block. Not appending it again.',
            console,
        )
        return result
    try:
        writer.append_values(values_path, fragment)
    except OSError as exc:
        result.append_error = f"could not append values for {values_key} to {values_path}: {exc}"
        print_warning(f"WARNING: {result.append_error}", console)
    else:
        result.values_appended = True
    return result
