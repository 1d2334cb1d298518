"""Load a chart directory into a ``Chart`` model."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import yaml
from pydantic import ValidationError

from chartgen.errors import ChartLoadError

from .models import CHART_FILE, TEMPLATES_DIR, VALUES_FILE, Chart, ChartFile, ChartMetadata


class ChartLoader(Protocol):
    """Anything that can turn a directory into a ``Chart``."""

    def __call__(self, path: Path) -> Chart: ...


def load_chart(path: str | Path) -> Chart:
    """Load the chart rooted at *path*.

    Reads ``Chart.yaml`` (required), every file under ``templates/``, the raw
    bytes of every other top-level file, and the parsed ``values.yaml``.
    Dependency charts under ``charts/`` are not loaded.

    Raises:
        ChartLoadError: If the directory or its ``Chart.yaml`` is missing or
            unreadable, or a YAML document does not parse.
    """
    root = Path(path)
    if not root.is_dir():
        raise ChartLoadError(f"no such chart directory {root}", path=root)

    chart_file = root / CHART_FILE
    if not chart_file.is_file():
        raise ChartLoadError(f"{CHART_FILE} file is missing in {root}", path=root)

    try:
        raw_meta = yaml.safe_load(chart_file.read_text(encoding="utf-8")) or {}
        metadata = ChartMetadata.model_validate(raw_meta)
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        raise ChartLoadError(f"cannot load {CHART_FILE}: {exc}", path=root) from exc

    raw: list[ChartFile] = []
    files: list[ChartFile] = []
    templates: list[ChartFile] = []
    values: dict = {}

    try:
        for entry in sorted(root.iterdir()):
            if entry.is_file():
                chart_entry = ChartFile(name=entry.name, data=entry.read_bytes())
                raw.append(chart_entry)
                if entry.name not in (CHART_FILE, VALUES_FILE):
                    files.append(chart_entry)

        templates_root = root / TEMPLATES_DIR
        if templates_root.is_dir():
            for entry in sorted(templates_root.rglob("*")):
                if entry.is_file():
                    rel = entry.relative_to(root).as_posix()
                    templates.append(ChartFile(name=rel, data=entry.read_bytes()))
    except OSError as exc:
        raise ChartLoadError(f"cannot read chart files in {root}: {exc}", path=root) from exc

    values_file = next((f for f in raw if f.name == VALUES_FILE), None)
    if values_file is not None:
        try:
            parsed = yaml.safe_load(values_file.data.decode("utf-8"))
        except (UnicodeDecodeError, yaml.YAMLError) as exc:
            raise ChartLoadError(f"cannot parse {VALUES_FILE}: {exc}", path=root) from exc
        if parsed is not None and not isinstance(parsed, dict):
            raise ChartLoadError(f"{VALUES_FILE} must be a mapping", path=root)
        values = parsed or {}

    return Chart(metadata=metadata, templates=templates, raw=raw, files=files, values=values)

