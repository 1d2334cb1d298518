"""Write a ``Chart`` model back to disk."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import yaml

from chartgen.errors import ChartSaveError

from .models import CHART_FILE, CHARTS_DIR, VALUES_FILE, Chart


class ChartSaver(Protocol):
    """Anything that can persist a ``Chart`` under a destination directory."""

    def __call__(self, chart: Chart, dest: Path) -> Path: ...


def save_chart(chart: Chart, dest: str | Path) -> Path:
    """Save *chart* as ``<dest>/<chart name>/`` and return that directory.

    ``Chart.yaml`` is regenerated from the metadata.  ``values.yaml`` is
    written from the raw file bytes when the chart carries them, so comments
    are preserved; otherwise the parsed values are dumped.  Existing files are
    overwritten.

    Raises:
        ChartSaveError: If *dest* is not a directory or any write fails.
    """
    base = Path(dest)
    if not base.is_dir():
        raise ChartSaveError(f"no such directory {base}", path=base)

    out = base / chart.name
    try:
        out.mkdir(parents=True, exist_ok=True)

        chart_yaml = yaml.safe_dump(chart.metadata.to_yaml_dict(), sort_keys=False)
        (out / CHART_FILE).write_text(chart_yaml, encoding="utf-8")

        raw_values = chart.raw_file(VALUES_FILE)
        if raw_values is not None:
            (out / VALUES_FILE).write_bytes(raw_values.data)
        elif chart.values:
            values_yaml = yaml.safe_dump(chart.values, sort_keys=False)
            (out / VALUES_FILE).write_text(values_yaml, encoding="utf-8")

        for f in [*chart.files, *chart.templates]:
            target = out / f.name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(f.data)

        (out / CHARTS_DIR).mkdir(exist_ok=True)
    except OSError as exc:
        raise ChartSaveError(f"cannot save chart {chart.name!r}: {exc}", path=out) from exc

    return out
