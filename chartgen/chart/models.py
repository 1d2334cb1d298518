"""Pydantic v2 models for a chart loaded from (or saved to) disk."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Chart directory layout
# ---------------------------------------------------------------------------

CHART_FILE = "Chart.yaml"
VALUES_FILE = "values.yaml"
IGNORE_FILE = ".helmignore"
TEMPLATES_DIR = "templates"
TEMPLATES_TESTS_DIR = f"{TEMPLATES_DIR}/tests"
CHARTS_DIR = "charts"

# Helm rejects names longer than this on some filesystems and Kubernetes fields.
MAX_NAME_LENGTH = 250


class ChartMetadata(BaseModel):
    """Contents of ``Chart.yaml``.

    Field names are snake_case; the camelCase keys used in the file are
    accepted and emitted through aliases.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    api_version: str = Field(default="v2", alias="apiVersion")
    name: str = Field(..., min_length=1)
    description: str = Field(default="")
    type: str = Field(default="application")
    version: str = Field(default="0.1.0")
    app_version: str | None = Field(default=None, alias="appVersion")

    def to_yaml_dict(self) -> dict[str, Any]:
        """Return the Chart.yaml mapping with file-style keys."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ChartFile(BaseModel):
    """A file inside a chart, addressed by its chart-relative POSIX path."""

    name: str
    data: bytes = b""


class Chart(BaseModel):
    """A chart as read by the loader.

    Attributes:
        metadata: Parsed ``Chart.yaml``.
        templates: Every file under ``templates/``.
        raw: Raw bytes of every top-level file, including ``Chart.yaml`` and
            ``values.yaml``; the saver uses the raw values file so comments
            survive a load/save cycle.
        files: Top-level files other than ``Chart.yaml`` and ``values.yaml``
            (for example ``.helmignore``).
        values: Parsed ``values.yaml`` (empty when absent).
    """

    metadata: ChartMetadata
    templates: list[ChartFile] = Field(default_factory=list)
    raw: list[ChartFile] = Field(default_factory=list)
    files: list[ChartFile] = Field(default_factory=list)
    values: dict[str, Any] = Field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.metadata.name

    def raw_file(self, name: str) -> ChartFile | None:
        """Return the raw file called *name*, if the chart has one."""
        for f in self.raw:
            if f.name == name:
                return f
        return None
