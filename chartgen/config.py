"""chartgen configuration.

Typed configuration for the scaffolder.  Settings use a Pydantic v2 model so
they are validated at construction time and can be read from environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


def _default_starters_dir() -> Path:
    """Return ``$XDG_DATA_HOME/chartgen/starters`` (or the ``~/.local/share`` fallback)."""
    data_home = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(data_home) / "chartgen" / "starters"


class ScaffoldConfig(BaseModel):
    """Scaffolder configuration.

    Holds the metadata defaults written into a new ``Chart.yaml`` and the
    location of registered starter charts.  Instances are typically created
    once by the CLI entry point and passed to ``ChartGenerator``.
    """

    description: str = Field(default="A Helm chart for Kubernetes")
    api_version: str = Field(default="v2", min_length=1)
    chart_version: str = Field(default="0.1.0", min_length=1)
    app_version: str = Field(default="1.16.0", min_length=1)
    starters_dir: Path = Field(default_factory=_default_starters_dir)

    def chart_context(self, chart_name: str) -> dict[str, Any]:
        """Template context used to render the chart-level files."""
        return {
            "chart_name": chart_name,
            "description": self.description,
            "api_version": self.api_version,
            "chart_version": self.chart_version,
            "app_version": self.app_version,
        }

    def resolve_starter(self, starter: str) -> Path:
        """Map a ``--starter`` argument to a directory.

        Absolute paths are used as-is; anything else is looked up by name
        under ``starters_dir``.
        """
        candidate = Path(starter)
        if candidate.is_absolute():
            return candidate
        return self.starters_dir / starter

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            CHARTGEN_STARTERS_DIR, CHARTGEN_DESCRIPTION,
            CHARTGEN_CHART_VERSION, CHARTGEN_APP_VERSION.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CHARTGEN_STARTERS_DIR"):
            kwargs["starters_dir"] = Path(os.environ["CHARTGEN_STARTERS_DIR"])
        if os.environ.get("CHARTGEN_DESCRIPTION"):
            kwargs["description"] = os.environ["CHARTGEN_DESCRIPTION"]
        if os.environ.get("CHARTGEN_CHART_VERSION"):
            kwargs["chart_version"] = os.environ["CHARTGEN_CHART_VERSION"]
        if os.environ.get("CHARTGEN_APP_VERSION"):
            kwargs["app_version"] = os.environ["CHARTGEN_APP_VERSION"]
        return cls(**kwargs)
