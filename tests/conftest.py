"""Shared pytest fixtures for the chartgen test suite.

Provides reusable fixtures for:
- Temporary parent directories for new charts
- A recording Rich console for warnings
- An existing chart to add modules and manifests to
- A starter chart containing placeholder markers
"""

from __future__ import annotations

import io
import textwrap
from pathlib import Path

import pytest
from rich.console import Console

from chartgen.config import ScaffoldConfig


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_charts_dir(tmp_path: Path) -> Path:
    """Temporary parent directory for generated charts (auto-cleanup)."""
    charts_dir = tmp_path / "charts"
    charts_dir.mkdir()
    yield charts_dir


@pytest.fixture
def config(tmp_path: Path) -> ScaffoldConfig:
    """A ScaffoldConfig whose starters directory lives in a temp dir."""
    return ScaffoldConfig(starters_dir=tmp_path / "starters")


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

@pytest.fixture
def recording_console() -> Console:
    """A Rich console that writes to memory.

    Read what was printed with ``recording_console.file.getvalue()``.
    """
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)


@pytest.fixture
def warning_lines(recording_console: Console):
    """Callable returning the ``WARNING:`` lines printed so far."""

    def _lines() -> list[str]:
        return [
            line for line in recording_console.file.getvalue().splitlines()
            if line.startswith("WARNING:")
        ]

    return _lines


# ---------------------------------------------------------------------------
# Charts on disk
# ---------------------------------------------------------------------------

EXISTING_VALUES = textwrap.dedent("""\
    # Default values for shop.
    main:
      replicaCount: 1
      service:
        type: ClusterIP
        port: 80
""")


@pytest.fixture
def existing_chart(tmp_path: Path) -> Path:
    """A minimal existing chart called ``shop`` with one ``main`` module."""
    chart_dir = tmp_path / "shop"
    (chart_dir / "templates").mkdir(parents=True)
    (chart_dir / "Chart.yaml").write_text(
        "apiVersion: v2\nname: shop\ndescription: A shop\nversion: 0.1.0\n",
        encoding="utf-8",
    )
    (chart_dir / "values.yaml").write_text(EXISTING_VALUES, encoding="utf-8")
    (chart_dir / "templates" / "main_service.yaml").write_text("kind: Service\n", encoding="utf-8")
    yield chart_dir


STARTER_VALUES = textwrap.dedent("""\
    # Default values for <CHARTNAME>.
    <MODULE_NAME>:
      image:
        repository: <CHARTNAME>/app
      service:
        port: 8080
""")

STARTER_DEPLOYMENT = textwrap.dedent("""\
    apiVersion: apps/v1
    kind: Deployment
    metadata:
      name: {{ include "<CHARTNAME>.fullname" . }}-<MODULE_NAME>
    spec:
      replicas: {{ .Values.<MODULE_NAME>.replicaCount }}
""")


@pytest.fixture
def starter_chart(tmp_path: Path) -> Path:
    """A starter chart whose templates and values still carry markers."""
    chart_dir = tmp_path / "starters" / "webapp"
    (chart_dir / "templates" / "tests").mkdir(parents=True)
    (chart_dir / "Chart.yaml").write_text(
        "apiVersion: v2\nname: webapp\ndescription: Starter\nversion: 9.9.9\n",
        encoding="utf-8",
    )
    (chart_dir / "values.yaml").write_text(STARTER_VALUES, encoding="utf-8")
    (chart_dir / ".helmignore").write_text(".git/\n", encoding="utf-8")
    (chart_dir / "templates" / "deployment.yaml").write_text(STARTER_DEPLOYMENT, encoding="utf-8")
    (chart_dir / "templates" / "tests" / "test-connection.yaml").write_text(
        'name: "{{ include "<CHARTNAME>.fullname" . }}-<MODULE_NAME>-test"\n',
        encoding="utf-8",
    )
    yield chart_dir
