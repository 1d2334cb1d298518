"""chartgen -- Helm chart scaffolding.

Creates new charts from built-in templates, adds module-scoped manifest sets
to an existing chart, and clones starter charts with placeholder rewriting.

Quick usage::

    from chartgen import ChartGenerator

    generator = ChartGenerator()
    result = generator.scaffold("demo", "/tmp/charts", inside_chart=False)
    print(result.chart_path)
"""

from chartgen.config import ScaffoldConfig
from chartgen.errors import (
    ChartLoadError,
    ChartPathError,
    ChartSaveError,
    ChartWriteError,
    InvalidNameError,
    ScaffoldError,
    UnknownManifestKindError,
)
from chartgen.scaffolder import ChartGenerator, ScaffoldResult, create_manifest

__all__ = [
    "ChartGenerator",
    "ChartLoadError",
    "ChartPathError",
    "ChartSaveError",
    "ChartWriteError",
    "InvalidNameError",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldResult",
    "UnknownManifestKindError",
    "create_manifest",
]
