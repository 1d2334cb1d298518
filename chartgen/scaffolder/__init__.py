"""chartgen scaffolder -- generates chart and module file trees.

Builds a new chart from the built-in templates, adds a module's manifests to
an existing chart, adds a single manifest of one kind, or clones a starter
chart with its placeholders rewritten.

Quick usage::

    from chartgen.scaffolder import ChartGenerator, is_inside_chart

    generator = ChartGenerator()
    result = generator.scaffold(
        "demo", "/tmp/charts", inside_chart=is_inside_chart(Path.cwd())
    )
"""

from chartgen.scaffolder.generator import ChartGenerator, ScaffoldResult, is_inside_chart
from chartgen.scaffolder.manifest import ManifestResult, create_manifest, manifest_kinds
from chartgen.scaffolder.names import is_valid_name, validate_chart_name, validate_name
from chartgen.scaffolder.planner import ScaffoldMode, ScaffoldPlan, plan
from chartgen.scaffolder.registry import ManifestKind
from chartgen.scaffolder.templates import TemplateRenderer
from chartgen.scaffolder.writer import ChartWriter

__all__ = [
    "ChartGenerator",
    "ChartWriter",
    "ManifestKind",
    "ManifestResult",
    "ScaffoldMode",
    "ScaffoldPlan",
    "ScaffoldResult",
    "TemplateRenderer",
    "create_manifest",
    "is_inside_chart",
    "is_valid_name",
    "manifest_kinds",
    "plan",
    "validate_chart_name",
    "validate_name",
]
