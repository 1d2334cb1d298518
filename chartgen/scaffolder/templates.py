"""Jinja2 rendering for the chart-level files.

Provides the TemplateRenderer class which loads the ``.j2`` templates under
``chartgen/scaffolder/templates/`` (``Chart.yaml``, the ``values.yaml``
header, ``.helmignore``) and renders them with chart metadata.  Helm-syntax
manifest bodies never pass through Jinja2; they use placeholder substitution
instead (see ``placeholders``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

CHART_FILE_TEMPLATE = "Chart.yaml.j2"
VALUES_FILE_TEMPLATE = "values.yaml.j2"
IGNORE_FILE_TEMPLATE = "helmignore.j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the Jinja2 templates for chart-level files.

    Missing context variables raise instead of rendering as empty strings, so
    a chart can never be written with a blank ``name:``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"Chart.yaml.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

