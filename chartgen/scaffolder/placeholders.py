"""Placeholder substitution for the built-in chart templates.

Substitution is plain text replacement: templates are never parsed, so a
template body must not contain a marker as incidental text.  Names that pass
the name validator cannot contain ``<`` or ``>``, which means a marker can
never be reintroduced by the substituted value.

The transforms return UTF-8 bytes.  Text decoded with
``errors="surrogateescape"`` encodes back to its original bytes, so files
that are not UTF-8 pass through unchanged.
"""

from __future__ import annotations

from chartgen.errors import UnresolvedPlaceholderError

MODULE_MARKER = "<MODULE_NAME>"
# File-name variant: ``<MODULE>_ingress.yaml`` -> ``cache_ingress.yaml``
MODULE_PATH_MARKER = "<MODULE>_"
CHART_MARKER = "<CHARTNAME>"
MANIFEST_MARKER = "<MANIFEST_NAME>"

ALL_MARKERS = (MODULE_MARKER, MODULE_PATH_MARKER, CHART_MARKER, MANIFEST_MARKER)
# Markers resolved when cloning a starter chart
CHART_MARKERS = (MODULE_MARKER, MODULE_PATH_MARKER, CHART_MARKER)


def _substitute(text: str, replacements: dict[str, str]) -> str:
    for marker, value in replacements.items():
        text = text.replace(marker, value)
    return text


def transform(template: str, module_name: str) -> bytes:
    """Resolve the module markers in *template*."""
    return _substitute(
        template,
        {MODULE_MARKER: module_name, MODULE_PATH_MARKER: f"{module_name}_"},
    ).encode("utf-8", errors="surrogateescape")


def transform_chart(template: str, module_name: str, chart_name: str) -> bytes:
    """Resolve the module markers and the chart-name marker in *template*."""
    return _substitute(
        template,
        {
            MODULE_MARKER: module_name,
            MODULE_PATH_MARKER: f"{module_name}_",
            CHART_MARKER: chart_name,
        },
    ).encode("utf-8", errors="surrogateescape")


def transform_manifest(template: str, chart_name: str, manifest_name: str) -> bytes:
    """Resolve the markers used by single-manifest templates."""
    return _substitute(
        template,
        {MANIFEST_MARKER: manifest_name, CHART_MARKER: chart_name},
    ).encode("utf-8", errors="surrogateescape")


def resolve_path(path_template: str, module_name: str) -> str:
    """Resolve a chart-relative path template such as ``templates/<MODULE>_hpa.yaml``."""
    return transform(path_template, module_name).decode("utf-8")


def find_markers(
    content: str | bytes, markers: tuple[str, ...] = ALL_MARKERS
) -> list[str]:
    """Return every marker from *markers* still present in *content*."""
    text = content.decode("utf-8", errors="replace") if isinstance(content, bytes) else content
    return [m for m in markers if m in text]


def ensure_resolved(
    content: str | bytes, where: str, markers: tuple[str, ...] = ALL_MARKERS
) -> None:
    """Raise ``UnresolvedPlaceholderError`` if any marker survived in *content*."""
    remaining = find_markers(content, markers)
    if remaining:
        raise UnresolvedPlaceholderError(remaining, where)
