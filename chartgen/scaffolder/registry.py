"""The closed catalogue of built-in chart templates.

Two registries live here:

* ``MODULE_TEMPLATES`` -- the module-scoped set used when creating a chart or
  adding a module.  Paths and bodies use the module markers.
* ``MANIFEST_TEMPLATES`` -- the per-kind set used to add a single manifest to
  an existing chart.  Bodies use the manifest and chart-name markers.

Both are constant and shared; nothing mutates them after import.
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from chartgen.chart.models import TEMPLATES_DIR, TEMPLATES_TESTS_DIR

from . import manifest_templates, module_templates
from .placeholders import MANIFEST_MARKER, MODULE_MARKER, MODULE_PATH_MARKER


class ManifestKind(str, Enum):
    """Manifest kinds the scaffolder knows how to generate."""

    DEPLOYMENT = "deployment"
    SERVICE = "service"
    SERVICE_ACCOUNT = "serviceaccount"
    INGRESS = "ingress"
    AUTOSCALER = "hpa"
    HELPERS = "helpers"
    NOTES = "notes"
    TEST_CONNECTION = "test-connection"


@dataclass(frozen=True)
class TemplateEntry:
    """One template: where it goes, what it contains, and its values fragment."""

    kind: ManifestKind
    path: str
    content: str
    values: str = ""


def _entry(kind: ManifestKind, path: str, content: str, values: str = "") -> TemplateEntry:
    return TemplateEntry(kind=kind, path=path, content=content, values=values)


MODULE_TEMPLATES: Mapping[ManifestKind, TemplateEntry] = MappingProxyType({
    ManifestKind.DEPLOYMENT: _entry(
        ManifestKind.DEPLOYMENT,
        f"{TEMPLATES_DIR}/{MODULE_PATH_MARKER}deployment.yaml",
        module_templates.DEPLOYMENT,
        module_templates.DEPLOYMENT_VALUES,
    ),
    ManifestKind.HELPERS: _entry(
        ManifestKind.HELPERS,
        f"{TEMPLATES_DIR}/_{MODULE_PATH_MARKER}helpers.tpl",
        module_templates.HELPERS,
        module_templates.HELPERS_VALUES,
    ),
    ManifestKind.SERVICE_ACCOUNT: _entry(
        ManifestKind.SERVICE_ACCOUNT,
        f"{TEMPLATES_DIR}/{MODULE_PATH_MARKER}serviceaccount.yaml",
        module_templates.SERVICE_ACCOUNT,
        module_templates.SERVICE_ACCOUNT_VALUES,
    ),
    ManifestKind.SERVICE: _entry(
        ManifestKind.SERVICE,
        f"{TEMPLATES_DIR}/{MODULE_PATH_MARKER}service.yaml",
        module_templates.SERVICE,
        module_templates.SERVICE_VALUES,
    ),
    ManifestKind.INGRESS: _entry(
        ManifestKind.INGRESS,
        f"{TEMPLATES_DIR}/{MODULE_PATH_MARKER}ingress.yaml",
        module_templates.INGRESS,
        module_templates.INGRESS_VALUES,
    ),
    ManifestKind.AUTOSCALER: _entry(
        ManifestKind.AUTOSCALER,
        f"{TEMPLATES_DIR}/{MODULE_PATH_MARKER}hpa.yaml",
        module_templates.HPA,
        module_templates.HPA_VALUES,
    ),
    ManifestKind.TEST_CONNECTION: _entry(
        ManifestKind.TEST_CONNECTION,
        f"{TEMPLATES_TESTS_DIR}/{MODULE_PATH_MARKER}test-connection.yaml",
        module_templates.TEST_CONNECTION,
    ),
    ManifestKind.NOTES: _entry(
        ManifestKind.NOTES,
        f"{TEMPLATES_DIR}/NOTES.txt",
        module_templates.NOTES,
    ),
})

# Everything a module owns; NOTES.txt is chart-wide and only written for a new chart.
MODULE_KINDS: tuple[ManifestKind, ...] = tuple(
    kind for kind in MODULE_TEMPLATES if kind is not ManifestKind.NOTES
)

MANIFEST_TEMPLATES: Mapping[ManifestKind, TemplateEntry] = MappingProxyType({
    ManifestKind.INGRESS: _entry(
        ManifestKind.INGRESS,
        f"{TEMPLATES_DIR}/{MANIFEST_MARKER}_ingress.yaml",
        manifest_templates.INGRESS,
        manifest_templates.INGRESS_VALUES,
    ),
    ManifestKind.SERVICE: _entry(
        ManifestKind.SERVICE,
        f"{TEMPLATES_DIR}/{MANIFEST_MARKER}_service.yaml",
        manifest_templates.SERVICE,
        manifest_templates.SERVICE_VALUES,
    ),
    ManifestKind.DEPLOYMENT: _entry(
        ManifestKind.DEPLOYMENT,
        f"{TEMPLATES_DIR}/{MANIFEST_MARKER}_deployment.yaml",
        manifest_templates.DEPLOYMENT,
        manifest_templates.DEPLOYMENT_VALUES,
    ),
})


def get_template(kind: ManifestKind | str) -> TemplateEntry:
    """Look up a module template.  Unknown kinds are a programming error."""
    return MODULE_TEMPLATES[ManifestKind(kind)]


def module_values_template() -> str:
    """The module's values block with the module marker as its top-level key."""
    body = "\n".join(
        MODULE_TEMPLATES[kind].values for kind in MODULE_KINDS if MODULE_TEMPLATES[kind].values
    )
    return f"{MODULE_MARKER}:\n{textwrap.indent(body, '  ')}"
