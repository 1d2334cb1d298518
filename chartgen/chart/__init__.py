"""Chart loading and saving.

The scaffolder only consumes charts as ``(name, templates, raw files,
values)``; these helpers provide that view of a directory and write it back.
Both sides are typed as protocols so callers can substitute their own.
"""

from .loader import ChartLoader, load_chart
from .models import (
    CHART_FILE,
    CHARTS_DIR,
    IGNORE_FILE,
    MAX_NAME_LENGTH,
    TEMPLATES_DIR,
    TEMPLATES_TESTS_DIR,
    VALUES_FILE,
    Chart,
    ChartFile,
    ChartMetadata,
)
from .saver import ChartSaver, save_chart

__all__ = [
    "CHART_FILE",
    "CHARTS_DIR",
    "IGNORE_FILE",
    "MAX_NAME_LENGTH",
    "TEMPLATES_DIR",
    "TEMPLATES_TESTS_DIR",
    "VALUES_FILE",
    "Chart",
    "ChartFile",
    "ChartLoader",
    "ChartMetadata",
    "ChartSaver",
    "load_chart",
    "save_chart",
]
