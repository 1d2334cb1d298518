"""Apply a ``ScaffoldPlan`` to the filesystem.

Existing files are overwritten with a warning on the injected console; an
overwrite is never an error.  Any other ``OSError`` while writing a planned
file aborts the run with ``ChartWriteError``.  Appending to ``values.yaml`` is
left to the caller to report, since a failed append must not undo manifests
that were already written.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from rich.console import Console

from chartgen.errors import ChartWriteError
from chartgen.utils import ensure_dir, err_console, print_warning

from .planner import PlannedDirectory, PlannedFile


class ChartWriter:
    """Writes planned files and directories, reporting overwrites to *console*."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or err_console

    def write(self, files: Iterable[PlannedFile]) -> list[Path]:
        """Write every planned file, creating parent directories as needed.

        Args:
            files: The files to write, in order.

        Returns:
            Paths that already existed and were overwritten.

        Raises:
            ChartWriteError: On the first file that cannot be written.
        """
        overwritten: list[Path] = []
        for planned in files:
            path = planned.path
            try:
                ensure_dir(path.parent)
                if path.exists():
                    print_warning(f'WARNING: File "{path}" already exists. Overwriting.', self.console)
                    overwritten.append(path)
                path.write_bytes(planned.content)
            except OSError as exc:
                raise ChartWriteError(f"could not write {path}: {exc}", path=path) from exc
        return overwritten

    def make_directories(self, directories: Iterable[PlannedDirectory]) -> None:
        """Create bare directories; existing ones are left alone."""
        for planned in directories:
            try:
                ensure_dir(planned.path)
            except OSError as exc:
                raise ChartWriteError(
                    f"could not create directory {planned.path}: {exc}", path=planned.path
                ) from exc

    def append_values(self, path: Path, fragment: bytes) -> None:
        """Append *fragment* to the values file at *path*, creating it if absent.

        ``OSError`` propagates unchanged.
        """
        with open(path, "ab") as fh:
            fh.write(fragment)


def values_has_key(path: Path, key: str) -> bool:
    """Return True when the values file at *path* has a top-level *key* line.

    A missing or unreadable file has no keys.
    """
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return False
    return re.search(rf"^{re.escape(key)}\s*:", text, re.MULTILINE) is not None
