"""Exception hierarchy for chart scaffolding.

Every error raised by chartgen derives from ``ScaffoldError`` so the CLI can
catch a single type.  Errors carry the filesystem ``path`` they concern (when
there is one) so callers can report which directory was involved even though
the operation failed.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class NameErrorReason(str, Enum):
    """Why a chart or module name was rejected."""

    EMPTY_OR_TOO_LONG = "empty_or_too_long"
    INVALID_CHARACTERS = "invalid_characters"
    RELATIVE_PATH = "relative_path"


class InvalidNameError(ScaffoldError, ValueError):
    """Raised when a chart or module name fails the lexical rules."""

    def __init__(self, message: str, name: str, reason: NameErrorReason) -> None:
        self.name = name
        self.reason = reason
        super().__init__(message)


class ChartPathError(ScaffoldError):
    """The target directory is missing, not a directory, or blocked by a file."""


class ChartWriteError(ScaffoldError):
    """A generated file or directory could not be written."""


class ChartLoadError(ScaffoldError):
    """An existing chart could not be loaded from disk."""


class ChartSaveError(ScaffoldError):
    """A chart could not be saved to its destination."""


class UnknownManifestKindError(ScaffoldError, ValueError):
    """The requested manifest kind has no template."""

    def __init__(self, kind: str, known: list[str]) -> None:
        self.kind = kind
        self.known = known
        super().__init__(
            f"unknown manifest kind {kind!r} (expected one of: {', '.join(known)})"
        )


class UnresolvedPlaceholderError(ScaffoldError):
    """A placeholder marker survived substitution."""

    def __init__(self, markers: list[str], where: str) -> None:
        self.markers = markers
        super().__init__(f"unresolved placeholder(s) {markers} in {where}")
