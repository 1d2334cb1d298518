"""Lexical rules for chart and module names."""

from __future__ import annotations

import re

from chartgen.chart.models import MAX_NAME_LENGTH
from chartgen.errors import InvalidNameError, NameErrorReason

# Stricter than it strictly needs to be: newlines, ``$``, quotes, ``+``,
# parentheses and ``%`` are known to break generated templates.
NAME_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+$")


def validate_name(name: str) -> None:
    """Raise ``InvalidNameError`` unless *name* is a usable chart/module name.

    A valid name is 1 to 250 characters drawn from ``[A-Za-z0-9._-]``.
    """
    if not name or len(name) > MAX_NAME_LENGTH:
        raise InvalidNameError(
            f"chart name must be between 1 and {MAX_NAME_LENGTH} characters",
            name=name,
            reason=NameErrorReason.EMPTY_OR_TOO_LONG,
        )
    # fullmatch so a trailing newline is rejected too
    if not NAME_PATTERN.fullmatch(name):
        raise InvalidNameError(
            f"chart name must match the regular expression {NAME_PATTERN.pattern!r}",
            name=name,
            reason=NameErrorReason.INVALID_CHARACTERS,
        )


def is_valid_name(name: str) -> bool:
    """Boolean form of :func:`validate_name`."""
    try:
        validate_name(name)
    except InvalidNameError:
        return False
    return True


def validate_chart_name(name: str) -> None:
    """:func:`validate_name`, also rejecting ``.`` and ``..``.

    A chart name becomes a directory under the parent, so these two would
    write into the parent (or its parent) instead of a new chart directory.
    """
    validate_name(name)
    if name in (".", ".."):
        raise InvalidNameError(
            f"chart name {name!r} refers to an existing directory",
            name=name,
            reason=NameErrorReason.RELATIVE_PATH,
        )
