"""Finding the executable a command name refers to."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from .strtools import split


def path_directories(environ: Mapping[str, str]) -> list[str] | None:
    """Return the directories listed in ``PATH``, or ``None`` if there are none.

    Empty entries are dropped. Only the text up to the next ``=`` in the
    value is used.
    """
    value = environ.get("PATH")
    if value is None:
        return None
    fields = split(value, "=") if value else []
    if not fields:
        return None
    return split(fields[0], ":")


def find_executable(command: str, directories: Iterable[str] | None) -> str | None:
    """Resolve ``command`` to an executable path.

    The name itself is tried first, relative to the working directory;
    then each directory in turn. Returns ``None`` when nothing matches.
    """
    if os.access(command, os.X_OK):
        return command
    if directories is None:
        return None
    for directory in directories:
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None