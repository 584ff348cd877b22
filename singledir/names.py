"""Path-derived view names and host-style uniquification."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

UNIQUE_SUFFIX_START = 2


def abbreviate_home(path: str, home: str | None = None) -> str:
    """Replace a leading home-directory prefix with ``~``."""
    if home is None:
        home = os.path.expanduser("~")
    home = home.rstrip(os.sep)
    if not home:
        return path
    if path == home:
        return "~"
    if path.startswith(home + os.sep):
        return "~" + path[len(home):]
    return path


def compute_name(path: Path | str, home: str | None = None) -> str:
    """Return the canonical display name for directory ``path``.

    The path is made absolute and normalized, the trailing separator is
    dropped (the filesystem root keeps its single separator) and the home
    directory is abbreviated to ``~``.
    """
    normalized = os.path.normpath(os.path.abspath(os.fspath(path)))
    if len(normalized) > 1:
        normalized = normalized.rstrip(os.sep) or os.sep
    return abbreviate_home(normalized, home)


def uniquify(base: str, is_taken: Callable[[str], bool]) -> str:
    """Return ``base`` when free, else the first free ``base<N>`` with ``N >= 2``."""
    if not is_taken(base):
        return base
    suffix = UNIQUE_SUFFIX_START
    while is_taken(f"{base}<{suffix}>"):
        suffix += 1
    return f"{base}<{suffix}>"


__all__ = ["abbreviate_home", "compute_name", "uniquify"]
