"""Filesystem scanning for directory-listing views."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirectoryChild:
    """One visible directory child row plus cached metadata."""

    name: str
    path: Path
    is_dir: bool
    file_size: int | None


def list_entries(directory: Path, show_hidden: bool) -> tuple[list[DirectoryChild], OSError | None]:
    """List visible children with directories first, then by case-insensitive name.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be scanned, in which case ``children`` is empty.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue

                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False

                file_size: int | None = None
                if not is_dir:
                    try:
                        file_size = int(child.stat().st_size)
                    except OSError:
                        pass

                children.append(
                    DirectoryChild(
                        name=name,
                        path=Path(child.path),
                        is_dir=is_dir,
                        file_size=file_size,
                    )
                )
    except OSError as exc:
        return [], exc

    children.sort(key=lambda item: (not item.is_dir, item.name.lower()))
    return children, None


def format_entry(child: DirectoryChild, focused: bool) -> str:
    """Render one listing row; directories get a trailing separator."""
    marker = ">" if focused else " "
    if child.is_dir:
        return f"{marker} {child.name}{os.sep}"
    size = "?" if child.file_size is None else str(child.file_size)
    return f"{marker} {child.name}  {size}"


__all__ = ["DirectoryChild", "list_entries", "format_entry"]
