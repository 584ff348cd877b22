"""Typed failures raised by listing hosts and navigation operations.

Every error carries the path or view name it is about so front ends can
report it without extra context.
"""

from __future__ import annotations

from pathlib import Path


class SingleDirError(Exception):
    """Base class for all navigation and view-table failures."""


class PathError(SingleDirError):
    """Failure tied to one filesystem path."""

    reason = "path error"

    def __init__(self, path: Path, detail: str | None = None) -> None:
        self.path = path
        self.detail = detail
        message = f"{self.reason}: {path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class NotFound(PathError):
    reason = "no such file or directory"


class NotAccessible(PathError):
    reason = "permission denied"


class NotADirectory(PathError):
    reason = "not a directory"


class NotApplicable(SingleDirError):
    """Operation requested outside a directory-listing view or while it is disabled."""

    def __init__(
        self,
        operation: str,
        view_name: str | None = None,
        reason: str = "is only available in a directory listing",
    ) -> None:
        self.operation = operation
        self.view_name = view_name
        where = f" in {view_name!r}" if view_name is not None else ""
        super().__init__(f"{operation} {reason}{where}")


class NameInUse(SingleDirError):
    """Rename target already held by another open view."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"view name already in use: {name}")


__all__ = [
    "SingleDirError",
    "PathError",
    "NotFound",
    "NotAccessible",
    "NotADirectory",
    "NotApplicable",
    "NameInUse",
]
