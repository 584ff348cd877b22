"""Value types shared by the navigation core and listing hosts.

This module has no host or filesystem concerns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ViewKind(Enum):
    LISTING = "listing"
    FILE = "file"


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(eq=False)
class View:
    """One open surface: a directory listing or a visited file.

    Identity is object identity; ``name`` and ``directory`` change in place
    when the view is reused or renamed.
    """

    name: str
    directory: Path
    kind: ViewKind = ViewKind.LISTING
    cursor: int = 0

    @property
    def is_listing(self) -> bool:
        return self.kind is ViewKind.LISTING


class CommandStatus(Enum):
    DONE = "done"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass(frozen=True)
class FocusedEntry:
    """Entry under the focused line of a listing view."""

    kind: EntryKind
    path: Path

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class NavigationRequest:
    """Navigate to ``path`` when given, else to the focused entry."""

    path: Path | None = None

    @classmethod
    def to_path(cls, path: Path | str) -> NavigationRequest:
        return cls(path=Path(path))

    @classmethod
    def at_point(cls) -> NavigationRequest:
        return cls(path=None)

    @property
    def is_explicit(self) -> bool:
        return self.path is not None


@dataclass(frozen=True)
class PromptResult:
    """Answer from an interactive directory prompt: a path or a cancellation."""

    path: Path | None = None

    @classmethod
    def answer(cls, path: Path | str) -> PromptResult:
        return cls(path=Path(path))

    @classmethod
    def cancelled(cls) -> PromptResult:
        return cls(path=None)

    @property
    def is_cancelled(self) -> bool:
        return self.path is None


__all__ = [
    "CommandStatus",
    "View",
    "ViewKind",
    "EntryKind",
    "FocusedEntry",
    "NavigationRequest",
    "PromptResult",
]
