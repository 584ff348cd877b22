"""Filesystem-backed listing host used by the shell and the tests.

``ListingSession`` implements every ``ViewHost`` operation over an
in-memory ``ViewTable``. Like an editor's directory mode, rebinding a view
re-derives its path-based name, so a view that held a custom name loses it
unless the caller reasserts it. Derived names never take one of the
session's reserved names (the persistent view name by default).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path

from ..config import DEFAULT_MAGIC_BUFFER_NAME
from ..errors import NotAccessible, NotADirectory, NotApplicable, NotFound
from ..names import compute_name
from ..views import EntryKind, FocusedEntry, PromptResult, View, ViewKind
from .listing import DirectoryChild, list_entries
from .table import ViewTable

logger = logging.getLogger(__name__)

PromptFn = Callable[[str, Path], PromptResult]


def _cancel_prompt(label: str, default: Path) -> PromptResult:
    return PromptResult.cancelled()


class ListingSession:
    """View table, focus, and per-view cursors over the real filesystem."""

    def __init__(
        self,
        *,
        show_hidden: bool = False,
        prompt: PromptFn | None = None,
        home: str | None = None,
        reserved_names: Iterable[str] = (DEFAULT_MAGIC_BUFFER_NAME,),
    ) -> None:
        self.table = ViewTable(reserved=reserved_names)
        self.show_hidden = show_hidden
        self.prompt = prompt if prompt is not None else _cancel_prompt
        self.home = home
        self._current: View | None = None

    # Queries

    def lookup_view(self, name: str) -> View | None:
        return self.table.get(name)

    def current_view(self) -> View:
        if self._current is None:
            raise RuntimeError("no view is open")
        return self._current

    def views(self) -> list[View]:
        return list(self.table)

    def listing_views(self) -> list[View]:
        return self.table.listing_views()

    def file_views(self) -> list[View]:
        return [view for view in self.table if not view.is_listing]

    def entries(self, view: View) -> list[DirectoryChild]:
        """Return the current listing rows of ``view``."""
        if not view.is_listing:
            raise NotApplicable("listing", view.name)
        children, scan_error = list_entries(view.directory, self.show_hidden)
        if scan_error is not None:
            raise NotAccessible(view.directory, str(scan_error))
        return children

    def focused_entry(self, view: View) -> FocusedEntry:
        children = self.entries(view)
        if not 0 <= view.cursor < len(children):
            raise NotFound(view.directory, "no entry on this line")
        child = children[view.cursor]
        kind = EntryKind.DIRECTORY if child.is_dir else EntryKind.FILE
        return FocusedEntry(kind, child.path)

    def resolve_directory(self, path: Path, base: Path) -> Path:
        target = Path(os.path.expanduser(os.fspath(path)))
        if not target.is_absolute():
            target = base / target
        target = Path(os.path.abspath(target))
        if not target.exists():
            raise NotFound(target)
        if not target.is_dir():
            raise NotADirectory(target)
        if not os.access(target, os.R_OK | os.X_OK):
            raise NotAccessible(target)
        return target

    def abbreviate_and_normalize(self, path: Path) -> str:
        return compute_name(path, home=self.home)

    def unique_name(self, base: str) -> str:
        return self.table.unique_name(base)

    # Focus

    def switch_to(self, view: View) -> None:
        if not self.table.owns(view):
            raise KeyError(view.name)
        self._current = view

    def switch_to_name(self, name: str) -> View:
        view = self.table.get(name)
        if view is None:
            raise KeyError(name)
        self._current = view
        return view

    def focus_line(self, view: View, index: int) -> None:
        children = self.entries(view)
        if not 0 <= index < len(children):
            raise NotFound(view.directory, f"no entry on line {index}")
        view.cursor = index

    def move_cursor(self, view: View, delta: int) -> None:
        """Move the focused line by ``delta``, clamped to the listing."""
        children = self.entries(view)
        if not children:
            view.cursor = 0
            return
        view.cursor = max(0, min(len(children) - 1, view.cursor + delta))

    # Mutations

    def open_new(self, path: Path) -> View:
        base = self._current.directory if self._current is not None else Path.cwd()
        target = self.resolve_directory(path, base)
        self._scan_or_raise(target)
        name = self.table.unique_name(self.abbreviate_and_normalize(target))
        view = self.table.add(View(name=name, directory=target))
        self._current = view
        logger.debug("opened listing %r for %s", name, target)
        return view

    def open_file(self, path: Path) -> View:
        target = Path(os.path.abspath(path))
        if not target.exists():
            raise NotFound(target)
        if not os.access(target, os.R_OK):
            raise NotAccessible(target)
        name = self.table.unique_name(target.name or str(target))
        view = self.table.add(View(name=name, directory=target.parent, kind=ViewKind.FILE))
        self._current = view
        logger.debug("visited file %s as %r", target, name)
        return view

    def replace_contents(self, view: View, path: Path) -> None:
        target = self.resolve_directory(path, view.directory)
        self._scan_or_raise(target)
        new_name = self.table.unique_name(self.abbreviate_and_normalize(target), ignore=view)
        self.table.rename(view, new_name)
        view.directory = target
        view.kind = ViewKind.LISTING
        view.cursor = 0

    def rename_view(self, view: View, new_name: str) -> None:
        self.table.rename(view, new_name)

    def destroy_view(self, view: View) -> None:
        self.table.remove(view)
        if self._current is view:
            remaining = self.views()
            self._current = remaining[-1] if remaining else None
        logger.debug("destroyed view %r", view.name)

    def prompt_for_directory(self, label: str, default: Path) -> PromptResult:
        return self.prompt(label, default)

    def _scan_or_raise(self, directory: Path) -> None:
        _children, scan_error = list_entries(directory, self.show_hidden)
        if scan_error is not None:
            raise NotAccessible(directory, str(scan_error))


__all__ = ["ListingSession", "PromptFn"]
