"""Replace-in-place navigation for directory-listing views.

A navigation request issued from a listing view either rebinds that same
view to the target directory or, for files, visits the file in a separate
surface. Once a view holds the persistent name it keeps it across every
in-place replacement.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .config import ReuseConfig
from .errors import NameInUse, NotApplicable, SingleDirError
from .host import ViewHost
from .views import EntryKind, FocusedEntry, NavigationRequest, View

logger = logging.getLogger(__name__)


class ReuseAction(Enum):
    REPLACE_IN_PLACE = "replace_in_place"
    OPEN_NEW_AND_VISIT = "open_new_and_visit"
    ERROR = "error"


@dataclass(frozen=True)
class ReuseOutcome:
    """What one navigation request did, plus the host error when it failed."""

    action: ReuseAction
    target: Path
    via_other_surface: bool = False
    error: SingleDirError | None = None

    @classmethod
    def replace_in_place(cls, target: Path) -> ReuseOutcome:
        return cls(action=ReuseAction.REPLACE_IN_PLACE, target=target)

    @classmethod
    def open_new_and_visit(cls, target: Path, *, via_other_surface: bool = True) -> ReuseOutcome:
        return cls(
            action=ReuseAction.OPEN_NEW_AND_VISIT,
            target=target,
            via_other_surface=via_other_surface,
        )

    @classmethod
    def failed(cls, target: Path, error: SingleDirError) -> ReuseOutcome:
        return cls(action=ReuseAction.ERROR, target=target, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


class ReuseController:
    """Decide replace-vs-open for navigation requests and keep the persistent name."""

    def __init__(self, host: ViewHost, config: ReuseConfig) -> None:
        self.host = host
        self.config = config

    def resolve_target(self, request: NavigationRequest, view: View) -> FocusedEntry:
        """Return the request target; explicit paths are always directories.

        Relative explicit paths are taken relative to the view's directory.
        """
        if request.path is not None:
            target = request.path if request.path.is_absolute() else view.directory / request.path
            return FocusedEntry(EntryKind.DIRECTORY, target)
        return self.host.focused_entry(view)

    def reuse(self, request: NavigationRequest, current_view: View | None = None) -> ReuseOutcome:
        """Navigate ``current_view`` (default: the focused view) per ``request``.

        Host failures are returned as an ``ERROR`` outcome carrying the host
        exception unchanged; nothing is renamed or replaced in that case.
        """
        view = current_view if current_view is not None else self.host.current_view()
        fallback_target = request.path if request.path is not None else view.directory
        if not view.is_listing:
            return ReuseOutcome.failed(fallback_target, NotApplicable("reuse", view.name))

        try:
            entry = self.resolve_target(request, view)
        except SingleDirError as exc:
            return ReuseOutcome.failed(fallback_target, exc)

        if not entry.is_directory:
            try:
                self.host.open_file(entry.path)
            except SingleDirError as exc:
                return ReuseOutcome.failed(entry.path, exc)
            logger.debug("visited file %s in a separate surface", entry.path)
            return ReuseOutcome.open_new_and_visit(entry.path, via_other_surface=True)

        prior_name = view.name
        try:
            self.host.replace_contents(view, entry.path)
        except SingleDirError as exc:
            return ReuseOutcome.failed(entry.path, exc)
        logger.debug("replaced %r in place with %s", prior_name, view.directory)

        if self.config.use_magic_buffer and prior_name == self.config.magic_buffer_name:
            self._reassert_persistent_name(view)
        return ReuseOutcome.replace_in_place(view.directory)

    def up_directory(self, current_view: View | None = None) -> ReuseOutcome:
        """Reuse the view for the parent of its bound directory."""
        view = current_view if current_view is not None else self.host.current_view()
        if not view.is_listing:
            return ReuseOutcome.failed(view.directory, NotApplicable("up directory", view.name))
        return self.reuse(NavigationRequest.to_path(view.directory.parent), view)

    def reuse_at_entry(self, index: int, current_view: View | None = None) -> ReuseOutcome:
        """Focus entry ``index`` and navigate to it, like clicking a listing line."""
        view = current_view if current_view is not None else self.host.current_view()
        if not view.is_listing:
            return ReuseOutcome.failed(view.directory, NotApplicable("reuse", view.name))
        try:
            self.host.focus_line(view, index)
        except SingleDirError as exc:
            return ReuseOutcome.failed(view.directory, exc)
        return self.reuse(NavigationRequest.at_point(), view)

    def _reassert_persistent_name(self, view: View) -> None:
        name = self.config.magic_buffer_name
        if view.name == name:
            return
        try:
            self.host.rename_view(view, name)
        except NameInUse:
            logger.error("persistent name %r taken while its holder was being reused", name)
            raise
        logger.debug("restored persistent name %r on %s", name, view.directory)


__all__ = ["ReuseAction", "ReuseOutcome", "ReuseController"]
