"""User-facing navigation commands with uniform success/error results.

Front ends call these instead of the controller and manager directly so
every command reports ``DONE``, ``CANCELLED`` or ``FAILED`` the same way.
Name collisions on the persistent name are invariant violations and are
re-raised rather than reported as ordinary failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import ReuseConfig
from .errors import NameInUse, SingleDirError
from .host import ViewHost
from .persistent import PersistentViewManager
from .reuse import ReuseController, ReuseOutcome
from .views import CommandStatus, NavigationRequest


@dataclass(frozen=True)
class CommandResult:
    status: CommandStatus
    error: SingleDirError | None = None
    outcome: ReuseOutcome | None = None

    @classmethod
    def done(cls, outcome: ReuseOutcome | None = None) -> CommandResult:
        return cls(status=CommandStatus.DONE, outcome=outcome)

    @classmethod
    def cancelled(cls) -> CommandResult:
        return cls(status=CommandStatus.CANCELLED)

    @classmethod
    def failed(cls, error: SingleDirError, outcome: ReuseOutcome | None = None) -> CommandResult:
        return cls(status=CommandStatus.FAILED, error=error, outcome=outcome)

    @classmethod
    def from_outcome(cls, outcome: ReuseOutcome) -> CommandResult:
        if outcome.error is not None:
            return cls.failed(outcome.error, outcome)
        return cls.done(outcome)

    @property
    def ok(self) -> bool:
        return self.status is CommandStatus.DONE


class Navigator:
    """Bundle of the reuse controller and home manager over one host."""

    def __init__(self, host: ViewHost, config: ReuseConfig) -> None:
        self.host = host
        self.config = config
        self.controller = ReuseController(host, config)
        self.persistent = PersistentViewManager(host, config)

    def reuse_navigate(self, path: Path | str | None = None) -> CommandResult:
        """Open ``path`` (or the focused entry) reusing the current listing view."""
        if path is None:
            request = NavigationRequest.at_point()
        else:
            request = NavigationRequest.to_path(path)
        return CommandResult.from_outcome(self.controller.reuse(request))

    def click_entry(self, index: int) -> CommandResult:
        """Focus listing line ``index`` and open it reusing the view."""
        return CommandResult.from_outcome(self.controller.reuse_at_entry(index))

    def up_directory(self) -> CommandResult:
        """Show the parent directory in the current listing view."""
        return CommandResult.from_outcome(self.controller.up_directory())

    def goto_persistent(self, path: Path | str | None = None) -> CommandResult:
        """Jump to the home view, optionally loading ``path`` there."""
        try:
            status = self.persistent.goto_home(path)
        except NameInUse:
            raise
        except SingleDirError as exc:
            return CommandResult.failed(exc)
        if status is CommandStatus.CANCELLED:
            return CommandResult.cancelled()
        return CommandResult.done()

    def toggle_naming(self) -> CommandResult:
        """Switch the current view between the persistent and path-derived name."""
        try:
            self.persistent.toggle_naming()
        except NameInUse:
            raise
        except SingleDirError as exc:
            return CommandResult.failed(exc)
        return CommandResult.done()


__all__ = ["CommandResult", "Navigator"]
