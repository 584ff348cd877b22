"""Collaborator contract between the navigation core and a listing host.

The core never touches the filesystem or a view table directly; it only
calls the operations below. ``singledir.session.ListingSession`` is the
reference implementation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .views import FocusedEntry, PromptResult, View


class ViewHost(Protocol):
    """Operations a directory-listing host exposes to the core.

    Fallible operations raise ``singledir.errors`` exceptions and must not
    mutate any state when they do.
    """

    def lookup_view(self, name: str) -> View | None:
        """Return the open view named ``name``, if any."""

    def current_view(self) -> View:
        """Return the view that currently has focus."""

    def switch_to(self, view: View) -> None:
        """Give focus to an already open ``view``."""

    def focused_entry(self, view: View) -> FocusedEntry:
        """Return the entry on ``view``'s focused line (``NotFound`` if none)."""

    def focus_line(self, view: View, index: int) -> None:
        """Move ``view``'s focused line to entry ``index`` (``NotFound`` if out of range)."""

    def resolve_directory(self, path: Path, base: Path) -> Path:
        """Return ``path`` (relative to ``base``) as an absolute existing directory.

        Raises ``NotFound``, ``NotAccessible`` or ``NotADirectory``.
        """

    def replace_contents(self, view: View, path: Path) -> None:
        """Rebind ``view`` to directory ``path`` in place.

        The host may re-derive the view's path-based name while doing so.
        """

    def open_new(self, path: Path) -> View:
        """Open directory ``path`` in a new focused listing view."""

    def open_file(self, path: Path) -> View:
        """Visit file ``path`` in a separate surface."""

    def rename_view(self, view: View, new_name: str) -> None:
        """Rename ``view``; raises ``NameInUse`` when another view holds it."""

    def unique_name(self, base: str) -> str:
        """Return ``base`` or the first free ``base<N>`` variant."""

    def destroy_view(self, view: View) -> None:
        """Close ``view`` and drop it from the table."""

    def prompt_for_directory(self, label: str, default: Path) -> PromptResult:
        """Ask the user for a directory; may return a cancellation."""

    def abbreviate_and_normalize(self, path: Path) -> str:
        """Return the display form of ``path`` used for path-derived names."""


__all__ = ["ViewHost"]
