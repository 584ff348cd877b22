"""Home-view jumps and persistent-vs-path naming toggles."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import ReuseConfig
from .errors import NameInUse, NotApplicable
from .host import ViewHost
from .views import CommandStatus, View

logger = logging.getLogger(__name__)

PROMPT_LABEL = "Dired (directory): "


class PersistentViewManager:
    """Jump to the view holding the persistent name and move that name around.

    At most one open view holds ``config.magic_buffer_name``. A holder is
    destroyed before another view takes the name, and renames to the name
    only happen after every fallible step of an operation has succeeded.
    """

    def __init__(self, host: ViewHost, config: ReuseConfig) -> None:
        self.host = host
        self.config = config

    @property
    def magic_name(self) -> str:
        return self.config.magic_buffer_name

    def home_view(self) -> View | None:
        """Return the listing view holding the persistent name, if any."""
        view = self.host.lookup_view(self.magic_name)
        if view is None or not view.is_listing:
            return None
        return view

    def goto_home(self, path: Path | str | None = None) -> CommandStatus:
        """Focus the home view, creating or reloading it as needed.

        - no home view: open the requested (or prompted) directory in a new
          view and give it the persistent name
        - home view is focused: reload it in place with the requested (or
          prompted) directory
        - home view exists elsewhere: focus it, and when ``path`` is given
          also reload it in place

        With persistence disabled the requested (or prompted) directory is
        opened in a new view that keeps its path-derived name.

        Focus only moves once the reload has succeeded, so a bad path leaves
        everything untouched. A cancelled prompt returns ``CANCELLED``.
        """
        current = self.host.current_view()
        explicit = Path(path) if path is not None else None
        if not self.config.use_magic_buffer:
            dirname = self._read_directory(explicit, current)
            if dirname is None:
                return CommandStatus.CANCELLED
            view = self.host.open_new(dirname)
            logger.debug("persistence disabled; opened %r", view.name)
            return CommandStatus.DONE

        home = self.home_view()

        if home is not None and home is not current:
            if explicit is not None:
                dirname = self.host.resolve_directory(explicit, current.directory)
                self.host.replace_contents(home, dirname)
                logger.debug("reloaded home view with %s", dirname)
            logger.debug("switching focus to home view %r", home.name)
            self.host.switch_to(home)
            if explicit is not None:
                self._claim_persistent_name(home)
            return CommandStatus.DONE

        dirname = self._read_directory(explicit, current)
        if dirname is None:
            return CommandStatus.CANCELLED

        if home is None:
            view = self.host.open_new(dirname)
            logger.debug("opened new home view for %s", dirname)
            self._claim_persistent_name(view)
        else:
            self.host.replace_contents(home, dirname)
            logger.debug("reloaded home view with %s", dirname)
            self._claim_persistent_name(home)
        return CommandStatus.DONE

    def toggle_naming(self) -> str:
        """Swap the focused listing between the persistent and its path name.

        Returns the view's new name. Taking the persistent name evicts the
        view that held it. Not available while persistence is disabled.
        """
        view = self.host.current_view()
        if not view.is_listing:
            raise NotApplicable("toggle naming", view.name)
        if not self.config.use_magic_buffer:
            raise NotApplicable("toggle naming", view.name, "is unavailable while persistent names are disabled")

        if view.name == self.magic_name:
            base = self.host.abbreviate_and_normalize(view.directory)
            new_name = self.host.unique_name(base)
            self.host.rename_view(view, new_name)
            logger.debug("released persistent name; view is now %r", new_name)
            return view.name

        holder = self.home_view()
        if holder is not None and holder is not view:
            logger.debug("evicting previous holder of %r at %s", self.magic_name, holder.directory)
            self.host.destroy_view(holder)
        self._claim_persistent_name(view)
        return view.name

    def _read_directory(self, explicit: Path | None, current: View) -> Path | None:
        if explicit is not None:
            return self.host.resolve_directory(explicit, current.directory)
        answer = self.host.prompt_for_directory(PROMPT_LABEL, current.directory)
        if answer.is_cancelled:
            logger.debug("directory prompt cancelled")
            return None
        return self.host.resolve_directory(answer.path, current.directory)

    def _claim_persistent_name(self, view: View) -> None:
        if view.name == self.magic_name:
            return
        try:
            self.host.rename_view(view, self.magic_name)
        except NameInUse:
            logger.error("persistent name %r already held by another view", self.magic_name)
            raise


__all__ = ["PROMPT_LABEL", "PersistentViewManager"]
