"""Name-keyed table of open views."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..errors import NameInUse
from ..names import uniquify
from ..views import View


class ViewTable:
    """Open views keyed by unique name, in opening order.

    Every insert and rename checks the name against the other open views.
    ``reserved`` names are never handed out by ``unique_name``; only an
    explicit rename can assign them.
    """

    def __init__(self, reserved: Iterable[str] = ()) -> None:
        self._views: dict[str, View] = {}
        self.reserved = frozenset(reserved)

    def __contains__(self, name: object) -> bool:
        return name in self._views

    def __iter__(self) -> Iterator[View]:
        return iter(list(self._views.values()))

    def __len__(self) -> int:
        return len(self._views)

    def get(self, name: str) -> View | None:
        return self._views.get(name)

    def owns(self, view: View) -> bool:
        return self._views.get(view.name) is view

    def add(self, view: View) -> View:
        if view.name in self._views:
            raise NameInUse(view.name)
        self._views[view.name] = view
        return view

    def rename(self, view: View, new_name: str) -> None:
        """Rename ``view`` in place, keeping its position in the table."""
        if not self.owns(view):
            raise KeyError(view.name)
        if new_name == view.name:
            return
        if new_name in self._views:
            raise NameInUse(new_name)
        self._views = {
            (new_name if existing is view else name): existing
            for name, existing in self._views.items()
        }
        view.name = new_name

    def remove(self, view: View) -> None:
        if not self.owns(view):
            raise KeyError(view.name)
        del self._views[view.name]

    def unique_name(self, base: str, ignore: View | None = None) -> str:
        """Return ``base`` or ``base<N>``, treating ``ignore``'s own name as free.

        Reserved names always count as taken.
        """

        def is_taken(name: str) -> bool:
            if name in self.reserved:
                return True
            holder = self._views.get(name)
            return holder is not None and holder is not ignore

        return uniquify(base, is_taken)

    def listing_views(self) -> list[View]:
        return [view for view in self._views.values() if view.is_listing]


__all__ = ["ViewTable"]
