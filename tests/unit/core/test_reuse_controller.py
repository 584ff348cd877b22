"""ReuseController behavior over a real filesystem-backed listing session.

Covers replace-vs-open decisions, persistent-name retention, and
no-mutation guarantees when the host rejects a target.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from singledir.config import ReuseConfig
from singledir.errors import NameInUse, NotAccessible, NotADirectory, NotApplicable, NotFound
from singledir.reuse import ReuseAction, ReuseController
from singledir.session import ListingSession
from singledir.views import NavigationRequest, View

NO_HOME = "/nonexistent-home-for-tests"
MAGIC = "*dired*"


def _make_tree(root: Path) -> None:
    for rel in ("a/inner", "b", "c", "empty"):
        (root / rel).mkdir(parents=True)
    (root / "a" / "notes.txt").write_text("hello\n", encoding="utf-8")


class ReuseControllerTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)
        _make_tree(self.root)
        self.session = ListingSession(home=NO_HOME)
        self.view = self.session.open_new(self.root / "a")

    def _controller(self, **overrides: object) -> ReuseController:
        return ReuseController(self.session, ReuseConfig(**overrides))

    def test_repeated_navigation_reuses_single_view(self) -> None:
        controller = self._controller()

        for name in ("b", "a", "c", "a"):
            outcome = controller.reuse(NavigationRequest.to_path(self.root / name))
            self.assertEqual(outcome.action, ReuseAction.REPLACE_IN_PLACE)

        self.assertEqual(self.session.listing_views(), [self.view])
        self.assertIs(self.session.current_view(), self.view)
        self.assertEqual(self.view.directory, self.root / "a")
        self.assertEqual(self.view.name, str(self.root / "a"))

    def test_focused_file_opens_separate_surface_without_replacing(self) -> None:
        controller = self._controller()
        listing_count = len(self.session.listing_views())

        outcome = controller.reuse_at_entry(1)

        self.assertEqual(outcome.action, ReuseAction.OPEN_NEW_AND_VISIT)
        self.assertTrue(outcome.via_other_surface)
        self.assertEqual(outcome.target, self.root / "a" / "notes.txt")
        self.assertEqual(len(self.session.listing_views()), listing_count)
        self.assertEqual(len(self.session.file_views()), 1)
        self.assertEqual(self.view.directory, self.root / "a")

    def test_focused_directory_is_replaced_in_place(self) -> None:
        controller = self._controller()

        outcome = controller.reuse(NavigationRequest.at_point())

        self.assertEqual(outcome.action, ReuseAction.REPLACE_IN_PLACE)
        self.assertEqual(outcome.target, self.root / "a" / "inner")
        self.assertEqual(self.view.directory, self.root / "a" / "inner")
        self.assertEqual(self.view.cursor, 0)

    def test_relative_explicit_path_is_taken_from_view_directory(self) -> None:
        controller = self._controller()

        controller.reuse(NavigationRequest.to_path("inner"))

        self.assertEqual(self.view.directory, self.root / "a" / "inner")

    def test_persistent_name_survives_chained_navigation(self) -> None:
        controller = self._controller()
        self.session.rename_view(self.view, MAGIC)

        controller.reuse(NavigationRequest.to_path(self.root / "b"))
        controller.reuse(NavigationRequest.to_path(self.root / "c"))

        self.assertEqual(self.session.listing_views(), [self.view])
        self.assertEqual(self.view.name, MAGIC)
        self.assertEqual(self.view.directory, self.root / "c")

    def test_custom_persistent_name_is_honored(self) -> None:
        controller = self._controller(magic_buffer_name="home")
        self.session.rename_view(self.view, "home")

        controller.reuse(NavigationRequest.to_path(self.root / "b"))

        self.assertEqual(self.view.name, "home")
        self.assertIsNone(self.session.lookup_view(MAGIC))

    def test_disabled_persistence_never_restores_name(self) -> None:
        controller = self._controller(use_magic_buffer=False)
        self.session.rename_view(self.view, MAGIC)

        controller.reuse(NavigationRequest.to_path(self.root / "b"))
        controller.reuse(NavigationRequest.to_path(self.root / "c"))

        self.assertEqual(self.view.name, str(self.root / "c"))
        self.assertIsNone(self.session.lookup_view(MAGIC))

    def test_path_named_view_keeps_path_derived_names(self) -> None:
        controller = self._controller()

        controller.reuse(NavigationRequest.to_path(self.root / "b"))

        self.assertEqual(self.view.name, str(self.root / "b"))

    def test_missing_target_fails_without_mutation(self) -> None:
        controller = self._controller()
        self.session.rename_view(self.view, MAGIC)

        outcome = controller.reuse(NavigationRequest.to_path(self.root / "missing"))

        self.assertEqual(outcome.action, ReuseAction.ERROR)
        self.assertFalse(outcome.ok)
        self.assertIsInstance(outcome.error, NotFound)
        self.assertEqual(self.view.name, MAGIC)
        self.assertEqual(self.view.directory, self.root / "a")

    def test_explicit_file_path_is_not_a_directory(self) -> None:
        controller = self._controller()

        outcome = controller.reuse(NavigationRequest.to_path(self.root / "a" / "notes.txt"))

        self.assertIsInstance(outcome.error, NotADirectory)
        self.assertEqual(self.session.file_views(), [])
        self.assertEqual(self.view.directory, self.root / "a")

    def test_empty_listing_has_no_entry_at_point(self) -> None:
        controller = self._controller()
        controller.reuse(NavigationRequest.to_path(self.root / "empty"))

        outcome = controller.reuse(NavigationRequest.at_point())

        self.assertIsInstance(outcome.error, NotFound)
        self.assertEqual(self.view.directory, self.root / "empty")

    def test_reuse_at_entry_out_of_range_keeps_cursor(self) -> None:
        controller = self._controller()

        outcome = controller.reuse_at_entry(10)

        self.assertIsInstance(outcome.error, NotFound)
        self.assertEqual(self.view.cursor, 0)
        self.assertEqual(self.view.directory, self.root / "a")

    def test_up_directory_keeps_persistent_name(self) -> None:
        controller = self._controller()
        controller.reuse(NavigationRequest.to_path(self.root / "a" / "inner"))
        self.session.rename_view(self.view, MAGIC)

        outcome = controller.up_directory()

        self.assertTrue(outcome.ok)
        self.assertEqual(self.view.directory, self.root / "a")
        self.assertEqual(self.view.name, MAGIC)

    def test_up_directory_at_filesystem_root_stays_put(self) -> None:
        controller = self._controller()
        controller.reuse(NavigationRequest.to_path(Path("/")))

        outcome = controller.up_directory()

        self.assertTrue(outcome.ok)
        self.assertEqual(self.view.directory, Path("/"))
        self.assertEqual(len(self.session.listing_views()), 1)

    def test_file_view_cannot_be_reused(self) -> None:
        controller = self._controller()
        file_view = self.session.open_file(self.root / "a" / "notes.txt")

        outcome = controller.reuse(NavigationRequest.to_path(self.root / "b"), file_view)

        self.assertIsInstance(outcome.error, NotApplicable)
        self.assertEqual(self.view.directory, self.root / "a")


class ReuseControllerOrderingTests(unittest.TestCase):
    def _host(self, view: View) -> mock.Mock:
        host = mock.Mock()
        host.current_view.return_value = view
        return host

    def test_host_error_is_returned_untouched_and_rename_skipped(self) -> None:
        view = View(name=MAGIC, directory=Path("/srv"))
        host = self._host(view)
        error = NotAccessible(Path("/srv/locked"))
        host.replace_contents.side_effect = error

        outcome = ReuseController(host, ReuseConfig()).reuse(NavigationRequest.to_path("/srv/locked"))

        self.assertIs(outcome.error, error)
        host.rename_view.assert_not_called()

    def test_name_collision_on_reassert_is_logged_and_raised(self) -> None:
        view = View(name=MAGIC, directory=Path("/srv"))
        host = self._host(view)

        def replace(target_view: View, path: Path) -> None:
            target_view.name = "/srv/other"
            target_view.directory = path

        host.replace_contents.side_effect = replace
        host.rename_view.side_effect = NameInUse(MAGIC)

        controller = ReuseController(host, ReuseConfig())
        with self.assertLogs("singledir.reuse", level="ERROR"):
            with self.assertRaises(NameInUse):
                controller.reuse(NavigationRequest.to_path("/srv/other"))

    def test_rename_not_issued_when_host_keeps_name(self) -> None:
        view = View(name=MAGIC, directory=Path("/srv"))
        host = self._host(view)

        ReuseController(host, ReuseConfig()).reuse(NavigationRequest.to_path("/srv/other"))

        host.replace_contents.assert_called_once_with(view, Path("/srv/other"))
        host.rename_view.assert_not_called()


if __name__ == "__main__":
    unittest.main()
