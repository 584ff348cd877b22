"""Path-derived view names and uniquification suffixes."""

from __future__ import annotations

import unittest
from pathlib import Path

from singledir.names import abbreviate_home, compute_name, uniquify


class ComputeNameTests(unittest.TestCase):
    def test_trailing_separator_is_dropped(self) -> None:
        self.assertEqual(compute_name("/srv/data/", home="/home/me"), "/srv/data")

    def test_root_keeps_single_separator(self) -> None:
        self.assertEqual(compute_name("/", home="/home/me"), "/")

    def test_dot_segments_are_normalized(self) -> None:
        self.assertEqual(compute_name(Path("/srv/data/../logs/./"), home="/home/me"), "/srv/logs")

    def test_home_prefix_is_abbreviated(self) -> None:
        self.assertEqual(compute_name("/home/me/src/", home="/home/me"), "~/src")
        self.assertEqual(compute_name("/home/me", home="/home/me/"), "~")

    def test_sibling_of_home_is_not_abbreviated(self) -> None:
        self.assertEqual(abbreviate_home("/home/meadow", home="/home/me"), "/home/meadow")

    def test_root_home_disables_abbreviation(self) -> None:
        self.assertEqual(abbreviate_home("/srv", home="/"), "/srv")


class UniquifyTests(unittest.TestCase):
    def test_free_name_is_kept(self) -> None:
        self.assertEqual(uniquify("/srv", lambda name: False), "/srv")

    def test_first_free_suffix_is_chosen(self) -> None:
        taken = {"/srv", "/srv<2>", "/srv<4>"}
        self.assertEqual(uniquify("/srv", taken.__contains__), "/srv<3>")


if __name__ == "__main__":
    unittest.main()
