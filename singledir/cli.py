"""Command-line front door for singledir.

Parses CLI options, resolves the effective navigation config, opens the
starting directory, then runs the navigation shell on stdin or a script.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from . import config
from .commands import Navigator
from .errors import SingleDirError
from .session import ListingSession
from .shell import NavigationShell, split_script


def _interactive_lines(stdin: TextIO, stdout: TextIO) -> Iterator[str]:
    """Yield stdin lines, printing a prompt first when attached to a TTY."""
    show_prompt = stdin.isatty()
    while True:
        if show_prompt:
            stdout.write("singledir> ")
            stdout.flush()
        line = stdin.readline()
        if not line:
            return
        yield line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse directories reusing a single listing view per navigation."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument("--no-magic", action="store_true", help="Do not keep the persistent view name across navigation.")
    parser.add_argument("--magic-name", default=None, help="Name reserved for the persistent home view.")
    parser.add_argument("--show-hidden", action="store_true", help="List dot-files.")
    parser.add_argument("--save-config", action="store_true", help="Persist the effective options to the config file.")
    parser.add_argument("-c", "--commands", default=None, help="Run ';'-separated shell commands instead of reading stdin.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log navigation decisions to stderr.")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and run a navigation session.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is opened.
    """
    args = build_parser().parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        reuse_config = config.load_reuse_config().with_overrides(
            use_magic_buffer=False if args.no_magic else None,
            magic_buffer_name=args.magic_name,
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    show_hidden = args.show_hidden or config.load_show_hidden()

    if args.save_config:
        config.save_reuse_config(reuse_config)
        config.save_show_hidden(show_hidden)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)

    session = ListingSession(show_hidden=show_hidden, reserved_names=(reuse_config.magic_buffer_name,))
    try:
        session.open_new(path)
    except SingleDirError as exc:
        raise SystemExit(str(exc)) from exc

    navigator = Navigator(session, reuse_config)
    shell = NavigationShell(navigator, session, sys.stdout)
    if args.commands is not None:
        shell.run(split_script(args.commands))
    else:
        shell.run(_interactive_lines(sys.stdin, sys.stdout))


if __name__ == "__main__":
    main()
