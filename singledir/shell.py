"""Line-oriented front end driving a ``ListingSession`` through ``Navigator``.

Each input line is one command word plus optional arguments. Directory
prompts read their answer from the same input stream.
"""

from __future__ import annotations

import shlex
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .commands import CommandResult, Navigator
from .errors import NameInUse, SingleDirError
from .session import ListingSession, format_entry
from .views import CommandStatus, PromptResult

CommandHandler = Callable[[list[str]], bool | None]


@dataclass(frozen=True)
class CommandBinding:
    """Mapping from one or more command words to a single handler."""

    words: tuple[str, ...]
    handler: CommandHandler
    usage: str
    summary: str


class CommandRegistry:
    """Small command-dispatch table keyed by lowercase command word."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self.bindings: list[CommandBinding] = []

    def register_binding(self, binding: CommandBinding) -> CommandRegistry:
        """Register one binding, overwriting existing handlers for same words."""
        for word in binding.words:
            self._handlers[word.lower()] = binding.handler
        self.bindings.append(binding)
        return self

    def register_bindings(self, *bindings: CommandBinding) -> CommandRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, word: str, args: list[str]) -> bool | None:
        """Invoke handler for ``word``; ``None`` means the word is unknown."""
        handler = self._handlers.get(word.lower())
        if handler is None:
            return None
        return handler(args)


class NavigationShell:
    """Read commands, run them, and print the resulting session state."""

    def __init__(self, navigator: Navigator, session: ListingSession, out: TextIO) -> None:
        self.navigator = navigator
        self.session = session
        self.out = out
        self._lines: Iterator[str] = iter(())
        self.running = True
        session.prompt = self.prompt
        self.registry = CommandRegistry().register_bindings(
            CommandBinding(("ls", "l"), self._cmd_ls, "ls", "list the current view"),
            CommandBinding(("views",), self._cmd_views, "views", "list open views"),
            CommandBinding(("next", "n"), self._cmd_next, "next", "focus the next line"),
            CommandBinding(("prev", "p"), self._cmd_prev, "prev", "focus the previous line"),
            CommandBinding(("goto",), self._cmd_goto, "goto N", "focus line N"),
            CommandBinding(("open", "o"), self._cmd_open, "open [PATH]", "open PATH or the focused entry in place"),
            CommandBinding(("click",), self._cmd_click, "click N", "open line N in place"),
            CommandBinding(("up", "^"), self._cmd_up, "up", "show the parent directory in place"),
            CommandBinding(("home",), self._cmd_home, "home [PATH]", "jump to the persistent view"),
            CommandBinding(("toggle", "t"), self._cmd_toggle, "toggle", "toggle persistent/path name"),
            CommandBinding(("switch",), self._cmd_switch, "switch NAME", "focus the view named NAME"),
            CommandBinding(("help", "?"), self._cmd_help, "help", "show commands"),
            CommandBinding(("quit", "q", "exit"), self._cmd_quit, "quit", "leave the shell"),
        )

    def write(self, text: str = "") -> None:
        self.out.write(text + "\n")

    def run(self, lines: Iterable[str]) -> None:
        """Execute commands until input ends or ``quit`` is read."""
        self._lines = iter(lines)
        self.running = True
        while self.running:
            line = self._next_line()
            if line is None:
                break
            self.execute(line)

    def execute(self, line: str) -> bool:
        """Run one command line; returns ``False`` for parse errors or unknown words."""
        try:
            words = shlex.split(line)
        except ValueError as exc:
            self.write(f"error: {exc}")
            return False
        if not words:
            return True
        try:
            handled = self.registry.dispatch(words[0], words[1:])
        except NameInUse:
            raise
        except SingleDirError as exc:
            self.write(f"error: {exc}")
            return False
        if handled is None:
            self.write(f"unknown command: {words[0]} (try 'help')")
            return False
        return bool(handled)

    def prompt(self, label: str, default: Path) -> PromptResult:
        """Read a directory from input; blank keeps ``default``, EOF cancels."""
        self.out.write(f"{label}[{default}] ")
        try:
            answer = self._next_line()
        except KeyboardInterrupt:
            answer = None
        self.write()
        if answer is None:
            return PromptResult.cancelled()
        answer = answer.strip()
        return PromptResult.answer(answer or default)

    def _next_line(self) -> str | None:
        try:
            return next(self._lines).rstrip("\n")
        except StopIteration:
            return None

    def _report(self, result: CommandResult) -> bool:
        if result.status is CommandStatus.FAILED:
            self.write(f"error: {result.error}")
            return False
        if result.status is CommandStatus.CANCELLED:
            self.write("cancelled")
            return True
        self._show_current()
        return True

    def _show_current(self) -> None:
        view = self.session.current_view()
        if view.is_listing:
            self.write(f"[{view.name}] {view.directory}")
        else:
            self.write(f"[{view.name}] file in {view.directory}")

    def _single_int(self, args: list[str]) -> int | None:
        if len(args) != 1:
            return None
        try:
            return int(args[0])
        except ValueError:
            return None

    def _cmd_ls(self, args: list[str]) -> bool:
        view = self.session.current_view()
        self._show_current()
        if not view.is_listing:
            return True
        for idx, child in enumerate(self.session.entries(view)):
            self.write(f"{idx:>3} {format_entry(child, idx == view.cursor)}")
        return True

    def _cmd_views(self, args: list[str]) -> bool:
        current = self.session.current_view()
        for view in self.session.views():
            marker = "*" if view is current else " "
            self.write(f"{marker} {view.name}\t{view.kind.value}\t{view.directory}")
        return True

    def _cmd_next(self, args: list[str]) -> bool:
        return self._move(1)

    def _cmd_prev(self, args: list[str]) -> bool:
        return self._move(-1)

    def _move(self, delta: int) -> bool:
        view = self.session.current_view()
        if not view.is_listing:
            self.write("error: not a directory listing")
            return False
        self.session.move_cursor(view, delta)
        return True

    def _cmd_goto(self, args: list[str]) -> bool:
        index = self._single_int(args)
        if index is None:
            self.write("usage: goto N")
            return False
        view = self.session.current_view()
        if not view.is_listing:
            self.write("error: not a directory listing")
            return False
        self.session.focus_line(view, index)
        return True

    def _cmd_open(self, args: list[str]) -> bool:
        if len(args) > 1:
            self.write("usage: open [PATH]")
            return False
        return self._report(self.navigator.reuse_navigate(args[0] if args else None))

    def _cmd_click(self, args: list[str]) -> bool:
        index = self._single_int(args)
        if index is None:
            self.write("usage: click N")
            return False
        return self._report(self.navigator.click_entry(index))

    def _cmd_up(self, args: list[str]) -> bool:
        return self._report(self.navigator.up_directory())

    def _cmd_home(self, args: list[str]) -> bool:
        if len(args) > 1:
            self.write("usage: home [PATH]")
            return False
        return self._report(self.navigator.goto_persistent(args[0] if args else None))

    def _cmd_toggle(self, args: list[str]) -> bool:
        return self._report(self.navigator.toggle_naming())

    def _cmd_switch(self, args: list[str]) -> bool:
        if len(args) != 1:
            self.write("usage: switch NAME")
            return False
        try:
            self.session.switch_to_name(args[0])
        except KeyError:
            self.write(f"error: no view named {args[0]}")
            return False
        self._show_current()
        return True

    def _cmd_help(self, args: list[str]) -> bool:
        for binding in self.registry.bindings:
            self.write(f"  {binding.usage:<14} {binding.summary}")
        return True

    def _cmd_quit(self, args: list[str]) -> bool:
        self.running = False
        return True


def split_script(script: str) -> list[str]:
    """Split a ``;``-separated command script into command lines."""
    return [part.strip() for part in script.split(";") if part.strip()]


__all__ = [
    "CommandBinding",
    "CommandRegistry",
    "NavigationShell",
    "split_script",
]
