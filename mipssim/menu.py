"""Menus grouping the commands of the interactive shell."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TextIO

from mipssim.commands import (
    Command,
    CommandHandle,
    FreeformCommand,
    FunctionCommand,
    SessionLike,
    get_completions,
)


class Menu(Command):
    """A command holding sub-commands; entering it makes it the current menu."""

    def __init__(self, name: str = "", description: str | None = None) -> None:
        super().__init__(name)
        if description is None:
            description = "(menu)" if name else ""
        self.description = description
        self.parent: Menu | None = None
        self._commands: list[Command] = []

    @property
    def commands(self) -> list[Command]:
        """The sub-commands, in insertion order."""
        return self._commands

    def insert(
        self,
        name: str,
        func: Callable[..., Any],
        help: str = "",
        param_types: Sequence[Any] = (),
        param_desc: Sequence[str] = (),
    ) -> CommandHandle:
        """Add a command taking typed parameters; func gets the output first."""
        return self.insert_command(
            FunctionCommand(name, func, param_types, help, param_desc)
        )

    def insert_freeform(
        self,
        name: str,
        func: Callable[[TextIO, list[str]], Any],
        help: str = "",
        param_desc: Sequence[str] = (),
    ) -> CommandHandle:
        """Add a command receiving all following words as a list."""
        return self.insert_command(FreeformCommand(name, func, help, param_desc))

    def insert_command(self, command: Command) -> CommandHandle:
        """Add an existing command or sub-menu."""
        if isinstance(command, Menu):
            command.parent = self
        self._commands.append(command)
        return CommandHandle(command, self._commands)

    def execute(self, cmd_line: Sequence[str], session: SessionLike) -> bool:
        if not self.enabled or not cmd_line:
            return False
        if cmd_line[0] != self.name:
            return False
        if len(cmd_line) == 1:
            session.set_current(self)  # type: ignore[attr-defined]
            return True
        rest = list(cmd_line[1:])
        return any(command.execute(rest, session) for command in list(self._commands))

    def scan_commands(self, cmd_line: Sequence[str], session: SessionLike) -> bool:
        """Run the first sub-command that accepts the words, else try the parent."""
        if not self.enabled:
            return False
        for command in list(self._commands):
            if command.execute(cmd_line, session):
                return True
        return self.parent is not None and self.parent.execute(cmd_line, session)

    def prompt(self) -> str:
        """Text shown in the prompt while this menu is current."""
        return self.name

    def main_help(self, out: TextIO) -> None:
        """Help for every sub-command, then the entry of the parent menu."""
        if not self.enabled:
            return
        for command in self._commands:
            command.help(out)
        if self.parent is not None:
            self.parent.help(out)

    def help(self, out: TextIO) -> None:
        if not self.enabled:
            return
        out.write(f" - {self.name}\n\t{self.description}\n")

    def completions(self, line: str) -> list[str]:
        """Completions from the sub-commands and from the parent menu."""
        result = get_completions(self._commands, line)
        if self.parent is not None:
            result.extend(self.parent.completion_recursive(line))
        return result

    def completion_recursive(self, line: str) -> list[str]:
        if line.startswith(self.name):
            rest = line[len(self.name):].lstrip()
            return [
                f"{self.name} {completion}"
                for command in self._commands
                for completion in command.completion_recursive(rest)
            ]
        return super().completion_recursive(line)