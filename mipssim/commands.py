"""Commands of the interactive shell and handles to manage them."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Protocol, TextIO

from mipssim.conversion import BadConversion, from_string

_C_TYPES = frozenset(
    {
        "char", "unsigned char", "signed char", "short", "unsigned short",
        "int", "unsigned int", "long", "unsigned long", "long long",
        "unsigned long long", "float", "double", "long double", "bool", "string",
    }
)

_PY_TYPES: dict[Any, str] = {
    str: "<string>",
    int: "<int>",
    float: "<double>",
    bool: "<bool>",
    list: "<list of strings>",
}


class SessionLike(Protocol):
    """What a command needs from the session running it."""

    out: TextIO


def type_name(kind: Any) -> str:
    """Placeholder such as '<int>' describing a parameter kind, or ''."""
    if isinstance(kind, str):
        if kind in _C_TYPES:
            return f"<{kind}>"
        if kind == "list of strings":
            return "<list of strings>"
        return ""
    try:
        return _PY_TYPES.get(kind, "")
    except TypeError:
        return ""


class Command(ABC):
    """A named command that can be enabled or disabled."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.enabled = True

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    @abstractmethod
    def execute(self, cmd_line: Sequence[str], session: SessionLike) -> bool:
        """Run the command if the words name it; return whether it ran."""

    @abstractmethod
    def help(self, out: TextIO) -> None:
        """Write a help entry."""

    def completion_recursive(self, line: str) -> list[str]:
        """Completions of the line that this command offers."""
        if not self.enabled:
            return []
        return [self.name] if self.name.startswith(line) else []


def get_completions(commands: Iterable[Command], line: str) -> list[str]:
    """Completions offered by every command, in order."""
    return [c for command in commands for c in command.completion_recursive(line)]


def _write_help(
    out: TextIO, name: str, description: str, kinds: Sequence[Any], param_desc: Sequence[str]
) -> None:
    out.write(f" - {name}")
    if not param_desc:
        for kind in kinds:
            out.write(" " + type_name(kind))
    for desc in param_desc:
        out.write(f" <{desc}>")
    out.write(f"\n\t{description}\n")


class FunctionCommand(Command):
    """A command with a fixed number of typed parameters.

    The function is called with the session output followed by the converted
    arguments.
    """

    def __init__(
        self,
        name: str,
        func: Callable[..., Any],
        param_types: Sequence[Any] = (),
        description: str = "",
        param_desc: Sequence[str] = (),
    ) -> None:
        super().__init__(name)
        self.func = func
        self.param_types = tuple(param_types)
        self.description = description
        self.param_desc = tuple(param_desc)

    def execute(self, cmd_line: Sequence[str], session: SessionLike) -> bool:
        if not self.enabled:
            return False
        if len(cmd_line) != len(self.param_types) + 1:
            return False
        if cmd_line[0] != self.name:
            return False
        try:
            args = [
                from_string(word, kind)
                for word, kind in zip(cmd_line[1:], self.param_types)
            ]
        except BadConversion:
            return False
        self.func(session.out, *args)
        return True

    def help(self, out: TextIO) -> None:
        if not self.enabled:
            return
        _write_help(out, self.name, self.description, self.param_types, self.param_desc)


class FreeformCommand(Command):
    """A command receiving all following words as a list of strings."""

    def __init__(
        self,
        name: str,
        func: Callable[[TextIO, list[str]], Any],
        description: str = "",
        param_desc: Sequence[str] = (),
    ) -> None:
        super().__init__(name)
        self.func = func
        self.description = description
        self.param_desc = tuple(param_desc)

    def execute(self, cmd_line: Sequence[str], session: SessionLike) -> bool:
        if not self.enabled:
            return False
        if not cmd_line:
            raise ValueError("empty command line")
        if cmd_line[0] != self.name:
            return False
        self.func(session.out, list(cmd_line[1:]))
        return True

    def help(self, out: TextIO) -> None:
        if not self.enabled:
            return
        _write_help(out, self.name, self.description, ["list of strings"], self.param_desc)


class CommandHandle:
    """Lets the code that inserted a command enable, disable or remove it later."""

    def __init__(
        self, command: Command | None = None, commands: list[Command] | None = None
    ) -> None:
        self._command = weakref.ref(command) if command is not None else None
        self._commands = commands

    def _target(self) -> Command | None:
        return self._command() if self._command is not None else None

    def enable(self) -> None:
        command = self._target()
        if command is not None:
            command.enable()

    def disable(self) -> None:
        command = self._target()
        if command is not None:
            command.disable()

    def remove(self) -> None:
        command = self._target()
        if command is None or self._commands is None:
            return
        for position, item in enumerate(self._commands):
            if item is command:
                del self._commands[position]
                return