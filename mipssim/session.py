"""Interactive shell sessions: command dispatch, history, completion and key handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import ClassVar, TextIO

from mipssim.colors import after_prompt, before_prompt
from mipssim.history import History
from mipssim.history_storage import HistoryStorage, VolatileHistoryStorage
from mipssim.menu import Menu
from mipssim.prefix import common_prefix
from mipssim.terminal import KeyType, Symbol, Terminal
from mipssim.textsplit import split

ExitAction = Callable[[TextIO], object]
ExceptionHandler = Callable[[TextIO, str, Exception], object]


class Cli:
    """The shell: a root menu, shared history storage and global actions."""

    _streams: ClassVar[list[TextIO]] = []

    def __init__(
        self, root_menu: Menu, history_storage: HistoryStorage | None = None
    ) -> None:
        self.root_menu = root_menu
        self.history_storage = (
            history_storage if history_storage is not None else VolatileHistoryStorage()
        )
        self._exit_action: ExitAction | None = None
        self._exception_handler: ExceptionHandler | None = None

    def set_exit_action(self, action: ExitAction) -> None:
        """Call action with the session output whenever a session exits."""
        self._exit_action = action

    def set_exception_handler(self, handler: ExceptionHandler) -> None:
        """Call handler(out, command, error) when a command raises."""
        self._exception_handler = handler

    @classmethod
    def broadcast(cls, text: str) -> None:
        """Write text to the output of every open session."""
        for stream in list(cls._streams):
            stream.write(text)

    @classmethod
    def _register(cls, out: TextIO) -> None:
        cls._streams.append(out)

    @classmethod
    def _unregister(cls, out: TextIO) -> None:
        cls._streams[:] = [stream for stream in cls._streams if stream is not out]

    def _on_exit(self, out: TextIO) -> None:
        if self._exit_action is not None:
            self._exit_action(out)

    def _on_exception(self, out: TextIO, command: str, error: Exception) -> None:
        if self._exception_handler is not None:
            self._exception_handler(out, command, error)
        else:
            out.write(f"{error}\n")

    def _store_commands(self, commands: Iterable[str]) -> None:
        self.history_storage.store(commands)

    def _commands(self) -> list[str]:
        return self.history_storage.commands()


class CliSession:
    """One user's conversation with the shell, writing to its own output."""

    def __init__(self, cli: Cli, out: TextIO, history_size: int = 100) -> None:
        self.cli = cli
        self.out = out
        self.current: Menu = cli.root_menu
        self._history = History(history_size)
        self._history.load_commands(cli._commands())
        self._exit_action: ExitAction = lambda _out: None
        self._closed = False
        Cli._register(out)

        self._global_menu = Menu()
        self._global_menu.insert("help", lambda _out: self.help(), "This help message")
        self._global_menu.insert("exit", lambda _out: self.exit(), "Quit the session")

    def __enter__(self) -> CliSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def feed(self, line: str) -> None:
        """Run one command line."""
        words = split(line)
        if not words:
            return
        self._history.new_command(line)
        try:
            found = self._global_menu.scan_commands(words, self)
            if not found:
                found = self.current.scan_commands(words, self)
            if not found:
                self.out.write(f"wrong command: {line}\n")
        except Exception as error:  # noqa: BLE001 - reported to the user
            self.cli._on_exception(self.out, line, error)

    def prompt(self) -> None:
        """Write the prompt of the current menu."""
        self.out.write(before_prompt() + self.current.prompt() + after_prompt() + "> ")
        self.out.flush()

    def set_current(self, menu: Menu) -> None:
        """Make menu the current one."""
        self.current = menu

    def help(self) -> None:
        """Write the commands available in the current menu."""
        self.out.write("Commands available:\n")
        self._global_menu.main_help(self.out)
        self.current.main_help(self.out)

    def exit(self) -> None:
        """Run the exit actions and hand this session's commands to the storage."""
        self._exit_action(self.out)
        self.cli._on_exit(self.out)
        self.cli._store_commands(self._history.get_commands())

    def set_exit_action(self, action: ExitAction) -> None:
        """Call action with the output when this session exits."""
        self._exit_action = action

    def show_history(self) -> None:
        """Write the session history."""
        self._history.show(self.out)

    def previous_command(self, line: str) -> str:
        """Older history entry, keeping the line being edited."""
        return self._history.previous(line)

    def next_command(self) -> str:
        """Newer history entry."""
        return self._history.next()

    def completions(self, line: str) -> list[str]:
        """Sorted, distinct completions of the line."""
        line = line.lstrip()
        found = self._global_menu.completions(line) + self.current.completions(line)
        return sorted(set(found))

    def close(self) -> None:
        """Stop receiving broadcasts."""
        if not self._closed:
            Cli._unregister(self.out)
            self._closed = True


class InputHandler:
    """Turns key presses into line edits, commands, history moves and completion."""

    def __init__(self, session: CliSession) -> None:
        self.session = session
        self.terminal = Terminal(session.out)

    def keypressed(self, key: KeyType, char: str = " ") -> None:
        """Handle one key press."""
        symbol, text = self.terminal.keypressed(key, char)
        session = self.session
        terminal = self.terminal

        if symbol is Symbol.EOF:
            session.exit()
        elif symbol is Symbol.COMMAND:
            session.feed(text)
            session.prompt()
        elif symbol is Symbol.DOWN:
            terminal.set_line(session.next_command())
        elif symbol is Symbol.UP:
            terminal.set_line(session.previous_command(terminal.get_line()))
        elif symbol is Symbol.TAB:
            self._complete()

    def _complete(self) -> None:
        session = self.session
        terminal = self.terminal
        line = terminal.get_line()
        found = session.completions(line)
        if not found:
            return
        if len(found) == 1:
            terminal.set_line(found[0] + " ")
            return
        prefix = common_prefix(found)
        if len(prefix) > len(line):
            terminal.set_line(prefix)
            return
        session.out.write("\n")
        session.out.write("".join("\t" + item for item in found) + "\n")
        session.prompt()
        terminal.reset_cursor()
        terminal.set_line(line)