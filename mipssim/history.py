"""Command history of one interactive session, browsable with the arrow keys."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum, auto
from typing import TextIO


class _Mode(Enum):
    INSERTING = auto()
    BROWSING = auto()


class History:
    """Bounded history; position 0 of the buffer holds the newest line."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._buffer: deque[str] = deque(maxlen=max_size)
        self._current = 0
        self._commands = 0
        self._mode = _Mode.INSERTING

    def _insert(self, item: str) -> None:
        self._buffer.appendleft(item)

    def new_command(self, item: str) -> None:
        """Record an issued command.

        While browsing, the command replaces the line being edited; otherwise
        it is added unless it repeats the newest entry.
        """
        self._commands += 1
        self._current = 0
        if self._mode is _Mode.BROWSING:
            if len(self._buffer) > 1 and self._buffer[1] == item:
                self._buffer.popleft()
            elif self._buffer:
                self._buffer[0] = item
        elif not self._buffer or self._buffer[0] != item:
            self._insert(item)
        self._mode = _Mode.INSERTING

    def previous(self, line: str) -> str:
        """Step back to an older entry, keeping the edited line."""
        if self._mode is _Mode.INSERTING:
            self._insert(line)
            self._mode = _Mode.BROWSING
            self._current = 1 if len(self._buffer) > 1 else 0
        else:
            self._buffer[self._current] = line
            if self._current != len(self._buffer) - 1:
                self._current += 1
        return self._buffer[self._current]

    def next(self) -> str:
        """Step forward to a newer entry, or return an empty line at the end."""
        if not self._buffer or self._current == 0:
            return ""
        self._current -= 1
        return self._buffer[self._current]

    def show(self, out: TextIO) -> None:
        """Write every entry, newest first, framed by blank lines."""
        out.write("\n")
        for item in self._buffer:
            out.write(item + "\n")
        out.write("\n")
        out.flush()

    def load_commands(self, commands: Iterable[str]) -> None:
        """Preload entries given oldest first."""
        for command in commands:
            self._insert(command)

    def get_commands(self) -> list[str]:
        """Commands issued in this session, oldest first."""
        entries = list(self._buffer)
        if self._mode is _Mode.BROWSING:
            entries = entries[1:]
        count = min(self._commands, len(entries))
        return list(reversed(entries[:count]))