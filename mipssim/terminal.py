"""Line editing on a raw terminal: keys in, echo out, finished lines returned."""

from __future__ import annotations

from enum import Enum, auto
from typing import TextIO

from mipssim.colors import after_input, before_input


class KeyType(Enum):
    """Kinds of key events read from the keyboard."""

    ASCII = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    BACKSPACE = auto()
    CANC = auto()
    HOME = auto()
    END = auto()
    RET = auto()
    EOF = auto()
    IGNORED = auto()


class Symbol(Enum):
    """What a key press means to the session."""

    NOTHING = auto()
    COMMAND = auto()
    UP = auto()
    DOWN = auto()
    TAB = auto()
    EOF = auto()


class Terminal:
    """Keeps the line being edited and the cursor, echoing edits to out."""

    def __init__(self, out: TextIO) -> None:
        self.out = out
        self._line = ""
        self._position = 0

    @property
    def position(self) -> int:
        """Cursor position inside the line."""
        return self._position

    def reset_cursor(self) -> None:
        """Treat the cursor as being at the start of the screen line."""
        self._position = 0

    def set_line(self, line: str) -> None:
        """Replace the edited line, redrawing it."""
        self.out.write(before_input() + "\b" * self._position + line + after_input())
        self.out.flush()
        shorter = len(self._line) - len(line)
        if shorter > 0:
            self.out.write(" " * shorter + "\b" * shorter)
            self.out.flush()
        self._line = line
        self._position = len(line)

    def get_line(self) -> str:
        """The line being edited."""
        return self._line

    def keypressed(self, key: KeyType, char: str = " ") -> tuple[Symbol, str]:
        """Apply a key press; return its meaning and, for Return, the line."""
        out = self.out
        pos = self._position
        line = self._line

        if key is KeyType.EOF:
            return Symbol.EOF, ""
        if key is KeyType.UP:
            return Symbol.UP, ""
        if key is KeyType.DOWN:
            return Symbol.DOWN, ""
        if key is KeyType.RET:
            out.write("\r\n")
            self._line = ""
            self._position = 0
            return Symbol.COMMAND, line

        if key is KeyType.BACKSPACE:
            if pos > 0:
                pos -= 1
                self._line = line[:pos] + line[pos + 1:]
                self._position = pos
                out.write("\b" + self._line[pos:] + " ")
                out.write("\b" * (len(self._line) - pos + 1))
                out.flush()
        elif key is KeyType.LEFT:
            if pos > 0:
                out.write("\b")
                out.flush()
                self._position = pos - 1
        elif key is KeyType.RIGHT:
            if pos < len(line):
                out.write(before_input() + line[pos] + after_input())
                out.flush()
                self._position = pos + 1
        elif key is KeyType.ASCII:
            if char == "\t":
                return Symbol.TAB, ""
            out.write(before_input() + char + line[pos:] + after_input())
            out.write("\b" * (len(line) - pos))
            out.flush()
            self._line = line[:pos] + char + line[pos:]
            self._position = pos + 1
        elif key is KeyType.CANC:
            if pos != len(line):
                out.write(line[pos + 1:] + " " + "\b" * (len(line) - pos))
                out.flush()
                self._line = line[:pos] + line[pos + 1:]
        elif key is KeyType.END:
            out.write(before_input() + line[pos:] + after_input())
            out.flush()
            self._position = len(line)
        elif key is KeyType.HOME:
            out.write("\b" * pos)
            out.flush()
            self._position = 0

        return Symbol.NOTHING, ""