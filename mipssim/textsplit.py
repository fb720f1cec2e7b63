"""Split a command line into words, honouring quotes and backslash escapes."""

from __future__ import annotations

from enum import Enum, auto

_BLANKS = frozenset(" \t\n")
_QUOTES = frozenset("\"'")


class _State(Enum):
    SPACE = auto()
    WORD = auto()
    SENTENCE = auto()
    ESCAPE = auto()


def split(text: str) -> list[str]:
    """Split on blanks; quoted parts stay whole and empty words are dropped.

    A backslash keeps a following quote or backslash literally; before any
    other character the backslash itself is kept.
    """
    parts: list[str] = []
    state = _State.SPACE
    resume = _State.SPACE
    quote = '"'

    for char in text:
        if state is _State.SPACE:
            if char in _BLANKS:
                continue
            if char in _QUOTES:
                state, quote = _State.SENTENCE, char
                parts.append("")
            elif char == "\\":
                resume, state = _State.WORD, _State.ESCAPE
                parts.append("")
            else:
                state = _State.WORD
                parts.append(char)
        elif state is _State.WORD:
            if char in _BLANKS:
                state = _State.SPACE
            elif char in _QUOTES:
                state, quote = _State.SENTENCE, char
                parts.append("")
            elif char == "\\":
                resume, state = state, _State.ESCAPE
            else:
                parts[-1] += char
        elif state is _State.SENTENCE:
            if char in _QUOTES:
                if char == quote:
                    state = _State.SPACE
                else:
                    parts[-1] += char
            elif char == "\\":
                resume, state = state, _State.ESCAPE
            else:
                parts[-1] += char
        else:
            if char not in _QUOTES and char != "\\":
                parts[-1] += "\\"
            parts[-1] += char
            state = resume

    return [part for part in parts if part]