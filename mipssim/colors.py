"""Terminal colour profile for prompts and user input."""

from __future__ import annotations

from enum import IntEnum


class _Sgr(IntEnum):
    RESET = 0
    BOLD = 1
    FG_GREEN = 32
    FG_BRIGHT_GRAY = 97


class _Profile:
    def __init__(self) -> None:
        self.enabled = False


_profile = _Profile()


def _sgr(*codes: _Sgr) -> str:
    return "".join(f"\033[{int(code)}m" for code in codes)


def set_color() -> None:
    """Turn coloured prompts and input on."""
    _profile.enabled = True


def set_no_color() -> None:
    """Turn coloured prompts and input off."""
    _profile.enabled = False


def color_enabled() -> bool:
    """Whether colouring is on."""
    return _profile.enabled


def before_prompt() -> str:
    """Escape sequence written before the prompt."""
    return _sgr(_Sgr.FG_GREEN, _Sgr.BOLD) if _profile.enabled else ""


def after_prompt() -> str:
    """Escape sequence written after the prompt."""
    return _sgr(_Sgr.RESET) if _profile.enabled else ""


def before_input() -> str:
    """Escape sequence written before echoed input."""
    return _sgr(_Sgr.FG_BRIGHT_GRAY) if _profile.enabled else ""


def after_input() -> str:
    """Escape sequence written after echoed input."""
    return _sgr(_Sgr.RESET) if _profile.enabled else ""