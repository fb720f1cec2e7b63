"""Interactive command-line toolkit: menus, typed commands, history, completion and line editing."""

__version__ = "0.1.0"

__all__ = [
    "conversion",
    "colors",
    "prefix",
    "history_storage",
    "history",
    "textsplit",
    "commands",
    "menu",
    "terminal",
    "session",
]