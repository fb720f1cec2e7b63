"""Storage for the command history shared between sessions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable


class HistoryStorage(ABC):
    """Where the commands of finished sessions are kept."""

    @abstractmethod
    def store(self, commands: Iterable[str]) -> None:
        """Append commands, oldest first."""

    @abstractmethod
    def commands(self) -> list[str]:
        """All stored commands, oldest first."""

    @abstractmethod
    def clear(self) -> None:
        """Forget every stored command."""


class VolatileHistoryStorage(HistoryStorage):
    """In-memory storage keeping at most the newest max_size commands."""

    def __init__(self, max_size: int = 1000) -> None:
        self.max_size = max_size
        self._commands: deque[str] = deque(maxlen=max_size)

    def store(self, commands: Iterable[str]) -> None:
        self._commands.extend(commands)

    def commands(self) -> list[str]:
        return list(self._commands)

    def clear(self) -> None:
        self._commands.clear()