"""Protocols for the outside world (can implement later for other terminals / GUIs / files etc.)"""

from typing import Protocol


class CommandSource(Protocol):
    """Where the player's commands come from."""

    def read(self) -> str:
        """Next line of input. Returns the INVALID_SENTINEL when reading failed."""
        ...


class OutputSink(Protocol):
    """Where text for the player goes."""

    def write(self, text: str) -> None: ...


class SetupSource(Protocol):
    """Supplies the lines of a setup ("gggn") file."""

    def read_lines(self) -> list[str]:
        """All lines of the setup. Raises SetupSourceError when unavailable."""
        ...
