"""Terminal and file implementations of the input / output protocols."""

from pathlib import Path

from src.core.exceptions import SetupSourceError
from src.generals.commands import INVALID_SENTINEL


class StdinInput:
    """Read commands typed in the terminal."""

    def read(self) -> str:
        try:
            return input().strip()
        except (EOFError, OSError):
            return INVALID_SENTINEL


class StdoutOutput:
    def write(self, text: str) -> None:
        print(text, end="", flush=True)


class FileSetupSource:
    """Lines of a setup ("gggn") file on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def read_lines(self) -> list[str]:
        try:
            return self.path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as error:
            raise SetupSourceError(
                f"Setup file {str(self.path)!r} is unavailable: {error}"
            ) from error
