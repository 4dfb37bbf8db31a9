"""
Runtime settings.

The only thing a player can configure is the verbosity of the diagnostic logging (the --verbose flag).
"""

from argparse import Namespace
from dataclasses import dataclass
from pathlib import Path
from typing import Self

# Setup file replayed by the `loadsample` command. Ships with the package.
SAMPLE_SETUP_PATH = Path(__file__).resolve().parent.parent / "console" / "sample.gggn"


@dataclass(frozen=True)
class Settings:
    verbose: bool = False
    sample_setup_path: Path = SAMPLE_SETUP_PATH

    @classmethod
    def from_args(cls, args: Namespace) -> Self:
        return cls(verbose=args.verbose)
