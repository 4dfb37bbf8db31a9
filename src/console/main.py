"""
Command line entrypoint: `generals [--verbose]`

Wires the terminal to the game service and plays a single game.
"""

import argparse
import logging
from typing import Optional, Sequence

from src.console.rendering import render_board
from src.console.stdio import FileSetupSource, StdinInput, StdoutOutput
from src.core.config import Settings
from src.generals.game import Game
from src.services.generals_service import GeneralsService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generals", description="Game of the Generals, two players on one terminal."
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="show diagnostic logging"
    )
    return parser


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.verbose else logging.WARNING,
        format="gg: %(asctime)s %(name)s:%(lineno)d %(message)s",
    )


def build_service(settings: Settings) -> GeneralsService:
    return GeneralsService(
        game=Game.new_game(),
        source=StdinInput(),
        out=StdoutOutput(),
        setup_source=FileSetupSource(settings.sample_setup_path),
        render=render_board,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = Settings.from_args(build_parser().parse_args(argv))
    configure_logging(settings)

    service = build_service(settings)
    service.run()
    logger.debug("closing game.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
