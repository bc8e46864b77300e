"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chesschannel.game.config import EngineConfig
from chesschannel.ui.settings import AppSettings
from chesschannel.ui.styles.theme import THEME_NAMES


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chesschannel")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    parser.add_argument("--theme", default="Wood", choices=THEME_NAMES)
    parser.add_argument(
        "--strict-en-passant",
        action="store_true",
        help="only capture en passant right after the double step",
    )
    parser.add_argument("--no-castling", action="store_true")
    return parser.parse_args(argv)


def main() -> None:
    """Launch the Chess Channel application."""
    args = _parse_args(sys.argv[1:])
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from chesschannel.ui.bootstrap import run_application

    settings = AppSettings(
        board_theme=args.theme,
        engine=EngineConfig(
            strict_en_passant=args.strict_en_passant,
            allow_castling=not args.no_castling,
        ),
    )
    sys.exit(run_application(sys.argv[:1], settings))


if __name__ == "__main__":
    main()
