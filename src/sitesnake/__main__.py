from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import config
from .game import run


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="sitesnake", add_help=True)
    parser.add_argument(
        "--difficulty",
        choices=tuple(config.DIFFICULTIES),
        default=config.DEFAULT_DIFFICULTY,
        help="Starting difficulty (base tick interval), can be changed between games with 1/2/3.",
    )
    parser.add_argument("--no-grid", action="store_true", help="Do not draw grid lines.")
    parser.add_argument(
        "--highscore-file",
        type=Path,
        default=config.HIGHSCORE_FILE,
        help="Where the high score is kept (default: $SITESNAKE_HIGHSCORE_FILE or ~/.local/share/sitesnake).",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    final_score = run(args.difficulty, args.highscore_file, show_grid=not args.no_grid)
    if final_score is not None:
        print("Game Over! Score:", final_score)


if __name__ == "__main__":
    main()
