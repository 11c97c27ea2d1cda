"""
main.py — Entry point.

Run with:
    python main.py [--seed N] [--no-save] [--log-level LEVEL]

Requires:
    pip install pygame
"""

import argparse
import logging
import random

from classic_snake.controller import GameController
from classic_snake.model import GameModel
from classic_snake.storage import HighScoreStore, MemoryHighScoreStore


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classic grid snake.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for apple placement (repeatable games)",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Keep the best score in memory only",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    store = MemoryHighScoreStore() if args.no_save else HighScoreStore()
    model = GameModel(store=store, rng=random.Random(args.seed))
    GameController(model).run()


if __name__ == "__main__":
    main()
