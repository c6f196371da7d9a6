#!/usr/bin/env python3
"""Simulate, validate and score a game of ten-pin bowling.

Exit codes: 0 on success, 1 when the game fails validation, 2 on bad input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import log_level_from_env, resolve_seed
from .engine import PinGenerator, play_game
from .exceptions import GameValidationError
from .models import Game, new_game
from .report import report_game_scores
from .schemas import game_from_payload, game_summary
from .scoring import calculate_game_scores, game_total
from .services import validate_game
from .utils.sentry import init_sentry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_GAME = 1
EXIT_USAGE = 2


def score_game(game: Game) -> Game:
    """Validate then score ``game`` in place."""
    validate_game(game)
    calculate_game_scores(game)
    logger.info("Game scored: total=%d", game_total(game))
    return game


def run_game(
    seed: Optional[int] = None, *, generator: Optional[PinGenerator] = None
) -> Game:
    """Play a fresh game and return it validated and scored."""
    if generator is None:
        generator = PinGenerator(resolve_seed(seed))
    logger.info("Playing game with seed %s", generator.seed)
    game = new_game()
    play_game(game, generator)
    return score_game(game)


def load_game(path: Path) -> Game:
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    return game_from_payload(data)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bowling-sim", description="Simulate and score a game of bowling."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--seed", type=int, help="Random seed (defaults to BOWLING_SEED or the time)")
    source.add_argument(
        "--input",
        type=Path,
        help="Score a game stored as JSON instead of simulating one",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the scored game as JSON"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=log_level_from_env(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_sentry()

    try:
        if args.input is not None:
            game = score_game(load_game(args.input))
        else:
            game = run_game(args.seed)
    except GameValidationError as exc:
        print(f"Error: {exc.code}", file=sys.stderr)
        return EXIT_INVALID_GAME
    except (OSError, ValueError) as exc:
        logger.error("Could not load game from %s: %s", args.input, exc)
        print(f"Error: could not load {args.input}", file=sys.stderr)
        return EXIT_USAGE

    if args.json:
        print(game_summary(game).model_dump_json(indent=2))
    else:
        report_game_scores(game)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
