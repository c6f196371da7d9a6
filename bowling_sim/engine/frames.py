"""Throwing frames: decides how many balls a frame takes and its outcome."""
from __future__ import annotations

import logging

from ..models import (
    LAST_FRAME_INDEX,
    MAX_FRAMES,
    MAX_PINS,
    STRIKE_SCORE,
    Frame,
    FrameOutcome,
    Game,
)
from .pins import PinGenerator

logger = logging.getLogger(__name__)


def _throw_regular(frame: Frame, generator: PinGenerator) -> None:
    frame.first_ball = generator.ball(MAX_PINS)
    if frame.first_ball == STRIKE_SCORE:
        frame.second_ball = 0
        frame.type = FrameOutcome.STRIKE
        return

    remaining = MAX_PINS - frame.first_ball
    frame.second_ball = generator.ball(remaining)
    if frame.second_ball == remaining:
        frame.type = FrameOutcome.SPARE
    else:
        frame.type = FrameOutcome.OPEN


def _throw_last(frame: Frame, generator: PinGenerator) -> None:
    frame.type = FrameOutcome.LAST_FRAME
    frame.first_ball = generator.ball(MAX_PINS)
    if frame.first_ball == STRIKE_SCORE:
        frame.second_ball = generator.ball(MAX_PINS)
        if frame.second_ball == STRIKE_SCORE:
            # fresh rack for the third ball
            frame.third_ball = generator.ball(MAX_PINS)
        else:
            frame.third_ball = generator.ball(MAX_PINS - frame.second_ball)
    else:
        # No bonus ball here, even when the first two balls make a spare.
        frame.second_ball = generator.ball(MAX_PINS - frame.first_ball)
        frame.third_ball = 0


def throw_frame(game: Game, frame_index: int, generator: PinGenerator) -> None:
    """Throw the frame at ``frame_index`` unless it has already been played."""
    if not 0 <= frame_index < MAX_FRAMES:
        raise IndexError(f"frame index {frame_index} out of range")

    frame = game[frame_index]
    if frame.is_played:
        return

    if frame_index == LAST_FRAME_INDEX:
        _throw_last(frame, generator)
    else:
        _throw_regular(frame, generator)
    logger.debug(
        "Frame %d thrown: %s (%d, %d, %d)",
        frame_index + 1,
        frame.type.value,
        frame.first_ball,
        frame.second_ball,
        frame.third_ball,
    )


def play_game(game: Game, generator: PinGenerator) -> Game:
    for i in range(MAX_FRAMES):
        throw_frame(game, i, generator)
    return game
