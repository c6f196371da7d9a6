"""Scorecard rendering.

Example output::

    Frame  1: 10  -  X = 30 =  30
    Frame  2: 10  -  X = 20 =  50
    Frame  3:  7  2  - =  9 =  59
    Frame  4:  8  2  / = 20 =  79
    Frame  5: 10  -  X = 20 =  99
"""
from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .exceptions import GameError, GameValidationError
from .models import LAST_FRAME_INDEX, Frame, FrameOutcome, Game
from .scoring import running_totals


def format_frame(frame: Frame, frame_index: int, subtotal: int) -> str:
    n = frame_index + 1
    if frame_index == LAST_FRAME_INDEX:
        return (
            f"Frame {n:2d}: {frame.first_ball:2d} {frame.second_ball:2d} "
            f"{frame.third_ball:2d} = {frame.score:2d} = {subtotal:3d}"
        )
    if frame.type is FrameOutcome.STRIKE:
        balls = f"{frame.first_ball:2d}  -  X"
    elif frame.type is FrameOutcome.SPARE:
        balls = f"{frame.first_ball:2d} {frame.second_ball:2d}  /"
    elif frame.type is FrameOutcome.OPEN:
        balls = f"{frame.first_ball:2d} {frame.second_ball:2d}  -"
    else:
        raise GameValidationError(
            GameError.INVALID_FRAME_TYPE,
            frame_index=frame_index,
            detail=f"Frame #{n} of type {frame.type.value} cannot be reported.",
        )
    return f"Frame {n:2d}: {balls} = {frame.score:2d} = {subtotal:3d}"


def render_scorecard(game: Game) -> List[str]:
    return [
        format_frame(frame, i, subtotal)
        for i, (frame, subtotal) in enumerate(zip(game, running_totals(game)))
    ]


def report_game_scores(game: Game, stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout
    for line in render_scorecard(game):
        out.write(line + "\n")
