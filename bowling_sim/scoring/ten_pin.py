"""Ten-pin bowling scoring engine."""
from typing import List

from ..exceptions import GameError, GameValidationError
from ..models import LAST_FRAME_INDEX, STRIKE_SCORE, FrameOutcome, Game


def _frame_score(game: Game, i: int) -> int:
    f = game[i]
    if i == LAST_FRAME_INDEX:
        return f.first_ball + f.second_ball + f.third_ball
    if f.type is FrameOutcome.STRIKE:
        nxt = game[i + 1]
        if i == LAST_FRAME_INDEX - 1:  # the last frame holds both bonus balls
            return STRIKE_SCORE + nxt.first_ball + nxt.second_ball
        return STRIKE_SCORE + nxt.first_ball + game[i + 2].first_ball
    if f.type is FrameOutcome.SPARE:
        return STRIKE_SCORE + game[i + 1].first_ball
    if f.type is FrameOutcome.OPEN:
        return f.first_ball + f.second_ball
    raise GameValidationError(
        GameError.INVALID_FRAME_TYPE,
        frame_index=i,
        detail=f"Frame #{i + 1} of type {f.type.value} cannot be scored.",
    )


def calculate_game_scores(game: Game) -> None:
    """Write each frame's own score in place.

    The game must already have passed :func:`validate_game`.
    """
    for i, frame in enumerate(game):
        frame.score = _frame_score(game, i)


def running_totals(game: Game) -> List[int]:
    totals = []
    total = 0
    for frame in game:
        total += frame.score
        totals.append(total)
    return totals


def game_total(game: Game) -> int:
    return sum(frame.score for frame in game)
