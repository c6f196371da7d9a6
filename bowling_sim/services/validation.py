import logging

from ..exceptions import GameError, GameValidationError
from ..models import LAST_FRAME_INDEX, MAX_FRAMES, MAX_PINS, Frame, FrameOutcome, Game

logger = logging.getLogger(__name__)


def _pins_ok(value: object, max_value: int = MAX_PINS) -> bool:
    # Reject booleans explicitly (bool is a subclass of int in Python)
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= max_value


def _fail(error: GameError, index: int, detail: str) -> GameValidationError:
    logger.warning("Game failed validation at frame %d: %s", index + 1, detail)
    return GameValidationError(error, frame_index=index, detail=detail)


def _validate_regular(frame: Frame, index: int) -> None:
    n = index + 1
    if not _pins_ok(frame.second_ball):
        raise _fail(
            GameError.INVALID_PINS,
            index,
            f"Frame #{n} second ball must be between 0 and {MAX_PINS}.",
        )

    pins = frame.first_ball + frame.second_ball
    if frame.type is FrameOutcome.STRIKE:
        if frame.first_ball != MAX_PINS or frame.second_ball != 0:
            raise _fail(
                GameError.INVALID_FRAME_TYPE,
                index,
                f"Frame #{n} is a strike but does not knock down all pins with the first ball.",
            )
    elif frame.type is FrameOutcome.SPARE:
        if pins != MAX_PINS or frame.first_ball == MAX_PINS:
            raise _fail(
                GameError.INVALID_FRAME_TYPE,
                index,
                f"Frame #{n} is a spare but its balls do not clear the rack with two balls.",
            )
    elif frame.type is FrameOutcome.OPEN:
        if pins >= MAX_PINS:
            raise _fail(
                GameError.INVALID_FRAME_TYPE,
                index,
                f"Frame #{n} is open but knocks down {pins} pins.",
            )
    else:
        raise _fail(
            GameError.INVALID_FRAME_TYPE,
            index,
            f"Frame #{n} cannot be of type {frame.type.value}.",
        )


def _validate_last(frame: Frame, index: int) -> None:
    n = index + 1
    if frame.type is not FrameOutcome.LAST_FRAME:
        raise _fail(
            GameError.INVALID_FRAME_TYPE,
            index,
            f"Frame #{n} must be of type {FrameOutcome.LAST_FRAME.value}.",
        )

    if frame.first_ball == MAX_PINS:
        # Strike on the first ball: both bonus balls get a fresh rack.
        if not (_pins_ok(frame.second_ball) and _pins_ok(frame.third_ball)):
            raise _fail(
                GameError.INVALID_PINS,
                index,
                f"Frame #{n} bonus balls must be between 0 and {MAX_PINS}.",
            )
        return

    remaining = MAX_PINS - frame.first_ball
    if not _pins_ok(frame.second_ball, remaining):
        raise _fail(
            GameError.INVALID_PINS,
            index,
            f"Frame #{n} second ball must be between 0 and {remaining}.",
        )

    if frame.first_ball + frame.second_ball == MAX_PINS:
        if not _pins_ok(frame.third_ball):
            raise _fail(
                GameError.INVALID_PINS,
                index,
                f"Frame #{n} third ball must be between 0 and {MAX_PINS}.",
            )
    elif frame.third_ball != 0:
        raise _fail(
            GameError.INVALID_PINS,
            index,
            f"Frame #{n} has no spare or strike, so its third ball must be 0.",
        )


def validate_game(game: Game) -> None:
    """Validate a fully thrown game.

    Frames are checked in order and the first violation is raised as a
    :class:`GameValidationError`. Within a frame the checks run:

    - the frame has been played (``INCOMPLETE_GAME``)
    - the first ball is between 0 and 10 (``INVALID_PINS``)
    - the remaining balls and the frame type agree with the pins
      (``INVALID_PINS`` / ``INVALID_FRAME_TYPE``)

    The game is never modified.
    """

    if len(game) != MAX_FRAMES:
        raise GameValidationError(
            GameError.INCOMPLETE_GAME,
            detail=f"A game must have exactly {MAX_FRAMES} frames.",
        )

    for i, frame in enumerate(game):
        if not frame.is_played:
            raise _fail(
                GameError.INCOMPLETE_GAME, i, f"Frame #{i + 1} has not been played."
            )

        if not _pins_ok(frame.first_ball):
            raise _fail(
                GameError.INVALID_PINS,
                i,
                f"Frame #{i + 1} first ball must be between 0 and {MAX_PINS}.",
            )

        if i < LAST_FRAME_INDEX:
            _validate_regular(frame, i)
        else:
            _validate_last(frame, i)

    return None
