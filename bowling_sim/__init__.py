"""Ten-pin bowling game simulator and scoring engine."""

from .exceptions import BowlingError, GameError, GameValidationError
from .models import Frame, FrameOutcome, Game, new_game

__all__ = [
    "BowlingError",
    "Frame",
    "FrameOutcome",
    "Game",
    "GameError",
    "GameValidationError",
    "new_game",
]
