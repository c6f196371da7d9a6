"""Rule checks over a thrown game (pure helpers, no I/O)."""

from .validation import validate_game
from ..exceptions import GameError, GameValidationError

__all__ = [
    "validate_game",
    "GameError",
    "GameValidationError",
]
