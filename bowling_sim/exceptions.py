from __future__ import annotations

from enum import Enum
from typing import Optional


class GameError(str, Enum):
    INCOMPLETE_GAME = "incomplete_game"
    INVALID_PINS = "invalid_pins"
    INVALID_FRAME_TYPE = "invalid_frame_type"

    @property
    def code(self) -> str:
        return self.value

    @property
    def title(self) -> str:
        return _TITLES[self]


_TITLES = {
    GameError.INCOMPLETE_GAME: "Incomplete game",
    GameError.INVALID_PINS: "Invalid pins",
    GameError.INVALID_FRAME_TYPE: "Invalid frame type",
}


class BowlingError(Exception):
    """Base class for bowling domain exceptions."""


class GameValidationError(BowlingError):
    """Raised when a game's frames break the rules of bowling.

    ``error`` identifies the kind of violation, ``frame_index`` the zero-based
    frame it was found in (``None`` when it applies to the game as a whole).
    """

    def __init__(
        self,
        error: GameError,
        *,
        frame_index: Optional[int] = None,
        detail: str | None = None,
    ) -> None:
        self.error = error
        self.frame_index = frame_index
        self.detail = detail or error.title
        super().__init__(self.detail)

    @property
    def code(self) -> str:
        return self.error.code
