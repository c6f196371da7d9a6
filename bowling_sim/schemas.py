from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import MAX_FRAMES, Frame, FrameOutcome, Game
from .scoring import game_total, running_totals


class FrameIn(BaseModel):
    type: FrameOutcome
    first_ball: int = 0
    second_ball: int = 0
    third_ball: int = 0

    model_config = ConfigDict(extra="forbid")

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("first_ball", "second_ball", "third_ball", mode="before")
    @classmethod
    def _reject_non_int(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("balls must be integers")
        return value


class GameIn(BaseModel):
    frames: List[FrameIn] = Field(..., min_length=MAX_FRAMES, max_length=MAX_FRAMES)

    model_config = ConfigDict(extra="forbid")


class FrameOut(BaseModel):
    frame: int
    type: FrameOutcome
    first_ball: int
    second_ball: int
    third_ball: int
    score: int
    running_total: int


class GameOut(BaseModel):
    frames: List[FrameOut]
    total: int


def game_from_payload(data: Dict[str, Any]) -> Game:
    """Build a :class:`Game` from JSON-like data.

    Only the shape is checked here; pin ranges are left to ``validate_game``.
    """
    parsed = GameIn.model_validate(data)
    return Game(
        frames=[
            Frame(
                type=f.type,
                first_ball=f.first_ball,
                second_ball=f.second_ball,
                third_ball=f.third_ball,
            )
            for f in parsed.frames
        ]
    )


def game_summary(game: Game) -> GameOut:
    totals = running_totals(game)
    return GameOut(
        frames=[
            FrameOut(
                frame=i + 1,
                type=f.type,
                first_ball=f.first_ball,
                second_ball=f.second_ball,
                third_ball=f.third_ball,
                score=f.score,
                running_total=totals[i],
            )
            for i, f in enumerate(game)
        ],
        total=game_total(game),
    )
