"""Frame and game data model shared by the engine, validator and scorer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List

MAX_FRAMES = 10
MAX_PINS = 10
STRIKE_SCORE = 10
LAST_FRAME_INDEX = MAX_FRAMES - 1


class FrameOutcome(str, Enum):
    STRIKE = "strike"  # 10 plus the next two balls
    SPARE = "spare"  # 10 plus the next ball
    OPEN = "open"
    LAST_FRAME = "last_frame"  # tenth frame, up to three balls
    UNDEFINED = "undefined"  # not thrown yet


@dataclass
class Frame:
    type: FrameOutcome = FrameOutcome.UNDEFINED
    first_ball: int = 0
    second_ball: int = 0
    third_ball: int = 0
    score: int = 0

    def __post_init__(self) -> None:
        self.type = FrameOutcome(self.type)

    @property
    def is_played(self) -> bool:
        return self.type is not FrameOutcome.UNDEFINED


@dataclass
class Game:
    """Exactly ten frames; index 9 is the last frame."""

    frames: List[Frame] = field(
        default_factory=lambda: [Frame() for _ in range(MAX_FRAMES)]
    )

    def __post_init__(self) -> None:
        if len(self.frames) != MAX_FRAMES:
            raise ValueError(f"a game has exactly {MAX_FRAMES} frames")

    def __getitem__(self, index: int) -> Frame:
        return self.frames[index]

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)

    def __len__(self) -> int:
        return len(self.frames)


def new_game() -> Game:
    """Return a game with every frame ``UNDEFINED`` and zero scores."""
    return Game()
