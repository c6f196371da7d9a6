"""Game simulation: random pin counts and frame throwing."""

from .frames import play_game, throw_frame
from .pins import PinGenerator, generate_ball

__all__ = [
    "PinGenerator",
    "generate_ball",
    "play_game",
    "throw_frame",
]
