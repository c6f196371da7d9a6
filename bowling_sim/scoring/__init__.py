"""Scoring engines."""

from . import ten_pin
from .ten_pin import calculate_game_scores, game_total, running_totals

__all__ = [
    "ten_pin",
    "calculate_game_scores",
    "game_total",
    "running_totals",
]
