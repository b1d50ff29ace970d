"""Utility modules."""

from .match import play_game, play_match
from .serialization import load_game, save_game, state_from_dict, state_to_dict

__all__ = [
    "play_game",
    "play_match",
    "load_game",
    "save_game",
    "state_from_dict",
    "state_to_dict",
]
