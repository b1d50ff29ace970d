"""Abstract state value function for search algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from reversi.games.turn_based_game import TurnBasedGame

StateT = TypeVar("StateT")


class StateValueFn(Generic[StateT], ABC):
    """
    Static evaluator used at the search horizon.

    Values are absolute for ``root_player``: the same state scores the same
    no matter whose turn it is.
    """

    @abstractmethod
    def evaluate(self, game: TurnBasedGame[StateT, Any], state: StateT, root_player: int) -> float:
        """
        Higher is better for ``root_player``.
        """
        ...
