from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar

S = TypeVar("S")  # state type
A = TypeVar("A")  # action type


class TurnBasedGame(ABC, Generic[S, A]):
    """
    Common interface for a deterministic two-player game with perfect information.
    Pure rules only: states are immutable values and every transition returns a new one.
    """

    @abstractmethod
    def legal_actions(self, state: S) -> Sequence[A]:
        """All legal actions for the side to move, in a fixed order."""

    @abstractmethod
    def apply_action(self, state: S, action: A) -> Optional[S]:
        """Return the state after ``action``, or None when the action is illegal."""

    @abstractmethod
    def current_player(self, state: S) -> int:
        """
        Token of the side to move: 1 for the first player, -1 for the second.
        """

    @abstractmethod
    def is_terminal(self, state: S) -> bool:
        """Whether the game is over."""

    @abstractmethod
    def winner(self, state: S) -> Optional[int]:
        """
        Who won:

        * 1  -- the player with token +1
        * -1 -- the player with token -1
        * 0  -- draw
        * None -- game not finished yet
        """

    @abstractmethod
    def pass_turn(self, state: S) -> S:
        """State after the side to move passes because it has no legal action."""
