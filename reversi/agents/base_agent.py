"""Base agent interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from reversi.games.othello import GameState, OthelloRules, Position
from reversi.search import CancellationToken, SearchResult


class BaseAgent(ABC):
    """Base class for all move selectors."""

    @abstractmethod
    def act(
        self,
        game: OthelloRules,
        state: GameState,
        cancel_token: Optional[CancellationToken] = None,
    ) -> SearchResult[Position]:
        """Return the chosen move for the side to move, with search statistics."""

    def select_action(self, game: OthelloRules, state: GameState) -> Optional[Position]:
        """Convenience wrapper that routes to :meth:`act` and keeps only the move."""
        return self.act(game, state).move
