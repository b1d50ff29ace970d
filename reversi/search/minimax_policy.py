"""Minimax search policy with alpha-beta pruning."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, TypeVar

from reversi.games.turn_based_game import TurnBasedGame
from .action_policy import ActionPolicy
from .cancellation import CancellationToken
from .value_fn import StateValueFn

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT")
ActionT = TypeVar("ActionT")


class SearchCancelled(Exception):
    """Raised inside the recursion when the cancellation token fires."""


@dataclass
class MinimaxConfig:
    depth: int = 3
    use_alpha_beta: bool = True
    iterative_deepening: bool = False
    time_limit_s: Optional[float] = None


@dataclass
class SearchResult(Generic[ActionT]):
    """
    Outcome of one search call.

    ``depth`` is the deepest fully completed iteration (0 when nothing was
    searched). ``cancelled`` is True when the search was stopped before the
    requested depth finished, by an explicit cancel or by the time budget.
    """

    move: Optional[ActionT]
    score: float
    nodes: int
    depth: int = 0
    cancelled: bool = False
    elapsed: float = 0.0


class _SearchStats:
    __slots__ = ("nodes",)

    def __init__(self) -> None:
        self.nodes = 0


class MinimaxPolicy(ActionPolicy[StateT, ActionT], Generic[StateT, ActionT]):
    """
    Depth-limited minimax over ``TurnBasedGame`` + ``StateValueFn``.

    Values are absolute for the root player: layers where the root player is
    to move maximise, the others minimise. Consecutive moves by the same side
    (after a pass) are handled by asking the game whose turn it is instead of
    alternating blindly.
    """

    def __init__(
        self,
        value_fn: StateValueFn[StateT],
        config: Optional[MinimaxConfig] = None,
    ) -> None:
        self.value_fn = value_fn
        self.config = config or MinimaxConfig()

    def select_action(
        self,
        game: TurnBasedGame[StateT, ActionT],
        state: StateT,
        legal_actions: Optional[Sequence[ActionT]] = None,
    ) -> ActionT:
        result = self.search(game, state, legal_actions=legal_actions)
        if result.move is None:
            raise ValueError("No legal actions available for minimax")
        return result.move

    def search(
        self,
        game: TurnBasedGame[StateT, ActionT],
        state: StateT,
        root_player: Optional[int] = None,
        depth: Optional[int] = None,
        cancel_token: Optional[CancellationToken] = None,
        legal_actions: Optional[Sequence[ActionT]] = None,
    ) -> SearchResult[ActionT]:
        """
        Search ``state`` and pick the best action for ``root_player``.

        Args:
            game: Rules implementation.
            state: Root state.
            root_player: Token the values are computed for (default: side to move).
            depth: Maximum depth in plies (default: ``config.depth``).
            cancel_token: Checked at every node; firing it stops the search.
            legal_actions: Optional cached root moves, searched in the given order.

        Returns:
            SearchResult. With no legal move at the root the move is None and
            the score is the static evaluation of the root.
        """
        depth = self.config.depth if depth is None else depth
        if depth < 1:
            raise ValueError("Minimax depth must be >= 1")
        if root_player is None:
            root_player = game.current_player(state)

        token = cancel_token
        if self.config.time_limit_s is not None:
            token = CancellationToken.with_timeout(self.config.time_limit_s, parent=cancel_token)

        start = time.perf_counter()
        if legal_actions is None:
            legal_actions = list(game.legal_actions(state))
        if not legal_actions or game.is_terminal(state):
            score = self.value_fn.evaluate(game, state, root_player)
            return SearchResult(move=None, score=score, nodes=1, elapsed=time.perf_counter() - start)

        depths = range(1, depth + 1) if self.config.iterative_deepening else (depth,)
        stats = _SearchStats()
        best: Optional[SearchResult[ActionT]] = None

        for current_depth in depths:
            result = self._search_root(game, state, legal_actions, root_player, current_depth, token, stats)
            result.elapsed = time.perf_counter() - start
            if result.cancelled:
                if best is None:
                    best = result
                else:
                    best.cancelled = True
                    best.nodes = stats.nodes
                    best.elapsed = result.elapsed
                logger.debug(
                    "search stopped during depth %d after %d nodes (%.3fs)",
                    current_depth,
                    stats.nodes,
                    result.elapsed,
                )
                break
            best = result
            logger.debug(
                "depth %d: score=%.2f nodes=%d elapsed=%.3fs move=%s",
                current_depth,
                result.score,
                result.nodes,
                result.elapsed,
                result.move,
            )

        if best is None:
            raise RuntimeError("Minimax search ran no depth")
        return best

    def _search_root(
        self,
        game: TurnBasedGame[StateT, ActionT],
        state: StateT,
        legal_actions: Sequence[ActionT],
        root_player: int,
        depth: int,
        token: Optional[CancellationToken],
        stats: _SearchStats,
    ) -> SearchResult[ActionT]:
        stats.nodes += 1
        best_value = -math.inf
        best_action: Optional[ActionT] = None
        alpha = -math.inf

        for action in legal_actions:
            next_state = game.apply_action(state, action)
            if next_state is None:
                continue
            try:
                value = self._search(game, next_state, depth - 1, alpha, math.inf, root_player, token, stats)
            except SearchCancelled:
                return SearchResult(
                    move=best_action,
                    score=best_value if best_action is not None else 0.0,
                    nodes=stats.nodes,
                    depth=0,
                    cancelled=True,
                )

            # Strict comparison keeps the first of equally valued moves.
            if value > best_value:
                best_value = value
                best_action = action

            if self.config.use_alpha_beta and value > alpha:
                alpha = value

        if best_action is None:
            return SearchResult(
                move=None,
                score=self.value_fn.evaluate(game, state, root_player),
                nodes=stats.nodes,
                depth=depth,
            )
        return SearchResult(move=best_action, score=best_value, nodes=stats.nodes, depth=depth)

    def _search(
        self,
        game: TurnBasedGame[StateT, ActionT],
        state: StateT,
        depth: int,
        alpha: float,
        beta: float,
        root_player: int,
        token: Optional[CancellationToken],
        stats: _SearchStats,
    ) -> float:
        stats.nodes += 1
        if token is not None and token.cancelled:
            raise SearchCancelled()

        if depth == 0 or game.is_terminal(state):
            return self.value_fn.evaluate(game, state, root_player)

        legal_actions: List[ActionT] = list(game.legal_actions(state))
        if not legal_actions:
            passed = game.pass_turn(state)
            if game.is_terminal(passed):
                return self.value_fn.evaluate(game, passed, root_player)
            return self._search(game, passed, depth - 1, alpha, beta, root_player, token, stats)

        maximizing = game.current_player(state) == root_player
        value = -math.inf if maximizing else math.inf

        for action in legal_actions:
            next_state = game.apply_action(state, action)
            if next_state is None:
                continue
            child_value = self._search(game, next_state, depth - 1, alpha, beta, root_player, token, stats)

            if maximizing:
                if child_value > value:
                    value = child_value
                if self.config.use_alpha_beta and value > alpha:
                    alpha = value
            else:
                if child_value < value:
                    value = child_value
                if self.config.use_alpha_beta and value < beta:
                    beta = value

            if self.config.use_alpha_beta and beta <= alpha:
                break

        return value
