"""Asynchronous computer opponent: pacing, off-loop search and cancellation."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from reversi.agents import BaseAgent
from reversi.config import AppConfig
from reversi.games.othello import GameState, OthelloRules, Position, Seat, SkillTier
from reversi.registry import make_agent
from reversi.search import CancellationToken, SearchResult
from .analysis import TIER_CONFIDENCE, ComputerAnalysis, MoveRecommendation, move_recommendations

logger = logging.getLogger(__name__)


@dataclass
class _Request:
    token: CancellationToken = field(default_factory=CancellationToken)
    done: asyncio.Event = field(default_factory=asyncio.Event)


class ComputerOpponent:
    """
    Computes computer moves without blocking the event loop.

    Each request sleeps for the tier's thinking time (in small slices so a
    cancel is noticed quickly), then runs the search on a worker thread. At
    most one request per ``game_id`` is in flight: a new request cancels the
    previous one and waits for it to finish before starting. A cancelled
    request resolves to None, never to a partially computed move.
    """

    def __init__(self, config: Optional[AppConfig] = None, game: Optional[OthelloRules] = None) -> None:
        self.config = config or AppConfig()
        self.game = game or OthelloRules(self.config.eval)
        self.rng = np.random.default_rng(self.config.seed)
        self._agents: Dict[SkillTier, BaseAgent] = {}
        self._inflight: Dict[str, _Request] = {}

    def agent_for(self, tier: SkillTier) -> BaseAgent:
        agent = self._agents.get(tier)
        if agent is None:
            agent = make_agent(
                tier.value,
                profiles=self.config.tiers,
                weights=self.config.eval,
                seed=self.config.seed,
                iterative_deepening=self.config.search.iterative_deepening,
            )
            self._agents[tier] = agent
        return agent

    def is_thinking(self, game_id: str) -> bool:
        return game_id in self._inflight

    # ------------------------------------------------------------------ sync

    def choose_move(
        self,
        state: GameState,
        tier: SkillTier,
        cancel_token: Optional[CancellationToken] = None,
    ) -> SearchResult[Position]:
        """Blocking search for the side to move, without thinking time."""
        return self.agent_for(tier).act(self.game, state, cancel_token)

    def analyze(
        self,
        state: GameState,
        tier: SkillTier,
        cancel_token: Optional[CancellationToken] = None,
    ) -> ComputerAnalysis:
        """Run the tier's move selection for the side to move and summarise it."""
        result = self.choose_move(state, tier, cancel_token)
        return ComputerAnalysis(
            position=self.game.analyze_position(state),
            best_move=result.move,
            confidence=TIER_CONFIDENCE[tier] if result.move is not None else 0.0,
            search_depth=result.depth,
            nodes=result.nodes,
            elapsed=result.elapsed,
            cancelled=result.cancelled,
        )

    def move_recommendations(self, state: GameState, seat: Optional[Seat] = None) -> List[MoveRecommendation]:
        return move_recommendations(self.game, state, seat)

    # ------------------------------------------------------------------ async

    async def request_move(
        self,
        state: GameState,
        seat: Optional[Seat] = None,
        tier: Optional[SkillTier] = None,
    ) -> Optional[Position]:
        """
        Compute the move for ``seat`` (default: side to move).

        Args:
            state: Position to play from.
            seat: Seat the computer plays; must be the side to move.
            tier: Skill tier (default: the tier in the seat's PlayerInfo).

        Returns:
            The chosen position, or None when the request was cancelled, the
            game is over, or it is not ``seat``'s turn.
        """
        seat = seat or state.current_seat
        if tier is None:
            tier = state.player_info(seat).tier
            if tier is None:
                raise ValueError(f"{seat.display_name} is not a computer player")

        game_id = state.game_id
        while True:
            previous = self._inflight.get(game_id)
            if previous is None:
                break
            previous.token.cancel()
            await previous.done.wait()

        request = _Request()
        self._inflight[game_id] = request
        try:
            return await self._run(state, seat, tier, request.token)
        except asyncio.CancelledError:
            request.token.cancel()
            raise
        finally:
            request.done.set()
            if self._inflight.get(game_id) is request:
                del self._inflight[game_id]

    async def cancel(self, game_id: str) -> bool:
        """Cancel the in-flight request for ``game_id`` and wait until it has stopped."""
        request = self._inflight.get(game_id)
        if request is None:
            return False
        logger.info("Cancelling computer move for game %s", game_id[:8])
        request.token.cancel()
        await request.done.wait()
        return True

    async def cancel_all(self) -> None:
        for game_id in list(self._inflight):
            await self.cancel(game_id)

    async def _run(
        self,
        state: GameState,
        seat: Seat,
        tier: SkillTier,
        token: CancellationToken,
    ) -> Optional[Position]:
        if state.is_game_over or seat is not state.current_seat:
            logger.debug("No computer move: game over or not %s's turn", seat.display_name)
            return None

        profile = self.config.tiers[tier]
        logger.info("Computer (%s, %s) thinking in game %s", seat.display_name, tier.value, state.game_id[:8])

        if self.config.search.apply_thinking_time:
            delay = profile.sample_thinking_time(self.rng)
            if not await self._pace(delay, token):
                logger.debug("Cancelled during thinking time")
                return None

        agent = self.agent_for(tier)
        worker = asyncio.ensure_future(asyncio.to_thread(agent.act, self.game, state, token))
        try:
            result = await asyncio.shield(worker)
        except asyncio.CancelledError:
            token.cancel()
            # Let the worker thread unwind before the slot is released.
            await asyncio.wait({worker})
            raise

        if token.cancelled:
            logger.debug("Search cancelled after %d nodes", result.nodes)
            return None
        if result.cancelled:
            logger.info("Search time budget reached; using depth %d", result.depth)
        logger.info(
            "Computer plays %s (score=%.2f nodes=%d depth=%d %.2fs)",
            result.move.algebraic if result.move is not None else "-",
            result.score,
            result.nodes,
            result.depth,
            result.elapsed,
        )
        return result.move

    async def _pace(self, delay: float, token: CancellationToken) -> bool:
        """Sleep ``delay`` seconds in slices; False as soon as the token fires."""
        loop = asyncio.get_running_loop()
        end = loop.time() + delay
        step = self.config.search.pacing_slice_s
        while True:
            if token.cancelled:
                return False
            remaining = end - loop.time()
            if remaining <= 0:
                return True
            await asyncio.sleep(min(step, remaining))
