"""Tests for the asynchronous computer opponent."""

import asyncio
import time

import pytest

from reversi.agents import TierProfile
from reversi.config import AppConfig, SearchSettings
from reversi.engine import ComputerOpponent
from reversi.engine.analysis import evaluation_confidence, move_reasoning
from reversi.games.othello import Board, Move, OthelloRules, PlayerInfo, Position, Seat, SkillTier


def fast_config(overrides=None) -> AppConfig:
    tiers = {
        SkillTier.EASY: TierProfile(search_depth=None, thinking_time=(0.0, 0.0)),
        SkillTier.MEDIUM: TierProfile(search_depth=2, thinking_time=(0.0, 0.0)),
        SkillTier.HARD: TierProfile(search_depth=3, thinking_time=(0.0, 0.0), time_limit_s=5.0),
    }
    tiers.update(overrides or {})
    return AppConfig(tiers=tiers, search=SearchSettings(pacing_slice_s=0.01), seed=0)


def computer_game(rules: OthelloRules, tier: SkillTier = SkillTier.MEDIUM):
    return rules.new_game(dark_info=PlayerInfo.computer(Seat.DARK, tier))


def test_request_move_returns_a_legal_move():
    opponent = ComputerOpponent(fast_config())
    state = computer_game(opponent.game)

    move = asyncio.run(opponent.request_move(state))
    assert move in opponent.game.legal_moves(state)
    assert not opponent.is_thinking(state.game_id)


@pytest.mark.parametrize("tier", list(SkillTier))
def test_every_tier_produces_a_move(tier):
    opponent = ComputerOpponent(fast_config())
    state = opponent.game.new_game()
    move = asyncio.run(opponent.request_move(state, Seat.DARK, tier))
    assert move in opponent.game.legal_moves(state)


def test_request_for_human_seat_without_tier_raises():
    opponent = ComputerOpponent(fast_config())
    state = opponent.game.new_game()
    with pytest.raises(ValueError):
        asyncio.run(opponent.request_move(state, Seat.DARK))


def test_no_move_when_not_the_seats_turn_or_game_over():
    opponent = ComputerOpponent(fast_config())
    state = opponent.game.new_game()
    assert asyncio.run(opponent.request_move(state, Seat.LIGHT, SkillTier.EASY)) is None

    finished = opponent.game.from_board(Board.from_rows(["X......O"] + ["........"] * 7))
    assert asyncio.run(opponent.request_move(finished, Seat.DARK, SkillTier.EASY)) is None


def test_cancel_during_thinking_time():
    slow = TierProfile(search_depth=None, thinking_time=(5.0, 5.0))
    opponent = ComputerOpponent(fast_config({SkillTier.EASY: slow}))
    state = computer_game(opponent.game, SkillTier.EASY)

    async def scenario():
        task = asyncio.create_task(opponent.request_move(state))
        await asyncio.sleep(0.1)
        assert opponent.is_thinking(state.game_id)
        cancelled = await opponent.cancel(state.game_id)
        return cancelled, await task

    start = time.monotonic()
    cancelled, move = asyncio.run(scenario())
    assert cancelled
    assert move is None
    assert time.monotonic() - start < 2.0
    assert not opponent.is_thinking(state.game_id)


def test_cancel_without_request_is_a_no_op():
    opponent = ComputerOpponent(fast_config())
    assert asyncio.run(opponent.cancel("missing")) is False


def test_new_request_supersedes_the_previous_one():
    slow = TierProfile(search_depth=None, thinking_time=(5.0, 5.0))
    opponent = ComputerOpponent(fast_config({SkillTier.EASY: slow}))
    state = opponent.game.new_game()

    async def scenario():
        first = asyncio.create_task(opponent.request_move(state, Seat.DARK, SkillTier.EASY))
        await asyncio.sleep(0.1)
        second = asyncio.create_task(opponent.request_move(state, Seat.DARK, SkillTier.MEDIUM))
        return await asyncio.gather(first, second)

    start = time.monotonic()
    first, second = asyncio.run(scenario())
    assert first is None
    assert second in opponent.game.legal_moves(state)
    assert time.monotonic() - start < 3.0


def test_task_cancellation_propagates():
    slow = TierProfile(search_depth=None, thinking_time=(5.0, 5.0))
    opponent = ComputerOpponent(fast_config({SkillTier.EASY: slow}))
    state = computer_game(opponent.game, SkillTier.EASY)

    async def scenario():
        task = asyncio.create_task(opponent.request_move(state))
        await asyncio.sleep(0.1)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())
    assert not opponent.is_thinking(state.game_id)


def test_thinking_time_is_applied():
    paced = TierProfile(search_depth=None, thinking_time=(0.3, 0.3))
    opponent = ComputerOpponent(fast_config({SkillTier.EASY: paced}))
    state = computer_game(opponent.game, SkillTier.EASY)

    start = time.monotonic()
    move = asyncio.run(opponent.request_move(state))
    assert time.monotonic() - start >= 0.25
    assert move is not None

    opponent.config.search.apply_thinking_time = False
    start = time.monotonic()
    asyncio.run(opponent.request_move(state))
    assert time.monotonic() - start < 0.25


def test_choose_move_is_synchronous():
    opponent = ComputerOpponent(fast_config())
    state = opponent.game.new_game()
    result = opponent.choose_move(state, SkillTier.HARD)
    assert result.move in opponent.game.legal_moves(state)
    assert result.depth == 3


def test_cancel_while_searching():
    deep = TierProfile(search_depth=9, thinking_time=(0.0, 0.0))
    opponent = ComputerOpponent(fast_config({SkillTier.MEDIUM: deep}))
    state = computer_game(opponent.game, SkillTier.MEDIUM)

    async def scenario():
        task = asyncio.create_task(opponent.request_move(state))
        await asyncio.sleep(0.3)
        assert opponent.is_thinking(state.game_id)
        started = time.monotonic()
        cancelled = await opponent.cancel(state.game_id)
        return cancelled, await task, time.monotonic() - started

    cancelled, move, cancel_latency = asyncio.run(scenario())
    assert cancelled
    assert move is None
    assert cancel_latency < 1.0
    assert not opponent.is_thinking(state.game_id)


def test_move_recommendations_are_sorted_and_explained():
    opponent = ComputerOpponent(fast_config())
    state = opponent.game.from_board(
        Board.from_rows([".OX.....", "........", "........", "........", "...OX...", "........", "........", "........"]),
        Seat.DARK,
    )

    recommendations = opponent.move_recommendations(state)
    assert [r.move for r in recommendations] == [Position(0, 0), Position(4, 2)]
    corner, other = recommendations
    assert corner.evaluation > other.evaluation
    assert corner.reasoning.startswith("Corner move")
    assert other.reasoning == "Solid tactical move"
    for rec in recommendations:
        assert 0.0 <= rec.confidence <= 1.0
        after = opponent.game.apply_move(Move(rec.move, Seat.DARK), state).state
        assert rec.evaluation == opponent.game.evaluate(after, Seat.DARK)

    assert opponent.move_recommendations(state, Seat.LIGHT) == []


def test_move_reasoning_and_confidence_scale():
    captures = [Position(1, 1)] * 7
    assert move_reasoning(Position(3, 3), captures) == "High-capture move (7 pieces)"
    assert move_reasoning(Position(3, 3), captures[:4]) == "Good capture (4 pieces)"
    assert move_reasoning(Position(0, 3), captures[:1]) == "Edge move - good positional play"
    assert move_reasoning(Position(7, 7), captures) == "Corner move - excellent strategic position"

    assert evaluation_confidence(-250.0) == 0.0
    assert evaluation_confidence(0.0) == 0.5
    assert evaluation_confidence(400.0) == 1.0


def test_analyze_reports_the_search():
    opponent = ComputerOpponent(fast_config())
    state = opponent.game.new_game()

    hard = opponent.analyze(state, SkillTier.HARD)
    assert hard.best_move in opponent.game.legal_moves(state)
    assert hard.confidence == 0.9
    assert hard.search_depth == 3
    assert hard.nodes > 4
    assert hard.position.mobility[Seat.DARK] == 4

    easy = opponent.analyze(state, SkillTier.EASY)
    assert easy.confidence == 0.3
    assert easy.search_depth == 0
    assert easy.nodes == 4

    finished = opponent.game.from_board(Board.from_rows(["X......O"] + ["........"] * 7))
    assert opponent.analyze(finished, SkillTier.MEDIUM).best_move is None
