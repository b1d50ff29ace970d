"""Tests for the Othello rules engine."""

import random
from dataclasses import replace

import pytest

from reversi.games.othello import (
    Board,
    GamePhase,
    Move,
    OthelloRules,
    PlayerInfo,
    Position,
    Seat,
)


def random_playout(rules, num_moves, seed):
    """Play up to ``num_moves`` random legal moves from a new game."""
    rng = random.Random(seed)
    state = rules.new_game()
    for _ in range(num_moves):
        moves = rules.legal_moves(state)
        if not moves:
            break
        result = rules.apply_move(Move(rng.choice(moves), state.current_seat), state)
        state = result.state
    return state


def test_turn_based_interface():
    rules = OthelloRules()
    state = rules.initial_state()
    assert rules.current_player(state) == 1
    assert list(rules.legal_actions(state)) == rules.legal_moves(state)
    assert not rules.is_terminal(state)
    assert rules.winner(state) is None

    nxt = rules.apply_action(state, Position(2, 3))
    assert rules.current_player(nxt) == -1
    assert rules.apply_action(state, Position(0, 0)) is None
    assert rules.pass_turn(state).current_seat is Seat.LIGHT


def test_new_game_rejects_swapped_players():
    rules = OthelloRules()
    with pytest.raises(ValueError):
        rules.new_game(PlayerInfo.human(Seat.LIGHT), PlayerInfo.human(Seat.DARK))


def test_apply_move_reports_captures():
    rules = OthelloRules()
    state = rules.new_game()
    result = rules.apply_move(Move(Position(2, 3), Seat.DARK), state)
    assert result is not None
    assert result.captured == (Position(3, 3),)
    assert result.flipped_count == 1
    assert result.state.score.dark == 4
    assert result.state.score.light == 1
    assert rules.captured_positions(Move(Position(2, 3), Seat.DARK), state) == [Position(3, 3)]


@pytest.mark.parametrize(
    "move",
    [
        Move(Position(2, 4), Seat.LIGHT),  # wrong seat
        Move(Position(3, 3), Seat.DARK),  # occupied
        Move(Position(0, 0), Seat.DARK),  # captures nothing
        Move(Position(-1, 3), Seat.DARK),  # off the board
        Move(Position(8, 8), Seat.DARK),
    ],
)
def test_apply_move_rejects_illegal_moves_without_touching_state(move):
    rules = OthelloRules()
    state = rules.new_game()
    board = state.board
    assert rules.apply_move(move, state) is None
    assert rules.is_legal_move(move, state) is False
    assert state.board == board
    assert state.move_count == 0


def test_apply_move_agrees_with_is_legal_move():
    rules = OthelloRules()
    state = random_playout(rules, 20, seed=4)
    for position in Board.empty().empty_positions:
        move = Move(position, state.current_seat)
        assert (rules.apply_move(move, state) is not None) == rules.is_legal_move(move, state)

    finished = rules.from_board(Board.from_rows(["XXX....O"] + ["........"] * 6 + ["......XX"]))
    assert finished.phase is GamePhase.FINISHED
    for position in finished.board.empty_positions:
        assert rules.apply_move(Move(position, finished.current_seat), finished) is None


def test_is_legal_move_only_for_side_to_move():
    rules = OthelloRules()
    state = rules.new_game()
    assert rules.is_legal_move(Move(Position(2, 3), Seat.DARK), state)
    assert not rules.is_legal_move(Move(Position(2, 4), Seat.LIGHT), state)
    assert not rules.is_legal_move(Move(Position(-1, 3), Seat.DARK), state)
    assert rules.apply_move(Move(Position(2, 4), Seat.LIGHT), state) is None

    # Light does have moves here, they are just not its turn.
    assert rules.legal_moves(state, Seat.LIGHT) == [Position(2, 4), Position(3, 5), Position(4, 2), Position(5, 3)]
    assert rules.has_legal_moves(Seat.LIGHT, state)


def test_game_over_and_winner():
    rules = OthelloRules()
    board = Board.from_rows(["XXX....O"] + ["........"] * 6 + ["......XX"])
    state = rules.from_board(board, Seat.LIGHT)
    assert state.phase is GamePhase.FINISHED
    assert rules.is_game_over(state)
    assert rules.is_terminal(state)
    assert rules.winning_seat(state) is Seat.DARK
    assert rules.winner(state) == 1
    assert rules.legal_moves(state) == []
    assert not rules.has_legal_moves(Seat.DARK, state)


def test_tie_has_no_winner():
    rules = OthelloRules()
    state = rules.from_board(Board.from_rows(["X......O"] + ["........"] * 7))
    assert state.phase is GamePhase.FINISHED
    assert rules.winning_seat(state) is None
    assert rules.winner(state) == 0
    assert state.is_tied


def test_from_board_hands_turn_to_the_side_that_can_move():
    rules = OthelloRules()
    board = Board.from_rows(["XOO....."] + ["........"] * 7)
    state = rules.from_board(board, Seat.LIGHT)
    assert state.current_seat is Seat.DARK
    assert state.phase is GamePhase.IN_PROGRESS


def test_next_turn_resolves_passes():
    rules = OthelloRules()
    state = rules.new_game()
    assert rules.next_turn(state).current_seat is Seat.LIGHT

    stuck = rules.from_board(Board.from_rows(["X......O"] + ["........"] * 7), phase=GamePhase.IN_PROGRESS)
    assert rules.next_turn(stuck).phase is GamePhase.FINISHED


def test_full_board_is_game_over():
    rules = OthelloRules()
    board = Board.from_rows(["XXXXOOOO"] * 8)
    assert board.is_full
    state = rules.from_board(board)
    assert rules.is_game_over(state)
    assert state.is_tied


def test_replay_reproduces_the_game():
    rules = OthelloRules()
    state = random_playout(rules, 30, seed=7)
    replayed = rules.replay(state.history)
    assert replayed is not None
    assert replayed.board == state.board
    assert replayed.phase is state.phase
    assert replayed.current_seat is state.current_seat


def test_replay_rejects_illegal_history():
    rules = OthelloRules()
    moves = [Move(Position(2, 3), Seat.DARK), Move(Position(2, 3), Seat.LIGHT)]
    assert rules.replay(moves) is None


def test_validate_state_accepts_real_games():
    rules = OthelloRules()
    for seed in range(5):
        state = random_playout(rules, 20 + seed * 5, seed=seed)
        assert rules.validate_state(state) == []


def test_validate_state_reports_inconsistencies():
    rules = OthelloRules()
    state = random_playout(rules, 10, seed=3)

    empty = state.board.empty_positions[0]
    tampered = replace(state, board=state.board.placing(state.current_seat.cell, empty))
    issues = rules.validate_state(tampered)
    assert any("Piece count" in issue for issue in issues)
    assert any("Replayed board" in issue for issue in issues)

    wrongly_finished = replace(state, phase=GamePhase.FINISHED)
    assert any("finished" in issue for issue in rules.validate_state(wrongly_finished))

    stuck = rules.from_board(Board.from_rows(["X......O"] + ["........"] * 7), phase=GamePhase.IN_PROGRESS)
    assert any("neither seat" in issue for issue in rules.validate_state(stuck))
