"""
Property-based tests for the Othello rules.

Uses hypothesis to play random legal games and check the invariants that
must hold after every move.
"""

from hypothesis import given, settings, strategies as st

from reversi.games.othello import GamePhase, Move, OthelloRules, Seat
from reversi.search.othello import make_othello_heuristic_minimax_policy
from reversi.utils import state_from_dict, state_to_dict

RULES = OthelloRules()


@st.composite
def played_states(draw, max_moves=60):
    """A list of consecutive states from a random legal game, starting at the opening."""
    state = RULES.new_game()
    states = [state]
    for _ in range(draw(st.integers(0, max_moves))):
        if state.is_game_over:
            break
        position = draw(st.sampled_from(RULES.legal_moves(state)))
        state = RULES.apply_move(Move(position, state.current_seat), state).state
        states.append(state)
    return states


@given(played_states())
@settings(max_examples=60, deadline=None)
def test_each_move_adds_one_piece_and_flips_captures(states):
    for before, after in zip(states, states[1:]):
        move = after.last_move
        mover, opponent = move.seat, move.seat.opposite
        captured = RULES.captured_positions(move, before)

        assert captured
        assert after.score.total == before.score.total + 1
        assert after.score.for_seat(mover) == before.score.for_seat(mover) + len(captured) + 1
        assert after.score.for_seat(opponent) == before.score.for_seat(opponent) - len(captured)
        for position in captured:
            assert after.board.cell_at(position) is mover.cell


@given(played_states())
@settings(max_examples=60, deadline=None)
def test_every_reached_state_is_consistent(states):
    for state in states:
        assert RULES.validate_state(state) == []
        if state.phase is GamePhase.IN_PROGRESS:
            assert RULES.legal_moves(state)
        else:
            assert not state.board.has_legal_move(Seat.DARK)
            assert not state.board.has_legal_move(Seat.LIGHT)


@given(played_states())
@settings(max_examples=40, deadline=None)
def test_replay_and_records_are_deterministic(states):
    final = states[-1]
    replayed = RULES.replay(final.history)
    assert replayed.board == final.board
    assert replayed.current_seat is final.current_seat
    assert replayed.phase is final.phase

    restored = state_from_dict(state_to_dict(final), RULES)
    assert restored.board == final.board
    assert list(restored.history) == list(final.history)


@given(played_states(max_moves=40))
@settings(max_examples=15, deadline=None)
def test_alpha_beta_agrees_with_minimax(states):
    state = states[-1]
    pruned = make_othello_heuristic_minimax_policy(depth=2).search(RULES, state)
    full = make_othello_heuristic_minimax_policy(depth=2, use_alpha_beta=False).search(RULES, state)
    assert pruned.move == full.move
    assert pruned.score == full.score
    assert pruned.nodes <= full.nodes
