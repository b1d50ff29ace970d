"""Utilities for playing matches between agents."""

import logging
import random
from typing import List, Optional, Tuple, Union

from reversi.agents import BaseAgent
from reversi.games.othello import GamePhase, GameState, Move, OthelloRules, Seat

logger = logging.getLogger(__name__)


def play_game(
    dark_agent: BaseAgent,
    light_agent: BaseAgent,
    game: Optional[OthelloRules] = None,
    state: Optional[GameState] = None,
) -> GameState:
    """
    Play one game to the end.

    Args:
        dark_agent: Agent playing dark (moves first)
        light_agent: Agent playing light
        game: Rules instance (default: OthelloRules())
        state: Optional starting state (default: a new game)

    Returns:
        The finished game state.
    """
    game = game or OthelloRules()
    state = state or game.new_game()
    agents = {Seat.DARK: dark_agent, Seat.LIGHT: light_agent}

    while not game.is_game_over(state):
        if not game.has_legal_moves(state.current_seat, state):
            state = game.next_turn(state)
            continue
        seat = state.current_seat
        position = agents[seat].select_action(game, state)
        if position is None:
            raise RuntimeError(f"{seat.display_name} agent returned no move with legal moves available")
        result = game.apply_move(Move(position, seat), state)
        if result is None:
            raise RuntimeError(f"{seat.display_name} agent chose illegal move {position.algebraic}")
        state = result.state

    if state.phase is not GamePhase.FINISHED:
        state = game.next_turn(state)
    logger.debug("Game %s finished: %s after %d moves", state.game_id[:8], state.score, state.move_count)
    return state


def play_match(
    agent1: BaseAgent,
    agent2: BaseAgent,
    num_games: int = 10,
    seed: Optional[int] = None,
    randomize_first_player: bool = False,
    collect_game_lengths: bool = False,
    game: Optional[OthelloRules] = None,
) -> Union[Tuple[int, int, int], Tuple[int, int, int, List[int]]]:
    """
    Play a match between two agents.

    Args:
        agent1: First agent
        agent2: Second agent
        num_games: Number of games to play
        seed: Random seed for the colour draw
        randomize_first_player: If True, randomly choose who plays dark each game.
                               If False, colours alternate and agent1 starts as dark.
        collect_game_lengths: If True, also return the move count of every game.
        game: Rules instance shared by all games.

    Returns:
        Tuple of (agent1_wins, draws, agent2_wins). If ``collect_game_lengths`` is True,
        also returns a list with the number of moves for every game played.
    """
    game = game or OthelloRules()
    rng = random.Random(seed)

    agent1_wins = 0
    draws = 0
    agent2_wins = 0
    game_lengths: List[int] = []

    for game_idx in range(num_games):
        if randomize_first_player:
            agent1_is_dark = rng.random() < 0.5
        else:
            agent1_is_dark = game_idx % 2 == 0

        dark, light = (agent1, agent2) if agent1_is_dark else (agent2, agent1)
        final = play_game(dark, light, game=game)
        game_lengths.append(final.move_count)

        winner = final.winner
        if winner is None:
            draws += 1
        elif (winner is Seat.DARK) == agent1_is_dark:
            agent1_wins += 1
        else:
            agent2_wins += 1

    logger.info("Match finished: %d-%d-%d over %d games", agent1_wins, draws, agent2_wins, num_games)
    if collect_game_lengths:
        return agent1_wins, draws, agent2_wins, game_lengths
    return agent1_wins, draws, agent2_wins
