"""CLI for playing against a computer opponent."""

import asyncio
import logging
from typing import Literal, Optional

import tyro

from reversi.config import AppConfig, load_config
from reversi.engine import ComputerOpponent
from reversi.games.othello import Move, PlayerInfo, Position, Seat, SkillTier
from reversi.registry import make_game


def play_human_vs_agent(
    tier: Literal["easy", "medium", "hard"] = "medium",
    human_dark: bool = True,
    config: Optional[str] = None,
    thinking_time: bool = True,
    seed: Optional[int] = None,
):
    """
    Play a game against a computer opponent.

    Args:
        tier: Skill tier of the computer ('easy', 'medium' or 'hard')
        human_dark: Whether the human plays dark (and moves first)
        config: Optional path to a YAML config file
        thinking_time: Whether the computer waits its tier's thinking time
        seed: Random seed
    """
    cfg = load_config(config) if config else AppConfig()
    if seed is not None:
        cfg.seed = seed
    cfg.search.apply_thinking_time = thinking_time
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    skill = SkillTier(tier)
    human_seat = Seat.DARK if human_dark else Seat.LIGHT
    computer_seat = human_seat.opposite
    players = {
        human_seat: PlayerInfo.human(human_seat),
        computer_seat: PlayerInfo.computer(computer_seat, skill),
    }

    game = make_game("othello", weights=cfg.eval)
    opponent = ComputerOpponent(cfg, game)
    state = game.new_game(players[Seat.DARK], players[Seat.LIGHT])

    print("=" * 50)
    print("Othello - Human vs Computer")
    print("=" * 50)
    print(f"Computer tier: {skill.value}")
    print(f"Human plays: {human_seat.display_name} ({'X' if human_dark else 'O'})")
    print("=" * 50)
    print()

    while not game.is_game_over(state):
        print(state.board)
        print(state.score)

        seat = state.current_seat
        if seat is human_seat:
            moves = game.legal_moves(state)
            print(f"Your turn! Legal moves: {', '.join(p.algebraic for p in moves)}")
            while True:
                text = input("Enter move (e.g. D3, or 'hint'): ")
                if text.strip().lower() == "hint":
                    for rec in opponent.move_recommendations(state, seat)[:3]:
                        print(f"  {rec.move.algebraic}: {rec.reasoning} (confidence {rec.confidence:.2f})")
                    continue
                position = Position.from_algebraic(text)
                if position is None:
                    print("Please enter a column A-H followed by a row 1-8!")
                    continue
                if position in moves:
                    break
                print(f"Invalid move! Legal moves: {', '.join(p.algebraic for p in moves)}")
        else:
            print("Computer's turn...")
            position = asyncio.run(opponent.request_move(state, seat))
            if position is None:
                print("Computer could not move.")
                break
            print(f"Computer played: {position.algebraic}")

        result = game.apply_move(Move(position, seat), state)
        state = result.state
        if not state.is_game_over and state.current_seat is seat:
            print(f"{seat.opposite.display_name} has no legal move and passes.")
        print()

    print(state.board)
    print(f"Final score - {state.score}")
    winner = state.winner
    if winner is None:
        print("It's a draw!")
    elif winner is human_seat:
        print("You win!")
    else:
        print("Computer wins!")


def main() -> None:
    tyro.cli(play_human_vs_agent)


if __name__ == "__main__":
    main()
