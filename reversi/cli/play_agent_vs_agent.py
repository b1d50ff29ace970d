"""CLI for pitting two agents against each other."""

import logging
from typing import Literal, Optional

import tyro

from reversi.agents import BaseAgent
from reversi.config import AppConfig, load_config
from reversi.games.othello import SkillTier
from reversi.registry import make_agent, make_game
from reversi.utils.match import play_match

AgentId = Literal["easy", "medium", "hard", "random", "minimax"]


def build_agent(agent_id: str, cfg: AppConfig, seed: Optional[int] = None) -> BaseAgent:
    """Create a registered agent with the settings from ``cfg``."""
    if agent_id in {tier.value for tier in SkillTier}:
        return make_agent(
            agent_id,
            profiles=cfg.tiers,
            weights=cfg.eval,
            seed=seed,
            iterative_deepening=cfg.search.iterative_deepening,
        )
    if agent_id == "minimax":
        return make_agent(agent_id, weights=cfg.eval, seed=seed)
    return make_agent(agent_id, seed=seed)


def play_agent_vs_agent(
    agent1: AgentId = "medium",
    agent2: AgentId = "easy",
    num_games: int = 10,
    seed: Optional[int] = 42,
    randomize_first_player: bool = False,
    config: Optional[str] = None,
):
    """
    Play a match between two agents and print the summary.

    Args:
        agent1: First agent: a skill tier or a registered agent id
        agent2: Second agent: a skill tier or a registered agent id
        num_games: Number of games to play
        seed: Random seed
        randomize_first_player: Randomly choose who plays dark instead of alternating
        config: Optional path to a YAML config file
    """
    cfg = load_config(config) if config else AppConfig()
    if seed is not None:
        cfg.seed = seed
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    game = make_game("othello", weights=cfg.eval)
    agents = [
        build_agent(agent_id, cfg, seed=None if cfg.seed is None else cfg.seed + offset)
        for offset, agent_id in enumerate((agent1, agent2))
    ]

    print(f"Playing {num_games} games: {agent1} vs {agent2}")
    wins1, draws, wins2, lengths = play_match(
        agents[0],
        agents[1],
        num_games=num_games,
        seed=cfg.seed,
        randomize_first_player=randomize_first_player,
        collect_game_lengths=True,
        game=game,
    )

    print("=" * 50)
    print(f"Agent 1 ({agent1}) wins: {wins1} ({100 * wins1 / max(num_games, 1):.1f}%)")
    print(f"Draws: {draws}")
    print(f"Agent 2 ({agent2}) wins: {wins2} ({100 * wins2 / max(num_games, 1):.1f}%)")
    if lengths:
        print(f"Average game length: {sum(lengths) / len(lengths):.1f} moves")
    print("=" * 50)


def main() -> None:
    tyro.cli(play_agent_vs_agent)


if __name__ == "__main__":
    main()
