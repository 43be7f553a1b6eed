# evaluation/evaluate.py

import os
import csv
import time
import logging
from typing import Type, Dict

import numpy as np

from agents import AGENT_REGISTRY
from agents.base_agent import BaseAgent
from backend.config import configure_logging, get_preset, load_config
from backend.game import GameSession

logger = logging.getLogger(__name__)

SUMMARY_FIELDS = ["episode", "moves", "won", "score", "left"]


def evaluate_agent(
    agent_class: Type[BaseAgent],
    num_episodes: int,
    width: int,
    height: int,
    num_mines: int,
    agent_config: Dict = None,
    verbose: bool = False,
    save_dir: str = None,
    seed: int = None,
    open_first: bool = False,
) -> Dict:
    """
    Play `num_episodes` games and return aggregate statistics.
    Episode i uses seed + i when a seed is given, so runs are repeatable.
    """
    if save_dir:
        os.makedirs(save_dir, exist_ok=True)

    summary = []

    for ep in range(1, num_episodes + 1):
        game = GameSession(
            width=width,
            height=height,
            num_mines=num_mines,
            seed=None if seed is None else seed + ep,
        )
        agent = agent_class(width, height, num_mines, game.start_x, game.start_y, config=agent_config)
        frames = game.play_agent(agent, open_first=open_first)

        summary.append({
            "episode": ep,
            "moves": game.moves_made,
            "won": game.is_win(),
            "score": game.get_score(),
            "left": not game.is_game_over(),
        })

        if verbose:
            print(f"Episode {ep}: {'WIN' if game.is_win() else 'loss'} in {len(frames)} moves "
                  f"(score: {game.get_score():.2f})")

    moves = np.array([row["moves"] for row in summary], dtype=float)
    scores = np.array([row["score"] for row in summary], dtype=float)
    wins = np.array([row["won"] for row in summary], dtype=bool)

    stats = {
        "agent": agent_class.__name__,
        "episodes": num_episodes,
        "win_rate": float(wins.mean()) if num_episodes else 0.0,
        "avg_moves": float(moves.mean()) if num_episodes else 0.0,
        "std_moves": float(moves.std()) if num_episodes else 0.0,
        "avg_score": float(scores.mean()) if num_episodes else 0.0,
        "median_score": float(np.median(scores)) if num_episodes else 0.0,
    }

    print(f"\n{agent_class.__name__} - Win rate: {stats['win_rate']:.2%}, "
          f"Avg moves: {stats['avg_moves']:.1f}, Avg score: {stats['avg_score']:.2f}")

    if save_dir:
        timestamp = int(time.time())
        path = os.path.join(save_dir, f"summary_{timestamp}.csv")
        with open(path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=SUMMARY_FIELDS)
            writer.writeheader()
            writer.writerows(summary)
        logger.info("Wrote %d episodes to %s", len(summary), path)
        stats["summary_path"] = path

    return stats


def evaluate_multiple_difficulties(agent_class: Type[BaseAgent], config: Dict, agent_config: Dict = None, seed: int = None):
    evaluation = config["evaluation"]
    results = {}
    for label in evaluation["difficulties"]:
        setting = get_preset(config, label)
        print(f"\n== Difficulty: {label} ==")
        results[label] = evaluate_agent(
            agent_class=agent_class,
            num_episodes=evaluation["episodes"],
            width=setting["width"],
            height=setting["height"],
            num_mines=setting["num_mines"],
            agent_config=agent_config,
            save_dir=os.path.join(evaluation["save_dir"], f"{agent_class.__name__.lower()}_{label}"),
            verbose=False,
            seed=seed,
        )
    return results


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Evaluate a Minesweeper agent over many games.")
    parser.add_argument("--config", default=None, help="YAML file merged over the packaged defaults")
    parser.add_argument("--agent", default=None, help=f"one of {sorted(AGENT_REGISTRY)}")
    parser.add_argument("--preset", default=None, help="evaluate a single preset instead of every difficulty")
    parser.add_argument("--episodes", type=int, default=None, help="episodes per difficulty (overrides config)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging(config)
    if args.episodes is not None:
        config["evaluation"]["episodes"] = args.episodes

    agent_name = (args.agent or config["agent"]["name"]).lower()
    if agent_name not in AGENT_REGISTRY:
        parser.error(f"unknown agent {agent_name!r}; choose from {sorted(AGENT_REGISTRY)}")
    agent_class = AGENT_REGISTRY[agent_name]

    if args.preset is None:
        evaluate_multiple_difficulties(agent_class, config, seed=args.seed)
        return

    setting = get_preset(config, args.preset)
    evaluate_agent(
        agent_class=agent_class,
        num_episodes=config["evaluation"]["episodes"],
        width=setting["width"],
        height=setting["height"],
        num_mines=setting["num_mines"],
        verbose=args.verbose,
        save_dir=config["evaluation"]["save_dir"],
        seed=args.seed,
    )


if __name__ == "__main__":
    main()
