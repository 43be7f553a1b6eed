#!/usr/bin/env python
"""Play a single game with the propagation agent and print every move.

Usage examples:
  python scripts/play_agent.py --preset beginner --seed 7
  python scripts/play_agent.py --width 8 --height 8 --mines 10 --start 3 4 --open-first

Board settings default to the `game` section of backend/config.yaml.
"""
import sys, os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import argparse

from agents import AGENT_REGISTRY
from backend.config import configure_logging, get_preset, load_config
from backend.game import GameSession


def build_parser():
    p = argparse.ArgumentParser()
    p.add_argument("--config", default=None, help="YAML file merged over the packaged defaults")
    p.add_argument("--preset", default=None, help="board preset name from the config")
    p.add_argument("--width", type=int, default=None)
    p.add_argument("--height", type=int, default=None)
    p.add_argument("--mines", type=int, default=None)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None,
                   help="host opening coordinate")
    p.add_argument("--open-first", action="store_true",
                   help="let the host uncover the start coordinate before the agent plays")
    p.add_argument("--agent", default=None, help=f"one of {sorted(AGENT_REGISTRY)}")
    p.add_argument("--quiet", action="store_true", help="only print the final board")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    configure_logging(config)
    game_cfg = config["game"]

    board = get_preset(config, args.preset or game_cfg["preset"])
    width = args.width or board["width"]
    height = args.height or board["height"]
    mines = args.mines if args.mines is not None else board["num_mines"]
    start_x, start_y = args.start if args.start else (game_cfg["start_x"], game_cfg["start_y"])
    seed = args.seed if args.seed is not None else game_cfg["seed"]

    game = GameSession(width, height, mines, start_x=start_x, start_y=start_y, seed=seed)
    agent_cls = AGENT_REGISTRY[(args.agent or config["agent"]["name"]).lower()]
    agent = agent_cls(width, height, mines, start_x, start_y)

    print(f"Playing {width}x{height} with {mines} mines (start={start_x},{start_y}, seed={seed})")
    frames = game.play_agent(agent, open_first=args.open_first)

    if not args.quiet:
        for i, frame in enumerate(frames, start=1):
            action = frame["action"].to_dict()
            where = f" ({action['x']}, {action['y']})" if "x" in action else ""
            print(f"{i:4d}. {action['type']}{where} -> {frame['result'].to_json()}")

    print()
    print(game.board.format_board(reveal_all=True))
    outcome = "WON" if game.is_win() else ("LOST" if game.is_game_over() else "AGENT LEFT")
    print(f"\n{outcome} after {game.moves_made} moves, score {game.get_score():.2f}")


if __name__ == "__main__":
    main()
