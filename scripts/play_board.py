#!/usr/bin/env python3
"""Watch the policy play a single board, with optional move logging & replay."""

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List

import numpy as np

from hopscotch import JumpEraseEnv
from hopscotch.core import DIRECTION_NAMES, DIRECTIONS, Move
from hopscotch.evaluation import play_game
from hopscotch.io import format_layout, load_layout, parse_layout, random_layout
from hopscotch.policy import DecisionPolicy


def direction_index(origin, move: Move) -> int:
    dr = (move.row > origin[0]) - (move.row < origin[0])
    dc = (move.col > origin[1]) - (move.col < origin[1])
    return DIRECTIONS.index((dr, dc))


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Saved move log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    layout = parse_layout(data["layout"])
    env = JumpEraseEnv(layout, render_mode="ansi")
    env.reset()
    if verbose:
        print("Replaying logged game.")
        print(env.render())
    for entry in data.get("moves", []):
        env.step(entry["action_index"])
        if verbose:
            name = DIRECTION_NAMES[entry["action_index"]]
            print(f"move {entry['move_index']}: {name} -> ({entry['to'][0]},{entry['to'][1]})")
            print(env.render())
    summary = {
        "score": env.board.score,
        "moves": len(data.get("moves", [])),
        "position": list(env.board.position),
        "erased": env.board.erased_mask().astype(int).tolist(),
    }
    if verbose:
        print(f"Final score: {summary['score']}")
    return summary


def play(args: argparse.Namespace) -> Dict:
    if args.board:
        layout = load_layout(args.board)
    else:
        layout = random_layout(args.size, np.random.default_rng(args.seed))

    env = JumpEraseEnv(layout, render_mode="ansi")
    env.reset()
    log_records: List[Dict] = []

    def on_move(board, move: Move) -> None:
        action_index = direction_index(env.board.position, move)
        env.step(action_index)
        log_records.append(
            {
                "move_index": len(log_records),
                "action_index": action_index,
                "direction": DIRECTION_NAMES[action_index],
                "to": [move.row, move.col],
            }
        )
        if args.verbose:
            print(f"\nmove {len(log_records)}: {DIRECTION_NAMES[action_index]} -> {move.target}")
            print(env.render())

    board = layout.to_board()
    policy = DecisionPolicy.for_board(board)
    record = play_game(board, policy, name=layout.name, on_move=on_move)

    print(f"Final score: {record.score} ({record.percentage_visited:.2f}% visited)")
    log = {"layout": format_layout(layout), "score": record.score, "moves": log_records}
    if args.log_file:
        save_log(log, Path(args.log_file))
    return log


def main() -> None:
    parser = argparse.ArgumentParser(description="Play one jump-and-erase board with the decision policy.")
    parser.add_argument("--board", type=str, default=None, help="Layout file; a random board is used otherwise.")
    parser.add_argument("--size", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--log-file", type=str, default=None)
    parser.add_argument("--replay", type=str, default=None, help="Replay a saved move log instead of playing.")
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    if args.replay:
        replay_logged_game(Path(args.replay))
        return
    play(args)


if __name__ == "__main__":
    main()
