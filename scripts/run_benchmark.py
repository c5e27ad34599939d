#!/usr/bin/env python3
"""Play the decision policy over a set of boards and report visited percentages.

Example:
  python scripts/run_benchmark.py boards/*.dat --config configs/default.yaml
  python scripts/run_benchmark.py --random-sizes 10 25 --random-count 5 --seed 0
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List

import numpy as np
import yaml

from hopscotch.evaluation import (
    EvaluationResult,
    default_policy_factory,
    evaluate_layouts,
    run_benchmark,
    summarise,
)
from hopscotch.io import BoardLayout, random_layout
from hopscotch.policy import PolicyConfig


def load_yaml_config(path_str: str) -> Dict:
    path = Path(path_str)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def build_random_layouts(sizes: List[int], count: int, seed) -> List[BoardLayout]:
    rng = np.random.default_rng(seed)
    layouts = []
    for size in sizes:
        for index in range(count):
            layout = random_layout(size, rng)
            layout.name = f"random_{size}x{size}_{index + 1}"
            layouts.append(layout)
    return layouts


def append_results(path: Path, result: EvaluationResult) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write("-------------------\n")
        handle.write(f"Boards played: {result.games_played}\n")
        handle.write(f"Average Score: {result.average_percentage:.2f}%\n")
        handle.write("-------------------\n\n")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark the jump-and-erase policy.")
    parser.add_argument("boards", nargs="*", help="Board layout files to play.")
    parser.add_argument("--config", type=str, default=None, help="YAML file with a 'policy' section.")
    parser.add_argument("--random-sizes", type=int, nargs="*", default=[], help="Also play random boards of these sizes.")
    parser.add_argument("--random-count", type=int, default=5)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--results-file", type=str, default=None, help="Append a summary to this file.")
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser.parse_args(argv)


def main(argv=None) -> Dict:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    cfg = load_yaml_config(args.config) if args.config else {}
    policy_config = PolicyConfig.from_dict(cfg.get("policy"))
    factory = default_policy_factory(policy_config)

    file_result = run_benchmark(args.boards, factory)
    random_result = evaluate_layouts(
        build_random_layouts(args.random_sizes, args.random_count, args.seed),
        factory,
    )
    records = file_result.records + random_result.records
    result = summarise(records)
    output = result.as_dict()
    print(json.dumps(output, indent=2))

    if args.results_file:
        append_results(Path(args.results_file), result)
    return output


if __name__ == "__main__":
    main()
