import argparse
import json

from hopscotch.core import DIRECTION_NAMES
from hopscotch.io import parse_layout, save_layout

from scripts.play_board import play, replay_logged_game
from scripts.run_benchmark import main as run_benchmark_main

LAYOUT = "5\n2 2\n1 2 1 2 1\n2 1 1 1 2\n1 1 3 1 1\n2 1 1 1 2\n1 2 1 2 1\n"


def test_benchmark_script(tmp_path, capsys):
    board_path = tmp_path / "board_5x5_1.dat"
    save_layout(parse_layout(LAYOUT), board_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("policy:\n  survival_depth: 4\n  evaluator:\n    lookahead_depth: 2\n")
    results_path = tmp_path / "results" / "test_results.txt"

    output = run_benchmark_main(
        [
            str(board_path),
            "--config",
            str(config_path),
            "--random-sizes",
            "5",
            "--random-count",
            "2",
            "--seed",
            "1",
            "--results-file",
            str(results_path),
        ]
    )

    assert output["games_played"] == 3
    assert json.loads(capsys.readouterr().out)["games_played"] == 3
    assert "Average Score:" in results_path.read_text()


def test_play_log_replays_to_same_score(tmp_path):
    board_path = tmp_path / "board.dat"
    save_layout(parse_layout(LAYOUT), board_path)
    log_path = tmp_path / "logs" / "game.json"
    args = argparse.Namespace(board=str(board_path), size=5, seed=None, verbose=False, log_file=str(log_path))

    log = play(args)
    summary = replay_logged_game(log_path, verbose=False)

    assert summary["moves"] == len(log["moves"])
    assert summary["score"] == log["score"]
    assert summary["position"] == log["moves"][-1]["to"]


def test_play_verbose_names_directions(tmp_path, capsys):
    board_path = tmp_path / "board.dat"
    save_layout(parse_layout(LAYOUT), board_path)
    args = argparse.Namespace(board=str(board_path), size=5, seed=None, verbose=True, log_file=None)

    log = play(args)
    out = capsys.readouterr().out

    first = log["moves"][0]
    assert first["direction"] == DIRECTION_NAMES[first["action_index"]]
    assert f"move 1: {first['direction']} -> ({first['to'][0]}, {first['to'][1]})" in out
