"""Command-line entry point.

  rpg-structures play [--adventure PATH] [--start ID]
  rpg-structures evaluate --party 1 1 --opponents 25 25
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from rpg_structures.adventure_nodes import AdventureLoadError, build_graph, load_adventure
from rpg_structures.config import get_config
from rpg_structures.encounter_evaluator import evaluate, format_evaluation
from rpg_structures.run_game import run_game

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rpg-structures",
        description="Tabletop RPG mechanics as data structures",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="Play a gamebook adventure in the terminal")
    play.add_argument("--adventure", type=Path, default=None,
                      help="Adventure JSON file (default: built-in five-room dungeon)")
    play.add_argument("--start", type=int, default=None,
                      help="Starting node id (default: 1)")

    ev = sub.add_parser("evaluate", help="Classify the difficulty of an encounter")
    ev.add_argument("--party", type=int, nargs="+", required=True,
                    help="Level of each party member (1-20)")
    ev.add_argument("--opponents", type=float, nargs="*", default=[],
                    help="XP value of each opponent")

    return parser


def _play(args: argparse.Namespace, config: dict) -> int:
    adventure_file = args.adventure or config["adventure_file"]
    start = args.start if args.start is not None else config["start_node"]

    nodes = None
    if adventure_file is not None:
        try:
            nodes = load_adventure(adventure_file)
        except AdventureLoadError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    graph = build_graph(nodes, starting_node_id=start)
    if not graph.validate_graph():
        print("Error: adventure has choices pointing at missing nodes", file=sys.stderr)
        return 1

    try:
        run_game(graph)
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye.")
    return 0


def _evaluate(args: argparse.Namespace) -> int:
    try:
        evaluation = evaluate({"party": args.party, "opponents": args.opponents})
    except ValidationError as e:
        print(f"Error: invalid encounter\n{e}", file=sys.stderr)
        return 2
    print(format_evaluation(evaluation))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        config = get_config()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(level=config["log_level"],
                        format="%(levelname)s %(name)s: %(message)s")

    if args.command == "play":
        return _play(args, config)
    return _evaluate(args)


if __name__ == "__main__":
    sys.exit(main())
