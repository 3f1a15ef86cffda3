"""
Main entry point for generating and playing word search puzzles.

Usage:
    python -m src.main config.yaml
    python -m src.main config.yaml --output puzzles/round1.json --verbose
    python -m src.main --difficulty medium --seed 7 --play
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .engine import WordSearchError
from .game import PuzzleConfig, WordSearchGame


def load_config(config_path: str) -> PuzzleConfig:
    """Load puzzle configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return PuzzleConfig(**data)


def build_config(args: argparse.Namespace) -> PuzzleConfig:
    """Merge command-line overrides on top of the config file (if any)."""
    data: Dict[str, Any] = {}
    if args.config:
        data = load_config(args.config).model_dump(exclude_unset=True)

    overrides = {
        "difficulty": args.difficulty,
        "grid_size": args.grid_size,
        "rounds": args.rounds,
        "seed": args.seed,
        "words": args.words.split(",") if args.words else None,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    if args.straight_only:
        data["straight_only"] = True

    return PuzzleConfig(**data)


def save_puzzle(game: WordSearchGame, path: Path) -> None:
    """Save the current round's grid and placements to a JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        json.dump(
            {
                "config": game.config.model_dump(),
                "round": game.current_round.get_state(),
            },
            f,
            indent=2,
            default=str
        )


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate and play word search puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  difficulty: medium
  grid_size: 8
  rounds: 3
  seed: 42
  words:
    - CAT
    - DOG
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (optional)"
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=["easy", "medium", "hard"],
        help="Word bank difficulty"
    )
    parser.add_argument(
        "--grid-size", "-n",
        type=int,
        help="Width and height of the grid"
    )
    parser.add_argument(
        "--rounds", "-r",
        type=int,
        help="Number of rounds to play"
    )
    parser.add_argument(
        "--words", "-w",
        help="Comma-separated words to use instead of the word bank"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible grids"
    )
    parser.add_argument(
        "--straight-only",
        action="store_true",
        help="Only accept straight-line selections"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the generated puzzle as JSON"
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Play the game interactively"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    game = WordSearchGame.create(config=config)

    try:
        current = game.start_round()
    except WordSearchError as e:
        print(f"Error generating puzzle: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        if args.config:
            print(f"Config: {args.config}")
        print(f"Difficulty: {config.difficulty}")
        print(f"Seed: {config.seed}")
        print()

    if args.output:
        output_path = Path(args.output)
        save_puzzle(game, output_path)
        if args.verbose:
            print(f"Puzzle saved to: {output_path}")
            print()

    if not args.play:
        print(current.grid.render())
        print()
        print(f"Words: {' '.join(current.words)}")
        return 0

    try:
        result = game.run(verbose=args.verbose)
    except KeyboardInterrupt:
        print("\nGame interrupted by player")
        game.end_reason = "Interrupted by player"
        result = game.get_result()
    except WordSearchError as e:
        print(f"Error during game: {e}", file=sys.stderr)
        return 1

    # Print summary
    print()
    print("=== Game Summary ===")
    print(f"Rounds played: {len(result.rounds)}")
    print(f"Words found: {result.words_found}")
    print(f"End reason: {result.end_reason}")
    print(f"Duration: {result.duration_seconds:.2f}s")

    return 0


if __name__ == "__main__":
    sys.exit(main())
