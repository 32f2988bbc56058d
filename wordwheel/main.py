"""
Developer preview: generate levels and print them with their validation result.

Usage:
    python -m wordwheel.main --level 3
    python -m wordwheel.main config.yaml --level 6 --seed 12345 --count 3 --verbose
"""

import argparse
import logging
import sys

from .config import WordwheelConfig, load_config
from .dictionary import DictionaryIndex
from .generator import LevelGenerator
from .models import Puzzle
from .verifiers import build_grid, check_puzzle, render_grid


def format_puzzle(puzzle: Puzzle) -> str:
    grid, _ = build_grid(puzzle.placements)
    lines = [
        f"Level {puzzle.level_number}: base word {puzzle.base_word}",
        f"Grid {puzzle.grid_size.rows}x{puzzle.grid_size.cols}",
        render_grid(grid),
        "Words: " + ", ".join(
            f"{p.word} ({p.direction[0].upper()} @ {p.start_row},{p.start_col})"
            for p in puzzle.placements
        ),
        "Wheel: " + " ".join(puzzle.wheel_letters),
    ]
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(
        description="Generate and preview wordwheel levels",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  generator:
    max_attempts: 50
    min_words: 6
    max_words: 10
  dictionary:
    words_path: words.txt
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )
    parser.add_argument(
        "--level", "-l",
        type=int,
        default=1,
        help="Level number to generate (default: 1)"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        help="Seed for reproducible generation"
    )
    parser.add_argument(
        "--count", "-n",
        type=int,
        default=1,
        help="Number of consecutive levels to generate"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log dictionary loading and rejected attempts"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.config:
        try:
            config = load_config(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1
    else:
        config = WordwheelConfig()

    dictionary = DictionaryIndex.create(
        config.dictionary, base_word_length=config.generator.base_word_length
    )
    generator = LevelGenerator(dictionary, config.generator, seed=args.seed)

    if args.verbose:
        print(f"Dictionary: {dictionary.stats()}")
        print()

    status = 0
    for level in range(args.level, args.level + args.count):
        puzzle = generator.generate_puzzle(level)
        if puzzle is None:
            print(f"Level {level}: no puzzle found", file=sys.stderr)
            status = 1
            continue

        result = check_puzzle(puzzle, dictionary, config.generator)
        print(format_puzzle(puzzle))
        print(f"Valid: {result.valid}")
        for error in result.errors:
            print(f"  {error.code}: {error.message}")
        print()

    return status


if __name__ == "__main__":
    sys.exit(main())
