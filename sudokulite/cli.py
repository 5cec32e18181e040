from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .engine import solve_puzzle
from .render import format_grid
from .storage import PuzzleFormatError, load_puzzle, resolve_puzzle_path

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudokulite",
        description="Solve a 9x9 Sudoku puzzle by recursive backtracking.",
    )
    parser.add_argument(
        "puzzle", nargs="?", default=None,
        help="Puzzle file: 81 whitespace-separated digits, 0 for blank "
             "(default: $SUDOKULITE_PUZZLE or ./puzzles/puzzle1.txt)")
    parser.add_argument(
        "--shuffle", action="store_true",
        help="Try candidate digits in random order")
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the random candidate order (implies --shuffle)")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every backtrack")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    puzzle_file = args.puzzle or resolve_puzzle_path()
    print("\nSudoku Puzzle Solver")
    print(f"Loading puzzle file {puzzle_file}")
    try:
        grid = load_puzzle(puzzle_file)
    except (OSError, PuzzleFormatError) as e:
        log.error("Could not load %s: %s", puzzle_file, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_grid(grid))

    result = solve_puzzle(grid.rows(), seed=args.seed, shuffle=args.shuffle)
    if result.solved:
        print(format_grid(result.grid))
    else:
        print(result.message)
        print(format_grid(grid))
    return 0
