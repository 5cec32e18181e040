from __future__ import annotations

import os
from typing import List, Optional

from .models import SIZE, Grid, validate_board

CELL_COUNT = SIZE * SIZE


class PuzzleFormatError(ValueError):
    """Puzzle text is not 81 digits in 0..9 forming legal givens."""


def default_puzzle_path() -> str:
    return os.path.join(".", "puzzles", "puzzle1.txt")


def resolve_puzzle_path() -> str:
    return os.environ.get("SUDOKULITE_PUZZLE", default_puzzle_path())


def parse_puzzle(text: str) -> Grid:
    """
    Read 81 whitespace-separated integers in row-major order.
    0 = blank, 1..9 = given.
    """
    tokens = text.split()
    if len(tokens) != CELL_COUNT:
        raise PuzzleFormatError(f"Expected {CELL_COUNT} values, found {len(tokens)}.")

    values: List[int] = []
    for i, tok in enumerate(tokens):
        try:
            v = int(tok)
        except ValueError:
            raise PuzzleFormatError(f"Token {i+1} is not a number: '{tok}'") from None
        if v < 0 or v > SIZE:
            r, c = divmod(i, SIZE)
            raise PuzzleFormatError(f"Cell ({r+1},{c+1}) out of range: {v} (allowed 0..9).")
        values.append(v)

    rows = [values[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]
    ok, msg = validate_board(rows)
    if not ok:
        raise PuzzleFormatError(msg)
    return Grid.from_rows(rows)


def load_puzzle(path: Optional[str] = None) -> Grid:
    p = path or resolve_puzzle_path()
    with open(p, "r", encoding="utf-8") as f:
        return parse_puzzle(f.read())


def parse_cell(raw: str) -> int:
    """Blank or '0' => 0; otherwise a digit 1..9."""
    raw = raw.strip()
    if raw == "":
        return 0
    try:
        v = int(raw)
    except ValueError:
        raise PuzzleFormatError(f"not a number: '{raw}'") from None
    if v < 0 or v > SIZE:
        raise PuzzleFormatError(f"out of range: {v} (allowed 1..9, or blank/0).")
    return v


def parse_seed(raw: str) -> Optional[int]:
    raw = raw.strip()
    if raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise PuzzleFormatError(f"Seed is not an integer: '{raw}'") from None
