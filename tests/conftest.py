from __future__ import annotations

import pytest

CLASSIC = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def _dead_end():
    # (0,0) can hold nothing: its row has 2..9 and its column has 1.
    board = [[0] * 9 for _ in range(9)]
    board[0] = [0, 2, 3, 4, 5, 6, 7, 8, 9]
    board[1][0] = 1
    return board


def as_text(board) -> str:
    return "\n".join(" ".join(str(v) for v in row) for row in board) + "\n"


@pytest.fixture
def classic():
    return [row[:] for row in CLASSIC]


@pytest.fixture
def classic_solution():
    return [row[:] for row in CLASSIC_SOLUTION]


@pytest.fixture
def dead_end():
    return _dead_end()


@pytest.fixture
def empty_board():
    return [[0] * 9 for _ in range(9)]


@pytest.fixture
def puzzle_file(tmp_path, classic):
    p = tmp_path / "puzzle.txt"
    p.write_text(as_text(classic), encoding="utf-8")
    return p
