from __future__ import annotations

from typing import List, Sequence, Set, Tuple

Board = List[List[int]]  # 0 = empty, values 1..9
Cell = Tuple[int, int]

SIZE = 9
BASE = 3
DIGITS = range(1, SIZE + 1)


def box_origin(row: int, col: int) -> Cell:
    return (row // BASE) * BASE, (col // BASE) * BASE


class Grid:
    """Mutable 9x9 puzzle state. Values are 0 (empty) or 1..9."""

    def __init__(self) -> None:
        self.cells: Board = [[0 for _ in range(SIZE)] for _ in range(SIZE)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Grid must be 9 x 9.")
        grid = cls()
        for r in range(SIZE):
            for c in range(SIZE):
                grid.cells[r][c] = int(rows[r][c])
        return grid

    def get(self, row: int, col: int) -> int:
        return self.cells[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        self.cells[row][col] = value

    def has_conflict(self, row: int, col: int) -> bool:
        """
        True if the value at (row, col) also appears elsewhere in its row,
        column or 3x3 box. An empty cell never conflicts.
        """
        v = self.cells[row][col]
        if v == 0:
            return False

        for c in range(SIZE):
            if c != col and self.cells[row][c] == v:
                return True

        for r in range(SIZE):
            if r != row and self.cells[r][col] == v:
                return True

        r0, c0 = box_origin(row, col)
        for r in range(r0, r0 + BASE):
            for c in range(c0, c0 + BASE):
                if (r, c) != (row, col) and self.cells[r][c] == v:
                    return True

        return False

    def rows(self) -> Board:
        return [row[:] for row in self.cells]

    def givens(self) -> Set[Cell]:
        return {(r, c) for r in range(SIZE) for c in range(SIZE) if self.cells[r][c]}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        filled = sum(1 for row in self.cells for v in row if v)
        return f"Grid(filled={filled}/81)"


def validate_board(board: Sequence[Sequence[int]]) -> Tuple[bool, str]:
    """
    Checks:
      - board is 9 x 9
      - values in 0..9
      - no duplicate values in any row/col/box (ignoring 0)
    """
    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        return False, "Board must be 9 x 9."

    row_used = [0] * SIZE
    col_used = [0] * SIZE
    box_used = [0] * SIZE

    for r in range(SIZE):
        for c in range(SIZE):
            v = board[r][c]
            if not isinstance(v, int) or isinstance(v, bool):
                return False, f"Invalid value at ({r+1},{c+1}): {v!r} (not an integer)."
            if v < 0 or v > SIZE:
                return False, f"Invalid value at ({r+1},{c+1}): {v} (allowed: 0..9)."
            if v == 0:
                continue

            bit = 1 << v
            b = (r // BASE) * BASE + (c // BASE)

            if (row_used[r] & bit) or (col_used[c] & bit) or (box_used[b] & bit):
                return False, f"Conflict: value {v} appears twice in a row/column/box (cell {r+1},{c+1})."

            row_used[r] |= bit
            col_used[c] |= bit
            box_used[b] |= bit

    return True, "OK"


def is_solution(board: Sequence[Sequence[int]]) -> bool:
    """Every row, column and box holds 1..9 exactly once."""
    ok, _ = validate_board(board)
    if not ok:
        return False
    return all(v != 0 for row in board for v in row)
