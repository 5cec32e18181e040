from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .models import DIGITS, SIZE, Grid, validate_board

log = logging.getLogger(__name__)

LAST = SIZE - 1


@dataclass
class SolveStats:
    assignments: int = 0  # tentative placements
    backtracks: int = 0   # retractions after a dead end
    max_depth: int = 0


@dataclass
class SolveResult:
    status: str  # "solved" | "no-solution" | "invalid"
    grid: Optional[Grid]
    duration_ms: int
    stats: SolveStats = field(default_factory=SolveStats)
    message: str = ""

    @property
    def solved(self) -> bool:
        return self.status == "solved"


class Backtracker:
    """
    Row-major recursive backtracking over a Grid, mutated in place.
    Given (non-zero) cells are skipped and never reassigned.
    """

    def __init__(self, grid: Grid, rng: Optional[random.Random] = None) -> None:
        self.grid = grid
        self.rng = rng
        self.stats = SolveStats()

    def candidates(self) -> List[int]:
        digits = list(DIGITS)
        if self.rng is not None:
            self.rng.shuffle(digits)
        return digits

    def solve(self, row: int = 0, col: int = 0, depth: int = 0) -> bool:
        if depth > self.stats.max_depth:
            self.stats.max_depth = depth

        # past the last cell of the last row
        if row == LAST and col > LAST:
            return True
        if col > LAST:
            return self.solve(row + 1, 0, depth + 1)
        if self.grid.get(row, col) != 0:
            return self.solve(row, col + 1, depth + 1)

        for digit in self.candidates():
            self.grid.set(row, col, digit)
            self.stats.assignments += 1
            if not self.grid.has_conflict(row, col):
                if self.solve(row, col + 1, depth + 1):
                    return True
                self.stats.backtracks += 1
                log.debug("Backtrack: r%dc%d != %d", row + 1, col + 1, digit)
            self.grid.set(row, col, 0)

        self.grid.set(row, col, 0)
        return False


def solve_puzzle(
    board: Sequence[Sequence[int]],
    seed: Optional[int] = None,
    shuffle: bool = False,
) -> SolveResult:
    """
    Solve a copy of `board`. The caller's board is not mutated.

    Candidate digits are tried in ascending order unless `shuffle` is set or a
    `seed` is given, in which case each cell visit draws a permutation of 1..9.
    """
    start = time.time()
    ok, msg = validate_board(board)
    if not ok:
        log.info("Rejected givens: %s", msg)
        return SolveResult(
            status="invalid",
            grid=None,
            duration_ms=int((time.time() - start) * 1000),
            message=msg,
        )

    grid = Grid.from_rows(board)
    rng = random.Random(seed) if (shuffle or seed is not None) else None
    solver = Backtracker(grid, rng=rng)

    log.info("Solve start (%d givens)", len(grid.givens()))
    solved = solver.solve(0, 0)
    duration_ms = int((time.time() - start) * 1000)
    log.info(
        "Solve end in %d ms; %d assignments, %d backtracks",
        duration_ms,
        solver.stats.assignments,
        solver.stats.backtracks,
    )

    if not solved:
        return SolveResult(
            status="no-solution",
            grid=None,
            duration_ms=duration_ms,
            stats=solver.stats,
            message="No solution found.",
        )
    return SolveResult(
        status="solved",
        grid=grid,
        duration_ms=duration_ms,
        stats=solver.stats,
        message="Solved successfully.",
    )
