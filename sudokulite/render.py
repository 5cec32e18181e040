from __future__ import annotations

from typing import List

import pandas as pd

from .models import BASE, SIZE, Grid

BORDER = "  +-----------+-----------+-----------+"


def format_grid(grid: Grid) -> str:
    """
    Bordered text grid. Blank cells print as a space; boxes are delimited
    every 3 rows and columns.
    """
    lines: List[str] = [BORDER]
    for r in range(SIZE):
        parts: List[str] = []
        for c in range(SIZE):
            v = grid.get(r, c)
            value = " " if v == 0 else str(v)
            parts.append(f"  |  {value}" if c % BASE == 0 else f"  {value}")
        lines.append("".join(parts) + "  |")
        if (r + 1) % BASE == 0:
            lines.append(BORDER)
    return "\n".join(lines)


def grid_frame(grid: Grid) -> pd.DataFrame:
    """One row per puzzle row, columns c1..c9, indexed r1..r9."""
    return pd.DataFrame(
        grid.rows(),
        columns=[f"c{c+1}" for c in range(SIZE)],
        index=[f"r{r+1}" for r in range(SIZE)],
    )


def grid_to_csv(grid: Grid) -> bytes:
    return grid_frame(grid).to_csv(index_label="row", lineterminator="\n").encode("utf-8")
