from __future__ import annotations

from typing import List, Optional, Tuple

import pandas as pd
import streamlit as st

from sudokulite.engine import SolveResult, solve_puzzle
from sudokulite.models import BASE, SIZE, Board, validate_board
from sudokulite.render import grid_to_csv
from sudokulite.storage import (
    PuzzleFormatError,
    load_puzzle,
    parse_cell,
    parse_seed,
    resolve_puzzle_path,
)


def cell_key(r: int, c: int) -> str:
    return f"cell_{r}_{c}"


def reset_board() -> None:
    for r in range(SIZE):
        for c in range(SIZE):
            st.session_state[cell_key(r, c)] = ""


def fill_board(board: Board) -> None:
    for r in range(SIZE):
        for c in range(SIZE):
            v = board[r][c]
            st.session_state[cell_key(r, c)] = str(v) if v else ""


def parse_board() -> Tuple[Board, List[str]]:
    """
    Read cell widget values from session_state and build an int board.
    Returns (board, errors). Empty string or '0' => 0.
    """
    errors: List[str] = []
    board: Board = [[0] * SIZE for _ in range(SIZE)]

    for r in range(SIZE):
        for c in range(SIZE):
            raw = str(st.session_state.get(cell_key(r, c), ""))
            try:
                board[r][c] = parse_cell(raw)
            except PuzzleFormatError as e:
                errors.append(f"Cell ({r+1},{c+1}) {e}")

    return board, errors


def stats_df(result: SolveResult) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"metric": "status", "value": result.status},
            {"metric": "duration (ms)", "value": str(result.duration_ms)},
            {"metric": "assignments", "value": str(result.stats.assignments)},
            {"metric": "backtracks", "value": str(result.stats.backtracks)},
            {"metric": "max depth", "value": str(result.stats.max_depth)},
        ]
    )


def render_board_html(board: Board, title: str, givens: Optional[Board] = None) -> None:
    """
    Render a Sudoku grid with thick box borders using HTML/CSS.
    With `givens`, clues are bold and solver-placed digits are tinted.
    """
    html = [f"<div class='sudoku-wrap'><div class='sudoku-title'>{title}</div>"]
    html.append("<table class='sudoku'>")
    for r in range(SIZE):
        html.append("<tr>")
        for c in range(SIZE):
            v = board[r][c]
            cls = []
            if r % BASE == 0:
                cls.append("top")
            if c % BASE == 0:
                cls.append("left")
            if (r + 1) % BASE == 0:
                cls.append("bottom")
            if (c + 1) % BASE == 0:
                cls.append("right")
            if givens is not None and v:
                cls.append("given" if givens[r][c] else "filled")
            cls_attr = f" class='{' '.join(cls)}'" if cls else ""
            disp = "" if v == 0 else str(v)
            html.append(f"<td{cls_attr}>{disp}</td>")
        html.append("</tr>")
    html.append("</table></div>")

    st.markdown("".join(html), unsafe_allow_html=True)


st.set_page_config(page_title="Sudoku Solver", layout="wide")

GRID_CSS = """
<style>
div[data-testid="stTextInput"] input {
    text-align: center;
    font-size: 20px !important;
    height: 2.5rem;
    padding: 0.2rem;
}

.sudoku-wrap { margin-top: 0.75rem; }
.sudoku-title { font-weight: 600; margin-bottom: 0.3rem; }
table.sudoku { border-collapse: collapse; font-family: monospace; }
table.sudoku td {
    width: 2.5rem;
    height: 2.5rem;
    text-align: center;
    font-size: 20px;
    border: 1px solid #c8c8d0;
}
table.sudoku td.top { border-top: 2px solid #31333f; }
table.sudoku td.left { border-left: 2px solid #31333f; }
table.sudoku td.bottom { border-bottom: 2px solid #31333f; }
table.sudoku td.right { border-right: 2px solid #31333f; }
table.sudoku td.given { font-weight: 700; }
table.sudoku td.filled { color: #1e6ec8; }

.sudoku-spacer { height: 0.4rem; }
</style>
"""

st.markdown(GRID_CSS, unsafe_allow_html=True)

st.title("Sudoku Solver")
st.caption("Leave cells blank (or enter 0). Allowed values: 1..9. Click **Solve** to get the solution.")

# ---- Sidebar controls ----
with st.sidebar:
    st.header("Settings")
    shuffle = st.checkbox("Random candidate order", value=False)
    seed_raw = st.text_input("Seed (optional)", value="")

    st.divider()
    if st.button("Load default puzzle", use_container_width=True):
        try:
            fill_board(load_puzzle().rows())
        except (OSError, PuzzleFormatError) as e:
            st.error(f"Could not load {resolve_puzzle_path()}: {e}")
    if st.button("Reset board", use_container_width=True):
        reset_board()

# ---- Input grid in a form (prevents rerun on every keystroke) ----
st.subheader("Input")

with st.form("sudoku_form", clear_on_submit=False):
    spacer_w = 0.18
    widths = []
    for g in range(BASE):
        widths.extend([1.0] * BASE)
        if g != BASE - 1:
            widths.append(spacer_w)

    for r in range(SIZE):
        cols = st.columns(widths, gap="small")
        col_idx = 0
        for c in range(SIZE):
            if c > 0 and c % BASE == 0:
                col_idx += 1  # skip spacer column
            with cols[col_idx]:
                key = cell_key(r, c)
                if key not in st.session_state:
                    st.session_state[key] = ""
                st.text_input(
                    label="",
                    key=key,
                    label_visibility="collapsed",
                    placeholder="",
                )
            col_idx += 1

        if (r + 1) % BASE == 0 and (r + 1) != SIZE:
            st.markdown("<div class='sudoku-spacer'></div>", unsafe_allow_html=True)

    colA, colB, _ = st.columns([1, 1, 2])
    validate_clicked = colA.form_submit_button("Validate", use_container_width=True)
    solve_clicked = colB.form_submit_button("Solve", use_container_width=True)

# ---- Actions ----
if validate_clicked or solve_clicked:
    board, parse_errors = parse_board()
    seed = None
    try:
        seed = parse_seed(seed_raw)
    except PuzzleFormatError as e:
        parse_errors.append(str(e))

    if parse_errors:
        st.error("Please fix these input issues:")
        st.write("\n".join([f"- {e}" for e in parse_errors]))
    else:
        ok, msg = validate_board(board)
        if not ok:
            st.error(msg)
        else:
            st.success("Board looks valid.")
            render_board_html(board, "Current board (preview)")

            if solve_clicked:
                result = solve_puzzle(board, seed=seed, shuffle=shuffle)
                if not result.solved:
                    st.error("No solution found (the puzzle may be unsolvable).")
                else:
                    st.success("Solution found")
                    render_board_html(result.grid.rows(), "Solution", givens=board)

                    st.download_button(
                        "Download solution as CSV",
                        data=grid_to_csv(result.grid),
                        file_name="sudoku_solution_9x9.csv",
                        mime="text/csv",
                        use_container_width=False,
                    )
                st.dataframe(stats_df(result), use_container_width=True, hide_index=True)
else:
    board, _ = parse_board()
    render_board_html(board, "Current board (preview)")
