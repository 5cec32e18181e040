from __future__ import annotations

import os

import pytest

from sudokulite.storage import (
    PuzzleFormatError,
    default_puzzle_path,
    load_puzzle,
    parse_cell,
    parse_puzzle,
    parse_seed,
    resolve_puzzle_path,
)

from .conftest import as_text


def test_parse_puzzle(classic):
    g = parse_puzzle(as_text(classic))
    assert g.rows() == classic


def test_parse_accepts_any_whitespace(classic):
    flat = " ".join(str(v) for row in classic for v in row)
    assert parse_puzzle("\t" + flat.replace(" ", "\n  ")).rows() == classic


def test_parse_rejects_wrong_count(classic):
    text = as_text(classic) + " 0"
    with pytest.raises(PuzzleFormatError, match="Expected 81 values, found 82"):
        parse_puzzle(text)


def test_parse_rejects_non_number(classic):
    text = as_text(classic).replace("5", "x", 1)
    with pytest.raises(PuzzleFormatError, match="Token 1 is not a number"):
        parse_puzzle(text)


def test_parse_rejects_out_of_range(classic):
    classic[1][1] = 12
    with pytest.raises(PuzzleFormatError, match=r"Cell \(2,2\) out of range"):
        parse_puzzle(as_text(classic))


def test_parse_rejects_duplicate_givens(classic):
    classic[0][8] = 5
    with pytest.raises(PuzzleFormatError, match="Conflict"):
        parse_puzzle(as_text(classic))


def test_format_error_is_value_error():
    assert issubclass(PuzzleFormatError, ValueError)


def test_load_puzzle(puzzle_file, classic):
    assert load_puzzle(str(puzzle_file)).rows() == classic


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_puzzle(str(tmp_path / "nope.txt"))


def test_default_path():
    assert default_puzzle_path() == os.path.join(".", "puzzles", "puzzle1.txt")


def test_resolve_path_from_env(monkeypatch, puzzle_file, classic):
    monkeypatch.setenv("SUDOKULITE_PUZZLE", str(puzzle_file))
    assert resolve_puzzle_path() == str(puzzle_file)
    assert load_puzzle().rows() == classic


def test_resolve_path_default(monkeypatch):
    monkeypatch.delenv("SUDOKULITE_PUZZLE", raising=False)
    assert resolve_puzzle_path() == default_puzzle_path()


def test_parse_cell():
    assert parse_cell("") == 0
    assert parse_cell("  ") == 0
    assert parse_cell("0") == 0
    assert parse_cell(" 7 ") == 7


@pytest.mark.parametrize("raw", ["x", "²", "1.5", "--3"])
def test_parse_cell_rejects_non_number(raw):
    with pytest.raises(PuzzleFormatError, match="not a number"):
        parse_cell(raw)


def test_parse_cell_rejects_out_of_range():
    with pytest.raises(PuzzleFormatError, match="out of range: 10"):
        parse_cell("10")
    with pytest.raises(PuzzleFormatError, match="out of range: -1"):
        parse_cell("-1")


def test_parse_seed():
    assert parse_seed("") is None
    assert parse_seed(" 42 ") == 42
    assert parse_seed("-5") == -5


@pytest.mark.parametrize("raw", ["--5", "abc", "4.2"])
def test_parse_seed_rejects_non_integer(raw):
    with pytest.raises(PuzzleFormatError, match="Seed is not an integer"):
        parse_seed(raw)
