import json
from pathlib import Path

import numpy as np
import pytest

from picross.core.errors import FormatError, InvalidArgument
from picross.core.puzzle import Puzzle
from picross.data.loader import (
    format_grid_art,
    load_grid,
    load_puzzle,
    parse_grid_art,
    save_grid,
    save_puzzle,
)

PUZZLE_TEXT = "1\n2\n0\n\n1 1\n1\n"


class TestPuzzleFiles:
    @pytest.fixture
    def puzzle(self) -> Puzzle:
        return Puzzle.from_text(PUZZLE_TEXT)

    def test_load_text(self, tmp_path: Path, puzzle: Puzzle) -> None:
        path = tmp_path / "p.txt"
        path.write_text(PUZZLE_TEXT)
        assert load_puzzle(path) == puzzle

    def test_load_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_puzzle(tmp_path / "missing.txt")

    def test_json_round_trip(self, tmp_path: Path, puzzle: Puzzle) -> None:
        path = save_puzzle(puzzle, tmp_path / "out" / "p.json", puzzle_id="tiny")
        data = json.loads(path.read_text())
        assert data["id"] == "tiny"
        assert data["column_clues"] == [[1], [2], []]
        assert load_puzzle(path) == puzzle

    def test_text_round_trip(self, tmp_path: Path, puzzle: Puzzle) -> None:
        path = save_puzzle(puzzle, tmp_path / "p.txt")
        assert path.read_text() == PUZZLE_TEXT
        assert load_puzzle(path) == puzzle

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(FormatError):
            load_puzzle(path)

    def test_load_non_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "p.txt"
        path.write_bytes(b"1\n\xff\xfe\n\n1\n")
        with pytest.raises(FormatError, match="UTF-8"):
            load_puzzle(path)

    def test_json_with_wrong_types(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"width": "3", "height": 1, "column_clues": [], "row_clues": []}))
        with pytest.raises(FormatError):
            load_puzzle(path)

    def test_json_with_inconsistent_counts(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"width": 2, "height": 1, "column_clues": [[1]], "row_clues": [[1]]}))
        with pytest.raises(InvalidArgument):
            load_puzzle(path)


class TestGridArt:
    def test_parse(self) -> None:
        grid = parse_grid_art("#.#\n\n.X.\n")
        assert grid.tolist() == [[True, False, True], [False, True, False]]

    def test_digits_and_underscores(self) -> None:
        assert parse_grid_art("10_\n").tolist() == [[True, False, False]]

    def test_ragged(self) -> None:
        with pytest.raises(FormatError, match="line 2"):
            parse_grid_art("##\n#\n")

    def test_unknown_character(self) -> None:
        with pytest.raises(FormatError):
            parse_grid_art("#?#\n")

    def test_empty(self) -> None:
        with pytest.raises(FormatError):
            parse_grid_art("\n\n")

    def test_format_and_load(self, tmp_path: Path) -> None:
        grid = np.array([[1, 0], [0, 1]], dtype=bool)
        path = tmp_path / "g.txt"
        path.write_text(format_grid_art(grid))
        assert path.read_text() == "#.\n.#\n"
        assert np.array_equal(load_grid(path), grid)

    def test_save_grid(self, tmp_path: Path) -> None:
        grid = np.array([[0, 1, 1]], dtype=bool)
        path = save_grid(grid, tmp_path / "nested" / "g.txt")
        assert path.read_text() == ".##\n"
        assert np.array_equal(load_grid(path), grid)
