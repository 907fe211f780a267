import numbers
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from picross.core.errors import IndexOutOfRange, InvalidArgument
from picross.core.runs import as_grid, run_lengths
from picross.core.textformat import Clue, parse_puzzle_text
from picross.schemas.puzzle import LineKind, PuzzleRecord

MIN_DIMENSION = 1
MIN_CLUE_VALUE = 1
PLACEHOLDER_SIZE = 1


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < MIN_DIMENSION:
        raise InvalidArgument(f"{name} must be at least {MIN_DIMENSION}, got {value}")
    return int(value)


def _checked_clue(clue: Iterable[int]) -> Clue:
    values = tuple(clue)
    for value in values:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidArgument(f"clue values must be integers, got {value!r}")
        if value < MIN_CLUE_VALUE:
            raise InvalidArgument(f"clue values must be positive, got {list(values)}")
    return tuple(int(v) for v in values)


class Puzzle:
    """
    A Picross puzzle: the grid dimensions plus one clue per column and per row.

    Grids handed to the puzzle are row-major, ``grid[row][col]``, so their
    shape is ``(height, width)``.
    """

    def __init__(self, width: int, height: int):
        self._width = _check_dimension("width", width)
        self._height = _check_dimension("height", height)
        self._column_clues: List[Clue] = [()] * self._width
        self._row_clues: List[Clue] = [()] * self._height

    @classmethod
    def empty(cls) -> "Puzzle":
        """Placeholder puzzle shown before anything real is loaded."""
        return cls(PLACEHOLDER_SIZE, PLACEHOLDER_SIZE)

    @classmethod
    def _from_clues(cls, column_clues: Sequence[Clue], row_clues: Sequence[Clue]) -> "Puzzle":
        puzzle = cls(len(column_clues), len(row_clues))
        for i, clue in enumerate(column_clues):
            puzzle.set_column_clue(i, clue)
        for j, clue in enumerate(row_clues):
            puzzle.set_row_clue(j, clue)
        return puzzle

    @classmethod
    def from_text(cls, text: str) -> "Puzzle":
        column_clues, row_clues = parse_puzzle_text(text)
        return cls._from_clues(column_clues, row_clues)

    @classmethod
    def from_solution(cls, cells) -> "Puzzle":
        """Derives the clues of every column and row from a known solution grid."""
        grid = as_grid(cells)
        column_clues = [run_lengths(grid[:, i]) for i in range(grid.shape[1])]
        row_clues = [run_lengths(grid[j, :]) for j in range(grid.shape[0])]
        return cls._from_clues(column_clues, row_clues)

    @classmethod
    def from_record(cls, record: PuzzleRecord) -> "Puzzle":
        if len(record.column_clues) != record.width:
            raise InvalidArgument(
                f"width is {record.width} but {len(record.column_clues)} column clues given"
            )
        if len(record.row_clues) != record.height:
            raise InvalidArgument(
                f"height is {record.height} but {len(record.row_clues)} row clues given"
            )
        return cls._from_clues(record.column_clues, record.row_clues)

    def to_record(self, puzzle_id: str = "unknown") -> PuzzleRecord:
        return PuzzleRecord(
            width=self._width,
            height=self._height,
            column_clues=[list(c) for c in self._column_clues],
            row_clues=[list(r) for r in self._row_clues],
            id=puzzle_id,
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def column_clues(self) -> Tuple[Clue, ...]:
        return tuple(self._column_clues)

    @property
    def row_clues(self) -> Tuple[Clue, ...]:
        return tuple(self._row_clues)

    def _check_index(self, kind: LineKind, index: int) -> int:
        limit = self._width if kind is LineKind.COLUMN else self._height
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise IndexOutOfRange(f"{kind.value} index must be an integer, got {index!r}")
        if not 0 <= index < limit:
            raise IndexOutOfRange(f"{kind.value} index {index} out of range [0, {limit})")
        return int(index)

    def column_clue(self, index: int) -> Clue:
        return self._column_clues[self._check_index(LineKind.COLUMN, index)]

    def row_clue(self, index: int) -> Clue:
        return self._row_clues[self._check_index(LineKind.ROW, index)]

    def set_column_clue(self, index: int, clue: Iterable[int]) -> None:
        """Replaces the clue of one column. Use an empty sequence for a blank line."""
        index = self._check_index(LineKind.COLUMN, index)
        self._column_clues[index] = _checked_clue(clue)

    def set_row_clue(self, index: int, clue: Iterable[int]) -> None:
        """Replaces the clue of one row. Use an empty sequence for a blank line."""
        index = self._check_index(LineKind.ROW, index)
        self._row_clues[index] = _checked_clue(clue)

    def _fits(self, cells) -> Optional[np.ndarray]:
        try:
            grid = as_grid(cells)
        except InvalidArgument:
            return None
        if grid.shape != (self._height, self._width):
            return None
        return grid

    def verify_solution(self, cells) -> bool:
        """
        Whether ``cells`` is a solution of this puzzle. Ambiguous puzzles have
        more than one; any of them verifies. A grid of the wrong shape is simply
        not a solution.
        """
        grid = self._fits(cells)
        if grid is None:
            return False

        for i, clue in enumerate(self._column_clues):
            if run_lengths(grid[:, i]) != clue:
                return False
        for j, clue in enumerate(self._row_clues):
            if run_lengths(grid[j, :]) != clue:
                return False
        return True

    def line_mismatches(self, cells) -> List[Tuple[LineKind, int]]:
        grid = self._fits(cells)
        if grid is None:
            raise InvalidArgument(
                f"grid does not match puzzle dimensions {self._height}x{self._width} (rows x columns)"
            )

        mismatches = [
            (LineKind.COLUMN, i)
            for i, clue in enumerate(self._column_clues)
            if run_lengths(grid[:, i]) != clue
        ]
        mismatches.extend(
            (LineKind.ROW, j)
            for j, clue in enumerate(self._row_clues)
            if run_lengths(grid[j, :]) != clue
        )
        return mismatches

    def __eq__(self, other):
        if not isinstance(other, Puzzle):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._column_clues == other._column_clues
            and self._row_clues == other._row_clues
        )

    __hash__ = None

    def __repr__(self):
        return f"Puzzle(width={self._width}, height={self._height})"
