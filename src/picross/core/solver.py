from typing import Iterable, Iterator, Optional, Protocol

import numpy as np

from picross.core.errors import IndexOutOfRange
from picross.core.puzzle import Puzzle
from picross.schemas.puzzle import SolveReport, Touch

UNKNOWN = -1
OFF = 0
ON = 1


class Solver(Protocol):
    """
    What a solver must offer to be driven against a Puzzle.

    ``solve`` yields one Touch per pixel as it becomes determined and must
    not mutate the puzzle. ``report`` is available once the iterator is
    exhausted and tells whether the puzzle was solved or which line proved
    contradictory.
    """

    report: Optional[SolveReport]

    def solve(self, puzzle: Puzzle) -> Iterator[Touch]: ...


def blank_board(puzzle: Puzzle) -> np.ndarray:
    return np.full((puzzle.height, puzzle.width), UNKNOWN, dtype=np.int8)


def apply_touch(board: np.ndarray, touch: Touch) -> None:
    height, width = board.shape
    if not (0 <= touch.col < width and 0 <= touch.row < height):
        raise IndexOutOfRange(
            f"touch at column {touch.col}, row {touch.row} is outside a {width}x{height} grid"
        )
    board[touch.row, touch.col] = ON if touch.on else OFF


def replay_touches(puzzle: Puzzle, touches: Iterable[Touch]) -> np.ndarray:
    """Board of ON/OFF/UNKNOWN cells after applying ``touches`` in order."""
    board = blank_board(puzzle)
    for touch in touches:
        apply_touch(board, touch)
    return board


def resolved_grid(board: np.ndarray) -> Optional[np.ndarray]:
    if (board == UNKNOWN).any():
        return None
    return board == ON
