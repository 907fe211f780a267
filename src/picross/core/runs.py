from typing import Iterable, Tuple

import numpy as np

from picross.core.errors import InvalidArgument


def run_lengths(line: Iterable[bool]) -> Tuple[int, ...]:
    """Lengths of the consecutive filled runs along one line, in reading order."""
    runs = []
    current = 0
    for cell in line:
        if cell:
            current += 1
        elif current != 0:
            runs.append(current)
            current = 0
    if current != 0:
        runs.append(current)
    return tuple(runs)


def as_grid(cells) -> np.ndarray:
    """Row-major boolean grid, shape (height, width)."""
    try:
        grid = np.asarray(cells)
    except ValueError as e:
        # ragged nested lists
        raise InvalidArgument(f"Grid is not rectangular: {e}") from e

    if grid.ndim != 2:
        raise InvalidArgument(f"Grid must be 2-D, got {grid.ndim} dimension(s)")
    if grid.dtype == object:
        raise InvalidArgument("Grid is not rectangular")
    if grid.shape[0] < 1 or grid.shape[1] < 1:
        raise InvalidArgument(f"Grid has a zero dimension: {grid.shape}")

    return grid.astype(bool)


def grid_from_columns(cells) -> np.ndarray:
    """Accepts a column-major matrix (cells[col][row]) and returns the row-major grid."""
    return as_grid(cells).T.copy()
