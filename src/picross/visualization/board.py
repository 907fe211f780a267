from typing import Optional

import numpy as np
from rich.table import Table

from picross.core.errors import InvalidArgument
from picross.core.puzzle import Puzzle
from picross.core.runs import as_grid
from picross.utils.config import settings

UNKNOWN_SYMBOL = "? "
CLUE_STYLE = "cyan"


def render_grid(cells) -> str:
    grid = as_grid(cells)
    return "\n".join(
        "".join(settings.FILLED_SYMBOL if cell else settings.EMPTY_SYMBOL for cell in row)
        for row in grid
    )


def render_board(board: np.ndarray) -> str:
    """Like render_grid, but for boards that may still hold unknown (-1) cells."""
    symbols = {1: settings.FILLED_SYMBOL, 0: settings.EMPTY_SYMBOL}
    return "\n".join(
        "".join(symbols.get(int(cell), UNKNOWN_SYMBOL) for cell in row) for row in board
    )


def _clue_label(clue) -> str:
    return " ".join(str(n) for n in clue) if clue else "0"


def clue_table(puzzle: Puzzle, cells=None, title: Optional[str] = None) -> Table:
    """Row clues down the left, column clues stacked in the header, grid (or blanks) in the body."""
    grid = as_grid(cells) if cells is not None else None
    if grid is not None and grid.shape != (puzzle.height, puzzle.width):
        raise InvalidArgument(f"grid shape {grid.shape} does not fit a {puzzle.width}x{puzzle.height} puzzle")

    table = Table(title=title, show_header=True, header_style=CLUE_STYLE, show_lines=False)
    table.add_column("", style=CLUE_STYLE, justify="right")
    for clue in puzzle.column_clues:
        header = "\n".join(str(n) for n in clue) if clue else "0"
        table.add_column(header, justify="center")

    for j, clue in enumerate(puzzle.row_clues):
        if grid is None:
            cells_text = [settings.EMPTY_SYMBOL.strip() or " "] * puzzle.width
        else:
            cells_text = [
                (settings.FILLED_SYMBOL if grid[j, i] else settings.EMPTY_SYMBOL).strip()
                for i in range(puzzle.width)
            ]
        table.add_row(_clue_label(clue), *cells_text)

    return table
