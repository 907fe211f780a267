from pathlib import Path
from typing import Union

import msgspec
import numpy as np

from picross.core.errors import FormatError
from picross.core.puzzle import Puzzle
from picross.core.runs import as_grid
from picross.core.textformat import format_puzzle_text
from picross.schemas.puzzle import PuzzleRecord

JSON_SUFFIX = ".json"
FILLED_CHARS = "#X1"
EMPTY_CHARS = "._0"
ART_FILLED = "#"
ART_EMPTY = "."

PathLike = Union[str, Path]


def _read(path: PathLike) -> str:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No such file: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FormatError(f"{path}: file is not valid UTF-8") from e


def load_puzzle(path: PathLike) -> Puzzle:
    text = _read(path)
    if Path(path).suffix.lower() == JSON_SUFFIX:
        try:
            record = msgspec.json.decode(text, type=PuzzleRecord)
        except msgspec.ValidationError as e:
            raise FormatError(f"invalid puzzle record: {e}") from e
        except msgspec.DecodeError as e:
            raise FormatError(f"invalid JSON: {e}") from e
        return Puzzle.from_record(record)
    return Puzzle.from_text(text)


def save_puzzle(puzzle: Puzzle, path: PathLike, puzzle_id: str = "unknown") -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == JSON_SUFFIX:
        path.write_bytes(msgspec.json.format(msgspec.json.encode(puzzle.to_record(puzzle_id))))
    else:
        path.write_text(format_puzzle_text(puzzle), encoding="utf-8")
    return path


def parse_grid_art(text: str) -> np.ndarray:
    """
    Reads a picture such as::

        #.#
        .#.

    ``#``, ``X`` or ``1`` mark a filled cell; ``.``, ``_`` or ``0`` an empty one.
    Blank lines and surrounding whitespace are ignored.
    """
    rows = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        row = []
        for char in line:
            if char in FILLED_CHARS:
                row.append(True)
            elif char in EMPTY_CHARS:
                row.append(False)
            else:
                raise FormatError(f"unexpected character '{char}' in grid", line_number)
        if rows and len(row) != len(rows[0]):
            raise FormatError(
                f"row has {len(row)} cells, expected {len(rows[0])}", line_number
            )
        rows.append(row)

    if not rows:
        raise FormatError("grid is empty")
    return as_grid(rows)


def load_grid(path: PathLike) -> np.ndarray:
    return parse_grid_art(_read(path))


def format_grid_art(cells) -> str:
    grid = as_grid(cells)
    return "\n".join(
        "".join(ART_FILLED if cell else ART_EMPTY for cell in row) for row in grid
    ) + "\n"


def save_grid(cells, path: PathLike) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_grid_art(cells), encoding="utf-8")
    return path
