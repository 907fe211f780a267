"""Reader and writer for the line-oriented puzzle text format.

Column clues come first, one line per column, then a blank line, then one
line per row. A clue line holds integers separated by spaces or commas; the
lone token ``0`` stands for a line with no filled runs::

    1
    2
    0

    1 1
    1
"""
import re
from typing import List, Optional, Sequence, Tuple

from picross.core.errors import FormatError

EMPTY_CLUE_TOKEN = "0"
CLUE_SEPARATORS = re.compile(r"[ ,\t]")
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")

Clue = Tuple[int, ...]


def _is_blank(line: str) -> bool:
    return line.strip() == ""


def parse_clue_line(line: str, line_number: Optional[int] = None) -> Clue:
    tokens = [t for t in CLUE_SEPARATORS.split(line.strip()) if t]
    if not tokens:
        raise FormatError("empty clue line", line_number)

    numbers = []
    for token in tokens:
        if not INTEGER_TOKEN.fullmatch(token):
            raise FormatError(f"'{token}' is not an integer", line_number)
        numbers.append(int(token))

    if len(numbers) == 1 and numbers[0] == 0:
        return ()
    if any(n < 1 for n in numbers):
        raise FormatError(f"clue values must be positive, got {numbers}", line_number)

    return tuple(numbers)


def parse_puzzle_text(text: str) -> Tuple[List[Clue], List[Clue]]:
    """Returns (column_clues, row_clues)."""
    lines = text.splitlines()
    position = 0

    column_clues: List[Clue] = []
    while position < len(lines) and not _is_blank(lines[position]):
        column_clues.append(parse_clue_line(lines[position], position + 1))
        position += 1

    # skip the terminator
    position += 1

    row_clues: List[Clue] = []
    while position < len(lines) and not _is_blank(lines[position]):
        row_clues.append(parse_clue_line(lines[position], position + 1))
        position += 1

    if not column_clues:
        raise FormatError("no column clues found")
    if not row_clues:
        raise FormatError("no row clues found")

    return column_clues, row_clues


def format_clue(clue: Sequence[int]) -> str:
    if not clue:
        return EMPTY_CLUE_TOKEN
    return " ".join(str(n) for n in clue)


def format_puzzle_text(puzzle) -> str:
    lines = [format_clue(c) for c in puzzle.column_clues]
    lines.append("")
    lines.extend(format_clue(r) for r in puzzle.row_clues)
    return "\n".join(lines) + "\n"
