import enum
from typing import List, Optional

import msgspec


class LineKind(str, enum.Enum):
    ROW = "row"
    COLUMN = "column"


class SolveStatus(str, enum.Enum):
    SOLVED = "solved"
    CONTRADICTORY = "contradictory"


class PuzzleRecord(msgspec.Struct):
    width: int
    height: int
    column_clues: List[List[int]]
    row_clues: List[List[int]]
    id: str = "unknown"


class Touch(msgspec.Struct, frozen=True):
    col: int
    row: int
    on: bool


class SolveReport(msgspec.Struct, frozen=True):
    status: SolveStatus
    contradiction_kind: Optional[LineKind] = None
    contradiction_index: Optional[int] = None
