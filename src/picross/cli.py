import sys
from pathlib import Path
from typing import Annotated, List, Optional

import msgspec
import typer
from rich.console import Console
from rich.markup import escape

from picross.core.errors import InvalidArgument
from picross.core.puzzle import Puzzle
from picross.core.runs import grid_from_columns
from picross.core.solver import replay_touches, resolved_grid
from picross.core.textformat import format_puzzle_text
from picross.data.loader import load_grid, load_puzzle, save_grid, save_puzzle
from picross.schemas.puzzle import Touch
from picross.utils.config import settings
from picross.visualization.board import clue_table, render_board, render_grid

app = typer.Typer(help="Picross: clue sets and solution checks for nonogram puzzles.")
console = Console()

GREEN_STYLE = "green"
RED_STYLE = "red"
YELLOW_STYLE = "yellow"
BOLD_STYLE = "bold"
DIM_STYLE = "dim"

SOLVED_STATUS = "SOLVED"
FAILED_STATUS = "FAILED"
INCOMPLETE_STATUS = "INCOMPLETE"

BAD_INPUT_ERRORS = (InvalidArgument, OSError, msgspec.DecodeError)


def resolve_path(path: Path) -> Path:
    """Paths that don't exist as given are looked up under the configured puzzle directory."""
    if path.is_absolute() or path.exists():
        return path
    candidate = settings.PUZZLE_DIR / path
    return candidate if candidate.exists() else path


def fail(message: str):
    console.print(f"[{BOLD_STYLE} {RED_STYLE}]Error:[/] {escape(message)}")
    sys.exit(1)


def read_grid(path: Path, columns: bool):
    grid = load_grid(resolve_path(path))
    return grid_from_columns(grid) if columns else grid


def describe_mismatches(mismatches) -> str:
    return ", ".join(f"{kind.value} {index}" for kind, index in mismatches)


@app.command()
def show(puzzle_path: Annotated[Path, typer.Argument(help="Puzzle file (.txt or .json)")]):
    try:
        puzzle = load_puzzle(resolve_path(puzzle_path))
    except BAD_INPUT_ERRORS as e:
        fail(str(e))

    console.print(f"[{BOLD_STYLE}]Puzzle {puzzle.width}x{puzzle.height}[/{BOLD_STYLE}]")
    console.print(clue_table(puzzle))


@app.command()
def derive(
    grid_path: Annotated[Path, typer.Argument(help="Solution picture (# filled, . empty)")],
    output: Annotated[Optional[Path], typer.Option(help="Write the puzzle here instead of printing it")] = None,
    puzzle_id: Annotated[str, typer.Option("--id", help="Identifier stored in JSON output")] = "unknown",
    columns: bool = typer.Option(False, help="Each line of the picture is a column, top to bottom"),
):
    try:
        grid = read_grid(grid_path, columns)
        puzzle = Puzzle.from_solution(grid)
    except BAD_INPUT_ERRORS as e:
        fail(str(e))

    if output is None:
        typer.echo(format_puzzle_text(puzzle), nl=False)
        return

    try:
        written = save_puzzle(puzzle, output, puzzle_id=puzzle_id)
    except BAD_INPUT_ERRORS as e:
        fail(str(e))

    console.print(render_grid(grid), markup=False)
    console.print(f"[{GREEN_STYLE}]✓ {puzzle.width}x{puzzle.height} puzzle written to {escape(str(written))}[/{GREEN_STYLE}]")


@app.command()
def verify(
    puzzle_path: Annotated[Path, typer.Argument(help="Puzzle file (.txt or .json)")],
    grid_path: Annotated[Path, typer.Argument(help="Candidate picture (# filled, . empty)")],
    show_grid: bool = typer.Option(True, help="Print the candidate next to the clues"),
    columns: bool = typer.Option(False, help="Each line of the picture is a column, top to bottom"),
):
    try:
        puzzle = load_puzzle(resolve_path(puzzle_path))
        grid = read_grid(grid_path, columns)
    except BAD_INPUT_ERRORS as e:
        fail(str(e))

    if not puzzle.verify_solution(grid):
        if grid.shape != (puzzle.height, puzzle.width):
            console.print(
                f"[{RED_STYLE}]{FAILED_STATUS}: grid is {grid.shape[1]}x{grid.shape[0]}, "
                f"puzzle is {puzzle.width}x{puzzle.height}[/{RED_STYLE}]"
            )
        else:
            if show_grid:
                console.print(clue_table(puzzle, grid))
            console.print(
                f"[{RED_STYLE}]{FAILED_STATUS} (lines wrong: {describe_mismatches(puzzle.line_mismatches(grid))})[/{RED_STYLE}]"
            )
        sys.exit(1)

    if show_grid:
        console.print(clue_table(puzzle, grid))
    console.print(f"[{GREEN_STYLE}]{SOLVED_STATUS}[/{GREEN_STYLE}]")


@app.command()
def convert(
    source: Annotated[Path, typer.Argument(help="Puzzle file to read")],
    destination: Annotated[Path, typer.Argument(help="Puzzle file to write; format follows the suffix")],
    puzzle_id: Annotated[str, typer.Option("--id", help="Identifier stored in JSON output")] = "unknown",
):
    try:
        puzzle = load_puzzle(resolve_path(source))
        written = save_puzzle(puzzle, destination, puzzle_id=puzzle_id)
    except BAD_INPUT_ERRORS as e:
        fail(str(e))

    console.print(f"[{GREEN_STYLE}]✓ Converted to {escape(str(written))}[/{GREEN_STYLE}]")


@app.command()
def replay(
    puzzle_path: Annotated[Path, typer.Argument(help="Puzzle file (.txt or .json)")],
    touches_path: Annotated[Path, typer.Argument(help="JSON list of solver touches")],
    output: Annotated[Optional[Path], typer.Option(help="Save the resolved picture here")] = None,
):
    """Applies a recorded solver run to a blank board and checks the outcome."""
    try:
        puzzle = load_puzzle(resolve_path(puzzle_path))
        touches = msgspec.json.decode(resolve_path(touches_path).read_bytes(), type=List[Touch])
        board = replay_touches(puzzle, touches)
    except BAD_INPUT_ERRORS as e:
        fail(str(e))

    console.print(render_board(board), markup=False)
    console.print(f"[{DIM_STYLE}]{len(touches)} touches applied[/{DIM_STYLE}]")

    grid = resolved_grid(board)
    if grid is None:
        console.print(f"[{YELLOW_STYLE}]{INCOMPLETE_STATUS}[/{YELLOW_STYLE}]")
        sys.exit(1)

    if output is not None:
        try:
            written = save_grid(grid, output)
        except BAD_INPUT_ERRORS as e:
            fail(str(e))
        console.print(f"[{DIM_STYLE}]Picture saved to {escape(str(written))}[/{DIM_STYLE}]")

    if not puzzle.verify_solution(grid):
        console.print(
            f"[{RED_STYLE}]{FAILED_STATUS} (lines wrong: {describe_mismatches(puzzle.line_mismatches(grid))})[/{RED_STYLE}]"
        )
        sys.exit(1)
    console.print(f"[{GREEN_STYLE}]{SOLVED_STATUS}[/{GREEN_STYLE}]")


def main():
    app()


if __name__ == "__main__":
    main()
