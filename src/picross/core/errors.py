from typing import Optional


class InvalidArgument(ValueError):
    """A precondition was violated by the data handed to a puzzle."""


class IndexOutOfRange(InvalidArgument, IndexError):
    """A row or column index outside the puzzle's dimensions."""


class FormatError(InvalidArgument):
    """Malformed puzzle text."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
