import numpy as np
import pytest

from picross.core.errors import InvalidArgument
from picross.core.runs import as_grid, grid_from_columns, run_lengths


@pytest.mark.parametrize(
    "line, expected",
    [
        ([True, True, False, True], (2, 1)),
        ([False, False, False, False], ()),
        ([True, True, True], (3,)),
        ([False, True, False, True, False], (1, 1)),
        ([], ()),
    ],
)
def test_run_lengths(line, expected) -> None:
    assert run_lengths(line) == expected


def test_run_lengths_on_numpy_row() -> None:
    row = np.array([1, 1, 0, 0, 1, 1, 1], dtype=np.int8)
    assert run_lengths(row) == (2, 3)


def test_all_false_line_is_empty_never_zero() -> None:
    for length in range(1, 6):
        assert run_lengths([False] * length) == ()


class TestAsGrid:
    def test_nested_lists(self) -> None:
        grid = as_grid([[1, 0, 1], [0, 1, 0]])
        assert grid.dtype == bool
        assert grid.shape == (2, 3)

    @pytest.mark.parametrize("cells", [[], [[]], [True, False], [[[True]]]])
    def test_degenerate_input(self, cells) -> None:
        with pytest.raises(InvalidArgument):
            as_grid(cells)

    def test_ragged_input(self) -> None:
        with pytest.raises(InvalidArgument):
            as_grid([[True, False], [True]])

    def test_grid_from_columns_transposes(self) -> None:
        columns = [[True, False], [True, True], [False, False]]
        grid = grid_from_columns(columns)
        assert grid.shape == (2, 3)
        assert grid.tolist() == [[True, True, False], [False, True, False]]
