import pytest

from costmaze.solver.errors import MalformedInputError, OutOfBoundsError
from costmaze.solver.grid import Grid


def test_grid_bounds_and_costs() -> None:
    grid = Grid.from_rows([[1, 2, 3], [0, 5, 0]])

    assert grid.bounds() == (2, 3)
    assert grid.cost_at((0, 2)) == 3
    assert grid.cost_at((1, 1)) == 5
    assert grid.is_passable((1, 1))
    assert not grid.is_passable((1, 0))


def test_grid_rejects_out_of_bounds_lookup() -> None:
    grid = Grid.from_rows([[1, 1], [1, 1]])

    assert not grid.in_bounds((-1, 0))
    assert not grid.in_bounds((0, 2))
    with pytest.raises(OutOfBoundsError):
        grid.cost_at((2, 0))
    with pytest.raises(OutOfBoundsError):
        grid.cost_at((0, -1))


def test_grid_neighbors_skip_walls_and_edges() -> None:
    grid = Grid.from_rows([[1, 0, 1], [1, 1, 1], [1, 1, 0]])

    assert grid.neighbors((0, 0)) == [(1, 0)]
    assert grid.neighbors((1, 1)) == [(2, 1), (1, 0), (1, 2)]
    assert grid.neighbors((2, 1)) == [(1, 1), (2, 0)]


def test_grid_construction_rejects_bad_shapes() -> None:
    with pytest.raises(MalformedInputError):
        Grid.from_rows([])
    with pytest.raises(MalformedInputError):
        Grid.from_rows([[]])
    with pytest.raises(MalformedInputError):
        Grid.from_rows([[1, 2], [3]])
    with pytest.raises(MalformedInputError):
        Grid.from_rows([[1, -2]])


def test_grid_is_immutable() -> None:
    rows = [[1, 2], [3, 4]]
    grid = Grid.from_rows(rows)
    rows[0][0] = 0

    assert grid.cost_at((0, 0)) == 1
