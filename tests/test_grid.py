import pytest

from lifegrid.grid import Grid
from lifegrid.rules import Rules


def _grid_with(width, height, cells):
    grid = Grid(width, height)
    for x, y in cells:
        grid.set(x, y, True)
    return grid


def test_new_grid_is_dead():
    grid = Grid(7, 5)
    assert list(grid.alive_cells()) == []
    assert all(not grid.get(x, y) for x in range(7) for y in range(5))


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_dimensions(width, height):
    with pytest.raises(ValueError):
        Grid(width, height)


def test_coordinates_wrap():
    grid = Grid(6, 4)
    grid.set(-1, -1, True)
    assert grid.get(5, 3)
    assert grid.get(6 + 5, 4 + 3)
    assert list(grid.alive_cells()) == [(5, 3)]


def test_toggle_round_trip():
    grid = Grid(4, 4)
    assert grid.toggle(1, 2) is True
    assert grid.get(1, 2)
    assert grid.toggle(1, 2) is False
    assert not grid.get(1, 2)


def test_reset_clears_everything():
    grid = _grid_with(5, 5, [(0, 0), (2, 3), (4, 4)])
    grid.reset()
    assert list(grid.alive_cells()) == []


def test_alive_neighbours_across_edges():
    grid = _grid_with(5, 5, [(4, 4), (1, 0), (0, 1)])
    assert grid.alive_neighbours(0, 0) == 3
    grid.set(0, 0, True)
    assert grid.alive_neighbours(0, 0) == 3


def test_alive_cells_in_row_order():
    cells = [(3, 0), (0, 2), (1, 2)]
    grid = _grid_with(4, 3, cells)
    assert list(grid.alive_cells()) == cells


def test_block_is_still_life():
    cells = [(2, 2), (3, 2), (2, 3), (3, 3)]
    grid = _grid_with(8, 8, cells)
    grid.step(Rules.conway())
    assert sorted(grid.alive_cells()) == sorted(cells)


def test_blinker_oscillates():
    horizontal = [(1, 2), (2, 2), (3, 2)]
    grid = _grid_with(6, 6, horizontal)
    rules = Rules.conway()
    grid.step(rules)
    assert sorted(grid.alive_cells()) == [(2, 1), (2, 2), (2, 3)]
    grid.step(rules)
    assert sorted(grid.alive_cells()) == sorted(horizontal)


def test_glider_returns_on_torus():
    size = 8
    glider = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]
    grid = _grid_with(size, size, glider)
    rules = Rules.conway()
    for _ in range(4 * size):
        grid.step(rules)
    assert sorted(grid.alive_cells()) == sorted(glider)


def test_lone_cell_dies():
    grid = _grid_with(5, 5, [(2, 2)])
    grid.step(Rules.conway())
    assert list(grid.alive_cells()) == []