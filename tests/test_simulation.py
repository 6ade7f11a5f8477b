from lifegrid.grid import Grid
from lifegrid.rules import Rules
from lifegrid.shape_editor import ShapeEditor
from lifegrid.simulation import (
    DEFAULT_DELAY_MS,
    DEFAULT_RULES,
    GRID_H,
    GRID_W,
    Simulation,
)


def _blinker_sim() -> Simulation:
    sim = Simulation(grid=Grid(5, 5), rules=Rules.conway())
    for x in (1, 2, 3):
        sim.grid.set(x, 2, True)
    return sim


def test_defaults():
    sim = Simulation()
    assert (sim.grid.width, sim.grid.height) == (GRID_W, GRID_H)
    assert str(sim.rules) == DEFAULT_RULES
    assert sim.delay_ms == DEFAULT_DELAY_MS
    assert sim.paused is False
    assert sim.iterations == 0


def test_tick_advances_and_counts():
    sim = _blinker_sim()
    assert sim.tick() is True
    assert sim.iterations == 1
    assert sorted(sim.grid.alive_cells()) == [(2, 1), (2, 2), (2, 3)]
    sim.tick()
    assert sim.iterations == 2
    assert sorted(sim.grid.alive_cells()) == [(1, 2), (2, 2), (3, 2)]


def test_paused_tick_does_nothing():
    sim = _blinker_sim()
    before = sorted(sim.grid.alive_cells())
    assert sim.toggle_pause() is True
    assert sim.tick() is False
    assert sim.iterations == 0
    assert sorted(sim.grid.alive_cells()) == before


def test_toggle_pause_twice_restores():
    sim = Simulation()
    sim.toggle_pause()
    assert sim.toggle_pause() is False
    assert sim.paused is False


def test_reset_clears_cells_and_iterations():
    sim = _blinker_sim()
    sim.tick()
    sim.reset()
    assert sim.iterations == 0
    assert list(sim.grid.alive_cells()) == []


def test_click_without_shape_toggles_cell():
    sim = Simulation(grid=Grid(6, 4))
    sim.click(2, 3, True)
    assert sim.grid.get(2, 3) is True
    sim.click(2, 3, True)
    assert sim.grid.get(2, 3) is False


def test_click_with_empty_shape_toggles_cell():
    sim = Simulation(grid=Grid(6, 4))
    sim.click(1, 1, False, ShapeEditor())
    assert list(sim.grid.alive_cells()) == [(1, 1)]


def _shape_with(cells) -> ShapeEditor:
    shape = ShapeEditor(width=3, height=3)
    for x, y in cells:
        # press at the centre of cell (x, y) in a 30x30 window
        shape.press(x * 10 + 5, 30 - (y * 10 + 5), 30, 30)
        shape.release()
    return shape


def test_click_with_shape_stamps_offsets():
    sim = Simulation(grid=Grid(10, 10))
    shape = _shape_with([(0, 0), (1, 2)])
    sim.click(4, 5, True, shape)
    assert sorted(sim.grid.alive_cells()) == sorted([(4, 5), (5, 7)])


def test_click_with_shape_wraps_edges():
    sim = Simulation(grid=Grid(10, 10))
    shape = _shape_with([(2, 2)])
    sim.click(9, 9, True, shape)
    assert list(sim.grid.alive_cells()) == [((9 + 2) % 10, (9 + 2) % 10)]


def test_click_with_shape_can_clear():
    sim = Simulation(grid=Grid(10, 10))
    shape = _shape_with([(0, 0), (1, 1)])
    sim.click(3, 3, True, shape)
    sim.grid.set(0, 0, True)
    sim.click(3, 3, False, shape)
    assert list(sim.grid.alive_cells()) == [(0, 0)]