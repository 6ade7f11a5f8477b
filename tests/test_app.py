import pytest

from lifegrid.app import ESCAPE, LifeApp
from lifegrid.simulation import GRID_H, GRID_W


def _stamp_two_cells(app):
    w, h = app.shape.width * 30, app.shape.height * 30
    app.shape.press(5, h - 5, w, h)
    app.shape.release()
    app.shape.press(35, h - 5, w, h)
    app.shape.release()


def test_default_renderer_matches_grid():
    app = LifeApp()
    assert app.renderer.grid_width == GRID_W
    assert app.renderer.grid_height == GRID_H
    assert app.options.simulation is app.simulation


@pytest.mark.parametrize("key", [" ", "p"])
def test_pause_keys_toggle(key):
    app = LifeApp()
    assert app.handle_key(key) is True
    assert app.simulation.paused is True
    app.handle_key(key)
    assert app.simulation.paused is False


def test_reset_key_clears_grid_and_iterations():
    app = LifeApp()
    app.simulation.grid.set(1, 1, True)
    app.simulation.tick()
    app.simulation.grid.set(4, 4, True)
    app.handle_key("r")
    assert app.simulation.iterations == 0
    assert list(app.simulation.grid.alive_cells()) == []


def test_escape_stops():
    app = LifeApp()
    assert app.handle_key(ESCAPE) is False
    assert app.running is False


def test_other_key_does_nothing():
    app = LifeApp()
    app.simulation.grid.set(2, 2, True)
    assert app.handle_key("x") is True
    assert app.simulation.paused is False
    assert list(app.simulation.grid.alive_cells()) == [(2, 2)]


def test_click_without_shape_toggles_cell():
    app = LifeApp()
    cell = app.handle_grid_click(0, app.renderer.window_height - 1, True)
    assert cell == (0, 0)
    assert app.simulation.grid.get(0, 0) is True
    app.handle_grid_click(0, app.renderer.window_height - 1, False)
    assert app.simulation.grid.get(0, 0) is False


def test_click_with_shape_stamps():
    app = LifeApp()
    _stamp_two_cells(app)
    gx, gy = app.handle_grid_click(100, 100, True)
    assert sorted(app.simulation.grid.alive_cells()) == sorted(
        [(gx, gy), (gx + 1, gy)]
    )
    app.handle_grid_click(100, 100, True)
    assert app.simulation.grid.get(gx, gy) is True
    app.handle_grid_click(100, 100, False)
    assert list(app.simulation.grid.alive_cells()) == []


def test_click_with_shape_disabled_toggles_single_cell():
    app = LifeApp(shape_enabled=False)
    _stamp_two_cells(app)
    gx, gy = app.handle_grid_click(100, 100, True)
    assert list(app.simulation.grid.alive_cells()) == [(gx, gy)]


def test_stamp_wraps_at_edge():
    app = LifeApp()
    _stamp_two_cells(app)
    gx, gy = app.handle_grid_click(app.renderer.window_width - 1, 100, True)
    assert gx == GRID_W - 1
    assert app.simulation.grid.get(GRID_W - 1, gy) is True
    assert app.simulation.grid.get(0, gy) is True