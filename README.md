# lifegrid

A Life-like cellular automaton on a grid whose edges wrap around. Rules are
given in `survive/birth` form, so Conway's Game of Life is `23/3`, and they
can be changed while the simulation runs.

## Running

The application uses Tkinter, which ships with most Python installations
(some Linux distributions package it separately, e.g. as `python3-tk`).
After installing the package, start it with:

    lifegrid

The command takes no options besides `--help`. Three windows open:

- **the main grid**, 100 × 60 cells, starting empty with the rules `23/3`
  and advanced one generation every 100 ms;
- **Options**, with a delay slider (0–500 ms between generations) and two
  rows of boxes, 0 to 8, that switch which neighbour counts let a live cell
  survive and which let a dead cell be born;
- **Shape Builder**, a 10 × 10 editor for drawing a stamp.

### Controls

In the main window:

| Input            | Effect                                                      |
|------------------|-------------------------------------------------------------|
| left click       | toggle the cell, or stamp the shape with live cells         |
| right click      | toggle the cell, or stamp the shape with dead cells         |
| `space` or `p`   | pause or resume                                             |
| `r`              | clear the grid and reset the iteration counter              |
| `Esc`            | quit                                                        |

The current iteration and delay are shown in the top-left corner.

When the shape editor holds any cells, clicks stamp the whole shape with its
lower-left corner at the clicked cell, and a translucent preview of the
stamp follows the mouse. With an empty shape the preview is the single cell
under the pointer. Either preview disappears two seconds after the mouse
last moved.

In the Options window, click or drag along the slider to set the delay, and
click a numbered box to switch that rule entry on or off.

In the Shape Builder, click a cell to flip it; dragging with the button held
paints every cell passed over with the state the first cell was flipped to.

## Using the library

The simulation core can be used without any window:

```python
from lifegrid.grid import Grid
from lifegrid.rules import Rules

rules = Rules.parse("23/3")      # same as Rules.conway()
grid = Grid(10, 10)

# a blinker
for x in (3, 4, 5):
    grid.set(x, 4, True)

grid.step(rules)
print(sorted(grid.alive_cells()))   # [(4, 3), (4, 4), (4, 5)]
```

Coordinates wrap, so `grid.get(-1, 0)` reads the last cell of the first row.
`Rules.parse` ignores characters other than digits and raises `ValueError`
for text without a `/` separator or with the digit `9`; `str(rules)` gives
the rule string back.

Other pieces:

- `lifegrid.simulation.Simulation` holds a grid, rules, delay, pause flag and
  iteration count; `tick()`, `toggle_pause()`, `reset()` and
  `click(gx, gy, set_alive, shape)` drive it.
- `lifegrid.shape_editor.ShapeEditor` is the stamp editor, with
  `press`, `drag` and `release` taking window pixels.
- `lifegrid.options.OptionsPanel` handles the slider and rule boxes for a
  `Simulation`.
- `lifegrid.render.Renderer` converts between window pixels and cells and
  computes the rectangles to draw.
- `lifegrid.app.LifeApp` combines them with keyboard and click handling.

The `draw` methods take any canvas object offering the drawing calls listed
in their docstrings, so they can be used with another toolkit.

## Limitations

Patterns cannot be saved or loaded, and the grid size, starting rules and
delay cannot be set from the command line; they can only be changed through
the library.

## Tests

    pip install -e ".[test]"
    pytest