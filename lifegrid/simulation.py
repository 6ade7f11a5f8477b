"""State of a running automaton: grid, rules, timing and iteration count."""

from __future__ import annotations

from dataclasses import dataclass, field

from lifegrid.grid import Grid
from lifegrid.rules import Rules
from lifegrid.shape_editor import ShapeEditor

GRID_W = 100
GRID_H = 60
DEFAULT_RULES = "23/3"
DEFAULT_DELAY_MS = 100


def _default_grid() -> Grid:
    return Grid(GRID_W, GRID_H)


def _default_rules() -> Rules:
    return Rules.parse(DEFAULT_RULES)


@dataclass
class Simulation:
    """A grid evolving under a rule table, advanced once per tick."""

    grid: Grid = field(default_factory=_default_grid)
    rules: Rules = field(default_factory=_default_rules)
    delay_ms: int = DEFAULT_DELAY_MS
    paused: bool = False
    iterations: int = 0

    def tick(self) -> bool:
        """Advance one generation unless paused; return whether it advanced."""
        if self.paused:
            return False
        self.grid.step(self.rules)
        self.iterations += 1
        return True

    def toggle_pause(self) -> bool:
        """Flip the paused flag and return its new value."""
        self.paused = not self.paused
        return self.paused

    def reset(self) -> None:
        """Kill every cell and restart the iteration count."""
        self.grid.reset()
        self.iterations = 0

    def click(
        self,
        gx: int,
        gy: int,
        set_alive: bool,
        shape: ShapeEditor | None = None,
    ) -> None:
        """Apply a click on grid cell (gx, gy).

        With a non-empty shape, every set shape cell is stamped at its offset
        from (gx, gy) with ``set_alive``; otherwise the single cell is flipped.
        """
        if shape is not None and not shape.is_empty():
            for sx, sy in shape.alive_cells():
                self.grid.set(gx + sx, gy + sy, set_alive)
        else:
            self.grid.toggle(gx, gy)