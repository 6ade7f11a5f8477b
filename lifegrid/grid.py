"""Toroidal grid of cells that advances by a rule table."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from lifegrid.rules import Rules

_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if dx or dy
)


@dataclass
class Grid:
    """A width by height grid whose edges wrap around."""

    width: int
    height: int
    _cells: list[bool] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("grid dimensions must be positive")
        self._cells = [False] * (self.width * self.height)

    def _index(self, x: int, y: int) -> int:
        return (y % self.height) * self.width + (x % self.width)

    def get(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) is alive; coordinates wrap."""
        return self._cells[self._index(x, y)]

    def set(self, x: int, y: int, alive: bool) -> None:
        """Set the cell at (x, y); coordinates wrap."""
        self._cells[self._index(x, y)] = bool(alive)

    def toggle(self, x: int, y: int) -> bool:
        """Flip the cell at (x, y) and return its new state."""
        index = self._index(x, y)
        self._cells[index] = not self._cells[index]
        return self._cells[index]

    def reset(self) -> None:
        """Kill every cell."""
        self._cells = [False] * (self.width * self.height)

    def alive_neighbours(self, x: int, y: int) -> int:
        """Number of live cells among the eight around (x, y)."""
        return sum(self.get(x + dx, y + dy) for dx, dy in _OFFSETS)

    def step(self, rules: Rules) -> None:
        """Advance one generation."""
        self._cells = [
            rules.next_state(self.get(x, y), self.alive_neighbours(x, y))
            for y in range(self.height)
            for x in range(self.width)
        ]

    def alive_cells(self) -> Iterator[tuple[int, int]]:
        """Coordinates of live cells, row by row."""
        for index, alive in enumerate(self._cells):
            if alive:
                y, x = divmod(index, self.width)
                yield x, y