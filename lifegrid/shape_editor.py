"""Small editable stamp that can be placed onto the main grid."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

SHAPE_GRID_W = 10
SHAPE_GRID_H = 10

BACKGROUND_COLOR = (0.07, 0.07, 0.07)
BORDER_COLOR = (0.4, 0.4, 0.4)
CELL_COLOR = (0.5, 0.1, 0.2)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass
class ShapeEditor:
    """A fixed-size grid of cells edited by pressing and dragging.

    Pointer coordinates are window pixels with y measured from the top;
    cell row 0 is at the bottom of the window.
    """

    width: int = SHAPE_GRID_W
    height: int = SHAPE_GRID_H
    _cells: list[bool] = field(init=False, repr=False)
    _dragging: bool = field(default=False, init=False, repr=False)
    _drag_state: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("shape dimensions must be positive")
        self._cells = [False] * (self.width * self.height)

    @property
    def dragging(self) -> bool:
        return self._dragging

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside the shape")
        return y * self.width + x

    def get(self, x: int, y: int) -> bool:
        """Whether shape cell (x, y) is set."""
        return self._cells[self._index(x, y)]

    def is_empty(self) -> bool:
        """True when no cell is set."""
        return not any(self._cells)

    def alive_cells(self) -> Iterator[tuple[int, int]]:
        """Coordinates of set cells, row by row."""
        for index, alive in enumerate(self._cells):
            if alive:
                y, x = divmod(index, self.width)
                yield x, y

    def clear(self) -> None:
        """Unset every cell."""
        self._cells = [False] * (self.width * self.height)

    def cell_at(
        self, x: int, y: int, width: int, height: int
    ) -> tuple[int, int] | None:
        """Shape cell under pixel (x, y) of a window of the given size, or None."""
        cell_w = width // self.width
        cell_h = height // self.height
        if cell_w <= 0 or cell_h <= 0:
            return None
        xi = _trunc_div(x, cell_w)
        yi = _trunc_div(height - y, cell_h)
        if 0 <= xi < self.width and 0 <= yi < self.height:
            return xi, yi
        return None

    def press(self, x: int, y: int, width: int, height: int) -> bool:
        """Start a drag and flip the cell under the pointer.

        The flipped cell's new state is painted by later drags.
        Returns True when a cell changed.
        """
        self._dragging = True
        cell = self.cell_at(x, y, width, height)
        if cell is None:
            return False
        index = self._index(*cell)
        self._cells[index] = not self._cells[index]
        self._drag_state = self._cells[index]
        return True

    def release(self) -> None:
        """End the current drag."""
        self._dragging = False

    def drag(self, x: int, y: int, width: int, height: int) -> bool:
        """Paint the drag state onto the cell under the pointer.

        Returns True when a cell was painted.
        """
        if not self._dragging:
            return False
        cell = self.cell_at(x, y, width, height)
        if cell is None:
            return False
        self._cells[self._index(*cell)] = self._drag_state
        return True

    def draw(self, canvas: Any, width: float, height: float) -> None:
        """Draw the editor onto ``canvas``.

        The canvas needs ``clear(color)``, ``line(x0, y0, x1, y1, color)`` and
        ``fill_rect(x0, y0, x1, y1, color)`` with y measured from the bottom.
        """
        canvas.clear(BACKGROUND_COLOR)
        cell_w = width / self.width
        cell_h = height / self.height
        for i in range(self.width + 1):
            canvas.line(i * cell_w, 0, i * cell_w, height, BORDER_COLOR)
        for i in range(self.height + 1):
            canvas.line(0, i * cell_h, width, i * cell_h, BORDER_COLOR)
        for x, y in self.alive_cells():
            x0 = x * cell_w
            y0 = y * cell_h
            canvas.fill_rect(x0, y0, x0 + cell_w, y0 + cell_h, CELL_COLOR)