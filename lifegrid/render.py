"""Geometry and drawing of the main grid view."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from lifegrid.grid import Grid
from lifegrid.mouse_state import MouseState
from lifegrid.shape_editor import ShapeEditor

Rect = tuple[float, float, float, float]
Color = tuple[float, ...]

BACKGROUND_COLOR = (0.0, 0.0, 0.0)
GRID_FILL_COLOR = (10 / 255, 20 / 255, 30 / 255)
GRID_BORDER_COLOR = (40 / 255, 40 / 255, 40 / 255)
CELL_COLOR = (0.5, 0.1, 0.2)
PREVIEW_COLOR = (*CELL_COLOR, 0.4)
PREVIEW_AREA_COLOR = (*CELL_COLOR, 0.08)
STATUS_COLOR = (1.0, 1.0, 1.0)


@dataclass
class Renderer:
    """Maps between window pixels and grid cells and draws the grid view.

    Drawing coordinates have y measured from the bottom of the window;
    pointer coordinates have y measured from the top.
    """

    window_width: float
    window_height: float
    grid_width: int
    grid_height: int
    cell_width: float = field(init=False)
    cell_height: float = field(init=False)

    def __post_init__(self) -> None:
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.resize(self.window_width, self.window_height)

    def resize(self, width: float, height: float) -> None:
        """Adapt cell sizes to a new window size."""
        if width <= 0 or height <= 0:
            raise ValueError("window dimensions must be positive")
        self.window_width = width
        self.window_height = height
        self.cell_width = width / self.grid_width
        self.cell_height = height / self.grid_height

    def pixel_to_cell(self, x: float, y: float) -> tuple[int, int]:
        """Grid cell under pointer pixel (x, y), y measured from the top."""
        gx = math.floor(x * self.grid_width / self.window_width)
        gy = math.floor(
            (self.window_height - y) * self.grid_height / self.window_height
        )
        return gx, gy

    def cell_rect(self, x: float, y: float) -> Rect:
        """Rectangle (x0, y0, x1, y1) covered by cell (x, y)."""
        x0 = x * self.cell_width
        y0 = y * self.cell_height
        return x0, y0, x0 + self.cell_width, y0 + self.cell_height

    def cell_rects(self, grid: Grid) -> list[Rect]:
        """Rectangles of every live cell of ``grid``."""
        return [self.cell_rect(x, y) for x, y in grid.alive_cells()]

    def preview_rects(
        self,
        mouse: MouseState,
        shape: ShapeEditor | None,
        now: float | None = None,
    ) -> list[tuple[Rect, Color]]:
        """Cursor preview: the shape stamp, or a single cell, under the pointer.

        Empty when the pointer has not moved recently.
        """
        if not mouse.is_recent(now):
            return []
        gx, gy = self.pixel_to_cell(mouse.x, mouse.y)
        if shape is None or shape.is_empty():
            return [(self.cell_rect(gx, gy), CELL_COLOR)]
        rects: list[tuple[Rect, Color]] = [
            (self.cell_rect(gx + sx, gy + sy), PREVIEW_COLOR)
            for sx, sy in shape.alive_cells()
        ]
        area = (
            gx * self.cell_width,
            gy * self.cell_height,
            (gx + shape.width) * self.cell_width,
            (gy + shape.height) * self.cell_height,
        )
        rects.append((area, PREVIEW_AREA_COLOR))
        return rects

    def status_lines(self, iterations: int, delay_ms: int) -> list[tuple[float, float, str]]:
        """Status texts with their positions at the top-left of the window."""
        return [
            (10, self.window_height - 20, f"Iteration: {iterations}"),
            (10, self.window_height - 40, f"Delay: {delay_ms} ms"),
        ]

    def draw(
        self,
        canvas: Any,
        grid: Grid,
        mouse: MouseState,
        shape: ShapeEditor | None,
        iterations: int,
        delay_ms: int,
        now: float | None = None,
    ) -> None:
        """Draw the whole view onto ``canvas``.

        The canvas needs ``clear(color)``, ``fill_rect(x0, y0, x1, y1, color)``,
        ``line(x0, y0, x1, y1, color)`` and ``text(x, y, text, color)``;
        colors with a fourth component are translucent.
        """
        canvas.clear(BACKGROUND_COLOR)
        width, height = self.window_width, self.window_height
        canvas.fill_rect(0, 0, width, height, GRID_FILL_COLOR)
        for i in range(self.grid_width):
            x = i * self.cell_width
            canvas.line(x, 0, x, height, GRID_BORDER_COLOR)
        for j in range(self.grid_height):
            y = j * self.cell_height
            canvas.line(0, y, width, y, GRID_BORDER_COLOR)

        for rect in self.cell_rects(grid):
            canvas.fill_rect(*rect, CELL_COLOR)

        for rect, color in self.preview_rects(mouse, shape, now):
            canvas.fill_rect(*rect, color)

        for x, y, text in self.status_lines(iterations, delay_ms):
            canvas.text(x, y, text, STATUS_COLOR)