"""Interactive application tying the simulation, options and shape editor together."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Any

from lifegrid.mouse_state import MouseState
from lifegrid.options import OptionsPanel
from lifegrid.render import GRID_FILL_COLOR, Renderer
from lifegrid.shape_editor import ShapeEditor
from lifegrid.simulation import Simulation

WIN_W = 1280
WIN_H = 720
OPTIONS_W = 380
OPTIONS_H = 400
SHAPE_W = 300
SHAPE_H = 300
ESCAPE = "\x1b"


@dataclass
class LifeApp:
    """Application state and the handlers for the main view."""

    simulation: Simulation = field(default_factory=Simulation)
    shape: ShapeEditor = field(default_factory=ShapeEditor)
    mouse: MouseState = field(default_factory=MouseState)
    shape_enabled: bool = True
    renderer: Renderer | None = None
    options: OptionsPanel = field(init=False)
    running: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        if self.renderer is None:
            grid = self.simulation.grid
            self.renderer = Renderer(WIN_W, WIN_H, grid.width, grid.height)
        self.options = OptionsPanel(self.simulation)

    def handle_key(self, key: str) -> bool:
        """React to a key press; return whether the application keeps running.

        Space or "p" toggles pause, "r" clears the grid, Escape quits.
        """
        if key in (" ", "p"):
            self.simulation.toggle_pause()
        elif key == "r":
            self.simulation.reset()
        elif key == ESCAPE:
            self.running = False
        return self.running

    def handle_grid_click(self, x: float, y: float, set_alive: bool) -> tuple[int, int]:
        """Apply a click at pointer pixel (x, y); return the grid cell hit.

        With a non-empty shape the stamp is set to ``set_alive``; otherwise the
        cell under the pointer is flipped.
        """
        gx, gy = self.renderer.pixel_to_cell(x, y)
        shape = self.shape if self.shape_enabled else None
        self.simulation.click(gx, gy, set_alive, shape)
        return gx, gy


def _hex(color: tuple[float, ...], base: tuple[float, ...] | None = None) -> str:
    rgb = color[:3]
    if len(color) > 3 and base is not None:
        alpha = color[3]
        rgb = tuple(c * alpha + b * (1 - alpha) for c, b in zip(rgb, base))
    return "#" + "".join(f"{max(0, min(255, round(c * 255))):02x}" for c in rgb)


class _TkCanvas:
    """Drawing surface with y measured from the bottom, over a Tk canvas."""

    def __init__(self, widget: Any, blend_base: tuple[float, ...]) -> None:
        self.widget = widget
        self.blend_base = blend_base

    @property
    def height(self) -> int:
        h = self.widget.winfo_height()
        return h if h > 1 else int(self.widget.cget("height"))

    @property
    def width(self) -> int:
        w = self.widget.winfo_width()
        return w if w > 1 else int(self.widget.cget("width"))

    def _y(self, y: float) -> float:
        return self.height - y

    def clear(self, color: tuple[float, ...]) -> None:
        self.widget.delete("all")
        self.widget.configure(bg=_hex(color))

    def fill_rect(self, x0, y0, x1, y1, color) -> None:
        fill = _hex(color, self.blend_base)
        self.widget.create_rectangle(
            x0, self._y(y0), x1, self._y(y1), fill=fill, outline=""
        )

    def rect_outline(self, x0, y0, x1, y1, color) -> None:
        self.widget.create_rectangle(
            x0, self._y(y0), x1, self._y(y1), outline=_hex(color)
        )

    def line(self, x0, y0, x1, y1, color) -> None:
        self.widget.create_line(x0, self._y(y0), x1, self._y(y1), fill=_hex(color))

    def fill_polygon(self, points, color) -> None:
        coords = [c for x, y in points for c in (x, self._y(y))]
        self.widget.create_polygon(*coords, fill=_hex(color), outline="")

    def text(self, x, y, text, color) -> None:
        self.widget.create_text(
            x, self._y(y), text=text, fill=_hex(color), anchor="sw", font="TkFixedFont"
        )


def main(argv: list[str] | None = None) -> int:
    """Open the grid, options and shape builder windows and run the simulation."""
    parser = argparse.ArgumentParser(
        prog="lifegrid", description="Interactive two-state cellular automaton."
    )
    parser.parse_args(argv)

    import tkinter as tk

    app = LifeApp()

    root = tk.Tk()
    root.title("Conway's Game of Life")
    main_widget = tk.Canvas(root, width=WIN_W, height=WIN_H, highlightthickness=0)
    main_widget.pack(fill="both", expand=True)
    main_canvas = _TkCanvas(main_widget, GRID_FILL_COLOR)

    options_win = tk.Toplevel(root)
    options_win.title("Options")
    options_widget = tk.Canvas(
        options_win, width=OPTIONS_W, height=OPTIONS_H, highlightthickness=0
    )
    options_widget.pack(fill="both", expand=True)
    options_canvas = _TkCanvas(options_widget, (0.1, 0.1, 0.1))

    shape_win = tk.Toplevel(root)
    shape_win.title("Shape Builder")
    shape_widget = tk.Canvas(
        shape_win, width=SHAPE_W, height=SHAPE_H, highlightthickness=0
    )
    shape_widget.pack(fill="both", expand=True)
    shape_canvas = _TkCanvas(shape_widget, (0.07, 0.07, 0.07))

    def redraw_main() -> None:
        sim = app.simulation
        app.renderer.draw(
            main_canvas, sim.grid, app.mouse, app.shape, sim.iterations, sim.delay_ms
        )

    def redraw_options() -> None:
        app.options.draw(options_canvas, options_canvas.height)

    def redraw_shape() -> None:
        app.shape.draw(shape_canvas, shape_canvas.width, shape_canvas.height)

    def tick() -> None:
        if not app.running:
            return
        app.simulation.tick()
        redraw_main()
        root.after(app.simulation.delay_ms, tick)

    def on_main_configure(event: Any) -> None:
        if event.width > 1 and event.height > 1:
            app.renderer.resize(event.width, event.height)
            redraw_main()

    def on_main_click(event: Any, set_alive: bool) -> None:
        app.handle_grid_click(event.x, event.y, set_alive)
        redraw_main()

    def on_main_motion(event: Any) -> None:
        app.mouse.move(event.x, event.y)
        redraw_main()

    def on_key(event: Any) -> None:
        was_paused = app.simulation.paused
        if not app.handle_key(event.char):
            root.destroy()
            return
        if app.simulation.paused != was_paused:
            redraw_options()
        redraw_main()

    def on_options_press(event: Any) -> None:
        if app.options.press(event.x, event.y, options_canvas.height):
            redraw_options()

    def on_options_drag(event: Any) -> None:
        if app.options.drag(event.x):
            redraw_options()

    def on_options_release(_event: Any) -> None:
        app.options.release()

    def on_shape_press(event: Any) -> None:
        if app.shape.press(event.x, event.y, shape_canvas.width, shape_canvas.height):
            redraw_shape()

    def on_shape_drag(event: Any) -> None:
        if app.shape.drag(event.x, event.y, shape_canvas.width, shape_canvas.height):
            redraw_shape()

    def on_shape_release(_event: Any) -> None:
        app.shape.release()

    main_widget.bind("<Configure>", on_main_configure)
    main_widget.bind("<Button-1>", lambda e: on_main_click(e, True))
    main_widget.bind("<Button-3>", lambda e: on_main_click(e, False))
    main_widget.bind("<Motion>", on_main_motion)
    root.bind("<Key>", on_key)

    options_widget.bind("<Configure>", lambda _e: redraw_options())
    options_widget.bind("<ButtonPress-1>", on_options_press)
    options_widget.bind("<B1-Motion>", on_options_drag)
    options_widget.bind("<ButtonRelease-1>", on_options_release)

    shape_widget.bind("<Configure>", lambda _e: redraw_shape())
    shape_widget.bind("<ButtonPress-1>", on_shape_press)
    shape_widget.bind("<B1-Motion>", on_shape_drag)
    shape_widget.bind("<ButtonRelease-1>", on_shape_release)

    redraw_main()
    redraw_options()
    redraw_shape()
    root.after(app.simulation.delay_ms, tick)
    root.mainloop()
    return 0