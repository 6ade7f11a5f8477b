"""Options panel: delay slider and clickable survive/birth rule boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from lifegrid.rules import MAX_NEIGHBOURS
from lifegrid.simulation import Simulation

SLIDER_X0 = 20
SLIDER_X1 = 280
SLIDER_Y = 350
DOT_R = 8.0
MAX_SLIDER_VALUE = 500.0

BOX_SIZE = 24
BOX_MARGIN = 32
UI_BASE_X = 20
RULES_SURVIVE_Y = SLIDER_Y - 100
RULES_BIRTH_Y = SLIDER_Y - 180

BACKGROUND_COLOR = (0.1, 0.1, 0.1)
TEXT_COLOR = (1.0, 1.0, 1.0)
SLIDER_LINE_COLOR = (0.5, 0.5, 0.5)
SLIDER_DOT_COLOR = (0.2, 0.2, 1.0)
SURVIVE_COLOR = (0.0, 0.6, 0.0)
BIRTH_COLOR = (0.6, 0.0, 0.0)


def _in_box(x: int, y: int, x0: int, y0: int) -> bool:
    return x0 <= x <= x0 + BOX_SIZE and y0 <= y <= y0 + BOX_SIZE


@dataclass
class OptionsPanel:
    """Controls editing a simulation's delay and rules.

    Drawing coordinates have y measured from the bottom of the window;
    pointer coordinates passed to ``press`` have y from the top.
    """

    simulation: Simulation
    _dragging: bool = field(default=False, init=False, repr=False)

    @property
    def dragging(self) -> bool:
        return self._dragging

    def slider_x(self) -> int:
        """Horizontal pixel position of the slider dot."""
        pct = self.simulation.delay_ms / MAX_SLIDER_VALUE
        return SLIDER_X0 + int((SLIDER_X1 - SLIDER_X0) * pct)

    def in_slider_dot(self, x: int, y: int) -> bool:
        """Whether (x, y), y from the bottom, lies on the slider dot."""
        dx = self.slider_x()
        r = int(DOT_R)
        return dx - r <= x <= dx + r and SLIDER_Y - r <= y <= SLIDER_Y + r

    def in_slider_line(self, x: int, y: int) -> bool:
        """Whether (x, y), y from the bottom, lies on the slider track."""
        return SLIDER_X0 <= x <= SLIDER_X1 and abs(y - SLIDER_Y) <= DOT_R + 10

    def set_delay_from_x(self, x: int) -> int:
        """Set the delay from a slider position, clamped to the track."""
        x = min(max(x, SLIDER_X0), SLIDER_X1)
        t = (x - SLIDER_X0) / (SLIDER_X1 - SLIDER_X0)
        self.simulation.delay_ms = int(t * MAX_SLIDER_VALUE + 0.5)
        return self.simulation.delay_ms

    def press(self, x: int, y: int, height: int) -> bool:
        """Handle a left-button press at window pixel (x, y).

        Returns True when the delay or a rule changed.
        """
        yy = height - y
        if self.in_slider_dot(x, yy):
            self._dragging = True
            return False
        if self.in_slider_line(x, yy):
            self.set_delay_from_x(x)
            self._dragging = True
            return True
        rules = self.simulation.rules
        for n in range(MAX_NEIGHBOURS + 1):
            rx = UI_BASE_X + n * BOX_MARGIN
            if _in_box(x, yy, rx, RULES_SURVIVE_Y):
                rules.toggle_survive(n)
                return True
            if _in_box(x, yy, rx, RULES_BIRTH_Y):
                rules.toggle_birth(n)
                return True
        return False

    def release(self) -> None:
        """Handle a left-button release, ending any slider drag."""
        self._dragging = False

    def drag(self, x: int) -> bool:
        """Move the slider while dragging; return whether the delay was set."""
        if not self._dragging:
            return False
        self.set_delay_from_x(x)
        return True

    def draw(self, canvas: Any, height: float) -> None:
        """Draw the panel onto ``canvas``.

        The canvas needs ``clear(color)``, ``text(x, y, text, color)``,
        ``line(x0, y0, x1, y1, color)``, ``rect_outline(x0, y0, x1, y1, color)``,
        ``fill_rect(x0, y0, x1, y1, color)`` and ``fill_polygon(points, color)``.
        The layout is anchored at the bottom-left, so ``height`` does not move it.
        """
        del height
        canvas.clear(BACKGROUND_COLOR)

        canvas.text(20, SLIDER_Y + 20, "Delay (ms):", TEXT_COLOR)
        canvas.line(SLIDER_X0, SLIDER_Y, SLIDER_X1, SLIDER_Y, SLIDER_LINE_COLOR)

        dx = self.slider_x()
        points = [(dx, SLIDER_Y)]
        for angle in range(0, 361, 30):
            rad = math.radians(angle)
            points.append(
                (dx + int(DOT_R * math.cos(rad)), SLIDER_Y + int(DOT_R * math.sin(rad)))
            )
        canvas.fill_polygon(points, SLIDER_DOT_COLOR)
        canvas.text(
            SLIDER_X1 + 10, SLIDER_Y + 5, f"{self.simulation.delay_ms} ms", TEXT_COLOR
        )

        canvas.text(20, SLIDER_Y - 50, "Survive if neighbors:", TEXT_COLOR)
        canvas.text(20, SLIDER_Y - 130, "Birth if neighbors:", TEXT_COLOR)

        rules = self.simulation.rules
        rows = (
            (RULES_SURVIVE_Y, rules.survive, SURVIVE_COLOR),
            (RULES_BIRTH_Y, rules.birth, BIRTH_COLOR),
        )
        for n in range(MAX_NEIGHBOURS + 1):
            x0 = UI_BASE_X + n * BOX_MARGIN
            for y0, table, color in rows:
                canvas.rect_outline(x0, y0, x0 + BOX_SIZE, y0 + BOX_SIZE, TEXT_COLOR)
                if table[n]:
                    canvas.fill_rect(
                        x0 + 2, y0 + 2, x0 + BOX_SIZE - 2, y0 + BOX_SIZE - 2, color
                    )
                canvas.text(x0 + 8, y0 + 30, str(n), TEXT_COLOR)

        canvas.text(20, SLIDER_Y - 230, "[p] Pause/Resume", TEXT_COLOR)
        canvas.text(20, SLIDER_Y - 250, "[r] Reset grid", TEXT_COLOR)