"""Pointer position over the main view and how recently it moved."""

from __future__ import annotations

import time
from dataclasses import dataclass

MOUSE_MOVEMENT_TIMEOUT = 2.0  # seconds


@dataclass
class MouseState:
    """Last known pointer position, in window pixels with y from the top."""

    x: int = 0
    y: int = 0
    inside: bool = False
    last_move: float | None = None

    def move(self, x: int, y: int, now: float | None = None) -> None:
        """Record a pointer movement at time ``now`` (defaults to the clock)."""
        self.x = x
        self.y = y
        self.inside = True
        self.last_move = time.time() if now is None else now

    def is_recent(self, now: float | None = None) -> bool:
        """Whether the pointer is inside and moved within the timeout."""
        if not self.inside or self.last_move is None:
            return False
        current = time.time() if now is None else now
        return current - self.last_move < MOUSE_MOVEMENT_TIMEOUT