"""Survival and birth rules for a two-state cellular automaton."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_NEIGHBOURS = 8
_SIZE = MAX_NEIGHBOURS + 1


def _empty() -> list[bool]:
    return [False] * _SIZE


@dataclass
class Rules:
    """Rule table indexed by the number of live neighbours (0 to 8).

    ``survive[n]`` tells whether a live cell with ``n`` neighbours stays alive,
    ``birth[n]`` whether a dead cell with ``n`` neighbours comes alive.
    """

    survive: list[bool] = field(default_factory=_empty)
    birth: list[bool] = field(default_factory=_empty)

    def __post_init__(self) -> None:
        if len(self.survive) != _SIZE or len(self.birth) != _SIZE:
            raise ValueError(f"rule tables must have {_SIZE} entries")

    @classmethod
    def conway(cls) -> Rules:
        """Conway's Game of Life, "23/3"."""
        return cls(
            survive=[n in (2, 3) for n in range(_SIZE)],
            birth=[n == 3 for n in range(_SIZE)],
        )

    @classmethod
    def parse(cls, text: str) -> Rules:
        """Parse a "survive/birth" string such as "23/3".

        Characters other than digits are ignored. Raises ValueError when the
        separator is missing or a digit exceeds the neighbour count.
        """
        survive_part, sep, birth_part = text.partition("/")
        if not sep:
            raise ValueError(f"rule string {text!r} has no '/' separator")
        return cls(survive=_digits(survive_part), birth=_digits(birth_part))

    def next_state(self, alive: bool, neighbours: int) -> bool:
        """State of a cell in the next generation."""
        _check_count(neighbours)
        return self.survive[neighbours] if alive else self.birth[neighbours]

    def toggle_survive(self, count: int) -> bool:
        """Flip the survival entry for ``count`` neighbours; return its new value."""
        _check_count(count)
        self.survive[count] = not self.survive[count]
        return self.survive[count]

    def toggle_birth(self, count: int) -> bool:
        """Flip the birth entry for ``count`` neighbours; return its new value."""
        _check_count(count)
        self.birth[count] = not self.birth[count]
        return self.birth[count]

    def __str__(self) -> str:
        survive = "".join(str(n) for n, on in enumerate(self.survive) if on)
        birth = "".join(str(n) for n, on in enumerate(self.birth) if on)
        return f"{survive}/{birth}"


def _check_count(count: int) -> None:
    if not 0 <= count <= MAX_NEIGHBOURS:
        raise ValueError(f"neighbour count {count} outside 0..{MAX_NEIGHBOURS}")


def _digits(part: str) -> list[bool]:
    table = _empty()
    for char in part:
        if char.isdigit():
            count = int(char)
            _check_count(count)
            table[count] = True
    return table