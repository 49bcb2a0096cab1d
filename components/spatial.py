"""components.spatial — Position and movement directions.

All coordinates are integer pixels in world space (origin = screen centre).
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class Direction(Enum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


class DirectionSet:
    """Fixed-capacity set of ``Direction`` values, stored as a 4-bit mask.

    A direction is either in the set or not — adding it twice is the same
    as adding it once, and ``discard`` removes it completely.  Iteration
    follows ``Direction`` declaration order.
    """

    __slots__ = ("_bits",)

    def __init__(self, directions: Iterable[Direction] = ()):
        self._bits = 0
        for d in directions:
            self.add(d)

    def add(self, direction: Direction) -> None:
        self._bits |= 1 << direction.value

    def discard(self, direction: Direction) -> None:
        """Remove *direction*; a no-op when it is not present."""
        self._bits &= ~(1 << direction.value)

    def clear(self) -> None:
        self._bits = 0

    def __contains__(self, direction: object) -> bool:
        if not isinstance(direction, Direction):
            return False
        return bool(self._bits & (1 << direction.value))

    def __iter__(self) -> Iterator[Direction]:
        for d in Direction:
            if self._bits & (1 << d.value):
                yield d

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __bool__(self) -> bool:
        return self._bits != 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DirectionSet):
            return self._bits == other._bits
        return NotImplemented

    def __repr__(self) -> str:
        names = ", ".join(d.name for d in self)
        return f"DirectionSet({{{names}}})"

    def copy(self) -> DirectionSet:
        out = DirectionSet()
        out._bits = self._bits
        return out


@dataclass
class Position:
    x: int = 0        # px
    y: int = 0        # px

    def offset(self, dx: int, dy: int) -> None:
        """Move in place by (dx, dy)."""
        self.x += dx
        self.y += dy

    def copy(self) -> Position:
        return Position(self.x, self.y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
