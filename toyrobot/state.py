"""Robot state: grid bounds, facing, and the Unplaced/Placed variants.

The table top is a square grid with the origin in the bottom-left corner.
A robot that has never been (validly) placed is UNPLACED; after that the
state is always a Placed(position, facing) whose position is on the grid.
"""

from dataclasses import dataclass
from enum import Enum

GRID_MAX = 4  # inclusive, so the grid is 5x5


def in_bounds(x, y):
    return 0 <= x <= GRID_MAX and 0 <= y <= GRID_MAX


class Facing(Enum):
    """Compass direction; values are positions in the clockwise cycle."""
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def right(self):
        return Facing((self.value + 1) % 4)

    def left(self):
        return Facing((self.value - 1) % 4)

    @property
    def delta(self):
        """(dx, dy) for one step forward."""
        return _DELTAS[self]

    @classmethod
    def from_name(cls, name):
        """Look up a facing by name, case-insensitively. Returns None if unknown."""
        return cls.__members__.get(name.strip().upper())


_DELTAS = {
    Facing.NORTH: (0, 1),
    Facing.EAST: (1, 0),
    Facing.SOUTH: (0, -1),
    Facing.WEST: (-1, 0),
}


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def step(self, facing: Facing) -> "Position":
        dx, dy = facing.delta
        return Position(self.x + dx, self.y + dy)

    def in_bounds(self) -> bool:
        return in_bounds(self.x, self.y)


@dataclass(frozen=True)
class Unplaced:
    """No robot on the table yet."""


@dataclass(frozen=True)
class Placed:
    position: Position
    facing: Facing

    def report(self) -> str:
        """Format as "X,Y,FACING"."""
        return f"{self.position.x},{self.position.y},{self.facing.name}"


UNPLACED = Unplaced()
