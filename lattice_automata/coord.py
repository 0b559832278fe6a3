"""2D integer lattice points, compass headings and ray walks.

The coordinate system follows screen conventions: x grows to the right and
y grows downwards, so "up" is negative y.
"""

from dataclasses import dataclass, replace
from enum import Enum
from itertools import count
from typing import Callable, Iterator, NamedTuple, Tuple, Union


class Coord(NamedTuple):
    """Immutable 2D lattice point with structural equality and hashing."""
    x: int
    y: int

    @classmethod
    def origin(cls) -> "Coord":
        return cls(0, 0)

    def __add__(self, other: "Coord") -> "Coord":
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Coord") -> "Coord":
        return Coord(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Coord":
        return Coord(-self.x, -self.y)

    def __mul__(self, k: int) -> "Coord":
        return Coord(self.x * k, self.y * k)

    __rmul__ = __mul__

    @staticmethod
    def distance(a: "Coord", b: "Coord") -> int:
        """Manhattan distance between two points."""
        d = a - b
        return abs(d.x) + abs(d.y)

    def distance_from_origin(self) -> int:
        return Coord.distance(self, Coord.origin())

    def offset(self, direction: "Direction") -> "Coord":
        """Translate by a direction, honouring its length."""
        return self + direction.delta

    def up(self) -> "Coord":
        return self.offset(Direction(Heading.UP))

    def right(self) -> "Coord":
        return self.offset(Direction(Heading.RIGHT))

    def down(self) -> "Coord":
        return self.offset(Direction(Heading.DOWN))

    def left(self) -> "Coord":
        return self.offset(Direction(Heading.LEFT))

    def rotate_left(self) -> "Coord":
        """Quarter turn counter-clockwise about the origin (as seen on screen)."""
        return Coord(self.y, -self.x)

    def rotate_right(self) -> "Coord":
        """Quarter turn clockwise about the origin (as seen on screen)."""
        return Coord(-self.y, self.x)

    def neighbors_4(self) -> "Neighbors":
        return Neighbors(self, diagonals=False)

    def neighbors_8(self) -> "Neighbors":
        return Neighbors(self, diagonals=True)


class Heading(Enum):
    """Compass heading with its unit vector."""
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def unit(self) -> Coord:
        return Coord(*self.value)

    @property
    def opposite(self) -> "Heading":
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 2) % 4]

    def turn_right(self) -> "Heading":
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    def turn_left(self) -> "Heading":
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]


_CLOCKWISE = (Heading.UP, Heading.RIGHT, Heading.DOWN, Heading.LEFT)


@dataclass(frozen=True)
class Direction:
    """A heading scaled by a non-negative length."""
    heading: Heading
    length: int = 1

    def __len__(self) -> int:
        return self.length

    @property
    def delta(self) -> Coord:
        return self.heading.unit * self.length

    def resize(self, length: int) -> "Direction":
        """Same axis, new magnitude."""
        return replace(self, length=length)

    def invert(self) -> "Direction":
        return replace(self, heading=self.heading.opposite)

    def turn_left(self) -> "Direction":
        return replace(self, heading=self.heading.turn_left())

    def turn_right(self) -> "Direction":
        return replace(self, heading=self.heading.turn_right())


# Clockwise from straight up; the odd entries are the diagonals.
NEIGHBOR_OFFSETS: Tuple[Coord, ...] = (
    Coord(0, -1),   # up
    Coord(1, -1),   # up-right
    Coord(1, 0),    # right
    Coord(1, 1),    # right-down
    Coord(0, 1),    # down
    Coord(-1, 1),   # down-left
    Coord(-1, 0),   # left
    Coord(-1, -1),  # left-up
)


class Neighbors:
    """Restartable view over the orthogonal (and optionally diagonal) neighbors of a point."""

    def __init__(self, origin: Coord, diagonals: bool = True):
        self.origin = origin
        self.step = 1 if diagonals else 2

    def __iter__(self) -> Iterator[Coord]:
        origin = self.origin
        return (origin + d for d in NEIGHBOR_OFFSETS[::self.step])

    def __len__(self) -> int:
        return len(NEIGHBOR_OFFSETS[::self.step])

    def __repr__(self) -> str:
        kind = "8" if self.step == 1 else "4"
        return f"Neighbors({self.origin!r}, {kind})"


def add(a: Coord, b: Coord) -> Coord:
    return a + b


def subtract(a: Coord, b: Coord) -> Coord:
    return a - b


def manhattan_distance(a: Coord, b: Coord) -> int:
    return Coord.distance(a, b)


def offset(point: Coord, direction: Direction) -> Coord:
    return point.offset(direction)


def neighbors_4(point: Coord) -> Neighbors:
    return point.neighbors_4()


def neighbors_8(point: Coord) -> Neighbors:
    return point.neighbors_8()


def ray_walk(origin: Coord, step: Union[Direction, Coord]) -> Iterator[Coord]:
    """Yield origin + k * step for k = 1, 2, ... forever.

    ``step`` is either a Direction (its length is the stride) or a raw delta,
    which is how diagonal lines of sight are walked.
    """
    delta = step.delta if isinstance(step, Direction) else step
    for k in count(1):
        yield Coord(origin.x + delta.x * k, origin.y + delta.y * k)


def first_along(origin: Coord, step: Union[Direction, Coord], stop: Callable[[Coord], bool]) -> Coord:
    """First point of the ray from ``origin`` for which ``stop`` is true."""
    for point in ray_walk(origin, step):
        if stop(point):
            return point
