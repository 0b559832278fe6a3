"""Higher dimensional and hexagonal lattice points.

Each point type stands alone; the drivers in ``automaton`` only rely on
points being tuples of ints that can enumerate their ``neighbors()``.
"""

from enum import Enum
from itertools import product
from typing import Collection, Iterable, Iterator, NamedTuple, Optional, Tuple, Type, TypeVar

import numpy as np

P = TypeVar("P", bound=tuple)


def _unit_offsets(dims: int) -> Tuple[Tuple[int, ...], ...]:
    return tuple(d for d in product((-1, 0, 1), repeat=dims) if any(d))


_OFFSETS_3D = _unit_offsets(3)
_OFFSETS_4D = _unit_offsets(4)


class Coord3d(NamedTuple):
    x: int
    y: int
    z: int

    def __add__(self, other):
        return Coord3d(self.x + other[0], self.y + other[1], self.z + other[2])

    def __sub__(self, other):
        return Coord3d(self.x - other[0], self.y - other[1], self.z - other[2])

    def neighbors(self) -> Iterator["Coord3d"]:
        """All 26 surrounding points."""
        x, y, z = self
        return (Coord3d(x + dx, y + dy, z + dz) for dx, dy, dz in _OFFSETS_3D)


class Coord4d(NamedTuple):
    x: int
    y: int
    z: int
    w: int

    def __add__(self, other):
        return Coord4d(self.x + other[0], self.y + other[1], self.z + other[2], self.w + other[3])

    def __sub__(self, other):
        return Coord4d(self.x - other[0], self.y - other[1], self.z - other[2], self.w - other[3])

    def neighbors(self) -> Iterator["Coord4d"]:
        """All 80 surrounding points."""
        x, y, z, w = self
        return (Coord4d(x + dx, y + dy, z + dz, w + dw) for dx, dy, dz, dw in _OFFSETS_4D)


def manhattan_distance(a: tuple, b: tuple) -> int:
    return sum(abs(i - j) for i, j in zip(a, b))


def bounds(points: Collection[P], margin: int = 1) -> Optional[Tuple[P, P]]:
    """Inclusive bounding box of ``points`` grown by ``margin`` on every axis.

    Returns None when there are no points.
    """
    if not points:
        return None
    kind = type(next(iter(points)))
    stacked = np.array(list(points), dtype=np.int64)
    low = stacked.min(axis=0) - margin
    high = stacked.max(axis=0) + margin
    return kind._make(int(v) for v in low), kind._make(int(v) for v in high)


def iter_box(low: P, high: P) -> Iterator[P]:
    """Every point in the inclusive box, last axis varying fastest."""
    kind = type(low)
    ranges = [range(a, b + 1) for a, b in zip(low, high)]
    return (kind._make(p) for p in product(*ranges))


def lift(x: int, y: int, kind: Type[P]) -> P:
    """Embed a plane position into ``kind``, padding the extra axes with zero."""
    return kind._make((x, y) + (0,) * (len(kind._fields) - 2))


class HexStep(Enum):
    """Moves between hexagons in cube coordinates."""
    E = (1, -1, 0)
    SE = (0, -1, 1)
    SW = (-1, 0, 1)
    W = (-1, 1, 0)
    NW = (0, 1, -1)
    NE = (1, 0, -1)

    @classmethod
    def parse(cls, path: str) -> Iterator["HexStep"]:
        """Split a run-together path such as ``"esenee"`` into steps."""
        i = 0
        while i < len(path):
            head = path[i]
            if head in "ns":
                token = path[i:i + 2]
                i += 2
            else:
                token = head
                i += 1
            try:
                yield cls[token.upper()]
            except KeyError:
                raise ValueError(f"invalid hex step {token!r} in {path!r}") from None


class HexCoord(NamedTuple):
    """Hexagon in cube coordinates; x + y + z is always zero."""
    x: int
    y: int
    z: int

    @classmethod
    def origin(cls) -> "HexCoord":
        return cls(0, 0, 0)

    def step(self, step: HexStep) -> "HexCoord":
        dx, dy, dz = step.value
        return HexCoord(self.x + dx, self.y + dy, self.z + dz)

    def follow(self, steps: Iterable[HexStep]) -> "HexCoord":
        tile = self
        for s in steps:
            tile = tile.step(s)
        return tile

    def neighbors(self) -> Iterator["HexCoord"]:
        return (self.step(s) for s in HexStep)

    def distance(self, other: "HexCoord") -> int:
        return manhattan_distance(self, other) // 2
