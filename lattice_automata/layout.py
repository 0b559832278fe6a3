"""Bounded 2D seat layouts backed by numpy arrays."""

from enum import IntEnum
from typing import Iterable, Iterator, List, Optional, Set, Type, Union

import numpy as np

from .coord import Coord
from .errors import GridBoundsError, LayoutParseError
from .lattice import P, lift


class Tile(IntEnum):
    FLOOR = 0
    EMPTY = 1
    OCCUPIED = 2

    @classmethod
    def from_char(cls, c: str) -> "Tile":
        try:
            return _FROM_CHAR[c]
        except KeyError:
            raise LayoutParseError(f"invalid layout character {c!r}") from None

    def to_char(self) -> str:
        return _TO_CHAR[self]


_FROM_CHAR = {".": Tile.FLOOR, "L": Tile.EMPTY, "#": Tile.OCCUPIED}
_TO_CHAR = {tile: c for c, tile in _FROM_CHAR.items()}


class SeatLayout:
    """Rectangular grid of tiles addressed by ``Coord(x, y)``, row-major."""

    def __init__(self, tiles: np.ndarray):
        if tiles.ndim != 2:
            raise ValueError(f"layout must be 2D, got shape {tiles.shape}")
        self.tiles = np.array(tiles, dtype=np.uint8)
        self.tiles.flags.writeable = False

    @classmethod
    def parse(cls, source: Union[str, Iterable[str]]) -> "SeatLayout":
        """Build a layout from text (or an iterable of lines), validating every character."""
        lines = source.splitlines() if isinstance(source, str) else list(source)
        lines = [line.rstrip("\r\n") for line in lines]
        while lines and not lines[-1].strip():
            lines.pop()
        if not lines:
            raise LayoutParseError("layout is empty")

        width = len(lines[0])
        rows: List[List[int]] = []
        for y, line in enumerate(lines, 1):
            if len(line) != width:
                raise LayoutParseError(f"expected {width} columns, found {len(line)}", line=y)
            row = []
            for x, c in enumerate(line, 1):
                try:
                    row.append(Tile.from_char(c))
                except LayoutParseError as e:
                    raise LayoutParseError(str(e), line=y, column=x) from None
            rows.append(row)
        return cls(np.array(rows, dtype=np.uint8))

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "SeatLayout":
        return cls.parse(list(rows))

    @property
    def width(self) -> int:
        return self.tiles.shape[1]

    @property
    def height(self) -> int:
        return self.tiles.shape[0]

    def in_bounds(self, c: Coord) -> bool:
        return 0 <= c.x < self.width and 0 <= c.y < self.height

    def get(self, c: Coord) -> Optional[Tile]:
        """Tile at ``c``, or None outside the grid."""
        if not self.in_bounds(c):
            return None
        return Tile(self.tiles[c.y, c.x])

    def __getitem__(self, c: Coord) -> Tile:
        if not self.in_bounds(c):
            raise GridBoundsError(f"{c} is outside a {self.width}x{self.height} layout")
        return Tile(self.tiles[c.y, c.x])

    def coords(self) -> Iterator[Coord]:
        for y in range(self.height):
            for x in range(self.width):
                yield Coord(x, y)

    def count(self, tile: Tile) -> int:
        return int(np.sum(self.tiles == tile))

    def occupied(self) -> int:
        return self.count(Tile.OCCUPIED)

    def to_text(self) -> str:
        return "\n".join("".join(Tile(v).to_char() for v in row) for row in self.tiles)

    def __eq__(self, other):
        if not isinstance(other, SeatLayout):
            return NotImplemented
        return np.array_equal(self.tiles, other.tiles)

    __hash__ = None

    def __repr__(self) -> str:
        return f"SeatLayout({self.width}x{self.height}, occupied={self.occupied()})"


def seed_from_plane(source: Union[str, Iterable[str]], kind: Type[P]) -> Set[P]:
    """Active points of a ``.``/``#`` block lying in the z = 0 (and w = 0) plane."""
    lines = source.splitlines() if isinstance(source, str) else list(source)
    active = set()
    for y, line in enumerate(lines):
        for x, c in enumerate(line.rstrip("\r\n")):
            if c == "#":
                active.add(lift(x, y, kind))
            elif c != ".":
                raise LayoutParseError(f"invalid seed character {c!r}", line=y + 1, column=x + 1)
    return active
