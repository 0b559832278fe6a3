"""Lattice Automata - lattice coordinates and cellular automaton drivers."""

from .automaton import Rule, count_adjacent, count_visible, run_cycles, run_to_steady_state, settle
from .coord import Coord, Direction, Heading, ray_walk
from .lattice import Coord3d, Coord4d, HexCoord
from .layout import SeatLayout, Tile

__all__ = [
    "Coord", "Direction", "Heading", "ray_walk",
    "Coord3d", "Coord4d", "HexCoord",
    "SeatLayout", "Tile",
    "Rule", "count_adjacent", "count_visible", "run_to_steady_state", "settle", "run_cycles",
]
