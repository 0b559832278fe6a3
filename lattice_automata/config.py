"""Presets for the bundled simulations."""

from dataclasses import dataclass

from .automaton import NeighborCounter, count_adjacent, count_visible


@dataclass(frozen=True)
class SeatingRules:
    """How an occupied seat decides to empty."""
    threshold: int  # Occupied neighbors at which a seat empties
    counter: NeighborCounter  # Strategy that counts those neighbors


ADJACENT_RULES = SeatingRules(threshold=4, counter=count_adjacent)
VISIBLE_RULES = SeatingRules(threshold=5, counter=count_visible)

DEFAULT_CYCLES = 6
DEFAULT_HEX_DAYS = 100
DEFAULT_CELL_SIZE = 8
