"""Cellular automaton drivers over lattice grids.

Two flavours live here:

* a bounded seat layout that is iterated until it stops changing, with the
  neighbor counting strategy injected by the caller, and
* an unbounded sparse space of active points run for a fixed number of
  generations under an outer-totalistic birth/survival rule.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from itertools import product
from typing import Callable, List, Optional, Set

import numpy as np

from .coord import NEIGHBOR_OFFSETS, Coord, first_along
from .errors import ConvergenceError
from .lattice import bounds
from .layout import SeatLayout, Tile

logger = logging.getLogger(__name__)

NeighborCounter = Callable[[SeatLayout, Coord], int]


@dataclass
class Rule:
    """Outer-totalistic rule in Birth/Survival notation (e.g., B3/S23 for Game of Life)."""
    birth: Set[int]  # Neighbor counts that cause birth
    survival: Set[int]  # Neighbor counts that allow survival

    @classmethod
    def from_string(cls, rule_str: str) -> "Rule":
        """Parse rule from string like 'B3/S23' or 'B2/S12'."""
        rule_str = rule_str.upper().replace(" ", "")
        birth_part = ""
        survival_part = ""

        if "/" in rule_str:
            for part in rule_str.split("/"):
                if part.startswith("B"):
                    birth_part = part[1:]
                elif part.startswith("S"):
                    survival_part = part[1:]
                else:
                    raise ValueError(f"invalid rule segment {part!r} in {rule_str!r}")
        elif "S" in rule_str:
            # Handle format like "B3S23"
            idx = rule_str.index("S")
            birth_part = rule_str[1:idx] if rule_str.startswith("B") else ""
            survival_part = rule_str[idx + 1:]
        elif rule_str.startswith("B"):
            birth_part = rule_str[1:]
        else:
            raise ValueError(f"invalid rule {rule_str!r}")

        birth = set(int(c) for c in birth_part if c.isdigit())
        survival = set(int(c) for c in survival_part if c.isdigit())

        return cls(birth=birth, survival=survival)

    def to_string(self) -> str:
        """Convert to standard notation like 'B3/S23'."""
        b_str = "".join(str(i) for i in sorted(self.birth))
        s_str = "".join(str(i) for i in sorted(self.survival))
        return f"B{b_str}/S{s_str}"

    def next_state(self, alive: bool, neighbors: int) -> bool:
        return neighbors in (self.survival if alive else self.birth)

    def __hash__(self):
        return hash((frozenset(self.birth), frozenset(self.survival)))

    def __eq__(self, other):
        if not isinstance(other, Rule):
            return False
        return self.birth == other.birth and self.survival == other.survival


# Rules used by the bundled simulations
CONWAY_CUBES = Rule.from_string("B3/S23")
HEX_TILES = Rule.from_string("B2/S12")


# ---------------------------------------------------------------------------
# Bounded layouts run to a fixed point
# ---------------------------------------------------------------------------

def count_adjacent(layout: SeatLayout, c: Coord) -> int:
    """Occupied seats among the eight cells touching ``c``."""
    return sum(1 for n in c.neighbors_8() if layout.get(n) == Tile.OCCUPIED)


def count_visible(layout: SeatLayout, c: Coord) -> int:
    """Occupied seats seen from ``c`` looking along each of the eight directions.

    A line of sight passes over floor and ends at the first seat or at the
    edge of the layout.
    """
    seen = 0
    for d in NEIGHBOR_OFFSETS:
        stop = first_along(c, d, lambda p: layout.get(p) != Tile.FLOOR)
        if layout.get(stop) == Tile.OCCUPIED:
            seen += 1
    return seen


def next_tile(tile: Tile, neighbors: int, threshold: int) -> Tile:
    if tile == Tile.EMPTY and neighbors == 0:
        return Tile.OCCUPIED
    if tile == Tile.OCCUPIED and neighbors >= threshold:
        return Tile.EMPTY
    return tile


def step_layout(layout: SeatLayout, threshold: int, counter: NeighborCounter) -> SeatLayout:
    """Compute the next generation, reading only from ``layout``."""
    new_tiles = np.empty_like(layout.tiles)
    for c in layout.coords():
        tile = layout[c]
        if tile == Tile.FLOOR:
            new_tiles[c.y, c.x] = tile
            continue
        new_tiles[c.y, c.x] = next_tile(tile, counter(layout, c), threshold)
    return SeatLayout(new_tiles)


@dataclass
class SteadyState:
    """Final layout of a fixed-point run."""
    layout: SeatLayout
    generations: int  # generations that changed something

    @property
    def occupied(self) -> int:
        return self.layout.occupied()


def settle(
    initial: SeatLayout,
    occupied_threshold: int,
    neighbor_counter: NeighborCounter,
    max_generations: Optional[int] = None,
    history: Optional[List[SeatLayout]] = None,
) -> SteadyState:
    """Step ``initial`` until a generation reproduces its predecessor.

    There is no cycle detection: an oscillating layout runs forever unless
    ``max_generations`` is given, in which case ConvergenceError is raised.
    """
    current = initial
    generations = 0
    if history is not None:
        history.append(current)

    while True:
        nxt = step_layout(current, occupied_threshold, neighbor_counter)
        if nxt == current:
            break
        generations += 1
        if max_generations is not None and generations > max_generations:
            raise ConvergenceError(max_generations)
        logger.debug("generation %d: %d occupied", generations, nxt.occupied())
        current = nxt
        if history is not None:
            history.append(current)

    logger.info(
        "steady state after %d generations with %d occupied (threshold %d)",
        generations, current.occupied(), occupied_threshold,
    )
    return SteadyState(layout=current, generations=generations)


def run_to_steady_state(
    initial: SeatLayout,
    occupied_threshold: int,
    neighbor_counter: NeighborCounter,
    max_generations: Optional[int] = None,
    history: Optional[List[SeatLayout]] = None,
) -> int:
    """Run to a fixed point and return how many seats end up occupied."""
    return settle(initial, occupied_threshold, neighbor_counter, max_generations, history).occupied


# ---------------------------------------------------------------------------
# Unbounded sparse spaces run for a fixed number of generations
# ---------------------------------------------------------------------------

def count_neighbors(alive: np.ndarray) -> np.ndarray:
    """Count live Moore neighbors of every cell of an N-dimensional array.

    Cells beyond the edges count as dead.
    """
    padded = np.pad(alive.astype(np.int32), 1)
    neighbors = np.zeros(alive.shape, dtype=np.int32)
    for offset in product((-1, 0, 1), repeat=alive.ndim):
        if not any(offset):
            continue
        window = tuple(slice(1 + d, 1 + d + n) for d, n in zip(offset, alive.shape))
        neighbors += padded[window]
    return neighbors


def _to_array(active: Set[tuple], low: tuple, high: tuple) -> np.ndarray:
    origin = np.array(low)
    alive = np.zeros(tuple(np.array(high) - origin + 1), dtype=np.uint8)
    index = np.array(list(active)) - origin
    alive[tuple(index.T)] = 1
    return alive


def step_box(active: Set[tuple], rule: Rule = CONWAY_CUBES) -> Set[tuple]:
    """One generation over the bounding box of ``active`` grown by one cell."""
    box = bounds(active)
    if box is None:
        return set()
    low, high = box
    kind = type(low)

    alive = _to_array(active, low, high)
    neighbors = count_neighbors(alive)
    born = (alive == 0) & np.isin(neighbors, sorted(rule.birth))
    survived = (alive == 1) & np.isin(neighbors, sorted(rule.survival))

    cells = np.argwhere(born | survived) + np.array(low)
    return {kind._make(int(v) for v in row) for row in cells}


def step_tally(active: Set[tuple], rule: Rule) -> Set[tuple]:
    """One generation by tallying the neighbors of every active cell."""
    tally = Counter(n for cell in active for n in cell.neighbors())
    nxt = {cell for cell, n in tally.items() if rule.next_state(cell in active, n)}
    if 0 in rule.survival:
        nxt.update(cell for cell in active if cell not in tally)
    return nxt


def _run(active, generations: int, step: Callable[[Set[tuple]], Set[tuple]]) -> Set[tuple]:
    current = set(active)
    for gen in range(1, generations + 1):
        current = step(current)
        logger.debug("generation %d: %d active", gen, len(current))
    return current


def run_cycles(active, generations: int, rule: Rule = CONWAY_CUBES) -> Set[tuple]:
    """Advance a sparse set of N-D points ``generations`` times.

    Every point of the grown bounding box is evaluated each generation, so the
    rule must not give birth to cells with no live neighbors.
    """
    if 0 in rule.birth:
        raise ValueError(f"{rule.to_string()} births cells with no neighbors; the space would be infinite")
    return _run(active, generations, lambda cells: step_box(cells, rule))


def run_tally_cycles(active, generations: int, rule: Rule = HEX_TILES) -> Set[tuple]:
    """Like run_cycles, for point types that only know their own neighbors."""
    if 0 in rule.birth:
        raise ValueError(f"{rule.to_string()} births cells with no neighbors; the space would be infinite")
    return _run(active, generations, lambda cells: step_tally(cells, rule))


def count_active_after(active, generations: int, rule: Rule = CONWAY_CUBES) -> int:
    final = run_cycles(active, generations, rule)
    logger.info("%d active after %d generations of %s", len(final), generations, rule.to_string())
    return len(final)

