#!/usr/bin/env python3
"""CLI for the lattice automata simulations."""

import argparse
import logging
import sys
from pathlib import Path

from .automaton import HEX_TILES, count_active_after, run_tally_cycles, settle
from .config import ADJACENT_RULES, DEFAULT_CELL_SIZE, DEFAULT_CYCLES, DEFAULT_HEX_DAYS, VISIBLE_RULES
from .errors import LatticeError, LayoutParseError
from .lattice import Coord3d, Coord4d, HexCoord, HexStep
from .layout import SeatLayout, seed_from_plane
from .visualize import save_animation


def read_text(path: str) -> str:
    return Path(path).read_text()


def cmd_seating(args):
    """Seat layout run to a fixed point with both neighbor rules."""
    layout = SeatLayout.parse(read_text(args.input))

    history = [] if args.gif else None
    adjacent = settle(layout, ADJACENT_RULES.threshold, ADJACENT_RULES.counter,
                      max_generations=args.max_generations, history=history)
    visible = settle(layout, VISIBLE_RULES.threshold, VISIBLE_RULES.counter,
                     max_generations=args.max_generations)

    print(f"A: {adjacent.occupied}")
    print(f"B: {visible.occupied}")

    if args.gif:
        save_animation(history, args.gif, cell_size=args.cell_size)
        print(f"Saved animation to: {args.gif}")


def cmd_cubes(args):
    """3D and 4D life seeded from a plane."""
    text = read_text(args.input)
    print(f"A: {count_active_after(seed_from_plane(text, Coord3d), args.cycles)}")
    print(f"B: {count_active_after(seed_from_plane(text, Coord4d), args.cycles)}")


def flip_tiles(lines) -> set:
    """Black tiles left after flipping the tile at the end of every path."""
    black = set()
    for number, line in enumerate(lines, 1):
        line = line.strip()
        if not line:
            continue
        try:
            tile = HexCoord.origin().follow(HexStep.parse(line))
        except ValueError as e:
            raise LayoutParseError(str(e), line=number) from None
        black ^= {tile}
    return black


def cmd_hex(args):
    """Hex tile flipping followed by hexagonal life."""
    black = flip_tiles(read_text(args.input).splitlines())
    print(f"A: {len(black)}")
    print(f"B: {len(run_tally_cycles(black, args.days, HEX_TILES))}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Lattice automata - run seat layouts and sparse life-like spaces"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every generation")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Seating command
    seating_parser = subparsers.add_parser("seating", help="Run a seat layout to its steady state")
    seating_parser.add_argument("input", type=str, help="Layout file of '.', 'L' and '#'")
    seating_parser.add_argument("--max-generations", type=int, default=None,
                                help="Give up after this many changing generations")
    seating_parser.add_argument("--gif", type=str, default=None, help="Save the adjacent-rule run as a GIF")
    seating_parser.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE, help="Cell size in pixels")
    seating_parser.set_defaults(func=cmd_seating)

    # Cubes command
    cubes_parser = subparsers.add_parser("cubes", help="Run 3D and 4D life from a seed plane")
    cubes_parser.add_argument("input", type=str, help="Seed file of '.' and '#'")
    cubes_parser.add_argument("-c", "--cycles", type=int, default=DEFAULT_CYCLES, help="Number of generations")
    cubes_parser.set_defaults(func=cmd_cubes)

    # Hex command
    hex_parser = subparsers.add_parser("hex", help="Flip hex tiles and run hexagonal life")
    hex_parser.add_argument("input", type=str, help="File of tile paths such as 'esenee'")
    hex_parser.add_argument("-d", "--days", type=int, default=DEFAULT_HEX_DAYS, help="Number of generations")
    hex_parser.set_defaults(func=cmd_hex)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except (LatticeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
