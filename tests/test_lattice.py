import pytest

from lattice_automata.lattice import (
    Coord3d,
    Coord4d,
    HexCoord,
    HexStep,
    bounds,
    iter_box,
    lift,
    manhattan_distance,
)


@pytest.mark.parametrize("p, expected", [(Coord3d(0, 0, 0), 26), (Coord4d(1, -2, 3, -4), 80)])
def test_neighbor_counts(p, expected):
    ns = list(p.neighbors())
    assert len(ns) == expected
    assert len(set(ns)) == expected
    assert p not in ns
    for n in ns:
        assert type(n) is type(p)
        assert max(abs(a - b) for a, b in zip(n, p)) == 1


def test_arithmetic_and_distance():
    assert Coord3d(1, 2, 3) + Coord3d(1, 1, 1) == Coord3d(2, 3, 4)
    assert Coord4d(1, 2, 3, 4) - Coord4d(1, 1, 1, 1) == Coord4d(0, 1, 2, 3)
    assert manhattan_distance(Coord3d(0, 0, 0), Coord3d(1, -2, 3)) == 6


def test_bounds_grow_by_one():
    low, high = bounds({Coord3d(0, 0, 0), Coord3d(2, 1, 0)})
    assert low == Coord3d(-1, -1, -1)
    assert high == Coord3d(3, 2, 1)
    assert type(low) is Coord3d


def test_bounds_of_nothing():
    assert bounds(set()) is None


def test_iter_box():
    assert list(iter_box(Coord3d(0, 0, 0), Coord3d(1, 1, 0))) == [
        Coord3d(0, 0, 0),
        Coord3d(0, 1, 0),
        Coord3d(1, 0, 0),
        Coord3d(1, 1, 0),
    ]
    low, high = bounds({Coord4d(0, 0, 0, 0)})
    assert len(list(iter_box(low, high))) == 81


def test_lift():
    assert lift(2, 3, Coord3d) == Coord3d(2, 3, 0)
    assert lift(2, 3, Coord4d) == Coord4d(2, 3, 0, 0)


def test_hex_paths():
    steps = list(HexStep.parse("esenee"))
    assert steps == [HexStep.E, HexStep.SE, HexStep.NE, HexStep.E]
    tile = HexCoord.origin().follow(steps)
    assert tile == HexCoord(3, -3, 0)
    assert tile.distance(HexCoord.origin()) == 3


def test_hex_loop_returns_to_start():
    assert HexCoord.origin().follow(HexStep.parse("nwwswee")) == HexCoord.origin()


def test_hex_path_rejects_unknown_steps():
    with pytest.raises(ValueError):
        list(HexStep.parse("ex"))


def test_hex_neighbors():
    ns = list(HexCoord(2, -1, -1).neighbors())
    assert len(set(ns)) == 6
    for n in ns:
        assert sum(n) == 0
        assert n.distance(HexCoord(2, -1, -1)) == 1
