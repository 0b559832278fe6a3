import pytest

from lattice_automata.coord import (
    Coord,
    Direction,
    Heading,
    add,
    first_along,
    manhattan_distance,
    neighbors_4,
    neighbors_8,
    offset,
    ray_walk,
    subtract,
)


def test_add_and_subtract():
    assert Coord(1, 3) + Coord(2, 4) == Coord(3, 7)
    assert Coord(1, 3) - Coord(2, 4) == Coord(-1, -1)
    assert add(Coord(1, 3), Coord(2, 4)) == Coord(3, 7)
    assert subtract(Coord(1, 3), Coord(2, 4)) == Coord(-1, -1)


def test_points_hash_structurally():
    assert len({Coord(1, 2), Coord(1, 2), Coord(2, 1)}) == 2


def test_distance():
    a = Coord(3, 4)
    b = Coord(1, 1)
    assert a.distance_from_origin() == 7
    assert b.distance_from_origin() == 2
    assert Coord.distance(a, b) == 5
    assert manhattan_distance(a, b) == manhattan_distance(b, a)
    assert manhattan_distance(a, a) == 0


def test_offset():
    origin = Coord.origin()
    assert origin.offset(Direction(Heading.UP, 100)) == Coord(0, -100)
    assert origin.offset(Direction(Heading.RIGHT, 100)) == Coord(100, 0)
    assert origin.offset(Direction(Heading.DOWN, 100)) == Coord(0, 100)
    assert origin.offset(Direction(Heading.LEFT, 100)) == Coord(-100, 0)
    assert offset(origin, Direction(Heading.UP)) == origin.up()


@pytest.mark.parametrize("heading", list(Heading))
@pytest.mark.parametrize("length", [0, 1, 7])
def test_offset_then_inverse_returns_home(heading, length):
    p = Coord(-3, 12)
    d = Direction(heading, length)
    assert p.offset(d).offset(d.invert()) == p


def test_resize_keeps_axis():
    d = Direction(Heading.LEFT).resize(9)
    assert d.heading is Heading.LEFT
    assert len(d) == 9
    assert d.delta == Coord(-9, 0)


def test_turns():
    assert Heading.UP.turn_right() is Heading.RIGHT
    assert Heading.UP.turn_left() is Heading.LEFT
    assert Heading.LEFT.turn_right() is Heading.UP
    assert Heading.DOWN.opposite is Heading.UP
    assert Direction(Heading.RIGHT, 3).turn_right() == Direction(Heading.DOWN, 3)


def test_rotation_about_origin():
    waypoint = Coord(10, -4)
    assert waypoint.rotate_right() == Coord(4, 10)
    assert waypoint.rotate_right().rotate_left() == waypoint


def test_neighbors_4():
    assert list(Coord(10, 10).neighbors_4()) == [
        Coord(10, 9),
        Coord(11, 10),
        Coord(10, 11),
        Coord(9, 10),
    ]


def test_neighbors_8_order():
    assert list(neighbors_8(Coord(10, 10))) == [
        Coord(10, 9),   # up
        Coord(11, 9),   # up-right
        Coord(11, 10),  # right
        Coord(11, 11),  # right-down
        Coord(10, 11),  # down
        Coord(9, 11),   # down-left
        Coord(9, 10),   # left
        Coord(9, 9),    # left-up
    ]


@pytest.mark.parametrize("p", [Coord(0, 0), Coord(-5, 3), Coord(1000, -1000)])
def test_neighbors_8_are_distinct_and_touching(p):
    ns = list(p.neighbors_8())
    assert len(ns) == 8
    assert len(set(ns)) == 8
    for n in ns:
        assert max(abs(n.x - p.x), abs(n.y - p.y)) == 1


def test_neighbors_can_be_iterated_again():
    ns = neighbors_4(Coord(2, 2))
    assert list(ns) == list(ns)
    assert len(ns) == 4


def test_ray_walk_diagonal_excludes_origin():
    ray = ray_walk(Coord(0, 0), Coord(1, 1))
    assert [next(ray) for _ in range(3)] == [Coord(1, 1), Coord(2, 2), Coord(3, 3)]


def test_ray_walk_uses_direction_length():
    ray = ray_walk(Coord(0, 0), Direction(Heading.RIGHT, 2))
    assert [next(ray) for _ in range(3)] == [Coord(2, 0), Coord(4, 0), Coord(6, 0)]


def test_first_along():
    assert first_along(Coord(0, 0), Coord(0, 1), lambda p: p.y >= 4) == Coord(0, 4)


def test_navigating_a_ship():
    ship = Coord.origin()
    facing = Direction(Heading.RIGHT)
    ship = ship.offset(facing.resize(10))
    ship = ship.offset(Direction(Heading.UP, 3))
    ship = ship.offset(facing.resize(7))
    facing = facing.turn_right()
    ship = ship.offset(facing.resize(11))
    assert ship == Coord(17, 8)
    assert ship.distance_from_origin() == 25


def test_navigating_by_waypoint():
    ship = Coord.origin()
    waypoint = Coord(10, -1)
    ship = ship + waypoint * 10
    waypoint = waypoint.offset(Direction(Heading.UP, 3))
    ship = ship + 7 * waypoint
    waypoint = waypoint.rotate_right()
    ship = ship + waypoint * 11
    assert ship == Coord(214, 72)
    assert ship.distance_from_origin() == 286
