import pytest

from lattice_automata.layout import SeatLayout

EXAMPLE_ROWS = [
    "L.LL.LL.LL",
    "LLLLLLL.LL",
    "L.L.L..L..",
    "LLLL.LL.LL",
    "L.LL.LL.LL",
    "L.LLLLL.LL",
    "..L.L.....",
    "LLLLLLLLLL",
    "L.LLLLLL.L",
    "L.LLLLL.LL",
]

SEED_PLANE = ".#.\n..#\n###\n"


@pytest.fixture
def example_layout():
    return SeatLayout.from_rows(EXAMPLE_ROWS)


@pytest.fixture
def example_text():
    return "\n".join(EXAMPLE_ROWS) + "\n"


@pytest.fixture
def seed_plane():
    return SEED_PLANE
