import pytest

from life.grid import Coordinate, Grid
from life.stepper import step, step_numpy

CENTER = Coordinate(2, 2)

# The eight neighbors of CENTER on a 5x5 grid
RING = [(1, 1), (2, 1), (3, 1), (1, 2), (3, 2), (1, 3), (2, 3), (3, 3)]


@pytest.fixture(params=[step, step_numpy], ids=["per_cell", "numpy"])
def stepper(request):
    """Both steppers must satisfy every rule test."""
    return request.param


@pytest.fixture
def random_grid():
    return Grid.new_random(12, 9, seed=1234)


@pytest.fixture
def center_grid():
    """Build a 5x5 grid with the center cell and some of its ring alive."""
    def build(center_alive: bool, alive_neighbors: int) -> Grid:
        alive = RING[:alive_neighbors]
        if center_alive:
            alive = alive + [CENTER]
        return Grid.from_alive(5, 5, alive)
    return build
