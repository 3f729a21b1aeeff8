import pytest

from merge_hull.data import Point

from helpers import grid_points


@pytest.fixture
def square_with_center():
    return [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2), Point(1, 1)]


@pytest.fixture(params=range(8))
def random_grid(request):
    return grid_points(150, seed=request.param)
