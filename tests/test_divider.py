import pytest

from merge_hull import data, divider, errors, verify
from merge_hull.data import Point, create_points


def test_single_point_is_its_own_hull():
    assert divider.compute_hull([Point(3, 4)]) == [Point(3, 4)]
    assert divider.divide([Point(3, 4)]) == [Point(3, 4)]


def test_two_points():
    assert divider.compute_hull([Point(1, 1), Point(0, 0)]) == [Point(0, 0),
                                                                Point(1, 1)]


def test_triangle():
    points = create_points([(0, 0), (1, 1), (2, 0)])
    assert divider.compute_hull(points) == create_points(
        [(0, 0), (2, 0), (1, 1)])


def test_square_drops_interior_point(square_with_center):
    hull = divider.compute_hull(square_with_center)
    assert hull == create_points([(0, 0), (2, 0), (2, 2), (0, 2)])


def test_collinear_point_is_dropped():
    points = create_points([(0, 0), (1, 0), (2, 0), (3, 5)])
    assert divider.compute_hull(points) == create_points(
        [(0, 0), (2, 0), (3, 5)])


def test_all_collinear_reduces_to_endpoints():
    points = [Point(i, 2 * i + 1) for i in range(9)]
    assert divider.compute_hull(points) == [Point(0, 1), Point(8, 17)]


def test_duplicates_are_collapsed():
    points = create_points([(0, 0), (0, 0), (1, 2), (1, 2), (2, 0)])
    assert divider.compute_hull(points) == create_points(
        [(0, 0), (2, 0), (1, 2)])
    assert divider.compute_hull([Point(5, 5), Point(5, 5)]) == [Point(5, 5)]


def test_empty_input_is_rejected():
    with pytest.raises(errors.EmptyInputError):
        divider.compute_hull([])


def test_strict_rejects_shared_x(square_with_center):
    with pytest.raises(errors.DuplicateXCoordinateError):
        divider.compute_hull(square_with_center, strict=True)
    assert divider.compute_hull(
        create_points([(0, 0), (1, 1), (2, 0)]), strict=True) == \
        create_points([(0, 0), (2, 0), (1, 1)])


def test_divide_leaves_input_alone():
    points = create_points([(0, 0), (1, 3), (2, -1), (3, 1)])
    before = list(points)
    divider.divide(points)
    assert points == before


def test_rotate_to_leftmost():
    hull = create_points([(2, 0), (1, 1), (0, 0)])
    assert divider.rotate_to_leftmost(hull) == create_points(
        [(0, 0), (2, 0), (1, 1)])


def test_random_grid_hull_is_valid(random_grid):
    hull = divider.compute_hull(random_grid, strict=True)
    verify.check_hull(random_grid, hull)
    assert hull[0] == min(random_grid)


def test_random_float_hull_is_valid():
    points = data.generate_points(2000, seed=3)
    hull = divider.compute_hull(points)
    verify.check_hull(points, hull)


def test_hull_is_idempotent(random_grid):
    hull = divider.compute_hull(random_grid)
    assert divider.compute_hull(hull) == hull
