import logging
import typing as t

from merge_hull import data, errors, merger, util
from merge_hull.data import Hull, Point

logger = logging.getLogger(__name__)


def divide(points: t.Sequence[Point]) -> Hull:
    """
    Hull of points sorted by x, in CCW order.

    Assumes at least one point and no two points on the same vertical line;
    neither is checked here.
    """
    if len(points) == 1:
        return [points[0]]
    middle = len(points) // 2
    left_hull = divide(points[:middle])
    right_hull = divide(points[middle:])
    return merger.merge(left_hull, right_hull)


def rotate_to_leftmost(hull: Hull) -> Hull:
    start = hull.index(min(hull))
    return hull[start:] + hull[:start]


@util.timeit
def compute_hull(points: t.Iterable[Point], strict: bool = False) -> Hull:
    """
    Convex hull of an unordered collection of points.

    The result is a subset of the input in CCW order starting at the point
    with the lowest (x, y). Exact duplicates are collapsed first. Points that
    share an x-coordinate are outside the algorithm's contract; with `strict`
    they raise DuplicateXCoordinateError instead of being passed through.
    """
    ordered = data.sort_points(points)
    if not ordered:
        raise errors.EmptyInputError()
    if strict:
        data.check_distinct_x(ordered)
    hull = rotate_to_leftmost(divide(ordered))
    logger.info("Hull of %s points has %s vertices", len(ordered), len(hull))
    return hull
