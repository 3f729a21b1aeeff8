"""
Linear-time merge of two x-separated convex hulls.

Both hulls arrive in CCW order and every point of the left hull has a smaller
x-coordinate than every point of the right hull. The merge finds the lower and
upper common tangents by walking a candidate line from the rightmost left point
and the leftmost right point, then splices the two boundaries together.
"""
import logging
import typing as t

from dataclasses import dataclass

from merge_hull import constants
from merge_hull.data import Hull, Point

logger = logging.getLogger(__name__)


def turn(a: Point, b: Point, p: Point) -> constants.Turn:
    cross = (b.x - a.x) * (p.y - a.y) - (b.y - a.y) * (p.x - a.x)
    return constants.Turn((cross > 0) - (cross < 0))


@dataclass(frozen=True)
class HullIndex:
    hull: Hull
    index: int

    @property
    def point(self) -> Point:
        return self.hull[self.index]

    def next(self) -> 'HullIndex':
        return HullIndex(self.hull, (self.index + 1) % len(self.hull))

    def prev(self) -> 'HullIndex':
        return HullIndex(self.hull, (self.index - 1) % len(self.hull))


@dataclass(frozen=True)
class Tangent:
    """
    A common tangent, walked from `first` (stepped backward) and `second`
    (stepped forward). The supporting line runs from `second` to `first`.
    """
    first: HullIndex
    second: HullIndex

    @property
    def start(self) -> Point:
        return self.second.point

    @property
    def end(self) -> Point:
        return self.first.point


def is_cw_tangent_at(start: Point, end: Point, position: HullIndex) -> bool:
    """
    True when both CCW neighbours of `position` lie clockwise of, or on, the
    directed line start -> end. Reversing the line turns a lower tangent test
    into an upper tangent test.
    """
    return (turn(start, end, position.prev().point) <= constants.Turn.COLLINEAR
            and turn(start, end, position.next().point)
            <= constants.Turn.COLLINEAR)


def leftmost_index(hull: Hull) -> int:
    result = 0
    for i, point in enumerate(hull):
        if point.x < hull[result].x:
            result = i
    return result


def rightmost_index(hull: Hull) -> int:
    result = 0
    for i, point in enumerate(hull):
        if point.x > hull[result].x:
            result = i
    return result


def _extends(position: Point, neighbor: Point, other: Point) -> bool:
    # neighbor continues the segment other -> position past position
    return ((position.x - other.x) * (neighbor.x - position.x)
            + (position.y - other.y) * (neighbor.y - position.y)) > 0


def _slide(
    position: HullIndex,
    other: Point,
    step: t.Callable[[HullIndex], HullIndex],
) -> HullIndex:
    """Move onto collinear neighbours that lie further out along the tangent."""
    while True:
        neighbor = step(position)
        if (turn(other, position.point, neighbor.point)
                != constants.Turn.COLLINEAR
                or not _extends(position.point, neighbor.point, other)):
            return position
        position = neighbor


def walk_tangent(first: HullIndex, second: HullIndex) -> Tangent:
    """
    Walk the line second -> first until it supports both hulls.

    Called with (left, right) seeds this yields the lower tangent, with
    (right, left) seeds the upper tangent.
    """
    while not (is_cw_tangent_at(second.point, first.point, first)
               and is_cw_tangent_at(second.point, first.point, second)):
        while not is_cw_tangent_at(second.point, first.point, first):
            first = first.prev()
        while not is_cw_tangent_at(second.point, first.point, second):
            second = second.next()

    first = _slide(first, second.point, HullIndex.prev)
    second = _slide(second, first.point, HullIndex.next)
    return Tangent(first, second)


def _collect(start: HullIndex, stop: HullIndex) -> Hull:
    result = []
    position = start
    while position.index != stop.index:
        result.append(position.point)
        position = position.next()
    # appended after the loop so a single point segment still terminates
    result.append(stop.point)
    return result


def merge(left_hull: Hull, right_hull: Hull) -> Hull:
    left_seed = HullIndex(left_hull, rightmost_index(left_hull))
    right_seed = HullIndex(right_hull, leftmost_index(right_hull))

    lower = walk_tangent(left_seed, right_seed)
    upper = walk_tangent(right_seed, left_seed)
    logger.debug("Merging %s + %s points, lower %s-%s, upper %s-%s",
                 len(left_hull), len(right_hull), lower.first.point,
                 lower.second.point, upper.second.point, upper.first.point)

    return (_collect(lower.second, upper.first)
            + _collect(upper.second, lower.first))
