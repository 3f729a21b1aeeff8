import typing as t

from shapely.geometry import (LinearRing, LineString, MultiPoint,
                              Point as ShapelyPoint, Polygon)
from shapely.geometry.base import BaseGeometry

from merge_hull import errors
from merge_hull.data import Hull, Point


def hull_geometry(hull: Hull) -> BaseGeometry:
    coords = [p.coords for p in hull]
    if len(coords) == 1:
        return ShapelyPoint(coords[0])
    if len(coords) == 2:
        return LineString(coords)
    return Polygon(coords)


def is_ccw(hull: Hull) -> bool:
    if len(hull) < 3:
        return True
    return LinearRing([p.coords for p in hull]).is_ccw


def covers_all(hull: Hull, points: t.Iterable[Point]) -> bool:
    geometry = hull_geometry(hull)
    return all(geometry.covers(ShapelyPoint(p.coords)) for p in points)


def reference_vertices(points: t.Iterable[Point]) -> t.Set[Point]:
    reference = MultiPoint([p.coords for p in points]).convex_hull
    if isinstance(reference, Polygon):
        coords = reference.exterior.coords
    else:
        coords = reference.coords
    return {Point(x, y) for x, y in coords}


def check_hull(points: t.Sequence[Point], hull: Hull):
    if not set(hull) <= set(points):
        raise errors.HullComputationError(
            "hull contains points that are not in the input")
    if len(set(hull)) != len(hull):
        raise errors.HullComputationError("hull repeats a vertex")
    if not is_ccw(hull):
        raise errors.HullComputationError("hull is not in CCW order")
    if not covers_all(hull, points):
        raise errors.HullComputationError("hull does not cover every point")
    if set(hull) != reference_vertices(points):
        raise errors.HullComputationError(
            "hull vertices differ from the reference hull")
