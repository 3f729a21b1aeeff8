import logging
import typing as t

import numpy as np
from dataclasses import dataclass

from merge_hull import constants, errors, util

logger = logging.getLogger(__name__)

Coords = t.Tuple[float, float]
NPCoords = t.List[float]


@dataclass(frozen=True, order=True)
class Point:
    x: float
    y: float

    @property
    def coords(self) -> Coords:
        return self.x, self.y

    def array(self) -> NPCoords:
        return [self.x, self.y]

    def __repr__(self):
        return f'({self.x}, {self.y})'

    __str__ = __repr__


Hull = t.List[Point]


def create_points(coords: t.Iterable[Coords]) -> t.List[Point]:
    return [Point(x, y) for x, y in coords]


def sort_points(points: t.Iterable[Point]) -> t.List[Point]:
    """Sort ascending by x with y as tie-break, dropping exact duplicates."""
    return sorted(set(points))


def check_distinct_x(points: t.Sequence[Point]):
    """
    Raise when the points break the merge preconditions: the sequence must
    not be empty and, once sorted, no two points may share an x-coordinate.
    """
    if not points:
        raise errors.EmptyInputError()
    for previous, current in zip(points, points[1:]):
        if previous.x == current.x:
            raise errors.DuplicateXCoordinateError(previous, current)


def generate_points(
    count: int = constants.DEFAULT_RANDOM_COUNT,
    seed: t.Optional[int] = constants.DEFAULT_SEED,
    low: float = constants.DEFAULT_LOW,
    high: float = constants.DEFAULT_HIGH,
) -> t.List[Point]:
    rng = np.random.default_rng(seed)
    coords = rng.uniform(low, high, size=(count, 2))
    return [Point(float(x), float(y)) for x, y in coords]


@util.timeit
def load_datafile(path_name: str) -> t.Tuple[t.Optional[str], t.List[Point]]:
    with open(path_name) as fh:
        meta_data = _read_metadata(fh)
        name = meta_data.get("name")
        edge_weight_type = meta_data.get("edge_weight_type",
                                         constants.EdgeWeightType.EUC_2D)
        if edge_weight_type != constants.EdgeWeightType.EUC_2D:
            logger.warning("Reading %s coordinates as planar",
                           edge_weight_type)
        points = _read_points(fh)

    logger.info("Loaded %s points", len(points))
    return name, points


def _read_metadata(fh: t.TextIO) -> t.Mapping[str, str]:
    meta_data = {}
    for read_line in fh:
        if constants.COORD_DELIMITER in read_line:
            break
        field, _, value = read_line.partition(":")
        if value:
            meta_data[field.strip().lower()] = value.strip()
    return meta_data


def _read_points(fh: t.TextIO) -> t.List[Point]:
    coordinates = {}
    skipped = 0
    for read_line in fh:
        if read_line.strip() == constants.EOF_MARKER:
            break
        try:
            _, x, y = read_line.split()
            point = Point(float(x), float(y))
        except ValueError:
            skipped += 1
            continue
        coordinates.setdefault(point, point)
    if skipped:
        logger.debug("Skipped %s unreadable lines", skipped)
    return list(coordinates.values())
