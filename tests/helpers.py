import numpy as np

from merge_hull.data import Point


def grid_points(count, seed, height=40):
    """Integer points with distinct x and plenty of collinear triples."""
    rng = np.random.default_rng(seed)
    xs = rng.permutation(count * 5)[:count]
    ys = rng.integers(0, height, size=count)
    return [Point(int(x), int(y)) for x, y in zip(xs, ys)]
