import argparse

from merge_hull import constants


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "merge_hull", description="Divide-and-conquer convex hull")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--datafile", type=str,
                        help="TSPLIB style NODE_COORD_SECTION file")
    source.add_argument("--random", type=int, metavar="COUNT",
                        help="use COUNT uniformly random points")
    parser.add_argument("--seed", type=int, default=constants.DEFAULT_SEED)
    parser.add_argument("--workers", type=int, default=0,
                        help="worker processes, 0 computes in-process")
    parser.add_argument("--min-points", type=int,
                        default=constants.MIN_PARALLEL_POINTS,
                        help="smallest input handed to the worker pool")
    parser.add_argument("--strict", action="store_true",
                        help="reject points that share an x-coordinate")
    parser.add_argument("--verify", action="store_true",
                        help="check the result against a reference hull")
    parser.add_argument("--verbose", action="store_true")
    return parser
