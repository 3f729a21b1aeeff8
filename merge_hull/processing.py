import asyncio
import logging
import math
import sys
import typing as t
from concurrent import futures

import psutil

from merge_hull import (args, constants, data, divider, errors, merger, util,
                        verify)
from merge_hull.data import Hull, Point

logger = logging.getLogger(__name__)


async def _processor(
    loop: asyncio.AbstractEventLoop,
    executor,
    queue,
    func: (),
    args_list: t.List[t.Any],
):
    pending = [loop.run_in_executor(executor, func, a) for a in args_list]
    for f in pending:
        await queue.put(await f)


async def _consumer(queue, chunk_count: int):
    completed_chunks = 0
    results = [None] * chunk_count
    while completed_chunks < chunk_count:
        chunk = await queue.get()
        results[completed_chunks] = chunk
        completed_chunks += 1
    return results


async def _process(
    executor,
    func: (),
    args_list: t.List[t.Any],
) -> t.List[t.Any]:
    loop = asyncio.get_running_loop()
    queue = asyncio.Queue()
    _, results = await asyncio.gather(
        _processor(loop, executor, queue, func, args_list),
        _consumer(queue, len(args_list))
    )
    return results


def merge_all(hulls: t.List[Hull]) -> Hull:
    """Merge x-ordered, x-disjoint hulls pairwise, bottom-up."""
    while len(hulls) > 1:
        merged = [merger.merge(left, right)
                  for left, right in zip(hulls[::2], hulls[1::2])]
        if len(hulls) % 2:
            merged.append(hulls[-1])
        hulls = merged
    return hulls[0]


class Processor:
    _executor_count: int
    _executor: futures.ProcessPoolExecutor
    _loop: asyncio.AbstractEventLoop
    min_points: int

    def __init__(
        self,
        workers: t.Optional[int] = None,
        min_points: int = constants.MIN_PARALLEL_POINTS,
    ):
        self._executor_count = workers or psutil.cpu_count() or 1
        self._executor = futures.ProcessPoolExecutor(
            max_workers=self._executor_count
        )
        self._loop = asyncio.new_event_loop()
        self.min_points = min_points

    def __enter__(self) -> 'Processor':
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self._executor.shutdown()
        self._loop.close()

    def process(self, func: (), args_list: t.List[t.Any]) -> t.List[t.Any]:
        return self._loop.run_until_complete(
            _process(self._executor, func, args_list))

    @util.timeit
    def compute(self, points: t.Iterable[Point], strict: bool = False) -> Hull:
        ordered = data.sort_points(points)
        if not ordered:
            raise errors.EmptyInputError()
        if strict:
            data.check_distinct_x(ordered)
        if len(ordered) < self.min_points:
            return divider.rotate_to_leftmost(divider.divide(ordered))

        size = math.ceil(len(ordered) / self._executor_count)
        chunks = [ordered[i:i + size] for i in range(0, len(ordered), size)]
        logger.debug("Dividing %s points into %s chunks", len(ordered),
                     len(chunks))
        hull = divider.rotate_to_leftmost(
            merge_all(self.process(divider.divide, chunks)))
        logger.info("Hull of %s points has %s vertices", len(ordered),
                    len(hull))
        return hull


def _load_points(startup_args) -> t.List[Point]:
    if startup_args.datafile:
        logger.info("Loading %s", startup_args.datafile)
        _, points = data.load_datafile(startup_args.datafile)
        return points
    logger.info("Generating %s random points", startup_args.random)
    return data.generate_points(startup_args.random, seed=startup_args.seed)


@util.timeit
def main(argv: t.Optional[t.List[str]] = None) -> Hull:
    parser = args.build_parser()
    startup_args = parser.parse_args(argv)
    util.setup_logging(logging.DEBUG if startup_args.verbose
                       else logging.INFO)
    try:
        points = _load_points(startup_args)
    except OSError as e:
        parser.error(f"cannot read {startup_args.datafile}: {e.strerror}")
    try:
        if startup_args.workers:
            with Processor(startup_args.workers,
                           min_points=startup_args.min_points) as proc:
                hull = proc.compute(points, strict=startup_args.strict)
        else:
            hull = divider.compute_hull(points, strict=startup_args.strict)
        if startup_args.verify:
            verify.check_hull(points, hull)
            logger.info("Hull verified")
    except errors.HullError as e:
        parser.error(str(e))
    for point in hull:
        sys.stdout.write(f"{point.x} {point.y}\n")
    return hull


def cli():
    main()


if __name__ == "__main__":
    cli()
