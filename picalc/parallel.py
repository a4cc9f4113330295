import logging
import os
from concurrent.futures import FIRST_COMPLETED, Future, ProcessPoolExecutor, wait
from threading import Event
from typing import Callable, Dict, List, Optional, Tuple

from .chudnovsky import SeriesTriple, check_cancelled, combine, split_serial


LOG = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 100
CANCEL_POLL = 0.05

ProgressCallback = Callable[[int], None]
Range = Tuple[int, int]


def default_workers() -> int:
    return os.cpu_count() or 1


def fork_depth(workers: int) -> int:
    """Number of recursion levels allowed to fork for a worker count.

    A depth of d yields at most 2**d serial ranges, so 2 workers fork once,
    3-4 workers fork two levels deep, and so on. One worker never forks.
    """
    return max(0, (int(workers) - 1).bit_length())


def _is_frontier(a: int, b: int, depth: int, threshold: int) -> bool:
    return depth <= 0 or b - a <= threshold


def frontier(a: int, b: int, depth: int, threshold: int) -> List[Range]:
    """The ranges evaluated serially, left to right, for a fork depth."""
    if _is_frontier(a, b, depth, threshold):
        return [(a, b)]
    m = (a + b) // 2
    return frontier(a, m, depth - 1, threshold) + frontier(m, b, depth - 1, threshold)


def _merge(a: int, b: int, depth: int, threshold: int, parts: Dict[Range, SeriesTriple]) -> SeriesTriple:
    if _is_frontier(a, b, depth, threshold):
        return parts[(a, b)]
    m = (a + b) // 2
    return combine(
        _merge(a, m, depth - 1, threshold, parts),
        _merge(m, b, depth - 1, threshold, parts),
    )


def _collect(
    futures: Dict[Future, Range],
    on_progress: Optional[ProgressCallback],
    cancel: Optional[Event],
) -> Dict[Range, SeriesTriple]:
    timeout = CANCEL_POLL if cancel is not None else None
    parts = {}
    pending = set(futures)
    while pending:
        check_cancelled(cancel)
        done, pending = wait(pending, timeout=timeout, return_when=FIRST_COMPLETED)
        for fut in done:
            a, b = futures[fut]
            parts[(a, b)] = fut.result()
            if on_progress is not None:
                on_progress(b - a)
    return parts


def split_parallel(
    a: int,
    b: int,
    workers: Optional[int] = None,
    threshold: int = DEFAULT_THRESHOLD,
    on_progress: Optional[ProgressCallback] = None,
    cancel: Optional[Event] = None,
) -> SeriesTriple:
    """Binary splitting over [a, b) with the leaves of the fork tree on processes.

    The range is halved at (a + b) // 2 while it is larger than threshold
    and the fork depth for the worker count allows. The resulting frontier
    ranges run through split_serial on a process pool, and the parent
    combines them back up the same midpoint tree. The result is therefore
    the triple split_serial(a, b) returns whatever the worker count or
    threshold.

    on_progress receives the size of each frontier range as the parent
    collects it. Those ranges partition [a, b).
    """
    if b - a < 1:
        raise ValueError("range must hold at least one term")
    if workers is None:
        workers = default_workers()
    workers = int(workers)
    if workers < 1:
        raise ValueError("workers must be >= 1")
    threshold = int(threshold)
    if threshold < 1:
        raise ValueError("threshold must be >= 1")
    check_cancelled(cancel)
    depth = fork_depth(workers)
    if _is_frontier(a, b, depth, threshold):
        LOG.debug("Splitting [%d, %d) serially", a, b)
        triple = split_serial(a, b, cancel)
        if on_progress is not None:
            on_progress(b - a)
        return triple
    ranges = frontier(a, b, depth, threshold)
    pool_size = min(workers, len(ranges))
    LOG.debug(
        "Splitting [%d, %d) into %d ranges on %d processes",
        a, b, len(ranges), pool_size,
    )
    with ProcessPoolExecutor(max_workers=pool_size) as executor:
        futures = {executor.submit(split_serial, lo, hi): (lo, hi) for lo, hi in ranges}
        try:
            parts = _collect(futures, on_progress, cancel)
            check_cancelled(cancel)
        except BaseException:
            for fut in futures:
                fut.cancel()
            raise
    return _merge(a, b, depth, threshold, parts)
