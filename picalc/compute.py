import logging
import time
from threading import Event
from typing import Optional

from .chudnovsky import terms_for_precision
from .errors import InvalidPrecisionError
from .parallel import DEFAULT_THRESHOLD, split_parallel
from .reducer import SMALL_PRECISION, parse_digits, reduce_triple, small_pi_digits
from .result import PiResult, validate_precision


LOG = logging.getLogger(__name__)


def new_pi(precision: int) -> PiResult:
    return PiResult(precision)


def calculate_pi(
    precision: int,
    result: PiResult,
    workers: Optional[int] = None,
    threshold: int = DEFAULT_THRESHOLD,
    method: str = "float",
    cancel: Optional[Event] = None,
):
    """Compute `precision` decimal digits of pi into `result`.

    Blocks until the digits are written and the result is marked
    complete. Precisions up to SMALL_PRECISION are copied from a literal.
    """
    precision = validate_precision(precision)
    if precision != result.precision:
        raise InvalidPrecisionError(
            f"precision {precision} does not match result precision {result.precision}"
        )
    if precision <= SMALL_PRECISION:
        result.write_digits(small_pi_digits(precision))
        result.mark_complete()
        return
    started = time.monotonic()
    terms = terms_for_precision(precision)
    LOG.debug("Computing %d digits from %d series terms", precision, terms)
    triple = split_parallel(
        0,
        terms,
        workers=workers,
        threshold=threshold,
        on_progress=result.increment_progress,
        cancel=cancel,
    )
    text = reduce_triple(triple, precision, method=method)
    result.write_digits(parse_digits(text, precision))
    result.mark_complete()
    LOG.debug("Computed %d digits in %.3fs", precision, time.monotonic() - started)
