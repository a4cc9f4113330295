import math
from dataclasses import dataclass
from threading import Event
from typing import Optional

from .errors import ComputationCancelled


A = 13591409
B = 545140134
C = 640320
C3_OVER_24 = (C**3) // 24

DIGITS_PER_TERM = 14.18
TERM_MARGIN = 2


@dataclass(frozen=True)
class SeriesTriple:
    p: int
    q: int
    r: int


def term(a: int) -> SeriesTriple:
    if a < 0:
        raise ValueError("term index must be >= 0")
    if a == 0:
        return SeriesTriple(1, 1, A)
    p = (6 * a - 5) * (2 * a - 1) * (6 * a - 1)
    q = a * a * a * C3_OVER_24
    r = p * (A + B * a)
    if a & 1:
        r = -r
    return SeriesTriple(p, q, r)


def combine(left: SeriesTriple, right: SeriesTriple) -> SeriesTriple:
    return SeriesTriple(
        left.p * right.p,
        left.q * right.q,
        left.r * right.q + left.p * right.r,
    )


def check_cancelled(cancel: Optional[Event]):
    if cancel is not None and cancel.is_set():
        raise ComputationCancelled("computation cancelled")


def split_serial(a: int, b: int, cancel: Optional[Event] = None) -> SeriesTriple:
    if b - a < 1:
        raise ValueError("range must hold at least one term")
    check_cancelled(cancel)
    if b - a == 1:
        return term(a)
    m = (a + b) // 2
    return combine(split_serial(a, m, cancel), split_serial(m, b, cancel))


def terms_for_precision(digits: int) -> int:
    return max(1, math.ceil(int(digits) / DIGITS_PER_TERM) + TERM_MARGIN)
