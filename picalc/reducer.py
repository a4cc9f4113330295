import logging
import math
from typing import List

from mpmath import mp, mpf

from .bigmath import isqrt_newton, pow10
from .chudnovsky import SeriesTriple


LOG = logging.getLogger(__name__)

SMALL_PI = "31415926535"
SMALL_PRECISION = 10
GUARD_BITS = 100
GUARD_DIGITS = 10

METHODS = ("float", "integer")


def working_bits(digits: int) -> int:
    return int(math.ceil(math.log2(10) * digits)) + GUARD_BITS


STR_CHUNK_DIGITS = 1000
_STR_CHUNK_LIMIT = 10**STR_CHUNK_DIGITS


def to_decimal(n: int, width: int = 0) -> str:
    """Decimal text of a non-negative int, zero-padded to width.

    Large values are split with divmod into pieces short enough for str(),
    so the interpreter's int to str length limit never applies.
    """
    if n < _STR_CHUNK_LIMIT:
        return str(n).zfill(width)
    k = max(1, int(n.bit_length() * math.log10(2)) // 2)
    hi, lo = divmod(n, pow10(k))
    return to_decimal(hi, max(width - k, 0)) + to_decimal(lo, k)


def _scaled_float(triple: SeriesTriple, digits: int) -> int:
    with mp.workprec(working_bits(digits)):
        c = mpf(426880) * mp.sqrt(10005)
        s = mpf(triple.r) / mpf(triple.q)
        pi = c / s
        return int(mp.floor(pi * mpf(10) ** (digits + GUARD_DIGITS)))


def _scaled_integer(triple: SeriesTriple, digits: int) -> int:
    scale = pow10(digits + GUARD_DIGITS)
    sqrt_c = isqrt_newton(10005 * scale * scale)
    return (426880 * sqrt_c * triple.q) // triple.r


def reduce_triple(triple: SeriesTriple, digits: int, method: str = "float") -> str:
    """Turn the root triple for [0, terms) into "3." plus fractional digits.

    The result carries digits + GUARD_DIGITS fractional digits; only the
    first `digits` of them are guaranteed.
    """
    method = (method or "float").lower().strip()
    if method not in METHODS:
        raise ValueError("unsupported reduction method")
    digits = int(digits)
    if digits < 0:
        raise ValueError("digits must be >= 0")
    if method == "float":
        scaled = _scaled_float(triple, digits)
    else:
        scaled = _scaled_integer(triple, digits)
    LOG.debug("Reduced series to %d digits with the %s method", digits, method)
    s = to_decimal(scaled)
    frac_len = digits + GUARD_DIGITS
    if len(s) <= frac_len:
        s = ("0" * (frac_len - len(s) + 1)) + s
    return s[:-frac_len] + "." + s[-frac_len:]


def parse_digits(text: str, digits: int) -> List[int]:
    out = [0] * (int(digits) + 1)
    out[0] = 3
    if "." not in text:
        return out
    tail = text.split(".", 1)[1]
    for i, ch in enumerate(tail[:digits], start=1):
        if "0" <= ch <= "9":
            out[i] = ord(ch) - 48
    return out


def small_pi_digits(digits: int) -> List[int]:
    return [int(ch) for ch in SMALL_PI[: int(digits) + 1]]
