from typing import Iterator, List, Optional, Sequence, Tuple


def pi_digits_spigot(count: Optional[int] = None) -> Iterator[int]:
    """Decimal digits of pi from Gibbons' streaming spigot.

    Unbounded unless count is given.
    """
    q, r, t, k, n, l = 1, 0, 1, 1, 3, 3
    produced = 0
    while count is None or produced < count:
        if 4 * q + r - t < n * t:
            yield n
            produced += 1
            q, r, n = 10 * q, 10 * (r - n * t), (10 * (3 * q + r)) // t - 10 * n
        else:
            q, r, t, k, n, l = (
                q * k,
                (2 * q + r) * l,
                t * l,
                k + 1,
                (q * (7 * k + 2) + r * l) // (t * l),
                l + 2,
            )


def spigot_prefix(count: int) -> List[int]:
    return list(pi_digits_spigot(int(count)))


def verify_digits(digits: Sequence[int], samples: int) -> Tuple[bool, int]:
    """Check the leading digits (integer digit included) against the spigot."""
    samples = int(samples)
    if samples <= 0:
        return True, 0
    count = min(samples, len(digits))
    return list(digits[:count]) == spigot_prefix(count), count
