import math


SMALL_SQRT_LIMIT = 1 << 64
MAX_SQRT_ITERATIONS = 10000


def pow10(n: int) -> int:
    if n < 0:
        raise ValueError("n must be >= 0")
    return 10**n


def isqrt_newton(n: int, max_iter: int = MAX_SQRT_ITERATIONS) -> int:
    """Integer square root by Newton's iteration x <- (x + n // x) // 2.

    Small inputs go straight to math.isqrt. Larger ones start from a power
    of two that is never below the root, so the iterates decrease until
    the floor root is reached; the loop stops as soon as an iterate fails
    to decrease, which also catches the one-step oscillation that integer
    division can produce. max_iter bounds the work if neither happens.
    """
    n = int(n)
    if n < 0:
        raise ValueError("square root of negative number")
    if n < SMALL_SQRT_LIMIT:
        return math.isqrt(n)
    x = 1 << ((n.bit_length() + 1) // 2)
    for _ in range(max_iter):
        y = (x + n // x) // 2
        if y >= x:
            break
        x = y
    return x
