import random

import pytest

from picalc.chudnovsky import A, B, C3_OVER_24, SeriesTriple, combine, split_serial, term, terms_for_precision


def _split_at(a, b, mid):
    return combine(split_serial(a, mid), split_serial(mid, b))


def _fold(a, b):
    acc = term(a)
    for k in range(a + 1, b):
        acc = combine(acc, term(k))
    return acc


def test_constants():
    assert C3_OVER_24 == 10939058860032000
    assert A == 13591409
    assert B == 545140134


def test_term_zero():
    assert term(0) == SeriesTriple(1, 1, 13591409)


def test_term_odd_is_negative():
    t = term(1)
    assert t.p == 1 * 1 * 5
    assert t.q == C3_OVER_24
    assert t.r == -5 * (A + B)


def test_term_even_is_positive():
    t = term(2)
    p = 7 * 3 * 11
    assert t.p == p
    assert t.q == 8 * C3_OVER_24
    assert t.r == p * (A + 2 * B)


def test_term_rejects_negative_index():
    with pytest.raises(ValueError):
        term(-1)


def test_split_serial_single_term():
    assert split_serial(5, 6) == term(5)


def test_split_serial_rejects_empty_range():
    with pytest.raises(ValueError):
        split_serial(3, 3)


def test_split_serial_matches_left_fold():
    assert split_serial(0, 37) == _fold(0, 37)
    assert split_serial(11, 64) == _fold(11, 64)


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_combine_is_independent_of_split_point(seed):
    rng = random.Random(seed)
    for _ in range(20):
        a = rng.randrange(0, 200)
        b = a + rng.randrange(2, 60)
        mid1 = rng.randrange(a + 1, b)
        mid2 = rng.randrange(a + 1, b)
        expected = split_serial(a, b)
        assert _split_at(a, b, mid1) == expected
        assert _split_at(a, b, mid2) == expected


def test_combine_nested_sub_splits():
    left = combine(split_serial(0, 3), split_serial(3, 10))
    right = combine(split_serial(10, 17), split_serial(17, 25))
    assert combine(left, right) == split_serial(0, 25)


@pytest.mark.parametrize(
    "digits,expected",
    [(0, 2), (1, 3), (14, 3), (15, 4), (100, 10), (1000, 73)],
)
def test_terms_for_precision(digits, expected):
    assert terms_for_precision(digits) == expected
