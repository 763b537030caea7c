import random

import pytest

from primeshare import Polynomial, ShareRangeError, evaluate, new_polynomial
from primeshare.field import MERSENNE_127


def test_constant_term_is_secret():
    poly = new_polynomial(1234, 4, MERSENNE_127)
    assert poly.degree == 4
    assert poly.coefficients[0] == 1234
    assert evaluate(poly, 0, MERSENNE_127) == 1234
    assert all(0 <= c < MERSENNE_127 for c in poly.coefficients)


def test_degree_zero_is_constant():
    poly = new_polynomial(9, 0, MERSENNE_127)
    assert poly.coefficients == (9,)
    assert poly(5) == 9


def test_evaluate_matches_naive_sum():
    poly = Polynomial((3, 5, 7), 101)
    for x in range(10):
        assert evaluate(poly, x, 101) == (3 + 5 * x + 7 * x * x) % 101


def test_randomness_is_injected():
    draws = []

    def source(upper):
        draws.append(upper)
        return upper - 1

    poly = new_polynomial(1, 3, 101, source)
    assert draws == [101, 101, 101]
    assert poly.coefficients == (1, 100, 100, 100)


def test_seeded_source_reproducible():
    a = new_polynomial(5, 3, MERSENNE_127, random.Random(3).randrange)
    b = new_polynomial(5, 3, MERSENNE_127, random.Random(3).randrange)
    assert a == b


def test_bad_randomness_rejected():
    with pytest.raises(ShareRangeError):
        new_polynomial(1, 2, 101, lambda upper: upper)


@pytest.mark.parametrize("secret", [101, 150, -1])
def test_secret_range(secret):
    with pytest.raises(ShareRangeError):
        new_polynomial(secret, 2, 101)


def test_negative_degree_rejected():
    with pytest.raises(ShareRangeError):
        new_polynomial(1, -1, 101)


def test_repr_hides_coefficients():
    poly = Polynomial((424242, 1), 1000003)
    assert "424242" not in repr(poly)
