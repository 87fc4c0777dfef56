import math

import pytest

from gagen.utility import (
    bin_coeff,
    binomial,
    compute_idx_from_list,
    factorial,
    idx_variadic,
    sort_and_determine_sign,
)


def test_sort_already_sorted_keeps_positive_sign():
    indices, sign = sort_and_determine_sign(1, 2, 3, 4)
    assert indices == (1, 2, 3, 4)
    assert sign == 1


@pytest.mark.parametrize("values", [(3, 1, 2), (5, 4, 3, 2, 1), (2, 7, 1, 9, 4)])
def test_sort_returns_sorted_indices(values):
    indices, sign = sort_and_determine_sign(*values)
    assert list(indices) == sorted(values)
    assert sign in (1, -1)


@pytest.mark.parametrize("values", [(1, 2, 3), (1, 3, 2, 5), (4, 6, 8, 9)])
def test_adjacent_swap_flips_sign(values):
    _, base = sort_and_determine_sign(*values)
    swapped = list(values)
    swapped[0], swapped[1] = swapped[1], swapped[0]
    _, flipped = sort_and_determine_sign(*swapped)
    assert flipped == -base


def test_sort_empty_and_single():
    assert sort_and_determine_sign() == ((), 1)
    assert sort_and_determine_sign(5) == ((5,), 1)


def test_binomial_edges():
    assert binomial(0, 0) == 1
    assert binomial(7, 0) == 1
    assert binomial(7, 7) == 1
    assert binomial(0, 3) == 0


@pytest.mark.parametrize("n", range(1, 10))
def test_binomial_pascal_rule(n):
    for k in range(1, n):
        assert binomial(n, k) == binomial(n - 1, k - 1) + binomial(n - 1, k)


def test_binomial_negative_raises():
    with pytest.raises(ValueError):
        binomial(-1, 2)


def test_factorial_small_values():
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(-3) == 1


@pytest.mark.parametrize("n", range(2, 12))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


@pytest.mark.parametrize("n", range(0, 10))
def test_bin_coeff_matches_binomial(n):
    for k in range(0, n + 3):
        assert bin_coeff(n, k) == binomial(n, k)


def test_bin_coeff_k_larger_than_n_is_zero():
    assert bin_coeff(3, 5) == 0


def test_idx_variadic_single_index_is_zero():
    assert idx_variadic(5, 1, 3) == 0


def test_idx_variadic_requires_index():
    with pytest.raises(ValueError):
        idx_variadic(5, 1)


@pytest.mark.parametrize("indices", [(1, 2), (1, 2, 4), (2, 3, 5, 6)])
def test_idx_variadic_recursion(indices):
    dimension, grade = 7, len(indices)
    first, *rest = indices
    expected = binomial(dimension - first, grade) + idx_variadic(dimension, grade - 1, *rest)
    assert idx_variadic(dimension, grade, *indices) == expected


def test_compute_idx_from_list_empty_is_zero():
    assert compute_idx_from_list(6, 3) == 0


def test_compute_idx_from_list_single():
    assert compute_idx_from_list(6, 2, 1) == bin_coeff(5, 2)


@pytest.mark.parametrize("indices", [(1, 2), (1, 3, 4), (2, 4, 5, 6)])
def test_compute_idx_relates_to_idx_variadic(indices):
    dimension, grade = 8, len(indices)
    last_term = bin_coeff(dimension - indices[-1], grade - (len(indices) - 1))
    assert compute_idx_from_list(dimension, grade, *indices) == (
        idx_variadic(dimension, grade, *indices) + last_term
    )


def test_compute_idx_nonnegative_and_bounded():
    dimension = 6
    for grade in range(1, 4):
        value = compute_idx_from_list(dimension, grade, *range(1, grade + 1))
        assert 0 <= value <= sum(math.comb(dimension, g) for g in range(dimension + 1))