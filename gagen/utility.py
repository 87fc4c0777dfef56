"""Combinatorial helpers for indexing basis blades of k-vectors."""

from __future__ import annotations

import math

__all__ = [
    "sort_and_determine_sign",
    "binomial",
    "factorial",
    "bin_coeff",
    "idx_variadic",
    "compute_idx_from_list",
]


def sort_and_determine_sign(*args: int) -> tuple[tuple[int, ...], int]:
    """Sort blade indices and return them with the sign of the permutation.

    Each transposition performed by the bubble sort flips the sign, so the
    result is the sign of the reordering of the vectors in the blade.
    """
    indices = list(args)
    sign = 1
    size = len(indices)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if indices[j] > indices[j + 1]:
                indices[j], indices[j + 1] = indices[j + 1], indices[j]
                sign = -sign
    return tuple(indices), sign


def binomial(n: int, k: int) -> int:
    """Binomial coefficient C(n, k), zero when k exceeds n."""
    if n < 0 or k < 0:
        raise ValueError("binomial coefficient needs non-negative arguments")
    return math.comb(n, k)


def factorial(n: int) -> int:
    """Factorial of n, with every n <= 1 giving 1."""
    return 1 if n <= 1 else math.prod(range(2, n + 1))


def bin_coeff(n: int, k: int) -> int:
    """Binomial coefficient computed from factorials; zero when k > n."""
    if k > n:
        return 0
    return factorial(n) // factorial(n - k) // factorial(k)


def idx_variadic(dimension: int, grade: int, *args: int) -> int:
    """Index of a basis blade among the blades of its grade.

    The last vector index contributes nothing; each earlier one adds
    ``binomial(dimension - index, grade)`` with the grade decreasing by one
    at every step.
    """
    if not args:
        raise ValueError("at least one vector index is required")
    return sum(
        binomial(dimension - first, grade - position)
        for position, first in enumerate(args[:-1])
    )


def compute_idx_from_list(dimension: int, grade: int, *args: int) -> int:
    """Sum of ``bin_coeff(dimension - index, grade - position)`` over the indices."""
    return sum(
        bin_coeff(dimension - index, grade - position)
        for position, index in enumerate(args)
    )