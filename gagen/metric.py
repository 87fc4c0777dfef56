"""Analysis and transformation of the metric of an algebra."""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

import numpy as np

__all__ = [
    "SparseMatrix",
    "is_matrix_diagonal",
    "is_matrix_identity",
    "is_matrix_permutation_of_diagonal",
    "get_rank",
    "eigen_decomposition",
    "min_abs_non_zero_value",
    "eigen_refinement",
    "check_numerical_cleanup",
    "check_numerical_cleanup_with_inverse",
    "numerical_cleanup_sparse",
    "vector_numerical_cleanup",
    "numerical_cleanup",
    "compute_inverse_transformation_matrix",
    "transformation_matrix_to_components",
]

# Finest power-of-two fraction tried when snapping values: 2^-7.
_MAX_NEGATIVE_POWER = 7
_POWER_STEP = 2.0 ** -_MAX_NEGATIVE_POWER
_DECIMALS = tuple(-0.5 + d / 10.0 for d in range(11))


@dataclass
class SparseMatrix:
    """A matrix that stores only its explicitly inserted entries."""

    rows: int
    cols: int
    entries: dict[tuple[int, int], float] = field(default_factory=dict)

    @classmethod
    def from_dense(cls, matrix, epsilon: float) -> SparseMatrix:
        """Keep the entries of a dense matrix whose magnitude exceeds epsilon."""
        dense = np.atleast_2d(np.asarray(matrix, dtype=float))
        rows, cols = dense.shape
        entries = {
            (int(i), int(j)): float(dense[i, j])
            for i, j in zip(*np.nonzero(np.abs(dense) > epsilon))
        }
        return cls(rows, cols, entries)

    def to_dense(self) -> np.ndarray:
        """Return the matrix as a dense array, absent entries being zero."""
        dense = np.zeros((self.rows, self.cols))
        for (i, j), value in self.entries.items():
            dense[i, j] = value
        return dense

    def nonzeros(self) -> int:
        """Number of stored entries."""
        return len(self.entries)

    def triplets(self) -> Iterator[tuple[int, int, float]]:
        """Yield (row, column, value) in column-major order."""
        for (i, j) in sorted(self.entries, key=lambda key: (key[1], key[0])):
            yield i, j, self.entries[(i, j)]

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = key
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"index {key} out of range for {self.rows}x{self.cols}")
        return self.entries.get((i, j), 0.0)


def _lround(value: float) -> int:
    """Round to the nearest integer, halfway cases away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def is_matrix_diagonal(a, epsilon: float) -> bool:
    """True if every off-diagonal entry is within epsilon of zero."""
    matrix = np.atleast_2d(np.asarray(a, dtype=float))
    off_diagonal = matrix.copy()
    np.fill_diagonal(off_diagonal, 0.0)
    return not bool(np.any(np.abs(off_diagonal) > epsilon))


def is_matrix_identity(a, epsilon: float) -> bool:
    """True if the matrix is square and within epsilon of the identity."""
    matrix = np.atleast_2d(np.asarray(a, dtype=float))
    rows, cols = matrix.shape
    if rows != cols:
        return False
    return not bool(np.any(np.abs(matrix - np.eye(rows)) > epsilon))


def is_matrix_permutation_of_diagonal(metric, epsilon: float) -> bool:
    """True if the metric is a permutation of a diagonal matrix."""
    matrix = np.atleast_2d(np.asarray(metric, dtype=float))
    return is_matrix_diagonal(matrix.T @ matrix, epsilon)


def get_rank(metric) -> int:
    """Numerical rank of a matrix."""
    matrix = np.atleast_2d(np.asarray(metric, dtype=float))
    if matrix.size == 0:
        return 0
    return int(np.linalg.matrix_rank(matrix))


def eigen_decomposition(m) -> tuple[np.ndarray, np.ndarray]:
    """Return (P, A): real eigenvectors as columns and diagonal real eigenvalues."""
    matrix = np.atleast_2d(np.asarray(m, dtype=float))
    values, vectors = np.linalg.eig(matrix)
    p = np.real(vectors).astype(float)
    a = np.zeros(matrix.shape)
    np.fill_diagonal(a, np.real(values))
    return p, a


def min_abs_non_zero_value(x) -> float:
    """Smallest magnitude among non-zero entries, or 0.0 if all are zero."""
    magnitudes = np.abs(np.asarray(x, dtype=float).ravel())
    non_zero = magnitudes[magnitudes >= np.finfo(float).eps]
    return float(non_zero.min()) if non_zero.size else 0.0


def eigen_refinement(p, d, pinv) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Scale each eigenvector so its smallest non-zero entry has magnitude 1.

    Returns the rescaled P, the matching rescaled inverse and the diagonal
    scale matrix. P is no longer orthogonal afterwards.
    """
    p_out = np.array(p, dtype=float)
    pinv_out = np.array(pinv, dtype=float)
    d_arr = np.atleast_2d(np.asarray(d, dtype=float))
    scale = np.eye(*d_arr.shape)
    for i in range(p_out.shape[0]):
        min_val = min_abs_non_zero_value(p_out[:, i])
        p_out[:, i] /= min_val
        pinv_out[i, :] *= min_val
        scale[i, i] = 1.0 / min_val
    return p_out, pinv_out, scale


def _within(m, product, epsilon: float) -> bool:
    difference = np.abs(np.asarray(m, dtype=float) - product)
    return not bool(np.any(difference > epsilon))


def check_numerical_cleanup(m, p, a, epsilon: float) -> bool:
    """True if P A P^T still equals M up to epsilon."""
    p_arr = np.asarray(p, dtype=float)
    return _within(m, p_arr @ np.asarray(a, dtype=float) @ p_arr.T, epsilon)


def check_numerical_cleanup_with_inverse(m, p, a, pinv, epsilon: float) -> bool:
    """True if P A Pinv still equals M up to epsilon."""
    product = (
        np.asarray(p, dtype=float)
        @ np.asarray(a, dtype=float)
        @ np.asarray(pinv, dtype=float)
    )
    return _within(m, product, epsilon)


def numerical_cleanup_sparse(m, epsilon: float) -> SparseMatrix:
    """Snap entries to integers or tenths and keep them in a sparse matrix.

    Near-zero entries and entries that snap to neither are left out.
    """
    matrix = np.atleast_2d(np.asarray(m, dtype=float))
    rows, cols = matrix.shape
    entries: dict[tuple[int, int], float] = {}
    for (i, j), value in np.ndenumerate(matrix):
        value = float(value)
        if abs(value) < epsilon:
            continue
        rounded = _lround(value)
        if abs(rounded - value) < epsilon:
            entries[(i, j)] = float(rounded)
            continue
        snapped = next(
            (rounded + decimal for decimal in _DECIMALS
             if abs(rounded + decimal - value) < epsilon),
            None,
        )
        if snapped is not None:
            entries[(i, j)] = snapped
    return SparseMatrix(rows, cols, entries)


def _snap(value: float, epsilon: float) -> float:
    if abs(value) < epsilon:
        return 0.0
    rounded = _lround(value)
    if abs(rounded - value) < epsilon:
        return float(rounded)
    result = value
    # Later candidates take precedence over earlier ones.
    for step in range(2 ** _MAX_NEGATIVE_POWER + 1):
        candidate = rounded - 0.5 + step * _POWER_STEP
        if abs(candidate - value) < epsilon:
            result = candidate
    for decimal in _DECIMALS:
        candidate = rounded + decimal
        if abs(candidate - value) < epsilon:
            result = candidate
    return result


def vector_numerical_cleanup(original, epsilon: float) -> np.ndarray:
    """Snap near-zero, near-integer and near-simple-fraction values."""
    values = np.asarray(original, dtype=float).ravel()
    return np.array([_snap(float(v), epsilon) for v in values], dtype=float)


def numerical_cleanup(m, epsilon: float) -> np.ndarray:
    """Apply vector_numerical_cleanup to every row of a matrix."""
    matrix = np.atleast_2d(np.asarray(m, dtype=float))
    return np.array([vector_numerical_cleanup(row, epsilon) for row in matrix])


def compute_inverse_transformation_matrix(
    transformation_matrix: SparseMatrix | Mapping | np.ndarray, epsilon: float
) -> SparseMatrix:
    """Invert a square transformation matrix, dropping entries below epsilon.

    Raises numpy.linalg.LinAlgError when the matrix is singular.
    """
    if isinstance(transformation_matrix, SparseMatrix):
        dense = transformation_matrix.to_dense()
    else:
        dense = np.atleast_2d(np.asarray(transformation_matrix, dtype=float))
    size = dense.shape[0]
    inverse = np.linalg.solve(dense, np.eye(size))
    return SparseMatrix.from_dense(inverse, epsilon)


def transformation_matrix_to_components(transformation_matrix: SparseMatrix) -> list[float]:
    """Flatten a sparse matrix to [row, col, value, row, col, value, ...]."""
    return [
        float(component)
        for triplet in transformation_matrix.triplets()
        for component in triplet
    ]