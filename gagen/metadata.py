"""Everything needed to define an algebra: dimension, metric, names, options."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from gagen.metric import (
    check_numerical_cleanup_with_inverse,
    eigen_decomposition,
    eigen_refinement,
    get_rank,
    is_matrix_diagonal,
    is_matrix_identity,
    is_matrix_permutation_of_diagonal,
    numerical_cleanup,
)

__all__ = ["MetaData", "MetricDiagonalizationError"]

_DEFAULT_MAX_DIM_PRECOMPUTED_PRODUCTS = 256


class MetricDiagonalizationError(ValueError):
    """The cleaned-up decomposition no longer reproduces the metric."""


@dataclass
class MetaData:
    """Data required to build a geometric algebra library."""

    namespace_name: str = ""
    dimension: int = 0
    metric: np.ndarray = field(default_factory=lambda: np.zeros((0, 0)))
    basis_vector_name: list[str] = field(default_factory=list)
    input_metric_diagonal: bool = False
    identity_metric: bool = False
    full_rank_metric: bool = False
    input_metric_permutation_of_diagonal: bool = False
    use_eigen_refinement: bool = False
    use_numerical_cleanup: bool = False
    max_dim_precomputed_products: int = _DEFAULT_MAX_DIM_PRECOMPUTED_PRODUCTS
    max_dim_basis_accessor: int = 0
    epsilon: float = 0.0
    diagonal_metric: np.ndarray = field(default_factory=lambda: np.zeros(0))
    transformation_matrix: np.ndarray = field(default_factory=lambda: np.zeros((0, 0)))
    inverse_transformation_matrix: np.ndarray = field(
        default_factory=lambda: np.zeros((0, 0))
    )

    def __post_init__(self) -> None:
        metric = np.asarray(self.metric, dtype=float)
        if metric.ndim != 2:
            metric = metric.reshape((0, 0)) if metric.size == 0 else np.atleast_2d(metric)
        self.metric = metric
        self.basis_vector_name = list(self.basis_vector_name)

    def display(self) -> None:
        """Print a human readable summary of the algebra definition."""
        flags = {
            name: str(bool(getattr(self, name))).lower()
            for name in (
                "use_eigen_refinement",
                "use_numerical_cleanup",
                "input_metric_diagonal",
                "identity_metric",
                "full_rank_metric",
                "input_metric_permutation_of_diagonal",
            )
        }
        print("MetaData")
        print(f"dimension         : {self.dimension}")
        print(f"namespace         : {self.namespace_name}")
        print(f"refinement        : {flags['use_eigen_refinement']}")
        print(f"cleanup           : {flags['use_numerical_cleanup']}")
        print(f"maxDim prec func  : {self.max_dim_precomputed_products}")
        print(f"maxDim accessors  : {self.max_dim_basis_accessor}")
        print(f"epsilon           : {self.epsilon:g}")
        names = "".join(f"{name} " for name in self.basis_vector_name)
        print(f"basis vector name : {names}")
        print(f"metric            : \n{self.metric}")
        print(f"is initialy diag  : {flags['input_metric_diagonal']}")
        print(f"is identity       : {flags['identity_metric']}")
        print(f"is full rank      : {flags['full_rank_metric']}")
        print(
            "is permutation of diagonal matrix : "
            f"{flags['input_metric_permutation_of_diagonal']}"
        )
        print(f"diag metric       : {np.asarray(self.diagonal_metric)}")
        if not self.input_metric_diagonal:
            print(f"Vector transformation matrix : \n{self.transformation_matrix}")
            print(f"Vector inverse Transformation  : \n{self.inverse_transformation_matrix}")

    def _consistency_errors(self) -> Iterator[str]:
        if self.max_dim_basis_accessor == 0:
            yield (
                "error: at least vector accessors are required, see "
                "'max dimension basis accessor' in the conf file."
            )
        if self.dimension == 0:
            yield "error: dimension should not be 0."
        if len(self.basis_vector_name) != self.dimension:
            yield "error: 'basis vector name' size is not consistent with 'dimension'."

        rows, cols = self.metric.shape
        if rows == 0 or cols == 0:
            yield "error: the metric matrix is not defined."
        else:
            square = rows == cols
            if not square:
                yield "error: the metric is not a square matrix."
            if rows != self.dimension or cols != self.dimension:
                yield "error: the metric dimension is not consistent with 'dimension'."
            if square and np.any(np.abs(self.metric - self.metric.T) > self.epsilon):
                yield "error: the metric is not a symmetric matrix."

        # Blade names must be unique: in dimension 15, is "e12" twelve or one-two?
        if len(self.basis_vector_name) == self.dimension:
            seen: set[str] = set()
            for mask in range(1, 2 ** self.dimension + 1):
                kvector = "".join(
                    name
                    for bit, name in enumerate(self.basis_vector_name)
                    if mask & (1 << bit)
                )
                if kvector in seen:
                    yield f"error in the basis vector name: {kvector} is ambiguous."
                else:
                    seen.add(kvector)

        first = self.namespace_name[:1]
        if not (first.isascii() and first.isalpha()):
            yield (
                "error in the namespace name: the first character of "
                f"'{self.namespace_name}' should be an alphabetic letter "
                "for C++ compliance."
            )

    def check_consistency(self) -> bool:
        """Report every inconsistency on standard output; True if there is none."""
        consistent = True
        for message in self._consistency_errors():
            print(message)
            consistent = False
        return consistent

    def metric_diagonalization(self) -> None:
        """Diagonalize the metric and store the transformation matrices.

        Raises MetricDiagonalizationError when the refined or cleaned-up
        decomposition no longer reproduces the metric within epsilon.
        """
        metric = self.metric
        epsilon = self.epsilon

        self.full_rank_metric = get_rank(metric) == self.dimension

        if is_matrix_diagonal(metric, epsilon):
            self.diagonal_metric = np.diagonal(metric).astype(float).copy()
            self.input_metric_diagonal = True
            if is_matrix_identity(metric, epsilon):
                self.identity_metric = True
            return

        self.input_metric_permutation_of_diagonal = is_matrix_permutation_of_diagonal(
            metric, epsilon
        )

        transformation, diagonal = eigen_decomposition(metric)
        inverse = transformation.T.copy()

        scale = np.eye(*metric.shape)
        if self.use_eigen_refinement:
            transformation, inverse, scale = eigen_refinement(
                transformation, diagonal, inverse
            )

        if self.use_numerical_cleanup:
            transformation = numerical_cleanup(transformation, epsilon)
            diagonal = numerical_cleanup(diagonal, epsilon)
            inverse = numerical_cleanup(inverse, epsilon)

        self.transformation_matrix = transformation
        self.inverse_transformation_matrix = inverse

        if is_matrix_identity(diagonal, epsilon):
            self.identity_metric = True

        if not check_numerical_cleanup_with_inverse(
            metric, transformation, diagonal, inverse, epsilon
        ):
            raise MetricDiagonalizationError(
                "metric diagonalization failed; try again without the metric "
                "decomposition refinement or without the numerical cleanup"
            )

        diagonal = (scale @ scale) @ diagonal
        if self.use_numerical_cleanup:
            diagonal = numerical_cleanup(diagonal, epsilon)

        self.diagonal_metric = np.diagonal(diagonal).astype(float).copy()