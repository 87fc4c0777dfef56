# gagen

Building blocks for describing a geometric algebra: its dimension, the names
of its basis vectors and its metric, with tools to check that description and
to diagonalise the metric.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `gagen.utility`

Combinatorial helpers for indexing basis blades:

- `binomial(n, k)` and `bin_coeff(n, k)`: binomial coefficients (zero when
  `k > n`; `binomial` raises `ValueError` on negative arguments).
- `factorial(n)`: gives 1 for every `n <= 1`.
- `sort_and_determine_sign(*indices)`: sorts vector indices and returns
  `(sorted_indices, sign)`, the sign of the permutation.
- `idx_variadic(dimension, grade, *indices)` and
  `compute_idx_from_list(dimension, grade, *indices)`: sums of binomial
  coefficients used to locate a blade among the blades of its grade.

### `gagen.files`

- `make_directory`, `read_file` and `write_file` raise `OSError` with a clear
  message when the operation fails.
- `directory_exists` and `directory_or_file_exists` return booleans.
- `substitute(data, pattern, replace_by)` returns `data` with every match of
  the regular expression replaced; the replacement understands `$&`, `$1`…,
  `` $` ``, `$'` and `$$`.
- `copy_bin(src, dest)` copies a file byte for byte; `copy_text(src, dest)`
  copies a text file.

### `gagen.metric`

numpy-based analysis of a metric matrix:

- `is_matrix_diagonal`, `is_matrix_identity`,
  `is_matrix_permutation_of_diagonal` (all with a tolerance `epsilon`) and
  `get_rank`.
- `eigen_decomposition(m)` returns `(P, A)`: real eigenvectors as columns and
  a diagonal matrix of real eigenvalues.
- `min_abs_non_zero_value(x)` and `eigen_refinement(p, d, pinv)`, which
  rescales each eigenvector so its smallest non-zero entry has magnitude 1 and
  returns the new `P`, the matching inverse and the scale matrix.
- `vector_numerical_cleanup`, `numerical_cleanup` and
  `numerical_cleanup_sparse` snap near-zero, near-integer and near-simple
  fraction values.
- `check_numerical_cleanup(m, p, a, epsilon)` checks `P A Pᵀ ≈ M`;
  `check_numerical_cleanup_with_inverse(m, p, a, pinv, epsilon)` checks
  `P A Pinv ≈ M`.
- `SparseMatrix` stores only explicit entries (`from_dense`, `to_dense`,
  `nonzeros`, `triplets` in column-major order, and `[i, j]` indexing).
- `compute_inverse_transformation_matrix(matrix, epsilon)` inverts a square
  matrix into a `SparseMatrix`, raising `numpy.linalg.LinAlgError` when it is
  singular; `transformation_matrix_to_components` flattens a `SparseMatrix`
  to `[row, col, value, ...]`.

### `gagen.metadata`

`MetaData` is a dataclass holding the namespace name, dimension, basis vector
names, metric and options (eigen refinement, numerical clean-up, epsilon,
accessor and precomputed-product limits).

- `check_consistency()` prints every problem it finds (missing accessors,
  zero dimension, wrong number of names, undefined, non-square, mis-sized or
  non-symmetric metric, ambiguous blade names, a namespace not starting with a
  letter) and returns `True` only when there is none.
- `metric_diagonalization()` fills `full_rank_metric`,
  `input_metric_diagonal`, `identity_metric`,
  `input_metric_permutation_of_diagonal`, `diagonal_metric`,
  `transformation_matrix` and `inverse_transformation_matrix`; it raises
  `MetricDiagonalizationError` if the cleaned-up decomposition no longer
  reproduces the metric.
- `display()` prints a summary.

## Example

```python
import numpy as np

from gagen.metadata import MetaData

meta = MetaData(
    namespace_name="c2ga",
    dimension=2,
    basis_vector_name=["1", "2"],
    metric=np.array([[0.0, -1.0], [-1.0, 0.0]]),
    max_dim_basis_accessor=2,
    epsilon=1e-7,
)
if meta.check_consistency():
    meta.metric_diagonalization()
    print(meta.diagonal_metric)
```

```python
from gagen.utility import bin_coeff, sort_and_determine_sign

print(bin_coeff(5, 2))                    # 10
print(sort_and_determine_sign(3, 1, 2))   # ((1, 2, 3), 1)
```

## What this package does not do

It has no command-line tool, does not read algebra descriptions from
configuration files, and does not generate library source code: a `MetaData`
is built in Python, and the package stops at checking it and diagonalising
its metric.