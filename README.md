# linreport

Dense linear algebra in plain Python on lists of lists of floats. It also has a
report command that times the routines on random symmetric matrices of
growing size and writes the results as CSV files. It needs nothing beyond the
standard library.

## Modules

### `linreport.matrix`

- `print_matrix(matrix, name="Matrix")`: prints the rows with four decimals,
  ten characters per column.
- `save_matrix(matrix, filename)` / `load_matrix(filename)`: whitespace-separated
  text, one row per line. `load_matrix` skips blank lines. It returns `[]` when
  the file cannot be opened.
- `transpose`, `matrix_multiply(a, b)`, `identity(n)`, `copy_matrix`,
  `get_minor(matrix, row, col)`, and `is_equal(a, b, tolerance=1e-10)`, which
  compares both the shape and the entries.
- `determinant(matrix)`: the product of the diagonal of U in a Doolittle LU
  decomposition.
- `solve_lu(a, b)`: solves `a x = b` by LU decomposition.
- `rank(matrix)`: a rough rank. It counts the rows that hold an entry with an
  absolute value above `1e-10`.
- `condition_number(matrix)`: a rough estimate, the largest absolute entry
  divided by the smallest. It is `inf` when the smallest is at or below `1e-10`.
- `vector_norm(vector, norm_type="euclidean")`: gives the Euclidean norm. Any
  other `norm_type` gives `0.0`.
- `save_determinant_to_file(n, determinant, data_dir="data")`: creates
  `<data_dir>/det` and overwrites `<data_dir>/det/<n>` with the value in the
  form `1.2345678900e+00`.
- `save_determinant_to_csv(n, determinant, data_dir="data")`: writes the same
  file, but writes nothing when the `det` folder does not exist.

The LU routines do not pivot. A zero pivot does not raise an error. It turns
the affected values into `inf` or `nan`.

### `linreport.eigen`

- `qr_decomposition(matrix)`: returns `(Q, R)` from Householder reflections.
  Q is orthogonal and R is upper triangular.
- `qr_eigen_decomposition(matrix, max_iterations=1000, tolerance=1e-8)`: the
  unshifted QR algorithm.
- `shifted_qr_eigen_decomposition(matrix, max_iterations=200, tolerance=1e-8)`:
  the same algorithm with a Wilkinson shift taken from the trailing 2x2 block.
  When that block has complex eigenvalues, half its trace is used as the shift.
- `print_eigenvalues(eigenvalues, name="固有値")`: prints each eigenvalue. The
  imaginary part is added when it is not negligible.

Both eigen routines stop when no diagonal entry moves by more than `tolerance`
between two iterations. They return `(eigenvalues, Q)`:

- The eigenvalues are the diagonal entries, as complex numbers with a zero
  imaginary part.
- `Q` is the accumulated orthogonal matrix. Its columns are the eigenvector
  estimates.

### `linreport.analysis`

- `generate_random_matrix(n, min_val=-10.0, max_val=10.0, rng=None)`: a random
  symmetric matrix with uniform entries.
- `generate_random_vector(n, min_val=-10.0, max_val=10.0, rng=None)`: a random
  vector with uniform entries.
- Pass a `random.Random` as `rng` for runs you can repeat.
- `ComputationTimes`: a dataclass that holds the determinant, eigenvalue,
  linear solver and total times in milliseconds. `calculate_total()` sets the
  total.
- CSV writers:
  - `save_matrix_to_csv`
  - `save_vector_to_csv`
  - `save_detailed_times_to_csv`
  - `save_determinant_times_to_csv`
  - `save_eigenvalue_times_to_csv`
  - `save_linear_solver_times_to_csv`
  - `save_matrix_properties_to_csv`
- `condition_from_eigenvalues(eigenvalues)`: the largest non-negligible
  `|Re λ|` divided by the smallest. An empty list gives `0.0`.
- `run_single_size_test(n, test_index=0, rng=None)`: analyses one random
  matrix and prints the results without saving anything.
- `run_random_matrix_test(max_size=100, num_tests=1, data_dir="data", rng=None)`:
  analyses sizes `1..max_size` and writes everything under `data_dir`.

### `linreport.cli`

This module holds the report sections as functions:

- `run_determinant_test`
- `run_linear_solver_test`
- `run_eigenvalue_test`
- `run_random_matrix_demo`
- `run_performance_comparison_test`, which times the plain and the shifted QR
  algorithm on a 4x4 symmetric matrix.

It also holds `main`, the entry point of the command.

## Installation

```
pip install .
```

## Example

```python
import random

from linreport.matrix import determinant, solve_lu
from linreport.eigen import qr_eigen_decomposition
from linreport.analysis import generate_random_matrix

a = [[2, 3, 1], [1, 2, 3], [3, 1, 2]]
print(determinant(a))            # 18.0 (up to rounding)
print(solve_lu(a, [9, 6, 8]))    # the solution of a @ x = b

eigenvalues, q = qr_eigen_decomposition([[3, 0, 0], [0, 2, 0], [0, 0, 1]])
print([v.real for v in eigenvalues])  # [3.0, 2.0, 1.0]

m = generate_random_matrix(5, rng=random.Random(1))
```

## The report command

```
linreport
linreport --debug
linreport --max-size 20 --data-dir out
```

The command runs these sections in order:

1. The determinants of two fixed 3x3 matrices. Each is stored in
   `<data-dir>/det/3` if that folder already exists.
2. The LU solution of a fixed 3x3 system.
3. The QR eigen-decomposition of a symmetric 3x3 matrix, with 1000 iterations
   and a tolerance of `1e-10`.
4. The random-matrix run for sizes 1 to 100.

Options:

- `--debug` limits the random-matrix run to sizes 1 to 10.
- `--max-size N` sets the largest size and takes precedence over `--debug`.
- `--data-dir DIR` chooses the output folder. The default is `data`.

The random-matrix run writes these files under the data directory:

- `A/<n>.csv`: the matrix for size n.
- `B/<n>.csv`: the right-hand side for size n.
- `x/<n>.csv`: the LU solution for size n.
- `det/<n>`: the determinant.
- `eigen/<n>.csv`: each eigenvalue followed by its eigenvector.
- `matrix_properties.csv`: determinant, rank, condition number and
  eigenvalues for each size.
- `detailed_computation_times.csv`, `determinant_times.csv`,
  `eigenvalue_times.csv`, `linear_solver_times.csv`: the timings in
  milliseconds.

At the end it prints the average, largest and smallest total time.

## What it does not do

- It writes timing data as CSV but does not draw graphs. Use any plotting tool
  on the CSV files.
- Eigenvalues are only the real diagonal entries after QR iteration. Complex
  eigenvalue pairs of non-symmetric matrices are not recovered.
- The rank and condition-number routines in `linreport.matrix` are rough
  estimates, not SVD-based values.

## Tests

```
pip install .[test]
pytest
```