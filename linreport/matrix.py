"""Basic dense matrix operations on lists of lists of floats."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from pathlib import Path

Matrix = list[list[float]]
Vector = list[float]

_ZERO_TOLERANCE = 1e-10


def _div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: a zero divisor yields inf or nan instead of raising."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def print_matrix(matrix: Sequence[Sequence[float]], name: str = "Matrix") -> None:
    """Print a matrix with four decimals in columns ten characters wide."""
    print(f"{name}:")
    for row in matrix:
        print("".join(f"{value:10.4f}" for value in row))
    print()


def save_matrix(matrix: Sequence[Sequence[float]], filename: str | Path) -> None:
    """Write a matrix as whitespace-separated rows, one row per line."""
    with open(filename, "w", encoding="utf-8") as handle:
        for row in matrix:
            handle.write(" ".join(f"{value:g}" for value in row) + "\n")


def _parse_row(line: str) -> Vector:
    row: Vector = []
    for token in line.split():
        try:
            row.append(float(token))
        except ValueError:
            break
    return row


def load_matrix(filename: str | Path) -> Matrix:
    """Read a whitespace-separated matrix; blank lines are skipped.

    A file that cannot be opened yields an empty matrix.
    """
    try:
        with open(filename, encoding="utf-8") as handle:
            rows = [_parse_row(line) for line in handle]
    except OSError:
        return []
    return [row for row in rows if row]


def condition_number(matrix: Sequence[Sequence[float]]) -> float:
    """Rough condition estimate: largest absolute entry over smallest absolute entry."""
    magnitudes = [abs(value) for row in matrix for value in row]
    largest = max(magnitudes, default=0.0)
    smallest = min(magnitudes, default=sys.float_info.max)
    return largest / smallest if smallest > _ZERO_TOLERANCE else math.inf


def rank(matrix: Sequence[Sequence[float]]) -> int:
    """Count the rows that hold at least one non-zero entry."""
    return sum(
        1 for row in matrix if any(abs(value) > _ZERO_TOLERANCE for value in row)
    )


def _lu_decompose(matrix: Sequence[Sequence[float]]) -> tuple[Matrix, Matrix]:
    """Doolittle LU decomposition without pivoting."""
    n = len(matrix)
    lower = identity(n)
    upper = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i, n):
            value = float(matrix[i][j])
            for k in range(i):
                value -= lower[i][k] * upper[k][j]
            upper[i][j] = value
        for j in range(i + 1, n):
            value = float(matrix[j][i])
            for k in range(i):
                value -= lower[j][k] * upper[k][i]
            lower[j][i] = _div(value, upper[i][i])
    return lower, upper


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    """Determinant as the product of the diagonal of U in an LU decomposition."""
    _, upper = _lu_decompose(matrix)
    return math.prod((upper[i][i] for i in range(len(upper))), start=1.0)


def get_minor(matrix: Sequence[Sequence[float]], row: int, col: int) -> Matrix:
    """Return the matrix with the given row and column removed."""
    return [
        [value for j, value in enumerate(line) if j != col]
        for i, line in enumerate(matrix)
        if i != row
    ]


def transpose(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of a matrix."""
    return [list(column) for column in zip(*matrix)]


def matrix_multiply(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> Matrix:
    """Return the product a @ b."""
    columns = transpose(b)
    return [
        [sum((x * y for x, y in zip(row, column)), 0.0) for column in columns]
        for row in a
    ]


def identity(n: int) -> Matrix:
    """Return the n-by-n identity matrix."""
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def is_equal(
    a: Sequence[Sequence[float]],
    b: Sequence[Sequence[float]],
    tolerance: float = 1e-10,
) -> bool:
    """True when both matrices have the same shape and entries within tolerance."""
    if len(a) != len(b):
        return False
    for row_a, row_b in zip(a, b):
        if len(row_a) != len(row_b):
            return False
        if any(abs(x - y) > tolerance for x, y in zip(row_a, row_b)):
            return False
    return True


def copy_matrix(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return an independent copy of a matrix."""
    return [list(row) for row in matrix]


def _write_determinant(path: Path, value: float) -> None:
    try:
        path.write_text(f"{value:.10e}", encoding="utf-8")
    except OSError:
        pass


def save_determinant_to_csv(
    n: int, determinant: float, data_dir: str | Path = "data"
) -> None:
    """Overwrite <data_dir>/det/<n> with the determinant; nothing is written if the folder is missing."""
    _write_determinant(Path(data_dir) / "det" / str(n), determinant)


def save_determinant_to_file(
    n: int, determinant: float, data_dir: str | Path = "data"
) -> None:
    """Create <data_dir>/det if needed and overwrite <data_dir>/det/<n> with the determinant."""
    folder = Path(data_dir) / "det"
    folder.mkdir(parents=True, exist_ok=True)
    _write_determinant(folder / str(n), determinant)


def solve_lu(a: Sequence[Sequence[float]], b: Sequence[float]) -> Vector:
    """Solve a x = b by LU decomposition without pivoting."""
    lower, upper = _lu_decompose(a)
    n = len(a)

    y: Vector = []
    for i in range(n):
        value = float(b[i])
        for j in range(i):
            value -= lower[i][j] * y[j]
        y.append(value)

    x = [0.0] * n
    for i in reversed(range(n)):
        value = y[i]
        for j in range(i + 1, n):
            value -= upper[i][j] * x[j]
        x[i] = _div(value, upper[i][i])
    return x


def vector_norm(vector: Sequence[float], norm_type: str = "euclidean") -> float:
    """Euclidean norm of a vector; any other norm type gives 0.0."""
    if norm_type == "euclidean":
        return math.sqrt(sum((value * value for value in vector), 0.0))
    return 0.0