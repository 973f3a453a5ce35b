"""Eigenvalues and eigenvectors by the QR algorithm with Householder reflections."""

from __future__ import annotations

import math
from collections.abc import Sequence

from linreport.matrix import Matrix, copy_matrix, identity, matrix_multiply

QR_MAX_ITERATIONS = 1000
QR_TOLERANCE = 1e-8

_REFLECTION_TOLERANCE = 1e-12
_IMAGINARY_TOLERANCE = 1e-10


def qr_decomposition(matrix: Sequence[Sequence[float]]) -> tuple[Matrix, Matrix]:
    """Factor a square matrix as Q @ R with Householder reflections.

    Returns the orthogonal Q and the upper-triangular R.
    """
    n = len(matrix)
    r = [[float(value) for value in row] for row in matrix]
    q = identity(n)

    for k in range(n - 1):
        tail = r[k:]
        x = [row[k] for row in tail]
        norm_x = math.sqrt(sum((xi * xi for xi in x), 0.0))
        if norm_x < _REFLECTION_TOLERANCE:
            continue

        v = list(x)
        v[0] += norm_x if x[0] >= 0 else -norm_x
        norm_v = math.sqrt(sum((vi * vi for vi in v), 0.0))
        if norm_v < _REFLECTION_TOLERANCE:
            continue
        v = [vi / norm_v for vi in v]

        # R = H_k @ R
        for j in range(k, n):
            dot = sum((vi * row[j] for vi, row in zip(v, tail)), 0.0)
            for vi, row in zip(v, tail):
                row[j] -= 2.0 * vi * dot

        # Q = Q @ H_k
        for row in q:
            dot = sum((row[k + offset] * vi for offset, vi in enumerate(v)), 0.0)
            for offset, vi in enumerate(v):
                row[k + offset] -= 2.0 * vi * dot

    return q, r


def _wilkinson_shift(a: Matrix) -> float:
    """Eigenvalue of the trailing 2x2 block closest to its last diagonal entry."""
    n = len(a)
    if n < 2:
        return 0.0
    p, b = a[n - 2][n - 2], a[n - 2][n - 1]
    c, d = a[n - 1][n - 2], a[n - 1][n - 1]

    trace = p + d
    det = p * d - b * c
    discriminant = trace * trace - 4 * det
    if discriminant >= 0:
        root = math.sqrt(discriminant)
        lambda1 = (trace + root) / 2.0
        lambda2 = (trace - root) / 2.0
        return lambda1 if abs(lambda1 - d) < abs(lambda2 - d) else lambda2
    # Complex pair: fall back to half the trace.
    return trace / 2.0


def _qr_iterate(
    matrix: Sequence[Sequence[float]],
    max_iterations: int,
    tolerance: float,
    shifted: bool,
) -> tuple[list[complex], Matrix]:
    n = len(matrix)
    a = [[float(value) for value in row] for row in copy_matrix(matrix)]
    q_total = identity(n)

    for iteration in range(max_iterations):
        previous_diagonal = [a[i][i] for i in range(n)]

        shift = _wilkinson_shift(a) if shifted else 0.0
        if shift:
            for i in range(n):
                a[i][i] -= shift

        q, r = qr_decomposition(a)
        a = matrix_multiply(r, q)

        if shift:
            for i in range(n):
                a[i][i] += shift

        q_total = matrix_multiply(q_total, q)

        if iteration > 0 and not any(
            abs(a[i][i] - previous_diagonal[i]) > tolerance for i in range(n)
        ):
            break

    eigenvalues = [complex(a[i][i], 0.0) for i in range(n)]
    return eigenvalues, q_total


def qr_eigen_decomposition(
    matrix: Sequence[Sequence[float]],
    max_iterations: int = QR_MAX_ITERATIONS,
    tolerance: float = QR_TOLERANCE,
) -> tuple[list[complex], Matrix]:
    """Unshifted QR algorithm.

    Returns the eigenvalues read off the diagonal and the accumulated Q,
    whose columns are the eigenvector estimates.
    """
    return _qr_iterate(matrix, max_iterations, tolerance, shifted=False)


def shifted_qr_eigen_decomposition(
    matrix: Sequence[Sequence[float]],
    max_iterations: int = 200,
    tolerance: float = 1e-8,
) -> tuple[list[complex], Matrix]:
    """QR algorithm with a Wilkinson shift taken from the trailing 2x2 block.

    Returns the eigenvalues and the accumulated Q, as qr_eigen_decomposition does.
    """
    return _qr_iterate(matrix, max_iterations, tolerance, shifted=True)


def print_eigenvalues(eigenvalues: Sequence[complex], name: str = "固有値") -> None:
    """Print each eigenvalue, adding the imaginary part when it is not negligible."""
    print(f"{name}:")
    for index, value in enumerate(eigenvalues):
        value = complex(value)
        line = f"λ[{index}] = {value.real:g}"
        if abs(value.imag) > _IMAGINARY_TOLERANCE:
            line += f" + {value.imag:g}i"
        print(line)
    print()