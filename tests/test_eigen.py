import math

import pytest

from linreport.eigen import (
    print_eigenvalues,
    qr_decomposition,
    qr_eigen_decomposition,
    shifted_qr_eigen_decomposition,
)
from linreport.matrix import identity, is_equal, matrix_multiply, transpose


def _column(matrix, index):
    return [row[index] for row in matrix]


def _assert_orthogonal(q, tolerance=1e-9):
    qtq = matrix_multiply(transpose(q), q)
    assert is_equal(qtq, identity(len(q)), tolerance)


def test_qr_decomposition_classic_example():
    a = [[12, -51, 4], [6, 167, -68], [-4, 24, -41]]
    q, r = qr_decomposition(a)

    for i, row in enumerate(r):
        for j in range(i):
            assert abs(row[j]) < 1e-10

    assert is_equal(matrix_multiply(q, r), [[float(v) for v in row] for row in a], 1e-6)
    _assert_orthogonal(q, 1e-6)


def test_qr_decomposition_r_diagonal_magnitudes():
    a = [[12, -51, 4], [6, 167, -68], [-4, 24, -41]]
    _, r = qr_decomposition(a)
    assert [abs(r[i][i]) for i in range(3)] == pytest.approx([14.0, 175.0, 35.0])


def test_qr_decomposition_zero_matrix_keeps_identity():
    zero = [[0.0] * 3 for _ in range(3)]
    q, r = qr_decomposition(zero)
    assert q == identity(3)
    assert r == zero


def test_qr_decomposition_empty():
    assert qr_decomposition([]) == ([], [])


def test_qr_eigen_diagonal_matrix():
    diagonal = [[3, 0, 0], [0, 2, 0], [0, 0, 1]]
    eigenvalues, _ = qr_eigen_decomposition(diagonal, 100, 1e-8)
    assert [value.real for value in eigenvalues] == pytest.approx([3.0, 2.0, 1.0], abs=1e-6)


def test_qr_eigen_nonsymmetric_matrix_values():
    matrix = [[1, 2, 3], [0, 1, -3], [0, -3, 1]]
    eigenvalues, eigenvectors = qr_eigen_decomposition(matrix, 100, 1e-8)

    for value in eigenvalues:
        assert not math.isnan(value.real)
        assert not math.isnan(value.imag)
        assert value.imag == 0.0

    assert sorted(value.real for value in eigenvalues) == pytest.approx(
        [-2.0, 1.0, 4.0], abs=1e-6
    )
    _assert_orthogonal(eigenvectors)


def test_qr_eigen_symmetric_eigenvectors():
    matrix = [[1, -2, 0], [-2, 2, -2], [0, -2, 3]]
    eigenvalues, eigenvectors = qr_eigen_decomposition(matrix, 200, 0.0)

    assert sorted(value.real for value in eigenvalues) == pytest.approx(
        [-1.0, 2.0, 5.0], abs=1e-8
    )
    for i, value in enumerate(eigenvalues):
        v = _column(eigenvectors, i)
        av = [row[0] for row in matrix_multiply(matrix, [[x] for x in v])]
        assert av == pytest.approx([value.real * x for x in v], abs=1e-8)


def test_qr_eigen_one_by_one():
    eigenvalues, eigenvectors = qr_eigen_decomposition([[7.5]])
    assert eigenvalues == [complex(7.5, 0.0)]
    assert eigenvectors == [[1.0]]


def test_qr_eigen_does_not_modify_input():
    matrix = [[2.0, 1.0], [1.0, 3.0]]
    qr_eigen_decomposition(matrix)
    assert matrix == [[2.0, 1.0], [1.0, 3.0]]


SYMMETRIC_4 = [
    [4, 1, 0, 0],
    [1, 3, 1, 0],
    [0, 1, 2, 1],
    [0, 0, 1, 1],
]


def test_shifted_qr_similarity_invariants():
    eigenvalues, q = shifted_qr_eigen_decomposition(SYMMETRIC_4)

    _assert_orthogonal(q)
    assert sum(value.real for value in eigenvalues) == pytest.approx(10.0, abs=1e-9)

    similar = matrix_multiply(transpose(q), matrix_multiply(SYMMETRIC_4, q))
    diagonal = [similar[i][i] for i in range(4)]
    assert diagonal == pytest.approx([value.real for value in eigenvalues], abs=1e-8)


def test_shifted_qr_diagonal_matrix():
    diagonal = [[3, 0, 0], [0, 2, 0], [0, 0, 1]]
    eigenvalues, _ = shifted_qr_eigen_decomposition(diagonal)
    assert [value.real for value in eigenvalues] == pytest.approx([3.0, 2.0, 1.0], abs=1e-9)


def test_shifted_qr_one_by_one():
    eigenvalues, eigenvectors = shifted_qr_eigen_decomposition([[-4.0]])
    assert eigenvalues == [complex(-4.0, 0.0)]
    assert eigenvectors == [[1.0]]


def test_print_eigenvalues(capsys):
    print_eigenvalues([complex(2.5, 0.0), complex(1.0, 2.0)], "values")
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["values:", "λ[0] = 2.5", "λ[1] = 1 + 2i", ""]


def test_print_eigenvalues_default_name_and_small_imaginary(capsys):
    print_eigenvalues([complex(-3.0, 1e-12)])
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["固有値:", "λ[0] = -3", ""]