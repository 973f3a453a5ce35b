"""Command-line report: determinant, linear solver, eigenvalue and random-matrix runs."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Sequence
from pathlib import Path

from linreport.analysis import run_random_matrix_test
from linreport.eigen import (
    print_eigenvalues,
    qr_eigen_decomposition,
    shifted_qr_eigen_decomposition,
)
from linreport.matrix import (
    Matrix,
    Vector,
    determinant,
    print_matrix,
    save_determinant_to_csv,
    solve_lu,
)

REPORT_MAX_ITERATIONS = 1000
REPORT_TOLERANCE = 1e-10
DEFAULT_MAX_SIZE = 100
DEBUG_MAX_SIZE = 10


def run_determinant_test(data_dir: str | Path = "data") -> tuple[float, float]:
    """Compute and print the determinants of the two sample matrices.

    Each value is also stored in <data_dir>/det/3 when that folder exists.
    """
    print("1. 行列式計算テスト")
    print("------------------")

    test1: Matrix = [[1, 0, 2], [3, 4, 5], [5, 6, 7]]
    print_matrix(test1, "テスト行列1")
    det1 = determinant(test1)
    print(f"行列式: {det1:.4f}")
    save_determinant_to_csv(3, det1, data_dir)

    test2: Matrix = [[1, 0, 0], [2, 3, 5], [4, 1, 3]]
    print_matrix(test2, "テスト行列2")
    det2 = determinant(test2)
    print(f"行列式: {det2:.4f}")
    save_determinant_to_csv(3, det2, data_dir)

    return det1, det2


def run_linear_solver_test() -> Vector:
    """Solve the sample 3x3 system by LU decomposition and print the solution."""
    print()
    print("2. 連立方程式解法テスト")
    print("------------------------")

    a: Matrix = [[2, 3, 1], [1, 2, 3], [3, 1, 2]]
    print_matrix(a, "係数行列A")

    b: Vector = [9, 6, 8]
    print("右辺ベクトル b:")
    for index, value in enumerate(b):
        print(f"b[{index}] = {value:.4f}")
    print()

    x = solve_lu(a, b)
    print("LU分解による解:")
    for index, value in enumerate(x):
        print(f"x[{index}] = {value:.4f}")
    return x


def run_eigenvalue_test() -> tuple[list[complex], Matrix]:
    """Run the unshifted QR algorithm on the sample symmetric matrix and print the result."""
    print()
    print("3. 固有値・固有ベクトル計算テスト")
    print("--------------------------------")

    matrix: Matrix = [[1, -2, 0], [-2, 2, -2], [0, -2, 3]]
    print_matrix(matrix, "テスト行列（対称行列）")

    eigenvalues, eigenvectors = qr_eigen_decomposition(
        matrix, REPORT_MAX_ITERATIONS, REPORT_TOLERANCE
    )
    print_eigenvalues(eigenvalues, "QR法による固有値")

    print("QR法による固有ベクトル:")
    for index, row in enumerate(eigenvectors):
        print(f"v[{index}] = [" + ", ".join(f"{value:.4f}" for value in row) + "]")
    print()
    return eigenvalues, eigenvectors


def run_random_matrix_demo(
    max_size: int = DEFAULT_MAX_SIZE, data_dir: str | Path = "data"
) -> None:
    """Run the random-matrix experiment for sizes 1..max_size, writing under data_dir."""
    print()
    print("4. ランダム行列テスト")
    print("--------------------")
    print(f"ランダム行列テスト (n=1~{max_size}) を実行します...")
    print("注意: このテストは時間がかかる場合があります。")
    run_random_matrix_test(max_size, 1, data_dir)


def _elapsed_us(start_ns: int) -> int:
    return (time.perf_counter_ns() - start_ns) // 1000


def run_performance_comparison_test() -> tuple[list[complex], list[complex]]:
    """Time the plain and the shifted QR algorithm on a 4x4 symmetric matrix.

    Returns the eigenvalues found by each method.
    """
    print()
    print("5. パフォーマンス比較テスト")
    print("------------------------")

    matrix: Matrix = [
        [4, 1, 0, 0],
        [1, 3, 1, 0],
        [0, 1, 2, 1],
        [0, 0, 1, 1],
    ]
    print("4x4対称行列での比較:")
    print_matrix(matrix, "テスト行列")
    print("理論固有値の概算: λ ≈ 4.5, 3.0, 1.5, 0.0")
    print()

    start = time.perf_counter_ns()
    qr_eigenvalues, _ = qr_eigen_decomposition(
        matrix, REPORT_MAX_ITERATIONS, REPORT_TOLERANCE
    )
    qr_time = _elapsed_us(start)

    start = time.perf_counter_ns()
    shifted_eigenvalues, _ = shifted_qr_eigen_decomposition(matrix)
    shifted_time = _elapsed_us(start)

    if shifted_time:
        speedup = qr_time / shifted_time
    else:
        speedup = math.nan if qr_time == 0 else math.inf

    print(f"通常QR法: {qr_time} μs")
    print(f"シフト付きQR法: {shifted_time} μs")
    print(f"高速化率: {speedup:.1f}倍")

    print()
    print("結果比較:")
    print("通常QR法 - 固有値: " + "".join(f"{v.real:.4f} " for v in qr_eigenvalues))
    print(
        "シフト付きQR法 - 固有値: "
        + "".join(f"{v.real:.4f} " for v in shifted_eigenvalues)
    )
    return qr_eigenvalues, shifted_eigenvalues


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linreport",
        description="Applied linear algebra report: determinants, LU solver, QR eigenvalues.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"limit the random-matrix run to n={DEBUG_MAX_SIZE}",
    )
    parser.add_argument(
        "--max-size",
        type=int,
        default=None,
        help=f"largest random matrix size (default {DEFAULT_MAX_SIZE})",
    )
    parser.add_argument(
        "--data-dir",
        default="data",
        help="folder that receives the generated data (default: data)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run every report section in order and return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.max_size is not None:
        max_size = args.max_size
    elif args.debug:
        max_size = DEBUG_MAX_SIZE
    else:
        max_size = DEFAULT_MAX_SIZE

    print("=== 応用線形代数 最終レポート ===")
    print()

    run_determinant_test(args.data_dir)
    run_linear_solver_test()
    run_eigenvalue_test()
    if args.debug:
        print()
        print(f"デバッグモード: n=1~{max_size}")
    run_random_matrix_demo(max_size, args.data_dir)

    print()
    print("=== テスト完了 ===")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())