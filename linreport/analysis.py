"""Random symmetric matrix experiments, timing and CSV reports."""

from __future__ import annotations

import math
import random
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from linreport.eigen import qr_eigen_decomposition
from linreport.matrix import (
    Matrix,
    Vector,
    determinant,
    rank,
    save_determinant_to_file,
    solve_lu,
)

_ZERO_TOLERANCE = 1e-10


@dataclass
class ComputationTimes:
    """Computation times in milliseconds for one experiment."""

    determinant_time: float = 0.0
    eigenvalue_time: float = 0.0
    linear_solver_time: float = 0.0
    total_time: float = 0.0

    def calculate_total(self) -> None:
        """Set total_time to the sum of the three partial times."""
        self.total_time = (
            self.determinant_time + self.eigenvalue_time + self.linear_solver_time
        )


def _elapsed_ms(start_ns: int) -> float:
    """Milliseconds since start_ns, truncated to whole microseconds."""
    return ((time.perf_counter_ns() - start_ns) // 1000) / 1000.0


def generate_random_matrix(
    n: int,
    min_val: float = -10.0,
    max_val: float = 10.0,
    rng: random.Random | None = None,
) -> Matrix:
    """Random n-by-n symmetric matrix with entries drawn uniformly from [min_val, max_val)."""
    rng = rng or random.Random()
    matrix = [[rng.uniform(min_val, max_val) for _ in range(n)] for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            sym = 0.5 * (matrix[i][j] + matrix[j][i])
            matrix[i][j] = sym
            matrix[j][i] = sym
    return matrix


def generate_random_vector(
    n: int,
    min_val: float = -10.0,
    max_val: float = 10.0,
    rng: random.Random | None = None,
) -> Vector:
    """Random vector of length n with entries drawn uniformly from [min_val, max_val)."""
    rng = rng or random.Random()
    return [rng.uniform(min_val, max_val) for _ in range(n)]


def save_matrix_to_csv(matrix: Sequence[Sequence[float]], filename: str | Path) -> None:
    """Write a matrix as comma-separated rows."""
    with open(filename, "w", encoding="utf-8") as handle:
        for row in matrix:
            handle.write(",".join(f"{value:g}" for value in row) + "\n")


def save_vector_to_csv(vector: Sequence[float], filename: str | Path) -> None:
    """Write a vector as a single comma-separated line."""
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(",".join(f"{value:g}" for value in vector) + "\n")


def save_detailed_times_to_csv(
    filename: str | Path,
    sizes: Sequence[int],
    times: Sequence[ComputationTimes],
) -> None:
    """Write every partial time and the total for each size."""
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(
            "Size,DeterminantTime,EigenvalueTime,LinearSolverTime,TotalTime\n"
        )
        for size, entry in zip(sizes, times):
            handle.write(
                f"{size},{entry.determinant_time:.6f},{entry.eigenvalue_time:.6f},"
                f"{entry.linear_solver_time:.6f},{entry.total_time:.6f}\n"
            )


def _save_single_time(
    filename: str | Path,
    header: str,
    sizes: Sequence[int],
    values: Sequence[float],
) -> None:
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(f"Size,{header}\n")
        for size, value in zip(sizes, values):
            handle.write(f"{size},{value:.6f}\n")


def save_determinant_times_to_csv(
    filename: str | Path,
    sizes: Sequence[int],
    times: Sequence[ComputationTimes],
) -> None:
    """Write the determinant time for each size."""
    _save_single_time(
        filename, "DeterminantTime", sizes, [t.determinant_time for t in times]
    )


def save_eigenvalue_times_to_csv(
    filename: str | Path,
    sizes: Sequence[int],
    times: Sequence[ComputationTimes],
) -> None:
    """Write the eigen-decomposition time for each size."""
    _save_single_time(
        filename, "EigenvalueTime", sizes, [t.eigenvalue_time for t in times]
    )


def save_linear_solver_times_to_csv(
    filename: str | Path,
    sizes: Sequence[int],
    times: Sequence[ComputationTimes],
) -> None:
    """Write the linear solver time for each size."""
    _save_single_time(
        filename, "LinearSolverTime", sizes, [t.linear_solver_time for t in times]
    )


def save_matrix_properties_to_csv(
    filename: str | Path,
    sizes: Sequence[int],
    determinants: Sequence[float],
    ranks: Sequence[int],
    condition_numbers: Sequence[float],
    all_eigenvalues: Sequence[Sequence[complex]],
) -> None:
    """Write determinant, rank, condition number and eigenvalues for each size.

    The determinant of the first row is written in general format and later
    ones with six fixed decimals, the same as the report format has always had.
    """
    rows = zip(sizes, determinants, ranks, condition_numbers, all_eigenvalues)
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write("Size,Determinant,Rank,ConditionNumber,Eigenvalues\n")
        for index, (size, det, rnk, cond, eigenvalues) in enumerate(rows):
            det_text = f"{det:g}" if index == 0 else f"{det:.6f}"
            eigen_text = ";".join(f"{complex(v).real:f}" for v in eigenvalues)
            handle.write(f"{size},{det_text},{rnk},{cond:.6f},{eigen_text}\n")


def condition_from_eigenvalues(eigenvalues: Sequence[complex]) -> float:
    """Ratio of the largest to the smallest non-negligible |Re(lambda)|.

    An empty list gives 0.0; when no eigenvalue is above the threshold the
    ratio is 0.0 as well.
    """
    if not eigenvalues:
        return 0.0
    magnitudes = [
        abs(complex(value).real)
        for value in eigenvalues
        if abs(complex(value).real) > _ZERO_TOLERANCE
    ]
    largest = max(magnitudes, default=0.0)
    smallest = min(magnitudes, default=sys.float_info.max)
    return largest / smallest if smallest > _ZERO_TOLERANCE else math.inf


def _analyse(
    n: int, rng: random.Random
) -> tuple[Matrix, Vector, Vector, float, int, list[complex], Matrix, ComputationTimes]:
    matrix = generate_random_matrix(n, rng=rng)
    b = generate_random_vector(n, rng=rng)

    start = time.perf_counter_ns()
    x = solve_lu(matrix, b)
    linear_solver_time = _elapsed_ms(start)

    start = time.perf_counter_ns()
    det = determinant(matrix)
    determinant_time = _elapsed_ms(start)

    rnk = rank(matrix)

    start = time.perf_counter_ns()
    eigenvalues, eigenvectors = qr_eigen_decomposition(matrix)
    eigenvalue_time = _elapsed_ms(start)

    times = ComputationTimes(
        determinant_time=determinant_time,
        eigenvalue_time=eigenvalue_time,
        linear_solver_time=linear_solver_time,
    )
    times.calculate_total()
    return matrix, b, x, det, rnk, eigenvalues, eigenvectors, times


def run_single_size_test(
    n: int, test_index: int = 0, rng: random.Random | None = None
) -> None:
    """Analyse one random matrix of size n and print the results; nothing is saved."""
    rng = rng or random.Random()
    print(f"サイズ {n} のランダム行列テスト {test_index} を実行中...")

    _, _, _, det, rnk, eigenvalues, _, times = _analyse(n, rng)
    condition = condition_from_eigenvalues(eigenvalues)

    print(
        f"サイズ {n}: 行列式={det:.6f}, 条件数={condition:.6f}, "
        f"ランク={rnk}, 計算時間={times.total_time:.6f}ms"
    )
    print("固有値（最初の5個）:")
    for index, value in enumerate(eigenvalues[:5]):
        print(f"  λ[{index}] = {value.real:.6f}")
    if len(eigenvalues) > 5:
        print(f"  ... (他 {len(eigenvalues) - 5} 個の固有値)")
    print()


def _save_eigen_csv(
    filename: Path, eigenvalues: Sequence[complex], eigenvectors: Matrix
) -> None:
    n = len(eigenvalues)
    with open(filename, "w", encoding="utf-8") as handle:
        header = ["Index", "Eigenvalue"] + [f"Eigenvector_{i}" for i in range(n)]
        handle.write(",".join(header) + "\n")
        for i, value in enumerate(eigenvalues):
            column = [f"{row[i]:g}" for row in eigenvectors]
            handle.write(",".join([str(i), f"{value.real:g}", *column]) + "\n")


def run_random_matrix_test(
    max_size: int = 100,
    num_tests: int = 1,
    data_dir: str | Path = "data",
    rng: random.Random | None = None,
) -> None:
    """Analyse random matrices of size 1..max_size and write every result under data_dir."""
    rng = rng or random.Random()
    root = Path(data_dir)
    print(f"=== ランダム行列テスト (n=1~{max_size} 各サイズ{num_tests}回) ===")

    for sub in ("eigen", "A", "B", "x"):
        (root / sub).mkdir(parents=True, exist_ok=True)

    sizes: list[int] = []
    determinants: list[float] = []
    condition_numbers: list[float] = []
    ranks: list[int] = []
    all_eigenvalues: list[list[complex]] = []
    detailed_times: list[ComputationTimes] = []

    for n in range(1, max_size + 1):
        for _ in range(num_tests):
            matrix, b, x, det, rnk, eigenvalues, eigenvectors, times = _analyse(n, rng)

            save_matrix_to_csv(matrix, root / "A" / f"{n}.csv")
            save_vector_to_csv(b, root / "B" / f"{n}.csv")
            save_vector_to_csv(x, root / "x" / f"{n}.csv")
            save_determinant_to_file(n, det, root)

            sizes.append(n)
            determinants.append(det)
            condition_numbers.append(condition_from_eigenvalues(eigenvalues))
            ranks.append(rnk)
            all_eigenvalues.append(eigenvalues)
            detailed_times.append(times)

            _save_eigen_csv(root / "eigen" / f"{n}.csv", eigenvalues, eigenvectors)

            if n % 10 == 0:
                print(f"サイズ {n} 完了")

    properties = root / "matrix_properties.csv"
    detailed = root / "detailed_computation_times.csv"
    det_times = root / "determinant_times.csv"
    eigen_times = root / "eigenvalue_times.csv"
    solver_times = root / "linear_solver_times.csv"

    save_matrix_properties_to_csv(
        properties, sizes, determinants, ranks, condition_numbers, all_eigenvalues
    )
    save_detailed_times_to_csv(detailed, sizes, detailed_times)
    save_determinant_times_to_csv(det_times, sizes, detailed_times)
    save_eigenvalue_times_to_csv(eigen_times, sizes, detailed_times)
    save_linear_solver_times_to_csv(solver_times, sizes, detailed_times)

    print("\n=== テスト完了 ===")
    print("結果を以下のファイルに保存しました:")
    print(f"  行列特性: {properties}")
    print(f"  詳細計算時間: {detailed}")
    print(f"  行列式計算時間: {det_times}")
    print(f"  固有値・固有ベクトル計算時間: {eigen_times}")
    print(f"  線形方程式解法時間: {solver_times}")

    totals = [t.total_time for t in detailed_times]
    if totals:
        print("計算時間統計:")
        print(f"  平均: {sum(totals) / len(totals):g}ms")
        print(f"  最大: {max(totals):g}ms")
        print(f"  最小: {min(totals):g}ms")