import math

import pytest

from linreport.cli import (
    main,
    run_determinant_test,
    run_eigenvalue_test,
    run_linear_solver_test,
    run_performance_comparison_test,
    run_random_matrix_demo,
)
from linreport.matrix import (
    identity,
    is_equal,
    matrix_multiply,
    transpose,
)


def test_determinant_test_first_value_matches_known_result(tmp_path):
    det1, _ = run_determinant_test(tmp_path)
    assert det1 == pytest.approx(-6.0, abs=1e-10)


def test_determinant_test_writes_last_value_when_folder_exists(tmp_path):
    (tmp_path / "det").mkdir()
    _, det2 = run_determinant_test(tmp_path)
    assert (tmp_path / "det" / "3").read_text(encoding="utf-8") == f"{det2:.10e}"


def test_determinant_test_writes_nothing_without_folder(tmp_path):
    run_determinant_test(tmp_path)
    assert not (tmp_path / "det").exists()


def test_linear_solver_test_solution_satisfies_system():
    x = run_linear_solver_test()
    a = [[2, 3, 1], [1, 2, 3], [3, 1, 2]]
    b = [9, 6, 8]
    ax = matrix_multiply(a, [[value] for value in x])
    for row, expected in zip(ax, b):
        assert row[0] == pytest.approx(expected, abs=1e-10)


def test_linear_solver_test_prints_solution(capsys):
    x = run_linear_solver_test()
    out = capsys.readouterr().out
    assert f"x[0] = {x[0]:.4f}" in out
    assert "LU分解による解:" in out


def test_eigenvalue_test_invariants():
    eigenvalues, eigenvectors = run_eigenvalue_test()
    matrix = [[1, -2, 0], [-2, 2, -2], [0, -2, 3]]
    trace = sum(matrix[i][i] for i in range(3))
    assert sum(v.real for v in eigenvalues) == pytest.approx(trace, abs=1e-6)
    assert all(v.imag == 0.0 for v in eigenvalues)
    assert is_equal(
        matrix_multiply(transpose(eigenvectors), eigenvectors), identity(3), 1e-8
    )


def test_performance_comparison_methods_agree(capsys):
    qr_values, shifted_values = run_performance_comparison_test()
    assert len(qr_values) == 4 and len(shifted_values) == 4
    assert sum(v.real for v in qr_values) == pytest.approx(10.0, abs=1e-6)
    assert sum(v.real for v in shifted_values) == pytest.approx(10.0, abs=1e-6)
    assert sorted(v.real for v in qr_values) == pytest.approx(
        sorted(v.real for v in shifted_values), abs=1e-4
    )
    assert "高速化率:" in capsys.readouterr().out


def test_random_matrix_demo_writes_reports(tmp_path):
    run_random_matrix_demo(3, tmp_path)
    lines = (tmp_path / "matrix_properties.csv").read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Size,Determinant,Rank,ConditionNumber,Eigenvalues"
    assert [line.split(",")[0] for line in lines[1:]] == ["1", "2", "3"]
    for n in (1, 2, 3):
        assert (tmp_path / "A" / f"{n}.csv").exists()
        assert (tmp_path / "det" / str(n)).exists()


def test_main_runs_all_sections(tmp_path, capsys):
    status = main(["--max-size", "2", "--data-dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert status == 0
    assert out.startswith("=== 応用線形代数 最終レポート ===")
    assert out.rstrip().endswith("=== テスト完了 ===")
    assert "ランダム行列テスト (n=1~2)" in out
    assert (tmp_path / "detailed_computation_times.csv").exists()


def test_main_debug_limits_size(tmp_path, capsys):
    status = main(["--debug", "--max-size", "1", "--data-dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert status == 0
    assert "デバッグモード" in out
    assert sorted(p.name for p in (tmp_path / "A").iterdir()) == ["1.csv"]


def test_main_rejects_non_integer_size(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--max-size", "many", "--data-dir", str(tmp_path)])
    assert excinfo.value.code == 2


def test_determinant_values_are_finite(tmp_path):
    det1, det2 = run_determinant_test(tmp_path)
    assert math.isfinite(det1) and math.isfinite(det2)
    assert det1 < 0 < det2