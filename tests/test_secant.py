import math

import pytest

from parallab.secant import INTERVALS, function_value, main, secant_method


def test_function_value_at_zero_is_constant_term():
    assert function_value(0) == -11.0


def test_function_value_at_one():
    assert function_value(1.0) == -15.0


def test_function_value_is_increasing_for_large_x():
    assert function_value(10.0) < function_value(11.0)


@pytest.mark.parametrize("start,end", INTERVALS)
def test_secant_finds_root(start, end):
    root = secant_method(start, end)
    assert abs(function_value(root)) < 1e-6


def test_all_intervals_agree():
    roots = [secant_method(start, end) for start, end in INTERVALS]
    assert max(roots) - min(roots) < 1e-6


def test_root_lies_where_sign_changes():
    root = secant_method(-50.0, 50.0)
    assert function_value(root - 1e-3) < 0 < function_value(root + 1e-3)


def test_equal_points_return_immediately():
    assert secant_method(2.5, 2.5) == 2.5


def test_points_within_tolerance_return_second():
    assert secant_method(1.0, 1.0 + 1e-9) == 1.0 + 1e-9


def test_custom_tolerance_returns_approximate_root():
    root = secant_method(-50.0, 50.0, tolerance=1e-4)
    assert abs(function_value(root)) < 1e-1


def test_negative_tolerance_rejected():
    with pytest.raises(ValueError):
        secant_method(-50.0, 50.0, tolerance=-1.0)


def test_nan_input_rejected():
    with pytest.raises(ValueError):
        secant_method(math.nan, 1.0)


def test_infinite_input_rejected():
    with pytest.raises(ValueError):
        secant_method(math.inf, 1.0)


def test_main_reports_each_interval(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Megvannak a gyokok a szelo modszerrel:") == len(INTERVALS)
    assert "Ossz futasi ido:" in out


def test_main_runs_every_interval_per_thread(capsys):
    assert main(["--threads", "2"]) == 0
    out = capsys.readouterr().out
    assert out.count("Megvannak a gyokok a szelo modszerrel:") == 2 * len(INTERVALS)


def test_main_rejects_zero_threads():
    with pytest.raises(SystemExit):
        main(["--threads", "0"])