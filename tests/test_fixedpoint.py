import io
import math

import pytest

from labkit.fixedpoint import TOLERANCE, fixed_point, main


def test_sqrt_region_reaches_fixed_point():
    y = fixed_point(1.0)
    assert abs(y - math.sqrt(math.exp(y) / 2)) < 10 * TOLERANCE


def test_log_region_reaches_fixed_point():
    y = fixed_point(3.0)
    assert abs(y - math.log(2 * y * y)) < 10 * TOLERANCE


def test_newton_region_finds_negative_root():
    y = fixed_point(-1.0)
    assert y < 0
    assert abs(math.exp(y) - 2 * y * y) < 1e-6


@pytest.mark.parametrize("start", [0.0, 0.5, 1.9])
def test_sqrt_region_solves_equation(start):
    y = fixed_point(start)
    assert math.exp(y) == pytest.approx(2 * y * y, abs=1e-4)


def test_main_prints_each_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n3\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"{fixed_point(1.0):.6f}", f"{fixed_point(3.0):.6f}"]


def test_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nabc\n"))
    assert main([]) == 1
    assert "invalid input" in capsys.readouterr().err