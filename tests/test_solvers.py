"""Tests for solvers module."""

import pytest

from unfold.errors import InvalidArgument
from unfold.solvers import fibonacci, fixed_point, newton_sqrt_step, unfold_sqrt


def test_square_root():
    """Test Newton square roots of perfect squares."""
    for i in range(20):
        n = float(i)
        res = unfold_sqrt(n * n)
        # The last iterate still outside the tolerance has an error around 1e-4
        assert abs(res - n) < 1e-4


def test_square_root_of_hundred():
    """Test the documented sqrt(100) example."""
    assert abs(unfold_sqrt(100.0) - 10.0) < 1e-4


def test_square_root_negative():
    """Test that negative input has no root."""
    assert unfold_sqrt(-4.0) is None


def test_square_root_special_cases():
    """Test that 0 and 1 are returned unchanged."""
    assert unfold_sqrt(0.0) == 0.0
    assert unfold_sqrt(1.0) == 1.0


def test_square_root_non_square():
    """Test a root that is not an integer."""
    assert abs(unfold_sqrt(2.0) - 2.0 ** 0.5) < 1e-4


def test_fixed_point_converges():
    """Test that the first converged Newton iterate is within tolerance."""
    n = 100.0
    root = fixed_point(newton_sqrt_step(n), n, lambda x: abs(x * x - n) <= 1e-8)
    assert abs(root - 10.0) < 1e-8


def test_fixed_point_not_found():
    """Test that no fixed point within the cap gives None."""
    assert fixed_point(lambda x: x + 1, 0, lambda x: x < 0, max_iterations=10) is None


def test_fixed_point_invalid_cap():
    """Test that a non-positive cap is rejected."""
    with pytest.raises(InvalidArgument, match="max_iterations"):
        fixed_point(lambda x: x, 0, lambda x: True, max_iterations=0)


def test_fibonacci():
    """Test the first Fibonacci numbers."""
    assert fibonacci(8) == [0, 1, 1, 2, 3, 5, 8, 13]
    assert fibonacci(0) == []


def test_fixed_point_none_as_converged_value():
    """Test that a converged value of None is told apart from no result."""
    step = lambda x: None if x is None or x == 2 else x + 1
    assert fixed_point(step, 0, lambda x: x is None, max_iterations=5, default="missing") is None
    assert fixed_point(lambda x: x + 1, 0, lambda x: x is None, max_iterations=5, default="missing") == "missing"
