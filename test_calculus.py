"""Tests for the calculus engine."""

import math
import numpy as np
import pytest
from term import Term
from polynomial import Polynomial
from arithmetic import equals, is_zero
from calculus import (
    QUADRANT_1, QUADRANT_2, QUADRANT_3, QUADRANT_4,
    antiderivative, create_function, create_secant_function, create_tangent_function,
    derivative, end_behavior, evaluate, is_even, is_odd, local_maxima, local_minima,
    secant_at, secant_slope_at, slope_at, tangent_at, tangent_slope_at,
)
from errors import InvalidDegree
from rounding import RoundingPolicy
from solver import RootSolver


class TestEvaluate:
    def test_scalar(self):
        assert evaluate("3x^2 + 2x", 10) == 320.0
        assert isinstance(evaluate("x", 2), float)

    def test_zero_polynomial(self):
        assert evaluate("0", 5) == 0.0

    def test_array(self):
        values = evaluate("x^2", np.array([1.0, 2.0, 3.0]))
        assert values.tolist() == [1.0, 4.0, 9.0]

    def test_negative_exponent_at_zero(self):
        assert evaluate("x^-1", 0) == math.inf

    def test_function_closure(self):
        p = Polynomial("x^2 + 1")
        f = create_function(p)
        p.add_term(Term(1, 5))
        assert f(2) == 5.0


class TestDerivative:
    def test_first(self):
        p = Polynomial("12x^3 + 6x^2 + 2x + 4")
        assert derivative(p, 1).to_string() == "36x^2 + 12x + 2"

    def test_second(self):
        p = Polynomial("12x^3 + 6x^2 + 2x + 4")
        assert derivative(p, 2).to_string() == "72x + 12"

    def test_runs_out(self):
        assert is_zero(derivative("x^3", 4))
        assert is_zero(derivative("x^3", 50))
        assert is_zero(derivative("5"))

    def test_negative_exponent(self):
        assert derivative("x^-1").to_string() == "-x^-2"

    def test_does_not_mutate(self):
        p = Polynomial("x^2")
        derivative(p)
        assert p.to_string() == "x^2"


class TestAntiderivative:
    def test_inverts_derivative(self):
        p = Polynomial("12x^3 + 6x^2 + 2x + 4")
        anti = antiderivative(derivative(p), 1, 4)
        assert anti.to_string() == p.to_string()

    @pytest.mark.parametrize("text", ["x^4 - 3x + 1", "2x^2 + 8x", "5"])
    def test_inverts_derivative_with_constant_term(self, text):
        p = Polynomial(text)
        assert equals(antiderivative(derivative(p), 1, p.coefficient(0)), p)

    def test_repeated(self):
        assert antiderivative("6x", 2).to_string() == "x^3"

    def test_constant_added_once(self):
        assert antiderivative("6", 2, 1).to_string() == "3x^2 + 1"

    def test_reciprocal_has_no_polynomial_antiderivative(self):
        with pytest.raises(InvalidDegree):
            antiderivative("x^-1")


class TestLines:
    def test_slope(self):
        assert slope_at("x^2", 3) == 6.0
        assert tangent_slope_at("x^2", 3) == 6.0

    def test_tangent(self):
        tangent = tangent_at(Polynomial("3x^3 - 2x + 2"), 0.85)
        assert tangent.to_string() == "4.5025x - 1.68475"

    def test_tangent_function(self):
        f = create_tangent_function("3x^3 - 2x + 2", 0.85)
        assert f(0) == pytest.approx(-1.68475)
        assert f(1) == pytest.approx(4.5025 - 1.68475)

    def test_secant(self):
        secant = secant_at(Polynomial("2x^2 - 3x + 10"), 1, 3.5)
        assert secant.to_string() == "6x + 3"
        assert secant_slope_at("2x^2 - 3x + 10", 1, 3.5) == 6.0

    def test_secant_function(self):
        f = create_secant_function("2x^2 - 3x + 10", 1, 3.5)
        assert f(2) == pytest.approx(15.0)

    def test_secant_needs_two_points(self):
        with pytest.raises(ZeroDivisionError):
            secant_slope_at("x^2", 1, 1)


class TestExtrema:
    P = "x^4 - 44x^3 - 66x^2 + 187x + 210"

    def test_local_maxima(self):
        assert local_maxima(self.P) == pytest.approx([0.796920717957544])

    def test_local_minima(self):
        assert local_minima(self.P) == pytest.approx([33.9319316690521, -1.7288523870096473])

    def test_interval_filter(self):
        assert local_minima(self.P, 0, 50) == pytest.approx([33.9319316690521])
        assert local_minima(self.P, x_max=0) == pytest.approx([-1.7288523870096473])
        assert local_maxima(self.P, 1, 10) == []

    def test_zero_bound_is_respected(self):
        assert local_minima(self.P, x_min=0) == pytest.approx([33.9319316690521])

    def test_parabola(self):
        assert local_minima("x^2 - 4x") == [2.0]
        assert local_maxima("x^2 - 4x") == []

    def test_repeated_critical_point_reported_once(self):
        assert local_minima("x^4") == [0.0]
        assert local_maxima("-x^4 + 1") == [0.0]

    def test_solver_policy(self):
        strict = RootSolver(RoundingPolicy(1e-9))
        assert local_minima("x^2 - 1.99999x") == [1.0]
        assert local_minima("x^2 - 1.99999x", solver=strict) == pytest.approx([0.999995])


class TestEndBehavior:
    def test_quadrants(self):
        assert end_behavior("x^2") == (QUADRANT_2, QUADRANT_1)
        assert end_behavior("x^3") == (QUADRANT_3, QUADRANT_1)
        assert end_behavior("-x^2") == (QUADRANT_3, QUADRANT_4)
        assert end_behavior("-x^3 + x") == (QUADRANT_2, QUADRANT_4)


class TestSymmetry:
    def test_even(self):
        assert is_even("x^4 + x^2 + 1")
        assert not is_even("x^3")

    def test_odd(self):
        assert is_odd("x^3 - x")
        assert not is_odd("x^3 + 1")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
