"""
Calculus over polynomials: evaluation, derivatives, antiderivatives,
tangent/secant lines, local extrema and end behavior.
"""
from __future__ import annotations
from typing import Callable, List, Optional, Tuple
import math
import numpy as np
from term import Term
from polynomial import Polynomial
from arithmetic import PolynomialLike, coerce, is_zero
from interval import Interval
from errors import InvalidDegree

# distance either side of a critical point at which the derivative's sign is sampled
EXTREMA_PROBE = 0.1

QUADRANT_1 = 1
QUADRANT_2 = 2
QUADRANT_3 = 3
QUADRANT_4 = 4


def evaluate(p: PolynomialLike, x):
    """Evaluate p at x.

    Scalars give a float; numpy arrays are evaluated element-wise. Zero raised
    to a negative exponent gives inf rather than an exception.
    """
    p = coerce(p)
    xs = np.asarray(x, dtype=float)
    total = np.zeros_like(xs)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for t in p:
            total = total + t.coefficient * np.power(xs, float(t.exponent))
    if total.ndim == 0:
        return float(total)
    return total


def derivative(p: PolynomialLike, n: int = 1) -> Polynomial:
    p = coerce(p)
    result = p
    for _ in range(n):
        result = Polynomial.from_terms(
            Term(t.coefficient * t.exponent, t.exponent - 1) for t in result
        )
        if is_zero(result):
            # every further derivative is zero as well
            break
    return Polynomial(result)


def antiderivative(p: PolynomialLike, n: int = 1, c: float = 0.0) -> Polynomial:
    """nth antiderivative of p; the constant c is added once, to the final result."""
    p = coerce(p)
    result = p
    for _ in range(n):
        terms: List[Term] = []
        for t in result:
            if t.exponent == -1:
                raise InvalidDegree("x^-1 has no polynomial antiderivative")
            terms.append(Term(t.coefficient / (t.exponent + 1), t.exponent + 1))
        result = Polynomial.from_terms(terms)
    result = Polynomial(result)
    if c:
        result.add_term(Term(c, 0))
    return result


def create_function(p: PolynomialLike) -> Callable[[float], float]:
    p = Polynomial(coerce(p))
    return lambda x: evaluate(p, x)


def slope_at(p: PolynomialLike, x: float) -> float:
    return evaluate(derivative(p), x)


def tangent_slope_at(p: PolynomialLike, x: float) -> float:
    return slope_at(p, x)


def secant_slope_at(p: PolynomialLike, x1: float, x2: float) -> float:
    """Slope of the line through (x1, p(x1)) and (x2, p(x2)); x1 == x2 raises ZeroDivisionError."""
    y1 = evaluate(p, x1)
    y2 = evaluate(p, x2)
    return (y2 - y1) / (x2 - x1)


def _line(m: float, b: float) -> Polynomial:
    return Polynomial.from_terms([Term(m, 1), Term(b, 0)])


def _tangent_line(p: PolynomialLike, x: float) -> Tuple[float, float]:
    m = slope_at(p, x)
    y = evaluate(p, x)
    return m, y - m * x


def _secant_line(p: PolynomialLike, x1: float, x2: float) -> Tuple[float, float]:
    m = secant_slope_at(p, x1, x2)
    y1 = evaluate(p, x1)
    return m, y1 - m * x1


def tangent_at(p: PolynomialLike, x: float) -> Polynomial:
    return _line(*_tangent_line(p, x))


def secant_at(p: PolynomialLike, x1: float, x2: float) -> Polynomial:
    return _line(*_secant_line(p, x1, x2))


def create_tangent_function(p: PolynomialLike, x: float) -> Callable[[float], float]:
    m, b = _tangent_line(p, x)
    return lambda t: m * t + b


def create_secant_function(p: PolynomialLike, x1: float, x2: float) -> Callable[[float], float]:
    m, b = _secant_line(p, x1, x2)
    return lambda t: m * t + b


def _extrema(p: PolynomialLike, x_min: Optional[float], x_max: Optional[float], rising_first: bool, solver=None) -> List[float]:
    from solver import RootSolver

    solver = solver or RootSolver()
    der = derivative(p)
    window = Interval.closed(x_min, x_max)
    found: List[float] = []
    for critical in solver.solve(der):
        if not math.isfinite(critical):
            continue
        # repeated roots of the derivative are one extremum
        if any(solver.policy.is_close(critical, seen) for seen in found):
            continue
        before = evaluate(der, critical - EXTREMA_PROBE)
        after = evaluate(der, critical + EXTREMA_PROBE)
        if rising_first and not (before > 0 and after < 0):
            continue
        if not rising_first and not (before < 0 and after > 0):
            continue
        if critical in window:
            found.append(critical)
    return found


def local_maxima(p: PolynomialLike, x_min: Optional[float] = None, x_max: Optional[float] = None, solver=None) -> List[float]:
    """Critical points where the derivative goes from positive to negative.

    ``solver`` is the RootSolver used for the derivative (default policy if omitted).
    """
    return _extrema(p, x_min, x_max, True, solver)


def local_minima(p: PolynomialLike, x_min: Optional[float] = None, x_max: Optional[float] = None, solver=None) -> List[float]:
    """Critical points where the derivative goes from negative to positive."""
    return _extrema(p, x_min, x_max, False, solver)


def end_behavior(p: PolynomialLike) -> Tuple[int, int]:
    """Quadrants holding the (left, right) ends of the graph.

    - positive leading coefficient, even degree: II and I
    - positive leading coefficient, odd degree: III and I
    - negative leading coefficient, even degree: III and IV
    - negative leading coefficient, odd degree: II and IV
    """
    p = coerce(p)
    odd = p.degree() % 2 == 1
    if p.leading_term().coefficient > 0:
        return (QUADRANT_3, QUADRANT_1) if odd else (QUADRANT_2, QUADRANT_1)
    return (QUADRANT_2, QUADRANT_4) if odd else (QUADRANT_3, QUADRANT_4)


def _sample_points(num_test_points: int) -> np.ndarray:
    return np.linspace(0.5, 10.0, num_test_points)


def is_even(p: PolynomialLike, num_test_points: int = 10) -> bool:
    """f(-x) == f(x) on sample points (symmetry about the y axis)."""
    xs = _sample_points(num_test_points)
    return bool(np.allclose(evaluate(p, xs), evaluate(p, -xs)))


def is_odd(p: PolynomialLike, num_test_points: int = 10) -> bool:
    """f(-x) == -f(x) on sample points (symmetry about the origin)."""
    xs = _sample_points(num_test_points)
    return bool(np.allclose(evaluate(p, -xs), -evaluate(p, xs)))
