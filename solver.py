"""
Root Solver Module

Real roots of single-variable polynomials, dispatched on degree:
closed forms for linear, quadratic, cubic and quartic polynomials and
Newton-Raphson refinement for degree five and up.

Roots are returned as floats. Complex roots are not supported: where a
closed form needs the square root of a negative number the result is NaN
and callers should filter non-finite values if they only want real roots.
Every root within the rounding epsilon of an integer is snapped to it.
"""
from __future__ import annotations
from typing import List, Optional, Sequence
import logging
import math
import numpy as np
from term import Term
from polynomial import Polynomial
from arithmetic import PolynomialLike, coerce, divide
from calculus import create_function, derivative
from numerical import newton_raphson
from rounding import DEFAULT_POLICY, RoundingPolicy
from errors import InvalidDegree

logger = logging.getLogger(__name__)

# how far beyond the outermost critical points the end guesses start
GUESS_OFFSET = 0.1


def _cbrt(x: float) -> float:
    return float(np.cbrt(x))


def _sqrt(x: float) -> float:
    # NaN for negative input instead of raising, complex roots are out of scope
    with np.errstate(invalid="ignore"):
        return float(np.sqrt(x))


class RootSolver:
    """Degree-dispatched real root finder for polynomials."""

    def __init__(self, policy: Optional[RoundingPolicy] = None) -> None:
        self.policy = policy or DEFAULT_POLICY

    def solve(self, p: PolynomialLike, guesses: Optional[Sequence[float]] = None) -> List[float]:
        """
        Find the roots of p.

        Args:
            p: Polynomial, polynomial string or number
            guesses: starting points for Newton-Raphson, only used for degree >= 5

        Returns:
            List of roots (may contain NaN where the closed form has no real value)
        """
        p = coerce(p)
        self._check_exponents(p)
        degree = p.degree()
        logger.debug("solving %s (degree %d)", p, degree)
        if degree < 1:
            return []
        if degree == 1:
            return self.solve_linear(p)
        if degree == 2:
            return self.solve_quadratic(p)
        if degree == 3:
            return self.solve_cubic(p)
        if degree == 4:
            return self.solve_quartic(p)
        return self.solve_high_degree(p, guesses)

    def critical_points(self, p: PolynomialLike) -> List[float]:
        """Roots of the derivative of p."""
        return self.solve(derivative(p))

    @staticmethod
    def _check_exponents(p: Polynomial) -> None:
        if p.has_negative_exponents():
            raise InvalidDegree(f"{p} has negative exponents")

    def _coeffs(self, p: PolynomialLike, degree: int, name: str) -> List[float]:
        p = coerce(p)
        self._check_exponents(p)
        if p.degree() != degree:
            raise InvalidDegree(f"Parameter to {name}() is not of degree {degree}")
        return p.to_coeffs()

    def solve_linear(self, p: PolynomialLike) -> List[float]:
        """mx + b = 0  ->  x = -b/m"""
        b, m = self._coeffs(p, 1, "solve_linear")
        return self.policy.snap_all([-b / m])

    def solve_quadratic(self, p: PolynomialLike) -> List[float]:
        """
        Solve ax^2 + bx + c = 0 with the quadratic formula.

        Both roots are always returned, NaN when the discriminant is negative.
        """
        c, b, a = self._coeffs(p, 2, "solve_quadratic")
        root = _sqrt(b * b - 4 * a * c)
        return self.policy.snap_all([(-b + root) / (2 * a), (-b - root) / (2 * a)])

    def solve_cubic(self, p: PolynomialLike) -> List[float]:
        """
        Solve ax^3 + bx^2 + cx + d = 0.

        With the depressed-cubic intermediates
            f = (3c/a - b^2/a^2) / 3
            g = (2b^3/a^3 - 9bc/a^2 + 27d/a) / 27
            h = g^2/4 + f^3/27
        h > 0 has one real root (Cardano), f = g = h = 0 a triple root, and
        otherwise all three roots are real and come from the trigonometric form.
        """
        d, c, b, a = self._coeffs(p, 3, "solve_cubic")
        f = ((3 * c / a) - (b * b) / (a * a)) / 3
        g = ((2 * b ** 3) / a ** 3 - (9 * b * c) / (a * a) + (27 * d) / a) / 27
        h = (g * g) / 4 + f ** 3 / 27
        shift = b / (3 * a)

        if h > 0:
            r = -(g / 2) + math.sqrt(h)
            t = -(g / 2) - math.sqrt(h)
            found = [_cbrt(r) + _cbrt(t) - shift]
        elif f == 0 and g == 0 and h == 0:
            found = [-_cbrt(d / a)] * 3
        else:
            i = math.sqrt((g * g) / 4 - h)
            j = _cbrt(i)
            k = math.acos(float(np.clip(-(g / (2 * i)), -1.0, 1.0)))
            m = math.cos(k / 3)
            n = math.sqrt(3) * math.sin(k / 3)
            found = [
                2 * j * m - shift,
                -j * (m + n) - shift,
                -j * (m - n) - shift,
            ]
        return self.policy.snap_all(found)

    def solve_quartic(self, p: PolynomialLike) -> List[float]:
        """
        Solve ax^4 + bx^3 + cx^2 + dx + e = 0 through a resolvent cubic.

        After dividing through by a, the resolvent
            y^3 + (f/2)y^2 + ((f^2 - 4h)/16)y - g^2/64
        is solved; the square roots p, q of its first two non-zero roots give
        the four roots. Returns [] when the resolvent has fewer than two
        non-zero roots.
        """
        self._coeffs(p, 4, "solve_quartic")
        monic = divide(p, coerce(p).leading_term().coefficient)
        e, d, c, b, a = monic.to_coeffs()

        f = c - (3 * b * b) / 8
        g = d + b ** 3 / 8 - (b * c) / 2
        h = e - (3 * b ** 4) / 256 + (b * b) * (c / 16) - (b * d) / 4
        resolvent = Polynomial.from_terms([
            Term(1, 3),
            Term(f / 2, 2),
            Term((f * f - 4 * h) / 16, 1),
            Term(-(g * g) / 64, 0),
        ])

        sq_p = 0.0
        sq_q = 0.0
        for y in self.solve_cubic(resolvent):
            if y == 0:
                continue
            if sq_p == 0:
                sq_p = _sqrt(y)
            elif sq_q == 0:
                sq_q = _sqrt(y)
        if sq_p == 0 or sq_q == 0:
            logger.debug("resolvent %s of %s gave fewer than two non-zero roots", resolvent, p)
            return []

        r = -g / (8 * sq_p * sq_q)
        s = b / (4 * a)
        return self.policy.snap_all([
            sq_p + sq_q + r - s,
            sq_p - sq_q - r - s,
            -sq_p + sq_q - r - s,
            -sq_p - sq_q + r - s,
        ])

    def _initial_guesses(self, criticals: List[float]) -> List[float]:
        if not criticals:
            # f' may vanish at 0 (x^n + c), so start either side of it
            return [-GUESS_OFFSET, GUESS_OFFSET]
        guesses = [criticals[0] - GUESS_OFFSET]
        for lo, hi in zip(criticals, criticals[1:]):
            guesses.append((lo + hi) / 2)
        guesses.append(criticals[-1] + GUESS_OFFSET)
        return guesses

    def _unique(self, values: List[float]) -> List[float]:
        kept: List[float] = []
        for v in values:
            if not any(self.policy.is_close(v, k) for k in kept):
                kept.append(v)
        return kept

    def solve_high_degree(self, p: PolynomialLike, guesses: Optional[Sequence[float]] = None) -> List[float]:
        """
        Newton-Raphson from a set of starting points.

        Without caller guesses the starting points come from the critical
        points (found by solving the lower-degree derivative): one just left
        of the smallest, the midpoint of every neighbouring pair and one just
        right of the largest.
        """
        p = coerce(p)
        self._check_exponents(p)
        fx = create_function(p)
        dx = create_function(derivative(p))
        if guesses:
            starts = [float(x) for x in guesses]
        else:
            criticals = sorted(c for c in self.critical_points(p) if math.isfinite(c))
            starts = self._initial_guesses(criticals)
        found: List[float] = []
        for x0 in starts:
            root = newton_raphson(fx, dx, x0)
            if root is not None:
                found.append(root)
        return self._unique(self.policy.snap_all(found))


_default_solver = RootSolver()


def roots(p: PolynomialLike, guesses: Optional[Sequence[float]] = None) -> List[float]:
    return _default_solver.solve(p, guesses)


def critical_points(p: PolynomialLike) -> List[float]:
    return _default_solver.critical_points(p)


def solve_linear(p: PolynomialLike) -> List[float]:
    return _default_solver.solve_linear(p)


def solve_quadratic(p: PolynomialLike) -> List[float]:
    return _default_solver.solve_quadratic(p)


def solve_cubic(p: PolynomialLike) -> List[float]:
    return _default_solver.solve_cubic(p)


def solve_quartic(p: PolynomialLike) -> List[float]:
    return _default_solver.solve_quartic(p)


def solve_high_degree(p: PolynomialLike, guesses: Optional[Sequence[float]] = None) -> List[float]:
    return _default_solver.solve_high_degree(p, guesses)
