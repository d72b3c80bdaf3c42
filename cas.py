from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union
from polynomial import Polynomial
from polynomial_parser import parse_polynomial
from rounding import RoundingPolicy
from solver import RootSolver
import arithmetic
import calculus

PolynomialLike = arithmetic.PolynomialLike


class CAS:
    """Single entry point bundling parsing, arithmetic, calculus and root finding.

    Every method takes Polynomials, polynomial strings or numbers and leaves
    its arguments untouched.
    """

    def __init__(self, policy: Optional[RoundingPolicy] = None) -> None:
        self.policy = policy
        self.solver = RootSolver(policy)

    def parse(self, expr: Union[str, int, float]) -> Polynomial:
        if isinstance(expr, str):
            return parse_polynomial(expr)
        return arithmetic.coerce(expr)

    def to_string(self, p: PolynomialLike, spaces: bool = True) -> str:
        return arithmetic.coerce(p).to_string(spaces)

    def degree_name(self, p: PolynomialLike) -> str:
        return arithmetic.coerce(p).degree_name()

    # algebra

    def add(self, p1: PolynomialLike, p2: PolynomialLike) -> Polynomial:
        return arithmetic.add(p1, p2)

    def subtract(self, p1: PolynomialLike, p2: PolynomialLike) -> Polynomial:
        return arithmetic.subtract(p1, p2)

    def multiply(self, p1: PolynomialLike, p2: PolynomialLike) -> Polynomial:
        return arithmetic.multiply(p1, p2, self.policy)

    def divide(self, p1: PolynomialLike, p2: PolynomialLike) -> arithmetic.DivisionResult:
        return arithmetic.divide_with_remainder(p1, p2)

    def mod(self, p1: PolynomialLike, p2: PolynomialLike) -> Polynomial:
        return arithmetic.mod(p1, p2)

    def equals(self, p1: PolynomialLike, p2: PolynomialLike) -> bool:
        return arithmetic.equals(p1, p2)

    def is_zero(self, p: PolynomialLike) -> bool:
        return arithmetic.is_zero(p)

    def is_constant(self, p: PolynomialLike) -> bool:
        return arithmetic.is_constant(p)

    def create_from_roots(self, roots: Iterable[float]) -> Polynomial:
        return arithmetic.create_from_roots(list(roots), policy=self.policy)

    # calculus

    def evaluate(self, p: PolynomialLike, x):
        return calculus.evaluate(p, x)

    def derivative(self, p: PolynomialLike, n: int = 1) -> Polynomial:
        return calculus.derivative(p, n)

    def antiderivative(self, p: PolynomialLike, n: int = 1, c: float = 0.0) -> Polynomial:
        return calculus.antiderivative(p, n, c)

    def create_function(self, p: PolynomialLike) -> Callable[[float], float]:
        return calculus.create_function(p)

    def tangent_at(self, p: PolynomialLike, x: float) -> Polynomial:
        return calculus.tangent_at(p, x)

    def secant_at(self, p: PolynomialLike, x1: float, x2: float) -> Polynomial:
        return calculus.secant_at(p, x1, x2)

    def local_maxima(self, p: PolynomialLike, x_min: Optional[float] = None, x_max: Optional[float] = None) -> List[float]:
        return calculus.local_maxima(p, x_min, x_max, self.solver)

    def local_minima(self, p: PolynomialLike, x_min: Optional[float] = None, x_max: Optional[float] = None) -> List[float]:
        return calculus.local_minima(p, x_min, x_max, self.solver)

    def end_behavior(self, p: PolynomialLike) -> Tuple[int, int]:
        return calculus.end_behavior(p)

    # roots

    def roots(self, p: PolynomialLike, guesses: Optional[Sequence[float]] = None) -> List[float]:
        return self.solver.solve(p, guesses)

    def critical_points(self, p: PolynomialLike) -> List[float]:
        return self.solver.critical_points(p)
