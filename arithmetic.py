"""
Arithmetic over polynomials.

Every operation here is a pure function: operands are coerced to Polynomial
once at the boundary, never mutated, and a fresh Polynomial is returned.
Operands may be Polynomials, polynomial strings ("3x^2 - 1") or plain numbers.
"""
from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Optional, Union
from term import Term
from polynomial import Polynomial
from rounding import DEFAULT_POLICY, RoundingPolicy
from errors import DivideByZero, MalformedParameter

PolynomialLike = Union[Polynomial, str, int, float]


@dataclass
class DivisionResult:
    """Quotient and remainder of a polynomial long division."""
    quotient: Polynomial
    remainder: Polynomial

    def __iter__(self):
        yield self.quotient
        yield self.remainder


def coerce(value: PolynomialLike) -> Polynomial:
    if isinstance(value, Polynomial):
        return value
    if isinstance(value, (str, Real)):
        return Polynomial(value)
    raise MalformedParameter(
        f"Expected a Polynomial, string or number, got {type(value).__name__}"
    )


def add(p1: PolynomialLike, p2: PolynomialLike) -> Polynomial:
    p1, p2 = coerce(p1), coerce(p2)
    res = Polynomial()
    for t in p1:
        res.add_term(t)
    for t in p2:
        res.add_term(t)
    return res


def subtract(p1: PolynomialLike, p2: PolynomialLike) -> Polynomial:
    p1, p2 = coerce(p1), coerce(p2)
    res = Polynomial(p1)
    for t in p2:
        res.add_term(-t)
    return res


def multiply(
    p1: PolynomialLike, p2: PolynomialLike, policy: Optional[RoundingPolicy] = None
) -> Polynomial:
    """Distribute every term of p1 over every term of p2.

    Like terms of the product are combined first; combined coefficients
    within the policy's epsilon of an integer are then replaced by that
    integer, so residue that should cancel to 0 disappears.
    """
    policy = policy or DEFAULT_POLICY
    p1, p2 = coerce(p1), coerce(p2)
    res = Polynomial()
    for a in p1:
        for b in p2:
            res.add_term(Term(a.coefficient * b.coefficient, a.exponent + b.exponent))
    return Polynomial.from_terms(
        Term(policy.snap(t.coefficient), t.exponent) for t in res
    )


def _scale(p: Polynomial, factor: Term) -> Polynomial:
    # unsnapped product, so quotient * divisor + remainder reproduces the dividend
    return Polynomial.from_terms(
        Term(t.coefficient * factor.coefficient, t.exponent + factor.exponent)
        for t in p
    )


def divide_with_remainder(p1: PolynomialLike, p2: PolynomialLike) -> DivisionResult:
    """Polynomial long division of p1 by p2.

    Raises DivideByZero when p2 is the zero polynomial.
    """
    dividend, divisor = coerce(p1), coerce(p2)
    if is_zero(divisor):
        raise DivideByZero("Divide by zero error in divide()")
    lead = divisor.leading_term()
    quotient = Polynomial()
    remainder = Polynomial(dividend)
    while not is_zero(remainder):
        head = remainder.leading_term()
        if lead.exponent > head.exponent:
            break
        step = Term(head.coefficient / lead.coefficient, head.exponent - lead.exponent)
        quotient.add_term(step)
        remainder = subtract(remainder, _scale(divisor, step))
        # the leading exponent cancels exactly in theory; drop any float residue
        remainder = Polynomial.from_terms(
            t for t in remainder if t.exponent != head.exponent
        )
    return DivisionResult(quotient, remainder)


def divide(p1: PolynomialLike, p2: PolynomialLike) -> Polynomial:
    return divide_with_remainder(p1, p2).quotient


def mod(p1: PolynomialLike, p2: PolynomialLike) -> Polynomial:
    return divide_with_remainder(p1, p2).remainder


def equals(p1: PolynomialLike, p2: PolynomialLike) -> bool:
    """Compare canonical string forms.

    This is not numeric equality: coefficients that differ beyond the
    printed precision make two polynomials unequal.
    """
    return coerce(p1).to_string() == coerce(p2).to_string()


def is_zero(p: PolynomialLike) -> bool:
    return coerce(p).num_terms() == 0


def is_constant(p: PolynomialLike) -> bool:
    p = coerce(p)
    n = p.num_terms()
    if n == 0:
        return True
    return n == 1 and p.get_term(0).exponent == 0


def create_from_roots(
    *roots: Union[float, Iterable[float]], policy: Optional[RoundingPolicy] = None
) -> Polynomial:
    """Build prod(x - r) for the given roots.

    Accepts either one iterable of roots or the roots as separate arguments.
    """
    if len(roots) == 1 and not isinstance(roots[0], Real):
        values = list(roots[0])
    else:
        values = list(roots)
    res = Polynomial(1)
    for r in values:
        factor = Polynomial.from_terms([Term(1, 1), Term(-float(r), 0)])
        res = multiply(res, factor, policy)
    return res
