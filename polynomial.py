from __future__ import annotations
from enum import Enum
from itertools import groupby
from numbers import Real
from typing import Iterable, Iterator, List, Union
from term import Term
from errors import MalformedParameter

DEGREE_NAMES = {
    0: "constant",
    1: "linear",
    2: "quadratic",
    3: "cubic",
    4: "quartic",
    5: "quintic",
}


class NormalState(Enum):
    UNNORMALIZED = "unnormalized"
    SORTED = "sorted"
    COMBINED = "combined"


class Polynomial:
    """Single-variable polynomial stored as a list of Terms.

    Terms may be appended in any order; the list is sorted and like terms are
    combined lazily, the first time anything reads from the polynomial. After
    that the exponents are strictly descending and no coefficient is zero.

    The constructor accepts nothing (the zero polynomial), another Polynomial
    (copied), or a string/number which is parsed.
    """

    def __init__(self, source: Union["Polynomial", str, int, float, None] = None) -> None:
        self._terms: List[Term] = []
        self._state = NormalState.COMBINED
        if source is None:
            return
        if isinstance(source, Polynomial):
            self._terms = list(source._terms)
            self._state = source._state
        elif isinstance(source, Real):
            self.add_term(Term(source, 0))
        elif isinstance(source, str):
            from polynomial_parser import parse_terms

            for t in parse_terms(source):
                self.add_term(t)
        else:
            raise MalformedParameter(
                f"Cannot build a Polynomial from {type(source).__name__}"
            )

    @staticmethod
    def from_terms(terms: Iterable[Term]) -> "Polynomial":
        p = Polynomial()
        for t in terms:
            p.add_term(t)
        return p

    @property
    def needs_sorting(self) -> bool:
        return self._state is NormalState.UNNORMALIZED

    @property
    def needs_combining(self) -> bool:
        return self._state is not NormalState.COMBINED

    def add_term(self, term: Term) -> None:
        if not isinstance(term, Term):
            raise MalformedParameter("add_term() expects a Term")
        if term.coefficient == 0:
            return
        self._terms.append(term)
        self._state = NormalState.UNNORMALIZED

    def _ensure_normalized(self) -> None:
        if self._state is NormalState.UNNORMALIZED:
            self._sort_terms()
        if self._state is NormalState.SORTED:
            self._combine_like_terms()

    def _sort_terms(self) -> None:
        # list.sort is stable, reverse=True keeps that
        self._terms.sort(key=lambda t: t.exponent, reverse=True)
        self._state = NormalState.SORTED

    def _combine_like_terms(self) -> None:
        # relies on equal exponents being adjacent, i.e. on _sort_terms having run
        combined: List[Term] = []
        for exp, run in groupby(self._terms, key=lambda t: t.exponent):
            coeff = sum(t.coefficient for t in run)
            if coeff != 0:
                combined.append(Term(coeff, exp))
        self._terms = combined
        self._state = NormalState.COMBINED

    def num_terms(self) -> int:
        self._ensure_normalized()
        return len(self._terms)

    def get_term(self, n: int) -> Term:
        """Return the nth term, or Term(0, 0) when n is out of range."""
        self._ensure_normalized()
        if 0 <= n < len(self._terms):
            return self._terms[n]
        return Term(0, 0)

    def terms(self) -> List[Term]:
        self._ensure_normalized()
        return list(self._terms)

    def degree(self) -> int:
        self._ensure_normalized()
        if not self._terms:
            return 0
        return self._terms[0].exponent

    def degree_name(self) -> str:
        return DEGREE_NAMES.get(self.degree(), "unknown")

    def leading_term(self) -> Term:
        return self.get_term(0)

    def coefficient(self, exponent: int) -> float:
        self._ensure_normalized()
        for t in self._terms:
            if t.exponent == exponent:
                return t.coefficient
        return 0.0

    def has_negative_exponents(self) -> bool:
        self._ensure_normalized()
        return bool(self._terms) and self._terms[-1].exponent < 0

    def to_coeffs(self) -> List[float]:
        """Coefficients [a0, a1, ..., an] of the non-negative powers, lowest first."""
        self._ensure_normalized()
        deg = max(self.degree(), 0)
        coeffs = [0.0] * (deg + 1)
        for t in self._terms:
            if t.exponent >= 0:
                coeffs[t.exponent] = t.coefficient
        return coeffs

    def to_string(self, spaces: bool = True) -> str:
        self._ensure_normalized()
        if not self._terms:
            return "0"
        parts: List[str] = []
        for idx, t in enumerate(self._terms):
            s = t.to_string()
            if idx == 0:
                parts.append(s)
            elif s.startswith("-"):
                parts.append(f" - {s[1:]}")
            else:
                parts.append(f" + {s}")
        out = "".join(parts)
        if not spaces:
            out = out.replace(" ", "")
        return out

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Polynomial({self.to_string()!r})"

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms())

    def __len__(self) -> int:
        return self.num_terms()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Polynomial, str, Real)):
            return NotImplemented
        from arithmetic import equals

        return equals(self, other)

    __hash__ = None

    def __neg__(self) -> "Polynomial":
        return Polynomial.from_terms(-t for t in self.terms())

    def __add__(self, rhs) -> "Polynomial":
        from arithmetic import add

        return add(self, rhs)

    def __radd__(self, lhs) -> "Polynomial":
        from arithmetic import add

        return add(lhs, self)

    def __sub__(self, rhs) -> "Polynomial":
        from arithmetic import subtract

        return subtract(self, rhs)

    def __rsub__(self, lhs) -> "Polynomial":
        from arithmetic import subtract

        return subtract(lhs, self)

    def __mul__(self, rhs) -> "Polynomial":
        from arithmetic import multiply

        return multiply(self, rhs)

    def __rmul__(self, lhs) -> "Polynomial":
        from arithmetic import multiply

        return multiply(lhs, self)

    def __floordiv__(self, rhs) -> "Polynomial":
        from arithmetic import divide

        return divide(self, rhs)

    def __mod__(self, rhs) -> "Polynomial":
        from arithmetic import mod

        return mod(self, rhs)

    def __divmod__(self, rhs):
        from arithmetic import divide_with_remainder

        result = divide_with_remainder(self, rhs)
        return result.quotient, result.remainder

    def __call__(self, x):
        from calculus import evaluate

        return evaluate(self, x)
