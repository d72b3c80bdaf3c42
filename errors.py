from __future__ import annotations


class PolynomialError(Exception):
    """Base class for failures reported by the polynomial operations."""


class DivideByZero(PolynomialError, ZeroDivisionError):
    """Raised when the divisor is the zero polynomial."""


class InvalidDegree(PolynomialError, ValueError):
    """Raised when an operation is handed a polynomial of the wrong degree."""


class MalformedParameter(PolynomialError, TypeError):
    """Raised when a value cannot be used where a polynomial (or term) is expected."""
