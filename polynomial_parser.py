"""
Parser for the polynomial string grammar.

A polynomial is a run of signed terms, each one of ``x``, ``C``, ``Cx``,
``x^E`` or ``Cx^E`` (``x`` is case-insensitive, whitespace is ignored).
Subtraction is rewritten into addition of negated terms and the string is
split on ``+``.

Parsing is forgiving: a chunk that matches none of the term forms becomes
Term(0, 0) and so contributes nothing. ``"3x + foo"`` parses as ``3x``.
"""
from __future__ import annotations
import re
from typing import List, Optional
from term import Term
from polynomial import Polynomial

_NUMBER = r"(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?"
_TERM_RE = re.compile(
	rf"^(?P<coef>{_NUMBER})?(?P<var>x(?:\^(?P<exp>[+-]?{_NUMBER}))?)?$"
)
# a '-' starts a new term unless it belongs to an exponent (x^-2) or a float (1e-05)
_MINUS_RE = re.compile(r"(?<![\^e])-")
# likewise a '+' inside 1e+20 does not split terms
_PLUS_RE = re.compile(r"(?<![\^e])\+")

def _to_float(s: str) -> Optional[float]:
	try:
		return float(s)
	except ValueError:
		return None

def parse_term(text: str) -> Term:
	s = re.sub(r"\s+", "", text).lower()
	if not s:
		return Term(0, 0)
	neg = False
	if s[0] == '-':
		neg = True
		s = s[1:]
	m = _TERM_RE.match(s)
	if m is None or (m.group("coef") is None and m.group("var") is None):
		return Term(0, 0)
	coef = 1.0 if m.group("coef") is None else _to_float(m.group("coef"))
	if m.group("var") is None:
		exp = 0.0
	elif m.group("exp") is None:
		exp = 1.0
	else:
		exp = _to_float(m.group("exp"))
	if coef is None or exp is None:
		return Term(0, 0)
	if neg:
		coef = -coef
	return Term(coef, exp)

def parse_terms(text: str) -> List[Term]:
	s = re.sub(r"\s+", "", str(text)).lower()
	s = s.replace("--", "+")
	s = _MINUS_RE.sub("+-", s)
	terms: List[Term] = []
	for chunk in _PLUS_RE.split(s):
		t = parse_term(chunk)
		if t.coefficient != 0:
			terms.append(t)
	return terms

def parse_polynomial(text: str) -> Polynomial:
	return Polynomial.from_terms(parse_terms(text))
