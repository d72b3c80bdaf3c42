from __future__ import annotations
from dataclasses import dataclass, replace
import math


def format_number(value: float) -> str:
	# integral floats print without the trailing ".0", everything else keeps 12 significant digits
	if math.isfinite(value) and value == int(value) and abs(value) < 1e15:
		return str(int(value))
	return f"{value:.12g}"


@dataclass(frozen=True)
class Term:
	"""A single monomial ``coefficient * x^exponent``."""
	coefficient: float = 0.0
	exponent: int = 0
	def __post_init__(self) -> None:
		object.__setattr__(self, "coefficient", float(self.coefficient))
		# exponents are truncated toward zero, so 2.7 -> 2 and "3" -> 3
		object.__setattr__(self, "exponent", int(float(self.exponent)))
	def with_coefficient(self, value: float) -> Term:
		return replace(self, coefficient=value)
	def with_exponent(self, value: int) -> Term:
		return replace(self, exponent=value)
	def is_zero(self) -> bool:
		return self.coefficient == 0
	def is_constant(self) -> bool:
		return self.exponent == 0
	def __neg__(self) -> Term:
		return Term(-self.coefficient, self.exponent)
	def to_string(self) -> str:
		if self.coefficient == 0:
			return "0"
		sign = "-" if self.coefficient < 0 else ""
		coeff_part = format_number(abs(self.coefficient))
		if self.exponent == 0:
			return f"{sign}{coeff_part}"
		if coeff_part == "1":
			coeff_part = ""
		if self.exponent == 1:
			return f"{sign}{coeff_part}x"
		return f"{sign}{coeff_part}x^{self.exponent}"
	def __str__(self) -> str:
		return self.to_string()
