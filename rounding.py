"""
Near-integer snapping policy.

Repeated float multiplication/division leaves results like 2.9999999999999996
where the exact answer is 3. Products in ``multiply`` and every root the
solvers return are passed through one shared policy that replaces values
within ``epsilon`` of an integer by that integer.

The process-wide default is read once at import time from the
``POLYNOMIAL_ROUND_BOUNDARY`` environment variable.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List
import math
import os

ROUND_BOUNDARY = float(os.getenv("POLYNOMIAL_ROUND_BOUNDARY", "0.0001"))


@dataclass(frozen=True)
class RoundingPolicy:
    epsilon: float = ROUND_BOUNDARY

    def snap(self, value: float) -> float:
        value = float(value)
        if not math.isfinite(value):
            return value
        nearest = round(value)
        if abs(nearest - value) < self.epsilon:
            return float(nearest)
        return value

    def snap_all(self, values: Iterable[float]) -> List[float]:
        return [self.snap(v) for v in values]

    def is_close(self, a: float, b: float) -> bool:
        return abs(a - b) < self.epsilon


DEFAULT_POLICY = RoundingPolicy()


def snap(value: float) -> float:
    return DEFAULT_POLICY.snap(value)
