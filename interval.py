from math import inf
from typing import Optional, Union

Number = Union[int, float]


class Interval:
    """Real interval used to restrict x ranges; either end may be open or infinite."""

    lower: Number
    upper: Number
    left_open: bool
    right_open: bool

    @staticmethod
    def closed(l: Optional[Number] = None, r: Optional[Number] = None):
        """[l, r]; a missing bound is unbounded on that side."""
        return Interval(-inf if l is None else l, inf if r is None else r, False, False)

    @staticmethod
    def open(l: Number, r: Number):
        return Interval(l, r, True, True)

    def __init__(self, l: Number, r: Number, lo: bool = False, ro: bool = True):
        self.lower = l
        self.upper = r
        self.left_open = lo
        self.right_open = ro

    def is_empty(self) -> bool:
        if self.lower == self.upper:
            return self.left_open or self.right_open
        return self.lower > self.upper

    def __contains__(self, x: Number) -> bool:
        if self.is_empty():
            return False
        above = x > self.lower or (x == self.lower and not self.left_open)
        below = x < self.upper or (x == self.upper and not self.right_open)
        return above and below

    def __str__(self):
        lo = "-∞" if self.lower == -inf else str(self.lower)
        hi = "∞" if self.upper == inf else str(self.upper)
        return "%s%s, %s%s" % (
            "(" if self.left_open else "[",
            lo,
            hi,
            ")" if self.right_open else "]",
        )
