"""
Newton-Raphson root refinement.

Thin adapter over ``scipy.optimize.newton``: given f, f' and a starting
point it returns the refined root, or None when the iteration does not
converge (zero derivative, iteration cap, non-finite result).
"""
from __future__ import annotations
from typing import Callable, Optional
import logging
import math
import warnings
from scipy import optimize

logger = logging.getLogger(__name__)

NEWTON_TOLERANCE = 1e-12
NEWTON_MAX_ITER = 100


def newton_raphson(
    f: Callable[[float], float],
    fprime: Callable[[float], float],
    x0: float,
    tol: float = NEWTON_TOLERANCE,
    max_iter: int = NEWTON_MAX_ITER,
) -> Optional[float]:
    with warnings.catch_warnings():
        # scipy warns on a zero derivative; that case is reported as not converged
        warnings.simplefilter("ignore", RuntimeWarning)
        root, info = optimize.newton(
            f,
            x0,
            fprime=fprime,
            tol=tol,
            maxiter=max_iter,
            full_output=True,
            disp=False,
        )
    root = float(root)
    if not info.converged or not math.isfinite(root):
        logger.debug("newton from x0=%r did not converge (%s)", x0, info.flag)
        return None
    return root
