from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.polynomial import polynomial as P

from .errors import InvalidArgumentError

ArrayLike = Sequence[float] | np.ndarray


def hypothesis(x: float | ArrayLike, coefficients: ArrayLike) -> float | np.ndarray:
    """Evaluate sum(c_i * x**i) with Horner's method.

    Scalar input gives a float back; array input gives an array of the same shape.
    """
    c = np.asarray(coefficients, dtype=float)
    xa = np.asarray(x, dtype=float)
    h = np.zeros_like(xa)
    for coef in c[::-1]:
        h = h * xa + coef
    if h.ndim == 0:
        return float(h)
    return h


def _check_xy(coefficients: ArrayLike, x: ArrayLike, y: ArrayLike) -> tuple[np.ndarray, ...]:
    c = np.asarray(coefficients, dtype=float)
    xa = np.asarray(x, dtype=float)
    ya = np.asarray(y, dtype=float)
    if c.ndim != 1 or c.size == 0:
        raise InvalidArgumentError("coefficients must be a non-empty 1-D sequence")
    if xa.shape != ya.shape or xa.ndim != 1:
        raise InvalidArgumentError(f"x and y must be 1-D with equal length; got {xa.shape}, {ya.shape}")
    if xa.size == 0:
        raise InvalidArgumentError("insufficient data")
    return c, xa, ya


def _check_lam(lam: float) -> float:
    lam = float(lam)
    if not np.isfinite(lam) or lam < 0:
        raise InvalidArgumentError(f"lambda must be a finite non-negative number; got {lam}")
    return lam


def regularized_cost(
    coefficients: ArrayLike, x: ArrayLike, y: ArrayLike, lam: float = 0.0
) -> float:
    """Mean squared error plus an L2 penalty on every coefficient but the intercept.

    cost = (1 / 2m) * (sum_i (h(x_i) - y_i)**2 + lam * sum_{j>=1} c_j**2)
    """
    lam = _check_lam(lam)
    c, xa, ya = _check_xy(coefficients, x, y)
    m = xa.size
    resid = hypothesis(xa, c) - ya
    error_term = float(resid @ resid)
    penalty = float(c[1:] @ c[1:])
    return (0.5 / m) * (error_term + lam * penalty)


def regularized_cost_gradient(
    coefficients: ArrayLike, x: ArrayLike, y: ArrayLike, lam: float = 0.0
) -> np.ndarray:
    """Gradient of `regularized_cost` with respect to the coefficients."""
    lam = _check_lam(lam)
    c, xa, ya = _check_xy(coefficients, x, y)
    m = xa.size
    X = P.polyvander(xa, c.size - 1)
    penalized = c.copy()
    penalized[0] = 0.0
    return (X.T @ (X @ c - ya) + lam * penalized) / m
