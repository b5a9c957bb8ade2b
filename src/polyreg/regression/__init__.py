from .base import RegressionModel
from .cost import hypothesis, regularized_cost, regularized_cost_gradient
from .errors import (
    InvalidArgumentError,
    InvalidStateError,
    NumericalFailureError,
    RegressionError,
)
from .polynomial import ModelState, Observations, PolynomialRegressionModel

__all__ = [
    "RegressionModel",
    "PolynomialRegressionModel",
    "ModelState",
    "Observations",
    "hypothesis",
    "regularized_cost",
    "regularized_cost_gradient",
    "RegressionError",
    "InvalidArgumentError",
    "InvalidStateError",
    "NumericalFailureError",
]
