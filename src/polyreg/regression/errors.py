from __future__ import annotations


class RegressionError(Exception):
    """Base class for errors raised by regression models."""


class InvalidArgumentError(RegressionError, ValueError):
    """Bad input: negative degree, negative lambda, too few observations."""


class InvalidStateError(RegressionError, RuntimeError):
    """Operation called out of order (degree not set or model not computed)."""


class NumericalFailureError(RegressionError, ArithmeticError):
    """The least-squares system is singular or the solver did not converge."""
