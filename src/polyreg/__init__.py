"""polyreg: Polynomial least-squares regression.

This package fits polynomials of a chosen degree to (x, y) observations with
ordinary or ridge-regularized least squares and evaluates the fitted curve.

See DESIGN.md for architecture notes.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
