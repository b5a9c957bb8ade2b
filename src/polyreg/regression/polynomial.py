from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.polynomial import polynomial as P

from .cost import hypothesis, regularized_cost
from .errors import InvalidArgumentError, InvalidStateError, NumericalFailureError

MIN_OBSERVATIONS = 2


class ModelState(Enum):
    UNINITIALIZED = "uninitialized"  # no degree yet
    CONFIGURED = "configured"  # degree set, coefficients stale
    FITTED = "fitted"


@dataclass(frozen=True)
class Observations:
    """Immutable (x, y) observation pair owned by a model.

    Inputs are copied to read-only float arrays whichever constructor is used.
    """

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        xa = np.array(self.x, dtype=float)
        ya = np.array(self.y, dtype=float)
        if xa.ndim != 1 or ya.ndim != 1:
            raise InvalidArgumentError("x and y must be 1-D sequences")
        if xa.shape != ya.shape:
            raise InvalidArgumentError(
                f"x and y must have equal length; got {xa.size} and {ya.size}"
            )
        xa.setflags(write=False)
        ya.setflags(write=False)
        object.__setattr__(self, "x", xa)
        object.__setattr__(self, "y", ya)

    @classmethod
    def from_sequences(
        cls, x: Sequence[float] | np.ndarray, y: Sequence[float] | np.ndarray
    ) -> Observations:
        return cls(x=x, y=y)

    def __len__(self) -> int:
        return int(self.x.size)


def _solve_least_squares(A: np.ndarray, b: np.ndarray) -> np.ndarray:
    # Equilibrate columns first (as numpy.polyfit does) so high powers of x
    # do not dominate the rank cutoff.
    scale = np.sqrt((A * A).sum(axis=0))
    scale[scale == 0.0] = 1.0
    try:
        c, _, rank, _ = np.linalg.lstsq(A / scale, b, rcond=None)
    except np.linalg.LinAlgError as e:
        raise NumericalFailureError(f"least-squares solve did not converge: {e}") from e
    n = A.shape[1]
    if rank < n:
        raise NumericalFailureError(
            f"design matrix is rank deficient (rank {rank} < {n} coefficients); "
            "lower the degree or supply more distinct x values"
        )
    c = c / scale
    if not np.all(np.isfinite(c)):
        raise NumericalFailureError("least-squares solve produced non-finite coefficients")
    return c


class PolynomialRegressionModel:
    """Least-squares polynomial fit of y against x.

    Call sequence: ``set_degree`` -> ``compute`` (or ``compute_regularized``) ->
    ``get_coefficients`` / ``evaluate_at``. Changing the degree discards the fit.
    """

    def __init__(self, x: Sequence[float] | np.ndarray, y: Sequence[float] | np.ndarray):
        self._data = Observations.from_sequences(x, y)
        self._state = ModelState.UNINITIALIZED
        self._degree: int | None = None
        self._coefficients: np.ndarray | None = None

    def __repr__(self) -> str:
        return (
            f"PolynomialRegressionModel(n={len(self._data)}, degree={self._degree}, "
            f"state={self._state.value})"
        )

    @property
    def observations(self) -> Observations:
        return self._data

    @property
    def state(self) -> ModelState:
        return self._state

    @property
    def degree(self) -> int | None:
        return self._degree

    @property
    def degree_set(self) -> bool:
        return self._state is not ModelState.UNINITIALIZED

    @property
    def computed(self) -> bool:
        return self._state is ModelState.FITTED

    def set_degree(self, degree: int) -> None:
        """Set the polynomial degree; any previous fit becomes stale."""
        if isinstance(degree, bool) or not isinstance(degree, (int | np.integer)):
            raise InvalidArgumentError(f"degree must be an integer; got {degree!r}")
        if degree < 0:
            raise InvalidArgumentError(f"degree must be non-negative; got {degree}")
        self._degree = int(degree)
        self._coefficients = np.zeros(self._degree + 1, dtype=float)
        self._state = ModelState.CONFIGURED

    def _require_fit_inputs(self) -> int:
        if self._state is ModelState.UNINITIALIZED or self._degree is None:
            raise InvalidStateError("degree not set: call set_degree() before computing")
        n = len(self._data)
        if n < MIN_OBSERVATIONS:
            raise InvalidArgumentError(
                f"insufficient data: need at least {MIN_OBSERVATIONS} observations, got {n}"
            )
        return self._degree

    def _require_fitted(self) -> np.ndarray:
        if self._state is ModelState.UNINITIALIZED:
            raise InvalidStateError("degree not set and model not computed")
        if self._state is not ModelState.FITTED or self._coefficients is None:
            raise InvalidStateError("model not computed: call compute() first")
        return self._coefficients

    def _design_matrix(self, degree: int) -> np.ndarray:
        return P.polyvander(self._data.x, degree)

    def compute(self) -> None:
        """Fit coefficients by ordinary least squares."""
        degree = self._require_fit_inputs()
        self._state = ModelState.CONFIGURED
        X = self._design_matrix(degree)
        self._coefficients = _solve_least_squares(X, self._data.y)
        self._state = ModelState.FITTED

    def compute_regularized(self, lam: float) -> None:
        """Fit coefficients by ridge regression; the intercept is not penalized.

        Minimizes ``regularized_cost`` in closed form by solving the augmented
        system [X; sqrt(lam) * D] c = [y; 0] with D = diag(0, 1, ..., 1).
        ``lam == 0`` reduces to :meth:`compute`.
        """
        degree = self._require_fit_inputs()
        self._state = ModelState.CONFIGURED
        lam = float(lam)
        if not np.isfinite(lam) or lam < 0:
            raise InvalidArgumentError(f"lambda must be a finite non-negative number; got {lam}")
        X = self._design_matrix(degree)
        n = degree + 1
        D = np.eye(n)
        D[0, 0] = 0.0
        A = np.vstack([X, np.sqrt(lam) * D])
        b = np.concatenate([self._data.y, np.zeros(n)])
        self._coefficients = _solve_least_squares(A, b)
        self._state = ModelState.FITTED

    def cost(self, lam: float = 0.0, coefficients: Sequence[float] | None = None) -> float:
        """Regularized cost at the fitted (or supplied) coefficients.

        Evaluation only: the model state is left untouched.
        """
        degree = self._require_fit_inputs()
        if coefficients is None:
            c = self._require_fitted()
        else:
            c = np.asarray(coefficients, dtype=float)
            if c.shape != (degree + 1,):
                raise InvalidArgumentError(
                    f"expected {degree + 1} coefficients for degree {degree}; got shape {c.shape}"
                )
        return regularized_cost(c, self._data.x, self._data.y, lam=lam)

    def get_coefficients(self) -> np.ndarray:
        """Return a read-only copy of the coefficients, lowest power first."""
        out = self._require_fitted().copy()
        out.setflags(write=False)
        return out

    def evaluate_at(self, x: float) -> float:
        return float(hypothesis(float(x), self._require_fitted()))

    def evaluate(self, xs: Sequence[float] | np.ndarray) -> np.ndarray:
        return np.asarray(hypothesis(np.asarray(xs, dtype=float), self._require_fitted()))
