from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RegressionModel(Protocol):
    """Capabilities shared by regression variants."""

    def compute(self) -> None: ...

    def evaluate_at(self, x: float) -> float: ...

    def get_coefficients(self) -> np.ndarray: ...
