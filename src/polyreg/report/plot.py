from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import numpy as np

from ..regression.polynomial import PolynomialRegressionModel


def plot_fit(
    x: Sequence[float],
    y: Sequence[float],
    model: PolynomialRegressionModel,
    out_path: str | Path,
    title: str | None = None,
    n_grid: int = 200,
) -> Path:
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except Exception as e:  # pragma: no cover
        raise RuntimeError("matplotlib not installed. Install extras: '.[plot]'") from e

    xs = np.asarray(x, dtype=float)
    grid = np.linspace(xs.min(), xs.max(), n_grid)
    fig, ax = plt.subplots(figsize=(5, 4), dpi=150)
    ax.scatter(xs, np.asarray(y, dtype=float), s=12, label="observed")
    ax.plot(grid, model.evaluate(grid), "r-", lw=1.5, label=f"degree {model.degree} fit")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(title or "Polynomial fit")
    ax.legend()
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out)
    plt.close(fig)
    return out
