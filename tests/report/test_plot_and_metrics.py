from __future__ import annotations

from pathlib import Path

import pytest

from polyreg.data.loader import load_sample
from polyreg.regression.polynomial import PolynomialRegressionModel


def _model() -> tuple[list[float], list[float], PolynomialRegressionModel]:
    x, y = load_sample()
    model = PolynomialRegressionModel(x, y)
    model.set_degree(3)
    model.compute()
    return x, y, model


def test_plot_fit_writes_png(tmp_path: Path) -> None:
    pytest.importorskip("matplotlib")
    from polyreg.report.plot import plot_fit

    x, y, model = _model()
    out = plot_fit(x, y, model, tmp_path / "plots" / "fit.png")
    assert out.exists() and out.stat().st_size > 0


def test_training_metrics() -> None:
    pytest.importorskip("sklearn")
    from polyreg.regression.metrics import evaluate_metrics

    x, y, model = _model()
    m = evaluate_metrics(y, model.evaluate(x))
    assert set(m) == {"mae", "rmse", "r2"}
    assert m["r2"] > 0.99
    assert 0.0 <= m["mae"] <= m["rmse"] < 0.1
