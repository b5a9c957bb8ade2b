from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config.models import FitConfig, validate_config_payload
from .data.loader import load_sample, load_xy, read_n_columns, read_n_rows
from .regression.errors import RegressionError
from .regression.polynomial import PolynomialRegressionModel
from .utils.io import dump_json, load_config_file
from .utils.run import log_event, new_run_id, snapshot_config

# CLI options that map one-to-one onto FitConfig fields
_FIT_OVERRIDES = (
    "data",
    "degree",
    "lam",
    "x_col",
    "y_col",
    "delimiter",
    "skip_header",
    "precision",
    "evaluate_at",
    "metrics",
    "plot",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyreg",
        description="Polynomial regression: least-squares fitting and evaluation.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"polyreg {__version__}",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    fit_parser = subparsers.add_parser(
        "fit", help="Fit a polynomial to CSV data and print its coefficients"
    )
    fit_parser.add_argument(
        "--config", type=str, required=False, help="Path to a fit config YAML/JSON"
    )
    fit_parser.add_argument(
        "--data",
        type=str,
        default=None,
        help="CSV with x and y columns (embedded sample data when omitted)",
    )
    fit_parser.add_argument("--degree", type=int, default=None, help="Polynomial degree")
    fit_parser.add_argument(
        "--lam",
        type=float,
        default=None,
        help="Ridge penalty; omit for ordinary least squares",
    )
    fit_parser.add_argument("--x-col", type=int, default=None, help="Column index of x")
    fit_parser.add_argument("--y-col", type=int, default=None, help="Column index of y")
    fit_parser.add_argument("--delimiter", type=str, default=None, help="CSV delimiter")
    fit_parser.add_argument(
        "--skip-header", action="store_true", default=None, help="Skip the first CSV record"
    )
    fit_parser.add_argument(
        "--precision", type=int, default=None, help="Decimals in printed output (default 4)"
    )
    fit_parser.add_argument(
        "--eval",
        dest="evaluate_at",
        type=float,
        nargs="+",
        default=None,
        help="Evaluate the fitted polynomial at these points",
    )
    fit_parser.add_argument(
        "--metrics",
        action="store_true",
        default=None,
        help="Print mae/rmse/r2 on the training data (needs scikit-learn)",
    )
    fit_parser.add_argument(
        "--plot", type=str, default=None, help="Write a PNG plot of the fit (needs matplotlib)"
    )
    fit_parser.add_argument(
        "--artifacts",
        type=str,
        default=None,
        help="Directory for run logs and config snapshots; no logging when omitted",
    )

    rows_parser = subparsers.add_parser("rows", help="Count rows and columns of a CSV file")
    rows_parser.add_argument("--data", type=str, required=True, help="Path to CSV")
    rows_parser.add_argument("--delimiter", type=str, default=",", help="CSV delimiter")

    schema_parser = subparsers.add_parser("schema", help="Print the fit config JSON Schema")
    schema_parser.add_argument(
        "--out",
        type=str,
        required=False,
        help="Optional path to write the JSON schema",
    )

    return parser


def _resolve_config(args: argparse.Namespace) -> tuple[FitConfig, dict[str, Any]]:
    payload: dict[str, Any] = load_config_file(args.config) if args.config else {}
    for key in _FIT_OVERRIDES:
        value = getattr(args, key, None)
        if value is not None:
            payload[key] = value
    return validate_config_payload(payload), payload


def _cmd_fit(args: argparse.Namespace) -> int:
    try:
        cfg, payload = _resolve_config(args)
        if cfg.data:
            x, y = load_xy(
                cfg.data,
                x_col=cfg.x_col,
                y_col=cfg.y_col,
                delimiter=cfg.delimiter,
                skip_header=cfg.skip_header,
            )
        else:
            x, y = load_sample()
    except (FileNotFoundError, ValueError) as e:
        sys.stderr.write(f"Error: {e}\n")
        return 2

    sys.stderr.write(f"numPoints = {len(x)}\n")
    sys.stderr.write("Loaded data.\n")

    artifacts = args.artifacts
    run_id = new_run_id() if artifacts else None
    if run_id:
        snapshot_config(run_id, payload, root=artifacts)
        log_event(run_id, "run_start", root=artifacts, degree=cfg.degree, lam=cfg.lam)
        log_event(run_id, "data_loaded", root=artifacts, n_points=len(x), source=cfg.data)

    try:
        model = PolynomialRegressionModel(x, y)
        model.set_degree(cfg.degree)
        if cfg.lam is None:
            model.compute()
        else:
            model.compute_regularized(cfg.lam)
    except RegressionError as e:
        if run_id:
            log_event(run_id, "fit_failed", root=artifacts, error=type(e).__name__, message=str(e))
        sys.stderr.write(f"Fit failed: {e}\n")
        return 2

    coefficients = model.get_coefficients()
    if run_id:
        log_event(
            run_id,
            "fit_complete",
            root=artifacts,
            coefficients=[float(c) for c in coefficients],
            cost=model.cost(lam=cfg.lam or 0.0),
        )

    # Optional extras run before anything reaches stdout so a missing one
    # fails cleanly.
    metrics: dict[str, float] | None = None
    try:
        if cfg.metrics:
            from .regression.metrics import evaluate_metrics

            obs = model.observations
            metrics = evaluate_metrics(obs.y, model.evaluate(obs.x))
        if cfg.plot:
            from .report.plot import plot_fit

            out = plot_fit(x, y, model, cfg.plot)
            sys.stderr.write(f"Wrote plot to {out}\n")
    except RuntimeError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 2

    p = cfg.precision
    for coef in coefficients:
        sys.stdout.write(f"{coef:.{p}f}\n")
    for xv in cfg.evaluate_at:
        sys.stdout.write(f"f({xv:g}) = {model.evaluate_at(xv):.{p}f}\n")
    if metrics is not None:
        sys.stdout.write(dump_json({k: round(v, p) for k, v in metrics.items()}) + "\n")
    if run_id:
        sys.stderr.write(f"Run logged as {run_id}\n")
    return 0


def _cmd_rows(data: str, delimiter: str) -> int:
    try:
        n_rows = read_n_rows(data, delimiter=delimiter)
        n_cols = read_n_columns(data, delimiter=delimiter) if n_rows else 0
    except (FileNotFoundError, ValueError) as e:
        sys.stderr.write(f"Error: {e}\n")
        return 2
    sys.stdout.write(dump_json({"columns": n_cols, "rows": n_rows}) + "\n")
    return 0


def _cmd_schema(out: str | None) -> int:
    schema = FitConfig.json_schema()
    data = dump_json(schema)
    if out:
        Path(out).write_text(data, encoding="utf-8")
        sys.stdout.write(f"Wrote schema to {out}\n")
    else:
        sys.stdout.write(data + "\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "fit":
        return _cmd_fit(args)
    if args.command == "rows":
        return _cmd_rows(args.data, args.delimiter)
    if args.command == "schema":
        return _cmd_schema(args.out)
    # Default: print help
    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
