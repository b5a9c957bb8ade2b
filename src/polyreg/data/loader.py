from __future__ import annotations

import csv
import math
from collections.abc import Iterable, Iterator
from io import StringIO
from pathlib import Path

# y = 1 - 2x + 0.5x^3 plus small noise
_SAMPLE_CSV = """-2.00,1.0500
-1.75,1.7403
-1.50,2.3425
-1.25,2.6334
-1.00,2.4400
-0.75,2.3091
-0.50,1.8975
-0.25,1.5622
0.00,0.9000
0.25,0.5178
0.50,0.1225
0.75,-0.3191
1.00,-0.4100
1.25,-0.5934
1.50,-0.2725
1.75,0.1597
2.00,1.0800
"""


def _require_file(path: str | Path) -> Path:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Dataset not found: {p}")
    return p


def _records(lines: Iterable[str], delimiter: str = ",") -> Iterator[tuple[int, list[str]]]:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character; got {delimiter!r}")
    reader = csv.reader(lines, delimiter=delimiter)
    for row in reader:
        if not row or all(not cell.strip() for cell in row):
            continue
        yield reader.line_num, row


def read_n_rows(path: str | Path, delimiter: str = ",") -> int:
    """Count non-blank CSV records in a file."""
    p = _require_file(path)
    with p.open("r", encoding="utf-8", newline="") as f:
        return sum(1 for _ in _records(f, delimiter))


def read_n_columns(path: str | Path, delimiter: str = ",") -> int:
    """Number of columns in the first non-blank record."""
    p = _require_file(path)
    with p.open("r", encoding="utf-8", newline="") as f:
        for _, row in _records(f, delimiter):
            return len(row)
    raise ValueError(f"Dataset is empty: {p}")


def _parse_xy(
    lines: Iterable[str],
    x_col: int = 0,
    y_col: int = 1,
    delimiter: str = ",",
    skip_header: bool = False,
) -> tuple[list[float], list[float]]:
    x: list[float] = []
    y: list[float] = []
    need = max(x_col, y_col) + 1
    header_pending = skip_header
    for line_num, row in _records(lines, delimiter):
        if header_pending:
            header_pending = False
            continue
        if len(row) < need:
            raise ValueError(f"Line {line_num}: expected at least {need} columns, got {len(row)}")
        try:
            xv = float(row[x_col])
            yv = float(row[y_col])
        except ValueError as e:
            raise ValueError(f"Line {line_num}: non-numeric value in {row}") from e
        if not (math.isfinite(xv) and math.isfinite(yv)):
            raise ValueError(f"Line {line_num}: non-finite value in {row}")
        x.append(xv)
        y.append(yv)
    return x, y


def load_xy(
    path: str | Path,
    x_col: int = 0,
    y_col: int = 1,
    delimiter: str = ",",
    skip_header: bool = False,
) -> tuple[list[float], list[float]]:
    """Load x and y columns from a CSV file (header-less by default).

    - x_col / y_col: zero-based column indices
    - skip_header: drop the first non-blank record
    """
    p = _require_file(path)
    with p.open("r", encoding="utf-8", newline="") as f:
        return _parse_xy(f, x_col=x_col, y_col=y_col, delimiter=delimiter, skip_header=skip_header)


def load_sample() -> tuple[list[float], list[float]]:
    """Small embedded dataset: a noisy cubic on [-2, 2]."""
    return _parse_xy(StringIO(_SAMPLE_CSV))
