from __future__ import annotations

from pathlib import Path

import pytest

from polyreg.data.loader import load_sample, load_xy, read_n_columns, read_n_rows


def _write(tmp_path: Path, text: str, name: str = "data.csv") -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


def test_headerless_two_column_file(tmp_path: Path) -> None:
    p = _write(tmp_path, "0,1.5\n1,2.5\n\n2,3.5\n")
    assert read_n_rows(p) == 3
    assert read_n_columns(p) == 2
    x, y = load_xy(p)
    assert x == [0.0, 1.0, 2.0]
    assert y == [1.5, 2.5, 3.5]


def test_header_columns_and_delimiter(tmp_path: Path) -> None:
    p = _write(tmp_path, "id;y;x\na;10;1\nb;20;2\n")
    assert read_n_columns(p, delimiter=";") == 3
    x, y = load_xy(p, x_col=2, y_col=1, delimiter=";", skip_header=True)
    assert x == [1.0, 2.0]
    assert y == [10.0, 20.0]


def test_ragged_row_reports_line(tmp_path: Path) -> None:
    p = _write(tmp_path, "0,1\n1\n")
    with pytest.raises(ValueError, match="Line 2"):
        load_xy(p)


def test_non_numeric_and_non_finite_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="non-numeric"):
        load_xy(_write(tmp_path, "0,1\nx,2\n", "a.csv"))
    with pytest.raises(ValueError, match="non-finite"):
        load_xy(_write(tmp_path, "0,1\n1,nan\n", "b.csv"))


def test_missing_and_empty_files(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_xy(tmp_path / "nope.csv")
    empty = _write(tmp_path, "\n\n", "empty.csv")
    assert read_n_rows(empty) == 0
    with pytest.raises(ValueError, match="empty"):
        read_n_columns(empty)


def test_embedded_sample() -> None:
    x, y = load_sample()
    assert len(x) == len(y) == 17
    assert x[0] == -2.0 and x[-1] == 2.0


def test_multichar_delimiter_rejected(tmp_path: Path) -> None:
    p = _write(tmp_path, "0,1\n1,2\n")
    with pytest.raises(ValueError, match="single character"):
        read_n_rows(p, delimiter="ab")
    with pytest.raises(ValueError, match="single character"):
        load_xy(p, delimiter="")
