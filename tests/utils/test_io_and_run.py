from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from polyreg.utils.io import dump_json, load_config_file
from polyreg.utils.run import log_event, new_run_id, snapshot_config


def test_load_yaml_and_json(tmp_path: Path) -> None:
    y = tmp_path / "c.yaml"
    y.write_text("degree: 3\nlam: 0.1\n", encoding="utf-8")
    assert load_config_file(y) == {"degree": 3, "lam": 0.1}
    j = tmp_path / "c.json"
    j.write_text('{"degree": 2}', encoding="utf-8")
    assert load_config_file(j) == {"degree": 2}
    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert load_config_file(empty) == {}


def test_load_rejects_non_mapping(tmp_path: Path) -> None:
    p = tmp_path / "c.yml"
    p.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_config_file(p)
    with pytest.raises(FileNotFoundError):
        load_config_file(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "name, text",
    [("bad.yaml", "degree: [1\n"), ("bad.json", '{"degree": '), ("bad.yml", "a: b: c\n")],
)
def test_malformed_config_is_value_error_naming_file(tmp_path: Path, name: str, text: str) -> None:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid config") as exc:
        load_config_file(p)
    assert name in str(exc.value)


def test_unsupported_config_suffix(tmp_path: Path) -> None:
    p = tmp_path / "fit.toml"
    p.write_text("degree = 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported config format"):
        load_config_file(p)


def test_dump_json_handles_numpy_values() -> None:
    payload = {"coefficients": np.array([1.0, 2.5]), "r2": np.float64(0.5), "n": np.int64(3)}
    assert json.loads(dump_json(payload)) == {"coefficients": [1.0, 2.5], "n": 3, "r2": 0.5}
    with pytest.raises(TypeError):
        dump_json({"bad": object()})


def test_run_log_is_jsonl(tmp_path: Path) -> None:
    run_id = new_run_id()
    assert run_id.startswith("fit-")
    snapshot_config(run_id, {"degree": 2}, root=tmp_path)
    log_event(run_id, "run_start", root=tmp_path, degree=2)
    log_event(run_id, "fit_complete", root=tmp_path, coefficients=np.array([1.0, 2.0, 3.0]))
    lines = (tmp_path / run_id / "logs" / "run.jsonl").read_text(encoding="utf-8").splitlines()
    events = [json.loads(line) for line in lines]
    assert [e["event"] for e in events] == ["run_start", "fit_complete"]
    assert events[0]["degree"] == 2 and events[0]["ts"].endswith("Z")
    assert events[1]["coefficients"] == [1.0, 2.0, 3.0]
    snap = json.loads((tmp_path / run_id / "config.json").read_text(encoding="utf-8"))
    assert snap == {"degree": 2}
