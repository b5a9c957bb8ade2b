from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import polyreg


def test_version_string() -> None:
    assert isinstance(polyreg.__version__, str) and len(polyreg.__version__) >= 5


def test_cli_help_exits_zero() -> None:
    env = dict(os.environ)
    src = str(Path(__file__).resolve().parents[1] / "src")
    env["PYTHONPATH"] = os.pathsep.join(p for p in [src, env.get("PYTHONPATH")] if p)
    out = subprocess.run(
        [sys.executable, "-m", "polyreg", "--help"], capture_output=True, env=env
    )
    assert out.returncode == 0
    assert b"Polynomial regression" in out.stdout + out.stderr
