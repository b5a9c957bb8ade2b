from __future__ import annotations

import datetime as _dt
import uuid as _uuid
from pathlib import Path
from typing import Any

from .io import dump_json


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


def new_run_id(prefix: str = "fit") -> str:
    ts = _utcnow().strftime("%Y%m%dT%H%M%SZ")
    short = str(_uuid.uuid4())[:8]
    return f"{prefix}-{ts}-{short}"


def run_dir(run_id: str, root: str | Path = "artifacts") -> Path:
    p = Path(root) / run_id
    (p / "logs").mkdir(parents=True, exist_ok=True)
    return p


def log_event(run_id: str, event: str, root: str | Path = "artifacts", **fields: Any) -> None:
    """Append one JSON record to <root>/<run_id>/logs/run.jsonl."""
    payload: dict[str, Any] = {
        "ts": _utcnow().strftime("%Y-%m-%dT%H:%M:%SZ"),
        "event": event,
        **fields,
    }
    log_path = run_dir(run_id, root) / "logs" / "run.jsonl"
    with log_path.open("a", encoding="utf-8") as f:
        f.write(dump_json(payload) + "\n")


def snapshot_config(run_id: str, payload: dict[str, Any], root: str | Path = "artifacts") -> Path:
    json_path = run_dir(run_id, root) / "config.json"
    json_path.write_text(dump_json(payload), encoding="utf-8")
    return json_path
