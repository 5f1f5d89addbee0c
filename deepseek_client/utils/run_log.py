from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from deepseek_client.results import Failure, Result

CONTENT_PREVIEW_CHARS = 2_000


@dataclass(frozen=True)
class RunLogPaths:
    run_id: str
    jsonl_path: Path


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def make_run_id() -> str:
    return _utcnow().strftime("%Y%m%dT%H%M%SZ")


def init_run_log(log_dir: Path, run_id: str) -> RunLogPaths:
    log_dir.mkdir(parents=True, exist_ok=True)
    return RunLogPaths(run_id=run_id, jsonl_path=log_dir / f"run_{run_id}.jsonl")


def outcome_record(result: Result) -> dict[str, Any]:
    """
    Flatten a Result into a JSON-serializable record.
    - No full response bodies stored in logs, only a bounded preview
    """
    record: dict[str, Any] = {"kind": result.kind, "status_code": result.status_code}
    if isinstance(result, Failure):
        record["code"] = result.code
    content = result.content
    record["content_preview"] = content[:CONTENT_PREVIEW_CHARS]
    record["content_truncated"] = len(content) > CONTENT_PREVIEW_CHARS
    return record


def append_outcome(
    paths: RunLogPaths,
    result: Result,
    *,
    extra: dict[str, Any] | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "ts": _utcnow().isoformat(),
        "run_id": paths.run_id,
        **outcome_record(result),
    }
    if extra:
        payload.update(extra)
    with paths.jsonl_path.open("a", encoding="utf-8", newline="\n") as f:
        f.write(json.dumps(payload, ensure_ascii=False) + "\n")
    return payload
