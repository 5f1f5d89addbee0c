from __future__ import annotations

import json

import httpx
import pytest

from deepseek_client.results import BadResult, Failure
from deepseek_client.utils.run_log import CONTENT_PREVIEW_CHARS, append_outcome, init_run_log, make_run_id

pytestmark = pytest.mark.unit


def test_append_outcome_writes_one_json_line_per_call(tmp_path) -> None:
    paths = init_run_log(tmp_path / "logs", "RUN1")

    append_outcome(paths, Failure(28, "timeout"), extra={"event": "chat"})
    bad = BadResult(httpx.Response(429, json={"error": "rate limited"}, request=httpx.Request("POST", "https://x")))
    append_outcome(paths, bad)

    lines = paths.jsonl_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    first, second = (json.loads(line) for line in lines)
    assert first["run_id"] == "RUN1"
    assert first["kind"] == "failure"
    assert first["code"] == 28
    assert first["event"] == "chat"
    assert second["kind"] == "bad"
    assert second["status_code"] == 429
    assert "code" not in second


def test_content_preview_is_bounded(tmp_path) -> None:
    paths = init_run_log(tmp_path, make_run_id())

    record = append_outcome(paths, Failure(0, "x" * (CONTENT_PREVIEW_CHARS + 10)))

    assert len(record["content_preview"]) == CONTENT_PREVIEW_CHARS
    assert record["content_truncated"] is True
