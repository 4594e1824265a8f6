from __future__ import annotations

import json
from pathlib import Path

import pytest

from activity_sessions.cli import main


@pytest.fixture(autouse=True)
def _quiet(monkeypatch) -> None:
    monkeypatch.setenv("SESSIONS_NO_BANNER", "1")
    monkeypatch.delenv("SESSIONS_API_URL", raising=False)


def test_cli_file_to_file(tmp_path: Path, merge_records, capsys) -> None:
    src = tmp_path / "activities.json"
    src.write_text(json.dumps({"activities": merge_records}), encoding="utf-8")
    out = tmp_path / "sessions.json"

    code = main(
        [
            "--config",
            str(tmp_path / "none.yaml"),
            "--input",
            str(src),
            "--output",
            str(out),
            "--json-summary",
        ]
    )

    assert code == 0
    written = json.loads(out.read_text(encoding="utf-8"))
    assert written["user_sessions"]["u1"][0]["activity_ids"] == [1, 2]
    summary = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert summary["ok"] is True
    assert summary["summary"]["totals"]["sessions"] == 1


def test_cli_gap_override(tmp_path: Path, merge_records) -> None:
    src = tmp_path / "activities.json"
    src.write_text(json.dumps(merge_records), encoding="utf-8")
    out = tmp_path / "sessions.json"

    code = main(
        [
            "--config",
            str(tmp_path / "none.yaml"),
            "--input",
            str(src),
            "--output",
            str(out),
            "--gap-seconds",
            "5",
        ]
    )

    assert code == 0
    written = json.loads(out.read_text(encoding="utf-8"))
    assert len(written["user_sessions"]["u1"]) == 2


def test_cli_failed_run_exits_non_zero(tmp_path: Path) -> None:
    src = tmp_path / "activities.json"
    src.write_text(json.dumps([{"id": 1}]), encoding="utf-8")
    out = tmp_path / "sessions.json"

    code = main(
        ["--config", str(tmp_path / "none.yaml"), "--input", str(src), "--output", str(out)]
    )

    assert code == 1
    assert not out.exists()


def test_cli_dry_run_needs_no_sink(tmp_path: Path, merge_records) -> None:
    src = tmp_path / "activities.json"
    src.write_text(json.dumps(merge_records), encoding="utf-8")

    code = main(
        [
            "--config",
            str(tmp_path / "none.yaml"),
            "--input",
            str(src),
            "--dry-run",
            "--show-sessions",
            "--events-limit",
            "5",
        ]
    )

    assert code == 0


def test_cli_reports_missing_api_url(tmp_path: Path) -> None:
    assert main(["--config", str(tmp_path / "none.yaml")]) == 2


def test_cli_init_config(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    assert main(["--config", str(path), "--init-config"]) == 0
    assert "gap_seconds" in path.read_text(encoding="utf-8")
