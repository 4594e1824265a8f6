"""JSON file adapters for offline runs."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from activity_sessions.constants import PAYLOAD_KEY_ACTIVITIES
from activity_sessions.errors import DataError, TransportError


@dataclass(slots=True)
class FileActivitySource:
    path: Path
    source_name: str = "file"

    def fetch(self) -> list[dict[str, Any]]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise DataError(f"{self.path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise TransportError(f"Cannot read {self.path}: {exc}", url=str(self.path)) from exc
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DataError(f"{self.path} is not valid JSON: {exc}") from exc

        # Accept either an API-shaped object or a bare list of activities.
        if isinstance(payload, dict):
            payload = payload.get(PAYLOAD_KEY_ACTIVITIES)
        if not isinstance(payload, list):
            raise DataError(f"{self.path} holds no activities list", field="activities")
        return payload


@dataclass(slots=True)
class FileSessionSink:
    path: Path
    sink_name: str = "file"

    def submit(self, payload: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as fh:
                json.dump(payload, fh, ensure_ascii=True, indent=2)
                fh.write("\n")
        except OSError as exc:
            raise TransportError(f"Cannot write {self.path}: {exc}", url=str(self.path)) from exc
