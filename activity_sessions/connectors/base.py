from __future__ import annotations

from typing import Any, Protocol


class ActivitySource(Protocol):
    source_name: str

    def fetch(self) -> list[dict[str, Any]]: ...


class SessionSink(Protocol):
    sink_name: str

    def submit(self, payload: dict[str, Any]) -> None: ...
