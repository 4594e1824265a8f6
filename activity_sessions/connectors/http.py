"""HTTP adapters for the activities API.

Both calls carry ``Content-Type: application/json`` and the API key in the
``Authorization`` header. Each request is attempted once.
"""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any

from activity_sessions.constants import DEFAULT_HTTP_TIMEOUT_SECONDS, PAYLOAD_KEY_ACTIVITIES
from activity_sessions.errors import ApiError, DataError, TransportError
from activity_sessions.utils.logging import debug_event, get_logger

logger = get_logger(__name__)


def _headers(api_key: str) -> dict[str, str]:
    return {"Content-Type": "application/json", "Authorization": api_key}


def _send(
    url: str,
    *,
    method: str,
    api_key: str,
    timeout: float,
    body: bytes | None = None,
) -> tuple[int, bytes]:
    req = urllib.request.Request(url, data=body, method=method, headers=_headers(api_key))
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return resp.status, resp.read()
    except urllib.error.HTTPError as exc:
        detail = exc.read().decode("utf-8", errors="replace") if exc.fp is not None else ""
        raise ApiError(exc.code, url=url, body=detail) from exc
    except urllib.error.URLError as exc:
        raise TransportError(f"{method} {url} failed: {exc.reason}", url=url) from exc
    except (TimeoutError, OSError) as exc:
        raise TransportError(f"{method} {url} failed: {exc}", url=url) from exc


@dataclass(slots=True)
class HttpActivitySource:
    url: str
    api_key: str
    timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    source_name: str = "http"

    def fetch(self) -> list[dict[str, Any]]:
        status, raw = _send(
            self.url, method="GET", api_key=self.api_key, timeout=self.timeout_seconds
        )
        if not 200 <= status < 300:
            raise ApiError(status, url=self.url)
        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DataError(f"Activities response is not valid JSON: {exc}") from exc

        if not isinstance(payload, dict) or PAYLOAD_KEY_ACTIVITIES not in payload:
            raise DataError("Activities response has no activities list", field="activities")
        activities = payload[PAYLOAD_KEY_ACTIVITIES]
        if not isinstance(activities, list):
            raise DataError("Activities response has no activities list", field="activities")

        debug_event(logger, "activities_fetched", url=self.url, status=status, count=len(activities))
        return activities


@dataclass(slots=True)
class HttpSessionSink:
    url: str
    api_key: str
    timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    sink_name: str = "http"

    def submit(self, payload: dict[str, Any]) -> None:
        body = json.dumps(payload, ensure_ascii=True).encode("utf-8")
        status, _ = _send(
            self.url,
            method="POST",
            api_key=self.api_key,
            timeout=self.timeout_seconds,
            body=body,
        )
        if not 200 <= status < 300:
            raise ApiError(status, url=self.url)
        logger.info("Sessions posted successfully (status=%s)", status)
