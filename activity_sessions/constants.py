"""Package-wide constants and defaults."""

from __future__ import annotations

APP_NAME = "activity-sessions"

ENV_LOG_LEVEL = "SESSIONS_LOG_LEVEL"
ENV_API_URL = "SESSIONS_API_URL"
ENV_API_KEY = "SESSIONS_API_KEY"

DEFAULT_LOG_LEVEL = "INFO"

# Two activities further apart than this belong to different sessions.
DEFAULT_SESSION_GAP_SECONDS = 5 * 60

DEFAULT_ACTIVITIES_ENDPOINT = "/challenges/v1/activities"
DEFAULT_SESSIONS_ENDPOINT = "/challenges/v1/activities/sessions"
DEFAULT_HTTP_TIMEOUT_SECONDS = 15

PAYLOAD_KEY_ACTIVITIES = "activities"
PAYLOAD_KEY_USER_SESSIONS = "user_sessions"

STATUS_OK = "ok"
STATUS_FAILED = "failed"
STATUS_DRY_RUN = "dry-run"
