"""Activity sessionization core package."""

from activity_sessions.api_objects import RunResult, RunSummary
from activity_sessions.config import AppConfig, load_config
from activity_sessions.constants import APP_NAME
from activity_sessions.pipeline.aggregate import compute_sessions, to_payload

__all__ = [
    "APP_NAME",
    "AppConfig",
    "RunResult",
    "RunSummary",
    "__version__",
    "compute_sessions",
    "load_config",
    "to_payload",
]
__version__ = "0.1.0"
