"""Typed result objects returned across the runner boundary."""

from activity_sessions.api_objects.types import RunFailure, RunResult, RunSummary

__all__ = ["RunFailure", "RunResult", "RunSummary"]
