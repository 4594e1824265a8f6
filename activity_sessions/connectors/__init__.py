from activity_sessions.connectors.base import ActivitySource, SessionSink
from activity_sessions.connectors.file_drop import FileActivitySource, FileSessionSink
from activity_sessions.connectors.http import HttpActivitySource, HttpSessionSink

__all__ = [
    "ActivitySource",
    "FileActivitySource",
    "FileSessionSink",
    "HttpActivitySource",
    "HttpSessionSink",
    "SessionSink",
]
