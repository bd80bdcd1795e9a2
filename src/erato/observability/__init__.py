from erato.observability.logging import (
    LOG_LEVELS,
    JsonlLogSink,
    LogMessage,
    MemoryLogSink,
    StreamLogSink,
    registration_message,
)

__all__ = [
    "LOG_LEVELS",
    "JsonlLogSink",
    "LogMessage",
    "MemoryLogSink",
    "StreamLogSink",
    "registration_message",
]
