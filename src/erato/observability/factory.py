from __future__ import annotations

from pathlib import Path

from erato.config.models import LoggingConfig
from erato.observability.logging import JsonlLogSink, StreamLogSink
from erato.ports.log_sink import LogSink


def build_log_sink(config: LoggingConfig | None) -> LogSink | None:
    # Missing section and sink "none" both mean no logging.
    if config is None or config.sink == "none":
        return None
    if config.sink == "stdout":
        return StreamLogSink()
    assert config.path is not None
    return JsonlLogSink(Path(config.path))
