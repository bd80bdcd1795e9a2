from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from erato.observability.logging import LogMessage


@runtime_checkable
class LogSink(Protocol):
    # Destination for structured log messages emitted outside the hot path.
    def emit(self, message: LogMessage) -> None:
        raise NotImplementedError("LogSink is a port; use a concrete sink.")

    def close(self) -> None:
        # Releases whatever the sink owns; must be safe to call twice.
        raise NotImplementedError("LogSink is a port; use a concrete sink.")
