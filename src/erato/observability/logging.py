from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from erato.ports.primality_test import PrimalityTest

LOGGER_NAME = "erato"
LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured record emitted by registry wiring; algorithms never log.
    level: str
    message: str
    fields: Mapping[str, object] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))

    def __post_init__(self) -> None:
        if self.level not in LOG_LEVELS:
            raise ValueError(f"LogMessage level must be one of {LOG_LEVELS}, got {self.level!r}")
        if not self.message:
            raise ValueError("LogMessage requires a non-empty message")

    def to_record(self) -> dict[str, object]:
        return {
            "logger": LOGGER_NAME,
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp.isoformat().replace("+00:00", "Z"),
            "fields": dict(self.fields),
        }

    def to_json_line(self) -> str:
        return json.dumps(self.to_record(), separators=(",", ":"), ensure_ascii=False)


def registration_message(algorithm: PrimalityTest, position: int) -> LogMessage:
    """Describe one ``PrimalityRegistry.register`` call."""
    return LogMessage(
        level="info",
        message="algorithm registered",
        fields={
            "name": algorithm.name(),
            "algorithm": type(algorithm).__name__,
            "position": position,
        },
    )


class _ClosingSink:
    # Context-manager plumbing shared by the sinks; subclasses override close().
    def close(self) -> None:
        return None

    def __enter__(self) -> _ClosingSink:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class StreamLogSink(_ClosingSink):
    # One JSON line per message on a text stream (stdout unless given); never closes the stream.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(message.to_json_line() + "\n")
        stream.flush()


class JsonlLogSink(_ClosingSink):
    # Appends JSON lines to a file it owns; emitting after close() is an error.
    def __init__(self, path: Path) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file: TextIO | None = self.path.open("a", encoding="utf-8")

    @property
    def closed(self) -> bool:
        return self._file is None

    def emit(self, message: LogMessage) -> None:
        if self._file is None:
            raise ValueError(f"JsonlLogSink for {self.path} is closed")
        self._file.write(message.to_json_line() + "\n")
        self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


class MemoryLogSink(_ClosingSink):
    # Keeps messages in emission order; used by tests and embedding hosts.
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)
