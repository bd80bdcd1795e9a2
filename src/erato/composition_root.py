from __future__ import annotations

from pathlib import Path

from erato.algorithms.registry import PrimalityRegistry
from erato.config.loader import load_registry_config
from erato.config.models import RegistryConfig
from erato.observability.factory import build_log_sink
from erato.ports.log_sink import LogSink

# Composition root turns a validated config into a ready registry; callers own the result.


def build_registry_from_config(
    config: RegistryConfig,
    *,
    log_sink: LogSink | None = None,
) -> PrimalityRegistry:
    # An explicit sink overrides the logging section of the config.
    sink = log_sink if log_sink is not None else build_log_sink(config.logging)
    return PrimalityRegistry.from_config(config, log_sink=sink)


def build_registry_from_file(path: Path, *, log_sink: LogSink | None = None) -> PrimalityRegistry:
    return build_registry_from_config(load_registry_config(path), log_sink=log_sink)
