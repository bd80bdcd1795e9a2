from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from erato.config.errors import ConfigError
from erato.config.models import RegistryConfig


def load_yaml_config(path: Path) -> dict[str, object]:
    # Returns the raw mapping; typed validation happens in load_registry_config.
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def load_registry_config(path: Path) -> RegistryConfig:
    raw = load_yaml_config(path)
    try:
        return RegistryConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid registry config in {path}: {exc}") from exc
