from __future__ import annotations


# ConfigError is raised for invalid configuration (fail fast).
class ConfigError(ValueError):
    pass
