from .errors import ConfigError
from .loader import load_registry_config, load_yaml_config
from .models import AlgorithmDecl, LoggingConfig, RegistryConfig

__all__ = [
    "AlgorithmDecl",
    "ConfigError",
    "LoggingConfig",
    "RegistryConfig",
    "load_registry_config",
    "load_yaml_config",
]
