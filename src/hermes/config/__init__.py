"""Configuration loading, schema, and defaults."""

from hermes.config.loader import ConfigError, load_config, parse_language_list
from hermes.config.schema import HermesConfig

__all__ = [
    "ConfigError",
    "HermesConfig",
    "load_config",
    "parse_language_list",
]
