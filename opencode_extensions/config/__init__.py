"""Configuration module."""
from .errors import (
    ConfigErrorStore,
    ConfigLoadError,
    add_config_load_error,
    clear_config_load_errors,
    config_errors,
    get_config_load_errors,
)
from .settings import (
    AutoUpdateConfig,
    CommandsConfig,
    Config,
    load_config,
    load_plugin_config,
)

__all__ = [
    "ConfigErrorStore",
    "ConfigLoadError",
    "add_config_load_error",
    "clear_config_load_errors",
    "config_errors",
    "get_config_load_errors",
    "AutoUpdateConfig",
    "CommandsConfig",
    "Config",
    "load_config",
    "load_plugin_config",
]
