"""Jablko environment loading."""

from jablkodev.config.loader import (
    CORE_PORT_ENV,
    MOD_CONFIG_ENV,
    MOD_KEY_ENV,
    MOD_PORT_ENV,
    get_core_port,
    get_environment,
    get_mod_config,
    get_mod_port,
    is_environment_loaded,
    load_environment,
    read_environment,
)
from jablkodev.errors import ConfigError, ConfigErrorCode

__all__ = [
    "CORE_PORT_ENV",
    "MOD_CONFIG_ENV",
    "MOD_KEY_ENV",
    "MOD_PORT_ENV",
    "ConfigError",
    "ConfigErrorCode",
    "get_core_port",
    "get_environment",
    "get_mod_config",
    "get_mod_port",
    "is_environment_loaded",
    "load_environment",
    "read_environment",
]
