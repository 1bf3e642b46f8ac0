"""Load the Jablko module environment into process-wide state."""

from __future__ import annotations

import logging
import os
import re
import threading
from collections.abc import Mapping

from jablkodev.errors import ConfigError, ConfigErrorCode
from jablkodev.models.environment import MAX_PORT, MIN_PORT, JablkoEnvironment

logger = logging.getLogger(__name__)

CORE_PORT_ENV = "JABLKO_CORE_PORT"
MOD_PORT_ENV = "JABLKO_MOD_PORT"
MOD_KEY_ENV = "JABLKO_MOD_KEY"
MOD_CONFIG_ENV = "JABLKO_MOD_CONFIG"

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")

# Published once by load_environment(); None until then.
_ENVIRONMENT: JablkoEnvironment | None = None
_LOAD_LOCK = threading.Lock()


def read_environment(environ: Mapping[str, str] | None = None) -> JablkoEnvironment:
    """Read and validate the Jablko environment without publishing it.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Validated JablkoEnvironment

    Raises:
        ConfigError: On the first missing or malformed variable
    """
    source = os.environ if environ is None else environ

    core_port = _parse_port(CORE_PORT_ENV, source.get(CORE_PORT_ENV))
    mod_port = _parse_port(MOD_PORT_ENV, source.get(MOD_PORT_ENV))
    mod_key = _require_value(MOD_KEY_ENV, source.get(MOD_KEY_ENV))
    mod_config = _require_value(MOD_CONFIG_ENV, source.get(MOD_CONFIG_ENV))

    return JablkoEnvironment(
        core_port=core_port,
        mod_port=mod_port,
        mod_key=mod_key,
        mod_config=mod_config,
    )


def load_environment(environ: Mapping[str, str] | None = None) -> JablkoEnvironment:
    """Read the Jablko environment and publish it for the whole process.

    Must be called once at module startup, before any other helper is used.
    The calling module should exit if this raises.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        The published JablkoEnvironment

    Raises:
        ConfigError: If a variable is missing or malformed, or the environment
            was already loaded. Published state is left unchanged.
    """
    global _ENVIRONMENT

    env = read_environment(environ)

    with _LOAD_LOCK:
        if _ENVIRONMENT is not None:
            raise ConfigError(
                "Jablko environment already loaded",
                code=ConfigErrorCode.ALREADY_LOADED,
            )
        _ENVIRONMENT = env

    logger.debug(
        "Loaded Jablko environment: core_port=%d mod_port=%d",
        env.core_port,
        env.mod_port,
    )
    return env


def get_environment() -> JablkoEnvironment | None:
    """Return the published environment, or None before load_environment()."""
    return _ENVIRONMENT


def is_environment_loaded() -> bool:
    return _ENVIRONMENT is not None


def get_core_port() -> int:
    """Port the Jablko core listens on (0 if not loaded)."""
    env = _ENVIRONMENT
    return env.core_port if env is not None else 0


def get_mod_port() -> int:
    """Port this module should listen on (0 if not loaded)."""
    env = _ENVIRONMENT
    return env.mod_port if env is not None else 0


def get_mod_config() -> str:
    """Opaque module config string ("" if not loaded)."""
    env = _ENVIRONMENT
    return env.mod_config if env is not None else ""


def _parse_port(name: str, raw: str | None) -> int:
    try:
        value = _parse_decimal(raw)
    except ValueError as e:
        raise ConfigError(
            f"Error reading {name}: {e}",
            code=ConfigErrorCode.INVALID_INTEGER,
            env_var=name,
            cause=e,
        ) from e

    if not MIN_PORT <= value <= MAX_PORT:
        raise ConfigError(
            f"Error reading {name}: port {value} out of range {MIN_PORT}-{MAX_PORT}",
            code=ConfigErrorCode.INVALID_INTEGER,
            env_var=name,
        )
    return value


def _parse_decimal(raw: str | None) -> int:
    # int() alone would also accept whitespace and digit separators.
    if raw is None:
        raise ValueError("variable not set")
    if not _DECIMAL_RE.fullmatch(raw):
        raise ValueError(f"invalid base-10 integer: {raw!r}")
    return int(raw, 10)


def _require_value(name: str, raw: str | None) -> str:
    if not raw:
        raise ConfigError(
            f"{name} not defined",
            code=ConfigErrorCode.MISSING_VALUE,
            env_var=name,
        )
    return raw
