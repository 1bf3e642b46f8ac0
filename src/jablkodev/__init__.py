"""Helpers for Jablko modules (JMODs)."""

__version__ = "0.1.0"

# Export commonly used types
from jablkodev.client import (
    JablkoRequest,
    RequestContext,
    build_request,
    build_request_with_context,
    get_simple,
    post_simple,
)
from jablkodev.config import (
    get_core_port,
    get_mod_config,
    get_mod_port,
    load_environment,
)
from jablkodev.errors import ConfigError, JablkoError, RequestError
from jablkodev.models.environment import JablkoEnvironment

__all__ = [
    "ConfigError",
    "JablkoEnvironment",
    "JablkoError",
    "JablkoRequest",
    "RequestContext",
    "RequestError",
    "__version__",
    "build_request",
    "build_request_with_context",
    "get_core_port",
    "get_mod_config",
    "get_mod_port",
    "get_simple",
    "load_environment",
    "post_simple",
]
