"""Authenticated HTTP helpers for calling the Jablko core."""

from jablkodev.client.context import RequestContext
from jablkodev.client.dispatch import get_simple, post_simple, send
from jablkodev.client.request import (
    MOD_KEY_HEADER,
    MOD_PORT_HEADER,
    JablkoRequest,
    auth_headers,
    build_request,
    build_request_with_context,
)
from jablkodev.errors import RequestError, RequestErrorCode

__all__ = [
    "MOD_KEY_HEADER",
    "MOD_PORT_HEADER",
    "JablkoRequest",
    "RequestContext",
    "RequestError",
    "RequestErrorCode",
    "auth_headers",
    "build_request",
    "build_request_with_context",
    "get_simple",
    "post_simple",
    "send",
]
