"""Build requests that authenticate a module to the Jablko core."""

from __future__ import annotations

import re
from collections.abc import AsyncIterable
from dataclasses import dataclass, field
from typing import IO, Union

from multidict import CIMultiDict
from yarl import URL

from jablkodev.client.context import RequestContext
from jablkodev.config import loader
from jablkodev.errors import RequestError, RequestErrorCode
from jablkodev.models.environment import JablkoEnvironment

MOD_PORT_HEADER = "JABLKO_MOD_PORT"
MOD_KEY_HEADER = "JABLKO_MOD_KEY"

_ALLOWED_SCHEMES = ("http", "https")
# RFC 9110 token characters.
_METHOD_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

RequestBody = Union[bytes, str, IO[bytes], AsyncIterable[bytes], None]


@dataclass
class JablkoRequest:
    """An outgoing request to the Jablko core. Not yet dispatched."""

    method: str
    url: URL
    headers: CIMultiDict[str] = field(default_factory=CIMultiDict)
    body: RequestBody = None
    context: RequestContext | None = None


def auth_headers(env: JablkoEnvironment | None = None) -> CIMultiDict[str]:
    """Return the module authentication headers.

    Uses `env` when given, otherwise the process-wide environment. An unloaded
    environment yields "0" and "" as header values.
    """
    if env is not None:
        mod_port = env.mod_port
        mod_key = env.mod_key
    else:
        published = loader.get_environment()
        mod_port = published.mod_port if published is not None else 0
        mod_key = published.mod_key if published is not None else ""

    return CIMultiDict({MOD_PORT_HEADER: str(mod_port), MOD_KEY_HEADER: mod_key})


def build_request(
    method: str,
    url: str | URL,
    body: RequestBody = None,
    *,
    env: JablkoEnvironment | None = None,
) -> JablkoRequest:
    """Build a request carrying the module authentication headers.

    Args:
        method: HTTP method
        url: Absolute http(s) URL
        body: Optional request body
        env: Environment to authenticate with (defaults to the loaded one)

    Returns:
        JablkoRequest with JABLKO_MOD_PORT and JABLKO_MOD_KEY set

    Raises:
        RequestError: CONSTRUCTION_FAILED if the method or URL is malformed
    """
    return _build(method, url, body, context=None, env=env)


def build_request_with_context(
    context: RequestContext,
    method: str,
    url: str | URL,
    body: RequestBody = None,
    *,
    env: JablkoEnvironment | None = None,
) -> JablkoRequest:
    """Like build_request, with `context` bound to the request's lifetime."""
    return _build(method, url, body, context=context, env=env)


def _build(
    method: str,
    url: str | URL,
    body: RequestBody,
    *,
    context: RequestContext | None,
    env: JablkoEnvironment | None,
) -> JablkoRequest:
    try:
        parsed = _parse_url(url)
        _check_method(method)
    except (TypeError, ValueError) as e:
        raise RequestError(
            f"Failed to build {method} request for {url}: {e}",
            code=RequestErrorCode.CONSTRUCTION_FAILED,
            method=str(method),
            url=str(url),
            cause=e,
        ) from e

    return JablkoRequest(
        method=method,
        url=parsed,
        headers=auth_headers(env),
        body=body,
        context=context,
    )


def _parse_url(url: str | URL) -> URL:
    parsed = url if isinstance(url, URL) else URL(url)
    if parsed.scheme not in _ALLOWED_SCHEMES:
        raise ValueError(f"unsupported URL scheme: {parsed.scheme!r}")
    if not parsed.host:
        raise ValueError("URL has no host")
    return parsed


def _check_method(method: str) -> None:
    if not isinstance(method, str) or not _METHOD_RE.fullmatch(method):
        raise ValueError(f"invalid HTTP method: {method!r}")
