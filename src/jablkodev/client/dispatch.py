"""One-shot GET/POST helpers for calling Jablko core routes."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from jablkodev.client.context import RequestContext
from jablkodev.client.request import (
    JablkoRequest,
    RequestBody,
    build_request,
    build_request_with_context,
)
from jablkodev.errors import ContextDeadlineExceededError, RequestError, RequestErrorCode
from jablkodev.models.environment import JablkoEnvironment

logger = logging.getLogger(__name__)

# No total/connect/read limits: a request runs until it completes, fails,
# or its RequestContext is done.
_NO_TIMEOUT = aiohttp.ClientTimeout()


async def send(
    request: JablkoRequest,
    *,
    session: aiohttp.ClientSession | None = None,
) -> bytes:
    """Dispatch a built request and return the full response body.

    Args:
        request: Request from build_request / build_request_with_context
        session: Optional caller-owned session (a new one is used per call otherwise)

    Returns:
        Response body bytes for statuses in [200, 400)

    Raises:
        RequestError: BAD_STATUS for other statuses, TRANSPORT_FAILURE if the
            exchange fails or the bound context is cancelled or expires
    """
    if request.context is None:
        return await _exchange(request, session)
    return await _exchange_bound(request, session, request.context)


async def get_simple(
    url: str,
    *,
    context: RequestContext | None = None,
    session: aiohttp.ClientSession | None = None,
    env: JablkoEnvironment | None = None,
) -> bytes:
    """GET `url` with module authentication and return the response body."""
    request = _build_for_dispatch("GET", url, None, context=context, env=env)
    return await send(request, session=session)


async def post_simple(
    url: str,
    content_type: str,
    body: RequestBody,
    *,
    context: RequestContext | None = None,
    session: aiohttp.ClientSession | None = None,
    env: JablkoEnvironment | None = None,
) -> bytes:
    """POST `body` as `content_type` with module authentication.

    Returns:
        Response body bytes
    """
    request = _build_for_dispatch("POST", url, body, context=context, env=env)
    request.headers["Content-Type"] = content_type
    return await send(request, session=session)


def _build_for_dispatch(
    method: str,
    url: str,
    body: RequestBody,
    *,
    context: RequestContext | None,
    env: JablkoEnvironment | None,
) -> JablkoRequest:
    try:
        if context is None:
            return build_request(method, url, body, env=env)
        return build_request_with_context(context, method, url, body, env=env)
    except RequestError as e:
        raise RequestError(
            f"{method} {url} failed: {e}",
            code=RequestErrorCode.TRANSPORT_FAILURE,
            method=method,
            url=url,
            cause=e,
        ) from e


async def _exchange_bound(
    request: JablkoRequest,
    session: aiohttp.ClientSession | None,
    context: RequestContext,
) -> bytes:
    err = context.error()
    if err is not None:
        raise _transport_error(request, err)

    exchange = asyncio.ensure_future(_exchange(request, session))
    watcher = asyncio.ensure_future(context.wait())
    try:
        done, _ = await asyncio.wait(
            {exchange, watcher}, return_when=asyncio.FIRST_COMPLETED
        )
    except asyncio.CancelledError:
        exchange.cancel()
        raise
    finally:
        watcher.cancel()

    if exchange in done:
        return exchange.result()

    # Cancelling the task unwinds `async with` and releases the response.
    # asyncio.wait() only raises if this task is cancelled, never with the
    # exchange's own outcome.
    exchange.cancel()
    await asyncio.wait({exchange})
    if not exchange.cancelled():
        exchange.exception()
    # The wait timer can fire a hair before the monotonic deadline.
    raise _transport_error(request, context.error() or ContextDeadlineExceededError())


async def _exchange(
    request: JablkoRequest,
    session: aiohttp.ClientSession | None,
) -> bytes:
    if session is not None:
        return await _do_request(session, request)
    async with aiohttp.ClientSession(timeout=_NO_TIMEOUT) as own_session:
        return await _do_request(own_session, request)


async def _do_request(session: aiohttp.ClientSession, request: JablkoRequest) -> bytes:
    kwargs: dict[str, Any] = {"headers": request.headers}
    if request.body is not None:
        kwargs["data"] = request.body

    logger.debug("Dispatching %s %s", request.method, request.url)
    try:
        async with session.request(request.method, request.url, **kwargs) as response:
            body = await response.read()
            status = response.status
            status_text = f"{status} {response.reason or ''}".rstrip()
    except (aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError, TypeError) as e:
        # aiohttp raises ValueError for control characters in header values.
        raise _transport_error(request, e) from e

    logger.debug("Response %s for %s %s", status_text, request.method, request.url)
    if status < 200 or status >= 400:
        raise RequestError(
            f"Bad status code: {status_text}",
            code=RequestErrorCode.BAD_STATUS,
            method=request.method,
            url=str(request.url),
            status=status,
            status_text=status_text,
        )
    return body


def _transport_error(request: JablkoRequest, cause: BaseException | None) -> RequestError:
    return RequestError(
        f"{request.method} {request.url} failed: {cause}",
        code=RequestErrorCode.TRANSPORT_FAILURE,
        method=request.method,
        url=str(request.url),
        cause=cause,
    )
