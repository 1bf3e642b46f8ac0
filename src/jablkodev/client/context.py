"""Cancellation and deadline context for in-flight requests."""

from __future__ import annotations

import asyncio
import contextlib
import time

from jablkodev.errors import ContextCancelledError, ContextDeadlineExceededError


class RequestContext:
    """Cancellation signal with an optional deadline.

    Bind it to a request with `build_request_with_context`; cancelling it or
    passing the deadline aborts the exchange. `cancel()` must be called from
    the event loop thread (use `loop.call_soon_threadsafe` from elsewhere).
    A context belongs to one event loop: do not reuse it across `asyncio.run`
    calls.
    """

    def __init__(self, *, deadline: float | None = None) -> None:
        """Create a context.

        Args:
            deadline: Absolute `time.monotonic()` value, or None for no deadline
        """
        self._deadline = deadline
        self._cancelled = asyncio.Event()

    @classmethod
    def with_timeout(cls, timeout_s: float) -> RequestContext:
        return cls(deadline=time.monotonic() + timeout_s)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def done(self) -> bool:
        return self.error() is not None

    def cancel(self) -> None:
        self._cancelled.set()

    def remaining(self) -> float | None:
        """Seconds until the deadline (never negative), or None without one."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def error(self) -> ContextCancelledError | None:
        """Why the context is done, or None while it is still live."""
        if self._cancelled.is_set():
            return ContextCancelledError()
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return ContextDeadlineExceededError()
        return None

    async def wait(self) -> None:
        """Block until the context is cancelled or its deadline passes."""
        remaining = self.remaining()
        if remaining is None:
            await self._cancelled.wait()
            return
        with contextlib.suppress(asyncio.TimeoutError):
            await asyncio.wait_for(self._cancelled.wait(), timeout=remaining)
