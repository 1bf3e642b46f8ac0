"""Error hierarchy for Jablko module helpers."""

from __future__ import annotations

from enum import Enum


class JablkoError(Exception):
    """Base exception for all jablkodev errors.

    Preserves the underlying failure via exception chaining.
    """

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
        self.__cause__ = cause  # Python's exception chaining


class ConfigErrorCode(str, Enum):
    """Stable environment loading error codes."""

    MISSING_VALUE = "MISSING_VALUE"
    INVALID_INTEGER = "INVALID_INTEGER"
    ALREADY_LOADED = "ALREADY_LOADED"


class ConfigError(JablkoError):
    """Environment loading or validation error.

    Callers must treat this as fatal and stop the module.
    """

    def __init__(
        self,
        message: str,
        *,
        code: ConfigErrorCode,
        env_var: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.code = code
        self.env_var = env_var


class RequestErrorCode(str, Enum):
    """Stable request construction and dispatch error codes."""

    CONSTRUCTION_FAILED = "CONSTRUCTION_FAILED"
    BAD_STATUS = "BAD_STATUS"
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"


class RequestError(JablkoError):
    """Building or dispatching a request to the Jablko core failed."""

    def __init__(
        self,
        message: str,
        *,
        code: RequestErrorCode,
        method: str | None = None,
        url: str | None = None,
        status: int | None = None,
        status_text: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.code = code
        self.method = method
        self.url = url
        self.status = status
        self.status_text = status_text


class ContextCancelledError(JablkoError):
    """A request context was cancelled."""

    def __init__(self, message: str = "request context cancelled") -> None:
        super().__init__(message)


class ContextDeadlineExceededError(ContextCancelledError):
    """A request context deadline passed."""

    def __init__(self, message: str = "request context deadline exceeded") -> None:
        super().__init__(message)
