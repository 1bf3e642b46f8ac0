"""CLI entrypoint for checking a Jablko module environment and calling core routes."""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any

from dotenv import load_dotenv

load_dotenv()

import fire  # type: ignore[import-untyped]

from jablkodev.client import RequestContext, get_simple, post_simple
from jablkodev.config import load_environment
from jablkodev.errors import ConfigError, RequestError
from jablkodev.logging_setup import configure_logging
from jablkodev.models.environment import JablkoEnvironment


def setup_logging(level: str | None = None) -> None:
    """Configure logging for CLI."""
    configure_logging(log_level=level, module_name="jablkodev")


class JablkoDev:
    """jablkodev CLI - Jablko module helpers."""

    def check(self, log_level: str | None = None) -> None:
        """Load the JABLKO_* environment and report what was found.

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        """
        setup_logging(log_level)
        env = _load_or_exit()

        print("✓ Jablko environment loaded")
        print(f"  Core port: {env.core_port}")
        print(f"  Module port: {env.mod_port}")
        print(f"  Module config: {len(env.mod_config)} chars")

    def get(self, url: str, timeout: float | None = None, log_level: str | None = None) -> None:
        """GET a core route with module authentication and print the body.

        Args:
            url: Absolute URL to request
            timeout: Optional deadline in seconds
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        """
        setup_logging(log_level)
        _load_or_exit()
        context = _make_context(timeout)

        try:
            body = asyncio.run(get_simple(url, context=context))
        except RequestError as e:
            print(f"✗ Request failed: {e}", file=sys.stderr)
            sys.exit(1)
        _write_body(body)

    def post(
        self,
        url: str,
        data: Any,
        content_type: str = "application/json",
        timeout: float | None = None,
        log_level: str | None = None,
    ) -> None:
        """POST data to a core route with module authentication and print the body.

        Args:
            url: Absolute URL to request
            data: Request body (non-string values are sent as JSON)
            content_type: Content-Type header value
            timeout: Optional deadline in seconds
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        """
        setup_logging(log_level)
        _load_or_exit()
        context = _make_context(timeout)
        # Fire parses literals, so '{"a": 1}' arrives as a dict.
        payload = data if isinstance(data, str) else json.dumps(data)

        try:
            body = asyncio.run(
                post_simple(url, content_type, payload.encode("utf-8"), context=context)
            )
        except RequestError as e:
            print(f"✗ Request failed: {e}", file=sys.stderr)
            sys.exit(1)
        _write_body(body)


def _load_or_exit() -> JablkoEnvironment:
    try:
        return load_environment()
    except ConfigError as e:
        print(f"✗ Environment invalid: {e}", file=sys.stderr)
        sys.exit(1)


def _make_context(timeout: float | None) -> RequestContext | None:
    if timeout is None:
        return None
    return RequestContext.with_timeout(float(timeout))


def _write_body(body: bytes) -> None:
    sys.stdout.buffer.write(body)
    sys.stdout.flush()


def main() -> None:
    """Main CLI entrypoint."""
    # Strip --help/-h when it's the only arg so Fire shows its commands list
    if len(sys.argv) == 2 and sys.argv[1] in ("--help", "-h"):
        sys.argv.pop()
    fire.Fire(JablkoDev)


if __name__ == "__main__":
    main()
