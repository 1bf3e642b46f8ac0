"""Shared pytest fixtures for jablkodev tests.

Provides a clean process-wide environment per test and a fake Jablko core
served by aiohttp.
"""

from __future__ import annotations

import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Add src to sys.path for imports
src_path = Path(__file__).parent.parent.parent / "src"
if str(src_path.resolve()) not in sys.path:
    sys.path.insert(0, str(src_path.resolve()))

import pytest
import pytest_asyncio

from jablkodev.config import loader
from jablkodev.models.environment import JablkoEnvironment
from tests.jablkodev.mocks import FakeCore, start_fake_core

VALID_ENV = {
    "JABLKO_CORE_PORT": "8080",
    "JABLKO_MOD_PORT": "9090",
    "JABLKO_MOD_KEY": "secret123",
    "JABLKO_MOD_CONFIG": '{"a":1}',
}


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with the process-wide environment unloaded."""
    monkeypatch.setattr(loader, "_ENVIRONMENT", None)


@pytest.fixture
def jablko_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set all four JABLKO_* variables to valid values."""
    for name, value in VALID_ENV.items():
        monkeypatch.setenv(name, value)
    return dict(VALID_ENV)


@pytest.fixture
def loaded_env(jablko_env_vars: dict[str, str]) -> JablkoEnvironment:
    """Publish the valid environment for the duration of a test."""
    return loader.load_environment()


@pytest_asyncio.fixture
async def fake_core() -> AsyncGenerator[FakeCore, None]:
    """Run a fake Jablko core for one test."""
    core = await start_fake_core()
    try:
        yield core
    finally:
        await core.close()
