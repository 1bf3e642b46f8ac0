"""Mock implementations for testing."""

from tests.jablkodev.mocks.core import FakeCore, SeenRequest, start_fake_core

__all__ = [
    "FakeCore",
    "SeenRequest",
    "start_fake_core",
]
