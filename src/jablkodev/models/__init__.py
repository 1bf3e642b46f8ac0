"""Data models."""

from jablkodev.models.environment import MAX_PORT, MIN_PORT, JablkoEnvironment

__all__ = [
    "MAX_PORT",
    "MIN_PORT",
    "JablkoEnvironment",
]
