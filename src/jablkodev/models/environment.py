"""Jablko module environment record."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MIN_PORT = 1
MAX_PORT = 65535


class JablkoEnvironment(BaseModel):
    """Settings handed to a module by the Jablko core at launch.

    Immutable once created. Build it with `jablkodev.config.load_environment`
    or directly when injecting configuration in tests.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    core_port: int = Field(ge=MIN_PORT, le=MAX_PORT)
    mod_port: int = Field(ge=MIN_PORT, le=MAX_PORT)
    mod_key: str = Field(min_length=1, repr=False)
    mod_config: str = Field(min_length=1)
