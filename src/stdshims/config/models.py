"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, stdshims.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProgressConfig(BaseModel):
    """[progress] section."""

    model_config = {"frozen": True}

    step: int = Field(default=10, ge=1)
    interval: float = Field(default=0.5, ge=0.0)


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    json_output: bool = False
