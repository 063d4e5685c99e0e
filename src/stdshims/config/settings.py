"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — overrides passed to :meth:`ShimSettings.load`
  2. Env vars     — ``STDSHIMS_*`` prefix
  3. TOML file    — ``stdshims.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`stdshims.config.discovery`.
"""

from __future__ import annotations

import functools
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from stdshims.config.discovery import find_config
from stdshims.config.models import LoggingConfig, ProgressConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``stdshims.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise ValueError(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ShimSettings(BaseSettings):
    """Library-wide defaults.

    Attributes:
        config_path: TOML file the settings were read from, if any.
        progress: Defaults for the progress decimation wrappers.
        logging: Defaults for :func:`stdshims.config.logging.configure_logging`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "STDSHIMS_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    progress: ProgressConfig = Field(default_factory=ProgressConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> ShimSettings:
        """Construct settings, discovering ``stdshims.toml`` if needed.

        An explicit *config_path* wins over walk-up discovery from *start*
        (default: cwd). *overrides* are applied with the highest priority.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None


@functools.lru_cache(maxsize=1)
def get_settings() -> ShimSettings:
    """Return the process-wide settings, loading them on first use."""
    return ShimSettings.load()


def reset_settings() -> None:
    """Drop the cached settings so the next :func:`get_settings` reloads."""
    get_settings.cache_clear()
