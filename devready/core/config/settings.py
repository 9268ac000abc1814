"""
Runtime settings — read from environment variables.

There is no configuration file. Precedence for every setting:
    CLI flag  >  DEVREADY_* env var  >  default
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from devready.adapters.registry import STORE_NAMES
from devready.adapters.stores.environment_file import DEFAULT_ENVIRONMENT_FILE

ENV_PREFIX = "DEVREADY_"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsError(Exception):
    """Raised when environment configuration is invalid."""


class Settings(BaseModel):
    """Resolved runtime settings."""

    log_level: str = "WARNING"
    log_file: str | None = None
    log_file_level: str | None = None
    path_store: str = "auto"
    environment_file: Path = DEFAULT_ENVIRONMENT_FILE

    @field_validator("log_level", "log_file_level")
    @classmethod
    def _known_level(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if v.upper() not in _LEVELS:
            raise ValueError(f"unknown log level '{v}'")
        return v.upper()

    @field_validator("path_store")
    @classmethod
    def _known_store(cls, v: str) -> str:
        if v not in STORE_NAMES:
            raise ValueError(f"unknown PATH store '{v}'. Valid: {', '.join(STORE_NAMES)}")
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``DEVREADY_*`` variables.

        Raises:
            SettingsError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        data: dict[str, str] = {}
        for field in cls.model_fields:
            raw = env.get(ENV_PREFIX + field.upper())
            if raw:
                data[field] = raw

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            errors = "; ".join(
                f"{ENV_PREFIX}{'.'.join(str(p) for p in err['loc']).upper()}: {err['msg']}"
                for err in e.errors()
            )
            raise SettingsError(f"Invalid environment configuration: {errors}") from e
