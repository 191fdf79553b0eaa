"""Runtime settings for guarded handler tooling.

Settings are read from ``GUARDED_HANDLERS_*`` environment variables and
validated with pydantic. The dispatch engine itself needs no configuration;
the settings drive logging and the declarative router used by the CLI.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from guarded_handlers.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "GUARDED_HANDLERS_"

_VALID_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    """Validated settings model."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    log_level: str = Field(default="INFO", description="Root log level for CLI runs.")
    category_field: str = Field(
        default="category",
        min_length=1,
        description="Event key holding the category when routing JSON events.",
    )
    routes_path: Optional[str] = Field(
        default=None,
        description="Default route table consulted when none is given on the command line.",
    )
    halt_on_first_match: bool = Field(
        default=False,
        description="Default ``halt`` flag for routes that do not set one.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level == "WARN":
            level = "WARNING"
        if level not in _VALID_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_VALID_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``GUARDED_HANDLERS_*`` variables.

        Raises:
            ConfigurationError: Raised when a variable holds an invalid value.
        """

        environ = os.environ if environ is None else environ
        values = {
            name: environ[f"{ENV_PREFIX}{name.upper()}"]
            for name in ("log_level", "category_field", "halt_on_first_match")
            if f"{ENV_PREFIX}{name.upper()}" in environ
        }
        if f"{ENV_PREFIX}ROUTES" in environ:
            values["routes_path"] = environ[f"{ENV_PREFIX}ROUTES"]

        try:
            settings = cls(**values)
        except ValidationError as error:
            raise ConfigurationError(f"Invalid settings in environment: {error}", config_key=ENV_PREFIX) from error

        logger.debug("Loaded settings from environment: %s", settings.model_dump())
        return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""

    return Settings.from_env()


__all__ = ["ENV_PREFIX", "Settings", "get_settings"]
