"""Pydantic models describing a declarative route table.

A route table file looks like::

    routes:
      - name: shutdown
        category: message
        guard: {body: {pattern: "^exit"}}
        priority: 10
        halt: true
      - name: first-chat
        category: message
        guard: is_chat
        once: true
      - name: audit
        guard: null
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from guarded_handlers.config.loader import load_mapping_file
from guarded_handlers.core.exceptions import ConfigurationError


class RouteSpec(BaseModel):
    """One route: a named handler with its category, guard and options."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, description="Label reported when the route fires.")
    category: Optional[str] = Field(
        default=None,
        description="Event category; omitted routes see every category.",
    )
    guard: Any = Field(default=None, description="Guard in route-file notation.")
    priority: int = Field(default=0, description="Higher priorities run earlier.")
    once: bool = Field(default=False, description="Remove the route after it fires.")
    halt: Optional[bool] = Field(
        default=None,
        description="Stop the dispatch after this route fires; defaults to the settings value.",
    )

    @model_validator(mode="after")
    def _one_shot_uses_default_priority(self) -> "RouteSpec":
        if self.once and self.priority != 0:
            raise ValueError("one-shot routes cannot set a priority")
        return self

    def halts(self, default: bool) -> bool:
        """Return whether firing this route halts, falling back to ``default``."""

        return default if self.halt is None else self.halt


class RouteTable(BaseModel):
    """Ordered collection of routes; file order is registration order."""

    model_config = ConfigDict(extra="forbid")

    routes: List[RouteSpec] = Field(default_factory=list)

    @field_validator("routes")
    @classmethod
    def _unique_names(cls, routes: List[RouteSpec]) -> List[RouteSpec]:
        seen: set[str] = set()
        for route in routes:
            if route.name in seen:
                raise ValueError(f"duplicate route name '{route.name}'")
            seen.add(route.name)
        return routes

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "RouteTable":
        """Load and validate a YAML or JSON route table.

        Raises:
            ConfigurationError: Raised when the file cannot be read or does not
                describe a valid table.
        """

        data = load_mapping_file(path)
        try:
            return cls.model_validate(data)
        except ValidationError as error:
            raise ConfigurationError(f"Invalid route table {path}: {error}", config_key=str(path)) from error


__all__ = ["RouteSpec", "RouteTable"]
