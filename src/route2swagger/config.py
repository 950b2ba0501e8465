"""Converter options and build configuration files."""

from pathlib import Path
from typing import Any, Callable

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from route2swagger.context import Context
from route2swagger.errors import ConfigError
from route2swagger.routing import Request


class ConverterOptions(BaseModel):
    """Knobs of the request migration.

    - request_filter: called with each request; returning False drops it.
    - auto_response: add a ``default`` response to operations without one.
    - auto_description: derive a description from method and path.
    - auto_summary: derive a summary from the description, or method and path.
    - extra_callback: ``(context, method, path) -> dict`` of extra operation properties.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    request_filter: Callable[[Request], bool] | None = None
    auto_response: bool = False
    auto_description: bool = False
    auto_summary: bool = True
    extra_callback: Callable[[Context, str, str], dict[str, Any]] | None = None


class BuildConfig(BaseModel):
    """Defaults for the ``build`` command, read from a YAML file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    file: str | None = None
    path: str | None = None
    namespaces: list[str] | None = None
    auto_response: bool | None = None
    auto_description: bool | None = None
    auto_summary: bool | None = None
    output_format: str | None = Field(default=None, alias="format")


def load_config(file_path: Path) -> BuildConfig:
    """Load a build configuration from YAML."""
    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read {file_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{file_path}: expected a mapping, got {type(data).__name__}")

    try:
        return BuildConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"{file_path}: {e}") from e
