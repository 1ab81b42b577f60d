"""Runtime configuration.

Settings come from four layers, later layers winning:

1. Built-in defaults (``todos.json`` in the working directory, deletes
   require completion).
2. ``TODO_FILE`` / ``TODO_DELETE_POLICY`` environment variables.
3. An optional YAML config file::

       file: ~/notes/todos.json
       delete_policy: confirm

4. Explicit values, which the CLI fills from its options.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from todolist.errors import ConfigError
from todolist.operations.service import DeletePolicy
from todolist.storage.backends import DEFAULT_PATH

logger = logging.getLogger(__name__)


class TodoConfig(BaseSettings):
    """Resolved settings for one invocation."""

    model_config = SettingsConfigDict(env_prefix="TODO_", extra="forbid", frozen=True)

    file: Path = DEFAULT_PATH
    delete_policy: DeletePolicy = DeletePolicy.REQUIRE_COMPLETED

    @field_validator("file", mode="before")
    @classmethod
    def expand_file(cls, value: Any) -> Path:
        if not isinstance(value, (str, Path)):
            raise ValueError("'file' must be a string")
        try:
            return Path(value).expanduser()
        except RuntimeError as exc:
            raise ValueError(f"cannot expand {str(value)!r}: {exc}") from exc

    @field_validator("delete_policy", mode="before")
    @classmethod
    def normalize_policy(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


def _read_config_file(config_file: Path) -> dict[str, Any]:
    try:
        text = config_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file: {exc}", config_file) from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}", config_file) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("config file must contain a mapping", config_file)
    return {str(key): value for key, value in data.items()}


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def load_config(
    config_file: Path | str | None = None,
    *,
    path: Path | str | None = None,
    delete_policy: str | DeletePolicy | None = None,
) -> TodoConfig:
    """Resolve a ``TodoConfig`` from defaults, environment, a config file
    and overrides.

    Parameters
    ----------
    config_file:
        Optional YAML file.  It must exist when given.
    path:
        Todo file location; overrides the config file.
    delete_policy:
        Delete policy name or value; overrides the config file.

    Raises
    ------
    ConfigError
        If the config file is unreadable, is not a mapping, has unknown
        keys, or any value is invalid.
    """
    values: dict[str, Any] = {}
    if config_file is not None:
        config_file = Path(config_file)
        values.update(_read_config_file(config_file))
        logger.debug("Loaded config file %s", config_file)

    if path is not None:
        values["file"] = path
    if delete_policy is not None:
        values["delete_policy"] = delete_policy

    try:
        config = TodoConfig(**values)
    except ValidationError as exc:
        raise ConfigError(_describe(exc), config_file) from None

    logger.debug("Resolved config: %r", config)
    return config
