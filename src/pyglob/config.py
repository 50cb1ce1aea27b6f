"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from pyglob.errors import ConfigError, ConfigNotFoundError
from pyglob.types import MemoStrategy

__all__ = ["Config", "MatchSettings"]

_logger = logging.getLogger("pyglob.config")


class MatchSettings(BaseModel):
    """Validated settings for a :class:`~pyglob.matcher.Matcher`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    preprocess: bool = False
    memo: MemoStrategy = MemoStrategy.SPARSE


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            A new Config holding the parsed mapping.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or is not a mapping.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        # An empty file parses to None.
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config must be a mapping, got {type(data).__name__}"
            )

        _logger.debug(f"Loaded configuration from {yaml_path}")
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def match_settings(self) -> MatchSettings:
        """Validate the ``matching`` section into MatchSettings.

        Raises:
            ConfigError: If the section is not a mapping or fails validation.
        """
        section = self.get("matching", {})
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ConfigError(
                f"'matching' must be a mapping, got {type(section).__name__}"
            )
        try:
            return MatchSettings(**section)
        except ValidationError as e:
            errors = [
                {
                    "field": ".".join(str(loc) for loc in err["loc"]),
                    "message": err["msg"],
                }
                for err in e.errors()
            ]
            raise ConfigError(
                f"Invalid 'matching' settings: {e.error_count()} error(s)",
                details={"errors": errors},
                cause=e,
            ) from e
