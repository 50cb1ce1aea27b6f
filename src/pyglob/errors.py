"""Error hierarchy for the pyglob package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "PyglobError",
    "ConfigNotFoundError",
    "ConfigError",
    "InvalidInputError",
    "ErrorCodes",
]


class PyglobError(Exception):
    """Base error for all pyglob errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(PyglobError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        """The path that was looked up."""
        return self.details["config_path"]


class ConfigError(PyglobError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class InvalidInputError(PyglobError):
    """Raised when a text or pattern argument is not a string."""

    def __init__(self, argument: str, value: Any, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_INPUT",
            message=f"'{argument}' must be a str, got {type(value).__name__}",
            details={"argument": argument, "type": type(value).__name__},
            **kwargs,
        )

    @property
    def argument(self) -> str:
        """Name of the offending argument."""
        return self.details["argument"]


class ErrorCodes:
    """All pyglob error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_INVALID:
            fall_back_to_defaults()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    INVALID_INPUT = "INVALID_INPUT"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
