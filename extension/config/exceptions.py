"""Configuration-related exceptions."""

from typing import Optional


class ConfigError(Exception):
    """Base exception for extension config errors."""

    pass


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly named config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid YAML."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when a config value has the wrong type or an unknown value."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
