"""Configuration loader - merges defaults, YAML file and environment."""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

import yaml

from extension.config.configuration import Configuration
from extension.config.exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from extension.config.merger import deep_merge

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV_VAR = "NEW_RELIC_EXTENSION_CONFIG"

DEFAULTS = {
    "license_key": None,
    "license_key_secret_id": None,
    "logging": {"level": "INFO", "format": "standard"},
    "aws": {"region": None},
}

# Later entries win when several are set (AWS_REGION over AWS_DEFAULT_REGION)
ENV_MAPPING = [
    ("NEW_RELIC_LICENSE_KEY", ("license_key",)),
    ("NEW_RELIC_LICENSE_KEY_SECRET", ("license_key_secret_id",)),
    ("NEW_RELIC_EXTENSION_LOG_LEVEL", ("logging", "level")),
    ("NEW_RELIC_EXTENSION_LOG_FORMAT", ("logging", "format")),
    ("AWS_DEFAULT_REGION", ("aws", "region")),
    ("AWS_REGION", ("aws", "region")),
]

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_FORMATS = {"standard", "json"}


class ConfigLoader:
    """
    Builds the extension Configuration from several layers.

    Load order (later wins):
        1. Built-in defaults
        2. YAML file (explicit path, or NEW_RELIC_EXTENSION_CONFIG)
        3. Environment variables

    Usage:
        loader = ConfigLoader(config_file="extension.yaml")
        conf = loader.load()
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.environ = os.environ if environ is None else environ
        path = config_file or self.environ.get(CONFIG_FILE_ENV_VAR)
        self.config_file = Path(path) if path else None

    def _load_yaml(self, path: Path) -> dict:
        """Load and parse a YAML file."""
        if not path.exists():
            raise ConfigNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigParseError(f"Invalid YAML in {path}: {e}")

        if not isinstance(content, dict):
            raise ConfigValidationError(f"Config file must contain a mapping: {path}")

        logger.debug(f"Loaded config: {path}")
        return content

    def _load_environment(self) -> dict:
        """Collect overrides from environment variables."""
        overrides: dict = {}
        for env_var, path in ENV_MAPPING:
            if env_var not in self.environ:
                continue
            target = overrides
            for part in path[:-1]:
                target = target.setdefault(part, {})
            target[path[-1]] = self.environ[env_var]
        return overrides

    def load(self) -> Configuration:
        """
        Load the merged configuration.

        Returns:
            Frozen Configuration

        Raises:
            ConfigNotFoundError: If the config file is missing
            ConfigParseError: If the config file is not valid YAML
            ConfigValidationError: If a value has the wrong type
        """
        file_layer = {}
        if self.config_file:
            file_layer = self._load_yaml(self.config_file)
            logger.info(f"Merged config file: {self.config_file}")

        raw = deep_merge(DEFAULTS, file_layer, self._load_environment())

        return self._build(raw)

    def _build(self, raw: dict) -> Configuration:
        logging_section = raw.get("logging") or {}
        aws_section = raw.get("aws") or {}
        if not isinstance(logging_section, dict) or not isinstance(aws_section, dict):
            raise ConfigValidationError("'logging' and 'aws' must be mappings")

        license_key = _optional_str(raw.get("license_key"), "license_key")
        secret_id = _optional_str(
            raw.get("license_key_secret_id"), "license_key_secret_id"
        )

        level = str(logging_section.get("level", "INFO")).upper()
        if level not in LOG_LEVELS:
            raise ConfigValidationError(f"Invalid log level: {level}", field="logging.level")

        log_format = str(logging_section.get("format", "standard")).lower()
        if log_format not in LOG_FORMATS:
            raise ConfigValidationError(f"Invalid log format: {log_format}", field="logging.format")

        return Configuration(
            license_key=license_key,
            license_key_secret_id=secret_id,
            log_level=level,
            log_format=log_format,
            aws_region=_optional_str(aws_section.get("region"), "aws.region"),
        )


def _optional_str(value, field: str) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise ConfigValidationError(
        f"'{field}' must be a string, got {type(value).__name__}", field=field
    )
