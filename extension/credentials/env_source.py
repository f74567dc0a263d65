"""Environment variable license key source."""

import os
import logging

from extension.credentials.base import LicenseKeySource
from extension.credentials.exceptions import SourceUnavailableError

logger = logging.getLogger(__name__)

LICENSE_KEY_ENV_VAR = "NEW_RELIC_LICENSE_KEY"


class EnvironmentSource(LicenseKeySource):
    """
    Reads the license key from a fixed environment variable.

    The variable name does not follow the configured secret id. Presence is
    the only check, so an empty value is returned as is.
    """

    name = "environment"

    def __init__(self, env_var: str = LICENSE_KEY_ENV_VAR):
        self.env_var = env_var

    def get_license_key(self, secret_id: str) -> str:
        if self.env_var not in os.environ:
            raise SourceUnavailableError(
                f"Environment variable {self.env_var} is not set", source=self.name
            )

        logger.debug(f"Resolved license key from env var '{self.env_var}'")
        return os.environ[self.env_var]
