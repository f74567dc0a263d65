"""License key resolver - tries each credential source in priority order."""

import logging
from typing import Any, Optional

import boto3

from extension.config.configuration import Configuration
from extension.credentials.base import LicenseKeyResolution
from extension.credentials.env_source import EnvironmentSource
from extension.credentials.exceptions import SourceUnavailableError
from extension.credentials.parameter_store import ParameterStoreSource
from extension.credentials.secrets_manager import SecretsManagerSource
from monitoring import Metrics, track_time

logger = logging.getLogger(__name__)

DEFAULT_SECRET_ID = "NEW_RELIC_LICENSE_KEY"
CONFIGURATION_SOURCE = "configuration"


class LicenseKeyResolver:
    """
    Resolves the New Relic license key.

    Order (first success wins):
        1. Literal license key in configuration (no network calls)
        2. AWS Secrets Manager secret
        3. AWS SSM parameter with the same name, decrypted
        4. NEW_RELIC_LICENSE_KEY environment variable

    When every source fails, the Secrets Manager error is raised.

    Usage:
        resolver = LicenseKeyResolver.from_session()
        license_key = resolver.resolve(conf)
    """

    def __init__(
        self,
        secrets_client: Any = None,
        ssm_client: Any = None,
        environment: Optional[EnvironmentSource] = None,
    ):
        self.secrets = SecretsManagerSource(secrets_client)
        self.parameters = ParameterStoreSource(ssm_client)
        self.environment = environment or EnvironmentSource()

    @classmethod
    def from_session(
        cls, session: Optional[boto3.Session] = None, region_name: Optional[str] = None
    ) -> "LicenseKeyResolver":
        """
        Build a resolver with boto3 clients from the shared AWS config.

        Clients are created on first lookup, so a literal license key
        resolves even where no AWS region is configured.
        """
        session = session or boto3.Session()
        resolver = cls()
        resolver.secrets = SecretsManagerSource(
            client_factory=lambda: session.client("secretsmanager", region_name=region_name)
        )
        resolver.parameters = ParameterStoreSource(
            client_factory=lambda: session.client("ssm", region_name=region_name)
        )
        return resolver

    def override_secrets_manager(self, client: Any) -> None:
        """Replace the Secrets Manager client."""
        self.secrets = SecretsManagerSource(client)

    def override_parameter_store(self, client: Any) -> None:
        """Replace the SSM client."""
        self.parameters = ParameterStoreSource(client)

    def license_key_secret_id(self, conf: Configuration) -> str:
        return conf.license_key_secret_id or DEFAULT_SECRET_ID

    def license_key_parameter_name(self, conf: Configuration) -> str:
        # Same identifier as the secret lookup
        return self.license_key_secret_id(conf)

    def is_secret_configured(self, conf: Configuration) -> bool:
        """
        Check whether the Secrets Manager secret exists.

        Performs the same lookup as resolve() but ignores the payload.
        """
        return self.secrets.secret_exists(self.license_key_secret_id(conf))

    def resolve(self, conf: Configuration) -> str:
        """
        Resolve the license key.

        Args:
            conf: Extension configuration (never modified)

        Returns:
            The license key from the first source that has one

        Raises:
            SourceUnavailableError: The Secrets Manager failure, when no
                source produced a value
        """
        return self.resolve_detailed(conf).license_key

    def resolve_detailed(self, conf: Configuration) -> LicenseKeyResolution:
        """Resolve the license key and report which source produced it."""
        if conf.license_key:
            logger.info("Using license key from configuration")
            Metrics.resolution(CONFIGURATION_SOURCE)
            return LicenseKeyResolution(
                source=CONFIGURATION_SOURCE, license_key=conf.license_key
            )

        secret_id = self.license_key_secret_id(conf)
        if conf.license_key_secret_id:
            logger.info(f"Fetching license key from secret id {secret_id}")
        first_error: Optional[SourceUnavailableError] = None

        lookups = [
            (self.secrets, secret_id),
            (self.parameters, self.license_key_parameter_name(conf)),
            (self.environment, secret_id),
        ]
        for source, identifier in lookups:
            try:
                with track_time() as elapsed:
                    license_key = source.get_license_key(identifier)
            except SourceUnavailableError as e:
                Metrics.lookup_error(source.name, latency=elapsed["duration"])
                logger.debug(f"No license key from {source.name}: {e}")
                if first_error is None:
                    first_error = e
                continue

            Metrics.lookup_success(source.name, latency=elapsed["duration"])
            Metrics.resolution(source.name)
            logger.debug(f"Using license key from {source.name}")
            return LicenseKeyResolution(source=source.name, license_key=license_key)

        Metrics.resolution("exhausted")
        logger.warning(f"License key not found in any source: {first_error}")
        raise first_error
