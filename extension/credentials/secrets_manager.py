"""AWS Secrets Manager license key source."""

import json
import logging
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from extension.credentials.base import AWSClientSource
from extension.credentials.exceptions import (
    MalformedSecretError,
    SourceUnavailableError,
)

logger = logging.getLogger(__name__)

LICENSE_KEY_ATTRIBUTE = "LicenseKey"


def decode_license_key(raw_json: Optional[str]) -> str:
    """
    Extract the license key from a secret record.

    Record format:
        {"LicenseKey": "0123456789abcdef"}

    The attribute name is matched exactly first, then case-insensitively.

    Args:
        raw_json: The secret's SecretString

    Returns:
        The license key

    Raises:
        MalformedSecretError: If the record is not JSON or the attribute is
            missing, empty or not a string
    """
    if raw_json is None:
        raise MalformedSecretError(
            "malformed license key secret; secret has no string value",
            source=SecretsManagerSource.name,
        )

    try:
        record = json.loads(raw_json)
    except json.JSONDecodeError as e:
        raise MalformedSecretError(
            f"malformed license key secret; invalid JSON: {e}",
            source=SecretsManagerSource.name,
        ) from e

    license_key = None
    if isinstance(record, dict):
        if LICENSE_KEY_ATTRIBUTE in record:
            license_key = record[LICENSE_KEY_ATTRIBUTE]
        else:
            for key, value in record.items():
                if key.lower() == LICENSE_KEY_ATTRIBUTE.lower():
                    license_key = value
                    break

    if not isinstance(license_key, str) or not license_key:
        raise MalformedSecretError(
            f'malformed license key secret; missing "{LICENSE_KEY_ATTRIBUTE}" attribute',
            source=SecretsManagerSource.name,
        )

    return license_key


class SecretsManagerSource(AWSClientSource):
    """
    Reads the license key from an AWS Secrets Manager secret.

    Any client failure (not found, access denied, throttling, network) is
    reported as SourceUnavailableError.
    """

    name = "secrets_manager"

    def _get_secret_value(self, secret_id: str) -> dict:
        try:
            return self.client.get_secret_value(SecretId=secret_id)
        except (ClientError, BotoCoreError) as e:
            raise SourceUnavailableError(
                f"Unable to fetch secret '{secret_id}' from Secrets Manager: {e}",
                source=self.name,
            ) from e

    def get_license_key(self, secret_id: str) -> str:
        response = self._get_secret_value(secret_id)
        license_key = decode_license_key(response.get("SecretString"))
        logger.debug(f"Resolved license key from secret '{secret_id}'")
        return license_key

    def secret_exists(self, secret_id: str) -> bool:
        """Check whether the secret can be fetched, ignoring its contents."""
        try:
            self._get_secret_value(secret_id)
        except SourceUnavailableError as e:
            logger.debug(str(e))
            return False
        return True
