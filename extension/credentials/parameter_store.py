"""AWS SSM Parameter Store license key source."""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from extension.credentials.base import AWSClientSource
from extension.credentials.exceptions import SourceUnavailableError

logger = logging.getLogger(__name__)


class ParameterStoreSource(AWSClientSource):
    """
    Reads the license key from an SSM parameter.

    SecureString parameters are decrypted; the value is returned as is.
    """

    name = "parameter_store"

    def get_license_key(self, secret_id: str) -> str:
        try:
            response = self.client.get_parameter(Name=secret_id, WithDecryption=True)
        except (ClientError, BotoCoreError) as e:
            raise SourceUnavailableError(
                f"Unable to fetch parameter '{secret_id}' from Parameter Store: {e}",
                source=self.name,
            ) from e

        logger.debug(f"Resolved license key from parameter '{secret_id}'")
        return response["Parameter"]["Value"]
