"""Shared fixtures for unit tests."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

EXTENSION_ENV_VARS = [
    "NEW_RELIC_LICENSE_KEY",
    "NEW_RELIC_LICENSE_KEY_SECRET",
    "NEW_RELIC_EXTENSION_CONFIG",
    "NEW_RELIC_EXTENSION_LOG_LEVEL",
    "NEW_RELIC_EXTENSION_LOG_FORMAT",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Make sure no extension variables leak in from the host shell."""
    for name in EXTENSION_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def secrets_client():
    """Secrets Manager client whose secret does not exist."""
    client = MagicMock()
    client.get_secret_value.side_effect = _client_error(
        "ResourceNotFoundException", "GetSecretValue"
    )
    return client


@pytest.fixture
def ssm_client():
    """SSM client whose parameter does not exist."""
    client = MagicMock()
    client.get_parameter.side_effect = _client_error("ParameterNotFound", "GetParameter")
    return client


