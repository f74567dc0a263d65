"""License key credentials module."""

# Public API
from extension.credentials.resolver import LicenseKeyResolver, DEFAULT_SECRET_ID
from extension.credentials.base import LicenseKeyResolution
from extension.credentials.exceptions import (
    CredentialError,
    MalformedSecretError,
    SourceUnavailableError,
)

__all__ = [
    "LicenseKeyResolver",
    "LicenseKeyResolution",
    "DEFAULT_SECRET_ID",
    "CredentialError",
    "MalformedSecretError",
    "SourceUnavailableError",
]
